from typing import List

from fastapi import APIRouter, Depends

from vinos_wms.api.v1.dependencies.use_case_deps import get_current_user, get_product_use_cases
from vinos_wms.application.dto.warehouse_dto import ProductDTO
from vinos_wms.application.use_cases import ProductUseCases
from vinos_wms.domain.entities import User

router = APIRouter(prefix="/productos", tags=["Productos"])


@router.get("/", response_model=List[ProductDTO])
async def list_products(
    _: User = Depends(get_current_user),
    use_cases: ProductUseCases = Depends(get_product_use_cases),
):
    return use_cases.list_products()


@router.put("/", response_model=ProductDTO)
async def upsert_product(
    dto: ProductDTO,
    user: User = Depends(get_current_user),
    use_cases: ProductUseCases = Depends(get_product_use_cases),
):
    """Alta o modificación de un producto por su id."""
    return await use_cases.upsert_product(dto, user)
