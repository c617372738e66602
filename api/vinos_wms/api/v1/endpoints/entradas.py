from typing import List

from fastapi import APIRouter, Depends, status

from vinos_wms.api.v1.dependencies.use_case_deps import get_current_user, get_entrada_use_cases
from vinos_wms.application.dto.warehouse_dto import EntradaCreateDTO, EntradaResponseDTO, EntradaUpdateDTO
from vinos_wms.application.use_cases import EntradaUseCases
from vinos_wms.domain.entities import User

router = APIRouter(prefix="/entradas", tags=["Entradas"])


@router.get("/", response_model=List[EntradaResponseDTO])
async def list_entradas(
    _: User = Depends(get_current_user),
    use_cases: EntradaUseCases = Depends(get_entrada_use_cases),
):
    """Entradas con sus palets, la más reciente primero."""
    return use_cases.list_entradas()


@router.get("/{entrada_id}", response_model=EntradaResponseDTO)
async def get_entrada(
    entrada_id: str,
    _: User = Depends(get_current_user),
    use_cases: EntradaUseCases = Depends(get_entrada_use_cases),
):
    return use_cases.get_entrada(entrada_id)


@router.post("/", response_model=EntradaResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_entrada(
    dto: EntradaCreateDTO,
    user: User = Depends(get_current_user),
    use_cases: EntradaUseCases = Depends(get_entrada_use_cases),
):
    return await use_cases.create_entrada(dto, user)


@router.put("/{entrada_id}", response_model=EntradaResponseDTO)
async def update_entrada(
    entrada_id: str,
    dto: EntradaUpdateDTO,
    user: User = Depends(get_current_user),
    use_cases: EntradaUseCases = Depends(get_entrada_use_cases),
):
    return await use_cases.update_entrada(entrada_id, dto, user)


@router.delete("/{entrada_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entrada(
    entrada_id: str,
    user: User = Depends(get_current_user),
    use_cases: EntradaUseCases = Depends(get_entrada_use_cases),
):
    await use_cases.delete_entrada(entrada_id, user)
