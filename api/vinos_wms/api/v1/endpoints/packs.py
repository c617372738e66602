from typing import List

from fastapi import APIRouter, Depends, status

from vinos_wms.api.v1.dependencies.use_case_deps import get_current_user, get_pack_use_cases
from vinos_wms.application.dto.warehouse_dto import PackCreateDTO, PackResponseDTO, PackUpdateDTO
from vinos_wms.application.use_cases import PackUseCases
from vinos_wms.domain.entities import User

router = APIRouter(prefix="/packs", tags=["Packs"])


@router.get("/", response_model=List[PackResponseDTO])
async def list_packs(
    _: User = Depends(get_current_user),
    use_cases: PackUseCases = Depends(get_pack_use_cases),
):
    return use_cases.list_packs()


@router.get("/{pack_id}", response_model=PackResponseDTO)
async def get_pack(
    pack_id: str,
    _: User = Depends(get_current_user),
    use_cases: PackUseCases = Depends(get_pack_use_cases),
):
    return use_cases.get_pack(pack_id)


@router.post("/", response_model=PackResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_pack(
    dto: PackCreateDTO,
    user: User = Depends(get_current_user),
    use_cases: PackUseCases = Depends(get_pack_use_cases),
):
    """
    Crear un pack con sus líneas.
    Cabecera y líneas se guardan juntas o no se guarda nada.
    """
    return await use_cases.create_pack(dto, user)


@router.put("/{pack_id}", response_model=PackResponseDTO)
async def update_pack(
    pack_id: str,
    dto: PackUpdateDTO,
    user: User = Depends(get_current_user),
    use_cases: PackUseCases = Depends(get_pack_use_cases),
):
    return await use_cases.update_pack(pack_id, dto, user)


@router.delete("/{pack_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pack(
    pack_id: str,
    user: User = Depends(get_current_user),
    use_cases: PackUseCases = Depends(get_pack_use_cases),
):
    await use_cases.delete_pack(pack_id, user)
