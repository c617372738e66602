from typing import List

from fastapi import APIRouter, Depends, status

from vinos_wms.api.v1.dependencies.use_case_deps import get_current_user, get_incidencia_use_cases
from vinos_wms.application.dto.warehouse_dto import (
    IncidenciaCreateDTO,
    IncidenciaResponseDTO,
    IncidenciaUpdateDTO,
)
from vinos_wms.application.use_cases import IncidenciaUseCases
from vinos_wms.domain.entities import User

router = APIRouter(prefix="/incidencias", tags=["Incidencias"])


@router.get("/", response_model=List[IncidenciaResponseDTO])
async def list_incidencias(
    _: User = Depends(get_current_user),
    use_cases: IncidenciaUseCases = Depends(get_incidencia_use_cases),
):
    return use_cases.list_incidencias()


@router.post("/", response_model=IncidenciaResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_incidencia(
    dto: IncidenciaCreateDTO,
    user: User = Depends(get_current_user),
    use_cases: IncidenciaUseCases = Depends(get_incidencia_use_cases),
):
    """Reportar una incidencia a nombre del usuario de la sesión."""
    return await use_cases.create_incidencia(dto, user)


@router.put("/{incidencia_id}", response_model=IncidenciaResponseDTO)
async def update_incidencia(
    incidencia_id: str,
    dto: IncidenciaUpdateDTO,
    user: User = Depends(get_current_user),
    use_cases: IncidenciaUseCases = Depends(get_incidencia_use_cases),
):
    return await use_cases.update_incidencia(incidencia_id, dto, user)


@router.delete("/{incidencia_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_incidencia(
    incidencia_id: str,
    user: User = Depends(get_current_user),
    use_cases: IncidenciaUseCases = Depends(get_incidencia_use_cases),
):
    await use_cases.delete_incidencia(incidencia_id, user)
