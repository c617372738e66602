from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse

from vinos_wms.api.v1.dependencies.use_case_deps import (
    get_current_user,
    get_report_use_cases,
    get_salida_use_cases,
)
from vinos_wms.application.dto.warehouse_dto import SalidaCreateDTO, SalidaResponseDTO, SalidaUpdateDTO
from vinos_wms.application.use_cases import ReportUseCases, SalidaUseCases
from vinos_wms.domain.entities import User

router = APIRouter(prefix="/salidas", tags=["Salidas"])


@router.get("/", response_model=List[SalidaResponseDTO])
async def list_salidas(
    _: User = Depends(get_current_user),
    use_cases: SalidaUseCases = Depends(get_salida_use_cases),
):
    return use_cases.list_salidas()


@router.get("/{salida_id}", response_model=SalidaResponseDTO)
async def get_salida(
    salida_id: str,
    _: User = Depends(get_current_user),
    use_cases: SalidaUseCases = Depends(get_salida_use_cases),
):
    return use_cases.get_salida(salida_id)


@router.get("/{salida_id}/cmr", response_class=HTMLResponse)
async def get_cmr(
    salida_id: str,
    _: User = Depends(get_current_user),
    reports: ReportUseCases = Depends(get_report_use_cases),
):
    """Carta de porte CMR lista para imprimir."""
    return HTMLResponse(reports.cmr(salida_id))


@router.post("/", response_model=SalidaResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_salida(
    dto: SalidaCreateDTO,
    user: User = Depends(get_current_user),
    use_cases: SalidaUseCases = Depends(get_salida_use_cases),
):
    return await use_cases.create_salida(dto, user)


@router.put("/{salida_id}", response_model=SalidaResponseDTO)
async def update_salida(
    salida_id: str,
    dto: SalidaUpdateDTO,
    user: User = Depends(get_current_user),
    use_cases: SalidaUseCases = Depends(get_salida_use_cases),
):
    return await use_cases.update_salida(salida_id, dto, user)


@router.delete("/{salida_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_salida(
    salida_id: str,
    user: User = Depends(get_current_user),
    use_cases: SalidaUseCases = Depends(get_salida_use_cases),
):
    await use_cases.delete_salida(salida_id, user)
