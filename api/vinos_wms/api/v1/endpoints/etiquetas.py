from typing import List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from vinos_wms.api.v1.dependencies.use_case_deps import get_current_user, get_report_use_cases
from vinos_wms.application.dto.system_dto import GenericLabelRequestDTO, LabelSearchResultDTO
from vinos_wms.application.use_cases import ReportUseCases
from vinos_wms.domain.entities import User

router = APIRouter(prefix="/etiquetas", tags=["Etiquetas"])


@router.get("/buscar", response_model=List[LabelSearchResultDTO])
async def search_labels(
    q: str = Query(..., min_length=1, description="ID de pack, pedido, producto o ID de palet"),
    _: User = Depends(get_current_user),
    use_cases: ReportUseCases = Depends(get_report_use_cases),
):
    return use_cases.search_labels(q)


@router.post("/generica", response_class=HTMLResponse)
async def generic_label(
    dto: GenericLabelRequestDTO,
    _: User = Depends(get_current_user),
    use_cases: ReportUseCases = Depends(get_report_use_cases),
):
    """Etiqueta libre con título, dos líneas y un código QR."""
    return HTMLResponse(use_cases.generic_label(dto))


@router.get("/{tipo}/{entity_id}", response_class=HTMLResponse)
async def reprint_label(
    tipo: str,
    entity_id: str,
    _: User = Depends(get_current_user),
    use_cases: ReportUseCases = Depends(get_report_use_cases),
):
    """Reimpresión de la etiqueta de un pack o de un palet."""
    return HTMLResponse(use_cases.label_reprint(tipo, entity_id))
