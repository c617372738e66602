"""
Endpoints de reportes.

formato=csv devuelve un archivo descargable; formato=html devuelve el
documento listo para imprimir.
"""
from datetime import date
from enum import Enum
from typing import Literal, Optional, Union

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import HTMLResponse

from vinos_wms.api.v1.dependencies.use_case_deps import get_current_user, get_report_use_cases
from vinos_wms.application.dto.system_dto import DashboardStatsDTO
from vinos_wms.application.services.report_builder import CsvReport
from vinos_wms.application.use_cases import ReportUseCases
from vinos_wms.domain.entities import User
from vinos_wms.shared.constants.warehouse_constants import ALL_STATUSES, IncidentStatus

router = APIRouter(prefix="/reportes", tags=["Reportes"])


class ReportFormat(str, Enum):
    CSV = "csv"
    HTML = "html"


IncidentFilter = Union[IncidentStatus, Literal["Todas"]]


def _csv_response(report: CsvReport) -> Response:
    return Response(
        content=report.content,
        media_type=report.media_type,
        headers={"Content-Disposition": f'attachment; filename="{report.filename}"'},
    )


@router.get("/inventario")
async def inventory_report(
    formato: ReportFormat = ReportFormat.CSV,
    _: User = Depends(get_current_user),
    use_cases: ReportUseCases = Depends(get_report_use_cases),
):
    if formato == ReportFormat.HTML:
        return HTMLResponse(use_cases.inventory_html())
    return _csv_response(use_cases.inventory_csv())


@router.get("/movimientos")
async def movements_report(
    start_date: Optional[date] = Query(None, description="Fecha inicial (incluida)"),
    end_date: Optional[date] = Query(None, description="Fecha final (incluida completa)"),
    formato: ReportFormat = ReportFormat.CSV,
    _: User = Depends(get_current_user),
    use_cases: ReportUseCases = Depends(get_report_use_cases),
):
    if formato == ReportFormat.HTML:
        return HTMLResponse(use_cases.movements_html(start_date, end_date))
    return _csv_response(use_cases.movements_csv(start_date, end_date))


@router.get("/incidencias")
async def incidents_report(
    estado: IncidentFilter = Query(ALL_STATUSES, description="Estado de la incidencia o 'Todas'"),
    formato: ReportFormat = ReportFormat.CSV,
    _: User = Depends(get_current_user),
    use_cases: ReportUseCases = Depends(get_report_use_cases),
):
    status = estado.value if isinstance(estado, IncidentStatus) else estado
    if formato == ReportFormat.HTML:
        return HTMLResponse(use_cases.incidents_html(status))
    return _csv_response(use_cases.incidents_csv(status))


@router.get("/estadisticas", response_model=DashboardStatsDTO)
async def dashboard_stats(
    _: User = Depends(get_current_user),
    use_cases: ReportUseCases = Depends(get_report_use_cases),
):
    """Stock disponible por producto e incidencias por estado."""
    return use_cases.dashboard_stats()
