from fastapi import APIRouter, Depends

from vinos_wms.api.v1.dependencies.use_case_deps import get_current_user, get_report_use_cases
from vinos_wms.application.dto.warehouse_dto import StockOverviewDTO
from vinos_wms.application.use_cases import ReportUseCases
from vinos_wms.domain.entities import User

router = APIRouter(prefix="/stock", tags=["Stock"])


@router.get("/", response_model=StockOverviewDTO)
async def get_stock(
    _: User = Depends(get_current_user),
    use_cases: ReportUseCases = Depends(get_report_use_cases),
):
    """Palets y packs en almacén."""
    return use_cases.stock_overview()
