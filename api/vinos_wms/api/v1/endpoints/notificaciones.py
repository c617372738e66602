from typing import List

from fastapi import APIRouter, Depends, status

from vinos_wms.api.v1.dependencies.use_case_deps import get_report_use_cases
from vinos_wms.application.dto.system_dto import NotificationDTO
from vinos_wms.application.use_cases import ReportUseCases
from vinos_wms.shared.exceptions.domain import EntityNotFoundException

router = APIRouter(prefix="/notificaciones", tags=["Notificaciones"])


@router.get("/", response_model=List[NotificationDTO])
async def list_notifications(use_cases: ReportUseCases = Depends(get_report_use_cases)):
    """Notificaciones todavía visibles (las caducadas ya no aparecen)."""
    return use_cases.notifications_visible()


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def dismiss_notification(notification_id: int, use_cases: ReportUseCases = Depends(get_report_use_cases)):
    if not use_cases.dismiss_notification(notification_id):
        raise EntityNotFoundException("Notificación", notification_id)
