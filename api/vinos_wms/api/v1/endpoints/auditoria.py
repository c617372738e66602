from typing import List

from fastapi import APIRouter, Depends

from vinos_wms.api.v1.dependencies.use_case_deps import get_current_user, get_report_use_cases
from vinos_wms.application.dto.system_dto import AuditLogEntryDTO
from vinos_wms.application.use_cases import ReportUseCases
from vinos_wms.domain.entities import User

router = APIRouter(prefix="/auditoria", tags=["Auditoria"])


@router.get("/", response_model=List[AuditLogEntryDTO])
async def list_audit_log(
    _: User = Depends(get_current_user),
    use_cases: ReportUseCases = Depends(get_report_use_cases),
):
    """Registro de auditoría local, la entrada más reciente primero."""
    return use_cases.audit_entries()
