"""
Endpoints de sincronización de datos y estado de conexión.
"""
from fastapi import APIRouter, Depends

from vinos_wms.api.v1.dependencies.use_case_deps import get_current_user, get_sync_use_cases
from vinos_wms.application.dto.system_dto import ConnectionStatusDTO, LoadResponseDTO, SyncResponseDTO
from vinos_wms.application.use_cases import SyncUseCases
from vinos_wms.domain.entities import User

router = APIRouter(prefix="/sync", tags=["Sync"])
status_router = APIRouter(prefix="/status", tags=["Sync"])


@router.post("/seed", response_model=SyncResponseDTO)
async def sync_seed_data(
    _: User = Depends(get_current_user),
    use_cases: SyncUseCases = Depends(get_sync_use_cases),
):
    """
    Sube los datos de demostración a la base remota.
    Devuelve las líneas de progreso en el mismo orden en que se emitieron.
    """
    return await use_cases.sync_seed_data()


@router.post("/reload", response_model=LoadResponseDTO)
async def reload_state(
    _: User = Depends(get_current_user),
    use_cases: SyncUseCases = Depends(get_sync_use_cases),
):
    """Vuelve a leer las nueve tablas y reconstruye el estado de vista."""
    return await use_cases.reload_state()


@status_router.get("/", response_model=ConnectionStatusDTO)
async def connection_status(use_cases: SyncUseCases = Depends(get_sync_use_cases)):
    return await use_cases.connection_status()
