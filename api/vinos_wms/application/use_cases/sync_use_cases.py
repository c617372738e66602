"""
Casos de uso de sincronización y estado de conexión.
"""
from typing import List

from loguru import logger

from vinos_wms.application.dto.system_dto import ConnectionStatusDTO, LoadResponseDTO, SyncResponseDTO
from vinos_wms.application.services.seed_sync_service import SeedSyncService
from vinos_wms.application.services.view_state import ViewStateLoader
from vinos_wms.application.use_cases.base import WarehouseUseCases


class SyncUseCases(WarehouseUseCases):
    """
    Orquestador de:
    - subida de los datos de demostración a la base remota
    - recarga completa del estado de vista
    - comprobación de conexión
    """

    async def sync_seed_data(self) -> SyncResponseDTO:
        logs: List[str] = []
        result = await SeedSyncService(self.client, self.context.security).sync(logs.append)
        if result.success:
            self.notifications.success("Datos sincronizados con la base de datos.")
        else:
            self.notifications.error(f"Error durante la sincronización: {result.error}")
        return SyncResponseDTO(success=result.success, error=result.error, logs=logs)

    async def reload_state(self) -> LoadResponseDTO:
        report = await ViewStateLoader(self.client, self.state, self.notifications).load()
        return LoadResponseDTO(fallback_tables=list(report.fallback_tables))

    async def connection_status(self) -> ConnectionStatusDTO:
        status = await self.client.ping()
        if status != "connected":
            logger.warning("Sin conexión con la base de datos remota")
        return ConnectionStatusDTO(status=status)
