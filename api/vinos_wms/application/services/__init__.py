"""
Servicios de aplicacion.

Contiene la logica de negocio reutilizable que no pertenece
a un caso de uso especifico.
"""
from vinos_wms.application.services.audit_log_service import AuditLogService
from vinos_wms.application.services.notification_center import NotificationCenter
from vinos_wms.application.services.seed_sync_service import SeedSyncService, SyncResult
from vinos_wms.application.services.view_state import LoadReport, ViewState, ViewStateLoader

__all__ = [
    # Estado y carga inicial
    "ViewState",
    "ViewStateLoader",
    "LoadReport",
    # Sincronizacion de datos de demostracion
    "SeedSyncService",
    "SyncResult",
    # Auditoria y notificaciones
    "AuditLogService",
    "NotificationCenter",
]
