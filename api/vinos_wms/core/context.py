"""
Contexto de la aplicacion: los objetos de larga vida del proceso.

Hay un unico estado de vista, un unico registro de auditoria y un unico
centro de notificaciones por proceso. Se guardan en app.state.context.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from sqlalchemy.ext.asyncio import AsyncEngine

from vinos_wms.application.services.audit_log_service import AuditLogService
from vinos_wms.application.services.notification_center import NotificationCenter
from vinos_wms.application.services.view_state import ViewState
from vinos_wms.core.config import settings
from vinos_wms.core.security import SecurityService, security_service
from vinos_wms.infrastructure.database.session import build_engine, build_session_factory
from vinos_wms.infrastructure.remote.client import DataClient
from vinos_wms.infrastructure.storage.local_storage import LocalStorage


@dataclass
class AppContext:
    client: DataClient
    audit_log: AuditLogService
    notifications: NotificationCenter
    state: ViewState = field(default_factory=ViewState)
    security: SecurityService = security_service
    engine: Optional[AsyncEngine] = None

    @classmethod
    def build(
        cls,
        database_url: Optional[str] = None,
        storage_path: Optional[Union[str, Path]] = None,
        notification_ttl: Optional[float] = None,
    ) -> "AppContext":
        """Crea el contexto a partir de la configuracion (o de los valores dados)."""
        engine = build_engine(database_url)
        storage = LocalStorage(storage_path or settings.LOCAL_STORAGE_PATH)
        return cls(
            client=DataClient(build_session_factory(engine)),
            audit_log=AuditLogService(storage),
            notifications=NotificationCenter(ttl_seconds=notification_ttl),
            engine=engine,
        )
