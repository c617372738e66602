"""
Base común de los casos de uso que mutan datos.

Secuencia de cada mutación:
1. traducir la entidad a fila remota
2. mutar en remoto
3. solo si el remoto confirma, actualizar el estado de vista
4. registrar una entrada de auditoría y notificar
"""
from typing import Union

from vinos_wms.core.context import AppContext
from vinos_wms.domain.entities import User
from vinos_wms.shared.constants.warehouse_constants import AuditAction


class WarehouseUseCases:
    """Acceso compartido al contexto de la aplicación."""

    def __init__(self, context: AppContext):
        self.context = context
        self.client = context.client
        self.state = context.state
        self.audit_log = context.audit_log
        self.notifications = context.notifications

    def _record(self, user: User, action: AuditAction, entity: str, entity_id: Union[str, int]) -> None:
        self.audit_log.record(user, action, entity, entity_id)
