"""
Entidad de dominio: entrada del registro de auditoria local.
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Union

from vinos_wms.shared.constants.warehouse_constants import AuditAction, UserRole


@dataclass(frozen=True)
class AuditLogEntry:
    """
    Accion de un usuario sobre una entidad.

    Solo la crea el cliente tras cada accion; vive en el almacenamiento
    local y nunca se sincroniza con la base remota.
    """

    id: str
    timestamp: str
    user_id: int
    user_name: str
    user_role: UserRole
    action: AuditAction
    entity: str
    entity_id: Union[str, int]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["user_role"] = self.user_role.value
        data["action"] = self.action.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuditLogEntry":
        return cls(
            id=str(data["id"]),
            timestamp=str(data["timestamp"]),
            user_id=int(data["user_id"]),
            user_name=str(data.get("user_name", "")),
            user_role=UserRole(data["user_role"]),
            action=AuditAction(data["action"]),
            entity=str(data["entity"]),
            entity_id=data["entity_id"],
        )
