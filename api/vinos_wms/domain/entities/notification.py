"""
Entidad de dominio: notificacion efimera.
"""
from dataclasses import dataclass

from vinos_wms.shared.constants.warehouse_constants import NotificationType


@dataclass(frozen=True)
class Notification:
    """Mensaje visible para el usuario hasta expires_at (segundos de reloj monotono)."""

    id: int
    message: str
    type: NotificationType
    created_at: float
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at
