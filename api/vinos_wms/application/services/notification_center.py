"""
Centro de notificaciones efímeras.

Cada notificación caduca ttl segundos después de su propia creación,
sin depender de las que lleguen después. Nada se persiste.
"""
import itertools
import time
from typing import Callable, List, Optional

from loguru import logger

from vinos_wms.core.config import settings
from vinos_wms.domain.entities.notification import Notification
from vinos_wms.shared.constants.warehouse_constants import NotificationType


class NotificationCenter:
    """
    Cola de notificaciones visibles para el operador.

    Uso:
        center = NotificationCenter()
        center.success("Entrada registrada con éxito.")
        center.visible()  # notificaciones aún no caducadas
    """

    def __init__(self, ttl_seconds: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = settings.NOTIFICATION_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self._clock = clock
        self._ids = itertools.count(1)
        self._items: List[Notification] = []

    def push(self, message: str, type: NotificationType = NotificationType.SUCCESS) -> Notification:
        now = self._clock()
        notification = Notification(
            id=next(self._ids),
            message=message,
            type=NotificationType(type),
            created_at=now,
            expires_at=now + self.ttl_seconds,
        )
        self._items.append(notification)
        logger.debug(f"Notificacion [{notification.type.value}] {message}")
        return notification

    def success(self, message: str) -> Notification:
        return self.push(message, NotificationType.SUCCESS)

    def info(self, message: str) -> Notification:
        return self.push(message, NotificationType.INFO)

    def warning(self, message: str) -> Notification:
        return self.push(message, NotificationType.WARNING)

    def error(self, message: str) -> Notification:
        return self.push(message, NotificationType.ERROR)

    def visible(self) -> List[Notification]:
        """Notificaciones vigentes, de la más antigua a la más reciente."""
        now = self._clock()
        self._items = [n for n in self._items if not n.is_expired(now)]
        return list(self._items)

    def dismiss(self, notification_id: int) -> bool:
        """Cierra una notificación antes de que caduque."""
        before = len(self._items)
        self._items = [n for n in self._items if n.id != notification_id]
        return len(self._items) < before
