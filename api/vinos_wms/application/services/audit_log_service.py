"""
Registro de auditoría local.

Lista de solo-añadir, la más reciente primero, guardada como un único
valor JSON en el almacenamiento local. No se sincroniza con la base remota.
"""
import json
from datetime import datetime, timezone
from typing import List, Optional, Union

from loguru import logger

from vinos_wms.core.config import settings
from vinos_wms.domain.entities import AuditLogEntry, User
from vinos_wms.infrastructure.storage.local_storage import LocalStorage, LocalStorageError
from vinos_wms.shared.constants.warehouse_constants import AuditAction, ID_PREFIX_AUDIT_LOG
from vinos_wms.shared.utils.ids import generate_entity_id


class AuditLogService:
    """Lectura única al arrancar; reescritura completa en cada entrada nueva."""

    def __init__(self, storage: LocalStorage, key: Optional[str] = None):
        self.storage = storage
        self.key = key or settings.AUDIT_LOG_KEY
        self._entries: List[AuditLogEntry] = []

    @property
    def entries(self) -> List[AuditLogEntry]:
        return list(self._entries)

    def load(self) -> List[AuditLogEntry]:
        """Lee el registro guardado. Si no se puede leer se empieza vacío."""
        try:
            raw = self.storage.get_item(self.key)
            items = json.loads(raw) if raw else []
            self._entries = [AuditLogEntry.from_dict(item) for item in items]
        except (LocalStorageError, ValueError, KeyError, TypeError) as e:
            logger.error(f"No se pudo leer el registro de auditoria: {e}")
            self._entries = []
        logger.info(f"Registro de auditoria cargado: {len(self._entries)} entradas")
        return self.entries

    def record(self, user: User, action: AuditAction, entity: str, entity_id: Union[str, int]) -> AuditLogEntry:
        """Añade una entrada al principio y reescribe el array completo."""
        entry = AuditLogEntry(
            id=generate_entity_id(ID_PREFIX_AUDIT_LOG),
            timestamp=datetime.now(timezone.utc).isoformat(),
            user_id=user.id,
            user_name=user.name,
            user_role=user.role,
            action=AuditAction(action),
            entity=entity,
            entity_id=entity_id,
        )
        self._entries.insert(0, entry)
        try:
            self.storage.set_item(self.key, json.dumps([e.to_dict() for e in self._entries], ensure_ascii=False))
        except LocalStorageError as e:
            logger.error(f"No se pudo guardar el registro de auditoria: {e}")
        logger.info(f"Auditoria: {user.name} {entry.action.value} {entity} {entity_id}")
        return entry
