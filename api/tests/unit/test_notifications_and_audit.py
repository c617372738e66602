import json

import pytest

from vinos_wms.application.services.audit_log_service import AuditLogService
from vinos_wms.application.services.notification_center import NotificationCenter
from vinos_wms.domain.entities import User
from vinos_wms.infrastructure.storage.local_storage import LocalStorage, LocalStorageError
from vinos_wms.shared.constants.warehouse_constants import AuditAction, UserRole

AUDIT_KEY = "miSolucionVinos_auditLog"


def test_each_notification_expires_on_its_own_timer(clock):
    center = NotificationCenter(ttl_seconds=5, clock=clock)
    first = center.success("Entrada registrada con éxito.")

    clock.advance(3)
    second = center.warning("Aviso")
    clock.advance(1)
    center.info("Otro")

    assert [n.id for n in center.visible()] == [first.id, second.id, first.id + 2]

    clock.advance(1.5)
    assert first not in center.visible()
    assert second in center.visible()

    clock.advance(10)
    assert center.visible() == []


def test_dismiss_notification(clock):
    center = NotificationCenter(ttl_seconds=5, clock=clock)
    n = center.error("Fallo")

    assert center.dismiss(n.id)
    assert not center.dismiss(n.id)
    assert center.visible() == []


def test_local_storage_roundtrip(tmp_path):
    storage = LocalStorage(tmp_path / "nested" / "storage.json")
    assert storage.get_item("a") is None

    storage.set_item("a", "uno")
    storage.set_item("b", "dos")

    assert LocalStorage(tmp_path / "nested" / "storage.json").get_item("a") == "uno"


def test_local_storage_rejects_corrupt_file(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{no es json", encoding="utf-8")

    storage = LocalStorage(path)
    with pytest.raises(LocalStorageError):
        storage.get_item("a")

    # Escribir de nuevo recupera el archivo
    storage.set_item("a", "uno")
    assert storage.get_item("a") == "uno"


def _user():
    return User(id=1, name="Admin User", email="reyeduardo0@gmail.com", role=UserRole.SUPER_USER)


def test_audit_entries_are_prepended_and_persisted(tmp_path):
    storage = LocalStorage(tmp_path / "storage.json")
    audit = AuditLogService(storage, key=AUDIT_KEY)

    audit.record(_user(), AuditAction.CREATE, "Entrada", "ENT1")
    audit.record(_user(), AuditAction.DELETE, "Entrada", "ENT1")

    stored = json.loads(storage.get_item(AUDIT_KEY))
    assert [e["action"] for e in stored] == ["DELETE", "CREATE"]
    assert stored[0]["user_role"] == "SuperUsuario"

    reloaded = AuditLogService(storage, key=AUDIT_KEY)
    reloaded.load()
    assert [e.action for e in reloaded.entries] == [AuditAction.DELETE, AuditAction.CREATE]


def test_audit_load_failure_starts_empty(tmp_path):
    storage = LocalStorage(tmp_path / "storage.json")
    storage.set_item(AUDIT_KEY, "[{\"id\": 1}]")

    audit = AuditLogService(storage, key=AUDIT_KEY)
    audit.load()

    assert audit.entries == []


def test_audit_write_failure_keeps_memory_log(tmp_path):
    # Un directorio en lugar de archivo hace fallar la escritura
    blocked = tmp_path / "storage.json"
    blocked.mkdir()
    audit = AuditLogService(LocalStorage(blocked), key=AUDIT_KEY)

    audit.record(_user(), AuditAction.LOGIN, "User", 1)

    assert len(audit.entries) == 1
