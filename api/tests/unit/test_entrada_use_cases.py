"""
Tests de entradas: alta, modificación, baja y auditoría.
"""
import json
from datetime import datetime

import pytest

from vinos_wms.application.dto.warehouse_dto import EntradaCreateDTO, EntradaUpdateDTO
from vinos_wms.application.services.view_state import ViewState, ViewStateLoader
from vinos_wms.application.use_cases import EntradaUseCases
from vinos_wms.shared.constants.warehouse_constants import AuditAction
from vinos_wms.shared.exceptions.domain import EntityNotFoundException
from vinos_wms.shared.exceptions.remote import RemoteCallException


def _stored_audit_log(context):
    raw = context.audit_log.storage.get_item(context.audit_log.key)
    return json.loads(raw) if raw else []


def _dto(**overrides):
    data = dict(
        delivery_note_id="ALB-E-20251013",
        truck_plate="1234-ABC",
        carrier="Transportes Rápidos",
        driver="Carlos Ruiz",
        timestamp=datetime(2025, 10, 13, 9, 15),
        declared_pallets=2,
    )
    data.update(overrides)
    return EntradaCreateDTO(**data)


async def test_created_intake_has_no_pallets_after_reload(context, operator):
    await EntradaUseCases(context).create_entrada(_dto(), operator)

    fresh = ViewState()
    await ViewStateLoader(context.client, fresh, context.notifications).load()

    matches = [e for e in fresh.entradas if e.delivery_note_id == "ALB-E-20251013"]
    assert len(matches) == 1
    assert matches[0].declared_pallets == 2
    assert matches[0].pallets == []


async def test_each_mutation_adds_exactly_one_audit_entry(context, operator):
    use_cases = EntradaUseCases(context)

    created = await use_cases.create_entrada(_dto(), operator)
    assert len(context.audit_log.entries) == 1
    assert len(_stored_audit_log(context)) == 1

    await use_cases.update_entrada(created.id, EntradaUpdateDTO(driver="Elena Gómez"), operator)
    assert len(_stored_audit_log(context)) == 2

    await use_cases.delete_entrada(created.id, operator)
    stored = _stored_audit_log(context)
    assert len(stored) == 3
    assert [e["action"] for e in stored] == ["DELETE", "UPDATE", "CREATE"]
    assert stored[0]["user_name"] == "Juan Almacén"
    assert stored[0]["entity"] == "Entrada"
    assert context.audit_log.entries[0].action == AuditAction.DELETE


async def test_update_changes_only_sent_fields(context, operator):
    use_cases = EntradaUseCases(context)
    created = await use_cases.create_entrada(_dto(), operator)

    updated = await use_cases.update_entrada(created.id, EntradaUpdateDTO(declared_pallets=3), operator)

    assert updated.declared_pallets == 3
    assert updated.carrier == "Transportes Rápidos"
    row = (await context.client.select("entradas", {"id": created.id})).first()
    assert row["numero_palets"] == 3
    assert context.notifications.visible()[-1].message == "Entrada ALB-E-20251013 actualizada."


async def test_remote_failure_leaves_state_and_audit_untouched(context, operator):
    async with context.engine.begin() as conn:
        await conn.exec_driver_sql("DROP TABLE entradas")

    with pytest.raises(RemoteCallException) as exc_info:
        await EntradaUseCases(context).create_entrada(_dto(), operator)

    assert exc_info.value.status_code == 502
    assert context.state.entradas == []
    assert context.audit_log.entries == []


async def test_delete_intake_detaches_its_pallets(seeded_context, operator):
    await EntradaUseCases(seeded_context).delete_entrada("ENT001", operator)

    state = seeded_context.state
    assert state.find_entrada("ENT001") is None
    assert state.find_pallet("PAL047").intake_id is None
    assert state.find_pallet("PAL013").intake_id is None
    rows = (await seeded_context.client.select("pallets", {"entrada_id": None})).data
    assert {r["id"] for r in rows} == {"PAL047", "PAL013"}


async def test_unknown_intake_raises_not_found(context, operator):
    with pytest.raises(EntityNotFoundException):
        await EntradaUseCases(context).delete_entrada("ENT-NOPE", operator)
