"""
Tests de la carga inicial y la reconstrucción de relaciones.
"""
from unittest.mock import AsyncMock, patch

from vinos_wms.application.services.view_state import ViewStateLoader
from vinos_wms.infrastructure.remote.types import DataError, QueryResult
from vinos_wms.shared.constants.warehouse_constants import NotificationType


async def test_pallets_under_intake_match_their_intake_id(seeded_context):
    state = seeded_context.state
    seen = set()
    for entrada in state.entradas:
        for pallet in entrada.pallets:
            assert pallet.intake_id == entrada.id
            assert pallet.id not in seen
            seen.add(pallet.id)
    assert seen == {"PAL047", "PAL013", "PAL088", "PAL092"}


async def test_packs_and_items_are_rebuilt(seeded_context):
    state = seeded_context.state
    pack = state.find_pack("PACK001")
    assert [(i.product_id, i.lot, i.quantity) for i in pack.items] == [("PROD001", "PTAM132515", 120)]

    salida = state.find_salida("SAL001")
    assert [p.id for p in salida.packs] == ["PACK001"]
    assert salida.packs[0] is not pack


async def test_successful_load_emits_one_success_notification(seeded_context, clock):
    visible = seeded_context.notifications.visible()

    assert [n.type for n in visible] == [NotificationType.SUCCESS]
    assert visible[0].message == "Datos cargados correctamente desde la base de datos."


async def test_failed_table_falls_back_to_seed_with_single_warning(context):
    client = context.client
    real_select = client.select

    async def failing_select(table, *args, **kwargs):
        if table in ("packs", "incidencias"):
            return QueryResult(error=DataError("timeout", table=table))
        return await real_select(table, *args, **kwargs)

    with patch.object(client, "select", AsyncMock(side_effect=failing_select)):
        report = await ViewStateLoader(client, context.state, context.notifications).load()

    assert report.fallback_tables == ("packs", "incidencias")
    assert {p.id for p in context.state.packs} == {"PACK001", "PACK002"}
    assert len(context.state.incidencias) == 3
    # Tablas leídas sin error (vacías) se respetan
    assert context.state.entradas == []

    visible = context.notifications.visible()
    assert len(visible) == 1
    assert visible[0].type == NotificationType.WARNING
    assert "packs, incidencias" in visible[0].message


async def test_invalid_rows_fall_back_to_seed(context):
    await context.client.insert("profiles", [{"id": 99, "name": "X", "email": "x@vinos.com", "role": "Invitado"}])

    report = await ViewStateLoader(context.client, context.state, context.notifications).load()

    assert report.fallback_tables == ("profiles",)
    assert [u.id for u in context.state.users] == [1, 2, 3]
