"""
Tests de la sincronización de datos de demostración.
"""
from unittest.mock import AsyncMock, patch

from vinos_wms.application.services.seed_sync_service import SeedSyncService
from vinos_wms.infrastructure.remote.types import DataError, QueryResult
from vinos_wms.shared.constants.warehouse_constants import ALL_TABLES


async def _counts(client):
    return {table: (await client.count(table)).first()["count"] for table in ALL_TABLES}


async def test_sync_writes_every_table_in_order(context):
    logs = []
    result = await SeedSyncService(context.client, context.security).sync(logs.append)

    assert result.success
    assert result.error is None
    assert logs[0] == "Sincronizando Usuarios..."
    assert logs[1] == "✅ Usuarios sincronizados: 3 registros."
    assert logs[-1] == "🎉 ¡Sincronización completada con éxito!"
    labels = [line for line in logs if line.startswith("Sincronizando")]
    assert len(labels) == 9
    assert await _counts(context.client) == {
        "profiles": 3,
        "products": 3,
        "entradas": 3,
        "pallets": 4,
        "packs": 2,
        "pack_productos": 2,
        "salidas": 1,
        "salida_packs": 1,
        "incidencias": 3,
    }


async def test_sync_twice_leaves_identical_row_counts(context):
    service = SeedSyncService(context.client, context.security)
    assert (await service.sync()).success
    first = await _counts(context.client)

    assert (await service.sync()).success
    assert await _counts(context.client) == first


async def test_sync_links_pallets_to_their_intake(context):
    await SeedSyncService(context.client, context.security).sync()

    rows = {r["id"]: r["entrada_id"] for r in (await context.client.select("pallets")).data}
    assert rows == {"PAL047": "ENT001", "PAL013": "ENT001", "PAL088": "ENT002", "PAL092": "ENT003"}


async def test_sync_hashes_seed_passwords(context):
    await SeedSyncService(context.client, context.security).sync()

    admin = (await context.client.select("profiles", {"id": 1})).first()
    assert admin["password_hash"] != "Er1414**"
    assert context.security.verify_password("Er1414**", admin["password_hash"])


async def test_sync_stops_at_first_remote_error(context):
    client = context.client
    real_upsert = client.upsert

    async def failing_upsert(table, rows, on_conflict):
        if table == "pallets":
            return QueryResult(error=DataError("permission denied for table pallets", table=table))
        return await real_upsert(table, rows, on_conflict)

    logs = []
    with patch.object(client, "upsert", AsyncMock(side_effect=failing_upsert)):
        result = await SeedSyncService(client, context.security).sync(logs.append)

    assert not result.success
    assert result.error == "Pallets: permission denied for table pallets"
    assert logs[-1] == "❌ Error durante la sincronización: Pallets: permission denied for table pallets"
    counts = await _counts(client)
    # Los pasos anteriores no se deshacen; los posteriores no se ejecutan
    assert counts["entradas"] == 3
    assert counts["pallets"] == 0
    assert counts["packs"] == 0
