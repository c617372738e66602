"""
Tests del cliente de datos sobre SQLite.
"""
from datetime import datetime
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from vinos_wms.infrastructure.remote.client import UNKNOWN_COLUMN, UNKNOWN_TABLE


def _pallet(pallet_id, entrada_id, lote):
    return {"id": pallet_id, "entrada_id": entrada_id, "product_id": "P1", "lote": lote, "estado": "Disponible"}


async def test_unknown_table_returns_error_object(context):
    result = await context.client.select("albaranes")

    assert not result.ok
    assert result.error.code == UNKNOWN_TABLE
    assert result.data == []


async def test_unknown_column_returns_error_object(context):
    result = await context.client.insert("products", [{"id": "P1", "name": "X", "precio": 3}])

    assert result.error.code == UNKNOWN_COLUMN


async def test_select_filters_in_and_is_null(context):
    client = context.client
    inserted = await client.insert("pallets", [
        _pallet("PAL1", "ENT1", "L1"),
        _pallet("PAL2", None, "L2"),
        _pallet("PAL3", "ENT2", "L3"),
    ])
    assert inserted.ok

    detached = await client.select("pallets", {"entrada_id": None})
    assert [r["id"] for r in detached.data] == ["PAL2"]

    several = await client.select("pallets", {"id": ["PAL1", "PAL3"]}, order_by="id", descending=True)
    assert [r["id"] for r in several.data] == ["PAL3", "PAL1"]


async def test_update_and_delete_return_affected_rows(context):
    client = context.client
    await client.insert("products", [{"id": "P1", "name": "Uno"}, {"id": "P2", "name": "Dos"}])

    updated = await client.update("products", {"name": "Uno bis"}, {"id": "P1"})
    assert updated.data[0]["name"] == "Uno bis"

    removed = await client.delete("products", {"id": "P2"})
    assert [r["id"] for r in removed.data] == ["P2"]
    assert (await client.count("products")).first() == {"count": 1}


async def test_update_without_filter_is_rejected(context):
    result = await context.client.update("products", {"name": "Todos"}, {})

    assert not result.ok


async def test_upsert_same_product_twice_keeps_latest_name(context):
    client = context.client
    await client.upsert("products", [{"id": "PROD009", "name": "Primero"}], on_conflict=["id"])
    await client.upsert("products", [{"id": "PROD009", "name": "Segundo"}], on_conflict=["id"])

    rows = (await client.select("products", {"id": "PROD009"})).data
    assert len(rows) == 1
    assert rows[0]["name"] == "Segundo"


async def test_transaction_rolls_back_when_a_call_fails(context):
    client = context.client
    async with client.transaction() as tx:
        await tx.insert("packs", [{
            "id": "PACK9", "pedido_cliente": "PED-9", "fecha_creacion": datetime(2025, 10, 16), "estado": "Creado",
        }])
        # Clave compuesta duplicada: la segunda fila falla
        await tx.insert("pack_productos", [
            {"pack_id": "PACK9", "product_id": "P1", "lote": "L1", "cantidad": 1},
            {"pack_id": "PACK9", "product_id": "P1", "lote": "L1", "cantidad": 2},
        ])

    assert tx.error is not None
    assert (await client.select("packs", {"id": "PACK9"})).data == []


async def test_transaction_commits_on_success(context):
    client = context.client
    async with client.transaction() as tx:
        await tx.insert("products", [{"id": "P1", "name": "Uno"}])
        await tx.update("products", {"name": "Uno bis"}, {"id": "P1"})

    assert tx.error is None
    assert (await client.select("products")).data[0]["name"] == "Uno bis"


async def test_ping(context):
    assert await context.client.ping() == "connected"

    failure = OperationalError("SELECT", {}, Exception("sin conexión"))
    with patch("sqlalchemy.ext.asyncio.AsyncSession.execute", side_effect=failure):
        assert await context.client.ping() == "error"
