"""
Tests del catálogo de productos: el upsert por id deja una sola fila.
"""
from vinos_wms.application.dto.warehouse_dto import ProductDTO
from vinos_wms.application.use_cases import ProductUseCases
from vinos_wms.shared.constants.warehouse_constants import AuditAction


async def test_upsert_same_product_twice_keeps_latest_name(seeded_context, operator):
    use_cases = ProductUseCases(seeded_context)
    products_before = len(seeded_context.state.products)

    await use_cases.upsert_product(ProductDTO(id="PROD010", name="VIÑA SOL"), operator)
    saved = await use_cases.upsert_product(
        ProductDTO(id="PROD010", name="VIÑA SOL BLANCO", bottle_ean="8410013000109"), operator
    )

    assert saved.name == "VIÑA SOL BLANCO"
    rows = (await seeded_context.client.select("products", {"id": "PROD010"})).data
    assert len(rows) == 1
    assert rows[0]["name"] == "VIÑA SOL BLANCO"
    assert rows[0]["ean_botella"] == "8410013000109"

    matches = [p for p in seeded_context.state.products if p.id == "PROD010"]
    assert len(matches) == 1
    assert matches[0].name == "VIÑA SOL BLANCO"
    assert len(seeded_context.state.products) == products_before + 1

    entries = seeded_context.audit_log.entries
    assert [(e.action, e.entity, e.entity_id) for e in entries] == [
        (AuditAction.UPDATE, "Product", "PROD010"),
        (AuditAction.CREATE, "Product", "PROD010"),
    ]
    assert seeded_context.notifications.visible()[-1].message == "Producto VIÑA SOL BLANCO guardado."


async def test_upsert_existing_seed_product_updates_in_place(seeded_context, operator):
    use_cases = ProductUseCases(seeded_context)
    position = [p.id for p in seeded_context.state.products].index("PROD002")

    await use_cases.upsert_product(ProductDTO(id="PROD002", name="MARQUÉS DE RISCAL GRAN RESERVA"), operator)

    assert seeded_context.state.products[position].name == "MARQUÉS DE RISCAL GRAN RESERVA"
    assert (await seeded_context.client.count("products")).first()["count"] == 3
    assert seeded_context.audit_log.entries[0].action == AuditAction.UPDATE
