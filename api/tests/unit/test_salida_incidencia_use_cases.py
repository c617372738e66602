from datetime import date, datetime

import pytest

from vinos_wms.application.dto.warehouse_dto import (
    IncidenciaCreateDTO,
    IncidenciaUpdateDTO,
    PackUpdateDTO,
    SalidaCreateDTO,
    SalidaUpdateDTO,
)
from vinos_wms.application.use_cases import IncidenciaUseCases, PackUseCases, SalidaUseCases
from vinos_wms.shared.constants.warehouse_constants import IncidentCategory, IncidentStatus
from vinos_wms.shared.exceptions.domain import EntityNotFoundException


def _salida_dto(pack_ids):
    return SalidaCreateDTO(
        delivery_note_id="ALB-S-20251020",
        client="Vinoteca Central",
        timestamp=datetime(2025, 10, 20, 12, 0),
        driver="Luis Pérez",
        truck_plate="4321-CBA",
        carrier="Logística Segura",
        pack_ids=pack_ids,
    )


async def test_create_salida_stores_header_and_links(seeded_context, operator):
    salida = await SalidaUseCases(seeded_context).create_salida(_salida_dto(["PACK002"]), operator)

    links = (await seeded_context.client.select("salida_packs", {"salida_id": salida.id})).data
    assert [r["pack_id"] for r in links] == ["PACK002"]
    assert seeded_context.state.salidas[0].id == salida.id


async def test_salida_keeps_a_snapshot_of_its_packs(seeded_context, operator):
    salida = await SalidaUseCases(seeded_context).create_salida(_salida_dto(["PACK002"]), operator)
    await PackUseCases(seeded_context).update_pack("PACK002", PackUpdateDTO(customer_order="PED-C-999"), operator)

    stored = seeded_context.state.find_salida(salida.id)
    assert stored.packs[0].customer_order == "PED-C-102"


async def test_create_salida_with_unknown_pack_writes_nothing(seeded_context, operator):
    with pytest.raises(EntityNotFoundException):
        await SalidaUseCases(seeded_context).create_salida(_salida_dto(["PACK404"]), operator)

    assert (await seeded_context.client.count("salidas")).first()["count"] == 1


async def test_update_and_delete_salida(seeded_context, operator):
    use_cases = SalidaUseCases(seeded_context)
    updated = await use_cases.update_salida("SAL001", SalidaUpdateDTO(client="Distribuidora Norte"), operator)
    assert updated.client == "Distribuidora Norte"
    assert [p.id for p in updated.packs] == ["PACK001"]

    await use_cases.delete_salida("SAL001", operator)
    assert (await seeded_context.client.select("salida_packs")).data == []
    assert seeded_context.notifications.visible()[-1].message == "Salida eliminada."


async def test_create_incidencia_sets_today_and_reporter(context, operator):
    dto = IncidenciaCreateDTO(category=IncidentCategory.STOCK, description="Faltan 2 cajas en PAL088")
    incidencia = await IncidenciaUseCases(context).create_incidencia(dto, operator)

    assert incidencia.date == date.today()
    assert incidencia.reported_by == "Juan Almacén"
    assert incidencia.status == IncidentStatus.PENDING
    row = (await context.client.select("incidencias", {"id": incidencia.id})).first()
    assert row["usuario_reporta"] == "Juan Almacén"


async def test_update_incidencia_status(seeded_context, operator):
    use_cases = IncidenciaUseCases(seeded_context)
    updated = await use_cases.update_incidencia(
        "INC001", IncidenciaUpdateDTO(status=IncidentStatus.RESOLVED), operator
    )

    assert updated.status == IncidentStatus.RESOLVED
    assert seeded_context.notifications.visible()[-1].message == "Incidencia INC001 actualizada."

    await use_cases.delete_incidencia("INC001", operator)
    assert seeded_context.state.find_incidencia("INC001") is None
