"""
Tests de reportes CSV/HTML, etiquetas y estadísticas sobre los datos de demostración.
"""
from datetime import date

import pytest

from vinos_wms.application.dto.system_dto import GenericLabelRequestDTO
from vinos_wms.application.services.document_renderer import DocumentRenderer, qr_code_url, templates_env
from vinos_wms.application.services.report_builder import ReportBuilder
from vinos_wms.application.services.view_state import ViewState
from vinos_wms.application.services.warehouse_stats import (
    available_stock_by_product,
    incident_counts_by_status,
    search_labels,
)
from vinos_wms.application.use_cases import ReportUseCases
from vinos_wms.infrastructure.seed.seed_data import build_seed_snapshot
from vinos_wms.shared.constants.warehouse_constants import NotificationType
from vinos_wms.shared.exceptions.domain import EntityNotFoundException, ValidationException


@pytest.fixture
def state() -> ViewState:
    seed = build_seed_snapshot()
    return ViewState(
        users=seed.users,
        products=seed.products,
        pallets=seed.pallets,
        entradas=seed.entradas,
        packs=seed.packs,
        salidas=seed.salidas,
        incidencias=seed.incidencias,
    )


def test_inventory_csv_sections(state):
    report = ReportBuilder(state).inventory_csv()
    lines = report.content.split("\r\n")

    assert report.filename == "reporte_inventario.csv"
    assert lines[0] == "INVENTARIO DE PALLETS"
    assert lines[1] == "ID Palet,Producto,Lote,SSCC,Cajas/Palet,Botellas/Caja,Fecha Entrada,Estado"
    assert lines[2] == (
        '"PAL047","ALMA ATLANTICA ALBARIÑO","PTAM132515","00(384100)130000140001",95,6,"2025-10-13","Disponible"'
    )
    assert lines[6] == ""
    assert lines[7] == "INVENTARIO DE PACKS"
    assert lines[9] == '"PACK001","PED-C-101","2025-10-16 14:00:00","Expedido","ALMA ATLANTICA ALBARIÑO","PTAM132515",120'


def test_csv_quotes_text_with_commas(state):
    state.products[0].name = 'Vino "Gran", Reserva'
    content = ReportBuilder(state).inventory_csv().content

    assert '"Vino ""Gran"", Reserva"' in content


def test_movements_csv_includes_whole_end_day(state):
    report = ReportBuilder(state).movements_csv(date(2025, 10, 13), date(2025, 10, 16))

    assert report.filename == "reporte_movimientos_2025-10-13_a_2025-10-16.csv"
    assert report.content.startswith("REPORTE DE MOVIMIENTOS (2025-10-13 a 2025-10-16)\r\n")
    assert report.content.count("ALB-E-") == 3
    # La salida de las 16:30 del último día entra en el rango
    assert '"ALB-S-20251016"' in report.content


def test_movements_csv_excludes_out_of_range(state):
    content = ReportBuilder(state).movements_csv("2025-10-14", "2025-10-14").content

    assert content.count("ALB-E-") == 1
    assert "ALB-S-" not in content


def test_movements_without_range_is_rejected(state):
    with pytest.raises(ValidationException):
        ReportBuilder(state).movements_csv(None, date(2025, 10, 16))


def test_incidents_csv_filtered_by_status(state):
    report = ReportBuilder(state).incidents_csv("Pendiente")

    assert report.filename == "reporte_incidencias_Pendiente.csv"
    assert '"INC001"' in report.content
    assert '"INC002"' not in report.content
    assert ReportBuilder(state).incidents_csv().content.count('"INC0') == 3


def test_html_documents_escape_values(state):
    state.incidencias[0].description = "<script>alert(1)</script>"
    html = DocumentRenderer(state).incidents_report()

    assert html.startswith("<!DOCTYPE html>")
    assert "&lt;script&gt;" in html
    assert "<script>alert" not in html


def test_renderers_share_one_template_environment(state):
    first = DocumentRenderer(state)
    second = DocumentRenderer(ViewState())

    assert first.env is templates_env
    assert second.env is first.env
    first.inventory_report()
    assert second.env.get_template("inventory_report.html") is first.env.get_template("inventory_report.html")


def test_cmr_lists_dispatched_packs(state):
    html = DocumentRenderer(state).cmr("SAL001")

    assert "Distribuidora del Sur" in html
    assert "PED-C-101" in html
    assert "ALMA ATLANTICA ALBARIÑO" in html

    with pytest.raises(EntityNotFoundException):
        DocumentRenderer(state).cmr("SAL999")


def test_labels(state):
    renderer = DocumentRenderer(state)

    pallet_label = renderer.label_reprint("pallet", "PAL047")
    assert "SSCC: 00(384100)130000140001" in pallet_label
    assert qr_code_url("PAL047") in pallet_label.replace("&amp;", "&")

    generic = renderer.generic_label("Muestras", "Línea 1", "", "https://misolucionenvinos.com")
    assert "Muestras" in generic
    assert "Línea 1" in generic

    with pytest.raises(ValidationException):
        renderer.generic_label("", qr_content="x")


def test_stock_and_incident_stats(state):
    stock = {s.product_id: s.bottles for s in available_stock_by_product(state)}

    assert stock == {"PROD001": 1140, "PROD002": 480, "PROD003": 0}
    assert incident_counts_by_status(state) == {"Pendiente": 1, "En Revisión": 1, "Solucionado": 1}


def test_label_search(state):
    assert [r.id for r in search_labels(state, "alma")] == ["PACK001"]
    assert [r.id for r in search_labels(state, "ped-c-102")] == ["PACK002"]
    assert [r.type for r in search_labels(state, "PAL0")] == ["Pallet"] * 4
    assert search_labels(state, "  ") == []


async def test_report_use_cases_notify(context):
    use_cases = ReportUseCases(context)
    use_cases.inventory_csv()

    info = context.notifications.visible()[-1]
    assert (info.type, info.message) == (
        NotificationType.INFO,
        "Generando reporte de inventario en formato Excel...",
    )

    with pytest.raises(ValidationException):
        use_cases.movements_html(None, None)
    error = context.notifications.visible()[-1]
    assert (error.type, error.message) == (NotificationType.ERROR, "Por favor, seleccione un rango de fechas.")

    with pytest.raises(ValidationException):
        use_cases.generic_label(GenericLabelRequestDTO(title="", qr_content=""))
