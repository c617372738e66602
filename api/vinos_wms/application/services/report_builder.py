"""
Exportaciones CSV del almacén.

Formato: campos de texto entre comillas, números sin comillas, fin de
línea \\r\\n. Los reportes con varias secciones se concatenan en un único
archivo separando cada bloque con una línea en blanco.
"""
import csv
import io
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from vinos_wms.application.services.view_state import ViewState
from vinos_wms.domain.entities import Entrada, Incidencia, Salida
from vinos_wms.shared.constants.warehouse_constants import ALL_STATUSES
from vinos_wms.shared.utils.date_utils import DateLike, movement_range, parse_date

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"

PALLET_HEADERS = ["ID Palet", "Producto", "Lote", "SSCC", "Cajas/Palet", "Botellas/Caja", "Fecha Entrada", "Estado"]
PACK_HEADERS = ["ID Pack", "Pedido Cliente", "Fecha Creación", "Estado", "Producto", "Lote", "Cantidad Botellas"]
ENTRADA_HEADERS = ["Albaran", "Fecha y Hora", "Transportista", "Matricula", "Conductor", "# Palets"]
SALIDA_HEADERS = ["Albaran Salida", "Fecha y Hora", "Cliente", "Transportista", "Matricula", "Conductor", "# Packs"]
INCIDENCIA_HEADERS = ["ID", "Tipo", "Descripcion", "Fecha", "Reporta", "Estado"]


@dataclass(frozen=True)
class CsvReport:
    filename: str
    content: str
    media_type: str = CSV_MEDIA_TYPE


def _text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


class _CsvDocument:
    """Títulos y cabeceras sin comillas; filas de datos con QUOTE_NONNUMERIC."""

    def __init__(self):
        self.buffer = io.StringIO()
        self._plain = csv.writer(self.buffer, lineterminator="\r\n")
        self._data = csv.writer(self.buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\r\n")

    def title(self, text: str) -> None:
        self.buffer.write(text + "\r\n")

    def blank(self) -> None:
        self.buffer.write("\r\n")

    def header(self, columns: Sequence[str]) -> None:
        self._plain.writerow(columns)

    def rows(self, rows: Iterable[Sequence]) -> None:
        for row in rows:
            self._data.writerow([v if isinstance(v, (int, float)) else _text(v) for v in row])

    def getvalue(self) -> str:
        return self.buffer.getvalue()


def filter_movements(
    state: ViewState, start: Optional[DateLike], end: Optional[DateLike]
) -> Tuple[List[Entrada], List[Salida]]:
    """Entradas y salidas dentro de [inicio, fin]; el día final se incluye completo."""
    start_dt, end_dt = movement_range(start, end)
    entradas = [e for e in state.entradas if start_dt <= e.timestamp.replace(tzinfo=None) <= end_dt]
    salidas = [s for s in state.salidas if start_dt <= s.timestamp.replace(tzinfo=None) <= end_dt]
    return entradas, salidas


def filter_incidencias(state: ViewState, status: str = ALL_STATUSES) -> List[Incidencia]:
    if status == ALL_STATUSES:
        return list(state.incidencias)
    return [i for i in state.incidencias if i.status.value == status]


class ReportBuilder:
    """
    Genera los reportes CSV a partir del estado de vista.

    Nada se guarda: cada llamada regenera el contenido.
    """

    def __init__(self, state: ViewState):
        self.state = state

    def inventory_csv(self) -> CsvReport:
        doc = _CsvDocument()
        doc.title("INVENTARIO DE PALLETS")
        doc.header(PALLET_HEADERS)
        doc.rows(
            [
                p.id,
                self.state.product_name(p.product_id),
                p.lot,
                p.sscc,
                p.cases_per_pallet,
                p.bottles_per_case,
                p.entry_date,
                p.status,
            ]
            for p in self.state.pallets
        )
        doc.blank()
        doc.title("INVENTARIO DE PACKS")
        doc.header(PACK_HEADERS)
        doc.rows(
            [
                pack.id,
                pack.customer_order,
                pack.created_at,
                pack.status,
                self.state.product_name(item.product_id),
                item.lot,
                item.quantity,
            ]
            for pack in self.state.packs
            for item in pack.items
        )
        return CsvReport(filename="reporte_inventario.csv", content=doc.getvalue())

    def movements_csv(self, start: Optional[DateLike], end: Optional[DateLike]) -> CsvReport:
        entradas, salidas = filter_movements(self.state, start, end)
        start_label, end_label = parse_date(start).isoformat(), parse_date(end).isoformat()

        doc = _CsvDocument()
        doc.title(f"REPORTE DE MOVIMIENTOS ({start_label} a {end_label})")
        doc.blank()
        doc.title("ENTRADAS")
        doc.header(ENTRADA_HEADERS)
        doc.rows(
            [e.delivery_note_id, e.timestamp, e.carrier, e.truck_plate, e.driver, e.declared_pallets]
            for e in entradas
        )
        doc.blank()
        doc.title("SALIDAS")
        doc.header(SALIDA_HEADERS)
        doc.rows(
            [s.delivery_note_id, s.timestamp, s.client, s.carrier, s.truck_plate, s.driver, len(s.packs)]
            for s in salidas
        )
        return CsvReport(
            filename=f"reporte_movimientos_{start_label}_a_{end_label}.csv",
            content=doc.getvalue(),
        )

    def incidents_csv(self, status: str = ALL_STATUSES) -> CsvReport:
        incidencias = filter_incidencias(self.state, status)

        doc = _CsvDocument()
        doc.title(f"REPORTE DE INCIDENCIAS (Estado: {status})")
        doc.blank()
        doc.header(INCIDENCIA_HEADERS)
        doc.rows(
            [i.id, i.category, i.description, i.date, i.reported_by, i.status]
            for i in incidencias
        )
        return CsvReport(filename=f"reporte_incidencias_{status}.csv", content=doc.getvalue())
