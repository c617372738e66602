"""
Entidades de dominio del almacen: productos, palets, entradas, packs,
salidas e incidencias.

Las relaciones (palets de una entrada, contenido de un pack, packs de una
salida) no se guardan en la fila remota: se reconstruyen en el cliente
despues de leer cada tabla por separado.
"""
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import List, Optional

from vinos_wms.shared.constants.warehouse_constants import (
    IncidentCategory,
    IncidentStatus,
    PackStatus,
    PalletStatus,
)


@dataclass
class Product:
    """Producto (vino) con sus codigos EAN de botella y de caja."""

    id: str
    name: str
    bottle_ean: str = ""
    case_ean: str = ""


@dataclass
class Pallet:
    """
    Palet recibido en almacen.

    intake_id es solo una referencia hacia la entrada que lo trajo;
    un palet pertenece como mucho a una entrada.
    """

    id: str
    product_id: str
    lot: str
    sscc: str
    cases_per_pallet: int
    bottles_per_case: int
    entry_date: Optional[date] = None
    status: PalletStatus = PalletStatus.AVAILABLE
    intake_id: Optional[str] = None

    @property
    def total_bottles(self) -> int:
        return self.cases_per_pallet * self.bottles_per_case


@dataclass
class Entrada:
    """Entrada de mercancia (camion descargado con su albaran)."""

    id: str
    delivery_note_id: str
    truck_plate: str
    carrier: str
    driver: str
    timestamp: datetime
    declared_pallets: int
    pallets: List[Pallet] = field(default_factory=list)
    incident: Optional[str] = None
    incident_images: List[str] = field(default_factory=list)
    pallet_label_images: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.declared_pallets < 0:
            raise ValueError("El numero de palets no puede ser negativo")
        self.incident_images = list(self.incident_images or [])
        self.pallet_label_images = list(self.pallet_label_images or [])


@dataclass
class PackItem:
    """Linea de un pack: cantidad de botellas de un producto y lote."""

    product_id: str
    lot: str
    quantity: int
    pack_id: Optional[str] = None


@dataclass
class Pack:
    """Pack preparado para un pedido de cliente."""

    id: str
    customer_order: str
    created_at: datetime
    status: PackStatus = PackStatus.CREATED
    label_url: str = "#"
    items: List[PackItem] = field(default_factory=list)

    @property
    def total_bottles(self) -> int:
        return sum(item.quantity for item in self.items)


@dataclass
class Salida:
    """
    Salida de mercancia hacia un cliente.

    packs es una copia de los packs en el momento de asociarlos,
    no una consulta viva.
    """

    id: str
    delivery_note_id: str
    client: str
    timestamp: datetime
    driver: str
    truck_plate: str
    carrier: str
    packs: List[Pack] = field(default_factory=list)

    def attach_snapshot(self, packs: List[Pack]) -> None:
        """Asocia copias de los packs tal y como estan ahora."""
        self.packs = [
            replace(p, items=[replace(i) for i in p.items]) for p in packs
        ]


@dataclass
class Incidencia:
    """Incidencia reportada por un usuario."""

    id: str
    category: IncidentCategory
    description: str
    date: date
    status: IncidentStatus = IncidentStatus.PENDING
    reported_by: str = ""
