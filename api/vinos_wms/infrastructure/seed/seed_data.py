"""
Datos de demostración del almacén.

Se usan en dos sitios: la sincronización inicial (se suben a la base
remota) y como respaldo por tabla cuando la carga remota falla.
Cada llamada a build_seed_snapshot() devuelve objetos nuevos.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List

from vinos_wms.domain.entities import (
    Entrada,
    Incidencia,
    Pack,
    PackItem,
    Pallet,
    Product,
    Salida,
    User,
)
from vinos_wms.shared.constants.warehouse_constants import (
    IncidentCategory,
    IncidentStatus,
    PackStatus,
    PalletStatus,
    UserRole,
)

# Contraseñas de las cuentas de demostración; se suben siempre como hash
SEED_USER_PASSWORDS: Dict[int, str] = {
    1: "Er1414**",
    2: "password",
    3: "password",
}

PLACEHOLDER_IMAGE = "https://via.placeholder.com/150"


@dataclass
class SeedSnapshot:
    users: List[User] = field(default_factory=list)
    products: List[Product] = field(default_factory=list)
    pallets: List[Pallet] = field(default_factory=list)
    entradas: List[Entrada] = field(default_factory=list)
    packs: List[Pack] = field(default_factory=list)
    salidas: List[Salida] = field(default_factory=list)
    incidencias: List[Incidencia] = field(default_factory=list)


def _users() -> List[User]:
    return [
        User(id=1, name="Admin User", email="reyeduardo0@gmail.com", role=UserRole.SUPER_USER),
        User(id=2, name="Juan Almacén", email="juan@vinos.com", role=UserRole.WAREHOUSE),
        User(id=3, name="Ana Oficina", email="ana@vinos.com", role=UserRole.ADMINISTRATIVE),
    ]


def _products() -> List[Product]:
    return [
        Product(id="PROD001", name="ALMA ATLANTICA ALBARIÑO", bottle_ean="8410013000017", case_ean="18410013000014"),
        Product(id="PROD002", name="MARQUÉS DE RISCAL RESERVA", bottle_ean="8410013000024", case_ean="18410013000021"),
        Product(id="PROD003", name="PROTOS CRIANZA", bottle_ean="8410013000031", case_ean="18410013000038"),
    ]


def _pallets() -> List[Pallet]:
    return [
        Pallet(
            id="PAL047", product_id="PROD001", lot="PTAM132515", sscc="00(384100)130000140001",
            cases_per_pallet=95, bottles_per_case=6, entry_date=date(2025, 10, 13),
            status=PalletStatus.AVAILABLE,
        ),
        Pallet(
            id="PAL013", product_id="PROD001", lot="PTAM132516", sscc="00(384100)130000140002",
            cases_per_pallet=95, bottles_per_case=6, entry_date=date(2025, 10, 13),
            status=PalletStatus.AVAILABLE,
        ),
        Pallet(
            id="PAL088", product_id="PROD002", lot="MDRM201801", sscc="00(384100)130000210001",
            cases_per_pallet=80, bottles_per_case=6, entry_date=date(2025, 10, 14),
            status=PalletStatus.AVAILABLE,
        ),
        Pallet(
            id="PAL092", product_id="PROD003", lot="PCRZ201905", sscc="00(384100)130000380001",
            cases_per_pallet=100, bottles_per_case=6, entry_date=date(2025, 10, 15),
            status=PalletStatus.IN_PROCESS,
        ),
    ]


def _entradas(pallets_by_id: Dict[str, Pallet]) -> List[Entrada]:
    layout = [
        (
            Entrada(
                id="ENT001", delivery_note_id="ALB-E-20251013", truck_plate="1234-ABC",
                carrier="Transportes Rápidos", driver="Carlos Ruiz",
                timestamp=datetime(2025, 10, 13, 9, 15), declared_pallets=2,
                pallet_label_images=[PLACEHOLDER_IMAGE],
            ),
            ["PAL047", "PAL013"],
        ),
        (
            Entrada(
                id="ENT002", delivery_note_id="ALB-E-20251014", truck_plate="5678-DEF",
                carrier="Logística Segura", driver="Elena Gómez",
                timestamp=datetime(2025, 10, 14, 11, 30), declared_pallets=1,
            ),
            ["PAL088"],
        ),
        (
            Entrada(
                id="ENT003", delivery_note_id="ALB-E-20251015", truck_plate="9012-GHI",
                carrier="Transportes Rápidos", driver="Carlos Ruiz",
                timestamp=datetime(2025, 10, 15, 8, 0), declared_pallets=1,
                incident="Un palet con cajas dañadas.",
                incident_images=[PLACEHOLDER_IMAGE, PLACEHOLDER_IMAGE],
            ),
            ["PAL092"],
        ),
    ]
    entradas = []
    for entrada, pallet_ids in layout:
        for pallet_id in pallet_ids:
            pallet = pallets_by_id[pallet_id]
            pallet.intake_id = entrada.id
            entrada.pallets.append(pallet)
        entradas.append(entrada)
    return entradas


def _packs() -> List[Pack]:
    return [
        Pack(
            id="PACK001", customer_order="PED-C-101",
            created_at=datetime(2025, 10, 16, 14, 0), status=PackStatus.SHIPPED, label_url="#",
            items=[PackItem(product_id="PROD001", lot="PTAM132515", quantity=120, pack_id="PACK001")],
        ),
        Pack(
            id="PACK002", customer_order="PED-C-102",
            created_at=datetime(2025, 10, 17, 10, 0), status=PackStatus.CREATED, label_url="#",
            items=[PackItem(product_id="PROD002", lot="MDRM201801", quantity=60, pack_id="PACK002")],
        ),
    ]


def _salidas(packs_by_id: Dict[str, Pack]) -> List[Salida]:
    salida = Salida(
        id="SAL001", delivery_note_id="ALB-S-20251016", client="Distribuidora del Sur",
        timestamp=datetime(2025, 10, 16, 16, 30), driver="Luis Pérez",
        truck_plate="4321-CBA", carrier="Logística Segura",
    )
    salida.attach_snapshot([packs_by_id["PACK001"]])
    return [salida]


def _incidencias() -> List[Incidencia]:
    return [
        Incidencia(
            id="INC001", category=IncidentCategory.INTAKE,
            description="Palet PAL092 llegó con 5 cajas rotas en la parte superior. Se adjuntan fotos.",
            date=date(2025, 10, 15), status=IncidentStatus.PENDING, reported_by="Juan Almacén",
        ),
        Incidencia(
            id="INC002", category=IncidentCategory.PACK_CREATION,
            description="Falta de material de embalaje (cartón separador) para pedido PED-C-103.",
            date=date(2025, 10, 18), status=IncidentStatus.IN_REVIEW, reported_by="Juan Almacén",
        ),
        Incidencia(
            id="INC003", category=IncidentCategory.STOCK,
            description="Se ha detectado una discrepancia en el conteo del lote PTAM132515.",
            date=date(2025, 10, 20), status=IncidentStatus.RESOLVED, reported_by="Ana Oficina",
        ),
    ]


def build_seed_snapshot() -> SeedSnapshot:
    """Conjunto completo de datos de demostración con relaciones ya montadas."""
    pallets = _pallets()
    entradas = _entradas({p.id: p for p in pallets})
    packs = _packs()
    salidas = _salidas({p.id: p for p in packs})
    return SeedSnapshot(
        users=_users(),
        products=_products(),
        pallets=pallets,
        entradas=entradas,
        packs=packs,
        salidas=salidas,
        incidencias=_incidencias(),
    )
