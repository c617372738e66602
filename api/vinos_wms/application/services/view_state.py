"""
Estado de vista: espejo en memoria de las filas remotas.

La carga inicial lee las nueve tablas en paralelo y después reconstruye
en cliente las relaciones:
- palets bajo su entrada (por intake_id)
- líneas bajo su pack (por pack_id)
- packs bajo su salida (por salida_packs)

Si una tabla falla, esa tabla se sustituye por los datos de demostración
y se avisa una sola vez al final.
"""
from __future__ import annotations

import asyncio
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set, Tuple

from loguru import logger

from vinos_wms.application.services.notification_center import NotificationCenter
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
from vinos_wms.infrastructure.remote import table_mappings as tm
from vinos_wms.infrastructure.remote.client import DataClient
from vinos_wms.infrastructure.remote.types import MappingError
from vinos_wms.infrastructure.seed.seed_data import SeedSnapshot, build_seed_snapshot
from vinos_wms.shared.constants import warehouse_constants as wc

UNKNOWN_PRODUCT = "Desconocido"


@dataclass
class ViewState:
    """Listas en memoria que ve el operador; las altas nuevas van al principio."""

    users: List[User] = field(default_factory=list)
    products: List[Product] = field(default_factory=list)
    pallets: List[Pallet] = field(default_factory=list)
    entradas: List[Entrada] = field(default_factory=list)
    packs: List[Pack] = field(default_factory=list)
    salidas: List[Salida] = field(default_factory=list)
    incidencias: List[Incidencia] = field(default_factory=list)

    def product_name(self, product_id: str) -> str:
        for product in self.products:
            if product.id == product_id:
                return product.name
        return UNKNOWN_PRODUCT

    def find_user(self, user_id: int) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_email(self, email: str) -> Optional[User]:
        email = (email or "").strip().lower()
        return next((u for u in self.users if u.email == email), None)

    def find_entrada(self, entrada_id: str) -> Optional[Entrada]:
        return next((e for e in self.entradas if e.id == entrada_id), None)

    def find_pack(self, pack_id: str) -> Optional[Pack]:
        return next((p for p in self.packs if p.id == pack_id), None)

    def find_salida(self, salida_id: str) -> Optional[Salida]:
        return next((s for s in self.salidas if s.id == salida_id), None)

    def find_incidencia(self, incidencia_id: str) -> Optional[Incidencia]:
        return next((i for i in self.incidencias if i.id == incidencia_id), None)

    def find_pallet(self, pallet_id: str) -> Optional[Pallet]:
        return next((p for p in self.pallets if p.id == pallet_id), None)

    def replace_with(self, other: "ViewState") -> None:
        self.users = other.users
        self.products = other.products
        self.pallets = other.pallets
        self.entradas = other.entradas
        self.packs = other.packs
        self.salidas = other.salidas
        self.incidencias = other.incidencias


@dataclass(frozen=True)
class LoadReport:
    """Resultado de la carga inicial: qué tablas usaron datos de demostración."""

    fallback_tables: Tuple[str, ...] = ()

    @property
    def used_fallback(self) -> bool:
        return bool(self.fallback_tables)


def attach_pallets(entradas: List[Entrada], pallets: List[Pallet]) -> None:
    by_intake: Dict[str, List[Pallet]] = defaultdict(list)
    for pallet in pallets:
        if pallet.intake_id:
            by_intake[pallet.intake_id].append(pallet)
    for entrada in entradas:
        entrada.pallets = by_intake.get(entrada.id, [])


def attach_items(packs: List[Pack], items: List[PackItem]) -> None:
    by_pack: Dict[str, List[PackItem]] = defaultdict(list)
    for item in items:
        by_pack[item.pack_id].append(item)
    for pack in packs:
        pack.items = by_pack.get(pack.id, [])


def attach_packs(salidas: List[Salida], packs: List[Pack], links: List[tm.SalidaPackLink]) -> None:
    packs_by_id = {p.id: p for p in packs}
    by_salida: Dict[str, List[Pack]] = defaultdict(list)
    for link in links:
        pack = packs_by_id.get(link.pack_id)
        if pack is not None:
            by_salida[link.salida_id].append(pack)
    for salida in salidas:
        salida.attach_snapshot(by_salida.get(salida.id, []))


class ViewStateLoader:
    """
    Carga inicial del estado de vista.

    Uso:
        report = await ViewStateLoader(client, state, notifications).load()
    """

    def __init__(
        self,
        client: DataClient,
        state: ViewState,
        notifications: NotificationCenter,
        snapshot_factory: Callable[[], SeedSnapshot] = build_seed_snapshot,
    ) -> None:
        self._client = client
        self._state = state
        self._notifications = notifications
        self._snapshot_factory = snapshot_factory

    async def _fetch(self, table: str) -> Optional[list]:
        """Entidades de la tabla o None si la lectura o el mapeo fallan."""
        result = await self._client.select(table)
        if not result.ok:
            logger.warning(f"Carga de '{table}' fallida, se usan datos de demostración: {result.error.message}")
            return None
        try:
            return tm.get_table_mapping(table).from_rows(result.data)
        except MappingError as e:
            logger.warning(f"Filas de '{table}' no válidas, se usan datos de demostración: {e}")
            return None

    async def load(self) -> LoadReport:
        results = await asyncio.gather(*(self._fetch(t) for t in wc.ALL_TABLES))
        fetched = dict(zip(wc.ALL_TABLES, results))
        seed = self._snapshot_factory()
        failed: Set[str] = {t for t, rows in fetched.items() if rows is None}

        def pick(table: str, fallback: list) -> list:
            rows = fetched[table]
            return fallback if rows is None else rows

        new_state = ViewState(
            users=pick(wc.TABLE_PROFILES, seed.users),
            products=pick(wc.TABLE_PRODUCTS, seed.products),
            pallets=pick(wc.TABLE_PALLETS, seed.pallets),
            entradas=pick(wc.TABLE_ENTRADAS, seed.entradas),
            packs=pick(wc.TABLE_PACKS, seed.packs),
            salidas=pick(wc.TABLE_SALIDAS, seed.salidas),
            incidencias=pick(wc.TABLE_INCIDENCIAS, seed.incidencias),
        )
        items = pick(wc.TABLE_PACK_PRODUCTOS, [i for p in seed.packs for i in p.items])
        links = pick(
            wc.TABLE_SALIDA_PACKS,
            [tm.SalidaPackLink(s.id, p.id) for s in seed.salidas for p in s.packs],
        )

        attach_pallets(new_state.entradas, new_state.pallets)
        attach_items(new_state.packs, items)
        attach_packs(new_state.salidas, new_state.packs, links)
        self._state.replace_with(new_state)

        report = LoadReport(fallback_tables=tuple(t for t in wc.ALL_TABLES if t in failed))
        if report.used_fallback:
            self._notifications.warning(
                "No se pudieron cargar algunos datos desde la base de datos "
                f"({', '.join(report.fallback_tables)}). Se muestran datos de demostración."
            )
        else:
            self._notifications.success("Datos cargados correctamente desde la base de datos.")
        logger.info(
            f"Estado de vista cargado: {len(new_state.entradas)} entradas, {len(new_state.pallets)} palets, "
            f"{len(new_state.packs)} packs, {len(new_state.salidas)} salidas"
        )
        return report
