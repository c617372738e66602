"""
Sincronización de los datos de demostración con la base remota.

Diseño (resumen):
- Nueve pasos en orden fijo: los posteriores referencian ids escritos antes
- Cada paso es un único UPSERT masivo por clave primaria (compuesta en las
  tablas intermedias)
- Al primer error remoto se aborta y se informa; los pasos ya escritos
  no se deshacen

Estrategia de idempotencia:
- UPSERT por clave: ejecutar N veces deja el mismo número de filas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from loguru import logger

from vinos_wms.core.security import SecurityService
from vinos_wms.infrastructure.remote import table_mappings as tm
from vinos_wms.infrastructure.remote.client import DataClient
from vinos_wms.infrastructure.remote.types import Row, TableMapping
from vinos_wms.infrastructure.seed.seed_data import SEED_USER_PASSWORDS, SeedSnapshot, build_seed_snapshot

LogCallback = Callable[[str], None]


class SyncStepError(RuntimeError):
    """Un paso de la sincronización fue rechazado por la base remota."""


@dataclass(frozen=True)
class SyncResult:
    success: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class SyncStep:
    """Un paso: qué tabla, con qué etiqueta se informa y qué filas sube."""

    label: str
    progress: str
    done: str
    mapping: TableMapping
    build_rows: Callable[[SeedSnapshot], List[Row]]


def _rows(mapping: TableMapping, entities) -> List[Row]:
    return [mapping.to_row(e) for e in entities]


class SeedSyncService:
    """
    Orquestador de la subida de datos de demostración.

    Uso:
        result = await SeedSyncService(client).sync(print)
    """

    def __init__(
        self,
        client: DataClient,
        security: Optional[SecurityService] = None,
        snapshot_factory: Callable[[], SeedSnapshot] = build_seed_snapshot,
    ) -> None:
        self._client = client
        self._security = security or SecurityService()
        self._snapshot_factory = snapshot_factory

    def _user_rows(self, seed: SeedSnapshot) -> List[Row]:
        rows = []
        for user in seed.users:
            row = tm.USERS.to_row(user)
            password = SEED_USER_PASSWORDS.get(user.id)
            if password:
                row["password_hash"] = self._security.hash_password(password)
            rows.append(row)
        return rows

    @staticmethod
    def _pallet_rows(seed: SeedSnapshot) -> List[Row]:
        # La referencia a la entrada se calcula desde las listas de palets
        # de las entradas; el palet que no aparece en ninguna va con NULL
        owner = {p.id: e.id for e in seed.entradas for p in e.pallets}
        rows = []
        for pallet in seed.pallets:
            row = tm.PALLETS.to_row(pallet)
            row["entrada_id"] = owner.get(pallet.id)
            rows.append(row)
        return rows

    def steps(self) -> List[SyncStep]:
        return [
            SyncStep("Usuarios", "Sincronizando Usuarios...", "Usuarios sincronizados", tm.USERS, self._user_rows),
            SyncStep("Productos", "Sincronizando Productos...", "Productos sincronizados", tm.PRODUCTS,
                     lambda s: _rows(tm.PRODUCTS, s.products)),
            SyncStep("Entradas", "Sincronizando Entradas...", "Entradas sincronizadas", tm.ENTRADAS,
                     lambda s: _rows(tm.ENTRADAS, s.entradas)),
            SyncStep("Pallets", "Sincronizando Pallets...", "Pallets sincronizados", tm.PALLETS, self._pallet_rows),
            SyncStep("Packs", "Sincronizando Packs...", "Packs sincronizados", tm.PACKS,
                     lambda s: _rows(tm.PACKS, s.packs)),
            SyncStep("Contenido de Packs", "Sincronizando contenido de Packs...", "Contenido de Packs sincronizado",
                     tm.PACK_ITEMS, lambda s: _rows(tm.PACK_ITEMS, [i for p in s.packs for i in p.items])),
            SyncStep("Salidas", "Sincronizando Salidas...", "Salidas sincronizadas", tm.SALIDAS,
                     lambda s: _rows(tm.SALIDAS, s.salidas)),
            SyncStep("Packs de Salidas", "Sincronizando packs de Salidas...", "Packs de Salidas sincronizados",
                     tm.SALIDA_PACKS,
                     lambda s: _rows(tm.SALIDA_PACKS, [tm.SalidaPackLink(sal.id, p.id) for sal in s.salidas for p in sal.packs])),
            SyncStep("Incidencias", "Sincronizando Incidencias...", "Incidencias sincronizadas", tm.INCIDENCIAS,
                     lambda s: _rows(tm.INCIDENCIAS, s.incidencias)),
        ]

    async def sync(self, log: Optional[LogCallback] = None) -> SyncResult:
        """
        Ejecuta los nueve pasos en orden.

        Cada línea de progreso se entrega al callback y a loguru.
        """

        def emit(message: str) -> None:
            logger.info(message)
            if log:
                log(message)

        seed = self._snapshot_factory()
        try:
            for step in self.steps():
                emit(step.progress)
                rows = step.build_rows(seed)
                result = await self._client.upsert(
                    step.mapping.table, rows, on_conflict=step.mapping.primary_key
                )
                if not result.ok:
                    raise SyncStepError(f"{step.label}: {result.error.message}")
                emit(f"✅ {step.done}: {len(rows)} registros.")
        except SyncStepError as e:
            message = str(e)
            emit(f"❌ Error durante la sincronización: {message}")
            logger.error(f"Detalle del error de sincronización: {message}")
            return SyncResult(success=False, error=message)

        emit("🎉 ¡Sincronización completada con éxito!")
        return SyncResult(success=True)
