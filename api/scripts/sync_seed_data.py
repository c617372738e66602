"""
CLI: sube los datos de demostración a la base remota.

Ejecuta una vez los nueve pasos de la sincronización (upsert por clave
primaria) e imprime cada línea de progreso. Se puede repetir: el número de
filas no cambia.

Ejecución:
  python scripts/sync_seed_data.py
  python scripts/sync_seed_data.py --database-url sqlite+aiosqlite:///./wms.db --create-tables
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

# Permite ejecutar este script desde cualquier cwd sin configurar PYTHONPATH.
# La carpeta "api" contiene el paquete raíz `vinos_wms/`.
_API_ROOT = Path(__file__).resolve().parents[1]
if str(_API_ROOT) not in sys.path:
    sys.path.insert(0, str(_API_ROOT))

# Cargar variables desde api/.env o desde la raíz del repositorio
load_dotenv(_API_ROOT / ".env", override=False)
load_dotenv(_API_ROOT.parent / ".env", override=False)

from vinos_wms.application.services.seed_sync_service import SeedSyncService
from vinos_wms.infrastructure.database.session import build_engine, build_session_factory, close_db, init_db
from vinos_wms.infrastructure.remote.client import DataClient


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sincroniza los datos de demostración con la base remota")
    parser.add_argument("--database-url", default=None, help="URL de la base (por defecto la de la configuración)")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Crea las tablas antes de sincronizar (solo bases de desarrollo)",
    )
    return parser.parse_args()


async def main(database_url: str | None, create_tables: bool) -> int:
    engine = build_engine(database_url)
    try:
        if create_tables:
            await init_db(engine)
        result = await SeedSyncService(DataClient(build_session_factory(engine))).sync(print)
    finally:
        await close_db(engine)
    return 0 if result.success else 1


if __name__ == "__main__":
    args = _parse_args()
    raise SystemExit(asyncio.run(main(args.database_url, args.create_tables)))
