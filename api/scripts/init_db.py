"""
Script para crear las nueve tablas en una base de datos de desarrollo.

En producción el esquema remoto ya existe y no se toca.
"""
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

_API_ROOT = Path(__file__).resolve().parents[1]
if str(_API_ROOT) not in sys.path:
    sys.path.insert(0, str(_API_ROOT))
load_dotenv(_API_ROOT / ".env", override=False)

from vinos_wms.core.config import settings
from vinos_wms.infrastructure.database.session import build_engine, close_db, init_db


async def main():
    """Función principal para inicializar la base de datos."""
    logger.info("Inicializando base de datos...")
    engine = build_engine()
    try:
        await init_db(engine)
        logger.success(f"Tablas creadas en {engine.url.render_as_string(hide_password=True)}")
    except Exception as e:
        logger.error(f"Error al inicializar base de datos: {e}")
        raise
    finally:
        await close_db(engine)


if __name__ == "__main__":
    if not settings.is_development:
        logger.warning("ENVIRONMENT no es 'development': se crearán solo las tablas que falten")
    asyncio.run(main())
