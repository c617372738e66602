"""
Gestión de sesiones de base de datos.

La base remota es la fuente de verdad; este proceso solo abre sesiones
cortas contra ella (una por llamada del cliente de datos).
"""
from typing import Optional
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
    async_sessionmaker
)
from sqlalchemy.orm import declarative_base

from vinos_wms.core.config import settings


# Base para modelos de SQLAlchemy
Base = declarative_base()


def _create_engine_args(database_url: str) -> dict:
    """
    Construye los argumentos del engine segun el tipo de base de datos.
    PostgreSQL usa pool de conexiones, SQLite no lo soporta.
    """
    args = {
        "echo": settings.DEBUG,
        "future": True,
    }

    # Configuracion de pool solo para PostgreSQL
    if "postgresql" in database_url:
        args.update({
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_pre_ping": True,  # Verifica conexion antes de usar
        })

    return args


def build_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """Crea un engine para la URL indicada (por defecto la de configuracion)."""
    url = database_url or settings.effective_database_url
    return create_async_engine(url, **_create_engine_args(url))


def build_session_factory(db_engine: AsyncEngine) -> async_sessionmaker:
    """Session factory ligada a un engine concreto."""
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False
    )


async def init_db(db_engine: AsyncEngine) -> None:
    """Crea las nueve tablas (solo bases de desarrollo o de pruebas)."""
    # Registrar los modelos en Base.metadata
    from vinos_wms.infrastructure.database import models  # noqa: F401

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db(db_engine: AsyncEngine) -> None:
    """Cierra las conexiones de la base de datos."""
    await db_engine.dispose()
