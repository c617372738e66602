"""
Configuración de fixtures para pytest.

Cada test usa su propia base SQLite en tmp_path (mismo esquema que la base
remota) y su propio archivo de almacenamiento local.
"""
from typing import AsyncGenerator

import pytest

from vinos_wms.application.services.seed_sync_service import SeedSyncService
from vinos_wms.application.services.view_state import ViewStateLoader
from vinos_wms.core.context import AppContext
from vinos_wms.domain.entities import User
from vinos_wms.infrastructure.database.session import close_db, init_db


class FakeClock:
    """Reloj manual para las notificaciones."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
async def context(tmp_path, clock) -> AsyncGenerator[AppContext, None]:
    """Contexto completo sobre una base vacía con las nueve tablas creadas."""
    ctx = AppContext.build(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'wms.db'}",
        storage_path=tmp_path / "local_storage.json",
    )
    ctx.notifications._clock = clock
    await init_db(ctx.engine)
    yield ctx
    await close_db(ctx.engine)


@pytest.fixture
async def seeded_context(context: AppContext) -> AppContext:
    """Contexto con los datos de demostración subidos y cargados."""
    result = await SeedSyncService(context.client, context.security).sync()
    assert result.success
    await ViewStateLoader(context.client, context.state, context.notifications).load()
    return context


@pytest.fixture
def operator() -> User:
    return User(id=2, name="Juan Almacén", email="juan@vinos.com")
