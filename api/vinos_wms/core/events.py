"""
Manejadores de eventos de inicio y cierre de la aplicacion.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from fastapi import FastAPI
from loguru import logger

from vinos_wms.application.services.view_state import ViewStateLoader
from vinos_wms.core.config import settings
from vinos_wms.core.context import AppContext
from vinos_wms.infrastructure.database.session import close_db, init_db


def startup_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de inicio de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de inicio
    """
    async def startup() -> None:
        """Crea el contexto, carga la auditoria local y el estado de vista."""
        logger.info(f"Iniciando {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Entorno: {settings.ENVIRONMENT}")

        if settings.LOG_FILE:
            logger.add(
                settings.LOG_FILE,
                rotation="500 MB",
                retention="10 days",
                level=settings.LOG_LEVEL,
            )

        context = getattr(app.state, "context", None)
        if context is None:
            context = AppContext.build()
            app.state.context = context

        if settings.DB_CREATE_TABLES and context.engine is not None:
            await init_db(context.engine)
            logger.info("Tablas creadas en la base de datos de desarrollo")

        context.audit_log.load()

        # Un fallo remoto aqui no impide arrancar: se usan datos de demostracion
        report = await ViewStateLoader(context.client, context.state, context.notifications).load()
        if report.used_fallback:
            logger.warning(f"Tablas con datos de demostracion: {', '.join(report.fallback_tables)}")

        logger.success("Aplicacion iniciada correctamente")
        _print_available_urls()

    return startup


def _print_available_urls() -> None:
    """Imprime las URLs disponibles de la aplicacion."""
    access_host = "localhost" if settings.HOST == "0.0.0.0" else settings.HOST
    base_url = f"http://{access_host}:{settings.PORT}"

    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")
    logger.opt(colors=True).info("<bold><green>URLS DISPONIBLES:</green></bold>")
    logger.opt(colors=True).info(f"<cyan>  Swagger UI:  {base_url}/docs</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Health:      {base_url}/health</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Estado BD:   {base_url}/api/v1/status/</cyan>")
    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")


def shutdown_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de cierre de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de cierre
    """
    async def shutdown() -> None:
        """Libera las conexiones de base de datos."""
        logger.info("Cerrando aplicacion...")
        context = getattr(app.state, "context", None)
        if context is not None and context.engine is not None:
            await close_db(context.engine)
            logger.info("Conexiones de base de datos cerradas")
        logger.success("Aplicacion cerrada correctamente")

    return shutdown


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Une los manejadores de inicio y cierre en el lifespan de FastAPI."""
    await startup_handler(app)()
    try:
        yield
    finally:
        await shutdown_handler(app)()
