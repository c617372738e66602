"""
Router principal de la API v1.
Agrupa todos los endpoints de la version 1.
"""
from fastapi import APIRouter

from vinos_wms.api.v1.endpoints import (
    auditoria,
    auth,
    entradas,
    etiquetas,
    incidencias,
    notificaciones,
    packs,
    productos,
    reportes,
    salidas,
    stock,
    sync,
    usuarios,
)


# Router principal de la API v1
api_router = APIRouter(prefix="/v1")

# Incluir routers de endpoints especificos
api_router.include_router(auth.router)
api_router.include_router(entradas.router)
api_router.include_router(stock.router)
api_router.include_router(packs.router)
api_router.include_router(salidas.router)
api_router.include_router(incidencias.router)
api_router.include_router(usuarios.router)
api_router.include_router(productos.router)
api_router.include_router(reportes.router)
api_router.include_router(etiquetas.router)
api_router.include_router(auditoria.router)
api_router.include_router(notificaciones.router)
api_router.include_router(sync.router)
api_router.include_router(sync.status_router)
