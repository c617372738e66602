"""
Entidades del dominio.
"""
from vinos_wms.domain.entities.warehouse import (
    Product,
    Pallet,
    Entrada,
    PackItem,
    Pack,
    Salida,
    Incidencia,
)
from vinos_wms.domain.entities.user import User
from vinos_wms.domain.entities.audit_log import AuditLogEntry
from vinos_wms.domain.entities.notification import Notification

__all__ = [
    "Product",
    "Pallet",
    "Entrada",
    "PackItem",
    "Pack",
    "Salida",
    "Incidencia",
    "User",
    "AuditLogEntry",
    "Notification",
]
