"""
Constantes del dominio de almacén.

Los valores de los Enum son los que se guardan en las tablas remotas,
por eso se mantienen en español.
"""
from enum import Enum


class UserRole(str, Enum):
    """Roles de usuario."""
    SUPER_USER = "SuperUsuario"
    ADMINISTRATIVE = "Administrativo"
    WAREHOUSE = "Almacen"


class PalletStatus(str, Enum):
    """Estados de un palet."""
    AVAILABLE = "Disponible"
    IN_PROCESS = "En Proceso"
    RESERVED = "Reservado"
    SHIPPED = "Expedido"


class PackStatus(str, Enum):
    """Estados de un pack."""
    CREATED = "Creado"
    IN_PROCESS = "En Proceso"
    SHIPPED = "Expedido"


class IncidentCategory(str, Enum):
    """Tipos de incidencia."""
    INTAKE = "Entrada"
    PACK_CREATION = "Creación de Pack"
    DISPATCH = "Salida"
    STOCK = "Stock"


class IncidentStatus(str, Enum):
    """Estados de una incidencia."""
    PENDING = "Pendiente"
    IN_REVIEW = "En Revisión"
    RESOLVED = "Solucionado"


class AuditAction(str, Enum):
    """Acciones registradas en la auditoria local."""
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"


class NotificationType(str, Enum):
    """Severidad de una notificacion."""
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


# Nombres de las tablas remotas
TABLE_PROFILES = "profiles"
TABLE_PRODUCTS = "products"
TABLE_ENTRADAS = "entradas"
TABLE_PALLETS = "pallets"
TABLE_PACKS = "packs"
TABLE_PACK_PRODUCTOS = "pack_productos"
TABLE_SALIDAS = "salidas"
TABLE_SALIDA_PACKS = "salida_packs"
TABLE_INCIDENCIAS = "incidencias"

# Orden de carga inicial (independiente, las relaciones se reconstruyen despues)
ALL_TABLES = (
    TABLE_PROFILES,
    TABLE_PRODUCTS,
    TABLE_ENTRADAS,
    TABLE_PALLETS,
    TABLE_PACKS,
    TABLE_PACK_PRODUCTOS,
    TABLE_SALIDAS,
    TABLE_SALIDA_PACKS,
    TABLE_INCIDENCIAS,
)

# Filtro "todas" en reportes de incidencias
ALL_STATUSES = "Todas"

# Prefijos de identificadores generados en el cliente
ID_PREFIX_ENTRADA = "ENT"
ID_PREFIX_PACK = "PACK"
ID_PREFIX_SALIDA = "SAL"
ID_PREFIX_INCIDENCIA = "INC"
ID_PREFIX_AUDIT_LOG = "log-"
