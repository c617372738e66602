"""
Casos de uso de la aplicacion.
"""
from .auth_use_cases import AuthUseCases
from .entrada_use_cases import EntradaUseCases
from .incidencia_use_cases import IncidenciaUseCases
from .pack_use_cases import PackUseCases
from .product_use_cases import ProductUseCases
from .report_use_cases import ReportUseCases
from .salida_use_cases import SalidaUseCases
from .sync_use_cases import SyncUseCases
from .user_use_cases import UserUseCases

__all__ = [
    "AuthUseCases",
    "EntradaUseCases",
    "IncidenciaUseCases",
    "PackUseCases",
    "ProductUseCases",
    "ReportUseCases",
    "SalidaUseCases",
    "SyncUseCases",
    "UserUseCases",
]
