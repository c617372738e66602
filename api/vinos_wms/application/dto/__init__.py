"""
Data Transfer Objects (DTOs) para la capa de aplicacion.
"""
from .warehouse_dto import (
    ProductDTO,
    PalletDTO,
    EntradaCreateDTO,
    EntradaUpdateDTO,
    EntradaResponseDTO,
    PackItemDTO,
    PackCreateDTO,
    PackUpdateDTO,
    PackResponseDTO,
    SalidaCreateDTO,
    SalidaUpdateDTO,
    SalidaResponseDTO,
    IncidenciaCreateDTO,
    IncidenciaUpdateDTO,
    IncidenciaResponseDTO,
    StockOverviewDTO,
)
from .auth_dto import (
    LoginRequestDTO,
    UserCreateDTO,
    RegisterRequestDTO,
    UserUpdateDTO,
    UserResponseDTO,
    TokenResponseDTO,
)
from .system_dto import (
    SyncResponseDTO,
    LoadResponseDTO,
    ConnectionStatusDTO,
    AuditLogEntryDTO,
    NotificationDTO,
    ProductStockDTO,
    DashboardStatsDTO,
    LabelSearchResultDTO,
    GenericLabelRequestDTO,
)

__all__ = [
    "ProductDTO",
    "PalletDTO",
    "EntradaCreateDTO",
    "EntradaUpdateDTO",
    "EntradaResponseDTO",
    "PackItemDTO",
    "PackCreateDTO",
    "PackUpdateDTO",
    "PackResponseDTO",
    "SalidaCreateDTO",
    "SalidaUpdateDTO",
    "SalidaResponseDTO",
    "IncidenciaCreateDTO",
    "IncidenciaUpdateDTO",
    "IncidenciaResponseDTO",
    "StockOverviewDTO",
    "LoginRequestDTO",
    "UserCreateDTO",
    "RegisterRequestDTO",
    "UserUpdateDTO",
    "UserResponseDTO",
    "TokenResponseDTO",
    "SyncResponseDTO",
    "LoadResponseDTO",
    "ConnectionStatusDTO",
    "AuditLogEntryDTO",
    "NotificationDTO",
    "ProductStockDTO",
    "DashboardStatsDTO",
    "LabelSearchResultDTO",
    "GenericLabelRequestDTO",
]
