"""
DTOs de sincronización, auditoría, notificaciones y estadísticas.
"""
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from vinos_wms.shared.constants.warehouse_constants import AuditAction, NotificationType, UserRole


class SyncResponseDTO(BaseModel):
    success: bool
    error: Optional[str] = None
    logs: List[str] = Field(default_factory=list)


class LoadResponseDTO(BaseModel):
    fallback_tables: List[str] = Field(default_factory=list)


class ConnectionStatusDTO(BaseModel):
    status: str = Field(..., description="'connected' o 'error'")


class AuditLogEntryDTO(BaseModel):
    id: str
    timestamp: str
    user_id: int
    user_name: str
    user_role: UserRole
    action: AuditAction
    entity: str
    entity_id: Union[int, str]

    class Config:
        from_attributes = True


class NotificationDTO(BaseModel):
    id: int
    message: str
    type: NotificationType

    class Config:
        from_attributes = True


class ProductStockDTO(BaseModel):
    product_id: str
    name: str
    bottles: int

    class Config:
        from_attributes = True


class DashboardStatsDTO(BaseModel):
    stock_by_product: List[ProductStockDTO]
    incidents_by_status: Dict[str, int]


class LabelSearchResultDTO(BaseModel):
    id: str
    type: str
    description: str
    label_url: str

    class Config:
        from_attributes = True


class GenericLabelRequestDTO(BaseModel):
    title: str = Field("Título de Etiqueta")
    line1: str = ""
    line2: str = ""
    qr_content: str = Field("https://misolucionenvinos.com")
