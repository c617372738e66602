"""
DTOs de las entidades del almacén.
Definen la estructura de datos que entra y sale por la API.
"""
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from vinos_wms.shared.constants.warehouse_constants import (
    IncidentCategory,
    IncidentStatus,
    PackStatus,
    PalletStatus,
)


def _not_null(value):
    """Rechaza el null explícito en actualizaciones parciales."""
    if value is None:
        raise ValueError("El campo no puede ser nulo")
    return value


class ProductDTO(BaseModel):
    """Producto del catálogo (también sirve para el upsert)."""

    id: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    bottle_ean: str = ""
    case_ean: str = ""

    class Config:
        from_attributes = True


class PalletDTO(BaseModel):
    id: str
    product_id: str
    lot: str
    sscc: str
    cases_per_pallet: int
    bottles_per_case: int
    entry_date: Optional[date] = None
    status: PalletStatus
    intake_id: Optional[str] = None
    total_bottles: int

    class Config:
        from_attributes = True


class EntradaCreateDTO(BaseModel):
    """DTO para registrar una entrada. Los palets no se crean aquí."""

    delivery_note_id: str = Field(..., min_length=1, max_length=100, description="Albarán de entrada")
    truck_plate: str = Field("", max_length=50)
    carrier: str = ""
    driver: str = ""
    timestamp: datetime
    declared_pallets: int = Field(0, ge=0, description="Número de palets declarados en el albarán")
    incident: Optional[str] = None
    incident_images: List[str] = Field(default_factory=list)
    pallet_label_images: List[str] = Field(default_factory=list)


class EntradaUpdateDTO(BaseModel):
    """DTO para actualizar una entrada (solo los campos enviados)."""

    delivery_note_id: Optional[str] = Field(None, min_length=1, max_length=100)
    truck_plate: Optional[str] = None
    carrier: Optional[str] = None
    driver: Optional[str] = None
    timestamp: Optional[datetime] = None
    declared_pallets: Optional[int] = Field(None, ge=0)
    incident: Optional[str] = None
    incident_images: Optional[List[str]] = None
    pallet_label_images: Optional[List[str]] = None

    @field_validator(
        "delivery_note_id", "truck_plate", "carrier", "driver", "timestamp",
        "declared_pallets", "incident_images", "pallet_label_images",
    )
    @classmethod
    def value_cannot_be_null(cls, v):
        """Solo la incidencia se puede borrar enviando null."""
        return _not_null(v)


class EntradaResponseDTO(BaseModel):
    id: str
    delivery_note_id: str
    truck_plate: str
    carrier: str
    driver: str
    timestamp: datetime
    declared_pallets: int
    pallets: List[PalletDTO] = Field(default_factory=list)
    incident: Optional[str] = None
    incident_images: List[str] = Field(default_factory=list)
    pallet_label_images: List[str] = Field(default_factory=list)

    class Config:
        from_attributes = True


class PackItemDTO(BaseModel):
    """Línea de pack; la cantidad no se valida contra el stock."""

    product_id: str = Field(..., min_length=1)
    lot: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0, description="Botellas")

    class Config:
        from_attributes = True


class PackCreateDTO(BaseModel):
    customer_order: str = Field(..., min_length=1, max_length=100, description="Pedido del cliente")
    items: List[PackItemDTO] = Field(..., min_length=1)


class PackUpdateDTO(BaseModel):
    customer_order: Optional[str] = Field(None, min_length=1, max_length=100)
    status: Optional[PackStatus] = None
    label_url: Optional[str] = None
    items: Optional[List[PackItemDTO]] = Field(None, min_length=1)

    @field_validator("customer_order", "status", "label_url", "items")
    @classmethod
    def value_cannot_be_null(cls, v):
        return _not_null(v)


class PackResponseDTO(BaseModel):
    id: str
    customer_order: str
    created_at: datetime
    status: PackStatus
    label_url: str
    items: List[PackItemDTO] = Field(default_factory=list)
    total_bottles: int

    class Config:
        from_attributes = True


class SalidaCreateDTO(BaseModel):
    """DTO para registrar una salida con los packs que se expiden."""

    delivery_note_id: str = Field(..., min_length=1, max_length=100, description="Albarán de salida")
    client: str = Field(..., min_length=1, max_length=255)
    timestamp: datetime
    driver: str = ""
    truck_plate: str = ""
    carrier: str = ""
    pack_ids: List[str] = Field(default_factory=list)


class SalidaUpdateDTO(BaseModel):
    delivery_note_id: Optional[str] = Field(None, min_length=1, max_length=100)
    client: Optional[str] = Field(None, min_length=1, max_length=255)
    timestamp: Optional[datetime] = None
    driver: Optional[str] = None
    truck_plate: Optional[str] = None
    carrier: Optional[str] = None

    @field_validator("delivery_note_id", "client", "timestamp", "driver", "truck_plate", "carrier")
    @classmethod
    def value_cannot_be_null(cls, v):
        return _not_null(v)


class SalidaResponseDTO(BaseModel):
    id: str
    delivery_note_id: str
    client: str
    timestamp: datetime
    driver: str
    truck_plate: str
    carrier: str
    packs: List[PackResponseDTO] = Field(default_factory=list)

    class Config:
        from_attributes = True


class IncidenciaCreateDTO(BaseModel):
    """La fecha y quien reporta las pone el sistema."""

    category: IncidentCategory
    description: str = Field(..., min_length=1)
    status: IncidentStatus = IncidentStatus.PENDING


class IncidenciaUpdateDTO(BaseModel):
    category: Optional[IncidentCategory] = None
    description: Optional[str] = Field(None, min_length=1)
    status: Optional[IncidentStatus] = None

    @field_validator("category", "description", "status")
    @classmethod
    def value_cannot_be_null(cls, v):
        return _not_null(v)


class IncidenciaResponseDTO(BaseModel):
    id: str
    category: IncidentCategory
    description: str
    date: date
    status: IncidentStatus
    reported_by: str

    class Config:
        from_attributes = True


class StockOverviewDTO(BaseModel):
    pallets: List[PalletDTO]
    packs: List[PackResponseDTO]
