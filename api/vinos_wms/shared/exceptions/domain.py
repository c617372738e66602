"""
Errores de negocio del almacén (entradas, packs, salidas, incidencias...).
"""
from typing import Any, Optional

from vinos_wms.shared.exceptions.base import AppException


class DomainException(AppException):
    status_code = 400
    error_code = "DOMAIN_ERROR"


class EntityNotFoundException(DomainException):
    """El id no existe en el estado de vista (o en remoto)."""

    status_code = 404
    error_code = "ENTITY_NOT_FOUND"

    def __init__(self, entity_name: str, entity_id: Any):
        super().__init__(
            f"{entity_name} con ID {entity_id} no encontrado",
            details={"entity": entity_name, "id": str(entity_id)},
        )


class EntityAlreadyExistsException(DomainException):
    status_code = 409
    error_code = "ENTITY_ALREADY_EXISTS"

    def __init__(self, entity_name: str, field: str, value: Any, message: Optional[str] = None):
        super().__init__(
            message or f"{entity_name} con {field}={value} ya existe",
            details={"entity": entity_name, "field": field, "value": str(value)},
        )


class ValidationException(DomainException):
    """Datos de entrada incompletos o incoherentes (rangos de fechas, etiquetas)."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details={"field": field} if field else None)
