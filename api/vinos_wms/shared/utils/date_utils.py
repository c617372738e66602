from datetime import date, datetime, time
from typing import Optional, Tuple, Union

from vinos_wms.shared.exceptions.domain import ValidationException

DateLike = Union[date, datetime, str]


def parse_datetime(value: Optional[DateLike]) -> Optional[datetime]:
    """
    Convierte a datetime los valores que llegan de la base remota o de formularios.
    Acepta ISO8601 ("2025-10-13T09:15:00"), formato con espacio
    ("2025-10-13 09:15:00") y fechas sin hora.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    text = str(value).strip().replace("Z", "+00:00")
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise ValidationException(f"Fecha no valida: {value}")


def parse_date(value: Optional[DateLike]) -> Optional[date]:
    """Igual que parse_datetime pero descarta la hora."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    dt = parse_datetime(value)
    return dt.date() if dt else None


def movement_range(start: Optional[DateLike], end: Optional[DateLike]) -> Tuple[datetime, datetime]:
    """
    Rango cerrado para el reporte de movimientos.
    El dia final se incluye completo (hasta 23:59:59.999999).
    """
    if not start or not end:
        raise ValidationException("Por favor, seleccione un rango de fechas.", field="start_date")
    start_dt = datetime.combine(parse_date(start), time.min)
    end_dt = datetime.combine(parse_date(end), time.max)
    if end_dt < start_dt:
        raise ValidationException("La fecha de fin es anterior a la de inicio.", field="end_date")
    return start_dt, end_dt


def format_es(value: Optional[DateLike], with_time: bool = True) -> str:
    """Formato dd/mm/aaaa [hh:mm:ss] usado en documentos impresos."""
    dt = parse_datetime(value)
    if dt is None:
        return ""
    return dt.strftime("%d/%m/%Y %H:%M:%S" if with_time else "%d/%m/%Y")
