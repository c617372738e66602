"""
Tipos puros del acceso remoto.

Se mantienen libres de I/O para poder testearlos fácilmente.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

from vinos_wms.shared.exceptions.domain import ValidationException
from vinos_wms.shared.exceptions.remote import RemoteCallException

T = TypeVar("T")

Row = Dict[str, Any]
Transform = Callable[[Any], Any]


class MappingError(ValueError):
    """Fila remota que no se puede convertir en entidad."""


@dataclass(frozen=True)
class DataError:
    """Error devuelto por la base remota (nunca se lanza desde el cliente)."""

    message: str
    code: Optional[str] = None
    table: Optional[str] = None


@dataclass
class QueryResult:
    """Resultado de una llamada remota: filas afectadas o un error."""

    data: List[Row] = field(default_factory=list)
    error: Optional[DataError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def first(self) -> Optional[Row]:
        return self.data[0] if self.data else None

    def raise_for_error(self, context: str) -> "QueryResult":
        """Convierte el error (si lo hay) en RemoteCallException."""
        if self.error is not None:
            raise_data_error(self.error, context)
        return self


def raise_data_error(error: DataError, context: str) -> None:
    raise RemoteCallException(
        f"{context}: {error.message}",
        remote_message=error.message,
        table=error.table,
    )


@dataclass(frozen=True)
class FieldMapping:
    """
    Define el mapeo de un atributo de entidad a una columna remota.

    - attribute: nombre del atributo en la entidad Python
    - column: nombre de la columna remota
    - to_column: transformación opcional antes de enviar el valor
    - from_column: transformación opcional al leer la fila
    - required: si True, la columna debe venir en la fila leída
    """

    attribute: str
    column: str
    to_column: Optional[Transform] = None
    from_column: Optional[Transform] = None
    required: bool = False


@dataclass(frozen=True)
class TableMapping:
    """Traducción entre una tabla remota y su entidad."""

    table: str
    factory: Callable[..., Any]
    primary_key: Sequence[str]
    fields: Sequence[FieldMapping]

    def to_row(self, entity: Any, exclude_pk: bool = False) -> Row:
        row: Row = {}
        for m in self.fields:
            if exclude_pk and m.column in self.primary_key:
                continue
            value = getattr(entity, m.attribute)
            row[m.column] = m.to_column(value) if (m.to_column and value is not None) else value
        return row

    def from_row(self, row: Row) -> Any:
        kwargs: Dict[str, Any] = {}
        for m in self.fields:
            if m.column not in row:
                if m.required:
                    raise MappingError(
                        f"Fila de '{self.table}' sin columna requerida '{m.column}'"
                    )
                continue
            value = row[m.column]
            if m.required and value is None:
                raise MappingError(
                    f"Fila de '{self.table}' con '{m.column}' vacío"
                )
            try:
                kwargs[m.attribute] = m.from_column(value) if (m.from_column and value is not None) else value
            except (TypeError, ValueError, ValidationException) as e:
                raise MappingError(f"Valor no válido en '{self.table}.{m.column}': {value!r}") from e
        try:
            return self.factory(**kwargs)
        except (TypeError, ValueError) as e:
            raise MappingError(f"Fila de '{self.table}' no válida: {e}") from e

    def from_rows(self, rows: Sequence[Row]) -> List[Any]:
        return [self.from_row(r) for r in rows]

    def key_filter(self, entity: Any) -> Row:
        """Filtro {columna_pk: valor} que identifica la fila de la entidad."""
        row = self.to_row(entity)
        return {col: row[col] for col in self.primary_key}

    @property
    def conflict_columns(self) -> str:
        return ",".join(self.primary_key)
