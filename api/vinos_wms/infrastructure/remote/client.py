"""
Cliente de datos contra la base remota.

Cada llamada abre su propia sesión corta y devuelve un QueryResult:
las filas afectadas o un DataError. Los errores remotos nunca se lanzan,
quien llama decide qué hacer con ellos.

Dentro de transaction() todas las llamadas comparten una sesión; si alguna
devuelve error la transacción completa se deshace al salir.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, Iterable, List, Optional, Sequence

from loguru import logger
from sqlalchemy import MetaData, Table, and_, delete, func, insert, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from vinos_wms.infrastructure.database.session import Base
from vinos_wms.shared.constants.warehouse_constants import TABLE_PRODUCTS
from .types import DataError, QueryResult, Row

UNKNOWN_TABLE = "UNKNOWN_TABLE"
UNKNOWN_COLUMN = "UNKNOWN_COLUMN"
MISSING_FILTER = "MISSING_FILTER"
UNSUPPORTED_DIALECT = "UNSUPPORTED_DIALECT"

Filters = Optional[Dict[str, Any]]
Operation = Callable[[AsyncSession, Table], Awaitable[List[Row]]]


def _error_message(exc: Exception) -> str:
    # Los errores del driver vienen envueltos; el mensaje útil es el original
    orig = getattr(exc, "orig", None)
    return str(orig or exc).strip()


def _rows(result) -> List[Row]:
    return [dict(r._mapping) for r in result]


class DataClient:
    """Consultas y mutaciones declarativas sobre las tablas remotas."""

    def __init__(
        self,
        session_factory: async_sessionmaker,
        metadata: MetaData = Base.metadata,
        *,
        session: Optional[AsyncSession] = None,
    ) -> None:
        # Registrar los modelos en metadata
        from vinos_wms.infrastructure.database import models  # noqa: F401

        self._session_factory = session_factory
        self._metadata = metadata
        self._session = session
        self.error: Optional[DataError] = None

    # ------------------------------------------------------------------
    # Infraestructura
    # ------------------------------------------------------------------

    @property
    def in_transaction(self) -> bool:
        return self._session is not None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def _table(self, name: str) -> Optional[Table]:
        return self._metadata.tables.get(name)

    def _check_columns(self, table: Table, columns: Iterable[str]) -> Optional[DataError]:
        for col in columns:
            if col not in table.c:
                return DataError(
                    f"Columna desconocida '{col}' en '{table.name}'",
                    code=UNKNOWN_COLUMN,
                    table=table.name,
                )
        return None

    def _where(self, table: Table, filters: Filters) -> list:
        clauses = []
        for col, value in (filters or {}).items():
            column = table.c[col]
            if value is None:
                clauses.append(column.is_(None))
            elif isinstance(value, (list, tuple, set, frozenset)):
                clauses.append(column.in_(list(value)))
            else:
                clauses.append(column == value)
        return clauses

    @asynccontextmanager
    async def _open(self) -> AsyncIterator[AsyncSession]:
        if self._session is not None:
            yield self._session
            return
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    def _fail(self, error: DataError) -> QueryResult:
        if self.in_transaction and self.error is None:
            self.error = error
        return QueryResult(data=[], error=error)

    async def _run(self, table_name: str, op_name: str, operation: Operation, columns: Iterable[str] = ()) -> QueryResult:
        table = self._table(table_name)
        if table is None:
            logger.error(f"Tabla remota desconocida: {table_name}")
            return self._fail(DataError(f"Tabla desconocida: {table_name}", code=UNKNOWN_TABLE, table=table_name))

        column_error = self._check_columns(table, columns)
        if column_error:
            logger.error(column_error.message)
            return self._fail(column_error)

        if self.in_transaction and self.failed:
            # La transacción ya está perdida: no se envían más sentencias
            return QueryResult(data=[], error=self.error)

        try:
            async with self._open() as session:
                data = await operation(session, table)
            return QueryResult(data=data)
        except (SQLAlchemyError, OSError) as e:
            message = _error_message(e)
            logger.error(f"Error remoto en {op_name} '{table_name}': {message}")
            return self._fail(DataError(message, code=type(e).__name__, table=table_name))

    # ------------------------------------------------------------------
    # Operaciones
    # ------------------------------------------------------------------

    async def select(
        self,
        table: str,
        filters: Filters = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> QueryResult:
        """Lee filas. Un valor lista en filters es IN; None es IS NULL."""

        async def op(session: AsyncSession, t: Table) -> List[Row]:
            stmt = select(t).where(*self._where(t, filters))
            if order_by:
                col = t.c[order_by]
                stmt = stmt.order_by(col.desc() if descending else col.asc())
            if limit is not None:
                stmt = stmt.limit(limit)
            return _rows(await session.execute(stmt))

        columns = list(filters or {}) + ([order_by] if order_by else [])
        return await self._run(table, "select", op, columns)

    async def insert(self, table: str, rows: Sequence[Row]) -> QueryResult:
        rows = list(rows)
        if not rows:
            return QueryResult(data=[])

        async def op(session: AsyncSession, t: Table) -> List[Row]:
            await session.execute(insert(t), rows)
            return rows

        return await self._run(table, "insert", op, rows[0].keys())

    async def upsert(self, table: str, rows: Sequence[Row], on_conflict: Sequence[str]) -> QueryResult:
        """
        INSERT ... ON CONFLICT (on_conflict) DO UPDATE.

        Si todas las columnas forman parte de la clave no hay nada que
        actualizar y se usa DO NOTHING.
        """
        rows = list(rows)
        if not rows:
            return QueryResult(data=[])
        conflict = list(on_conflict)

        async def op(session: AsyncSession, t: Table) -> List[Row]:
            dialect = session.get_bind().dialect.name
            if dialect == "postgresql":
                from sqlalchemy.dialects.postgresql import insert as dialect_insert
            elif dialect == "sqlite":
                from sqlalchemy.dialects.sqlite import insert as dialect_insert
            else:
                raise NotImplementedError(dialect)

            stmt = dialect_insert(t).values(rows)
            set_ = {c: stmt.excluded[c] for c in rows[0] if c not in conflict}
            if set_:
                stmt = stmt.on_conflict_do_update(index_elements=conflict, set_=set_)
            else:
                stmt = stmt.on_conflict_do_nothing(index_elements=conflict)
            await session.execute(stmt)
            return rows

        try:
            return await self._run(table, "upsert", op, list(rows[0].keys()) + conflict)
        except NotImplementedError as e:
            return self._fail(DataError(f"Upsert no soportado para el dialecto {e}", code=UNSUPPORTED_DIALECT, table=table))

    async def update(self, table: str, values: Row, filters: Dict[str, Any]) -> QueryResult:
        """Actualiza las filas que cumplen filters y devuelve su estado final."""
        if not filters:
            return self._fail(DataError("update sin filtro", code=MISSING_FILTER, table=table))

        async def op(session: AsyncSession, t: Table) -> List[Row]:
            where = self._where(t, filters)
            pk_cols = list(t.primary_key.columns)
            keys = (await session.execute(select(*pk_cols).where(*where))).all()
            if not keys:
                return []
            await session.execute(update(t).where(*where).values(**values))
            by_key = or_(*[and_(*[c == v for c, v in zip(pk_cols, key)]) for key in keys])
            return _rows(await session.execute(select(t).where(by_key)))

        return await self._run(table, "update", op, list(values) + list(filters))

    async def delete(self, table: str, filters: Dict[str, Any]) -> QueryResult:
        """Borra las filas que cumplen filters y las devuelve."""
        if not filters:
            return self._fail(DataError("delete sin filtro", code=MISSING_FILTER, table=table))

        async def op(session: AsyncSession, t: Table) -> List[Row]:
            where = self._where(t, filters)
            removed = _rows(await session.execute(select(t).where(*where)))
            if removed:
                await session.execute(delete(t).where(*where))
            return removed

        return await self._run(table, "delete", op, filters)

    async def count(self, table: str) -> QueryResult:
        async def op(session: AsyncSession, t: Table) -> List[Row]:
            total = (await session.execute(select(func.count()).select_from(t))).scalar_one()
            return [{"count": int(total)}]

        return await self._run(table, "count", op)

    async def ping(self) -> str:
        """Estado de conexión: 'connected' o 'error'."""
        result = await self.count(TABLE_PRODUCTS)
        return "connected" if result.ok else "error"

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["DataClient"]:
        """
        Cliente ligado a una única sesión.

        Commit al salir si ninguna llamada devolvió error; rollback en otro
        caso o si escapa una excepción. El error queda en tx.error.
        """
        async with self._session_factory() as session:
            tx = DataClient(self._session_factory, self._metadata, session=session)
            try:
                yield tx
            except Exception:
                await session.rollback()
                raise

            if tx.failed:
                logger.warning(f"Transacción deshecha: {tx.error.message}")
                await session.rollback()
                return
            try:
                await session.commit()
            except (SQLAlchemyError, OSError) as e:
                await session.rollback()
                tx.error = DataError(_error_message(e), code=type(e).__name__)
                logger.error(f"Error remoto al confirmar la transacción: {tx.error.message}")
