# Interfaz base para adaptadores de base de datos

import logging
import threading
import time
from abc import abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Tuple

from core.domain.errors import (
    CatalogError,
    DatabaseConnectionError,
    SQLExecutionError,
)
from core.domain.schema import ColumnInfo, TableInfo, TableKind
from core.ports.database_port import DatabasePort

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONNECTIONS = 5
DEFAULT_CONNECT_TIMEOUT = 15
CATALOG_TIMEOUT = 120.0


class DatabaseAdapter(DatabasePort):
    """
    Base de los adaptadores concretos.

    Las subclases aportan la conexión (`execute`) y el SQL de su dialecto;
    aquí se construyen las operaciones del puerto y se limita la cantidad
    de conexiones simultáneas.
    """

    def __init__(
        self,
        connection_string: str,
        max_connections: int = DEFAULT_MAX_CONNECTIONS,
        connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    ):
        self.connection_string = connection_string
        self.max_connections = max_connections
        self.connect_timeout = connect_timeout
        self._slots = threading.BoundedSemaphore(max_connections)
        self._parse_connection()

    def _parse_connection(self):
        """Valida y descompone el connection string (opcional)"""
        pass

    @abstractmethod
    def execute(
        self, query: str, params: Optional[Tuple] = None, timeout: Optional[float] = None
    ) -> Dict[str, Any]:
        """
        Ejecuta una query SQL.

        Args:
            query: SQL a ejecutar
            params: Parámetros para query parametrizada (opcional)
            timeout: Timeout de la sentencia en segundos (opcional)

        Returns:
            Dict con columns, data, row_count o error
        """
        pass

    @abstractmethod
    def _tables_query(self) -> str:
        """SQL que retorna (schema, nombre, tipo) de tablas y vistas de usuario"""
        pass

    @abstractmethod
    def _columns_query(self) -> str:
        """SQL parametrizado por (schema, tabla) que retorna (columna, tipo)"""
        pass

    @abstractmethod
    def _sample_query(self, table: TableInfo, column: ColumnInfo, limit: int) -> str:
        """SQL que retorna hasta `limit` valores no nulos y no vacíos como texto"""
        pass

    @staticmethod
    def _quote(identifier: str) -> str:
        return '"' + identifier.replace('"', '""') + '"'

    @contextmanager
    def _connection_slot(self, timeout: Optional[float]):
        acquired = self._slots.acquire(timeout=timeout) if timeout is not None else self._slots.acquire()
        if not acquired:
            raise SQLExecutionError(f"Sin conexiones libres tras {timeout:.1f}s")
        try:
            yield
        finally:
            self._slots.release()

    def _fetch(
        self, query: str, params: Optional[Tuple] = None, timeout: Optional[float] = None
    ) -> List[tuple]:
        """Ejecuta y retorna las filas; lanza SQLExecutionError si la DB falla"""
        start = time.monotonic()
        with self._connection_slot(timeout):
            if timeout is not None:
                timeout = max(0.001, timeout - (time.monotonic() - start))
            result = self.execute(query, params, timeout=timeout)
        if "error" in result:
            raise SQLExecutionError(result["error"], query=query)
        return result.get("data", [])

    def ping(self, timeout: Optional[float] = None) -> None:
        timeout = timeout if timeout is not None else float(self.connect_timeout)
        try:
            self._fetch("SELECT 1", timeout=timeout)
        except SQLExecutionError as e:
            raise DatabaseConnectionError(f"Error de conexión: {e.message}")

    def list_tables(self) -> List[TableInfo]:
        try:
            rows = self._fetch(self._tables_query(), timeout=CATALOG_TIMEOUT)
        except SQLExecutionError as e:
            raise CatalogError(f"Error obteniendo tablas: {e.message}")
        return [
            TableInfo(schema=r[0], name=r[1], kind=TableKind.from_catalog(r[2]))
            for r in rows
        ]

    def list_columns(
        self, table: TableInfo, timeout: Optional[float] = None
    ) -> List[ColumnInfo]:
        rows = self._fetch(self._columns_query(), params=(table.schema, table.name), timeout=timeout)
        return [ColumnInfo(name=r[0], declared_type=r[1] or "") for r in rows]

    def sample_values(
        self,
        table: TableInfo,
        column: ColumnInfo,
        limit: int,
        timeout: Optional[float] = None,
    ) -> List[str]:
        query = self._sample_query(table, column, int(limit))
        rows = self._fetch(query, timeout=timeout)
        values = []
        for r in rows:
            if r[0] is None:
                continue
            value = r[0] if isinstance(r[0], str) else str(r[0])
            if value != "":
                values.append(value)
        return values[:limit]
