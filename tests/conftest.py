# Configuración central de pytest y fixtures compartidos

import pytest
import os
import sqlite3
import sys
import threading
from typing import Dict, List, Optional, Set, Tuple

# Asegurar que el directorio raíz esté en el path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.domain.errors import CatalogError, SQLExecutionError  # noqa: E402
from core.domain.schema import ColumnInfo, TableInfo  # noqa: E402
from core.ports.database_port import DatabasePort  # noqa: E402
from core.ports.sink_port import ResultSink  # noqa: E402


# MARKERS PERSONALIZADOS

def pytest_configure(config):
    """Registrar markers personalizados"""
    config.addinivalue_line(
        "markers", "unit: Tests unitarios rápidos (sin servicios externos)"
    )
    config.addinivalue_line(
        "markers", "integration: Tests de integración (requieren una DB real)"
    )


# DOBLES DE PRUEBA

class FakeDatabase(DatabasePort):
    """
    Base de datos en memoria.

    columns: {tabla: [ColumnInfo]}
    values: {(tabla, columna): [valores]}
    blocking: columnas cuyo muestreo espera hasta agotar el timeout recibido
    """

    def __init__(
        self,
        columns: Optional[Dict[str, List[ColumnInfo]]] = None,
        values: Optional[Dict[Tuple[str, str], List[str]]] = None,
        sample_errors: Optional[Set[str]] = None,
        listing_errors: Optional[Set[str]] = None,
        blocking: Optional[Set[str]] = None,
        catalog_error: bool = False,
    ):
        self.columns = columns or {}
        self.values = values or {}
        self.sample_errors = sample_errors or set()
        self.listing_errors = listing_errors or set()
        self.blocking = blocking or set()
        self.catalog_error = catalog_error
        self.release = threading.Event()
        self.sampled: List[str] = []
        self._lock = threading.Lock()

    def ping(self, timeout=None):
        return None

    def list_tables(self):
        if self.catalog_error:
            raise CatalogError("Error obteniendo tablas: acceso denegado")
        return [TableInfo(schema="dbo", name=name) for name in self.columns]

    def list_columns(self, table, timeout=None):
        if table.name in self.listing_errors:
            raise SQLExecutionError(f"Sin permisos sobre {table.name}")
        return list(self.columns.get(table.name, []))

    def sample_values(self, table, column, limit, timeout=None):
        with self._lock:
            self.sampled.append(column.name)
        if column.name in self.blocking:
            # Un poco más que el timeout para que el presupuesto quede vencido
            self.release.wait(None if timeout is None else timeout + 0.05)
            raise SQLExecutionError(f"Timeout muestreando {column.name}")
        if column.name in self.sample_errors:
            raise SQLExecutionError(f"Error muestreando {column.name}")
        return list(self.values.get((table.name, column.name), []))[:limit]


class ListSink(ResultSink):
    """Sink que guarda los resultados en una lista"""

    def __init__(self):
        self.results = []

    def emit(self, result):
        self.results.append(result)


# FIXTURES

@pytest.fixture
def fake_db_factory():
    """Crea FakeDatabase y libera los hilos bloqueados al terminar el test"""
    created = []

    def make(**kwargs) -> FakeDatabase:
        db = FakeDatabase(**kwargs)
        created.append(db)
        return db

    yield make

    for db in created:
        db.release.set()


@pytest.fixture
def sink():
    return ListSink()


@pytest.fixture
def users_table():
    return TableInfo(schema="dbo", name="users")


@pytest.fixture
def sqlite_path(tmp_path):
    """Base SQLite con clientes, direcciones y una vista"""
    path = tmp_path / "clientes.db"
    conn = sqlite3.connect(path)
    conn.executescript(
        """
        CREATE TABLE clients (
            id INTEGER PRIMARY KEY,
            col1 TEXT,
            phone TEXT,
            comment TEXT
        );
        INSERT INTO clients (col1, phone, comment) VALUES
            ('ivanov@mail.ru', '+7 (912) 345-67-89', 'ok'),
            ('petrov@mail.ru', '+7 (912) 345-67-90', ''),
            ('sidorova@yandex.ru', NULL, NULL);

        CREATE TABLE places (
            id INTEGER PRIMARY KEY,
            addr TEXT
        );
        INSERT INTO places (addr) VALUES
            ('ул. Ленина, дом 5'),
            ('улица Мира, дом 12');

        CREATE VIEW v_clients AS SELECT col1 FROM clients;
        """
    )
    conn.commit()
    conn.close()
    return str(path)
