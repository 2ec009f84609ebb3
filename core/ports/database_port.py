# Puerto de Base de Datos

from abc import ABC, abstractmethod
from typing import List, Optional

from core.domain.schema import ColumnInfo, TableInfo


class DatabasePort(ABC):
    """Puerto para acceso al catálogo y a las muestras de datos"""

    @abstractmethod
    def ping(self, timeout: Optional[float] = None) -> None:
        """Verifica la conexión. Lanza DatabaseConnectionError si falla"""
        pass

    @abstractmethod
    def list_tables(self) -> List[TableInfo]:
        """Retorna tablas y vistas. Lanza CatalogError si falla (fatal)"""
        pass

    @abstractmethod
    def list_columns(
        self, table: TableInfo, timeout: Optional[float] = None
    ) -> List[ColumnInfo]:
        """Retorna columnas de una tabla. Lanza DatabaseError si falla"""
        pass

    @abstractmethod
    def sample_values(
        self,
        table: TableInfo,
        column: ColumnInfo,
        limit: int,
        timeout: Optional[float] = None,
    ) -> List[str]:
        """Retorna hasta `limit` valores no nulos y no vacíos de la columna"""
        pass
