# Entidades de Schema

from dataclasses import dataclass
from enum import Enum


class TableKind(str, Enum):
    TABLE = "TABLE"
    VIEW = "VIEW"

    @classmethod
    def from_catalog(cls, raw: str) -> "TableKind":
        """Normaliza el tipo reportado por el catálogo (USER_TABLE, BASE TABLE, view...)"""
        return cls.VIEW if "VIEW" in (raw or "").upper() else cls.TABLE


@dataclass(frozen=True)
class TableInfo:
    """Tabla o vista de la base de datos"""

    schema: str
    name: str
    kind: TableKind = TableKind.TABLE

    @property
    def full_name(self) -> str:
        return f"{self.schema}.{self.name}" if self.schema else self.name


@dataclass(frozen=True)
class ColumnInfo:
    """Columna de una tabla"""

    name: str
    declared_type: str = ""
