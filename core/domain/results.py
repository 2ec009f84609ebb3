# Entidades de resultado del escaneo

from dataclasses import dataclass
from enum import Enum

from core.domain.schema import ColumnInfo, TableInfo

NOT_AVAILABLE = "N/A"
NO_PDN = "None"
UNPROCESSED = "Unprocessed"
# Columna usada en los registros a nivel de tabla
TABLE_LEVEL_COLUMN = "*"


class Evidence(str, Enum):
    """Origen de la clasificación"""

    HEADER = "HEADER"
    VALUE = "VALUE"
    NONE = "NONE"
    ERROR = "ERROR"
    TIMEOUT = "TIMEOUT"


@dataclass(frozen=True)
class SampleValue:
    """Valor muestreado junto con su patrón de abstracción"""

    value: str
    pattern: str


@dataclass(frozen=True)
class PDNResult:
    """Un registro del reporte: (tabla, columna, evidencia, categoría)"""

    database: str
    schema: str
    table: str
    table_kind: str
    column: str
    evidence: Evidence
    pdn_category: str
    sample_value: str = NOT_AVAILABLE
    pattern: str = ""
    data_type: str = ""

    @property
    def is_pdn(self) -> bool:
        return self.pdn_category not in (NO_PDN, UNPROCESSED)

    @classmethod
    def for_column(
        cls,
        database: str,
        table: TableInfo,
        column: ColumnInfo,
        evidence: Evidence,
        pdn_category: str,
        sample: SampleValue = None,
    ) -> "PDNResult":
        return cls(
            database=database,
            schema=table.schema,
            table=table.name,
            table_kind=table.kind.value,
            column=column.name,
            data_type=column.declared_type,
            evidence=evidence,
            pdn_category=pdn_category,
            sample_value=sample.value if sample else NOT_AVAILABLE,
            pattern=sample.pattern if sample else "",
        )

    @classmethod
    def timeout(cls, database: str, table: TableInfo, column: ColumnInfo) -> "PDNResult":
        return cls.for_column(database, table, column, Evidence.TIMEOUT, UNPROCESSED)

    @classmethod
    def error(cls, database: str, table: TableInfo, column: ColumnInfo) -> "PDNResult":
        return cls.for_column(database, table, column, Evidence.ERROR, UNPROCESSED)

    @classmethod
    def table_level(cls, database: str, table: TableInfo, evidence: Evidence) -> "PDNResult":
        return cls.for_column(
            database, table, ColumnInfo(name=TABLE_LEVEL_COLUMN), evidence, UNPROCESSED
        )
