# Core Domain - Entidades del escaneo

from core.domain.schema import TableKind, TableInfo, ColumnInfo
from core.domain.results import (
    Evidence,
    SampleValue,
    PDNResult,
    NOT_AVAILABLE,
    NO_PDN,
    UNPROCESSED,
    TABLE_LEVEL_COLUMN,
)
from core.domain.responses import ScanSummary
from core.domain.errors import (
    PDNScanError,
    DatabaseError,
    DatabaseConnectionError,
    SQLExecutionError,
    CatalogError,
    BudgetExceededError,
    ReportError,
)

__all__ = [
    # Entidades
    "TableKind",
    "TableInfo",
    "ColumnInfo",
    "Evidence",
    "SampleValue",
    "PDNResult",
    "NOT_AVAILABLE",
    "NO_PDN",
    "UNPROCESSED",
    "TABLE_LEVEL_COLUMN",
    # Respuestas
    "ScanSummary",
    # Errores
    "PDNScanError",
    "DatabaseError",
    "DatabaseConnectionError",
    "SQLExecutionError",
    "CatalogError",
    "BudgetExceededError",
    "ReportError",
]
