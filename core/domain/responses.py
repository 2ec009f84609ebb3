# Modelos de salida del escaneo

from pydantic import BaseModel


class ScanSummary(BaseModel):
    """Resumen de una ejecución del escaneo"""

    database: str = ""
    tables_total: int = 0
    tables_scanned: int = 0
    tables_failed: int = 0
    columns_total: int = 0
    columns_with_pdn: int = 0
    column_timeouts: int = 0
    column_errors: int = 0
    results_emitted: int = 0
    duration_seconds: float = 0.0
