# Fábrica - Crea el orquestador con todas las dependencias inyectadas

from typing import Optional

from config.settings import DatabaseSettings, ScanSettings, settings
from adapters.outbound.database import DatabaseAdapter, get_database_adapter
from core.ports.sink_port import ResultSink
from core.services.column_analyzer import ColumnAnalyzer
from core.services.scan_orchestrator import ScanOrchestrator


def create_database(db_settings: Optional[DatabaseSettings] = None) -> DatabaseAdapter:
    """Adaptador de base de datos según la configuración"""
    db_settings = db_settings or settings.db
    return get_database_adapter(
        db_settings.db_type,
        db_settings.db_uri,
        max_connections=db_settings.max_connections,
        connect_timeout=db_settings.connect_timeout,
    )


def create_orchestrator(
    database: DatabaseAdapter,
    sink: ResultSink,
    database_name: str = "",
    scan_settings: Optional[ScanSettings] = None,
) -> ScanOrchestrator:
    """Factory function que crea el ScanOrchestrator con su analizador."""
    scan_settings = scan_settings or settings.scan

    analyzer = ColumnAnalyzer(
        database,
        database=database_name,
        sample_size=scan_settings.sample_size,
    )
    return ScanOrchestrator(
        database=database,
        sink=sink,
        database_name=database_name,
        analyzer=analyzer,
        table_timeout=scan_settings.table_timeout,
        column_timeout=scan_settings.column_timeout,
        max_workers=scan_settings.max_workers,
    )
