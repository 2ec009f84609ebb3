# CLI Adapter - Entry point por línea de comandos

import argparse
import getpass
import logging
from typing import List, Optional

from pydantic import ValidationError

from adapters.factory import create_database, create_orchestrator
from adapters.outbound.report import CSVReportWriter
from config.settings import SUPPORTED_DB_TYPES, DatabaseSettings, ScanSettings, settings
from core.domain.errors import CatalogError, DatabaseConnectionError, ReportError
from core.domain.responses import ScanSummary
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _ask(label: str, default: str) -> str:
    value = input(f"{label} [{default}]: ").strip()
    return value or default


def prompt_connection(db_type: str) -> DatabaseSettings:
    """Pide los parámetros de conexión; Enter deja el valor por defecto"""
    current = settings.db
    if db_type == "sqlite":
        values = {"name": _ask("Archivo de la base de datos", current.name)}
    else:
        values = {
            "host": _ask("Servidor", current.host),
            "port": _ask("Puerto", current.port),
            "name": _ask("Base de datos", current.name),
            "user": _ask("Usuario", current.user),
            "password": getpass.getpass("Contraseña: ") or current.password,
        }
    return DatabaseSettings(**{**current.model_dump(), **values, "db_type": db_type})


def print_summary(summary: ScanSummary, report_path: str):
    print(f"\n{'=' * 50}")
    print(f"{settings.app_name} - Base de datos: {summary.database}")
    print(f"{'=' * 50}")
    print(f"   Tablas analizadas: {summary.tables_scanned}/{summary.tables_total}")
    print(f"   Tablas con error: {summary.tables_failed}")
    print(f"   Columnas: {summary.columns_total}")
    print(f"   Columnas con PDN: {summary.columns_with_pdn}")
    print(f"   Timeouts de columna: {summary.column_timeouts}")
    print(f"   Errores de columna: {summary.column_errors}")
    print(f"   Duración: {summary.duration_seconds}s")
    print(f"\nReporte guardado en {report_path}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"{settings.app_name} - Búsqueda de datos personales en bases de datos"
    )
    parser.add_argument(
        "--db-type",
        default=settings.db.db_type,
        choices=SUPPORTED_DB_TYPES,
        help="Motor de base de datos",
    )
    parser.add_argument("--output", "-o", default=settings.scan.report_path, help="Archivo CSV de salida")
    parser.add_argument(
        "--sample-size",
        type=int,
        default=settings.scan.sample_size,
        help="Valores a muestrear por columna (5-50)",
    )
    parser.add_argument("--schema", "-s", help="Analizar solo este schema")
    args = parser.parse_args(argv)

    setup_logging()

    try:
        scan_settings = ScanSettings(
            **{
                **settings.scan.model_dump(),
                "sample_size": args.sample_size,
                "report_path": args.output,
            }
        )
        db_settings = prompt_connection(args.db_type)
        database = create_database(db_settings)
    except (ValidationError, ValueError) as e:
        logger.critical(f"Configuración inválida: {e}")
        return 1

    try:
        database.ping()
        logger.info(f"Conexión establecida con {db_settings.host}/{db_settings.name}")
    except DatabaseConnectionError as e:
        logger.critical(e.message)
        return 1

    try:
        tables = database.list_tables()
    except CatalogError as e:
        logger.critical(e.message)
        return 1

    if args.schema:
        tables = [t for t in tables if t.schema == args.schema]
        logger.info(f"Filtrando por schema '{args.schema}': {len(tables)} tablas")

    try:
        with CSVReportWriter(
            scan_settings.report_path,
            server=db_settings.host,
            queue_size=scan_settings.queue_size,
        ) as writer:
            orchestrator = create_orchestrator(
                database, writer, database_name=db_settings.name, scan_settings=scan_settings
            )
            summary = orchestrator.scan(tables)
    except ReportError as e:
        logger.critical(e.message)
        return 1

    print_summary(summary, scan_settings.report_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
