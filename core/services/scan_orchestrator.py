# Orquestador del escaneo: tablas en secuencia, columnas en paralelo

import logging
import time
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Set

from core.domain.errors import BudgetExceededError, DatabaseError
from core.domain.responses import ScanSummary
from core.domain.results import Evidence, NO_PDN, PDNResult, UNPROCESSED
from core.domain.schema import ColumnInfo, TableInfo
from core.ports.database_port import DatabasePort
from core.ports.sink_port import ResultSink
from core.services.budget import Budget
from core.services.classifier import ADDRESS
from core.services.column_analyzer import ColumnAnalyzer

logger = logging.getLogger(__name__)

DEFAULT_TABLE_TIMEOUT = 120.0
DEFAULT_COLUMN_TIMEOUT = 45.0
DEFAULT_MAX_WORKERS = 5

# Categorías que no cuentan como "otro PDN" para la regla de direcciones
NON_IDENTIFYING = {ADDRESS, NO_PDN, UNPROCESSED}


def apply_address_suppression(results: List[PDNResult]) -> List[PDNResult]:
    """
    Si en la tabla no hay ningún PDN salvo direcciones, las direcciones
    pasan a None. Una dirección junto a cualquier otro PDN se conserva.
    """
    categories = {r.pdn_category for r in results}
    if categories - NON_IDENTIFYING:
        return results
    return [
        replace(r, pdn_category=NO_PDN) if r.pdn_category == ADDRESS else r
        for r in results
    ]


class ScanOrchestrator:
    """
    Recorre las tablas una por una. Para cada tabla lista las columnas,
    lanza un análisis por columna en un pool de hilos y espera hasta que
    todas terminen o venza el presupuesto de la tabla.

    Cada columna recibe exactamente una disposición: sus resultados reales
    o un único registro TIMEOUT sintetizado por el orquestador.
    """

    def __init__(
        self,
        database: DatabasePort,
        sink: ResultSink,
        database_name: str = "",
        analyzer: Optional[ColumnAnalyzer] = None,
        table_timeout: float = DEFAULT_TABLE_TIMEOUT,
        column_timeout: float = DEFAULT_COLUMN_TIMEOUT,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        self.database = database
        self.sink = sink
        self.database_name = database_name
        self.analyzer = analyzer or ColumnAnalyzer(database, database=database_name)
        self.table_timeout = table_timeout
        self.column_timeout = column_timeout
        self.max_workers = max_workers

    def scan(self, tables: Optional[Sequence[TableInfo]] = None) -> ScanSummary:
        """Escanea todas las tablas. CatalogError al listar tablas es fatal y se propaga"""
        start = time.time()
        if tables is None:
            tables = self.database.list_tables()

        summary = ScanSummary(database=self.database_name, tables_total=len(tables))
        logger.info(f"Encontradas {len(tables)} tablas/vistas para analizar")

        for i, table in enumerate(tables, 1):
            logger.info(
                f"[{i}/{len(tables)}] Analizando {table.full_name} ({table.kind.value})..."
            )
            results = self.scan_table(table, summary)
            for result in results:
                self.sink.emit(result)
            summary.results_emitted += len(results)

        summary.duration_seconds = round(time.time() - start, 2)
        logger.info(
            f"Escaneo terminado: {summary.tables_scanned}/{summary.tables_total} tablas, "
            f"{summary.columns_with_pdn} columnas con PDN, "
            f"{summary.column_timeouts} timeouts ({summary.duration_seconds}s)"
        )
        return summary

    def scan_table(
        self, table: TableInfo, summary: Optional[ScanSummary] = None
    ) -> List[PDNResult]:
        """Resultados finales de una tabla, ya con la regla de direcciones aplicada"""
        summary = summary if summary is not None else ScanSummary()
        budget = Budget(self.table_timeout, scope="tabla")

        try:
            columns = self.database.list_columns(table, timeout=budget.remaining())
            budget.check()
        except BudgetExceededError:
            logger.warning(f"Timeout listando columnas de {table.full_name}")
            summary.tables_failed += 1
            return [PDNResult.table_level(self.database_name, table, Evidence.TIMEOUT)]
        except DatabaseError as e:
            evidence = Evidence.TIMEOUT if budget.expired() else Evidence.ERROR
            logger.warning(f"Error obteniendo columnas de {table.full_name}: {e.message} - se omite")
            summary.tables_failed += 1
            return [PDNResult.table_level(self.database_name, table, evidence)]

        logger.info(f"  Encontradas {len(columns)} columnas")
        summary.tables_scanned += 1
        summary.columns_total += len(columns)
        if not columns:
            return []

        results = self._dispatch(table, columns, budget, summary)
        results = apply_address_suppression(results)

        summary.columns_with_pdn += len({r.column for r in results if r.is_pdn})
        return results

    def _dispatch(
        self,
        table: TableInfo,
        columns: List[ColumnInfo],
        budget: Budget,
        summary: ScanSummary,
    ) -> List[PDNResult]:
        results: List[PDNResult] = []
        # Solo lo toca este hilo (el agregador)
        processed: Set[str] = set()

        executor = ThreadPoolExecutor(
            max_workers=min(self.max_workers, len(columns)),
            thread_name_prefix=f"pdn-{table.name}",
        )
        futures: Dict = {
            executor.submit(self._analyze_column, table, column, budget): column
            for column in columns
        }
        pending = set(futures)

        try:
            while pending:
                done, pending = wait(
                    pending, timeout=budget.remaining(), return_when=FIRST_COMPLETED
                )
                if not done:
                    logger.warning(
                        f"Timeout de tabla {table.full_name}: "
                        f"{len(pending)} columnas sin terminar"
                    )
                    break
                for future in done:
                    column = futures[future]
                    try:
                        column_results = future.result()
                    except Exception as e:
                        logger.error(f"Error analizando {table.full_name}.{column.name}: {e}")
                        column_results = [PDNResult.error(self.database_name, table, column)]
                    if column_results is None:
                        # Venció su presupuesto: se sintetiza TIMEOUT más abajo
                        continue
                    processed.add(column.name)
                    results.extend(column_results)
        finally:
            budget.cancel()
            executor.shutdown(wait=False, cancel_futures=True)

        for column in columns:
            if column.name not in processed:
                processed.add(column.name)
                summary.column_timeouts += 1
                results.append(PDNResult.timeout(self.database_name, table, column))

        summary.column_errors += sum(1 for r in results if r.evidence == Evidence.ERROR)
        return results

    def _analyze_column(
        self, table: TableInfo, column: ColumnInfo, table_budget: Budget
    ) -> Optional[List[PDNResult]]:
        """Corre en un hilo del pool. None significa que no llegó a tiempo"""
        column_budget = table_budget.child(self.column_timeout, scope="columna")
        try:
            return self.analyzer.analyze(table, column, column_budget)
        except BudgetExceededError as e:
            logger.warning(f"Columna {table.full_name}.{column.name}: {e.message}")
            return None
