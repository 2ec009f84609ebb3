# Analizador de columna: muestreo + abstracción + clasificación

import logging
from typing import List, Optional

from core.domain.errors import BudgetExceededError, DatabaseError
from core.domain.results import Evidence, NO_PDN, PDNResult
from core.domain.schema import ColumnInfo, TableInfo
from core.ports.database_port import DatabasePort
from core.services.abstraction import deduplicate
from core.services.budget import Budget
from core.services.classifier import classify

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 20


class ColumnAnalyzer:
    """
    Clasifica una columna por su nombre (HEADER) y por sus valores (VALUE).

    Ambas evidencias se conservan por separado: una columna `email` con
    basura sigue marcada por el encabezado y una `col_17` llena de correos
    queda marcada por los valores.
    """

    def __init__(
        self,
        sampler: DatabasePort,
        database: str = "",
        sample_size: int = DEFAULT_SAMPLE_SIZE,
    ):
        self.sampler = sampler
        self.database = database
        self.sample_size = sample_size

    def analyze(
        self, table: TableInfo, column: ColumnInfo, budget: Optional[Budget] = None
    ) -> List[PDNResult]:
        """
        Retorna los resultados de la columna. Los errores de muestreo se
        convierten en un registro ERROR; si el presupuesto se agota lanza
        BudgetExceededError y no retorna nada.
        """
        if budget:
            budget.check()

        header_categories = classify(column.name)

        try:
            raw_values = self.sampler.sample_values(
                table,
                column,
                limit=self.sample_size,
                timeout=budget.remaining() if budget else None,
            )
        except DatabaseError as e:
            if budget and budget.expired():
                raise BudgetExceededError(budget.scope, budget.seconds, budget.cancelled)
            logger.warning(f"Error de muestreo en {table.full_name}.{column.name}: {e.message}")
            results = [
                self._result(table, column, Evidence.HEADER, category)
                for category in header_categories
            ]
            results.append(PDNResult.error(self.database, table, column))
            return results

        if budget:
            budget.check()

        samples = deduplicate(raw_values)
        first_sample = samples[0] if samples else None

        results = [
            self._result(table, column, Evidence.HEADER, category, first_sample)
            for category in header_categories
        ]

        value_categories = []
        for sample in samples:
            for category in classify(sample.value):
                results.append(self._result(table, column, Evidence.VALUE, category, sample))
                if category not in value_categories:
                    value_categories.append(category)

        if not results:
            results.append(self._result(table, column, Evidence.NONE, NO_PDN, first_sample))

        logger.debug(
            f"Columna {table.full_name}.{column.name} ({column.declared_type}): "
            f"encabezado={header_categories or '-'} valores={value_categories or '-'} "
            f"muestras={len(raw_values)} patrones={len(samples)}"
        )
        return results

    def _result(self, table, column, evidence, category, sample=None) -> PDNResult:
        return PDNResult.for_column(self.database, table, column, evidence, category, sample)
