# Reporte CSV - Sink que escribe los resultados a medida que llegan

import csv
import logging
import queue
import threading
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from core.domain.errors import ReportError
from core.domain.results import PDNResult
from core.ports.sink_port import ResultSink
from core.services.masking import mask_value

logger = logging.getLogger(__name__)

DEFAULT_QUEUE_SIZE = 1000
DEFAULT_PUT_TIMEOUT = 30.0

# Marca de fin para el hilo escritor
_STOP = object()


class ReportRow(BaseModel):
    """Una fila del reporte CSV"""

    server: str
    database: str
    schema_name: str = Field(serialization_alias="schema")
    table: str
    object_type: str
    column: str
    data_type: str = ""
    has_pdn: str
    pdn_type: str
    evidence: str
    pattern: str = ""
    sample_value: str
    masked_sample_value: str

    @classmethod
    def from_result(cls, result: PDNResult, server: str = "") -> "ReportRow":
        return cls(
            server=server,
            database=result.database,
            schema_name=result.schema,
            table=result.table,
            object_type=result.table_kind,
            column=result.column,
            data_type=result.data_type,
            has_pdn="Yes" if result.is_pdn else "No",
            pdn_type=result.pdn_category,
            evidence=result.evidence.value,
            pattern=result.pattern,
            sample_value=result.sample_value,
            masked_sample_value=mask_value(result.sample_value),
        )

    @classmethod
    def field_names(cls) -> List[str]:
        return [
            field.serialization_alias or name
            for name, field in cls.model_fields.items()
        ]

    def as_record(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


class CSVReportWriter(ResultSink):
    """
    Escribe el reporte desde un hilo propio alimentado por una cola acotada.

    `emit` nunca bloquea más de `put_timeout` segundos: si la cola sigue
    llena o el hilo escritor falló, lanza ReportError.
    """

    def __init__(
        self,
        path: str,
        server: str = "",
        queue_size: int = DEFAULT_QUEUE_SIZE,
        put_timeout: float = DEFAULT_PUT_TIMEOUT,
    ):
        self.path = path
        self.server = server
        self.put_timeout = put_timeout
        self.rows_written = 0
        self._queue: queue.Queue = queue.Queue(maxsize=queue_size)
        self._thread: Optional[threading.Thread] = None
        self._file = None
        self._writer = None
        self._error: Optional[Exception] = None

    def start(self) -> "CSVReportWriter":
        if self._thread is not None:
            return self
        try:
            # BOM para que Excel detecte UTF-8
            self._file = open(self.path, "w", newline="", encoding="utf-8-sig")
        except OSError as e:
            raise ReportError(f"No se pudo crear el reporte: {e}", path=self.path)

        self._writer = csv.DictWriter(self._file, fieldnames=ReportRow.field_names())
        self._writer.writeheader()
        self._thread = threading.Thread(
            target=self._drain, name="pdn-report-writer", daemon=True
        )
        self._thread.start()
        logger.info(f"Escribiendo reporte en {self.path}")
        return self

    def _drain(self):
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                if self._error is None:
                    self._writer.writerow(item.as_record())
                    self.rows_written += 1
            except Exception as e:
                # Se sigue vaciando la cola para no bloquear a emit
                self._error = e
                logger.error(f"Error escribiendo el reporte {self.path}: {e}")
            finally:
                self._queue.task_done()

    def emit(self, result: PDNResult) -> None:
        if self._thread is None or not self._thread.is_alive():
            raise ReportError("El escritor del reporte no está activo", path=self.path)
        if self._error is not None:
            raise ReportError(f"Error escribiendo el reporte: {self._error}", path=self.path)

        row = ReportRow.from_result(result, self.server)
        try:
            self._queue.put(row, timeout=self.put_timeout)
        except queue.Full:
            raise ReportError(
                f"Cola del reporte llena tras {self.put_timeout:g}s", path=self.path
            )

    def close(self):
        """Espera a que se escriban las filas pendientes y cierra el archivo"""
        if self._thread is None:
            return
        thread, self._thread = self._thread, None
        try:
            self._queue.put(_STOP, timeout=self.put_timeout)
            thread.join(timeout=self.put_timeout)
        except queue.Full:
            raise ReportError("No se pudo cerrar el reporte: cola llena", path=self.path)
        finally:
            self._file.close()

        if thread.is_alive():
            raise ReportError("El escritor del reporte no terminó a tiempo", path=self.path)
        if self._error is not None:
            raise ReportError(f"Error escribiendo el reporte: {self._error}", path=self.path)
        logger.info(f"Reporte guardado en {self.path} ({self.rows_written} filas)")

    def __enter__(self) -> "CSVReportWriter":
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.close()
