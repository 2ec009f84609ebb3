# Adaptador para SQLite

import logging
import re
import sqlite3
import time
from typing import Any, Dict, Optional, Tuple

from adapters.outbound.database.base import DatabaseAdapter
from core.domain.schema import ColumnInfo, TableInfo

logger = logging.getLogger(__name__)

# Cada cuántas instrucciones de la VM se revisa la fecha límite
PROGRESS_STEPS = 1000


class SQLiteAdapter(DatabaseAdapter):
    """Adaptador para bases de datos SQLite"""

    def _parse_connection(self):
        """Parsea connection string formato: sqlite:///path/to/db.sqlite"""
        match = re.match(r"sqlite:///(.+)", self.connection_string)
        if match:
            self.db_path = match.group(1)
        else:
            # Asumir que es directamente el path
            self.db_path = self.connection_string

    def _get_connection(self):
        return sqlite3.connect(self.db_path, timeout=self.connect_timeout)

    def execute(
        self, query: str, params: Optional[Tuple] = None, timeout: Optional[float] = None
    ) -> Dict[str, Any]:
        try:
            conn = self._get_connection()
        except Exception as e:
            logger.error(f"SQLite error: {e}")
            return {"error": str(e)}

        try:
            if timeout is not None:
                deadline = time.monotonic() + timeout
                # Un valor distinto de cero interrumpe la sentencia en curso
                conn.set_progress_handler(
                    lambda: int(time.monotonic() > deadline), PROGRESS_STEPS
                )
            cursor = conn.cursor()
            if params:
                cursor.execute(query, params)
            else:
                cursor.execute(query)

            if cursor.description:
                columns = [desc[0] for desc in cursor.description]
                data = cursor.fetchall()
                return {
                    "columns": columns,
                    "data": data,
                    "row_count": len(data),
                }
            return {"columns": [], "data": [], "row_count": 0}
        except Exception as e:
            logger.error(f"SQLite error: {e}")
            return {"error": str(e)}
        finally:
            conn.close()

    def _tables_query(self) -> str:
        return """
            SELECT 'main', name, type FROM sqlite_master
            WHERE type IN ('table', 'view') AND name NOT LIKE 'sqlite_%'
            ORDER BY name
        """

    def _columns_query(self) -> str:
        # Parámetros (schema, tabla); la función recibe el schema al final
        return "SELECT name, type FROM pragma_table_info(?2, ?1)"

    def _sample_query(self, table: TableInfo, column: ColumnInfo, limit: int) -> str:
        col = self._quote(column.name)
        as_text = f"CAST({col} AS TEXT)"
        return f"""
            SELECT {as_text}
            FROM {self._quote(table.schema)}.{self._quote(table.name)}
            WHERE {col} IS NOT NULL AND {as_text} <> ''
            LIMIT {limit}
        """
