# Adaptador para PostgreSQL

import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional, Tuple

from adapters.outbound.database.base import DatabaseAdapter
from core.domain.schema import ColumnInfo, TableInfo

logger = logging.getLogger(__name__)


class PostgreSQLAdapter(DatabaseAdapter):
    """Adaptador para PostgreSQL (acepta URI postgresql:// o DSN de libpq)"""

    # Context manager para obtener cursor de solo lectura
    @contextmanager
    def get_cursor(self):
        import psycopg2

        conn = psycopg2.connect(self.connection_string, connect_timeout=self.connect_timeout)
        conn.set_session(readonly=True)
        cursor = conn.cursor()
        try:
            yield cursor
        finally:
            cursor.close()
            conn.close()

    def execute(
        self, query: str, params: Optional[Tuple] = None, timeout: Optional[float] = None
    ) -> Dict[str, Any]:
        try:
            with self.get_cursor() as cursor:
                if timeout is not None:
                    cursor.execute(f"SET statement_timeout = {max(1, int(timeout * 1000))};")
                cursor.execute(query, params)
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
            logger.error(f"PostgreSQL error: {e}")
            return {"error": str(e)}

    def _tables_query(self) -> str:
        return """
            SELECT table_schema, table_name, table_type
            FROM information_schema.tables
            WHERE table_schema NOT IN ('information_schema', 'pg_catalog', 'pg_toast')
            AND table_schema NOT LIKE 'pg_%'
            ORDER BY table_schema, table_name
        """

    def _columns_query(self) -> str:
        return """
            SELECT column_name, data_type
            FROM information_schema.columns
            WHERE table_schema = %s AND table_name = %s
            ORDER BY ordinal_position
        """

    def _sample_query(self, table: TableInfo, column: ColumnInfo, limit: int) -> str:
        col = self._quote(column.name)
        as_text = f"CAST({col} AS TEXT)"
        return f"""
            SELECT {as_text}
            FROM {self._quote(table.schema)}.{self._quote(table.name)}
            WHERE {col} IS NOT NULL AND {as_text} <> ''
            LIMIT {limit}
        """
