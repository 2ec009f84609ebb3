# Excepciones personalizadas para PDN-Checker

class PDNScanError(Exception):
    """Excepción base para PDN-Checker"""

    def __init__(self, message: str, code: str, details: dict = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "details": self.details}


class DatabaseError(PDNScanError):
    """Errores de base de datos"""

    def __init__(self, message: str, query: str = None, code: str = "DATABASE_ERROR"):
        super().__init__(
            message=message,
            code=code,
            details={"query": query[:100] if query else None},
        )


class DatabaseConnectionError(DatabaseError):
    """Error de conexión a la base de datos (fatal)"""

    def __init__(self, message: str = "No se pudo conectar a la base de datos."):
        super().__init__(message=message, query=None, code="CONNECTION_ERROR")


class SQLExecutionError(DatabaseError):
    """Error al ejecutar SQL (listado de columnas, muestreo)"""

    def __init__(self, message: str, query: str = None):
        super().__init__(message=message, query=query, code="SQL_EXECUTION_ERROR")


class CatalogError(DatabaseError):
    """No se pudo obtener la lista de tablas (fatal)"""

    def __init__(self, message: str, query: str = None):
        super().__init__(message=message, query=query, code="CATALOG_ERROR")


class BudgetExceededError(PDNScanError):
    """Se agotó el presupuesto de tiempo de una tabla o columna"""

    def __init__(self, scope: str, seconds: float, cancelled: bool = False):
        reason = "cancelado" if cancelled else f"agotado tras {seconds:g}s"
        super().__init__(
            message=f"Presupuesto de {scope} {reason}",
            code="BUDGET_EXCEEDED",
            details={"scope": scope, "seconds": seconds, "cancelled": cancelled},
        )
        self.scope = scope
        self.cancelled = cancelled


class ReportError(PDNScanError):
    """Errores al escribir el reporte"""

    def __init__(self, message: str, path: str = None):
        super().__init__(message=message, code="REPORT_ERROR", details={"path": path})
