"""Configuración del proyecto."""

from pathlib import Path
from urllib.parse import quote

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

SUPPORTED_DB_TYPES = ("sqlserver", "mssql", "postgresql", "postgres", "mysql", "mariadb", "sqlite")


class DatabaseSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PDN_DB_")

    db_type: str = "sqlserver"
    host: str = "localhost"
    port: str = "1433"
    name: str = ""
    user: str = ""
    password: str = ""
    odbc_driver: str = "ODBC Driver 17 for SQL Server"
    connect_timeout: int = 15
    # Mismo tamaño que el pool de conexiones del escáner
    max_connections: int = Field(5, ge=1)

    @field_validator("db_type")
    @classmethod
    def _known_db_type(cls, value: str) -> str:
        value = value.lower()
        if value not in SUPPORTED_DB_TYPES:
            raise ValueError(
                f"Tipo de base de datos no soportado: '{value}'. "
                f"Soportados: {', '.join(SUPPORTED_DB_TYPES)}"
            )
        return value

    @property
    def db_uri(self) -> str:
        """Connection string en el formato que espera cada adaptador."""
        user = quote(self.user, safe="")
        password = quote(self.password, safe="")

        if self.db_type in ("sqlserver", "mssql"):
            driver = quote(self.odbc_driver)
            return (
                f"mssql+pyodbc://{user}:{password}@{self.host}:{self.port}/{self.name}"
                f"?driver={driver}"
            )
        if self.db_type in ("postgresql", "postgres"):
            return f"postgresql://{user}:{password}@{self.host}:{self.port}/{self.name}"
        if self.db_type in ("mysql", "mariadb"):
            return f"mysql+pymysql://{user}:{password}@{self.host}:{self.port}/{self.name}"
        return f"sqlite:///{self.name}"


class ScanSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PDN_SCAN_")

    sample_size: int = Field(20, ge=5, le=50)
    table_timeout: float = Field(120.0, gt=0)
    column_timeout: float = Field(45.0, gt=0)
    max_workers: int = Field(5, ge=1)
    report_path: str = "report.csv"
    queue_size: int = Field(1000, ge=1)

    @model_validator(mode="after")
    def _column_within_table(self) -> "ScanSettings":
        if self.column_timeout > self.table_timeout:
            raise ValueError("column_timeout no puede superar table_timeout")
        return self


class LogSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PDN_LOG_")

    level: str = "INFO"


class Settings(BaseSettings):
    """Configuración global del proyecto"""

    model_config = SettingsConfigDict(env_prefix="PDN_")

    app_name: str = "PDN-Checker"
    db: DatabaseSettings = DatabaseSettings()
    scan: ScanSettings = ScanSettings()
    logs: LogSettings = LogSettings()


settings = Settings()
