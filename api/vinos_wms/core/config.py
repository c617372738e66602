"""
Configuración del servicio de almacén.

Todo se lee del entorno (o de .env). La base remota se puede indicar con
DATABASE_URL completa o por componentes; en desarrollo se suele usar
SQLite (sqlite+aiosqlite:///./vinos.db) con DB_CREATE_TABLES=true.
"""
import json
from typing import List

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    APP_NAME: str = Field(default="Mi Solución en Vinos - Gestión de Almacén")
    APP_VERSION: str = Field(default="1.0.0")
    ENVIRONMENT: str = Field(default="production")
    DEBUG: bool = Field(default=False)

    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)
    CORS_ORIGINS: str = Field(default="*")

    # Base remota (Postgres de Supabase)
    DATABASE_URL: str = Field(default="")
    DATABASE_HOST: str = Field(default="localhost")
    DATABASE_PORT: int = Field(default=5432)
    DATABASE_USER: str = Field(default="postgres")
    DATABASE_PASSWORD: str = Field(default="postgres")
    DATABASE_NAME: str = Field(default="postgres")
    DB_POOL_SIZE: int = Field(default=5)
    DB_MAX_OVERFLOW: int = Field(default=10)
    # El esquema remoto ya existe; crear tablas solo en bases locales
    DB_CREATE_TABLES: bool = Field(default=False)

    # Sesiones de operador
    SECRET_KEY: str = Field(default="change-this-secret-key-in-production")
    ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=480)

    # Registro de auditoría local
    LOCAL_STORAGE_PATH: str = Field(default="data/local_storage.json")
    AUDIT_LOG_KEY: str = Field(default="miSolucionVinos_auditLog")

    NOTIFICATION_TTL_SECONDS: float = Field(default=5.0)

    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/app.log")

    @computed_field
    @property
    def effective_database_url(self) -> str:
        """DATABASE_URL si está definida; si no, la URL asyncpg de los componentes."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )

    @computed_field
    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


def get_cors_origins(cors_string: str) -> List[str]:
    """Acepta "*", una lista JSON o una lista separada por comas."""
    if cors_string == "*":
        return ["*"]
    try:
        return json.loads(cors_string)
    except json.JSONDecodeError:
        return [origin.strip() for origin in cors_string.split(",") if origin.strip()]


settings = Settings()
