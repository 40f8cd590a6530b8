"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

# =====================================================================
# Database Configuration Model
# =====================================================================


class PostgreSQLConfig(BaseModel):
    """PostgreSQL connection configuration."""

    host: str = Field(default="localhost", alias="DB_HOST", description="PostgreSQL database host address")
    port: int = Field(default=5432, alias="DB_PORT", description="PostgreSQL database port number")
    user: str = Field(default="postgres", alias="DB_USER", description="PostgreSQL database user")
    password: SecretStr = Field(default=SecretStr(""), alias="DB_PASSWORD", description="PostgreSQL database password")
    name: str = Field(default="rfid", alias="DB_NAME", description="PostgreSQL database name")

    model_config = {"populate_by_name": True}

    @property
    def url(self) -> str:
        """Async connection URL built from the individual connection fields, with credentials escaped."""
        password = self.password.get_secret_value()
        return URL.create(
            "postgresql+asyncpg",
            username=self.user,
            password=password or None,
            host=self.host,
            port=self.port,
            database=self.name,
        ).render_as_string(hide_password=False)


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Server host address to bind to",
        alias="RFID_DB_SERVER_HOST",
    )
    server_port: int = Field(
        default=5001,
        description="Server port number",
        alias="RFID_DB_SERVER_PORT",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="RFID_DB_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="RFID_DB_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="RFID_DB_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write logs to <log_file_dir>/rfid_db.log",
        alias="RFID_DB_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    db_host: str = Field(default="localhost", alias="DB_HOST")
    db_port: int = Field(default=5432, alias="DB_PORT")
    db_user: str = Field(default="postgres", alias="DB_USER")
    db_password: SecretStr = Field(default=SecretStr(""), alias="DB_PASSWORD")
    db_name: str = Field(default="rfid", alias="DB_NAME")

    database_url_override: Optional[str] = Field(
        default=None,
        description="Full database URL; takes precedence over the DB_* fields",
        alias="DATABASE_URL",
    )
    pool_size: Optional[int] = Field(
        default=None,
        description="Number of persistent connections kept in the pool (driver default when unset)",
        alias="DB_POOL_SIZE",
    )
    max_overflow: Optional[int] = Field(
        default=None,
        description="Connections allowed above pool_size (driver default when unset)",
        alias="DB_MAX_OVERFLOW",
    )
    create_tables: bool = Field(
        default=False,
        description="Create missing tables on startup (development only)",
        alias="RFID_DB_CREATE_TABLES",
    )

    # =====================================================================
    # Error Reporting
    # =====================================================================
    expose_error_kind: bool = Field(
        default=False,
        description="Add an X-Error-Kind header to generic storage error responses",
        alias="RFID_DB_EXPOSE_ERROR_KIND",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def postgres(self) -> PostgreSQLConfig:
        """Get PostgreSQL configuration from environment variables."""
        return PostgreSQLConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def database_url(self) -> str:
        """Connection URL for the application database."""
        return self.database_url_override or self.postgres.url


settings = Settings()
