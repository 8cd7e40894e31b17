"""
Service Tracker - System Configuration
Version: 1.1.0

Changelog:
v1.1.0 (2026-09-02): Explicit ConfigSource resolution (environment vs config.json),
                      managed-database SSL domains, AMC sweep interval
v1.0.0 (2026-07-14): Initial configuration module
"""

from pydantic import BaseModel, ValidationError
from pydantic_settings import BaseSettings
from typing import List, Optional, Tuple
from pathlib import Path
from enum import Enum
import json
import logging
import os
import sys

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """System-wide configuration"""

    # Application
    APP_NAME: str = "Service Tracker API"
    APP_VERSION: str = "1.1.0"
    DEBUG: bool = False

    # API Server
    API_HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # Database (environment source, all-or-nothing on DB_HOST)
    DB_HOST: Optional[str] = None
    DB_PORT: int = 3306
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_NAME: Optional[str] = None
    DB_SSL: bool = False

    # Database (file source)
    CONFIG_PATH: str = str(Path(__file__).parent / "config.json")

    # Hosted MySQL providers that always require TLS
    MANAGED_DB_DOMAINS: List[str] = ["aivencloud.com"]

    # Connection pool
    DB_POOL_SIZE: int = 5
    DB_POOL_TIMEOUT: float = 300.0  # seconds a request may wait for a connection
    DB_POOL_RECYCLE: int = 3600

    # Business clock (also applied as the MySQL session time_zone)
    TIMEZONE_OFFSET: str = "+05:30"

    # AMC
    AMC_EXPIRY_WINDOW_DAYS: int = 30
    AMC_SWEEP_INTERVAL_HOURS: float = 0.0  # 0 = sweep at start-up only

    # Authentication
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: str = "admin"
    LOGIN_FAILED_MESSAGE: str = "ખોટો યુઝરનેમ અથવા પાસવર્ડ"

    # File Paths
    LOGS_DIR: str = str(Path(__file__).parent / "logs")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Singleton instance
settings = Settings()


class ConfigurationError(RuntimeError):
    """Database configuration could not be loaded"""


class ConfigSource(str, Enum):
    """Where the database connection parameters come from"""
    ENVIRONMENT = "environment"
    FILE = "file"


class DatabaseConfig(BaseModel):
    """Connection parameters for the relational store"""
    host: str
    port: int = 3306
    user: Optional[str] = None
    password: Optional[str] = None
    database: str
    ssl: bool = False


def resolve_config_source() -> ConfigSource:
    """DB_HOST switches the whole database configuration to the environment"""
    return ConfigSource.ENVIRONMENT if settings.DB_HOST else ConfigSource.FILE


def read_config_file(path: Optional[str] = None) -> dict:
    """Read the local JSON configuration file"""
    path = path or settings.CONFIG_PATH
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read {path}: {e}")
        raise ConfigurationError(
            f"Failed to read {path}. Make sure it exists. Error: {e}"
        ) from e


def write_config_file(data: dict, path: Optional[str] = None) -> None:
    """Write the local JSON configuration file"""
    path = path or settings.CONFIG_PATH
    try:
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2)
        logger.info(f"{path} updated successfully")
    except OSError as e:
        logger.error(f"Could not write {path}: {e}")
        raise ConfigurationError(f"Failed to write {path}. Error: {e}") from e


def load_database_config() -> Tuple[ConfigSource, DatabaseConfig]:
    """Resolve the configuration source once and build the database config"""
    source = resolve_config_source()
    try:
        if source is ConfigSource.ENVIRONMENT:
            db_config = DatabaseConfig(
                host=settings.DB_HOST,
                port=settings.DB_PORT,
                user=settings.DB_USER,
                password=settings.DB_PASSWORD,
                database=settings.DB_NAME,
                ssl=settings.DB_SSL,
            )
        else:
            raw = read_config_file().get("database")
            if not isinstance(raw, dict):
                raise ConfigurationError(
                    f"{settings.CONFIG_PATH} has no 'database' section"
                )
            db_config = DatabaseConfig(**raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid database configuration: {e}") from e

    logger.info(f"Using database configuration from {source.value}")
    return source, db_config


CONFIG_TEMPLATE = {
    "database": {
        "host": "localhost",
        "port": 3306,
        "user": "root",
        "password": "",
        "database": "service_tracker",
        "ssl": False,
    }
}


def init_directories():
    """Create necessary directories if they don't exist"""
    os.makedirs(settings.LOGS_DIR, exist_ok=True)


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "init":
        if os.path.exists(settings.CONFIG_PATH):
            print(f"{settings.CONFIG_PATH} already exists")
        else:
            write_config_file(CONFIG_TEMPLATE)
            print(f"Wrote template to {settings.CONFIG_PATH}")
        sys.exit(0)

    print(f"{settings.APP_NAME} Configuration v{settings.APP_VERSION}")
    source, cfg = load_database_config()
    print(f"Source:   {source.value}")
    print(f"Host:     {cfg.host}:{cfg.port}")
    print(f"Database: {cfg.database}")
    print(f"User:     {cfg.user}")
    print(f"Password: {'*' * len(cfg.password or '')}")
    print(f"SSL:      {cfg.ssl}")
    print(f"Port:     {settings.PORT}")
