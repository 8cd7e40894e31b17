"""
Service Tracker - Database Connection Manager
Version: 1.1.0

Changelog:
v1.1.0 (2026-09-02): Loopback database bootstrap, managed-host SSL, bounded pool
v1.0.0 (2026-07-14): Initial database connection manager with helpers

Provides the single pooled engine shared by every data-access function.
MySQL (PyMySQL driver) in production; any SQLAlchemy URL (SQLite) for local
runs and tests, with foreign key enforcement switched on.
"""

import ipaddress
import logging
import ssl
from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.pool import NullPool

from config import settings, load_database_config, DatabaseConfig

logger = logging.getLogger(__name__)

_engine: Engine | None = None


def is_loopback(host: str) -> bool:
    """True for localhost or any loopback address"""
    if host == "localhost":
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False


def wants_ssl(db_config: DatabaseConfig) -> bool:
    """SSL when requested explicitly or when the host is a managed service"""
    return db_config.ssl or any(
        domain in db_config.host for domain in settings.MANAGED_DB_DOMAINS
    )


def build_url(db_config: DatabaseConfig, with_database: bool = True) -> URL:
    return URL.create(
        "mysql+pymysql",
        username=db_config.user,
        password=db_config.password,
        host=db_config.host,
        port=db_config.port,
        database=db_config.database if with_database else None,
    )


def _connect_args(db_config: DatabaseConfig) -> dict:
    args = {
        "charset": "utf8mb4",
        "init_command": f"SET time_zone = '{settings.TIMEZONE_OFFSET}'",
    }
    if wants_ssl(db_config):
        # Managed providers use self-signed chains; encrypt without verifying
        ctx = ssl.create_default_context()
        ctx.check_hostname = False
        ctx.verify_mode = ssl.CERT_NONE
        args["ssl"] = ctx
        logger.info("SSL enabled for secure connection")
    return args


def ensure_database(db_config: DatabaseConfig) -> bool:
    """
    Create the target database on a local server if it does not exist.

    Uses a transient, unpooled administrative connection with no database
    selected. Remote hosts are assumed to be pre-provisioned.

    Returns:
        True when the CREATE DATABASE statement was issued
    """
    if not is_loopback(db_config.host):
        return False

    name = db_config.database.replace("`", "``")
    admin = create_engine(
        build_url(db_config, with_database=False),
        connect_args=_connect_args(db_config),
        poolclass=NullPool,
    )
    try:
        with admin.connect() as conn:
            conn.execute(text(f"CREATE DATABASE IF NOT EXISTS `{name}`"))
            conn.commit()
    finally:
        admin.dispose()
    logger.info(f"Database '{db_config.database}' ready on {db_config.host}")
    return True


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def init_engine(db_config: DatabaseConfig | None = None, url=None) -> Engine:
    """
    Create the shared engine from a database config or an explicit URL.

    Args:
        db_config: MySQL connection parameters
        url: Any SQLAlchemy URL; takes precedence over db_config

    Returns:
        The new engine (replacing any previous one)
    """
    global _engine
    dispose_engine()

    if url is not None:
        url = str(url)
        if url.startswith("sqlite"):
            engine = create_engine(url, connect_args={"check_same_thread": False})
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        else:
            engine = create_engine(url, pool_pre_ping=True)
    elif db_config is not None:
        engine = create_engine(
            build_url(db_config),
            connect_args=_connect_args(db_config),
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=0,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=True,
        )
    else:
        raise ValueError("init_engine() needs a db_config or a url")

    _engine = engine
    return engine


def connect() -> Engine:
    """
    Resolve configuration, bootstrap the database and open the pool.

    Raises:
        ConfigurationError: If the configuration cannot be loaded
        sqlalchemy.exc.OperationalError: If the database is unreachable
    """
    if _engine is not None:
        return _engine

    _, db_config = load_database_config()
    try:
        ensure_database(db_config)
        engine = init_engine(db_config)
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"DB connect error: {e}")
        dispose_engine()
        raise

    logger.info(f"DB connected to {db_config.host}:{db_config.port}")
    return engine


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Database engine not initialized. Call connect() first.")
    return _engine


def dispose_engine() -> None:
    """Close every pooled connection and forget the engine"""
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None


def dialect_name() -> str:
    return get_engine().dialect.name


@contextmanager
def get_db():
    """Context manager yielding a pooled connection"""
    with get_engine().connect() as db:
        yield db


def _plain(value):
    """Convert driver values to the JSON shapes the mobile client expects"""
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


def _row_dict(row) -> dict:
    return {key: _plain(value) for key, value in row.items()}


def execute_one(db, sql: str, params=None) -> dict | None:
    """Execute query and return first row as dict, or None"""
    row = db.execute(text(sql), params or {}).mappings().first()
    return _row_dict(row) if row else None


def execute_all(db, sql: str, params=None) -> list[dict]:
    """Execute query and return all rows as list of dicts"""
    rows = db.execute(text(sql), params or {}).mappings().all()
    return [_row_dict(row) for row in rows]


def execute_scalar(db, sql: str, params=None):
    """Execute query and return the first column of the first row"""
    return _plain(db.execute(text(sql), params or {}).scalar())


def execute_insert(db, sql: str, params=None) -> int:
    """Execute INSERT, commit, and return lastrowid"""
    result = db.execute(text(sql), params or {})
    db.commit()
    return result.lastrowid


def execute_update(db, sql: str, params=None) -> int:
    """Execute UPDATE/DELETE, commit, and return rowcount"""
    result = db.execute(text(sql), params or {})
    db.commit()
    return result.rowcount
