"""
Service Tracker - Key-Value Settings Data Access
Version: 1.0.1

Changelog:
v1.0.1 (2026-10-18): Clear error for dialects without an upsert statement
v1.0.0 (2026-07-14): Settings mapping and upsert
"""

from database import get_db, execute_all, execute_update, dialect_name

_UPSERT = {
    "mysql": """
        INSERT INTO settings (key_name, value_data) VALUES (:key, :value)
        ON DUPLICATE KEY UPDATE value_data = :value
    """,
    "sqlite": """
        INSERT INTO settings (key_name, value_data) VALUES (:key, :value)
        ON CONFLICT(key_name) DO UPDATE SET value_data = excluded.value_data
    """,
}


def get_all_settings() -> dict:
    """All settings as a {key: value} mapping"""
    with get_db() as db:
        rows = execute_all(db, "SELECT key_name, value_data FROM settings")
    return {row["key_name"]: row["value_data"] for row in rows}


def save_setting(key: str, value) -> dict:
    """Insert the key, or overwrite its value when it already exists"""
    dialect = dialect_name()
    if dialect not in _UPSERT:
        raise NotImplementedError(f"Settings upsert is not supported on {dialect}")
    with get_db() as db:
        changes = execute_update(db, _UPSERT[dialect], {"key": key, "value": value})
    return {"changes": changes}
