"""
Service Tracker - Database Models
Version: 1.1.0

Changelog:
v1.1.0 (2026-09-02): Dialect-aware primary keys so the schema also builds on SQLite
v1.0.0 (2026-07-14): Initial schema: customers, service calls, repairs, AMC,
                      settings, areas, users, products, common issues/resolutions
"""

from .customer import CustomerIn
from .service_call import ServiceCallIn, ServiceCallStatusUpdate, CallStatus
from .repair import RepairRecordIn
from .amc import AmcRecordIn, AmcStatus
from .reference import AreaIn, ProductIn, ReferenceTextIn
from .setting import SettingItem
from .user import LoginRequest, ChangePasswordRequest
from .stats import DashboardStats, MonthlyStat

import logging

from sqlalchemy import text

logger = logging.getLogger(__name__)


def _schema(pk: str) -> list[str]:
    return [
        f"""
        CREATE TABLE IF NOT EXISTS customers (
            id {pk},
            customer_name TEXT NOT NULL,
            phone_no TEXT,
            area TEXT,
            address TEXT,
            email TEXT,
            company_name TEXT,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
        """,
        # customer_id is nullable: deleting a customer keeps its call history
        f"""
        CREATE TABLE IF NOT EXISTS service_calls (
            id {pk},
            customer_id INTEGER,
            area VARCHAR(255),
            issue_description TEXT,
            status VARCHAR(50) DEFAULT 'Open',
            priority VARCHAR(50) DEFAULT 'Medium',
            technician_name VARCHAR(100),
            scheduled_date DATETIME,
            resolution_details TEXT,
            service_charge DECIMAL(10, 2) DEFAULT 0,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (customer_id) REFERENCES customers(id) ON DELETE SET NULL
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS repair_records (
            id {pk},
            customer_id INTEGER NOT NULL,
            machine_description TEXT,
            repair_description TEXT,
            repair_date DATE,
            amount_charged DECIMAL(10, 2) DEFAULT 0,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (customer_id) REFERENCES customers(id) ON DELETE CASCADE
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS amc_records (
            id {pk},
            customer_id INTEGER NOT NULL,
            start_date DATE NOT NULL,
            end_date DATE NOT NULL,
            amount DECIMAL(10, 2) DEFAULT 0,
            machine_details TEXT,
            status VARCHAR(50) DEFAULT 'Active',
            notes TEXT,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (customer_id) REFERENCES customers(id) ON DELETE CASCADE
        )
        """,
        """
        CREATE TABLE IF NOT EXISTS settings (
            key_name VARCHAR(100) PRIMARY KEY NOT NULL,
            value_data TEXT
        )
        """,
        # No FK from customers.area / service_calls.area: free text stays valid
        f"""
        CREATE TABLE IF NOT EXISTS areas (
            id {pk},
            name VARCHAR(100) NOT NULL UNIQUE
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS users (
            id {pk},
            username VARCHAR(100) NOT NULL UNIQUE,
            password VARCHAR(100) NOT NULL,
            role VARCHAR(50) DEFAULT 'admin'
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS products (
            id {pk},
            name VARCHAR(255),
            price DECIMAL(10, 2) DEFAULT 0
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS common_issues (
            id {pk},
            issue_text VARCHAR(255) NOT NULL UNIQUE
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS common_resolutions (
            id {pk},
            resolution_text VARCHAR(255) NOT NULL UNIQUE
        )
        """,
    ]


def create_tables() -> None:
    """Create all tables if they do not exist. Safe to call repeatedly."""
    from database import get_db, dialect_name

    if dialect_name() == "sqlite":
        pk = "INTEGER PRIMARY KEY AUTOINCREMENT"
    else:
        pk = "INTEGER PRIMARY KEY AUTO_INCREMENT"

    with get_db() as db:
        for ddl in _schema(pk):
            db.execute(text(ddl))
        db.commit()


def init_db():
    """
    Initialize the schema and run the start-up maintenance tasks.

    Must run before any request is served: tables first, then the AMC
    status sweep and the default user seed, one after the other.
    """
    from services import maintenance

    logger.info("Initializing tables...")
    create_tables()
    maintenance.sweep_amc_statuses()
    maintenance.ensure_default_user()
    logger.info("All tables initialized")


__all__ = [
    'CustomerIn',
    'ServiceCallIn', 'ServiceCallStatusUpdate', 'CallStatus',
    'RepairRecordIn',
    'AmcRecordIn', 'AmcStatus',
    'AreaIn', 'ProductIn', 'ReferenceTextIn',
    'SettingItem',
    'LoginRequest', 'ChangePasswordRequest',
    'DashboardStats', 'MonthlyStat',
    'create_tables', 'init_db'
]
