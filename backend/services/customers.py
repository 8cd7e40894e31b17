"""
Service Tracker - Customer Data Access
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Customer CRUD
"""

import logging
from typing import Optional

from database import get_db, execute_one, execute_all, execute_insert, execute_update
from models.customer import CustomerIn
from services import clock

logger = logging.getLogger(__name__)


def list_customers() -> list[dict]:
    with get_db() as db:
        return execute_all(db, "SELECT * FROM customers ORDER BY id ASC")


def get_customer(customer_id: int) -> Optional[dict]:
    with get_db() as db:
        return execute_one(
            db, "SELECT * FROM customers WHERE id = :id", {"id": customer_id}
        )


def add_customer(c: CustomerIn) -> dict:
    with get_db() as db:
        new_id = execute_insert(db, """
            INSERT INTO customers
                (customer_name, phone_no, area, address, email, company_name, created_at)
            VALUES (:name, :phone, :area, :address, :email, :company, :created_at)
        """, {
            "name": c.name, "phone": c.phone, "area": c.area,
            "address": c.address, "email": c.email, "company": c.company,
            "created_at": clock.now_sql(),
        })
    logger.info(f"Customer {new_id} added: {c.name}")
    return {"id": new_id, "message": "Customer added"}


def update_customer(c: CustomerIn) -> dict:
    with get_db() as db:
        changes = execute_update(db, """
            UPDATE customers
            SET customer_name = :name, phone_no = :phone, area = :area,
                address = :address, email = :email, company_name = :company
            WHERE id = :id
        """, {
            "name": c.name, "phone": c.phone, "area": c.area,
            "address": c.address, "email": c.email, "company": c.company,
            "id": c.id,
        })
    return {"changes": changes}


def delete_customer(customer_id: int) -> dict:
    """Delete a customer; its service calls keep a NULL reference,
    repairs and AMCs go with it."""
    with get_db() as db:
        changes = execute_update(
            db, "DELETE FROM customers WHERE id = :id", {"id": customer_id}
        )
    if changes:
        logger.info(f"Customer {customer_id} deleted")
    return {"changes": changes}
