"""
Service Tracker - Repair Record Data Access
Version: 1.0.1

Changelog:
v1.0.1 (2026-08-03): Client field aliases (machine, details, amount, date) on list rows
v1.0.0 (2026-07-14): Repair record CRUD with date range filter
"""

import logging
from typing import Optional

from database import get_db, execute_all, execute_insert, execute_update
from models.repair import RepairRecordIn
from services import clock

logger = logging.getLogger(__name__)


def _with_aliases(row: dict) -> dict:
    r = dict(row)
    r["machine"] = r.get("machine_description")
    r["details"] = r.get("repair_description")
    r["amount"] = r.get("amount_charged")
    r["date"] = r.get("repair_date")
    return r


def list_repair_records(start_date: Optional[str] = None,
                        end_date: Optional[str] = None) -> list[dict]:
    """
    List repairs, newest repair date first.

    Args:
        start_date: Inclusive lower bound on repair_date (YYYY-MM-DD)
        end_date: Inclusive upper bound on repair_date (YYYY-MM-DD)
    """
    sql = """
        SELECT rr.*, c.customer_name, c.phone_no
        FROM repair_records rr
        LEFT JOIN customers c ON rr.customer_id = c.id
    """
    conditions = []
    params = {}
    if start_date:
        conditions.append("rr.repair_date >= :start_date")
        params["start_date"] = start_date
    if end_date:
        conditions.append("rr.repair_date <= :end_date")
        params["end_date"] = end_date
    if conditions:
        sql += " WHERE " + " AND ".join(conditions)
    sql += " ORDER BY rr.repair_date DESC, rr.id DESC"

    with get_db() as db:
        rows = execute_all(db, sql, params)
    return [_with_aliases(row) for row in rows]


def add_repair_record(r: RepairRecordIn) -> dict:
    with get_db() as db:
        new_id = execute_insert(db, """
            INSERT INTO repair_records
                (customer_id, machine_description, repair_description,
                 repair_date, amount_charged, created_at)
            VALUES (:customer_id, :machine_description, :repair_description,
                    :repair_date, :amount_charged, :created_at)
        """, {
            "customer_id": r.customer_id,
            "machine_description": r.machine_description,
            "repair_description": r.repair_description,
            "repair_date": r.repair_date,
            "amount_charged": r.amount_charged or 0,
            "created_at": clock.now_sql(),
        })
    logger.info(f"Repair record {new_id} added for customer {r.customer_id}")
    return {"id": new_id}


def update_repair_record(r: RepairRecordIn) -> dict:
    with get_db() as db:
        changes = execute_update(db, """
            UPDATE repair_records
            SET customer_id = :customer_id,
                machine_description = :machine_description,
                repair_description = :repair_description,
                repair_date = :repair_date,
                amount_charged = :amount_charged
            WHERE id = :id
        """, {
            "customer_id": r.customer_id,
            "machine_description": r.machine_description,
            "repair_description": r.repair_description,
            "repair_date": r.repair_date,
            "amount_charged": r.amount_charged,
            "id": r.id,
        })
    return {"changes": changes}


def delete_repair_record(record_id: int) -> dict:
    with get_db() as db:
        changes = execute_update(
            db, "DELETE FROM repair_records WHERE id = :id", {"id": record_id}
        )
    return {"changes": changes}
