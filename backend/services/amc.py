"""
Service Tracker - AMC Data Access
Version: 1.1.0

Changelog:
v1.1.0 (2026-09-02): "Expiring soon" replaces the status filter instead of stacking on it
v1.0.0 (2026-07-14): Annual maintenance contract CRUD with filters
"""

import logging
from typing import Optional

from database import get_db, execute_all, execute_insert, execute_update
from models.amc import AmcRecordIn, AmcStatus
from services import clock

logger = logging.getLogger(__name__)


def list_amc_records(status: Optional[str] = None,
                     expiring_soon: bool = False) -> list[dict]:
    """
    List contracts ordered by end date (soonest first).

    Args:
        status: Exact status match (Active / Expired)
        expiring_soon: Only Active contracts ending between today and the
            expiry window (inclusive); overrides ``status``
    """
    sql = """
        SELECT amc.*, c.customer_name, c.phone_no
        FROM amc_records amc
        LEFT JOIN customers c ON amc.customer_id = c.id
    """
    conditions = []
    params = {}
    if expiring_soon:
        today = clock.today()
        conditions.append("amc.status = :status")
        conditions.append("amc.end_date >= :today")
        conditions.append("amc.end_date <= :horizon")
        params.update({
            "status": AmcStatus.ACTIVE.value,
            "today": today.isoformat(),
            "horizon": clock.expiry_horizon(today).isoformat(),
        })
    elif status:
        conditions.append("amc.status = :status")
        params["status"] = status
    if conditions:
        sql += " WHERE " + " AND ".join(conditions)
    sql += " ORDER BY amc.end_date ASC, amc.id ASC"

    with get_db() as db:
        return execute_all(db, sql, params)


def list_expiring_amc_records() -> list[dict]:
    return list_amc_records(expiring_soon=True)


def add_amc_record(r: AmcRecordIn) -> dict:
    with get_db() as db:
        new_id = execute_insert(db, """
            INSERT INTO amc_records
                (customer_id, start_date, end_date, amount, machine_details,
                 status, notes, created_at)
            VALUES (:customer_id, :start_date, :end_date, :amount,
                    :machine_details, :status, :notes, :created_at)
        """, {
            "customer_id": r.customer_id,
            "start_date": r.start_date,
            "end_date": r.end_date,
            "amount": r.amount or 0,
            "machine_details": r.machine_details,
            "status": r.status,
            "notes": r.notes,
            "created_at": clock.now_sql(),
        })
    logger.info(f"AMC {new_id} added for customer {r.customer_id} until {r.end_date}")
    return {"id": new_id}


def update_amc_record(r: AmcRecordIn) -> dict:
    with get_db() as db:
        changes = execute_update(db, """
            UPDATE amc_records
            SET customer_id = :customer_id, start_date = :start_date,
                end_date = :end_date, amount = :amount,
                machine_details = :machine_details, status = :status,
                notes = :notes
            WHERE id = :id
        """, {
            "customer_id": r.customer_id,
            "start_date": r.start_date,
            "end_date": r.end_date,
            "amount": r.amount,
            "machine_details": r.machine_details,
            "status": r.status,
            "notes": r.notes,
            "id": r.id,
        })
    return {"changes": changes}


def delete_amc_record(record_id: int) -> dict:
    with get_db() as db:
        changes = execute_update(
            db, "DELETE FROM amc_records WHERE id = :id", {"id": record_id}
        )
    return {"changes": changes}
