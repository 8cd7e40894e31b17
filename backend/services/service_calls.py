"""
Service Tracker - Service Call Data Access
Version: 1.1.1

Changelog:
v1.1.1 (2026-10-18): Null status/priority default to Open/Medium on create and update
v1.1.0 (2026-08-21): Status transition and today's pending calls
v1.0.0 (2026-07-14): Service call CRUD with customer join
"""

import logging
from datetime import timedelta
from typing import Optional

from database import get_db, execute_one, execute_all, execute_insert, execute_update
from models.service_call import ServiceCallIn, CallStatus, TERMINAL_STATUSES
from services import clock

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = "Medium"


def _params(sc: ServiceCallIn) -> dict:
    return {
        "customer_id": sc.customer_id,
        "area": sc.area,
        "issue_description": sc.issue_description,
        "status": sc.status or CallStatus.OPEN.value,
        "priority": sc.priority or DEFAULT_PRIORITY,
        "technician_name": sc.technician_name,
        "scheduled_date": sc.scheduled_date or None,
        "resolution_details": sc.resolution_details,
        "service_charge": sc.service_charge,
    }


def list_service_calls() -> list[dict]:
    """All calls, newest first, with the customer's name and phone"""
    with get_db() as db:
        return execute_all(db, """
            SELECT sc.*, c.customer_name, c.phone_no
            FROM service_calls sc
            LEFT JOIN customers c ON sc.customer_id = c.id
            ORDER BY sc.created_at DESC, sc.id DESC
        """)


def get_service_call(call_id: int) -> Optional[dict]:
    with get_db() as db:
        return execute_one(db, """
            SELECT sc.*, c.customer_name, c.phone_no, c.address, c.email
            FROM service_calls sc
            LEFT JOIN customers c ON sc.customer_id = c.id
            WHERE sc.id = :id
        """, {"id": call_id})


def add_service_call(sc: ServiceCallIn) -> dict:
    params = _params(sc)
    params["technician_name"] = sc.technician_name or ""
    params["resolution_details"] = sc.resolution_details or ""
    params["service_charge"] = sc.service_charge or 0
    params["created_at"] = clock.now_sql()

    with get_db() as db:
        new_id = execute_insert(db, """
            INSERT INTO service_calls
                (customer_id, area, issue_description, status, priority,
                 technician_name, scheduled_date, resolution_details,
                 service_charge, created_at)
            VALUES (:customer_id, :area, :issue_description, :status, :priority,
                    :technician_name, :scheduled_date, :resolution_details,
                    :service_charge, :created_at)
        """, params)
    logger.info(f"Service call {new_id} opened for customer {sc.customer_id}")
    return {"id": new_id}


def update_service_call(sc: ServiceCallIn) -> dict:
    """Full replacement of a call's editable fields"""
    params = _params(sc)
    params["id"] = sc.id
    with get_db() as db:
        changes = execute_update(db, """
            UPDATE service_calls
            SET customer_id = :customer_id, area = :area,
                issue_description = :issue_description, status = :status,
                priority = :priority, technician_name = :technician_name,
                scheduled_date = :scheduled_date,
                resolution_details = :resolution_details,
                service_charge = :service_charge
            WHERE id = :id
        """, params)
    return {"changes": changes}


def update_service_call_status(call_id: int, status: str,
                               resolution: Optional[str]) -> dict:
    with get_db() as db:
        changes = execute_update(db, """
            UPDATE service_calls
            SET status = :status, resolution_details = :resolution
            WHERE id = :id
        """, {"status": status, "resolution": resolution, "id": call_id})
    if changes:
        logger.info(f"Service call {call_id} -> {status}")
    return {"changes": changes}


def delete_service_call(call_id: int) -> dict:
    with get_db() as db:
        changes = execute_update(
            db, "DELETE FROM service_calls WHERE id = :id", {"id": call_id}
        )
    return {"changes": changes}


def list_pending_calls_for_today() -> list[dict]:
    """Calls not yet Completed/Closed whose scheduled date is today"""
    day = clock.today()
    with get_db() as db:
        return execute_all(db, """
            SELECT sc.*, c.customer_name, c.phone_no
            FROM service_calls sc
            LEFT JOIN customers c ON sc.customer_id = c.id
            WHERE sc.status NOT IN (:done, :closed)
              AND sc.scheduled_date >= :day_start
              AND sc.scheduled_date < :day_end
            ORDER BY sc.scheduled_date ASC
        """, {
            "done": TERMINAL_STATUSES[0],
            "closed": TERMINAL_STATUSES[1],
            "day_start": day.isoformat(),
            "day_end": (day + timedelta(days=1)).isoformat(),
        })
