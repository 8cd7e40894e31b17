"""
Service Tracker - Repair Record API Endpoints
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Repair CRUD with date range filter
"""

from fastapi import APIRouter, Query
from typing import Optional

from models import RepairRecordIn
from services import repairs

router = APIRouter(prefix="/repairs", tags=["repairs"])


@router.get("")
def list_repairs(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
):
    """List repairs, optionally within an inclusive date range (?startDate=2026-01-01)"""
    return repairs.list_repair_records(start_date, end_date)


@router.post("")
def create_repair(data: RepairRecordIn):
    return repairs.add_repair_record(data)


@router.put("")
def update_repair(data: RepairRecordIn):
    return repairs.update_repair_record(data)


@router.delete("/{record_id}")
def delete_repair(record_id: int):
    return repairs.delete_repair_record(record_id)
