"""
Service Tracker - AMC API Endpoints
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Annual maintenance contract CRUD with filters
"""

from fastapi import APIRouter, Query
from typing import Optional

from models import AmcRecordIn
from services import amc

router = APIRouter(prefix="/amc", tags=["amc"])


@router.get("")
def list_amc(
    status: Optional[str] = None,
    expiring_soon: bool = Query(False, alias="expiringSoon"),
):
    return amc.list_amc_records(status=status, expiring_soon=expiring_soon)


@router.post("")
def create_amc(data: AmcRecordIn):
    return amc.add_amc_record(data)


@router.put("")
def update_amc(data: AmcRecordIn):
    return amc.update_amc_record(data)


@router.delete("/{record_id}")
def delete_amc(record_id: int):
    return amc.delete_amc_record(record_id)
