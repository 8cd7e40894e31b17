"""
Service Tracker - Service Call API Endpoints
Version: 1.1.0

Changelog:
v1.1.0 (2026-08-21): Status update and today's pending calls
v1.0.0 (2026-07-14): Initial service call CRUD
"""

from fastapi import APIRouter, HTTPException

from models import ServiceCallIn, ServiceCallStatusUpdate
from services import service_calls

router = APIRouter(prefix="/service-calls", tags=["service-calls"])


@router.get("")
def list_service_calls():
    return service_calls.list_service_calls()


# Declared before /{call_id} so "pending" is not parsed as an id
@router.get("/pending")
def list_pending_calls():
    """Today's calls that are not Completed or Closed"""
    return service_calls.list_pending_calls_for_today()


@router.get("/{call_id}")
def get_service_call(call_id: int):
    call = service_calls.get_service_call(call_id)
    if not call:
        raise HTTPException(status_code=404, detail="Service call not found")
    return call


@router.post("")
def create_service_call(data: ServiceCallIn):
    return service_calls.add_service_call(data)


@router.put("")
def update_service_call(data: ServiceCallIn):
    return service_calls.update_service_call(data)


@router.put("/status")
def update_service_call_status(data: ServiceCallStatusUpdate):
    """Move a call to a new status (e.g. Open -> Completed) with its resolution"""
    return service_calls.update_service_call_status(data.id, data.status, data.resolution)


@router.delete("/{call_id}")
def delete_service_call(call_id: int):
    return service_calls.delete_service_call(call_id)
