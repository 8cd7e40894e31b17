"""
Service Tracker - Service Call Models
Version: 1.1.1

Changelog:
v1.1.1 (2026-10-18): status/priority accept null and fall back to Open/Medium
v1.1.0 (2026-08-21): Status update payload
v1.0.0 (2026-07-14): Initial service call models
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum


class CallStatus(str, Enum):
    """Known service call states; Completed and Closed are terminal"""
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CLOSED = "Closed"


TERMINAL_STATUSES = (CallStatus.COMPLETED.value, CallStatus.CLOSED.value)


class ServiceCallIn(BaseModel):
    """Service call create/update payload"""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    customer_id: Optional[int] = Field(None, alias="customerId")
    area: Optional[str] = None
    issue_description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    technician_name: Optional[str] = ""
    scheduled_date: Optional[str] = Field(None, alias="scheduledDate")
    resolution_details: Optional[str] = ""
    service_charge: Optional[float] = 0


class ServiceCallStatusUpdate(BaseModel):
    id: int
    status: str
    resolution: Optional[str] = None
