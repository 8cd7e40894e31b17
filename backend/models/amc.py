"""
Service Tracker - AMC Models
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Initial annual maintenance contract models
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum


class AmcStatus(str, Enum):
    ACTIVE = "Active"
    EXPIRED = "Expired"


class AmcRecordIn(BaseModel):
    """AMC create/update payload"""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    customer_id: int = Field(..., alias="customerId")
    start_date: str = Field(..., description="YYYY-MM-DD")
    end_date: str = Field(..., description="YYYY-MM-DD")
    amount: Optional[float] = 0
    machine_details: Optional[str] = None
    status: str = AmcStatus.ACTIVE.value
    notes: Optional[str] = None
