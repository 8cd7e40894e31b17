"""
Service Tracker - Repair Record Models
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Initial repair record models
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class RepairRecordIn(BaseModel):
    """Repair record create/update payload"""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    customer_id: int = Field(..., alias="customerId")
    machine_description: Optional[str] = None
    repair_description: Optional[str] = None
    repair_date: Optional[str] = Field(None, description="YYYY-MM-DD")
    amount_charged: Optional[float] = 0
