"""
Service Tracker - Customer Models
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Initial customer models
"""

from pydantic import BaseModel, Field
from typing import Optional


class CustomerIn(BaseModel):
    """Customer create/update payload as sent by the mobile client"""
    id: Optional[int] = Field(None, description="Required for updates")
    name: str = Field(..., description="Customer name")
    phone: Optional[str] = None
    area: Optional[str] = Field(None, description="Free text, not tied to the areas list")
    address: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None
