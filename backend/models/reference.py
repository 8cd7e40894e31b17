"""
Service Tracker - Reference List Models
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Areas, products, common issues and resolutions
"""

from pydantic import BaseModel, Field
from typing import Optional


class AreaIn(BaseModel):
    id: Optional[int] = None
    name: str


class ProductIn(BaseModel):
    id: Optional[int] = None
    name: str
    price: Optional[float] = 0


class ReferenceTextIn(BaseModel):
    """Common issue / resolution entry: the client sends {"text": ...}"""
    id: Optional[int] = None
    text: str = Field(..., min_length=1)
