"""
Service Tracker - Settings Models
Version: 1.0.1

Changelog:
v1.0.1 (2026-10-18): Non-string values stored as JSON text (true, 24, 1.5)
v1.0.0 (2026-07-14): Initial key-value settings models
"""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional
import json


class SettingItem(BaseModel):
    """Key-value pair (e.g. companyName); values are stored as text"""
    key: str = Field(..., min_length=1)
    value: Optional[Any] = None

    @field_validator("value")
    @classmethod
    def _as_text(cls, v):
        if v is None or isinstance(v, str):
            return v
        return json.dumps(v)
