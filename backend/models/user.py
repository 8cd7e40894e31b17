"""
Service Tracker - Authentication Models
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Login and change-password payloads
"""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    username: str
    password: str


class ChangePasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str
    old_password: str = Field(..., alias="oldPassword")
    new_password: str = Field(..., alias="newPassword")
