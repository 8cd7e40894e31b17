"""
Service Tracker - Settings API Endpoints
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Company settings read and bulk save
"""

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from typing import Any

from models import SettingItem
from services import settings_store

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
def get_settings():
    """All settings as a {key: value} object"""
    return settings_store.get_all_settings()


@router.post("")
def save_settings(payload: Any = Body(...)):
    """Bulk upsert; body is an array: [{"key": "companyName", "value": "..."}]"""
    if not isinstance(payload, list):
        return JSONResponse(status_code=400, content={"error": "Data should be an array of settings"})
    try:
        items = [SettingItem.model_validate(item) for item in payload]
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})

    for item in items:
        settings_store.save_setting(item.key, item.value)
    return {"success": True, "message": "Settings saved"}
