"""
Service Tracker - Authentication API Endpoints
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Login and change password
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import logging

from config import settings
from models import LoginRequest, ChangePasswordRequest
from services import users

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/login")
def login(data: LoginRequest):
    user = users.get_user(data.username, data.password)
    if not user:
        logger.warning(f"Failed login for '{data.username}'")
        return JSONResponse(
            status_code=401,
            content={"success": False, "message": settings.LOGIN_FAILED_MESSAGE},
        )
    return {"success": True, "user": {"username": user["username"], "role": user["role"]}}


@router.post("/change-password")
def change_password(data: ChangePasswordRequest):
    try:
        result = users.change_password(data.username, data.old_password, data.new_password)
    except (users.IncorrectPasswordError, SQLAlchemyError) as e:
        return JSONResponse(status_code=500, content={"success": False, "message": str(e)})
    return {"success": True, "message": result["message"]}
