"""
Service Tracker - User Data Access
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Login lookup and password change

Passwords are stored and compared as plain text, matching the credentials
already provisioned on deployed devices.
"""

import logging
from typing import Optional

from database import get_db, execute_one, execute_update

logger = logging.getLogger(__name__)


class IncorrectPasswordError(Exception):
    """Old password did not match; nothing was changed"""

    def __init__(self, message: str = "Incorrect old password"):
        super().__init__(message)


def get_user(username: str, password: str) -> Optional[dict]:
    with get_db() as db:
        return execute_one(db, """
            SELECT * FROM users WHERE username = :username AND password = :password
        """, {"username": username, "password": password})


def change_password(username: str, old_password: str, new_password: str) -> dict:
    """
    Replace a user's password after re-checking the current one.

    Raises:
        IncorrectPasswordError: If username/old_password do not match
    """
    if not get_user(username, old_password):
        logger.warning(f"Password change rejected for '{username}'")
        raise IncorrectPasswordError()

    with get_db() as db:
        execute_update(
            db, "UPDATE users SET password = :password WHERE username = :username",
            {"password": new_password, "username": username}
        )
    logger.info(f"Password updated for '{username}'")
    return {"message": "Password updated"}
