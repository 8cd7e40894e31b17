"""
Service Tracker - Start-up Maintenance Tasks
Version: 1.1.0

Changelog:
v1.1.0 (2026-09-02): Optional periodic AMC re-sweep
v1.0.0 (2026-07-14): AMC status sweep and default user seed
"""

import asyncio
import logging

from config import settings
from database import get_db, execute_scalar, execute_insert, execute_update
from models.amc import AmcStatus
from services import clock

logger = logging.getLogger(__name__)


def sweep_amc_statuses() -> int:
    """
    Mark Active contracts whose end date has passed as Expired.

    Returns:
        Number of contracts flipped to Expired
    """
    with get_db() as db:
        flipped = execute_update(db, """
            UPDATE amc_records SET status = :expired
            WHERE end_date < :today AND status = :active
        """, {
            "expired": AmcStatus.EXPIRED.value,
            "active": AmcStatus.ACTIVE.value,
            "today": clock.today().isoformat(),
        })
    if flipped:
        logger.info(f"AMC sweep: {flipped} contract(s) marked Expired")
    return flipped


def ensure_default_user() -> bool:
    """Seed the default admin login when the users table is empty"""
    with get_db() as db:
        count = execute_scalar(db, "SELECT COUNT(*) FROM users")
        if count:
            return False
        execute_insert(
            db, "INSERT INTO users (username, password) VALUES (:username, :password)",
            {
                "username": settings.DEFAULT_ADMIN_USERNAME,
                "password": settings.DEFAULT_ADMIN_PASSWORD,
            }
        )
    logger.info(f"Default user '{settings.DEFAULT_ADMIN_USERNAME}' created")
    return True


async def run_amc_sweeper(interval_hours: float | None = None):
    """Re-run the AMC sweep every interval_hours (background task)"""
    interval = (interval_hours or settings.AMC_SWEEP_INTERVAL_HOURS) * 3600
    logger.info(f"Starting AMC sweeper (every {interval / 3600:g}h)")
    while True:
        await asyncio.sleep(interval)
        try:
            await asyncio.to_thread(sweep_amc_statuses)
        except Exception as e:
            logger.error(f"AMC sweep failed: {e}")
