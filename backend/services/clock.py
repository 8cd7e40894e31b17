"""
Service Tracker - Business Clock
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Dates and timestamps in the configured shop time zone
"""

from datetime import date, datetime, timedelta, timezone
from typing import List

from config import settings


def shop_timezone() -> timezone:
    """Parse TIMEZONE_OFFSET ("+05:30", "-04:00", "Z") into a fixed timezone"""
    raw = settings.TIMEZONE_OFFSET.strip()
    if raw in ("Z", "UTC", "+00:00"):
        return timezone.utc
    sign = -1 if raw.startswith("-") else 1
    hours, _, minutes = raw.lstrip("+-").partition(":")
    return timezone(sign * timedelta(hours=int(hours), minutes=int(minutes or 0)))


def now() -> datetime:
    return datetime.now(shop_timezone()).replace(tzinfo=None)


def now_sql() -> str:
    """Current timestamp formatted for DATETIME columns"""
    return now().strftime("%Y-%m-%d %H:%M:%S")


def today() -> date:
    return now().date()


def expiry_horizon(start: date | None = None) -> date:
    """Last day of the "expiring soon" window"""
    start = start or today()
    return start + timedelta(days=settings.AMC_EXPIRY_WINDOW_DAYS)


def month_starts(count: int, reference: date | None = None) -> List[date]:
    """First day of the current month and the count-1 preceding, ascending"""
    reference = reference or today()
    year, month = reference.year, reference.month
    starts = []
    for _ in range(count):
        starts.append(date(year, month, 1))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(starts))


def next_month(start: date) -> date:
    if start.month == 12:
        return date(start.year + 1, 1, 1)
    return date(start.year, start.month + 1, 1)
