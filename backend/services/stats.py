"""
Service Tracker - Dashboard Statistics
Version: 1.1.0

Changelog:
v1.1.0 (2026-09-02): Monthly trend bucketed in Python so every month is reported
v1.0.0 (2026-07-14): Dashboard summary counts
"""

from database import get_db, execute_scalar, execute_all
from models.amc import AmcStatus
from services import clock

TREND_MONTHS = 6


def get_dashboard_stats() -> dict:
    today = clock.today()
    active = AmcStatus.ACTIVE.value
    with get_db() as db:
        return {
            "totalCustomers": execute_scalar(db, "SELECT COUNT(*) FROM customers"),
            "totalServiceCalls": execute_scalar(db, "SELECT COUNT(*) FROM service_calls"),
            "totalRepairs": execute_scalar(db, "SELECT COUNT(*) FROM repair_records"),
            "activeAMCs": execute_scalar(
                db, "SELECT COUNT(*) FROM amc_records WHERE status = :status",
                {"status": active}
            ),
            "expiringAmcsCount": execute_scalar(db, """
                SELECT COUNT(*) FROM amc_records
                WHERE status = :status AND end_date >= :today AND end_date <= :horizon
            """, {
                "status": active,
                "today": today.isoformat(),
                "horizon": clock.expiry_horizon(today).isoformat(),
            }),
        }


def get_monthly_stats() -> list[dict]:
    """
    Service calls created and repairs dated per month, for the current
    month and the five before it (oldest first). Months without activity
    are reported with zero counts.
    """
    starts = clock.month_starts(TREND_MONTHS)
    buckets = {
        start.strftime("%Y-%m"): {"serviceCalls": 0, "repairRecords": 0}
        for start in starts
    }
    params = {
        "since": starts[0].isoformat(),
        "until": clock.next_month(starts[-1]).isoformat(),
    }

    with get_db() as db:
        calls = execute_all(db, """
            SELECT created_at AS day FROM service_calls
            WHERE created_at >= :since AND created_at < :until
        """, params)
        repairs = execute_all(db, """
            SELECT repair_date AS day FROM repair_records
            WHERE repair_date >= :since AND repair_date < :until
        """, params)

    for rows, field in ((calls, "serviceCalls"), (repairs, "repairRecords")):
        for row in rows:
            month = str(row["day"])[:7]
            if month in buckets:
                buckets[month][field] += 1

    return [{"month": month, **counts} for month, counts in buckets.items()]
