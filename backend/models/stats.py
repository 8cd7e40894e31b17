"""
Service Tracker - Dashboard Models
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Dashboard summary and monthly trend
"""

from pydantic import BaseModel


class DashboardStats(BaseModel):
    totalCustomers: int
    totalServiceCalls: int
    totalRepairs: int
    activeAMCs: int
    expiringAmcsCount: int


class MonthlyStat(BaseModel):
    """Activity for one calendar month (YYYY-MM)"""
    month: str
    serviceCalls: int
    repairRecords: int
