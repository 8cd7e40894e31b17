"""
Service Tracker - Dashboard API Endpoints
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Summary counts and six-month trend
"""

from fastapi import APIRouter
from typing import List

from models import DashboardStats, MonthlyStat
from services import stats

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard-stats", response_model=DashboardStats)
def dashboard_stats():
    return stats.get_dashboard_stats()


@router.get("/monthly-stats", response_model=List[MonthlyStat])
def monthly_stats():
    return stats.get_monthly_stats()
