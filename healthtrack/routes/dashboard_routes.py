from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from healthtrack.context import HealthContext
from healthtrack.dependencies import get_context
from healthtrack.services.dashboard_service import DashboardService
from healthtrack.services.progress_service import ProgressService
from healthtrack.services.trend_aggregator import TrendAggregator

router = APIRouter(prefix="/api/v1/health", tags=["Dashboard"])


@router.get("/dashboard")
def get_dashboard(
    window: Optional[int] = Query(None, ge=2, le=365),
    end_date: Optional[date] = None,
    context: HealthContext = Depends(get_context),
):
    return DashboardService.build(context, window, end_date)


@router.get("/score")
def health_score(context: HealthContext = Depends(get_context)):
    return DashboardService.score(context)


@router.get("/trends")
def health_trends(
    window: Optional[int] = Query(None, ge=1, le=365),
    end_date: Optional[date] = None,
    context: HealthContext = Depends(get_context),
):
    return DashboardService.trends(context, window, end_date)


@router.get("/insights")
def health_insights(
    window: Optional[int] = Query(None, ge=2, le=365),
    context: HealthContext = Depends(get_context),
):
    return DashboardService.insights(context, window)


@router.get("/stats")
def health_stats(context: HealthContext = Depends(get_context)):
    return TrendAggregator.summarize(context.logs)


@router.get("/progress")
def daily_progress(day: Optional[date] = None, context: HealthContext = Depends(get_context)):
    return ProgressService.daily_progress(context.logs, day)
