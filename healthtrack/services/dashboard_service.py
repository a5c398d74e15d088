"""
dashboard_service.py — Dashboard bundle
Runs the scoring pipeline over a HealthContext: gap-filled trend window,
latest score and breakdown, insights, recommendations, stats, plan
adherence and today's progress.
"""

import logging
from datetime import date

from healthtrack.config import DEFAULT_WINDOW_SIZE
from healthtrack.context import HealthContext
from healthtrack.models.daily_log import TREND_METRICS
from healthtrack.services.insight_generator import InsightGenerator
from healthtrack.services.plan_service import PlanService
from healthtrack.services.progress_service import ProgressService
from healthtrack.services.score_engine import ScoreEngine
from healthtrack.services.trend_aggregator import TrendAggregator

logger = logging.getLogger(__name__)


class DashboardService:
    @staticmethod
    def score(context: HealthContext) -> dict:
        latest = context.latest()
        if latest is None:
            return {"date": None, "total": 0, "breakdown": {}}
        weights = ScoreEngine.weights_for_goal(context.goal)
        return {
            "date": latest.date,
            "total": ScoreEngine.compute_composite_score(latest, weights),
            "breakdown": ScoreEngine.compute_category_breakdown(latest),
        }

    @staticmethod
    def trends(context: HealthContext, window_size: int | None = None, end_date: date | None = None) -> dict:
        series = TrendAggregator.build_window(context.logs, window_size or DEFAULT_WINDOW_SIZE, end_date)
        changes = {m: TrendAggregator.compute_period_change(series, m) for m in TREND_METRICS}
        return {
            "series": series,
            "changes": changes,
            "changes_display": {m: TrendAggregator.format_change(c) for m, c in changes.items()},
        }

    @staticmethod
    def insights(context: HealthContext, window_size: int | None = None) -> dict:
        recent = context.recent(window_size or DEFAULT_WINDOW_SIZE)
        return {
            "insights": InsightGenerator.generate_insights(recent),
            "recommendations": InsightGenerator.generate_recommendations(context.latest()),
        }

    @staticmethod
    def build(context: HealthContext, window_size: int | None = None, end_date: date | None = None) -> dict:
        plan = PlanService.plan_for_goal(context.goal)
        logger.debug("Building dashboard from %d logs (goal=%r)", len(context.logs), context.goal)
        return {
            "goal": context.goal,
            "score": DashboardService.score(context),
            "trend": DashboardService.trends(context, window_size, end_date),
            **DashboardService.insights(context, window_size),
            "stats": TrendAggregator.summarize(context.logs),
            "plan": plan,
            "adherence": PlanService.adherence_stats(context.logs, plan),
            "progress": ProgressService.daily_progress(context.logs),
            "motivation": InsightGenerator.motivation_message(len(context.logs)),
        }
