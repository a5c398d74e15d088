from datetime import date
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, ValidationError

from healthtrack.context import HealthContext
from healthtrack.dependencies import get_context, get_log_store, upstream_error
from healthtrack.log_store import LogStoreClient, LogStoreError
from healthtrack.models.daily_log import DailyLogEntry
from healthtrack.services.plan_service import PlanService

router = APIRouter(prefix="/api/v1/health", tags=["Health"])


class HealthLogCreateUpdate(BaseModel):
    # Numbers stay loose here; DailyLogEntry rounds or zeroes bad values
    date: Optional[str] = None
    mood: Optional[Union[float, str]] = None
    sleepHours: Optional[Union[float, str]] = None
    waterConsumed: Optional[Union[float, str]] = None
    waterIntake: Optional[Union[float, str]] = None
    nutrition: Optional[Union[float, str]] = None
    mealQuality: Optional[Union[float, str]] = None
    exerciseDuration: Optional[Union[float, str]] = None
    stressLevel: Optional[Union[float, str]] = None
    exercise: Optional[str] = None
    meals: Optional[Union[list[str], str]] = None
    symptoms: Optional[Union[list[str], str]] = None
    notes: Optional[str] = None

    def to_entry(self) -> DailyLogEntry:
        data = self.model_dump(exclude_unset=True)
        data["date"] = data.get("date") or date.today().isoformat()
        return DailyLogEntry.model_validate(data)


def _entry_or_422(log_data: HealthLogCreateUpdate) -> DailyLogEntry:
    try:
        return log_data.to_entry()
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=f"Invalid log date: {e.errors()[0]['msg']}")


@router.get("/logs")
def list_health_logs(context: HealthContext = Depends(get_context)):
    return context.logs


@router.get("/logs/today")
def get_today_health(store: LogStoreClient = Depends(get_log_store)):
    try:
        return store.fetch_today()
    except LogStoreError as e:
        raise upstream_error(e)


@router.get("/logs/{day}")
def get_health_log(day: date, context: HealthContext = Depends(get_context)):
    for entry in context.logs:
        if entry.date == day:
            return {"status": "success", "data": entry}
    return {"status": "success", "data": None}


@router.post("/logs")
def save_health_log(log_data: HealthLogCreateUpdate, store: LogStoreClient = Depends(get_log_store)):
    """Create or update the log for its date, then grade it against the user's plan."""
    entry = _entry_or_422(log_data)
    try:
        stored = store.submit_log(entry)
        context = HealthContext.load(store)
    except LogStoreError as e:
        raise upstream_error(e)

    context.add_log(stored)
    plan = PlanService.plan_for_goal(context.goal)
    feedback = PlanService.feedback(stored, plan, len(context.logs))
    return {"status": "success", "data": stored, "feedback": feedback}


@router.post("/feedback")
def preview_feedback(log_data: HealthLogCreateUpdate, context: HealthContext = Depends(get_context)):
    """Feedback for a log without storing it."""
    entry = _entry_or_422(log_data)
    plan = PlanService.plan_for_goal(context.goal)
    return PlanService.feedback(entry, plan, len(context.logs))


@router.get("/plan")
def get_health_plan(goal: Optional[str] = None, context: HealthContext = Depends(get_context)):
    return PlanService.plan_for_goal(goal if goal is not None else context.goal)


@router.get("/export")
def export_health_data(context: HealthContext = Depends(get_context)):
    return Response(content=context.export_json(), media_type="application/json")
