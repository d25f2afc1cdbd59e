# -*- coding: utf-8 -*-
"""Daily intake — API endpoints."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from ..config import settings
from ..meals.storage import get_meal
from ..nutrients import NutrientVector
from ..targets.storage import get_or_create_targets
from .aggregator import compute_meal_nutrients, progress_against
from .models import DailyIntake, DailyProgressResponse, LogMealRequest, LogMealResponse, check_iso_date
from .storage import accumulate_daily_intake, get_daily_intake, get_daily_totals, list_daily_intakes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/daily-intake", tags=["Daily intake"])


def _today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def _date_or_400(value: str | None, name: str) -> str | None:
    try:
        return check_iso_date(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"{name} must be YYYY-MM-DD") from exc


@router.post("", response_model=LogMealResponse, summary="Log a meal into a day's intake")
def log_meal(request: LogMealRequest, user: dict = Depends(get_current_user)):
    meal = get_meal(user["id"], request.meal_id)
    if not meal:
        raise HTTPException(status_code=404, detail="Meal not found")

    day = request.date or _today()
    nutrients = compute_meal_nutrients(meal)
    accumulate_daily_intake(user["id"], day, meal.id, nutrients)
    logger.info("Meal %s logged for user %s on %s", meal.id, user["id"], day)

    return LogMealResponse(
        message="Meal added to daily intake successfully",
        daily_intake=get_daily_intake(user["id"], day),
    )


@router.get("", response_model=List[DailyIntake], summary="Daily intake records for a date or range")
def get_intakes(
    date: str | None = Query(default=None, description="YYYY-MM-DD"),
    start_date: str | None = Query(default=None, alias="startDate", description="YYYY-MM-DD"),
    end_date: str | None = Query(default=None, alias="endDate", description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
):
    date = _date_or_400(date, "date")
    start_date = _date_or_400(start_date, "startDate")
    end_date = _date_or_400(end_date, "endDate")
    if not (date or start_date or end_date):
        start_date = (
            datetime.now(timezone.utc).date() - timedelta(days=settings.intake_default_days)
        ).isoformat()
    return list_daily_intakes(user["id"], date=date, start=start_date, end=end_date)


@router.get("/progress", response_model=DailyProgressResponse, summary="Intake versus targets for one day")
def get_progress(
    date: str | None = Query(default=None, description="YYYY-MM-DD, defaults to today (UTC)"),
    user: dict = Depends(get_current_user),
):
    day = _date_or_400(date, "date") or _today()
    totals = get_daily_totals(user["id"], day)
    targets = get_or_create_targets(user["id"])
    nutrients = progress_against(totals, targets)
    return DailyProgressResponse(
        date=day,
        total_nutrients=totals,
        targets=NutrientVector(**targets.as_dict()),
        nutrients=nutrients,
        exceeded=[n.nutrient for n in nutrients if n.exceeded],
    )
