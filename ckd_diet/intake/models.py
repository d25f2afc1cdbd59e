# -*- coding: utf-8 -*-
"""Daily intake — Pydantic models."""

from __future__ import annotations

from datetime import date as date_type
from typing import List, Optional

from pydantic import Field, field_validator

from ..meals.models import Meal
from ..nutrients import CamelModel, NutrientVector


def check_iso_date(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    try:
        return date_type.fromisoformat(value.strip()).isoformat()
    except ValueError as exc:
        raise ValueError("date must be YYYY-MM-DD") from exc


class LogMealRequest(CamelModel):
    meal_id: str = Field(..., min_length=1)
    date: Optional[str] = Field(None, description="YYYY-MM-DD, defaults to today (UTC)")

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: Optional[str]) -> Optional[str]:
        return check_iso_date(value)


class DailyIntake(CamelModel):
    id: str
    user_id: str
    date: str
    meals: List[Meal] = Field(default_factory=list)
    total_nutrients: NutrientVector = Field(default_factory=NutrientVector)
    created_at: str


class LogMealResponse(CamelModel):
    message: str
    daily_intake: DailyIntake


class NutrientProgress(CamelModel):
    nutrient: str
    consumed: float
    target: float
    percentage: float = Field(..., description="consumed / target * 100, one decimal")
    exceeded: bool


class DailyProgressResponse(CamelModel):
    date: str
    total_nutrients: NutrientVector
    targets: NutrientVector
    nutrients: List[NutrientProgress]
    exceeded: List[str] = Field(default_factory=list)
