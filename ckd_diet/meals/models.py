# -*- coding: utf-8 -*-
"""Meals — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..foods.models import Food
from ..nutrients import CamelModel


class MealFoodInput(CamelModel):
    food_id: str = Field(..., min_length=1)
    quantity: float = Field(..., gt=0, description="Multiplier of the food's serving")


class MealCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    time_of_day: Optional[str] = Field(None, max_length=64, description="e.g. breakfast, lunch")
    water_intake: float = Field(0.0, ge=0, description="ml drunk with the meal")
    foods: List[MealFoodInput] = Field(default_factory=list)


class MealUpdateRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    time_of_day: Optional[str] = Field(None, max_length=64)
    water_intake: Optional[float] = Field(None, ge=0)


class MealFood(CamelModel):
    food_id: str
    food: Optional[Food] = Field(None, description="None when the reference no longer resolves")
    quantity: float


class Meal(CamelModel):
    id: str
    user_id: str
    name: str
    time_of_day: Optional[str] = None
    water_intake: float = 0.0
    foods: List[MealFood] = Field(default_factory=list)
    created_at: str


class MealResponse(CamelModel):
    message: str
    meal: Meal
