# -*- coding: utf-8 -*-
"""Meals — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from .models import Meal, MealCreateRequest, MealFoodInput, MealResponse, MealUpdateRequest
from .storage import append_food, create_meal, delete_meal, list_meals, update_meal

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/meals", tags=["Meals"])


@router.get("", response_model=List[Meal], summary="List the current user's meals")
def get_meals(user: dict = Depends(get_current_user)):
    return list_meals(user["id"])


@router.post("", response_model=MealResponse, status_code=201, summary="Create a meal")
def create_meal_api(request: MealCreateRequest, user: dict = Depends(get_current_user)):
    meal = create_meal(user["id"], request)
    logger.info("Meal %s created with %d foods", meal.id, len(meal.foods))
    return MealResponse(message="Meal created successfully", meal=meal)


@router.put("/{meal_id}", response_model=MealResponse, summary="Update a meal's name, time or water")
def update_meal_api(meal_id: str, request: MealUpdateRequest, user: dict = Depends(get_current_user)):
    meal = update_meal(user["id"], meal_id, request.model_dump(exclude_unset=True))
    if not meal:
        raise HTTPException(status_code=404, detail="Meal not found")
    return MealResponse(message="Meal updated successfully", meal=meal)


@router.post("/{meal_id}/foods", response_model=MealResponse, summary="Append a food to a meal")
def append_food_api(meal_id: str, request: MealFoodInput, user: dict = Depends(get_current_user)):
    meal = append_food(user["id"], meal_id, request)
    if not meal:
        raise HTTPException(status_code=404, detail="Meal not found")
    return MealResponse(message="Food added to meal", meal=meal)


@router.delete("/{meal_id}", summary="Delete a meal")
def delete_meal_api(meal_id: str, user: dict = Depends(get_current_user)):
    if not delete_meal(user["id"], meal_id):
        raise HTTPException(status_code=404, detail="Meal not found")
    return {"message": "Meal deleted successfully"}
