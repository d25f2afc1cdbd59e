# -*- coding: utf-8 -*-
"""Users — profile and favourite food endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from ..foods.models import Food
from ..foods.storage import get_food
from ..targets.storage import get_targets_by_id
from .models import (
    FavoriteToggleRequest,
    FavoriteToggleResponse,
    UserProfile,
    UserProfileUpdate,
    UserProfileUpdateResponse,
    UserProfileWithChart,
)
from .storage import list_favorite_foods, toggle_favorite, update_profile

router = APIRouter(prefix="/api/user", tags=["User"])


@router.get("/profile", response_model=UserProfileWithChart, summary="Current user's profile")
def get_profile(user: dict = Depends(get_current_user)):
    chart_id = user.get("diet_chart_id")
    chart = get_targets_by_id(chart_id) if chart_id else None
    return UserProfileWithChart(**UserProfile.model_validate(user).model_dump(), diet_chart=chart)


@router.put("/profile", response_model=UserProfileUpdateResponse, summary="Update profile fields")
def put_profile(request: UserProfileUpdate, user: dict = Depends(get_current_user)):
    updated = update_profile(user["id"], request.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="User not found")
    return UserProfileUpdateResponse(
        message="Profile updated successfully",
        user=UserProfile.model_validate(updated),
    )


@router.get("/favorites", response_model=List[Food], summary="Favourite foods, newest first")
def get_favorites(user: dict = Depends(get_current_user)):
    return list_favorite_foods(user["id"])


@router.post("/favorites", response_model=FavoriteToggleResponse, summary="Toggle a favourite food")
def post_favorite(request: FavoriteToggleRequest, user: dict = Depends(get_current_user)):
    if not get_food(request.food_id):
        raise HTTPException(status_code=404, detail="Food not found")
    added = toggle_favorite(user["id"], request.food_id)
    message = "Food added to favorites" if added else "Food removed from favorites"
    return FavoriteToggleResponse(message=message, favorite=added)
