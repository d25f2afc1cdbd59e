# -*- coding: utf-8 -*-
"""Foods — API endpoints."""

from __future__ import annotations

import math

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from .models import Food, FoodCategory, FoodCreateRequest, FoodSearchResponse
from .storage import create_food, search_foods

router = APIRouter(prefix="/api/foods", tags=["Foods"])


@router.get("", response_model=FoodSearchResponse, summary="Search the food catalog")
def list_foods(
    search: str | None = Query(default=None, description="Case-insensitive substring of the name"),
    category: FoodCategory | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1, le=200),
    user: dict = Depends(get_current_user),  # noqa: ARG001
):
    foods, total = search_foods(
        search=(search or "").strip() or None,
        category=category.value if category else None,
        page=page,
        limit=limit,
    )
    return FoodSearchResponse(
        foods=foods,
        total_pages=math.ceil(total / limit),
        current_page=page,
        total=total,
    )


@router.post("", response_model=Food, status_code=201, summary="Add a food to the catalog")
def add_food(request: FoodCreateRequest, user: dict = Depends(get_current_user)):  # noqa: ARG001
    return create_food(request)
