# -*- coding: utf-8 -*-
"""Sample food catalog inserted into an empty database."""

from __future__ import annotations

import logging
from typing import List

from .models import FoodCategory, FoodCreateRequest
from .storage import count_foods, create_food

logger = logging.getLogger(__name__)

SAMPLE_FOODS: List[FoodCreateRequest] = [
    FoodCreateRequest(
        name="Grilled Chicken Breast",
        category=FoodCategory.protein,
        serving_size=100,
        serving_size_unit="g",
        nutrients={
            "protein": 31,
            "calories": 165,
            "carbohydrates": 0,
            "fats": 3.6,
            "potassium": 256,
            "phosphorus": 228,
            "sodium": 74,
            "calcium": 15,
            "magnesium": 29,
            "water": 0,
        },
    ),
    FoodCreateRequest(
        name="Brown Rice",
        category=FoodCategory.grains,
        serving_size=100,
        serving_size_unit="g",
        nutrients={
            "protein": 2.3,
            "calories": 111,
            "carbohydrates": 22,
            "fats": 0.9,
            "potassium": 43,
            "phosphorus": 83,
            "sodium": 5,
            "calcium": 23,
            "magnesium": 44,
            "water": 0,
        },
    ),
    FoodCreateRequest(
        name="Broccoli",
        category=FoodCategory.vegetables,
        serving_size=100,
        serving_size_unit="g",
        nutrients={
            "protein": 2.8,
            "calories": 34,
            "carbohydrates": 7,
            "fats": 0.4,
            "potassium": 316,
            "phosphorus": 66,
            "sodium": 33,
            "calcium": 47,
            "magnesium": 21,
            "water": 0,
        },
    ),
]


def seed_foods() -> int:
    """Insert the sample catalog if no food exists yet. Returns the number inserted."""
    if count_foods() > 0:
        return 0
    for food in SAMPLE_FOODS:
        create_food(food)
    logger.info("Seeded %d sample foods", len(SAMPLE_FOODS))
    return len(SAMPLE_FOODS)
