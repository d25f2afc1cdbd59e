# -*- coding: utf-8 -*-
"""Meal nutrient aggregation and read-time comparison against targets.

Everything here is pure: no database access, no rounding of the sums.
"""

from __future__ import annotations

from typing import Dict, List

from ..meals.models import Meal
from ..nutrients import NUTRIENT_FIELDS, SCALABLE_FIELDS, NutrientVector
from .models import NutrientProgress


def compute_meal_nutrients(meal: Meal) -> NutrientVector:
    """Nutrients contributed by one serving of ``meal``.

    Each scalable nutrient is the sum of ``food.nutrients[field] * quantity``
    over the meal's foods. Water is the meal's own ``water_intake``; the foods'
    intrinsic water values are not added. A food reference that did not
    resolve contributes nothing.
    """
    totals: Dict[str, float] = dict.fromkeys(SCALABLE_FIELDS, 0.0)
    for item in meal.foods:
        if item.food is None:
            continue
        nutrients = item.food.nutrients
        for field in SCALABLE_FIELDS:
            totals[field] += float(getattr(nutrients, field)) * float(item.quantity)
    return NutrientVector(water=float(meal.water_intake or 0.0), **totals)


def progress_against(consumed: NutrientVector, targets: NutrientVector) -> List[NutrientProgress]:
    out: List[NutrientProgress] = []
    for field in NUTRIENT_FIELDS:
        amount = float(getattr(consumed, field))
        goal = float(getattr(targets, field))
        percentage = round(amount / goal * 100, 1) if goal > 0 else 0.0
        out.append(
            NutrientProgress(
                nutrient=field,
                consumed=amount,
                target=goal,
                percentage=percentage,
                exceeded=amount > goal,
            )
        )
    return out
