# -*- coding: utf-8 -*-
"""Foods — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import Field

from ..nutrients import CamelModel, NutrientVector


class FoodCategory(str, Enum):
    vegetables = "VEGETABLES"
    fruits = "FRUITS"
    grains = "GRAINS"
    protein = "PROTEIN"
    dairy = "DAIRY"
    beverages = "BEVERAGES"
    snacks = "SNACKS"
    other = "OTHER"


class FoodCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    category: FoodCategory = FoodCategory.other
    serving_size: float = Field(..., gt=0)
    serving_size_unit: str = Field(..., min_length=1, max_length=32, description="e.g. 'g', 'ml', 'cup'")
    nutrients: NutrientVector = Field(default_factory=NutrientVector, description="Per serving")
    is_kidney_friendly: bool = True


class Food(FoodCreateRequest):
    id: str
    created_at: str


class FoodSearchResponse(CamelModel):
    foods: List[Food]
    total_pages: int
    current_page: int
    total: int
