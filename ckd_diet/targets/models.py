# -*- coding: utf-8 -*-
"""Nutrient targets — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field

from ..nutrients import CamelModel, NutrientVector, PartialNutrientVector


class DietChartMethod(str, Enum):
    custom = "CUSTOM"
    age_based = "AGE_BASED"
    ckd_stage = "CKD_STAGE"


class NutrientTarget(NutrientVector):
    id: str
    user_id: str
    updated_at: str


class NutrientTargetUpdateResponse(CamelModel):
    message: str
    nutrient_targets: NutrientTarget


class GenerateDietChartRequest(CamelModel):
    method: DietChartMethod
    age: Optional[int] = Field(None, ge=0, le=130, description="Defaults to the profile age")
    custom_targets: Optional[PartialNutrientVector] = Field(None, description="Used by CUSTOM only")


class GenerateDietChartResponse(CamelModel):
    message: str
    targets: NutrientVector
    diet_chart_id: str
