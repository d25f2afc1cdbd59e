# -*- coding: utf-8 -*-
"""Users — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..nutrients import CamelModel
from ..targets.models import NutrientTarget


class CKDStage(str, Enum):
    stage_1 = "STAGE_1"
    stage_2 = "STAGE_2"
    stage_3 = "STAGE_3"
    stage_4 = "STAGE_4"
    stage_5 = "STAGE_5"


class UserProfile(CamelModel):
    id: str
    name: str
    email: str
    age: Optional[int] = None
    weight: Optional[float] = None
    height: Optional[float] = None
    ckd_stage: Optional[CKDStage] = None
    medical_conditions: List[str] = Field(default_factory=list)
    on_dialysis: Optional[bool] = None
    has_diabetes: Optional[bool] = None
    has_hypertension: Optional[bool] = None
    created_at: str
    updated_at: str


class UserProfileWithChart(UserProfile):
    diet_chart: Optional[NutrientTarget] = None


class UserProfileUpdate(CamelModel):
    """Fields a user may change on their own profile. Unsent fields are left alone."""

    name: Optional[str] = Field(None, min_length=1, max_length=128)
    age: Optional[int] = Field(None, ge=0, le=130)
    weight: Optional[float] = Field(None, ge=0, le=500, description="kg")
    height: Optional[float] = Field(None, ge=0, le=300, description="cm")
    ckd_stage: Optional[CKDStage] = None
    medical_conditions: Optional[List[str]] = None
    on_dialysis: Optional[bool] = None
    has_diabetes: Optional[bool] = None
    has_hypertension: Optional[bool] = None


class UserProfileUpdateResponse(CamelModel):
    message: str
    user: UserProfile


class FavoriteToggleRequest(CamelModel):
    food_id: str = Field(..., min_length=1)


class FavoriteToggleResponse(CamelModel):
    message: str
    favorite: bool
