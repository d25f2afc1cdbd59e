# -*- coding: utf-8 -*-
"""Nutrient targets — API endpoints (targets CRUD + diet chart generation)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from ..auth.security import get_current_user
from ..nutrients import PartialNutrientVector
from ..users.storage import set_diet_chart
from .deriver import derive_targets
from .models import (
    DietChartMethod,
    GenerateDietChartRequest,
    GenerateDietChartResponse,
    NutrientTarget,
    NutrientTargetUpdateResponse,
)
from .storage import get_or_create_targets, replace_targets, upsert_targets

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/nutrient-targets", tags=["Nutrient targets"])
diet_chart_router = APIRouter(prefix="/api/generate-diet-chart", tags=["Nutrient targets"])


@router.get("", response_model=NutrientTarget, summary="Get (or create default) nutrient targets")
def get_nutrient_targets(user: dict = Depends(get_current_user)):
    return get_or_create_targets(user["id"])


@router.put("", response_model=NutrientTargetUpdateResponse, summary="Update nutrient targets")
@router.post("", response_model=NutrientTargetUpdateResponse, include_in_schema=False)
def update_nutrient_targets(request: PartialNutrientVector, user: dict = Depends(get_current_user)):
    targets = upsert_targets(user["id"], request.supplied())
    return NutrientTargetUpdateResponse(message="Nutrient targets updated successfully", nutrient_targets=targets)


@diet_chart_router.post("", response_model=GenerateDietChartResponse, summary="Generate a diet chart")
def generate_diet_chart(request: GenerateDietChartRequest, user: dict = Depends(get_current_user)):
    age = request.age if request.age is not None else user.get("age")
    custom = request.custom_targets.supplied() if request.custom_targets else None
    targets = derive_targets(
        request.method,
        age=age,
        ckd_stage=user.get("ckd_stage"),
        custom=custom,
    )
    if request.method == DietChartMethod.ckd_stage and not user.get("ckd_stage"):
        logger.info("User %s has no CKD stage on file; using base targets", user["id"])

    saved = replace_targets(user["id"], targets)
    set_diet_chart(user["id"], saved.id)
    logger.info("Diet chart generated for user %s via %s", user["id"], request.method.value)
    return GenerateDietChartResponse(
        message="Diet chart generated successfully",
        targets=targets,
        diet_chart_id=saved.id,
    )
