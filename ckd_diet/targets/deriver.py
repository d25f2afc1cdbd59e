# -*- coding: utf-8 -*-
"""Diet chart target derivation.

A generation method selects an override table that is layered on the base
targets. Derivation is pure: the same inputs always give the same vector.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from ..nutrients import BASE_TARGETS, NutrientVector
from ..users.models import CKDStage
from .models import DietChartMethod

# (exclusive upper age bound, overrides); None closes the last bracket.
AGE_BRACKETS: Tuple[Tuple[Optional[int], Dict[str, float]], ...] = (
    (30, {"protein": 70, "calories": 2200, "water": 2500}),
    (50, {"protein": 65, "calories": 2000, "water": 2300}),
    (None, {"protein": 60, "calories": 1800, "water": 2000}),
)

# Allowances tighten as kidney function declines.
CKD_STAGE_OVERRIDES: Dict[CKDStage, Dict[str, float]] = {
    CKDStage.stage_1: {"protein": 80, "potassium": 3000, "phosphorus": 1000, "sodium": 2300},
    CKDStage.stage_2: {"protein": 70, "potassium": 2500, "phosphorus": 900, "sodium": 2000},
    CKDStage.stage_3: {"protein": 60, "potassium": 2000, "phosphorus": 800, "sodium": 1500},
    CKDStage.stage_4: {"protein": 50, "potassium": 1500, "phosphorus": 700, "sodium": 1300},
    CKDStage.stage_5: {"protein": 40, "potassium": 1000, "phosphorus": 600, "sodium": 1000},
}


def base_targets() -> NutrientVector:
    return NutrientVector(**BASE_TARGETS)


def age_overrides(age: Optional[float]) -> Dict[str, float]:
    # Age 0 counts as unset.
    if not age:
        return {}
    for upper, overrides in AGE_BRACKETS:
        if upper is None or age < upper:
            return overrides
    return {}


def ckd_stage_overrides(stage: Any) -> Dict[str, float]:
    if stage is None:
        return {}
    try:
        return CKD_STAGE_OVERRIDES[CKDStage(stage)]
    except ValueError:
        return {}


def custom_overrides(custom: Optional[Mapping[str, float]]) -> Dict[str, float]:
    return {k: float(v) for k, v in (custom or {}).items() if k in BASE_TARGETS and v is not None}


_RESOLVERS: Dict[DietChartMethod, Callable[..., Dict[str, float]]] = {
    DietChartMethod.custom: lambda *, custom, **_: custom_overrides(custom),
    DietChartMethod.age_based: lambda *, age, **_: age_overrides(age),
    DietChartMethod.ckd_stage: lambda *, ckd_stage, **_: ckd_stage_overrides(ckd_stage),
}


def derive_targets(
    method: DietChartMethod | str,
    *,
    age: Optional[float] = None,
    ckd_stage: Any = None,
    custom: Optional[Mapping[str, float]] = None,
) -> NutrientVector:
    """Daily targets for ``method``.

    AGE_BASED uses half-open brackets (<30, 30-49, >=50). CKD_STAGE uses the
    stage table. CUSTOM applies the supplied fields. A missing (or zero) age
    or a missing stage leaves the base targets unchanged.
    """
    resolver = _RESOLVERS[DietChartMethod(method)]
    overrides = resolver(age=age, ckd_stage=ckd_stage, custom=custom)
    return NutrientVector(**{**BASE_TARGETS, **overrides})
