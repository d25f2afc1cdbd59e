# -*- coding: utf-8 -*-
"""Shared nutrient vector model and camelCase base model.

The same 10-field vector is used for a food's per-serving values, a meal's
computed totals, a day's accumulated totals and a user's daily targets.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NUTRIENT_FIELDS = (
    "protein",
    "calories",
    "carbohydrates",
    "fats",
    "potassium",
    "phosphorus",
    "sodium",
    "calcium",
    "magnesium",
    "water",
)

# Nutrients that scale with food quantity. Water comes from the meal itself.
SCALABLE_FIELDS = tuple(f for f in NUTRIENT_FIELDS if f != "water")

# Daily targets used when no generation rule applies.
BASE_TARGETS: Dict[str, float] = {
    "protein": 60,
    "calories": 2000,
    "carbohydrates": 300,
    "fats": 65,
    "potassium": 2000,
    "phosphorus": 800,
    "sodium": 2000,
    "calcium": 1000,
    "magnesium": 300,
    "water": 2000,
}


class CamelModel(BaseModel):
    """Base model serialising to the camelCase keys the web client uses."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NutrientVector(CamelModel):
    protein: float = Field(0.0, ge=0, description="g")
    calories: float = Field(0.0, ge=0, description="kcal")
    carbohydrates: float = Field(0.0, ge=0, description="g")
    fats: float = Field(0.0, ge=0, description="g")
    potassium: float = Field(0.0, ge=0, description="mg")
    phosphorus: float = Field(0.0, ge=0, description="mg")
    sodium: float = Field(0.0, ge=0, description="mg")
    calcium: float = Field(0.0, ge=0, description="mg")
    magnesium: float = Field(0.0, ge=0, description="mg")
    water: float = Field(0.0, ge=0, description="ml")

    def as_dict(self) -> Dict[str, float]:
        return {f: float(getattr(self, f)) for f in NUTRIENT_FIELDS}

    def __add__(self, other: "NutrientVector") -> "NutrientVector":
        return NutrientVector(**{f: getattr(self, f) + getattr(other, f) for f in NUTRIENT_FIELDS})


class PartialNutrientVector(CamelModel):
    """Field mask over the nutrient vector: only supplied fields are applied."""

    protein: float | None = Field(None, ge=0)
    calories: float | None = Field(None, ge=0)
    carbohydrates: float | None = Field(None, ge=0)
    fats: float | None = Field(None, ge=0)
    potassium: float | None = Field(None, ge=0)
    phosphorus: float | None = Field(None, ge=0)
    sodium: float | None = Field(None, ge=0)
    calcium: float | None = Field(None, ge=0)
    magnesium: float | None = Field(None, ge=0)
    water: float | None = Field(None, ge=0)

    def supplied(self) -> Dict[str, float]:
        return {k: float(v) for k, v in self.model_dump(exclude_none=True).items() if k in NUTRIENT_FIELDS}


def vector_from_row(row: Mapping[str, Any]) -> NutrientVector:
    """Build a vector from a DB row whose nutrient columns use the field names."""
    return NutrientVector(**{f: float(row[f] or 0.0) for f in NUTRIENT_FIELDS})


def sum_vectors(vectors: Iterable[NutrientVector]) -> NutrientVector:
    total = NutrientVector()
    for v in vectors:
        total = total + v
    return total
