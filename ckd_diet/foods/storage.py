# -*- coding: utf-8 -*-
"""Foods — DB storage helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..nutrients import NUTRIENT_FIELDS, vector_from_row
from .models import Food, FoodCreateRequest

_NUTRIENT_COLS = ", ".join(NUTRIENT_FIELDS)
_NUTRIENT_MARKS = ", ".join("?" for _ in NUTRIENT_FIELDS)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def row_to_food(row: Any) -> Food:
    r = dict(row)
    return Food(
        id=r["id"],
        name=r["name"],
        category=r["category"],
        serving_size=r["serving_size"],
        serving_size_unit=r["serving_size_unit"],
        nutrients=vector_from_row(r),
        is_kidney_friendly=bool(r["is_kidney_friendly"]),
        created_at=r["created_at"],
    )


def create_food(request: FoodCreateRequest) -> Food:
    food_id = str(uuid4())
    now = _utc_now()
    nutrients = request.nutrients.as_dict()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            f"""
            INSERT INTO foods (
                id, name, category, serving_size, serving_size_unit,
                {_NUTRIENT_COLS}, is_kidney_friendly, created_at
            ) VALUES (?, ?, ?, ?, ?, {_NUTRIENT_MARKS}, ?, ?)
            """,
            (
                food_id,
                request.name.strip(),
                request.category.value,
                float(request.serving_size),
                request.serving_size_unit,
                *(nutrients[f] for f in NUTRIENT_FIELDS),
                int(request.is_kidney_friendly),
                now,
            ),
        )
    return Food(id=food_id, created_at=now, **request.model_dump())


def get_food(food_id: str) -> Optional[Food]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM foods WHERE id = ?", (food_id,)).fetchone()
    return row_to_food(row) if row else None


def get_foods_by_ids(food_ids: Iterable[str]) -> Dict[str, Food]:
    ids = sorted(set(food_ids))
    if not ids:
        return {}
    marks = ", ".join("?" for _ in ids)
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(f"SELECT * FROM foods WHERE id IN ({marks})", ids).fetchall()
    return {r["id"]: row_to_food(r) for r in rows}


def search_foods(
    *,
    search: Optional[str] = None,
    category: Optional[str] = None,
    page: int = 1,
    limit: int = 50,
) -> Tuple[List[Food], int]:
    """Case-insensitive substring search on name, sorted by name. Returns (page, total)."""
    where: List[str] = []
    params: List[Any] = []
    if search:
        where.append("instr(lower(name), lower(?)) > 0")
        params.append(search)
    if category:
        where.append("category = ?")
        params.append(category)
    clause = f"WHERE {' AND '.join(where)}" if where else ""

    with db_conn(settings.app_db_path) as conn:
        total = conn.execute(f"SELECT COUNT(*) FROM foods {clause}", params).fetchone()[0]
        rows = conn.execute(
            f"SELECT * FROM foods {clause} ORDER BY name COLLATE NOCASE ASC, id ASC LIMIT ? OFFSET ?",
            [*params, limit, (page - 1) * limit],
        ).fetchall()
    return [row_to_food(r) for r in rows], int(total)


def count_foods() -> int:
    with db_conn(settings.app_db_path) as conn:
        return int(conn.execute("SELECT COUNT(*) FROM foods").fetchone()[0])
