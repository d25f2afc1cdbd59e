# -*- coding: utf-8 -*-
"""Meals — DB storage helpers."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from ..foods.storage import get_foods_by_ids
from .models import Meal, MealCreateRequest, MealFood, MealFoodInput


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _require_foods(food_ids: Iterable[str]) -> None:
    ids = set(food_ids)
    found = get_foods_by_ids(ids)
    missing = sorted(ids - set(found))
    if missing:
        raise HTTPException(status_code=404, detail=f"Food not found: {missing[0]}")


def _assemble(conn: sqlite3.Connection, rows: List[Any]) -> List[Meal]:
    if not rows:
        return []
    meal_ids = [r["id"] for r in rows]
    marks = ", ".join("?" for _ in meal_ids)
    item_rows = conn.execute(
        f"SELECT meal_id, food_id, quantity FROM meal_foods WHERE meal_id IN ({marks}) ORDER BY id ASC",
        meal_ids,
    ).fetchall()
    foods = get_foods_by_ids(r["food_id"] for r in item_rows)

    items: Dict[str, List[MealFood]] = {mid: [] for mid in meal_ids}
    for r in item_rows:
        items[r["meal_id"]].append(
            MealFood(food_id=r["food_id"], food=foods.get(r["food_id"]), quantity=r["quantity"])
        )

    return [
        Meal(
            id=r["id"],
            user_id=r["user_id"],
            name=r["name"],
            time_of_day=r["time_of_day"],
            water_intake=r["water_intake"] or 0.0,
            foods=items[r["id"]],
            created_at=r["created_at"],
        )
        for r in rows
    ]


def create_meal(user_id: str, request: MealCreateRequest) -> Meal:
    _require_foods(f.food_id for f in request.foods)
    meal_id = str(uuid4())
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO meals (id, user_id, name, time_of_day, water_intake, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (meal_id, user_id, request.name.strip(), request.time_of_day, float(request.water_intake), _utc_now()),
        )
        conn.executemany(
            "INSERT INTO meal_foods (meal_id, food_id, quantity) VALUES (?, ?, ?)",
            [(meal_id, f.food_id, float(f.quantity)) for f in request.foods],
        )
        row = conn.execute("SELECT * FROM meals WHERE id = ?", (meal_id,)).fetchone()
        return _assemble(conn, [row])[0]


def get_meal(user_id: str, meal_id: str) -> Optional[Meal]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM meals WHERE id = ? AND user_id = ?",
            (meal_id, user_id),
        ).fetchone()
        if not row:
            return None
        return _assemble(conn, [row])[0]


def list_meals(user_id: str) -> List[Meal]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM meals WHERE user_id = ? ORDER BY created_at DESC, rowid DESC",
            (user_id,),
        ).fetchall()
        return _assemble(conn, rows)


def load_meals(meal_ids: Iterable[str]) -> Dict[str, Meal]:
    ids = sorted(set(meal_ids))
    if not ids:
        return {}
    marks = ", ".join("?" for _ in ids)
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(f"SELECT * FROM meals WHERE id IN ({marks})", ids).fetchall()
        return {m.id: m for m in _assemble(conn, rows)}


def update_meal(user_id: str, meal_id: str, updates: Dict[str, Any]) -> Optional[Meal]:
    assignments: List[str] = []
    params: List[Any] = []
    for col in ("name", "time_of_day", "water_intake"):
        if col not in updates:
            continue
        value = updates[col]
        if col == "name" and not value:
            continue
        if col == "water_intake":
            value = float(value or 0.0)
        assignments.append(f"{col} = ?")
        params.append(value)

    with db_conn(settings.app_db_path) as conn:
        if assignments:
            conn.execute(
                f"UPDATE meals SET {', '.join(assignments)} WHERE id = ? AND user_id = ?",
                [*params, meal_id, user_id],
            )
        row = conn.execute(
            "SELECT * FROM meals WHERE id = ? AND user_id = ?",
            (meal_id, user_id),
        ).fetchone()
        if not row:
            return None
        return _assemble(conn, [row])[0]


def append_food(user_id: str, meal_id: str, item: MealFoodInput) -> Optional[Meal]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM meals WHERE id = ? AND user_id = ?",
            (meal_id, user_id),
        ).fetchone()
        if not row:
            return None
        _require_foods([item.food_id])
        conn.execute(
            "INSERT INTO meal_foods (meal_id, food_id, quantity) VALUES (?, ?, ?)",
            (meal_id, item.food_id, float(item.quantity)),
        )
        return _assemble(conn, [row])[0]


def delete_meal(user_id: str, meal_id: str) -> bool:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute("DELETE FROM meals WHERE id = ? AND user_id = ?", (meal_id, user_id))
        return cur.rowcount > 0
