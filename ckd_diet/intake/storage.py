# -*- coding: utf-8 -*-
"""Daily intake — DB storage helpers.

One row per (user, date). Logging a meal adds its nutrients to the row in a
single upsert statement, so concurrent logs for the same day never lose an
increment. Totals are never recomputed from the meals afterwards.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..meals.storage import load_meals
from ..nutrients import NUTRIENT_FIELDS, NutrientVector, vector_from_row
from .models import DailyIntake

_NUTRIENT_COLS = ", ".join(NUTRIENT_FIELDS)
_NUTRIENT_MARKS = ", ".join("?" for _ in NUTRIENT_FIELDS)
_NUTRIENT_INCREMENTS = ", ".join(f"{f} = daily_intakes.{f} + excluded.{f}" for f in NUTRIENT_FIELDS)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def accumulate_daily_intake(
    user_id: str,
    date: str,
    meal_id: str,
    meal_nutrients: NutrientVector,
) -> str:
    """Add ``meal_nutrients`` to the user's totals for ``date`` and record the meal.

    Creates the day's record on first use. Returns the record id.
    """
    values = meal_nutrients.as_dict()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            f"""
            INSERT INTO daily_intakes (id, user_id, date, {_NUTRIENT_COLS}, created_at)
            VALUES (?, ?, ?, {_NUTRIENT_MARKS}, ?)
            ON CONFLICT(user_id, date) DO UPDATE SET {_NUTRIENT_INCREMENTS}
            """,
            (str(uuid4()), user_id, date, *(values[f] for f in NUTRIENT_FIELDS), _utc_now()),
        )
        intake_id = conn.execute(
            "SELECT id FROM daily_intakes WHERE user_id = ? AND date = ?",
            (user_id, date),
        ).fetchone()["id"]
        conn.execute(
            "INSERT INTO daily_intake_meals (intake_id, meal_id) VALUES (?, ?)",
            (intake_id, meal_id),
        )
    return intake_id


def _populate(rows: List[Any], links: List[Any]) -> List[DailyIntake]:
    meals = load_meals(link["meal_id"] for link in links)
    by_intake: Dict[str, List[str]] = {}
    for link in links:
        by_intake.setdefault(link["intake_id"], []).append(link["meal_id"])

    return [
        DailyIntake(
            id=r["id"],
            user_id=r["user_id"],
            date=r["date"],
            # Deleted meals drop out of the list; their nutrients stay in the totals.
            meals=[meals[mid] for mid in by_intake.get(r["id"], []) if mid in meals],
            total_nutrients=vector_from_row(r),
            created_at=r["created_at"],
        )
        for r in rows
    ]


def list_daily_intakes(
    user_id: str,
    *,
    date: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> List[DailyIntake]:
    """Intake records for one date, or for a (possibly open) range, newest first."""
    sql = "SELECT * FROM daily_intakes WHERE user_id = ?"
    params: List[Any] = [user_id]
    if date:
        sql += " AND date = ?"
        params.append(date)
    else:
        if start:
            sql += " AND date >= ?"
            params.append(start)
        if end:
            sql += " AND date <= ?"
            params.append(end)
    sql += " ORDER BY date DESC"

    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
        links: List[Any] = []
        if rows:
            ids = [r["id"] for r in rows]
            marks = ", ".join("?" for _ in ids)
            links = conn.execute(
                f"SELECT intake_id, meal_id FROM daily_intake_meals WHERE intake_id IN ({marks}) ORDER BY id ASC",
                ids,
            ).fetchall()
    return _populate(rows, links)


def get_daily_intake(user_id: str, date: str) -> Optional[DailyIntake]:
    found = list_daily_intakes(user_id, date=date)
    return found[0] if found else None


def get_daily_totals(user_id: str, date: str) -> NutrientVector:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            f"SELECT {_NUTRIENT_COLS} FROM daily_intakes WHERE user_id = ? AND date = ?",
            (user_id, date),
        ).fetchone()
    return vector_from_row(row) if row else NutrientVector()
