# -*- coding: utf-8 -*-
"""Users — DB storage helpers."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..foods.models import Food
from ..foods.storage import row_to_food

_FLAG_COLUMNS = ("on_dialysis", "has_diabetes", "has_hypertension")
_PROFILE_COLUMNS = ("name", "age", "weight", "height", "ckd_stage", "medical_conditions") + _FLAG_COLUMNS


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _row_to_user(row: Any) -> Dict[str, Any]:
    user = dict(row)
    try:
        user["medical_conditions"] = json.loads(user.get("medical_conditions") or "[]")
    except json.JSONDecodeError:
        user["medical_conditions"] = []
    for col in _FLAG_COLUMNS:
        if user.get(col) is not None:
            user[col] = bool(user[col])
    return user


def get_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE email = ?", (email.lower().strip(),)).fetchone()
        return _row_to_user(row) if row else None


def get_user_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return _row_to_user(row) if row else None


def create_user(*, name: str, email: str, password_hash: str) -> Dict[str, Any]:
    user_id = str(uuid4())
    now = _utc_now()
    email_norm = email.lower().strip()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO users (id, name, email, password_hash, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (user_id, name.strip(), email_norm, password_hash, now, now),
        )
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
    return _row_to_user(row)


def update_profile(user_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Merge the supplied profile fields into the stored user.

    ``updates`` holds only the fields the client actually sent; keys outside the
    profile columns are ignored and ``name`` cannot be cleared.
    """
    assignments: List[str] = []
    params: List[Any] = []
    for col in _PROFILE_COLUMNS:
        if col not in updates:
            continue
        value = updates[col]
        if col == "name" and not value:
            continue
        if col == "medical_conditions":
            value = json.dumps(value or [], ensure_ascii=False)
        elif col == "ckd_stage" and value is not None:
            value = getattr(value, "value", value)
        elif col in _FLAG_COLUMNS and value is not None:
            value = int(bool(value))
        assignments.append(f"{col} = ?")
        params.append(value)

    assignments.append("updated_at = ?")
    params.append(_utc_now())
    params.append(user_id)

    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(f"UPDATE users SET {', '.join(assignments)} WHERE id = ?", params)
        if cur.rowcount == 0:
            return None
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
    return _row_to_user(row)


def set_diet_chart(user_id: str, target_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "UPDATE users SET diet_chart_id = ?, updated_at = ? WHERE id = ?",
            (target_id, _utc_now(), user_id),
        )


def list_favorite_foods(user_id: str) -> List[Food]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            """
            SELECT f.* FROM favorite_foods fav
            JOIN foods f ON f.id = fav.food_id
            WHERE fav.user_id = ?
            ORDER BY fav.created_at DESC, fav.rowid DESC
            """,
            (user_id,),
        ).fetchall()
    return [row_to_food(r) for r in rows]


def toggle_favorite(user_id: str, food_id: str) -> bool:
    """Add the food to favourites, or remove it if already there. Returns the new state."""
    with db_conn(settings.app_db_path) as conn:
        existing = conn.execute(
            "SELECT 1 FROM favorite_foods WHERE user_id = ? AND food_id = ?",
            (user_id, food_id),
        ).fetchone()
        if existing:
            conn.execute(
                "DELETE FROM favorite_foods WHERE user_id = ? AND food_id = ?",
                (user_id, food_id),
            )
            return False
        conn.execute(
            "INSERT INTO favorite_foods (user_id, food_id, created_at) VALUES (?, ?, ?)",
            (user_id, food_id, _utc_now()),
        )
    return True
