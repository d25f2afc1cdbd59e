# -*- coding: utf-8 -*-
"""Nutrient targets — DB storage helpers (one row per user)."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..nutrients import NUTRIENT_FIELDS, NutrientVector, vector_from_row
from .models import NutrientTarget


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _row_to_target(row: Any) -> NutrientTarget:
    return NutrientTarget(
        id=row["id"],
        user_id=row["user_id"],
        updated_at=row["updated_at"],
        **vector_from_row(row).as_dict(),
    )


def get_targets(user_id: str) -> Optional[NutrientTarget]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM nutrient_targets WHERE user_id = ?", (user_id,)).fetchone()
    return _row_to_target(row) if row else None


def get_targets_by_id(target_id: str) -> Optional[NutrientTarget]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM nutrient_targets WHERE id = ?", (target_id,)).fetchone()
    return _row_to_target(row) if row else None


def get_or_create_targets(user_id: str) -> NutrientTarget:
    """Return the user's targets, creating the default row on first access."""
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "INSERT OR IGNORE INTO nutrient_targets (id, user_id, updated_at) VALUES (?, ?, ?)",
            (str(uuid4()), user_id, _utc_now()),
        )
        row = conn.execute("SELECT * FROM nutrient_targets WHERE user_id = ?", (user_id,)).fetchone()
    return _row_to_target(row)


def upsert_targets(user_id: str, values: Dict[str, float]) -> NutrientTarget:
    """Write the given nutrient fields; others keep their stored (or default) value."""
    cols = [f for f in NUTRIENT_FIELDS if f in values]
    col_sql = "".join(f", {c}" for c in cols)
    mark_sql = "".join(", ?" for _ in cols)
    set_sql = "".join(f"{c} = excluded.{c}, " for c in cols)
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            f"""
            INSERT INTO nutrient_targets (id, user_id, updated_at{col_sql})
            VALUES (?, ?, ?{mark_sql})
            ON CONFLICT(user_id) DO UPDATE SET {set_sql}updated_at = excluded.updated_at
            """,
            (str(uuid4()), user_id, _utc_now(), *(float(values[c]) for c in cols)),
        )
        row = conn.execute("SELECT * FROM nutrient_targets WHERE user_id = ?", (user_id,)).fetchone()
    return _row_to_target(row)


def replace_targets(user_id: str, targets: NutrientVector) -> NutrientTarget:
    return upsert_targets(user_id, targets.as_dict())
