# -*- coding: utf-8 -*-
"""App database — SQLite helpers.

Nutrient vectors are stored as one REAL column per nutrient so that the daily
intake upsert can add to them in a single statement.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional

from .nutrients import BASE_TARGETS, NUTRIENT_FIELDS


def _nutrient_columns(defaults: Optional[Dict[str, float]] = None) -> str:
    defaults = defaults or {}
    return ",\n".join(
        f"                {f} REAL NOT NULL DEFAULT {defaults.get(f, 0)}" for f in NUTRIENT_FIELDS
    )


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


def init_app_db(db_path: Path) -> None:
    conn = connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS users (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                email TEXT NOT NULL UNIQUE,
                password_hash TEXT NOT NULL,
                age INTEGER,
                weight REAL,
                height REAL,
                ckd_stage TEXT,
                medical_conditions TEXT NOT NULL DEFAULT '[]',
                on_dialysis INTEGER,
                has_diabetes INTEGER,
                has_hypertension INTEGER,
                diet_chart_id TEXT,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );
            """
        )
        cur.execute(
            f"""
            CREATE TABLE IF NOT EXISTS foods (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                category TEXT NOT NULL,
                serving_size REAL NOT NULL,
                serving_size_unit TEXT NOT NULL,
{_nutrient_columns()},
                is_kidney_friendly INTEGER NOT NULL DEFAULT 1,
                created_at TEXT NOT NULL
            );
            """
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_foods_name ON foods(name);")
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS favorite_foods (
                user_id TEXT NOT NULL,
                food_id TEXT NOT NULL,
                created_at TEXT NOT NULL,
                PRIMARY KEY (user_id, food_id),
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE,
                FOREIGN KEY(food_id) REFERENCES foods(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS meals (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                name TEXT NOT NULL,
                time_of_day TEXT,
                water_intake REAL NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_meals_user_created ON meals(user_id, created_at DESC);")
        # food_id is not a foreign key; a dangling reference aggregates as zero.
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS meal_foods (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                meal_id TEXT NOT NULL,
                food_id TEXT NOT NULL,
                quantity REAL NOT NULL,
                FOREIGN KEY(meal_id) REFERENCES meals(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            f"""
            CREATE TABLE IF NOT EXISTS daily_intakes (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                date TEXT NOT NULL,
{_nutrient_columns()},
                created_at TEXT NOT NULL,
                UNIQUE (user_id, date),
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS daily_intake_meals (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                intake_id TEXT NOT NULL,
                meal_id TEXT NOT NULL,
                FOREIGN KEY(intake_id) REFERENCES daily_intakes(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            f"""
            CREATE TABLE IF NOT EXISTS nutrient_targets (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL UNIQUE,
{_nutrient_columns(BASE_TARGETS)},
                updated_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        conn.commit()
    finally:
        conn.close()


@contextmanager
def db_conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()
