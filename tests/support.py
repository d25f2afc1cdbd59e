# -*- coding: utf-8 -*-
"""Shared setup for tests that exercise the HTTP API."""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi.testclient import TestClient


class ApiTestCase(unittest.TestCase):
    """Boots the app against a throwaway data root.

    Settings are read at import time, so every ``ckd_diet`` module is dropped
    from ``sys.modules`` after the environment is prepared.
    """

    seed_foods = False

    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="ckd-diet-test-"))
        data_root = cls._tmp / "data"
        os.environ["CKD_DIET_DATA_ROOT"] = str(data_root)
        os.environ["CKD_DIET_DB_PATH"] = str(data_root / "ckd_diet.db")
        os.environ["CKD_DIET_JWT_SECRET"] = "test-secret"
        os.environ["CKD_DIET_BCRYPT_ROUNDS"] = "4"
        os.environ["CKD_DIET_SEED_FOODS"] = "1" if cls.seed_foods else "0"
        os.environ["CKD_DIET_LOG_LEVEL"] = "WARNING"

        for name in list(sys.modules.keys()):
            if name.startswith("ckd_diet."):
                sys.modules.pop(name, None)

        from ckd_diet.api import app  # noqa: WPS433 (import inside test for env control)

        cls.app = app
        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls) -> None:
        cls.client.close()
        shutil.rmtree(cls._tmp, ignore_errors=True)

    # ---- helpers ----

    def signup(self, email: str, name: str = "Test User", password: str = "password123") -> Dict[str, str]:
        resp = self.client.post("/api/auth/signup", json={"name": name, "email": email, "password": password})
        self.assertEqual(resp.status_code, 201, resp.text)
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    def create_food(self, headers: Dict[str, str], name: str, **nutrients: float) -> Dict[str, Any]:
        payload = {
            "name": name,
            "category": nutrients.pop("category", "OTHER"),
            "servingSize": 100,
            "servingSizeUnit": "g",
            "nutrients": nutrients,
        }
        resp = self.client.post("/api/foods", json=payload, headers=headers)
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def create_meal(
        self,
        headers: Dict[str, str],
        name: str,
        foods: list,
        water_intake: Optional[float] = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": name,
            "foods": [{"foodId": food_id, "quantity": qty} for food_id, qty in foods],
        }
        if water_intake is not None:
            payload["waterIntake"] = water_intake
        resp = self.client.post("/api/meals", json=payload, headers=headers)
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["meal"]
