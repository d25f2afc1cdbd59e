# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient

from tests.support import ApiTestCase


class TestAuthApi(ApiTestCase):
    def test_signup_returns_token_and_summary(self) -> None:
        resp = self.client.post(
            "/api/auth/signup",
            json={"name": "Asha", "email": "Asha@Example.com", "password": "password123"},
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        payload = resp.json()
        self.assertEqual(payload["message"], "User created successfully")
        self.assertTrue(payload["token"])
        self.assertEqual(payload["user"]["email"], "asha@example.com")
        self.assertIsNone(payload["user"]["ckdStage"])
        self.assertNotIn("passwordHash", payload["user"])

    def test_duplicate_email_is_400(self) -> None:
        self.signup("dup@example.com")
        resp = self.client.post(
            "/api/auth/signup",
            json={"name": "Again", "email": "DUP@example.com", "password": "password123"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "User already exists")

    def test_short_password_is_400(self) -> None:
        resp = self.client.post(
            "/api/auth/signup",
            json={"name": "Short", "email": "short@example.com", "password": "abc"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("password", resp.json()["detail"])

    def test_login(self) -> None:
        self.signup("login@example.com", password="password123")

        resp = self.client.post("/api/auth/login", json={"email": "login@example.com", "password": "wrong-pass"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["detail"], "Invalid credentials")

        resp = self.client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "password123"})
        self.assertEqual(resp.status_code, 401)

        resp = self.client.post("/api/auth/login", json={"email": "login@example.com", "password": "password123"})
        self.assertEqual(resp.status_code, 200, resp.text)
        token = resp.json()["token"]

        me = self.client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.json()["email"], "login@example.com")

    def test_protected_routes_need_a_token(self) -> None:
        client = TestClient(self.app)
        try:
            self.assertEqual(client.get("/api/auth/me").status_code, 401)
            self.assertEqual(client.get("/api/foods").status_code, 401)
            resp = client.get("/api/meals", headers={"Authorization": "Bearer not-a-token"})
            self.assertEqual(resp.status_code, 401)
            self.assertEqual(client.get("/api/health").status_code, 200)
        finally:
            client.close()

    def test_cookie_session(self) -> None:
        client = TestClient(self.app)
        try:
            resp = client.post(
                "/api/auth/signup",
                json={"name": "Cookie", "email": "cookie@example.com", "password": "password123"},
            )
            self.assertEqual(resp.status_code, 201)
            self.assertEqual(client.get("/api/auth/me").status_code, 200)

            client.post("/api/auth/logout")
            self.assertEqual(client.get("/api/auth/me").status_code, 401)
        finally:
            client.close()


class TestProfileApi(ApiTestCase):
    def setUp(self) -> None:
        self.headers = self.signup(f"profile-{self.id()}@example.com", name="Ravi")

    def test_update_only_sent_fields(self) -> None:
        resp = self.client.put(
            "/api/user/profile",
            json={"age": 54, "ckdStage": "STAGE_3", "medicalConditions": ["gout"], "hasDiabetes": True},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        user = resp.json()["user"]
        self.assertEqual(user["age"], 54)
        self.assertEqual(user["ckdStage"], "STAGE_3")

        resp = self.client.put("/api/user/profile", json={"weight": 70.5}, headers=self.headers)
        user = resp.json()["user"]
        self.assertEqual(user["weight"], 70.5)
        self.assertEqual(user["age"], 54)
        self.assertEqual(user["name"], "Ravi")
        self.assertEqual(user["medicalConditions"], ["gout"])
        self.assertTrue(user["hasDiabetes"])

    def test_invalid_stage_is_400(self) -> None:
        resp = self.client.put("/api/user/profile", json={"ckdStage": "STAGE_9"}, headers=self.headers)
        self.assertEqual(resp.status_code, 400)

    def test_profile_without_chart(self) -> None:
        resp = self.client.get("/api/user/profile", headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        self.assertIsNone(resp.json()["dietChart"])

    def test_favorites_toggle(self) -> None:
        first = self.create_food(self.headers, "Apple", calories=52)
        second = self.create_food(self.headers, "Pear", calories=57)

        resp = self.client.post("/api/user/favorites", json={"foodId": first["id"]}, headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["favorite"])
        self.client.post("/api/user/favorites", json={"foodId": second["id"]}, headers=self.headers)

        resp = self.client.get("/api/user/favorites", headers=self.headers)
        self.assertEqual([f["name"] for f in resp.json()], ["Pear", "Apple"])

        resp = self.client.post("/api/user/favorites", json={"foodId": first["id"]}, headers=self.headers)
        self.assertFalse(resp.json()["favorite"])
        resp = self.client.get("/api/user/favorites", headers=self.headers)
        self.assertEqual([f["name"] for f in resp.json()], ["Pear"])

    def test_favorite_unknown_food_is_404(self) -> None:
        resp = self.client.post("/api/user/favorites", json={"foodId": "nope"}, headers=self.headers)
        self.assertEqual(resp.status_code, 404)


if __name__ == "__main__":
    unittest.main()
