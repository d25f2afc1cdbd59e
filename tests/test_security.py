# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import HTTPException

from tests.support import ApiTestCase


class TestPasswordsAndTokens(ApiTestCase):
    def setUp(self) -> None:
        # Resolve against the modules loaded for this class's app.
        from ckd_diet.auth import security

        self.security = security

    def test_bcrypt_hash_roundtrip(self) -> None:
        hashed = self.security.hash_password("kidney-friendly")
        self.assertTrue(hashed.startswith("$2b$04$"))
        self.assertTrue(self.security.verify_password("kidney-friendly", hashed))
        self.assertFalse(self.security.verify_password("kidney-unfriendly", hashed))
        self.assertNotEqual(hashed, self.security.hash_password("kidney-friendly"))

    def test_malformed_hash_never_verifies(self) -> None:
        self.assertFalse(self.security.verify_password("password123", "not-a-bcrypt-hash"))

    def test_token_claims(self) -> None:
        token = self.security.create_access_token({"id": "user-1", "email": "p@example.com"})
        claims = jwt.decode(token, "test-secret", algorithms=["HS256"])
        self.assertEqual(claims["sub"], "user-1")
        self.assertEqual(claims["email"], "p@example.com")
        self.assertEqual(claims["exp"] - claims["iat"], 7 * 24 * 60 * 60)
        self.assertEqual(self.security.decode_token(token)["sub"], "user-1")

    def test_expired_token_is_401(self) -> None:
        past = datetime.now(timezone.utc) - timedelta(days=1)
        token = jwt.encode({"sub": "user-1", "exp": past}, "test-secret", algorithm="HS256")
        with self.assertRaises(HTTPException) as ctx:
            self.security.decode_token(token)
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.detail, "Token expired")

    def test_foreign_signature_is_401(self) -> None:
        future = datetime.now(timezone.utc) + timedelta(days=1)
        token = jwt.encode({"sub": "user-1", "exp": future}, "someone-else", algorithm="HS256")
        with self.assertRaises(HTTPException) as ctx:
            self.security.decode_token(token)
        self.assertEqual(ctx.exception.detail, "Invalid token")

    def test_expired_token_rejected_over_http(self) -> None:
        headers = self.signup("expired@example.com")
        me = self.client.get("/api/auth/me", headers=headers).json()
        past = datetime.now(timezone.utc) - timedelta(minutes=5)
        stale = jwt.encode({"sub": me["id"], "exp": past}, "test-secret", algorithm="HS256")

        from fastapi.testclient import TestClient

        client = TestClient(self.app)
        try:
            resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {stale}"})
            self.assertEqual(resp.status_code, 401)
            self.assertEqual(resp.json()["detail"], "Token expired")
        finally:
            client.close()

    def test_password_over_72_bytes_is_400(self) -> None:
        resp = self.client.post(
            "/api/auth/signup",
            json={"name": "Long", "email": "long@example.com", "password": "é" * 40},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("72 bytes", resp.json()["detail"])


if __name__ == "__main__":
    unittest.main()
