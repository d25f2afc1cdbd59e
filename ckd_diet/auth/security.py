# -*- coding: utf-8 -*-
"""Auth — bcrypt password hashes, session tokens and the current-user dependency.

Session tokens are HS256 JWTs carrying the user id (``sub``) and email. They
are accepted from an ``Authorization: Bearer`` header or, for the browser
client, from the httponly session cookie.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt
from fastapi import Depends, HTTPException, Request

from ..config import settings
from ..users.storage import get_user_by_id

TOKEN_COOKIE_NAME = "ckd_diet_token"
JWT_ALGORITHM = "HS256"

# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("ascii"))
    except ValueError:
        # Malformed stored hash or over-long password.
        return False


def create_access_token(user: Dict[str, Any]) -> str:
    issued = datetime.now(timezone.utc)
    claims = {
        "sub": user["id"],
        "email": user["email"],
        "iat": issued,
        "exp": issued + timedelta(days=settings.token_ttl_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise HTTPException(status_code=401, detail="Token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise HTTPException(status_code=401, detail="Invalid token") from exc


def token_from_request(request: Request) -> Optional[str]:
    scheme, _, credentials = (request.headers.get("authorization") or "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(TOKEN_COOKIE_NAME) or None


def authenticate_request(request: Request) -> Dict[str, Any]:
    """Resolve the patient behind ``request``; the row is cached on ``request.state``."""
    cached = getattr(request.state, "user", None)
    if cached:
        return cached

    token = token_from_request(request)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    user = get_user_by_id(str(decode_token(token)["sub"]))
    if not user:
        raise HTTPException(status_code=401, detail="User not found")

    request.state.user = user
    return user


def get_current_user(user: Dict[str, Any] = Depends(authenticate_request)) -> Dict[str, Any]:
    return user
