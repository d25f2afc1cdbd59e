# -*- coding: utf-8 -*-
"""Auth — API endpoints."""

from __future__ import annotations

import logging
import sqlite3

from fastapi import APIRouter, Depends, HTTPException, Response

from ..config import settings
from ..targets.storage import get_or_create_targets
from ..users.models import UserProfile
from ..users.storage import create_user, get_user_by_email
from .models import LoginRequest, LoginResponse, SignupRequest, SignupResponse, UserSummary
from .security import TOKEN_COOKIE_NAME, create_access_token, get_current_user, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _set_auth_cookie(resp: Response, token: str) -> None:
    max_age = int(settings.token_ttl_days) * 24 * 60 * 60
    resp.set_cookie(
        TOKEN_COOKIE_NAME,
        token,
        httponly=True,
        secure=bool(settings.cookie_secure),
        samesite="lax",
        max_age=max_age,
        path="/",
    )


@router.post("/signup", response_model=SignupResponse, status_code=201, summary="Register a new user")
def signup(request: SignupRequest, response: Response):
    if get_user_by_email(request.email):
        raise HTTPException(status_code=400, detail="User already exists")

    try:
        user = create_user(
            name=request.name,
            email=request.email,
            password_hash=hash_password(request.password),
        )
    except sqlite3.IntegrityError as exc:
        raise HTTPException(status_code=400, detail="User already exists") from exc

    get_or_create_targets(user["id"])
    logger.info("User %s signed up", user["id"])

    token = create_access_token(user)
    _set_auth_cookie(response, token)
    return SignupResponse(
        message="User created successfully",
        token=token,
        user=UserSummary.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse, summary="Login")
def login(request: LoginRequest, response: Response):
    user = get_user_by_email(request.email)
    if not user or not verify_password(request.password, user["password_hash"]):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token(user)
    _set_auth_cookie(response, token)
    return LoginResponse(
        message="Login successful",
        token=token,
        user=UserProfile.model_validate(user),
    )


@router.post("/logout", summary="Logout")
def logout(response: Response):
    response.delete_cookie(TOKEN_COOKIE_NAME, path="/")
    return {"status": "ok"}


@router.get("/me", response_model=UserProfile, summary="Get current user")
def me(user: dict = Depends(get_current_user)):
    return UserProfile.model_validate(user)
