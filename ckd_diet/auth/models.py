# -*- coding: utf-8 -*-
"""Auth — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from ..nutrients import CamelModel
from ..users.models import CKDStage, UserProfile


class SignupRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=128)
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=8, max_length=128)

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > 72:
            raise ValueError("password must be at most 72 bytes")
        return value


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)


class UserSummary(CamelModel):
    id: str
    name: str
    email: str
    ckd_stage: Optional[CKDStage] = None


class SignupResponse(CamelModel):
    message: str
    token: str
    user: UserSummary


class LoginResponse(CamelModel):
    message: str
    token: str
    user: UserProfile
