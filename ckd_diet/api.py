# -*- coding: utf-8 -*-
"""
CKD diet tracker API.

Food catalog, meals, daily nutrient intake and diet chart targets for kidney
disease patients.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .app_db import init_app_db
from .auth.api import router as auth_router
from .auth.security import authenticate_request
from .config import settings
from .foods.api import router as foods_router
from .foods.seed import seed_foods
from .intake.api import router as intake_router
from .logger import setup_logging
from .meals.api import router as meals_router
from .targets.api import diet_chart_router
from .targets.api import router as targets_router
from .users.api import router as users_router

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="CKD Diet Tracker",
    description="Food catalog, meal logging, daily intake and diet chart targets for CKD patients",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _init_storage() -> None:
    init_app_db(settings.app_db_path)
    if settings.seed_foods:
        seed_foods()


@app.on_event("startup")
def _startup_init_db() -> None:
    _init_storage()


# Ensure the DB exists even when lifespan events are not triggered (e.g. some test clients).
_init_storage()


_AUTH_EXEMPT_PREFIXES = (
    "/api/auth/login",
    "/api/auth/signup",
    "/api/auth/logout",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
)


@app.middleware("http")
async def _auth_gate(request: Request, call_next):
    path = request.url.path
    if path.startswith("/api") and path != "/api/health" and not any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES):
        try:
            user = authenticate_request(request)
            request.state.user = user
        except HTTPException as exc:
            return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
    return await call_next(request)


@app.middleware("http")
async def _access_log(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    detail = "Invalid request"
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path"))
        detail = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    return JSONResponse(status_code=400, content={"detail": detail})


@app.exception_handler(Exception)
async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(auth_router)
app.include_router(users_router)
app.include_router(foods_router)
app.include_router(meals_router)
app.include_router(intake_router)
app.include_router(targets_router)
app.include_router(diet_chart_router)


@app.get("/api/health")
def health() -> dict:
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
    }


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    uvicorn.run("ckd_diet.api:app", host=settings.host, port=settings.port, reload=False)
