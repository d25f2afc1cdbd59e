from __future__ import annotations

import os
from pathlib import Path
from typing import List


def _env_bool(name: str, default: str = "") -> bool:
    return (os.environ.get(name) or default).strip() in {"1", "true", "True", "yes"}


class Settings:
    """Centralized configuration for the CKD diet tracker backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("CKD_DIET_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("CKD_DIET_DB_PATH") or (self.data_root / "ckd_diet.db")
        ).expanduser()
        # In production you MUST set CKD_DIET_JWT_SECRET. The dev fallback keeps local
        # demos easy but is not safe for public deployments.
        self.jwt_secret: str = os.environ.get("CKD_DIET_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("CKD_DIET_TOKEN_TTL_DAYS") or "7")
        self.bcrypt_rounds: int = int(os.environ.get("CKD_DIET_BCRYPT_ROUNDS") or "12")
        self.cookie_secure: bool = _env_bool("CKD_DIET_COOKIE_SECURE")

        self.environment: str = os.environ.get("CKD_DIET_ENV") or "development"
        self.log_level: str = os.environ.get("CKD_DIET_LOG_LEVEL") or "INFO"

        # Window used by GET /api/daily-intake when no date filter is given.
        self.intake_default_days: int = int(os.environ.get("CKD_DIET_INTAKE_DEFAULT_DAYS") or "30")
        self.seed_foods: bool = _env_bool("CKD_DIET_SEED_FOODS", "true")

        self.host: str = os.environ.get("CKD_DIET_HOST") or "127.0.0.1"
        self.port: int = int(os.environ.get("CKD_DIET_PORT") or "8000")

        cors = os.environ.get("CKD_DIET_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
