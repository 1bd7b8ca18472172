from __future__ import annotations

import json
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _json_list(name: str, default: list[str]) -> list[str]:
    value = _env(name)
    if not value:
        return list(default)
    loaded = json.loads(value)
    if not isinstance(loaded, list):
        raise ValueError(f"{name} must be a JSON list.")
    return [str(item) for item in loaded]


def _bool(name: str, default: bool) -> bool:
    value = _env(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    app_env: str
    database_url: str
    demo_passcode: str
    session_ttl_days: int
    activity_default_limit: int
    cors_origins: list[str]
    log_level: str
    seed_demo_data: bool

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


def get_settings() -> Settings:
    return Settings(
        app_env=_env("APP_ENV", "development"),
        database_url=_env("DATABASE_URL", "sqlite:///./artist_portal.db"),
        demo_passcode=_env("DEMO_PASSCODE", "DEMO2026"),
        session_ttl_days=int(_env("SESSION_TTL_DAYS", "7")),
        activity_default_limit=int(_env("ACTIVITY_DEFAULT_LIMIT", "20")),
        cors_origins=_json_list("CORS_ORIGINS", ["http://localhost:3000"]),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        seed_demo_data=_bool("SEED_DEMO_DATA", True),
    )
