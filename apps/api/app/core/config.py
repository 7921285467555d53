from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    openai_api_key: str | None
    openai_base_url: str
    openai_organization_id: str | None
    llm_request_timeout_seconds: float
    image_download_timeout_seconds: float
    log_level: str
    api_cors_allowed_origins: list[str]
    api_host: str
    api_port: int
    api_reload: bool


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer.") from exc


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a float.") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    raw_origins = os.getenv("API_CORS_ALLOWED_ORIGINS", "")
    api_cors_allowed_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/"),
        openai_organization_id=os.getenv("OPENAI_ORGANIZATION_ID") or None,
        # Reasoning models can take several minutes on long prompts.
        llm_request_timeout_seconds=_float_env("LLM_REQUEST_TIMEOUT_SECONDS", 600.0),
        image_download_timeout_seconds=_float_env("IMAGE_DOWNLOAD_TIMEOUT_SECONDS", 15.0),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        api_cors_allowed_origins=api_cors_allowed_origins,
        api_host=os.getenv("API_HOST", "127.0.0.1"),
        api_port=_int_env("API_PORT", 8000),
        api_reload=os.getenv("API_RELOAD", "true").lower() in ("1", "true", "yes"),
    )
