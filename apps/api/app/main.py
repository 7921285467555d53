from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.api.app.api.v1.routes.commerce import router as commerce_router
from apps.api.app.api.v1.routes.health import router as health_router
from apps.api.app.api.v1.routes.social import router as social_router
from apps.api.app.core.config import get_settings
from apps.api.app.core.logging_setup import configure_logging

_LOGGER = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(title="Storia API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api_cors_allowed_origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(social_router, prefix="/api/v1")
    app.include_router(commerce_router, prefix="/api/v1")
    _LOGGER.info("API application created. cors_origins=%s", len(settings.api_cors_allowed_origins))
    return app


app = create_app()
