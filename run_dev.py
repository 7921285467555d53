"""Local development server: ``python run_dev.py``.

Host, port and auto-reload come from ``API_HOST``, ``API_PORT`` and
``API_RELOAD`` (see ``apps/api/app/core/config.py``).
"""
import uvicorn

from apps.api.app.core.config import get_settings
from apps.api.app.core.logging_setup import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "apps.api.app.main:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
