from __future__ import annotations

import logging

_NOISY_LOGGERS = ("httpx", "httpcore", "openai")

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once and quiet provider transport chatter."""
    global _configured
    if not _configured:
        logging.basicConfig(
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )
        _configured = True
    logging.getLogger().setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
