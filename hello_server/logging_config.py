from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging once.

    Priority: explicit arg > HELLO_SERVER_LOG_LEVEL > DEBUG if HELLO_SERVER_ENV=dev > INFO.
    Safe no-op if already configured.
    """
    global _configured
    if _configured:
        return
    if level is None:
        env_level = os.getenv("HELLO_SERVER_LOG_LEVEL")
        if env_level:
            level = env_level.upper()
        elif os.getenv("HELLO_SERVER_ENV", "").lower() == "dev":
            level = "DEBUG"
        else:
            level = "INFO"
    elif isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name if name else "hello_server")
