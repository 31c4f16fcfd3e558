from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "PROFILE_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "PROFILE_BROWSER_LOG_LEVEL"

APP_NAME = "profile-browser"

# Third-party loggers that are chatty at INFO (per-request lines from the dev server)
NOISY_LOGGERS = ("werkzeug",)


def resolve_log_level(level: Union[int, str, None] = None) -> int:
    """
    Turn a level argument or the PROFILE_BROWSER_LOG_LEVEL env var into a
    logging level. Names are case-insensitive; unknown names give INFO.
    """
    raw = level if level is not None else os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(raw, int):
        return raw
    resolved = logging.getLevelName(str(raw).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter("%(asctime)s %(levelname)-8s %(name)s | %(message)s")
    return jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
        static_fields={"app": APP_NAME},
    )


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the profile browser.

    Format: force_format ("json" or "plain"), else PROFILE_BROWSER_LOG_FORMAT,
    else JSON. JSON records carry an "app" field so they can be told apart
    from the WSGI server's own output.

    Level: level argument, else PROFILE_BROWSER_LOG_LEVEL, else INFO.
    The dev server's request log stays at WARNING unless DEBUG is asked for.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()
    root_level = resolve_log_level(level)

    handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(format_mode))

    root = logging.getLogger()
    root.setLevel(root_level)
    root.handlers.clear()
    root.addHandler(handler)

    noisy_level = logging.DEBUG if root_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)
