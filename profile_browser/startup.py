from __future__ import annotations

import logging
import socket
from importlib import metadata
from typing import Iterable, List

from profile_browser.core.exceptions import MissingDependencyError

logger = logging.getLogger(__name__)

# Distribution names as published on the package index
REQUIRED_PACKAGES = (
    "dash",
    "dash-bootstrap-components",
    "pandas",
    "numpy",
    "plotly",
    "python-json-logger",
)


def missing_packages(packages: Iterable[str]) -> List[str]:
    """Return the distributions from packages that are not installed."""
    missing: List[str] = []
    for name in packages:
        try:
            metadata.version(name)
        except metadata.PackageNotFoundError:
            missing.append(name)
    return missing


def ensure_required_packages(packages: Iterable[str] = REQUIRED_PACKAGES) -> None:
    """
    Check once at process start that every required distribution is installed.

    :raises MissingDependencyError: listing the distributions to install
    """
    missing = missing_packages(packages)
    if missing:
        logger.error("Missing required packages", extra={"missing": missing})
        raise MissingDependencyError(missing)
    logger.debug("All required packages present")


def find_free_port(start_port: int, host: str = "localhost", attempts: int = 100) -> int:
    """
    First port from start_port on that nothing is listening on.

    Falls back to start_port when all attempts are taken.
    """
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex((host, port)) != 0:
                return port
    logger.warning(
        "No free port found, keeping the preferred one",
        extra={"start_port": start_port, "attempts": attempts},
    )
    return start_port
