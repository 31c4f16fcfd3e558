from __future__ import annotations

import socket

import pytest

from profile_browser.core.exceptions import MissingDependencyError
from profile_browser.startup import ensure_required_packages, find_free_port, missing_packages

NOT_INSTALLED = "profile-browser-surely-not-installed-pkg"


def test_missing_packages_reports_only_absent():
    assert missing_packages(["pandas", NOT_INSTALLED]) == [NOT_INSTALLED]


def test_ensure_required_packages_passes_for_installed():
    ensure_required_packages(["pandas", "plotly"])


def test_ensure_required_packages_raises_for_missing():
    with pytest.raises(MissingDependencyError) as exc_info:
        ensure_required_packages([NOT_INSTALLED])

    assert exc_info.value.missing == [NOT_INSTALLED]
    assert NOT_INSTALLED in str(exc_info.value)


def test_find_free_port_skips_port_in_use():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
        busy.bind(("localhost", 0))
        busy.listen(1)
        taken = busy.getsockname()[1]

        port = find_free_port(taken, attempts=5)

    assert port != taken
    assert taken < port < taken + 5


def test_find_free_port_returns_start_when_free():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("localhost", 0))
        free = sock.getsockname()[1]

    assert find_free_port(free, attempts=1) == free
