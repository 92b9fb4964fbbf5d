from __future__ import annotations

import os
import socket
from typing import Any, Iterator

import pytest

# Must be set before notas.core.settings is imported: it decides whether .env files are read.
os.environ.setdefault("APP_ENV", "test")

from notas.core.settings import get_settings  # noqa: E402


class NetworkBlockedError(RuntimeError):
    pass


def _refuse_socket(*_args: Any, **_kwargs: Any) -> Any:
    raise NetworkBlockedError(
        "Unit tests must not reach the notes service; fake it with httpx.MockTransport, "
        "or mark the test integration/network (or export ALLOW_NETWORK=1)."
    )


@pytest.fixture(autouse=True)
def _no_real_sockets(monkeypatch: pytest.MonkeyPatch, request: pytest.FixtureRequest) -> None:
    allowed = os.getenv("ALLOW_NETWORK") == "1" or any(
        request.node.get_closest_marker(name) for name in ("integration", "network")
    )
    if not allowed:
        for name in ("create_connection", "getaddrinfo"):
            monkeypatch.setattr(socket, name, _refuse_socket)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Settings are cached per process; re-read the environment in every test."""

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
