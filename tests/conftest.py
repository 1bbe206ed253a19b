"""Shared pytest fixtures for the PCSS CLI test suite.

Provides reusable fixtures for:
- Configurations rooted in a temporary directory
- Fake asset servers built on ``httpx.MockTransport``
- A patched pip version query so banner tests never spawn a subprocess
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from pathlib import Path
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from pcss_cli.config import PCSS_ASSET_URL, Config

ASSET_BYTES = b"/* pcss */\n(function(){window.PCSS={version:'1.0.0'};})();\n"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Directory new projects are created in (auto-cleanup)."""
    root = tmp_path / "projects"
    root.mkdir()
    return root


@pytest.fixture
def config(project_root: Path) -> Config:
    return Config(root_dir=project_root)


# ---------------------------------------------------------------------------
# Fake asset server
# ---------------------------------------------------------------------------


def make_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """Return an ``AsyncClient`` whose requests are answered by *handler*."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


async def dropping_stream(*chunks: bytes) -> AsyncIterator[bytes]:
    """Yield *chunks*, then fail as if the connection was lost."""
    for chunk in chunks:
        yield chunk
    raise httpx.ReadError("connection dropped")


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def ok_client(requests_seen: list[httpx.Request]) -> httpx.AsyncClient:
    """Client for a server that returns the asset with HTTP 200."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return httpx.Response(200, content=ASSET_BYTES)

    return make_client(handler)


@pytest.fixture
def not_found_client() -> httpx.AsyncClient:
    return make_client(lambda request: httpx.Response(404, content=b"404: Not Found"))


@pytest.fixture
def dropping_client() -> httpx.AsyncClient:
    """Client for a server that drops the connection mid-transfer."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=dropping_stream(b"/* partial", b" asset */"))

    return make_client(handler)


@pytest.fixture
def corrupt_gzip_client() -> httpx.AsyncClient:
    """Client for a server whose gzip-encoded body cannot be decompressed."""
    return make_client(
        lambda request: httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"not gzip data")
    )


@pytest.fixture
def refusing_client() -> httpx.AsyncClient:
    """Client for a server that cannot be reached at all."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return make_client(handler)


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_pip():
    """Patch the pip version query with a canned successful answer."""
    mock = AsyncMock(return_value=(0, "pip 24.0 from /usr/lib/python3/site-packages/pip (python 3.12)", ""))
    with patch("pcss_cli.environment.run_command", mock):
        yield mock


@pytest.fixture
def asset_url() -> str:
    return PCSS_ASSET_URL


@pytest.fixture
def asset_bytes() -> bytes:
    return ASSET_BYTES
