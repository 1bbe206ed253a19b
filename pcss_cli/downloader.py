"""Streamed HTTP download of a single file.

``download_file`` issues one unauthenticated GET, waits for the response
headers, and streams the body straight to disk.  The destination is only
created once a 200 response has arrived.  If the connection fails or the body
cannot be decoded, the partial file is removed before the error is raised;
on success the file is closed before the coroutine returns.

Typical usage::

    await download_file(PCSS_ASSET_URL, project / ".pcss" / "pcss.min.js")
"""

from __future__ import annotations

from pathlib import Path

import httpx

from pcss_cli.exceptions import DownloadError, DownloadStatusError


def build_client(timeout: float | None = None) -> httpx.AsyncClient:
    """Return an ``AsyncClient`` for asset downloads.

    ``timeout=None`` disables every httpx deadline so the request waits for
    the server indefinitely.  Redirects are not followed.
    """
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout), follow_redirects=False)


async def _stream_to_file(client: httpx.AsyncClient, url: str, dest: Path) -> None:
    async with client.stream("GET", url) as response:
        if response.status_code != 200:
            raise DownloadStatusError(url, response.status_code)

        with dest.open("wb") as fp:
            async for chunk in response.aiter_bytes():
                fp.write(chunk)


async def download_file(
    url: str,
    dest: str | Path,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> Path:
    """Download *url* to *dest*.

    Args:
        url: Absolute URL to fetch.
        dest: Destination file path.  Its parent directory must exist.
        client: Optional pre-configured client.  When omitted a client is
            created with :func:`build_client` and closed afterwards.
        timeout: Timeout in seconds for a client created here.

    Returns:
        The destination path.

    Raises:
        DownloadStatusError: The server responded with a status other than 200.
        DownloadError: A connection-level failure occurred or the body could
            not be decoded.  Any partially written file has been deleted.
    """
    dest = Path(dest)
    try:
        if client is not None:
            await _stream_to_file(client, url, dest)
        else:
            async with build_client(timeout) as own_client:
                await _stream_to_file(own_client, url, dest)
    except httpx.RequestError as exc:
        dest.unlink(missing_ok=True)
        raise DownloadError(f"Failed to get '{url}': {exc}") from exc
    return dest
