"""Exception hierarchy for scaffolding failures.

Every failure of ``pcss new`` raises a :class:`ScaffoldError` subclass so the
CLI can catch one type and still report what kind of failure occurred.
Usage mistakes are not exceptions; the dispatcher handles them directly.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base exception for all scaffolding failures."""

    kind = "scaffold"


class ProjectFilesystemError(ScaffoldError):
    """Raised when a project directory or file cannot be created."""

    kind = "filesystem"


class DownloadError(ScaffoldError):
    """Raised when the asset cannot be fetched because of a network failure."""

    kind = "network"


class DownloadStatusError(DownloadError):
    """Raised when the asset server answers with anything other than HTTP 200."""

    def __init__(self, url: str, status_code: int) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to get '{url}' ({status_code})")
