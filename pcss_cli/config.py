"""PCSS CLI configuration.

Typed configuration for the scaffolder built on Pydantic v2.  Every field has
a default matching the tool's stock behaviour, and a handful of optional
environment variables can override them.  Nothing is read from or written to
a configuration file.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

PCSS_ASSET_URL = "https://raw.githubusercontent.com/Thoq-jar/PCSS/master/.pcss/pcss.min.js"

# Projects are created next to the installed package, not in the caller's cwd.
INSTALL_DIR = Path(__file__).resolve().parent


class Config(BaseModel):
    """Settings for a single CLI run.

    Instances are created once by the CLI entry point and passed down to the
    scaffolder.
    """

    asset_url: str = Field(default=PCSS_ASSET_URL, description="URL of the pcss.min.js asset")
    root_dir: Path | None = Field(
        default=None,
        description="Directory new projects are created in (defaults to the install directory)",
    )
    download_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-request download timeout in seconds; None waits indefinitely",
    )

    @property
    def project_root(self) -> Path:
        """Directory that receives ``<project-name>/``."""
        return self.root_dir if self.root_dir is not None else INSTALL_DIR

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            PCSS_ASSET_URL, PCSS_ROOT_DIR, PCSS_DOWNLOAD_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("PCSS_ASSET_URL"):
            kwargs["asset_url"] = os.environ["PCSS_ASSET_URL"]
        if os.environ.get("PCSS_ROOT_DIR"):
            kwargs["root_dir"] = Path(os.environ["PCSS_ROOT_DIR"])
        if os.environ.get("PCSS_DOWNLOAD_TIMEOUT"):
            kwargs["download_timeout"] = float(os.environ["PCSS_DOWNLOAD_TIMEOUT"])
        return cls(**kwargs)
