"""Project scaffolding.

Creates ``<root>/<project-name>/``, its ``.pcss/`` assets directory, downloads
``pcss.min.js`` into it and writes the starter ``index.html``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path, PurePath

import httpx
from pydantic import BaseModel, ConfigDict, Field

from pcss_cli.config import Config
from pcss_cli.downloader import download_file
from pcss_cli.exceptions import ProjectFilesystemError

from .templates import ASSET_FILE_NAME, ASSETS_DIR_NAME, TemplateRenderer


# ---------------------------------------------------------------------------
# Layout model
# ---------------------------------------------------------------------------


class ProjectLayout(BaseModel):
    """Paths of a scaffolded project, derived from its directory."""

    model_config = ConfigDict(frozen=True)

    project_dir: Path = Field(..., description="Root directory of the new project")

    @classmethod
    def for_project(cls, root: str | Path, project_name: str) -> "ProjectLayout":
        """Place *project_name* under *root*.

        An absolute name loses its anchor, so the project always stays inside
        *root* (``/etc/site`` becomes ``<root>/etc/site``).
        """
        name = PurePath(project_name)
        parts = name.parts[1:] if name.anchor else name.parts
        return cls(project_dir=Path(root).joinpath(*parts))

    @property
    def assets_dir(self) -> Path:
        """The ``.pcss/`` directory holding the downloaded script."""
        return self.project_dir / ASSETS_DIR_NAME

    @property
    def asset_file_path(self) -> Path:
        return self.assets_dir / ASSET_FILE_NAME

    @property
    def index_html_path(self) -> Path:
        return self.project_dir / "index.html"


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------


class ProjectScaffolder:
    """Creates a PCSS starter project.

    The steps run strictly in order and stop at the first failure:

    1. create the project directory (single level, parents must exist)
    2. create the ``.pcss/`` assets directory
    3. download the asset into it
    4. write ``index.html``, replacing any existing file
    """

    def __init__(self, config: Config, client: httpx.AsyncClient | None = None) -> None:
        self.config = config
        self.client = client
        self.renderer = TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def scaffold(self, project_name: str) -> ProjectLayout:
        """Scaffold *project_name* under the configured project root.

        Raises:
            ProjectFilesystemError: A directory or ``index.html`` could not be
                created.
            DownloadError: The asset could not be downloaded.
        """
        layout = ProjectLayout.for_project(self.config.project_root, project_name)

        _make_dir(layout.project_dir)
        _make_dir(layout.assets_dir)

        try:
            await download_file(
                self.config.asset_url,
                layout.asset_file_path,
                client=self.client,
                timeout=self.config.download_timeout,
            )
        except OSError as exc:
            raise ProjectFilesystemError(
                f"Failed to write {layout.asset_file_path}: {exc}"
            ) from exc

        await asyncio.to_thread(self._write_index_html, layout.index_html_path)
        return layout

    # -- Internal ----------------------------------------------------------

    def _write_index_html(self, path: Path) -> None:
        try:
            path.write_text(self.renderer.render_index_html(), encoding="utf-8")
        except OSError as exc:
            raise ProjectFilesystemError(f"Failed to write {path}: {exc}") from exc


def _make_dir(path: Path) -> None:
    """Create *path* unless it already exists.  Parents are never created."""
    if path.exists():
        return
    try:
        path.mkdir()
    except OSError as exc:
        raise ProjectFilesystemError(f"Failed to create directory {path}: {exc}") from exc
