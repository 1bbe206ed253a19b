"""PCSS project scaffolder.

Quick usage::

    from pcss_cli.config import Config
    from pcss_cli.scaffolder import ProjectScaffolder

    layout = await ProjectScaffolder(Config()).scaffold("my-site")
    print(layout.index_html_path)
"""

from pcss_cli.scaffolder.generator import ProjectLayout, ProjectScaffolder
from pcss_cli.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectLayout",
    "ProjectScaffolder",
    "TemplateRenderer",
]
