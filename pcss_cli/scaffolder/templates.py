"""Jinja2 rendering of the starter ``index.html``.

The starter page is one fixed document.  The only substitution is the
relative path of the downloaded script, which always resolves to
``./.pcss/pcss.min.js``.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, StrictUndefined, select_autoescape

ASSETS_DIR_NAME = ".pcss"
ASSET_FILE_NAME = "pcss.min.js"
SCRIPT_SRC = f"./{ASSETS_DIR_NAME}/{ASSET_FILE_NAME}"

INDEX_HTML_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>PCSS Starter</title>
    <script src="{{ script_src }}"></script>
</head>
<body>
    <h1>PCSS Starter template</h1>
</body>
</html>"""


class TemplateRenderer:
    """Renders inline Jinja2 templates for project scaffolding."""

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    def render_index_html(self) -> str:
        """Return the starter ``index.html`` document."""
        return self.render_string(INDEX_HTML_TEMPLATE, {"script_src": SCRIPT_SRC})
