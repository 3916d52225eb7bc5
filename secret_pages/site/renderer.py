"""Render document bodies to HTML and wrap them in Jinja layouts."""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    TemplatesNotFound,
    select_autoescape,
)
from markdown import Markdown
from markupsafe import Markup
from pygments.formatters.html import HtmlFormatter

from .errors import LayoutNotFoundError

if typ.TYPE_CHECKING:
    from .models import Document, Page, Site

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


class HtmlContentRenderer:
    """Render markdown into HTML with highlighted code blocks."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        normalized = FENCED_INDENT_PATTERN.sub(r"\1", text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return md.convert(normalized)


class SiteRenderer:
    """Convert documents and pages into final markup for a site.

    Layouts are resolved from the site's ``_layouts`` directory first
    (``<name>.html``) and the package templates second (``<name>.jinja``).
    """

    def __init__(self, site: Site, *, templates_dir: Path | None = None) -> None:
        """Initialize the renderer and its layout environment.

        Parameters
        ----------
        site : Site
            Site whose ``_layouts`` directory and settings feed the templates.
        templates_dir : Path, optional
            Fallback layout directory; defaults to ``secret_pages/templates``.
        """
        self.site = site
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.content_renderer = HtmlContentRenderer(
            str(site.config.get("pygments_style") or "monokai")
        )
        self.env = Environment(
            loader=ChoiceLoader(
                [
                    FileSystemLoader(str(site.source / "_layouts")),
                    FileSystemLoader(str(self.templates_dir)),
                ]
            ),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, item: Document | Page) -> str:
        """Render ``item`` into markup, storing and returning its output.

        Raises
        ------
        LayoutNotFoundError
            If the item names a layout that neither lookup location provides.
        """
        body = item.content
        if item.is_markdown:
            body = self.content_renderer.markdown(body)
        layout = item.data.get("layout")
        if layout:
            body = self._apply_layout(str(layout), body, item)
        item.output = body
        return body

    def _apply_layout(self, layout: str, body: str, item: Document | Page) -> str:
        try:
            template = self.env.select_template([f"{layout}.html", f"{layout}.jinja"])
        except TemplatesNotFound as exc:
            msg = f"Layout '{layout}' requested by '{item.url}' does not exist."
            raise LayoutNotFoundError(msg) from exc
        context = {
            "content": Markup(body),  # noqa: S704 - body is rendered markup
            "page": {**item.data, "url": item.url},
            "site": self.site.config,
            "pygments_css": Markup(self.content_renderer.stylesheet),  # noqa: S704
        }
        return template.render(**context)


__all__ = ["DEFAULT_TEMPLATES_DIR", "HtmlContentRenderer", "SiteRenderer"]
