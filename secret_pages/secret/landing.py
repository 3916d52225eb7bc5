"""Synthesize the redirect page served at the secret URL prefix.

The prefix root carries nothing worth showing, so visitors landing there are
sent to the configured redirect target. With a layout the page body is a
small fragment rendered inside that layout; without one it is a complete
standalone HTML document.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from secret_pages.site.models import Page
from secret_pages.site.renderer import DEFAULT_TEMPLATES_DIR

if typ.TYPE_CHECKING:
    from secret_pages.config import SecretConfig
    from secret_pages.site.models import Site

logger = logging.getLogger(__name__)

FRAGMENT_TEMPLATE = "landing_fragment.jinja"
STANDALONE_TEMPLATE = "landing_standalone.jinja"


class LandingPageBuilder:
    """Build the landing page for a secret URL prefix."""

    def __init__(
        self, config: SecretConfig, *, templates_dir: Path | None = None
    ) -> None:
        self.config = config
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def content(self) -> str:
        """Return the redirect markup matching the configured layout policy."""
        name = FRAGMENT_TEMPLATE if self.config.index_layout else STANDALONE_TEMPLATE
        template = self.env.get_template(name)
        return template.render(url=self.config.redirect_url).strip()

    def build(self) -> Page:
        """Return the landing :class:`Page`, excluded from the sitemap."""
        return Page(
            dir=self.config.url_prefix.strip("/"),
            name="index.html",
            data={
                "permalink": self.config.url_prefix,
                "layout": self.config.index_layout,
                "sitemap": False,
            },
            content=self.content(),
        )


def add_landing_page(site: Site, config: SecretConfig) -> Page:
    """Append the landing page to ``site.pages`` and return it."""
    page = LandingPageBuilder(config).build()
    site.pages.append(page)
    logger.debug("Added secret landing page at %s", page.url)
    return page


__all__ = ["LandingPageBuilder", "add_landing_page"]
