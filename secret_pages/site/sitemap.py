"""Write ``sitemap.xml`` for every page and document not excluded from it."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .renderer import DEFAULT_TEMPLATES_DIR

if typ.TYPE_CHECKING:
    from .models import Site


def sitemap_urls(site: Site) -> list[str]:
    """Return absolute URLs for items whose ``sitemap`` flag is not ``False``."""
    root = str(site.config.get("url") or "").rstrip("/")
    base = str(site.config.get("baseurl") or "").strip().rstrip("/")
    items: list[typ.Any] = list(site.pages)
    for collection in site.collections.values():
        if collection.output:
            items.extend(collection.docs)
    return [
        f"{root}{base}{item.url}"
        for item in items
        if item.data.get("sitemap") is not False
    ]


def write_sitemap(site: Site, *, templates_dir: Path | None = None) -> Path | None:
    """Render ``sitemap.xml`` when the ``sitemap`` setting is enabled."""
    if not site.config.get("sitemap"):
        return None
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    xml = env.get_template("sitemap.jinja").render(urls=sitemap_urls(site))
    path = site.destination / "sitemap.xml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(xml if xml.endswith("\n") else f"{xml}\n", encoding="utf-8")
    return path


__all__ = ["sitemap_urls", "write_sitemap"]
