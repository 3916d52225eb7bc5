"""Persist rendered pages, documents, and static files into the destination."""

from __future__ import annotations

import shutil
import typing as typ
from pathlib import Path, PurePosixPath

from .errors import OutputPathError

if typ.TYPE_CHECKING:
    from .models import Document, Page, Site


def destination_path(destination: Path, url: str) -> Path:
    """Map a URL onto a file under ``destination``.

    ``/a/b/`` becomes ``a/b/index.html``; ``/a/b.html`` stays ``a/b.html``.

    Raises
    ------
    OutputPathError
        If the URL escapes ``destination``.
    """
    relative = url.lstrip("/")
    if not relative or relative.endswith("/"):
        relative = f"{relative}index.html"
    parts = PurePosixPath(relative).parts
    if ".." in parts:
        msg = f"URL '{url}' resolves outside the destination directory."
        raise OutputPathError(msg)
    return destination.joinpath(*parts)


def write_item(destination: Path, item: Document | Page) -> Path:
    """Write ``item.output`` to its destination path, returning that path."""
    path = destination_path(destination, item.url)
    path.parent.mkdir(parents=True, exist_ok=True)
    html = item.output or ""
    if html and not html.endswith("\n"):
        html += "\n"
    path.write_text(html, encoding="utf-8")
    return path


def write_site(site: Site) -> list[Path]:
    """Write pages, output-enabled collection documents, and static files."""
    site.destination.mkdir(parents=True, exist_ok=True)
    written = [write_item(site.destination, page) for page in site.pages]
    for collection in site.collections.values():
        if not collection.output:
            continue
        written.extend(write_item(site.destination, doc) for doc in collection.docs)
    for path in site.static_files:
        target = site.destination / path.relative_to(site.source)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(path, target)
        written.append(target)
    return written


__all__ = ["destination_path", "write_item", "write_site"]
