"""Discover collections, pages, and static files in a site source tree."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path, PurePosixPath

from .frontmatter import split_front_matter
from .models import DOCUMENT_SUFFIXES, Collection, Document, Page, Site

logger = logging.getLogger(__name__)

SETTINGS_FILES = frozenset({"_config.yml"})


def _exclude_entries(settings: typ.Mapping[str, typ.Any]) -> set[str]:
    """Return the literal exclude entries with surrounding slashes removed."""
    exclude = settings.get("exclude")
    if not isinstance(exclude, list):
        return set()
    return {str(entry).strip("/") for entry in exclude if str(entry).strip("/")}


def build_collections(site: Site) -> dict[str, Collection]:
    """Create :class:`Collection` objects from the ``collections`` registry.

    A collection's directory is its ``source`` metadata value, or ``_<label>``
    when unset. Registry entries that are not mappings are treated as empty
    metadata.
    """
    registry = site.config.get("collections") or {}
    collections: dict[str, Collection] = {}
    for label, metadata in registry.items():
        meta = dict(metadata) if isinstance(metadata, typ.Mapping) else {}
        directory = site.source / str(meta.get("source") or f"_{label}")
        collections[str(label)] = Collection(
            label=str(label), directory=directory, metadata=meta
        )
    site.collections = collections
    return collections


def read_collections(
    site: Site, on_document: typ.Callable[[Document], None] | None = None
) -> None:
    """Read every registered collection whose directory is not excluded."""
    excluded = _exclude_entries(site.config)
    for collection in site.collections.values():
        relative = _relative_to_source(site, collection.directory)
        if relative in excluded:
            logger.warning(
                "Collection '%s' not read: '%s' is listed in exclude",
                collection.label,
                relative,
            )
            continue
        collection.read(site.source, on_document)


def read_pages(site: Site) -> None:
    """Collect pages (files with front matter) and static files from the source."""
    excluded = _exclude_entries(site.config)
    collection_dirs = [collection.directory for collection in site.collections.values()]
    pages: list[Page] = []
    static_files: list[Path] = []
    for path in sorted(site.source.rglob("*")):
        if not path.is_file() or _is_skipped(site, path, excluded, collection_dirs):
            continue
        relative = PurePosixPath(path.relative_to(site.source).as_posix())
        front_matter = None
        body = ""
        if path.suffix in DOCUMENT_SUFFIXES:
            front_matter, body = split_front_matter(path.read_text(encoding="utf-8"))
        if front_matter is None:
            static_files.append(path)
            continue
        parent = "" if str(relative.parent) == "." else str(relative.parent)
        pages.append(
            Page(dir=parent, name=relative.name, data=front_matter, content=body)
        )
    site.pages = pages
    site.static_files = static_files


def _relative_to_source(site: Site, path: Path) -> str:
    try:
        return path.relative_to(site.source).as_posix()
    except ValueError:
        return path.as_posix()


def _is_skipped(
    site: Site, path: Path, excluded: set[str], collection_dirs: list[Path]
) -> bool:
    """Return whether ``path`` is skipped when reading pages and static files.

    Build output, settings files, hidden or underscored paths, excluded
    entries, and anything under a collection directory are skipped.
    Collection documents are only ever published through their collection.
    """
    if path.is_relative_to(site.destination):
        return True
    if any(path.is_relative_to(directory) for directory in collection_dirs):
        return True
    relative = PurePosixPath(path.relative_to(site.source).as_posix())
    if str(relative) in SETTINGS_FILES:
        return True
    if any(part.startswith(("_", ".")) for part in relative.parts):
        return True
    return any(
        str(relative) == entry or str(relative).startswith(f"{entry}/")
        for entry in excluded
    )


__all__ = ["build_collections", "read_collections", "read_pages"]
