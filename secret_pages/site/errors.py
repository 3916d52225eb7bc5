"""Exceptions raised by the host build pipeline."""

from __future__ import annotations


class SiteBuildError(RuntimeError):
    """Base class for failures that abort a site build."""


class FrontMatterError(SiteBuildError):
    """Raised when a file's front matter is not a YAML mapping."""


class LayoutNotFoundError(SiteBuildError):
    """Raised when a document or page names a layout that does not exist."""


class OutputPathError(SiteBuildError):
    """Raised when a permalink resolves outside the destination directory."""


__all__ = [
    "FrontMatterError",
    "LayoutNotFoundError",
    "OutputPathError",
    "SiteBuildError",
]
