"""Minimal static-site host: read, render, and write a site source tree.

The host owns document parsing, front matter, Markdown and Jinja rendering,
and output writing. Pipeline stages registered on a
:class:`~secret_pages.pipeline.BuildPipeline` observe and adjust the build at
fixed points.
"""

from .builder import SiteBuilder
from .errors import (
    FrontMatterError,
    LayoutNotFoundError,
    OutputPathError,
    SiteBuildError,
)
from .models import Collection, Document, Page, Site
from .renderer import HtmlContentRenderer, SiteRenderer

__all__ = [
    "Collection",
    "Document",
    "FrontMatterError",
    "HtmlContentRenderer",
    "LayoutNotFoundError",
    "OutputPathError",
    "Page",
    "Site",
    "SiteBuildError",
    "SiteBuilder",
    "SiteRenderer",
]
