"""Drive a full site build through the pipeline phases.

:class:`SiteBuilder` loads ``_config.yml`` from the source directory, runs the
registered stages at their fixed points, renders every document and page, and
writes the result into the destination directory.

Example
-------
>>> from pathlib import Path
>>> from secret_pages.pipeline import BuildPipeline
>>> from secret_pages.secret import SecretPostsPlugin
>>> from secret_pages.site import SiteBuilder
>>> builder = SiteBuilder(Path("site"), pipeline=BuildPipeline([SecretPostsPlugin()]))
>>> builder.process()  # doctest: +SKIP
[PosixPath('site/_site/s/index.html'), ...]
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from secret_pages.config import load_site_settings
from secret_pages.pipeline import BuildPipeline

from .models import Site
from .reader import build_collections, read_collections, read_pages
from .renderer import SiteRenderer
from .sitemap import write_sitemap
from .writer import write_site

logger = logging.getLogger(__name__)

DEFAULT_DESTINATION_NAME = "_site"


class SiteBuilder:
    """Build a site from a source directory using a stage pipeline."""

    def __init__(
        self,
        source: Path,
        *,
        destination: Path | None = None,
        pipeline: BuildPipeline | None = None,
        settings: dict[str, typ.Any] | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        source : Path
            Site source directory.
        destination : Path, optional
            Output directory; defaults to ``<source>/_site``.
        pipeline : BuildPipeline, optional
            Registered stages; an empty pipeline builds the site unchanged.
        settings : dict[str, Any], optional
            Settings to use instead of loading ``<source>/_config.yml``.
        """
        self.source = source.resolve()
        self.destination = (
            destination or self.source / DEFAULT_DESTINATION_NAME
        ).resolve()
        self.pipeline = pipeline or BuildPipeline()
        self.settings = settings

    def read(self) -> Site:
        """Initialize the site and read its content, running per-document stages.

        Returns
        -------
        Site
            Site with collections, documents, pages, and static files loaded.
        """
        settings = (
            dict(self.settings)
            if self.settings is not None
            else load_site_settings(self.source)
        )
        site = Site(source=self.source, destination=self.destination, config=settings)
        self.pipeline.site_init(site)
        build_collections(site)
        read_collections(
            site, on_document=lambda doc: self.pipeline.document_init(doc, site)
        )
        read_pages(site)
        logger.debug(
            "Read %d documents and %d pages", len(site.documents), len(site.pages)
        )
        return site

    def process(self) -> list[Path]:
        """Run the whole build and return every written path.

        Notes
        -----
        Any exception raised by a stage, the renderer, or the writer aborts
        the build and propagates to the caller.
        """
        site = self.read()
        renderer = SiteRenderer(site)
        for collection in site.collections.values():
            if not collection.output:
                continue
            for document in collection.docs:
                renderer.render(document)
                self.pipeline.document_rendered(document, site)
        self.pipeline.generate(site)
        for page in site.pages:
            renderer.render(page)
        written = write_site(site)
        sitemap_path = write_sitemap(site)
        if sitemap_path is not None:
            written.append(sitemap_path)
        return written


__all__ = ["DEFAULT_DESTINATION_NAME", "SiteBuilder"]
