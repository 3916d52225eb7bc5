"""Typed build stages and the coordinator that invokes them in fixed order.

A stage is any object implementing one or more of the protocols below. The
:class:`BuildPipeline` sorts registered stages by the protocols they satisfy
and the site builder calls each phase at its point in the build:

``site_init`` → ``document_init`` (per document) → render →
``document_rendered`` (per document) → ``generate``.

Example
-------
>>> from secret_pages.pipeline import BuildPipeline
>>> from secret_pages.secret import SecretPostsPlugin
>>> pipeline = BuildPipeline([SecretPostsPlugin()])
>>> len(pipeline.site_init_stages)
1
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

if typ.TYPE_CHECKING:
    from secret_pages.site.models import Document, Site


@typ.runtime_checkable
class OnSiteInit(typ.Protocol):
    """Runs once, before any content is read."""

    def on_site_init(self, site: Site) -> None: ...


@typ.runtime_checkable
class OnDocumentInit(typ.Protocol):
    """Runs once per document, immediately after it is constructed."""

    def on_document_init(self, document: Document, site: Site) -> None: ...


@typ.runtime_checkable
class OnDocumentRendered(typ.Protocol):
    """Runs once per document, after its output has been rendered."""

    def on_document_rendered(self, document: Document, site: Site) -> None: ...


@typ.runtime_checkable
class OnGenerate(typ.Protocol):
    """Runs once, after every per-document phase has finished."""

    def on_generate(self, site: Site) -> None: ...


class BuildPipeline:
    """Hold registered stages and dispatch each build phase to them."""

    def __init__(self, stages: cabc.Iterable[object] = ()) -> None:
        self.site_init_stages: list[OnSiteInit] = []
        self.document_init_stages: list[OnDocumentInit] = []
        self.document_rendered_stages: list[OnDocumentRendered] = []
        self.generate_stages: list[OnGenerate] = []
        for stage in stages:
            self.register(stage)

    def register(self, stage: object) -> None:
        """Attach ``stage`` to every phase whose protocol it implements.

        Raises
        ------
        TypeError
            If ``stage`` implements none of the stage protocols.
        """
        matched = False
        if isinstance(stage, OnSiteInit):
            self.site_init_stages.append(stage)
            matched = True
        if isinstance(stage, OnDocumentInit):
            self.document_init_stages.append(stage)
            matched = True
        if isinstance(stage, OnDocumentRendered):
            self.document_rendered_stages.append(stage)
            matched = True
        if isinstance(stage, OnGenerate):
            self.generate_stages.append(stage)
            matched = True
        if not matched:
            msg = f"{type(stage).__name__} implements no build stage."
            raise TypeError(msg)

    def site_init(self, site: Site) -> None:
        for stage in self.site_init_stages:
            stage.on_site_init(site)

    def document_init(self, document: Document, site: Site) -> None:
        for stage in self.document_init_stages:
            stage.on_document_init(document, site)

    def document_rendered(self, document: Document, site: Site) -> None:
        for stage in self.document_rendered_stages:
            stage.on_document_rendered(document, site)

    def generate(self, site: Site) -> None:
        for stage in self.generate_stages:
            stage.on_generate(site)


__all__ = [
    "BuildPipeline",
    "OnDocumentInit",
    "OnDocumentRendered",
    "OnGenerate",
    "OnSiteInit",
]
