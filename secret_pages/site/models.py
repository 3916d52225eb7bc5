"""Dataclasses describing the host site, its collections, documents, and pages."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path, PurePosixPath

from .frontmatter import split_front_matter

DOCUMENT_SUFFIXES = frozenset({".md", ".markdown", ".html", ".htm"})
MARKDOWN_SUFFIXES = frozenset({".md", ".markdown"})


def _output_name(name: str) -> str:
    """Return the rendered filename for a source filename."""
    path = PurePosixPath(name)
    if path.suffix in MARKDOWN_SUFFIXES:
        return str(path.with_suffix(".html"))
    return name


@dc.dataclass(slots=True, eq=False)
class Document:
    """A file read from a collection directory.

    Attributes
    ----------
    path : Path
        Absolute path to the source file.
    collection : str | None
        Label of the owning collection.
    relative_path : str | None
        POSIX path relative to the site source (for example
        ``_secret/post.md``).
    data : dict[str, Any]
        Front matter plus values assigned by pipeline stages (``permalink``,
        ``sitemap``).
    content : str
        Body with the front matter removed.
    output : str | None
        Rendered markup, populated by the renderer.
    """

    path: Path
    collection: str | None
    relative_path: str | None
    data: dict[str, typ.Any] = dc.field(default_factory=dict)
    content: str = ""
    output: str | None = None

    @property
    def is_markdown(self) -> bool:
        """Return whether the body should be converted from Markdown."""
        return self.path.suffix in MARKDOWN_SUFFIXES

    @property
    def url(self) -> str:
        """Return the permalink, or ``/<collection>/<path>.html`` by default."""
        permalink = self.data.get("permalink")
        if permalink:
            return str(permalink)
        relative = PurePosixPath(self.relative_path or self.path.name)
        inner = relative
        if len(relative.parts) > 1:
            inner = PurePosixPath(*relative.parts[1:])
        return f"/{self.collection}/{_output_name(str(inner))}"


@dc.dataclass(slots=True, eq=False)
class Page:
    """A standalone page, either read from the source tree or generated."""

    dir: str
    name: str
    data: dict[str, typ.Any] = dc.field(default_factory=dict)
    content: str = ""
    output: str | None = None

    @property
    def is_markdown(self) -> bool:
        """Return whether the body should be converted from Markdown."""
        return PurePosixPath(self.name).suffix in MARKDOWN_SUFFIXES

    @property
    def url(self) -> str:
        """Return the permalink, or the page's directory and output name."""
        permalink = self.data.get("permalink")
        if permalink:
            return str(permalink)
        directory = self.dir.strip("/")
        name = _output_name(self.name)
        return f"/{directory}/{name}" if directory else f"/{name}"


@dc.dataclass(slots=True, eq=False)
class Collection:
    """A named group of documents read from a single directory."""

    label: str
    directory: Path
    metadata: dict[str, typ.Any] = dc.field(default_factory=dict)
    docs: list[Document] = dc.field(default_factory=list)

    @property
    def output(self) -> bool:
        """Return whether documents in this collection are written out."""
        return bool(self.metadata.get("output", False))

    def read(
        self,
        site_source: Path | None = None,
        on_document: typ.Callable[[Document], None] | None = None,
    ) -> list[Document]:
        """Read every document under :attr:`directory`, replacing :attr:`docs`.

        Parameters
        ----------
        site_source : Path, optional
            Root used to compute each document's ``relative_path``; defaults
            to the collection directory's parent.
        on_document : Callable[[Document], None], optional
            Invoked immediately after each document is constructed.

        Returns
        -------
        list[Document]
            Documents in sorted path order. Empty when the directory does not
            exist.
        """
        root = site_source or self.directory.parent
        docs: list[Document] = []
        if self.directory.is_dir():
            for path in sorted(self.directory.rglob("*")):
                if not path.is_file() or path.suffix not in DOCUMENT_SUFFIXES:
                    continue
                parts = path.relative_to(self.directory).parts
                if any(part.startswith(".") for part in parts):
                    continue
                text = path.read_text(encoding="utf-8")
                front_matter, body = split_front_matter(text)
                document = Document(
                    path=path,
                    collection=self.label,
                    relative_path=path.relative_to(root).as_posix(),
                    data=front_matter or {},
                    content=body,
                )
                if on_document is not None:
                    on_document(document)
                docs.append(document)
        self.docs = docs
        return docs


@dc.dataclass(slots=True, eq=False)
class Site:
    """Host site state shared by every pipeline stage.

    Attributes
    ----------
    source : Path
        Directory containing ``_config.yml``, pages, and collection folders.
    destination : Path
        Directory the build writes into.
    config : dict[str, Any]
        Raw settings, including the mutable ``collections`` registry and
        ``exclude`` list.
    collections : dict[str, Collection]
        Collections built from the registry after site initialization.
    pages : list[Page]
        Pages read from the source tree plus pages added during generation.
    static_files : list[Path]
        Source files copied verbatim into the destination.
    """

    source: Path
    destination: Path
    config: dict[str, typ.Any] = dc.field(default_factory=dict)
    collections: dict[str, Collection] = dc.field(default_factory=dict)
    pages: list[Page] = dc.field(default_factory=list)
    static_files: list[Path] = dc.field(default_factory=list)

    @property
    def documents(self) -> list[Document]:
        """Return documents from every collection in registry order."""
        return [
            doc for collection in self.collections.values() for doc in collection.docs
        ]


__all__ = [
    "DOCUMENT_SUFFIXES",
    "MARKDOWN_SUFFIXES",
    "Collection",
    "Document",
    "Page",
    "Site",
]
