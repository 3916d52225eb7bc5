"""Cyclopts CLI entrypoint for building sites with secret, token-addressed pages.

The ``secret-pages`` console script builds a site source tree with the
secret-posts stages registered, and can list the resolved secret URLs so
operators know which links to share. The salt is read from the
``SECRET_POSTS_SALT`` environment variable; without it tokens are predictable.
Sites migrating from the Jekyll plugin must rename ``JEKYLL_SECRET_SALT`` to
``SECRET_POSTS_SALT``. The old name is not read, and keeping the same salt
value keeps every published token unchanged.

Examples
--------
Build the site in the current directory:

>>> from secret_pages.cli import main
>>> main()  # doctest: +SKIP

List the secret URLs of a site:

>>> from secret_pages.cli import app
>>> app(["urls", "--source", "site"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_secret_config
from .pipeline import BuildPipeline
from .secret import SecretPostsPlugin, secret_url
from .site import SiteBuilder

app = App(name="secret-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _builder(source: Path, destination: Path | None = None) -> SiteBuilder:
    return SiteBuilder(
        source,
        destination=destination,
        pipeline=BuildPipeline([SecretPostsPlugin()]),
    )


def build_site(source: Path, destination: Path | None = None) -> list[Path]:
    """Build ``source`` with the secret-posts stages and return written paths."""
    return _builder(source, destination).process()


def collect_secret_urls(source: Path) -> list[str]:
    """Read ``source`` without writing and return each secret document's URL."""
    site = _builder(source).read()
    config = load_secret_config(site.config)
    collection = site.collections.get(config.collection_name)
    return [
        secret_url(doc.collection, doc.relative_path, config)
        for doc in (collection.docs if collection else [])
    ]


@app.command(help="Build the site, publishing secret documents under token URLs.")
def build(
    *,
    source: typ.Annotated[
        Path, Parameter(help="Site source directory", env_var="INPUT_SOURCE")
    ] = Path(),
    destination: typ.Annotated[
        Path | None,
        Parameter(
            help="Output directory (defaults to <source>/_site)",
            env_var="INPUT_DESTINATION",
        ),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Build the site and report every written file.

    Parameters
    ----------
    source : Path, optional
        Directory containing ``_config.yml`` and the site content.
    destination : Path or None, optional
        Output directory; ``None`` writes into ``<source>/_site``.
    verbose : bool, optional
        Log stage activity at DEBUG level.

    Raises
    ------
    SiteBuildError
        If the build fails (bad front matter, missing layout, and so on).
    """
    _configure_logging(verbose=verbose)
    for path in build_site(source, destination):
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the external URL of every secret document.")
def urls(
    *,
    source: typ.Annotated[
        Path, Parameter(help="Site source directory", env_var="INPUT_SOURCE")
    ] = Path(),
) -> None:
    """Read the site and print each secret document's resolved URL.

    Unlike the ``list_urls`` setting, this command does not build the site and
    prints URLs whether or not listing is enabled.
    """
    _configure_logging(verbose=False)
    resolved = collect_secret_urls(source)
    if not resolved:
        print("no secret documents found")
    for url in resolved:
        print(url)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``secret-pages`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
