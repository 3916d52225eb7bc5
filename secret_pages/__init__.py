"""Publish a site's secret documents under unguessable, token-based URLs.

This package exposes the CLI entry points used by ``uv run secret-pages`` to
build a site whose secret collection is hidden from discovery while staying
reachable by link.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from secret_pages import main
>>> main()  # doctest: +SKIP
>>> callable(main)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
