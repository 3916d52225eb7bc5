r"""Inject a robots ``noindex`` directive into rendered secret documents.

Example
-------
>>> from secret_pages.secret.sanitizer import with_noindex
>>> with_noindex("<html><head></head></html>")
'<html><head>\n  <meta name="robots" content="noindex, nofollow"></head></html>'
"""

from __future__ import annotations

import typing as typ

from secret_pages._constants import NOINDEX_META

from .documents import is_secret_document

if typ.TYPE_CHECKING:
    from secret_pages.config import SecretConfig
    from secret_pages.site.models import Document

HEAD_TAG = "<head>"


def with_noindex(output: str) -> str:
    """Return ``output`` with the directive after ``<head>`` or at the start."""
    if HEAD_TAG in output:
        return output.replace(HEAD_TAG, f"{HEAD_TAG}\n  {NOINDEX_META}", 1)
    return f"{NOINDEX_META}\n{output}"


def inject_noindex(document: Document, config: SecretConfig) -> bool:
    """Add the directive to a rendered secret document's output.

    Each call inserts one directive, so callers run it once per render.

    Returns
    -------
    bool
        ``True`` when the output was modified.
    """
    if not is_secret_document(document.collection, config) or not document.output:
        return False
    document.output = with_noindex(document.output)
    return True


__all__ = ["HEAD_TAG", "inject_noindex", "with_noindex"]
