"""Assign token permalinks to secret documents."""

from __future__ import annotations

import typing as typ

from .documents import is_secret_document, secret_permalink

if typ.TYPE_CHECKING:
    from secret_pages.config import SecretConfig
    from secret_pages.site.models import Document


def apply_secret_permalink(document: Document, config: SecretConfig) -> bool:
    """Rewrite a secret document's permalink and exclude it from the sitemap.

    Documents outside the secret collection are left untouched. Applying the
    rewrite repeatedly yields the same permalink.

    Returns
    -------
    bool
        ``True`` when the document belongs to the secret collection.
    """
    if not is_secret_document(document.collection, config):
        return False
    document.data["permalink"] = secret_permalink(
        document.collection, document.relative_path, config
    )
    document.data["sitemap"] = False
    return True


__all__ = ["apply_secret_permalink"]
