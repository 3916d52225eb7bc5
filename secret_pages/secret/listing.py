"""Report the resolved external URL of every secret document."""

from __future__ import annotations

import logging
import typing as typ

from .documents import secret_url

if typ.TYPE_CHECKING:
    from secret_pages.config import SecretConfig
    from secret_pages.site.models import Collection, Site

logger = logging.getLogger(__name__)


def log_secret_urls(site: Site, config: SecretConfig) -> list[str]:
    """Log one line per secret document URL and return the URLs.

    The secret collection is read on demand when it holds no documents yet and
    its directory exists. A missing or empty collection is reported and yields
    an empty list. Document data and site output are never modified.
    """
    collection = site.collections.get(config.collection_name)
    if collection is None:
        logger.info("Secret posts: no collection '%s'", config.collection_name)
        return []
    _ensure_collection_read(site, collection)
    if not collection.docs:
        logger.info("Secret posts: no documents")
        return []

    urls = [
        secret_url(doc.collection, doc.relative_path, config) for doc in collection.docs
    ]
    for url in urls:
        logger.info("Secret post URL: %s", url)
    return urls


def _ensure_collection_read(site: Site, collection: Collection) -> None:
    if collection.docs or not collection.directory.is_dir():
        return
    collection.read(site.source)


__all__ = ["log_secret_urls"]
