"""Register the secret collection in the site's collections registry."""

from __future__ import annotations

import logging
import typing as typ

if typ.TYPE_CHECKING:
    from secret_pages.config import SecretConfig

logger = logging.getLogger(__name__)


def register_secret_collection(
    settings: typ.MutableMapping[str, typ.Any], config: SecretConfig
) -> bool:
    """Ensure the secret collection is registered and its directory is read.

    An existing registry entry is left untouched. Otherwise the collection is
    registered with ``output`` enabled and ``source`` set to the secret source
    directory, and literal occurrences of that directory are removed from the
    ``exclude`` list.

    Returns
    -------
    bool
        ``True`` when a new registry entry was added.
    """
    collections = settings.get("collections")
    if not isinstance(collections, typ.MutableMapping):
        collections = {}
        settings["collections"] = collections
    if config.collection_name in collections:
        return False

    collections[config.collection_name] = {
        "output": True,
        "source": config.source_dir,
    }
    exclude = settings.get("exclude")
    if isinstance(exclude, list):
        exclude[:] = [entry for entry in exclude if str(entry) != config.source_dir]
    logger.debug(
        "Registered secret collection '%s' from '%s'",
        config.collection_name,
        config.source_dir,
    )
    return True


__all__ = ["register_secret_collection"]
