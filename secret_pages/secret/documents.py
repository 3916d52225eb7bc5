"""Membership and path helpers shared by every secret-posts stage."""

from __future__ import annotations

import typing as typ

from .tokens import token_for

if typ.TYPE_CHECKING:
    from secret_pages.config import SecretConfig


def is_secret_document(collection_label: str | None, config: SecretConfig) -> bool:
    """Return whether ``collection_label`` names the secret collection."""
    return collection_label is not None and collection_label == config.collection_name


def secret_permalink(
    collection_label: str | None, relative_path: str | None, config: SecretConfig
) -> str:
    """Return ``<url_prefix><token>/`` for a document identity."""
    return f"{config.url_prefix}{token_for(collection_label, relative_path, config)}/"


def secret_url(
    collection_label: str | None, relative_path: str | None, config: SecretConfig
) -> str:
    """Return the external URL: site base path, then the secret permalink."""
    base = config.baseurl.removesuffix("/")
    return f"{base}{secret_permalink(collection_label, relative_path, config)}"


__all__ = ["is_secret_document", "secret_permalink", "secret_url"]
