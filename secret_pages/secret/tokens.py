"""Derive deterministic, salted URL tokens for secret documents.

A token is the SHA-256 digest of ``salt + label + path`` rendered as lowercase
hexadecimal and truncated to the configured length. Absent values are replaced
by a placeholder so ``(label, None)`` and ``(label, "")`` never collide.

Example
-------
>>> from secret_pages.secret.tokens import derive_token
>>> token = derive_token("secret", "_secret/post.md", salt="pepper")
>>> len(token)
32
>>> token == derive_token("secret", "_secret/post.md", salt="pepper")
True
"""

from __future__ import annotations

import hashlib
import typing as typ

from secret_pages._constants import TOKEN_LENGTH

if typ.TYPE_CHECKING:
    from secret_pages.config import SecretConfig

ABSENT_PLACEHOLDER = "\x00<none>"


def _identifier_part(value: object | None) -> str:
    return ABSENT_PLACEHOLDER if value is None else str(value)


def derive_token(
    collection_label: object | None,
    relative_path: object | None,
    *,
    salt: str,
    length: int = TOKEN_LENGTH,
) -> str:
    """Return the hexadecimal token for a document identity.

    Parameters
    ----------
    collection_label : object | None
        Label of the document's collection; ``None`` is accepted.
    relative_path : object | None
        Document path relative to the site source; ``None`` is accepted.
    salt : str
        Secret prefix mixed into the digest.
    length : int, optional
        Number of hexadecimal characters to keep (at most 64).

    Returns
    -------
    str
        Lowercase hexadecimal string of ``length`` characters.
    """
    identifier = _identifier_part(collection_label) + _identifier_part(relative_path)
    digest = hashlib.sha256((salt + identifier).encode("utf-8")).hexdigest()
    return digest[:length]


def token_for(
    collection_label: object | None, relative_path: object | None, config: SecretConfig
) -> str:
    """Return the token for a document using the salt and length in ``config``."""
    return derive_token(
        collection_label,
        relative_path,
        salt=config.salt,
        length=config.token_length,
    )


__all__ = ["ABSENT_PLACEHOLDER", "derive_token", "token_for"]
