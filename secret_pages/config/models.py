"""Typed dataclasses describing resolved secret-posts configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class SiteConfigError(ValueError):
    """Raised when the site settings file is invalid."""


@dc.dataclass(frozen=True, slots=True)
class Missing:
    """The key is not present in the settings section."""


@dc.dataclass(frozen=True, slots=True)
class Disabled:
    """The key is present but set to ``null`` or ``false``."""


@dc.dataclass(frozen=True, slots=True)
class Blank:
    """The key is present but its string form is empty after trimming."""


@dc.dataclass(frozen=True, slots=True)
class Given:
    """The key carries a usable value."""

    value: typ.Any

    @property
    def text(self) -> str:
        """Return the value as a stripped string."""
        return str(self.value).strip()


SettingOutcome = Missing | Disabled | Blank | Given


@dc.dataclass(frozen=True, slots=True)
class SecretConfig:
    """Effective secret-posts configuration for a single build.

    Attributes
    ----------
    source_dir : str
        Directory (relative to the site source) holding secret documents.
    collection_name : str
        Label of the collection whose documents receive token permalinks.
    url_prefix : str
        Public path prefix; always ends with ``/``.
    index_layout : str | None
        Layout used for the landing page, or ``None`` for a standalone page.
    redirect_url : str
        Target of the landing page redirect; always ends with ``/``.
    token_length : int
        Number of hexadecimal characters kept from the digest.
    salt : str
        Secret mixed into every token; empty when the environment lacks it.
    list_urls : bool
        Whether resolved secret URLs are logged during generation.
    baseurl : str
        Site base path with surrounding whitespace removed; empty when unset.
    """

    source_dir: str
    collection_name: str
    url_prefix: str
    index_layout: str | None
    redirect_url: str
    token_length: int
    salt: str = dc.field(repr=False)
    list_urls: bool
    baseurl: str = ""


__all__ = [
    "Blank",
    "Disabled",
    "Given",
    "Missing",
    "SecretConfig",
    "SettingOutcome",
    "SiteConfigError",
]
