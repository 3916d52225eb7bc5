"""Resolve raw site settings into an immutable :class:`SecretConfig`.

Every field is decided from the tagged outcome returned by
:func:`~secret_pages.config.helpers._classify_setting`, so each branch of the
decision table (missing, ``null``/``false``, blank, given) is handled in one
place. The process environment is consulted only by :func:`load_secret_config`.

Examples
--------
>>> from secret_pages.config import load_secret_config
>>> config = load_secret_config({"secret_posts": {"url_prefix": "/p"}}, {})
>>> config.url_prefix
'/p/'
>>> config.redirect_url
'/'
"""

from __future__ import annotations

import os
import typing as typ

from secret_pages._constants import (
    DEFAULT_COLLECTION_NAME,
    DEFAULT_INDEX_LAYOUT,
    DEFAULT_SOURCE_DIR,
    DEFAULT_URL_PREFIX,
    SALT_ENV_VAR,
    SETTINGS_SECTION,
    TOKEN_LENGTH,
)

from .helpers import _classify_setting, _settings_section, _with_trailing_slash
from .models import Disabled, Given, SecretConfig, SettingOutcome


def load_secret_config(
    settings: typ.Mapping[str, typ.Any],
    environ: typ.Mapping[str, str] | None = None,
) -> SecretConfig:
    """Build the effective secret-posts configuration.

    Parameters
    ----------
    settings : Mapping[str, Any]
        Site-wide settings; the ``secret_posts`` sub-section may be absent.
    environ : Mapping[str, str], optional
        Environment to read the salt from; defaults to ``os.environ``.

    Returns
    -------
    SecretConfig
        Fully populated configuration. Construction never raises; malformed
        values resolve to their defaults.
    """
    env = os.environ if environ is None else environ
    section = _settings_section(settings, SETTINGS_SECTION)
    baseurl = _classify_setting(settings, "baseurl")
    return SecretConfig(
        source_dir=_resolve_text(
            _classify_setting(section, "source_dir"), DEFAULT_SOURCE_DIR
        ),
        collection_name=_resolve_text(
            _classify_setting(section, "collection_name"), DEFAULT_COLLECTION_NAME
        ),
        url_prefix=_resolve_url_prefix(_classify_setting(section, "url_prefix")),
        index_layout=_resolve_index_layout(_classify_setting(section, "index_layout")),
        redirect_url=_resolve_redirect_url(
            _classify_setting(section, "redirect_url"), baseurl
        ),
        token_length=TOKEN_LENGTH,
        salt=str(env.get(SALT_ENV_VAR) or ""),
        list_urls=isinstance(_classify_setting(section, "list_urls"), Given),
        baseurl=baseurl.text if isinstance(baseurl, Given) else "",
    )


def _resolve_text(outcome: SettingOutcome, default: str) -> str:
    match outcome:
        case Given():
            return outcome.text
        case _:
            return default


def _resolve_url_prefix(outcome: SettingOutcome) -> str:
    """Return the configured prefix, falling back when blank, with a trailing slash."""
    prefix = _resolve_text(outcome, DEFAULT_URL_PREFIX)
    return _with_trailing_slash(prefix)


def _resolve_index_layout(outcome: SettingOutcome) -> str | None:
    """Apply the layout policy: missing or blank inherits, disabled opts out."""
    match outcome:
        case Disabled():
            return None
        case Given():
            return outcome.text
        case _:
            return DEFAULT_INDEX_LAYOUT


def _resolve_redirect_url(custom: SettingOutcome, baseurl: SettingOutcome) -> str:
    """Prefer a custom redirect, then the site base path, then the root."""
    for outcome in (custom, baseurl):
        if isinstance(outcome, Given):
            return _with_trailing_slash(outcome.text)
    return "/"


__all__ = ["load_secret_config"]
