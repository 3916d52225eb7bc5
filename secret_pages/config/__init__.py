"""Load site settings and resolve the secret-posts configuration.

This subpackage reads the site's ``_config.yml`` into a plain settings mapping
(the host's mutable registry) and derives the immutable
:class:`SecretConfig` that every pipeline stage consumes. The primary entry
points are :func:`load_site_settings` and :func:`load_secret_config`; the
latter is the only place the secrecy salt is read from the environment.

Examples
--------
>>> from pathlib import Path
>>> from secret_pages.config import load_secret_config, load_site_settings
>>> settings = load_site_settings(Path("site"))  # doctest: +SKIP
>>> load_secret_config(settings).collection_name  # doctest: +SKIP
'secret'
"""

from .loader import load_site_settings
from .models import (
    Blank,
    Disabled,
    Given,
    Missing,
    SecretConfig,
    SettingOutcome,
    SiteConfigError,
)
from .secret import load_secret_config

__all__ = [
    "Blank",
    "Disabled",
    "Given",
    "Missing",
    "SecretConfig",
    "SettingOutcome",
    "SiteConfigError",
    "load_secret_config",
    "load_site_settings",
]
