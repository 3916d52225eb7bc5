"""Load the site settings YAML into a mutable settings mapping."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from secret_pages._constants import SETTINGS_FILENAME

from .models import SiteConfigError


def load_site_settings(
    source: Path, filename: str = SETTINGS_FILENAME
) -> dict[str, typ.Any]:
    """Load ``_config.yml`` from the site source directory.

    Parameters
    ----------
    source : Path
        Site source directory.
    filename : str, optional
        Settings filename relative to ``source``.

    Returns
    -------
    dict[str, Any]
        Parsed settings. A missing or empty file yields an empty mapping so
        every downstream default applies.

    Raises
    ------
    SiteConfigError
        If the top-level YAML structure is not a mapping.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.
    """
    path = source / filename
    if not path.exists():
        return {}

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise SiteConfigError(msg)
    return dict(loaded)


__all__ = ["load_site_settings"]
