"""Utility helpers shared by the secret-posts configuration resolver."""

from __future__ import annotations

import typing as typ

from .models import Blank, Disabled, Given, Missing, SettingOutcome


def _classify_setting(section: typ.Mapping[str, typ.Any], key: str) -> SettingOutcome:
    """Return the tagged outcome for ``key`` within a settings mapping."""
    if key not in section:
        return Missing()
    match section[key]:
        case None | False:
            return Disabled()
        case value if not str(value).strip():
            return Blank()
        case value:
            return Given(value)


def _settings_section(
    settings: typ.Mapping[str, typ.Any], name: str
) -> typ.Mapping[str, typ.Any]:
    """Return the named sub-section, or an empty mapping when unusable."""
    section = settings.get(name)
    if isinstance(section, typ.Mapping):
        return section
    return {}


def _with_trailing_slash(value: str) -> str:
    """Return ``value`` guaranteed to end with a single ``/`` suffix."""
    return value if value.endswith("/") else f"{value}/"


__all__ = ["_classify_setting", "_settings_section", "_with_trailing_slash"]
