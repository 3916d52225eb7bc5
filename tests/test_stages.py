"""Unit tests for the per-phase secret-posts stages.

Covers collection registration at site initialization, permalink rewriting
after document construction, and ``noindex`` injection after rendering. Each
stage receives an explicitly resolved :class:`SecretConfig`.
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

import pytest

from secret_pages._constants import NOINDEX_META
from secret_pages.config import load_secret_config
from secret_pages.secret import (
    apply_secret_permalink,
    derive_token,
    inject_noindex,
    is_secret_document,
    register_secret_collection,
)
from secret_pages.site import Document

if typ.TYPE_CHECKING:
    from secret_pages.config import SecretConfig


@pytest.fixture
def config() -> SecretConfig:
    """Return a config with a fixed salt and default settings."""
    return load_secret_config({}, {"SECRET_POSTS_SALT": "test-salt"})


def _document(
    label: str | None = "secret",
    relative_path: str | None = "_secret/my-post.md",
    output: str | None = None,
) -> Document:
    return Document(
        path=Path("/site") / (relative_path or "unknown.md"),
        collection=label,
        relative_path=relative_path,
        output=output,
    )


def test_is_secret_document_matches_label(config: SecretConfig) -> None:
    assert is_secret_document("secret", config)
    assert not is_secret_document("posts", config)
    assert not is_secret_document(None, config)


def test_register_adds_collection(config: SecretConfig) -> None:
    """A missing secret collection is registered with output enabled."""
    settings: dict[str, typ.Any] = {"collections": {}}
    assert register_secret_collection(settings, config) is True
    assert settings["collections"]["secret"] == {"output": True, "source": "_secret"}


def test_register_creates_registry(config: SecretConfig) -> None:
    """A site without a ``collections`` mapping gains one."""
    settings: dict[str, typ.Any] = {}
    register_secret_collection(settings, config)
    assert "secret" in settings["collections"]


def test_register_keeps_existing_collection(config: SecretConfig) -> None:
    """Operator-declared collections are never overwritten."""
    settings: dict[str, typ.Any] = {
        "collections": {"secret": {"existing": True}},
        "exclude": ["_secret"],
    }
    assert register_secret_collection(settings, config) is False
    assert settings["collections"]["secret"] == {"existing": True}
    assert settings["exclude"] == ["_secret"]


def test_register_removes_source_from_exclude(config: SecretConfig) -> None:
    """Literal exclude entries for the source directory are dropped."""
    settings: dict[str, typ.Any] = {"exclude": ["_secret", "node_modules", "_secret/"]}
    register_secret_collection(settings, config)
    assert settings["exclude"] == ["node_modules", "_secret/"]


def test_permalink_assigned_to_secret_document(config: SecretConfig) -> None:
    """Secret documents move to ``/s/<token>/`` and leave the sitemap."""
    doc = _document()
    assert apply_secret_permalink(doc, config) is True
    token = derive_token("secret", "_secret/my-post.md", salt="test-salt")
    assert doc.data["permalink"] == f"/s/{token}/"
    assert re.fullmatch(r"/s/[0-9a-f]{32}/", doc.url)
    assert doc.data["sitemap"] is False


def test_permalink_is_idempotent(config: SecretConfig) -> None:
    """Rewriting twice yields the same permalink."""
    doc = _document()
    apply_secret_permalink(doc, config)
    first = doc.data["permalink"]
    apply_secret_permalink(doc, config)
    assert doc.data["permalink"] == first


def test_permalink_ignores_other_collections(config: SecretConfig) -> None:
    doc = _document(label="posts", relative_path="_posts/hello.md")
    assert apply_secret_permalink(doc, config) is False
    assert doc.data == {}


def test_permalink_handles_absent_relative_path(config: SecretConfig) -> None:
    doc = _document(relative_path=None)
    apply_secret_permalink(doc, config)
    assert re.fullmatch(r"/s/[0-9a-f]{32}/", doc.data["permalink"])


def test_permalink_uses_custom_prefix() -> None:
    config = load_secret_config(
        {"secret_posts": {"url_prefix": "/hidden"}}, {"SECRET_POSTS_SALT": "x"}
    )
    doc = _document()
    apply_secret_permalink(doc, config)
    assert doc.data["permalink"].startswith("/hidden/")


def test_noindex_inserted_after_head(config: SecretConfig) -> None:
    """The directive follows the opening ``<head>`` tag."""
    doc = _document(output="<html><head></head><body>Hi</body></html>")
    assert inject_noindex(doc, config) is True
    assert doc.output == (
        f"<html><head>\n  {NOINDEX_META}</head><body>Hi</body></html>"
    )


def test_noindex_prepended_without_head(config: SecretConfig) -> None:
    """Without ``<head>`` the directive starts the output."""
    doc = _document(output="<html><body>Hi</body></html>")
    inject_noindex(doc, config)
    assert doc.output.startswith(NOINDEX_META)
    assert doc.output.count(NOINDEX_META) == 1


def test_noindex_only_first_head(config: SecretConfig) -> None:
    doc = _document(output="<head></head><pre><head></pre>")
    inject_noindex(doc, config)
    assert doc.output.count(NOINDEX_META) == 1


@pytest.mark.parametrize("output", [None, ""])
def test_noindex_skips_empty_output(config: SecretConfig, output: str | None) -> None:
    doc = _document(output=output)
    assert inject_noindex(doc, config) is False
    assert doc.output == output


def test_noindex_skips_other_collections(config: SecretConfig) -> None:
    doc = _document(label="posts", output="<head></head>")
    inject_noindex(doc, config)
    assert doc.output == "<head></head>"
