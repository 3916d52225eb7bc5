"""Unit tests for stage registration and dispatch order."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from secret_pages.pipeline import BuildPipeline
from secret_pages.secret import SecretPostsPlugin
from secret_pages.site import Document, Site, SiteBuilder


class _Recorder:
    """Stage that records every phase it observes."""

    def __init__(self, calls: list[str], name: str) -> None:
        self.calls = calls
        self.name = name

    def on_site_init(self, site: Site) -> None:
        self.calls.append(f"{self.name}:site_init")

    def on_document_init(self, document: Document, site: Site) -> None:
        self.calls.append(f"{self.name}:document_init:{document.relative_path}")

    def on_document_rendered(self, document: Document, site: Site) -> None:
        self.calls.append(f"{self.name}:document_rendered:{document.relative_path}")

    def on_generate(self, site: Site) -> None:
        self.calls.append(f"{self.name}:generate")


class _GenerateOnly:
    def __init__(self) -> None:
        self.seen: list[Site] = []

    def on_generate(self, site: Site) -> None:
        self.seen.append(site)


def test_plugin_registers_for_every_phase() -> None:
    pipeline = BuildPipeline([SecretPostsPlugin()])
    assert len(pipeline.site_init_stages) == 1
    assert len(pipeline.document_init_stages) == 1
    assert len(pipeline.document_rendered_stages) == 1
    assert len(pipeline.generate_stages) == 1


def test_partial_stage_registers_for_its_phase_only() -> None:
    stage = _GenerateOnly()
    pipeline = BuildPipeline([stage])
    assert pipeline.generate_stages == [stage]
    assert pipeline.site_init_stages == []


def test_register_rejects_non_stage() -> None:
    with pytest.raises(TypeError, match="implements no build stage"):
        BuildPipeline([object()])


def test_stages_run_in_registration_order() -> None:
    calls: list[str] = []
    pipeline = BuildPipeline([_Recorder(calls, "a"), _Recorder(calls, "b")])
    site = Site(source=Path("/site"), destination=Path("/site/_site"))
    doc = Document(path=Path("/site/_x/d.md"), collection="x", relative_path="_x/d.md")

    pipeline.site_init(site)
    pipeline.document_init(doc, site)
    pipeline.document_rendered(doc, site)
    pipeline.generate(site)

    assert calls == [
        "a:site_init",
        "b:site_init",
        "a:document_init:_x/d.md",
        "b:document_init:_x/d.md",
        "a:document_rendered:_x/d.md",
        "b:document_rendered:_x/d.md",
        "a:generate",
        "b:generate",
    ]


def test_builder_phase_order(tmp_path: Path) -> None:
    """The builder runs every per-document phase before generation."""

    calls: list[str] = []
    notes = tmp_path / "_notes"
    notes.mkdir()
    for name in ("a.md", "b.md"):
        (notes / name).write_text("Body\n", encoding="utf-8")
    settings: dict[str, typ.Any] = {"collections": {"notes": {"output": True}}}
    builder = SiteBuilder(
        tmp_path,
        pipeline=BuildPipeline([_Recorder(calls, "r")]),
        settings=settings,
    )
    builder.process()

    assert calls == [
        "r:site_init",
        "r:document_init:_notes/a.md",
        "r:document_init:_notes/b.md",
        "r:document_rendered:_notes/a.md",
        "r:document_rendered:_notes/b.md",
        "r:generate",
    ]
