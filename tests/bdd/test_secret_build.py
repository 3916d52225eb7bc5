"""Behaviour tests for building a site with secret documents.

These scenarios build a temporary site through the full pipeline with the
secret-posts stages registered and assert on the resulting output tree: the
token directory layout, the absence of the secret source directory, the
``noindex`` directive, and the landing page redirect.

Usage:
    Run these behaviour tests with pytest, for example:

        pytest tests/bdd/test_secret_build.py -v

Prerequisites:
    - The test dependencies (pytest-bdd and BeautifulSoup) installed via
      ``pip install -e '.[test]'``.
    - Access to ``features/secret_build.feature`` within this repository.
"""

from __future__ import annotations

import re
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from secret_pages._constants import NOINDEX_META
from secret_pages.pipeline import BuildPipeline
from secret_pages.secret import SecretPostsPlugin, derive_token
from secret_pages.site import SiteBuilder

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "secret_build.feature"
)
scenarios(FEATURE_FILE)

SALT = "bdd-salt"
POST_PATH = "_secret/launch-plan.md"


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a site with one secret post and a salt")
def given_secret_site(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write a site source tree holding a single secret post."""
    source = tmp_path / "site"
    (source / "_secret").mkdir(parents=True)
    (source / POST_PATH).write_text(
        "---\ntitle: Launch plan\n---\nNot yet public.\n", encoding="utf-8"
    )
    scenario_state["source"] = source
    scenario_state["settings"] = {"secret_posts": {"index_layout": None}}


@given(parsers.parse('the site base path is "{baseurl}"'))
def given_baseurl(baseurl: str, scenario_state: dict[str, object]) -> None:
    """Set the site's ``baseurl`` setting."""
    settings = scenario_state["settings"]
    assert isinstance(settings, dict)
    settings["baseurl"] = baseurl


@when("I build the site")
def when_build(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Run the full build with the secret-posts stages registered."""
    source = scenario_state["source"]
    settings = scenario_state["settings"]
    assert isinstance(source, Path)
    assert isinstance(settings, dict)
    destination = tmp_path / "_site"
    pipeline = BuildPipeline([SecretPostsPlugin({"SECRET_POSTS_SALT": SALT})])
    SiteBuilder(
        source, destination=destination, pipeline=pipeline, settings=settings
    ).process()
    scenario_state["destination"] = destination


def _destination(scenario_state: dict[str, object]) -> Path:
    destination = scenario_state["destination"]
    assert isinstance(destination, Path)
    return destination


@then("the post is written under a 32 character token directory")
def then_token_directory(scenario_state: dict[str, object]) -> None:
    prefix_dir = _destination(scenario_state) / "s"
    token_dirs = [child.name for child in prefix_dir.iterdir() if child.is_dir()]
    assert token_dirs == [derive_token("secret", POST_PATH, salt=SALT)]
    assert re.fullmatch(r"[0-9a-f]{32}", token_dirs[0])
    assert (prefix_dir / token_dirs[0] / "index.html").is_file()
    assert (prefix_dir / "index.html").is_file()


@then("no output directory is named after the secret source directory")
def then_no_source_directory(scenario_state: dict[str, object]) -> None:
    destination = _destination(scenario_state)
    leaked = list(destination.rglob("_secret"))
    assert leaked == [], f"expected no '_secret' entries, found {leaked!r}"


@then("the secret post is marked noindex")
def then_noindex(scenario_state: dict[str, object]) -> None:
    token = derive_token("secret", POST_PATH, salt=SALT)
    page = _destination(scenario_state) / "s" / token / "index.html"
    html = page.read_text(encoding="utf-8")
    assert html.startswith(NOINDEX_META), "expected the directive at the start"


@then(parsers.parse('the prefix landing page redirects to "{target}"'))
def then_landing_redirect(target: str, scenario_state: dict[str, object]) -> None:
    landing = _destination(scenario_state) / "s" / "index.html"
    soup = BeautifulSoup(landing.read_text(encoding="utf-8"), "html.parser")
    refresh = soup.select_one("meta[http-equiv='refresh']")
    assert refresh is not None, "expected a meta refresh on the landing page"
    assert refresh.get("content") == f"0;url={target}"
    link = soup.select_one("a")
    assert link is not None
    assert link.get("href") == target
