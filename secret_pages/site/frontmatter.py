r"""Split YAML front matter from document bodies.

Example
-------
>>> from secret_pages.site.frontmatter import split_front_matter
>>> split_front_matter("---\ntitle: Secret\n---\nBody\n")
({'title': 'Secret'}, 'Body\n')
>>> split_front_matter("Plain body")
(None, 'Plain body')
"""

from __future__ import annotations

import re
import typing as typ

from ruamel.yaml import YAML

from .errors import FrontMatterError

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)


def split_front_matter(text: str) -> tuple[dict[str, typ.Any] | None, str]:
    """Return the parsed front matter (or ``None``) and the remaining body.

    Raises
    ------
    FrontMatterError
        If the fenced block parses to something other than a mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return None, text

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    loaded = loader.load(match.group(1)) or {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a YAML mapping."
        raise FrontMatterError(msg)
    return dict(loaded), text[match.end() :]


__all__ = ["FRONT_MATTER_PATTERN", "split_front_matter"]
