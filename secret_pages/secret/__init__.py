"""Hide a collection of documents behind deterministic, salted URL tokens.

Each document in the secret collection is published at
``<url_prefix><token>/`` where the token is derived from the document's
collection label and path, mixed with a salt read from the
``SECRET_POSTS_SALT`` environment variable. Rendered output gains a robots
``noindex`` directive, the documents are dropped from the sitemap, and the
prefix root redirects visitors elsewhere.

Exports
-------
- ``SecretPostsPlugin``: stage set registered with a ``BuildPipeline``.
- ``derive_token`` / ``token_for``: token derivation.
- ``is_secret_document``: membership predicate shared by every stage.
"""

from .documents import is_secret_document, secret_permalink, secret_url
from .landing import LandingPageBuilder, add_landing_page
from .listing import log_secret_urls
from .permalinks import apply_secret_permalink
from .plugin import SecretPostsPlugin
from .registrar import register_secret_collection
from .sanitizer import inject_noindex, with_noindex
from .tokens import derive_token, token_for

__all__ = [
    "LandingPageBuilder",
    "SecretPostsPlugin",
    "add_landing_page",
    "apply_secret_permalink",
    "derive_token",
    "inject_noindex",
    "is_secret_document",
    "log_secret_urls",
    "register_secret_collection",
    "secret_permalink",
    "secret_url",
    "token_for",
    "with_noindex",
]
