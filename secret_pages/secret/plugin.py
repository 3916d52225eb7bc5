"""Bind the secret-posts stages to the build pipeline."""

from __future__ import annotations

import typing as typ

from secret_pages.config import SecretConfig, load_secret_config

from .landing import add_landing_page
from .listing import log_secret_urls
from .permalinks import apply_secret_permalink
from .registrar import register_secret_collection
from .sanitizer import inject_noindex

if typ.TYPE_CHECKING:
    from secret_pages.site.models import Document, Site


class SecretPostsPlugin:
    """Pipeline stage set that hides the secret collection behind tokens.

    The effective configuration is resolved from the site's settings at every
    phase; the salt comes from ``environ`` when given, else the process
    environment.
    """

    def __init__(self, environ: typ.Mapping[str, str] | None = None) -> None:
        self.environ = environ

    def config_for(self, site: Site) -> SecretConfig:
        return load_secret_config(site.config, self.environ)

    def on_site_init(self, site: Site) -> None:
        register_secret_collection(site.config, self.config_for(site))

    def on_document_init(self, document: Document, site: Site) -> None:
        apply_secret_permalink(document, self.config_for(site))

    def on_document_rendered(self, document: Document, site: Site) -> None:
        inject_noindex(document, self.config_for(site))

    def on_generate(self, site: Site) -> None:
        config = self.config_for(site)
        add_landing_page(site, config)
        if config.list_urls:
            log_secret_urls(site, config)


__all__ = ["SecretPostsPlugin"]
