from __future__ import annotations

# Holds the article page template for the lifetime of the process.
# Populated on first use; there is no TTL, a redeployed template needs a restart.

import logging
import os
from typing import Callable, Optional
from urllib.parse import urljoin, urlparse

import requests
from werkzeug.security import safe_join

from ..errors import AssetUnavailableError
from ..utils.meta_tags import missing_meta_tags

logger = logging.getLogger(__name__)

AssetFetcher = Callable[[str], str]


def http_asset_fetcher(timeout=(5, 10)) -> AssetFetcher:
    def fetch(url: str) -> str:
        try:
            r = requests.get(url, timeout=timeout)
        except requests.RequestException as e:
            raise AssetUnavailableError(f"Failed to fetch template {url}: {e}") from e
        if not r.ok:
            raise AssetUnavailableError(f"Failed to fetch template: {r.status_code} {r.reason}")
        r.encoding = "utf-8"
        return r.text
    return fetch


def static_asset_fetcher(static_folder: str) -> AssetFetcher:
    """Read the asset straight from a local folder instead of over HTTP."""
    def fetch(url: str) -> str:
        path = safe_join(static_folder, urlparse(url).path.lstrip("/"))
        if path is None or not os.path.isfile(path):
            raise AssetUnavailableError(f"Template asset not found: {url}")
        with open(path, encoding="utf-8") as f:
            return f.read()
    return fetch


class TemplateCache:
    def __init__(self, fetch: AssetFetcher, path: str = "/article.html", base_url: str = ""):
        self._fetch = fetch
        # fixed at startup from configuration; the request never picks the source
        self.url = urljoin(base_url, path) if base_url else path
        self._html: Optional[str] = None

    @property
    def is_cached(self) -> bool:
        return self._html is not None

    def get_template(self) -> str:
        """Return the template, fetching it from the asset layer on first use.

        Concurrent cold calls may each fetch; every writer stores the same
        text, so no lock is taken. A failed fetch leaves the cache empty.
        """
        if self._html is not None:
            return self._html
        url = self.url
        html = self._fetch(url)
        missing = missing_meta_tags(html)
        if missing:
            logger.warning("Article template %s is missing placeholder tags: %s", url, ", ".join(missing))
        self._html = html
        logger.info("Cached article template from %s (%d chars)", url, len(html))
        return html

    def clear(self) -> None:
        self._html = None


def init_template_cache(app):
    path = app.config.get("TEMPLATE_PATH", "/article.html")
    if app.config.get("TEMPLATE_SOURCE", "static") == "static":
        cache = TemplateCache(static_asset_fetcher(app.static_folder), path=path)
    else:
        cache = TemplateCache(
            http_asset_fetcher(app.config.get("ASSET_TIMEOUT", (5, 10))),
            path=path,
            base_url=app.config["ASSET_BASE_URL"],
        )
    app.extensions["template_cache"] = cache
    return cache
