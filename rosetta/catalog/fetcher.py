"""CatalogFetcher: the Rosetta Code task list and page URLs.

The live list comes from the MediaWiki ``categorymembers`` query; results
are paged, so the fetcher follows ``continue`` tokens until the API stops
returning them.
"""

from __future__ import annotations

import logging
import webbrowser
from collections.abc import Callable
from typing import Any
from urllib.parse import quote

import requests

from rosetta import __version__
from rosetta.config import CatalogConfig
from rosetta.errors import NetworkError, OpenFailed
from rosetta.store.cache import CatalogCache

logger = logging.getLogger(__name__)

_UA = f"rosetta-cli/{__version__}"

# MediaWiki caps categorymembers at 500 per request for normal clients.
_PAGE_LIMIT = 500


def _title_to_path(title: str) -> str:
    # MediaWiki titles use underscores in URLs
    return quote(title.replace(" ", "_"), safe="/:()'!,*")


def build_url(wiki_url: str, task: str, language: str) -> str:
    """Page address for ``task``, anchored at ``language`` when one is given."""
    url = f"{wiki_url.rstrip('/')}/{_title_to_path(task)}"
    if language:
        url += "#" + quote(language.replace(" ", "_"), safe="+#")
    return url


class CatalogFetcher:
    def __init__(
        self,
        config: CatalogConfig,
        cache: CatalogCache,
        *,
        session: requests.Session | None = None,
        opener: Callable[[str], bool] = webbrowser.open,
    ) -> None:
        self.config = config
        self.cache = cache
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({
            "User-Agent": _UA,
            "Accept": "application/json",
        })
        self.opener = opener

    # ------------------------------------------------------------------
    # Cache
    # ------------------------------------------------------------------

    def get_cache(self) -> tuple[list[str], bool]:
        return self.cache.get_cache()

    def cache_content(self, tasks: list[str]) -> None:
        self.cache.cache_content(tasks, source=self.config.api_url)

    # ------------------------------------------------------------------
    # Network
    # ------------------------------------------------------------------

    def fetch_live(self) -> list[str]:
        """Download every task name in the configured category.

        Raises NetworkError on any connection, HTTP or payload failure.
        """
        params: dict[str, Any] = {
            "action": "query",
            "list": "categorymembers",
            "cmtitle": f"Category:{self.config.category}",
            "cmlimit": _PAGE_LIMIT,
            "cmtype": "page",
            "format": "json",
        }
        tasks: list[str] = []
        while True:
            data = self._get_json(params)
            members = data.get("query", {}).get("categorymembers", []) or []
            tasks.extend(m["title"] for m in members if m.get("title"))
            cont = data.get("continue")
            if not cont:
                break
            params = {**params, **cont}
        logger.info("Fetched %d tasks from %s", len(tasks), self.config.api_url)
        return tasks

    def _get_json(self, params: dict[str, Any]) -> dict[str, Any]:
        try:
            r = self.session.get(self.config.api_url, params=params, timeout=self.config.timeout)
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as exc:
            raise NetworkError(f"Request to {self.config.api_url} failed: {exc}") from exc
        except ValueError as exc:
            raise NetworkError(f"Malformed response from {self.config.api_url}: {exc}") from exc
        if not isinstance(data, dict):
            raise NetworkError(f"Unexpected response from {self.config.api_url}")
        if "error" in data:
            err = data["error"]
            info = err.get("info", err) if isinstance(err, dict) else err
            raise NetworkError(f"API error from {self.config.api_url}: {info}")
        return data

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def build_url(self, task: str, language: str) -> str:
        return build_url(self.config.wiki_url, task, language)

    def open(self, url: str) -> None:
        """Hand ``url`` to the platform browser; OpenFailed if nothing took it."""
        try:
            opened = self.opener(url)
        except webbrowser.Error as exc:
            raise OpenFailed(f"Could not open {url}: {exc}") from exc
        if not opened:
            raise OpenFailed(f"No browser available to open {url}")
        logger.debug("Opened %s", url)
