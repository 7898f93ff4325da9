"""BackgroundFetch: the live catalog download running beside the CLI.

The fetch starts before any command runs. Its outcome lands in a
``concurrent.futures.Future``: the search command waits on it only when the
on-disk cache misses, every other path simply drops it. The worker is a
daemon thread, so an unread result never holds the process open.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future

from rosetta.catalog.fetcher import CatalogFetcher
from rosetta.errors import NetworkError

logger = logging.getLogger(__name__)


class BackgroundFetch:
    def __init__(self, fetcher: CatalogFetcher) -> None:
        self.fetcher = fetcher
        self.future: Future[list[str]] = Future()
        self._thread: threading.Thread | None = None

    def start(self) -> "BackgroundFetch":
        if self._thread is not None:
            return self
        self.future.set_running_or_notify_cancel()
        self._thread = threading.Thread(
            target=self._run, name="rosetta-fetch", daemon=True
        )
        self._thread.start()
        return self

    def _run(self) -> None:
        try:
            tasks = self.fetcher.fetch_live()
        except NetworkError as exc:
            logger.info("Background fetch failed: %s", exc)
            self.future.set_exception(exc)
            return
        except Exception as exc:
            logger.exception("Background fetch crashed")
            self.future.set_exception(NetworkError(str(exc)))
            return

        try:
            self.fetcher.cache_content(tasks)
        except OSError:
            logger.warning("Could not write the task cache", exc_info=True)
        self.future.set_result(tasks)

    def result(self) -> list[str]:
        """Block until the fetch finishes; re-raises its NetworkError."""
        if self._thread is None:
            self.start()
        return self.future.result()

    def done(self) -> bool:
        return self.future.done()
