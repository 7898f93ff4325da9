"""CatalogCache: the last fetched task list, stored as JSON."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from rosetta.store.schema import TaskCatalog

logger = logging.getLogger(__name__)


class CatalogCache:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def get_cache(self) -> tuple[list[str], bool]:
        """Return ``(tasks, True)`` on a hit and ``([], False)`` otherwise.

        An unreadable cache file counts as a miss; the next successful
        fetch overwrites it.
        """
        if not self.path.exists():
            return [], False
        try:
            with self.path.open(encoding="utf-8") as f:
                catalog = TaskCatalog.model_validate(json.load(f))
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning("Ignoring unreadable task cache %s: %s", self.path, exc)
            return [], False
        logger.debug(
            "Task cache hit: %d tasks fetched at %s", len(catalog.tasks), catalog.fetched_at
        )
        return list(catalog.tasks), True

    def cache_content(self, tasks: list[str], source: str = "") -> None:
        catalog = TaskCatalog(tasks=list(tasks), source=source)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".json.tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(catalog.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
        os.replace(tmp, self.path)
        logger.debug("Cached %d tasks in %s", len(tasks), self.path)
