"""Rosetta configuration.

Settings are loaded in this priority order (highest wins):
  1. Environment variables  (ROSETTA_*)
  2. rosetta.toml in the current working directory
  3. ~/.config/rosetta/rosetta.toml
  4. Built-in defaults

Example rosetta.toml:
  [catalog]
  api_url  = "https://rosettacode.org/w/api.php"
  wiki_url = "https://rosettacode.org/wiki"
  category = "Programming_Tasks"
  timeout  = 15

  [storage]
  data_dir = "~/.rosetta"

  [output]
  verbosity = 1  # 0=quiet  1=normal  2=verbose  3=debug
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any


_CONFIG_SEARCH_PATHS: list[Path] = [
    Path("rosetta.toml"),
    Path.home() / ".config" / "rosetta" / "rosetta.toml",
]


def _load_toml_full(search_paths: list[Path] | None = None) -> dict[str, Any]:
    """Return the first parsed config file found, or {} if there is none."""
    for path in search_paths if search_paths is not None else _CONFIG_SEARCH_PATHS:
        if path.exists():
            with path.open("rb") as f:
                return tomllib.load(f)
    return {}


_CATALOG_DEFAULTS: dict[str, str] = {
    "api_url":  "https://rosettacode.org/w/api.php",
    "wiki_url": "https://rosettacode.org/wiki",
    "category": "Programming_Tasks",
    "timeout":  "15",
}

_DEFAULT_DATA_DIR = Path.home() / ".rosetta"


class CatalogConfig:
    """Resolved remote catalog configuration."""

    def __init__(self, raw: dict[str, Any]) -> None:
        cat = {k: str(v) for k, v in raw.get("catalog", {}).items()}

        self.api_url: str = (
            os.environ.get("ROSETTA_API_URL")
            or cat.get("api_url")
            or _CATALOG_DEFAULTS["api_url"]
        )
        self.wiki_url: str = (
            os.environ.get("ROSETTA_WIKI_URL")
            or cat.get("wiki_url")
            or _CATALOG_DEFAULTS["wiki_url"]
        ).rstrip("/")
        self.category: str = cat.get("category") or _CATALOG_DEFAULTS["category"]
        self.timeout: float = float(
            os.environ.get("ROSETTA_TIMEOUT")
            or cat.get("timeout")
            or _CATALOG_DEFAULTS["timeout"]
        )


class StorageConfig:
    """Resolved on-disk locations for settings, cache and logs."""

    def __init__(self, raw: dict[str, Any]) -> None:
        storage = raw.get("storage", {})
        data_dir = os.environ.get("ROSETTA_DATA_DIR") or storage.get("data_dir")
        self.data_dir: Path = Path(data_dir).expanduser() if data_dir else _DEFAULT_DATA_DIR

    @property
    def settings_path(self) -> Path:
        return self.data_dir / "settings.yaml"

    @property
    def cache_path(self) -> Path:
        return self.data_dir / "tasks.json"

    @property
    def log_path(self) -> Path:
        return self.data_dir / "rosetta.log"


class OutputConfig:
    """Resolved output / verbosity configuration."""

    def __init__(self, raw: dict[str, Any]) -> None:
        out = raw.get("output", {})
        self.verbosity: int = int(
            os.environ.get("ROSETTA_VERBOSITY") or out.get("verbosity", 1)
        )


class RosettaConfig:
    """All configuration sections, resolved once per process."""

    def __init__(self, raw: dict[str, Any] | None = None) -> None:
        raw = _load_toml_full() if raw is None else raw
        self.catalog = CatalogConfig(raw)
        self.storage = StorageConfig(raw)
        self.output = OutputConfig(raw)


def load_config(search_paths: list[Path] | None = None) -> RosettaConfig:
    return RosettaConfig(_load_toml_full(search_paths))
