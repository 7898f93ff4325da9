"""AppContext: everything a command needs, built once when the CLI starts."""

from __future__ import annotations

from dataclasses import dataclass, field

from rosetta.catalog.fetcher import CatalogFetcher
from rosetta.config import RosettaConfig
from rosetta.orchestration.background import BackgroundFetch
from rosetta.reporting.console import OptionSelector
from rosetta.store.cache import CatalogCache
from rosetta.store.settings import SettingsStore


@dataclass
class AppContext:
    config: RosettaConfig
    settings_store: SettingsStore
    fetcher: CatalogFetcher
    selector: OptionSelector = field(default_factory=OptionSelector)
    background: BackgroundFetch | None = None

    @classmethod
    def from_config(cls, config: RosettaConfig) -> "AppContext":
        cache = CatalogCache(config.storage.cache_path)
        return cls(
            config=config,
            settings_store=SettingsStore(config.storage.settings_path),
            fetcher=CatalogFetcher(config.catalog, cache),
        )

    def start_background_fetch(self) -> BackgroundFetch:
        if self.background is None:
            self.background = BackgroundFetch(self.fetcher).start()
        return self.background
