"""Shared fixtures: isolated storage, a fake HTTP session and a fake browser."""

from __future__ import annotations

from pathlib import Path

import pytest

from rosetta.catalog.fetcher import CatalogFetcher
from rosetta.config import RosettaConfig
from rosetta.orchestration.context import AppContext
from rosetta.store.cache import CatalogCache
from rosetta.store.settings import SettingsStore

from .fakes import CATALOG, FakeBrowser, FakeSession, category_page


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ROSETTA_DATA_DIR",
        "ROSETTA_API_URL",
        "ROSETTA_WIKI_URL",
        "ROSETTA_TIMEOUT",
        "ROSETTA_VERBOSITY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config(tmp_path: Path) -> RosettaConfig:
    return RosettaConfig({"storage": {"data_dir": str(tmp_path / "data")}})


@pytest.fixture
def settings_store(config: RosettaConfig) -> SettingsStore:
    return SettingsStore(config.storage.settings_path)


@pytest.fixture
def cache(config: RosettaConfig) -> CatalogCache:
    return CatalogCache(config.storage.cache_path)


@pytest.fixture
def browser() -> FakeBrowser:
    return FakeBrowser()


@pytest.fixture
def session() -> FakeSession:
    return FakeSession(category_page(CATALOG))


@pytest.fixture
def fetcher(
    config: RosettaConfig, cache: CatalogCache, session: FakeSession, browser: FakeBrowser
) -> CatalogFetcher:
    return CatalogFetcher(config.catalog, cache, session=session, opener=browser)


@pytest.fixture
def app_context(
    config: RosettaConfig, settings_store: SettingsStore, fetcher: CatalogFetcher
) -> AppContext:
    return AppContext(config=config, settings_store=settings_store, fetcher=fetcher)
