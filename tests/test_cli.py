"""End-to-end tests for the rosetta CLI, driven through typer's CliRunner."""

from __future__ import annotations

import pytest
import requests
from rich.console import Console
from typer.testing import CliRunner

from rosetta import __version__
from rosetta.catalog.fetcher import CatalogFetcher
from rosetta.cli import NETWORK_FAILURE_MESSAGE, app
from rosetta.orchestration.context import AppContext
from rosetta.reporting.console import REJECTION_MESSAGE, OptionSelector
from rosetta.store.schema import UserSettings

from .fakes import FakeBrowser, FakeSession

runner = CliRunner()


def _plain_selector() -> OptionSelector:
    return OptionSelector(console=Console(highlight=False, soft_wrap=True, color_system=None))


@pytest.fixture
def ctx(app_context: AppContext) -> AppContext:
    app_context.selector = _plain_selector()
    return app_context


@pytest.fixture
def offline_ctx(config, settings_store, cache, browser: FakeBrowser) -> AppContext:
    fetcher = CatalogFetcher(
        config.catalog,
        cache,
        session=FakeSession(requests.ConnectionError("Name or service not known")),
        opener=browser,
    )
    return AppContext(
        config=config,
        settings_store=settings_store,
        fetcher=fetcher,
        selector=_plain_selector(),
    )


class TestVersion:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestLanguageCommand:
    def test_sets_language(self, ctx: AppContext) -> None:
        result = runner.invoke(app, ["language", "Go"], obj=ctx)
        assert result.exit_code == 0
        assert ctx.settings_store.read_settings() == UserSettings(language="Go")

    def test_missing_argument_exits_13(self, ctx: AppContext) -> None:
        result = runner.invoke(app, ["language"], obj=ctx)
        assert result.exit_code == 13
        assert "Please provide a language!" in result.output

    def test_works_offline(self, offline_ctx: AppContext) -> None:
        result = runner.invoke(app, ["language", "Rust"], obj=offline_ctx)
        assert result.exit_code == 0
        assert offline_ctx.settings_store.read_settings().language == "Rust"


class TestSettingsAndReset:
    def test_show_unset(self, ctx: AppContext) -> None:
        result = runner.invoke(app, ["settings"], obj=ctx)
        assert result.exit_code == 0
        assert "Search language: (not set)" in result.output

    def test_show_stored(self, ctx: AppContext) -> None:
        ctx.settings_store.write_settings(UserSettings(language="Go"))
        result = runner.invoke(app, ["settings"], obj=ctx)
        assert "Search language: Go" in result.output

    def test_reset(self, ctx: AppContext) -> None:
        ctx.settings_store.write_settings(UserSettings(language="Go"))
        result = runner.invoke(app, ["reset"], obj=ctx)
        assert result.exit_code == 0
        assert "Deleted settings!" in result.output
        assert ctx.settings_store.read_settings() == UserSettings()

    def test_reset_twice(self, ctx: AppContext) -> None:
        assert runner.invoke(app, ["reset"], obj=ctx).exit_code == 0
        assert runner.invoke(app, ["reset"], obj=ctx).exit_code == 0

    def test_corrupt_settings(self, ctx: AppContext) -> None:
        path = ctx.settings_store.path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("language: [oops\n")
        result = runner.invoke(app, ["settings"], obj=ctx)
        assert result.exit_code == 1


class TestSearchCommand:
    def test_lists_all_without_term(self, ctx: AppContext) -> None:
        result = runner.invoke(app, ["search"], obj=ctx)
        assert result.exit_code == 0
        assert "0) 100 doors" in result.output
        assert "2) Abundant numbers" in result.output

    def test_raw_prints_url(self, ctx: AppContext, browser: FakeBrowser) -> None:
        result = runner.invoke(app, ["search", "100", "-l", "go", "-r"], input="0\n", obj=ctx)
        assert result.exit_code == 0
        assert "0) 100 doors" in result.output
        assert "https://rosettacode.org/wiki/100_doors#Go" in result.output
        assert browser.opened == []

    def test_opens_browser_with_stored_language(
        self, ctx: AppContext, browser: FakeBrowser
    ) -> None:
        ctx.settings_store.write_settings(UserSettings(language="Python"))
        result = runner.invoke(app, ["search", "a"], input="0\n", obj=ctx)
        assert result.exit_code == 0
        assert browser.opened == ["https://rosettacode.org/wiki/A%2BB#Python"]

    def test_reprompts_on_invalid_index(self, ctx: AppContext) -> None:
        result = runner.invoke(app, ["search", "a", "-r"], input="5\n1\n", obj=ctx)
        assert result.exit_code == 0
        assert REJECTION_MESSAGE in result.output
        assert "https://rosettacode.org/wiki/Abundant_numbers" in result.output

    def test_no_matches_exits_1(self, ctx: AppContext) -> None:
        result = runner.invoke(app, ["search", "quine"], obj=ctx)
        assert result.exit_code == 1
        assert "Try again!" in result.output

    def test_cache_hit_survives_network_failure(self, offline_ctx: AppContext) -> None:
        offline_ctx.fetcher.cache_content(["Quine"])
        result = runner.invoke(app, ["search", "quine", "--raw"], input="0\n", obj=offline_ctx)
        assert result.exit_code == 0
        assert "https://rosettacode.org/wiki/Quine" in result.output

    def test_cache_miss_with_network_failure(self, offline_ctx: AppContext) -> None:
        result = runner.invoke(app, ["search", "100"], obj=offline_ctx)
        assert result.exit_code == 1
        assert NETWORK_FAILURE_MESSAGE in result.output

    def test_open_failed(self, ctx: AppContext) -> None:
        ctx.fetcher.opener = FakeBrowser(available=False)
        result = runner.invoke(app, ["search", "100"], input="0\n", obj=ctx)
        assert result.exit_code == 1

    def test_background_fetch_fills_cache(self, ctx: AppContext) -> None:
        result = runner.invoke(app, ["search"], obj=ctx)
        assert result.exit_code == 0
        assert ctx.background is not None
        ctx.background.result()
        assert ctx.fetcher.get_cache()[1] is True
