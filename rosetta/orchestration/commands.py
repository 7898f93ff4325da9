"""Command implementations. Each raises RosettaError subclasses on failure."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from rosetta.catalog.matcher import match
from rosetta.errors import MissingArgument
from rosetta.orchestration.context import AppContext
from rosetta.store.schema import UserSettings

logger = logging.getLogger(__name__)

Emit = Callable[[str], None]

NOT_SET = "(not set)"


def set_language(ctx: AppContext, language: str | None) -> UserSettings:
    if not language:
        raise MissingArgument("Please provide a language!")
    settings = UserSettings(language=language)
    ctx.settings_store.write_settings(settings)
    return settings


def reset_settings(ctx: AppContext) -> None:
    ctx.settings_store.delete_settings()


def describe_settings(ctx: AppContext) -> str:
    settings = ctx.settings_store.read_settings()
    return f"Search language: {settings.language or NOT_SET}"


def capitalize_first(text: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    return text[:1].upper() + text[1:]


def resolve_language(ctx: AppContext, flag_value: str | None) -> str:
    """The ``-l`` value wins over the stored preference; "" when neither is set."""
    if flag_value:
        return capitalize_first(flag_value)
    return ctx.settings_store.read_settings().language


def load_tasks(ctx: AppContext) -> list[str]:
    """Task list from the on-disk cache, else from the background fetch.

    A failed fetch surfaces here as NetworkError, and only on a cache miss.
    """
    tasks, found = ctx.fetcher.get_cache()
    if found:
        return tasks
    logger.debug("Task cache miss, waiting for the background fetch")
    return ctx.start_background_fetch().result()


@dataclass
class SearchOutcome:
    task: str | None = None
    url: str | None = None
    opened: bool = False


def run_search(
    ctx: AppContext,
    term: str | None,
    *,
    language: str | None = None,
    raw: bool = False,
    emit: Emit = print,
) -> SearchOutcome:
    tasks = load_tasks(ctx)

    if term is None:
        ctx.selector.print_options(tasks)
        return SearchOutcome()

    matches = match(tasks, term)
    ctx.selector.print_options(matches)

    target_language = resolve_language(ctx, language)
    task = ctx.selector.choose(matches)
    url = ctx.fetcher.build_url(task, target_language)
    logger.info("Selected %r for language %r", task, target_language)

    if raw:
        emit(url)
        return SearchOutcome(task=task, url=url)

    ctx.fetcher.open(url)
    return SearchOutcome(task=task, url=url, opened=True)
