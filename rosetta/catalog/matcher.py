"""Case-insensitive substring filter over task names."""

from __future__ import annotations

from collections.abc import Iterable


def match(items: Iterable[str], term: str) -> list[str]:
    """Return the items containing ``term`` (ignoring case), in their original order.

    An empty term matches every item.
    """
    needle = term.lower()
    return [item for item in items if needle in item.lower()]
