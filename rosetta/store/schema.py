"""Pydantic models for the records Rosetta keeps on disk."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class UserSettings(BaseModel):
    """User preferences. An empty ``language`` means "not configured"."""

    language: str = ""


class TaskCatalog(BaseModel):
    """Cached copy of the remote task list."""

    tasks: list[str] = Field(default_factory=list)
    fetched_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    source: str = ""  # API endpoint the list came from
