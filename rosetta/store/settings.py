"""SettingsStore: the single user preference, kept as a small YAML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from rosetta.errors import SettingsError
from rosetta.store.schema import UserSettings

logger = logging.getLogger(__name__)

yaml = YAML()
yaml.default_flow_style = False


class SettingsStore:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def read_settings(self) -> UserSettings:
        """Return the stored settings, or the defaults when nothing is stored."""
        if not self.path.exists():
            return UserSettings()
        try:
            with self.path.open(encoding="utf-8") as f:
                data = yaml.load(f)
        except YAMLError as exc:
            raise SettingsError(f"Cannot parse settings file {self.path}: {exc}") from exc
        if data is None:
            return UserSettings()
        try:
            return UserSettings.model_validate(dict(data))
        except (TypeError, ValueError, ValidationError) as exc:
            raise SettingsError(f"Invalid settings in {self.path}: {exc}") from exc

    def write_settings(self, settings: UserSettings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".yaml.tmp")
        with tmp.open("w", encoding="utf-8") as f:
            yaml.dump(settings.model_dump(), f)
        os.replace(tmp, self.path)
        logger.debug("Wrote settings to %s", self.path)

    def delete_settings(self) -> None:
        """Remove the settings file. Deleting twice is fine."""
        self.path.unlink(missing_ok=True)
        logger.debug("Deleted settings at %s", self.path)
