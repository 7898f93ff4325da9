"""Exception hierarchy shared by the Rosetta modules.

Library code raises these; only ``rosetta.cli`` turns them into exit codes.
"""

from __future__ import annotations


class RosettaError(Exception):
    """Base class for all Rosetta errors."""

    exit_code: int = 1


class NetworkError(RosettaError):
    """The task catalog could not be retrieved from the remote wiki."""


class NoMatches(RosettaError):
    """The search term matched no task (or the catalog is empty)."""


class MissingArgument(RosettaError):
    """A command was invoked without a required argument."""

    exit_code = 13


class InvalidSelection(RosettaError):
    """The selected index is outside the printed option list."""


class OpenFailed(RosettaError):
    """No platform handler accepted the URL."""


class SettingsError(RosettaError):
    """The persisted settings file exists but cannot be parsed."""
