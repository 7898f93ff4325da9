"""Rosetta: find Rosetta Code task pages from the terminal."""

__version__ = "0.1.0"
