"""Exception hierarchy for mystcomplete.

Completion itself never raises for malformed document text. These errors
cover the surfaces that take user input: configuration files, snippet
builders and the external image probe.
"""

from __future__ import annotations

from pathlib import Path


class MystCompleteError(Exception):
    """Base class for all mystcomplete errors."""


class ConfigError(MystCompleteError):
    """Raised when a configuration file cannot be read or validated."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Invalid configuration in '{path}': {message}")


class ImageProbeError(MystCompleteError):
    """Raised when the dimensions of an image cannot be determined."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot probe image '{path}': {message}")


class SnippetError(MystCompleteError):
    """Raised when a snippet builder receives an unsupported choice."""
