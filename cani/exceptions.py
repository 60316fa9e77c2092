"""Exception types for pycani."""

from __future__ import annotations

from pathlib import Path


class CaniError(Exception):
    """Base exception for expected application errors."""


class DatasetError(CaniError):
    """Raised when the support dataset cannot be read."""

    def __init__(self, path: Path, *, cause: str | None = None) -> None:
        self.path = path
        detail = f"Unable to load support data from {path}"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


class ConfigError(CaniError):
    """Raised when the config file exists but cannot be decoded."""

    def __init__(self, path: Path, *, cause: str | None = None) -> None:
        self.path = path
        detail = f"Invalid config file {path}"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


class SelectorError(CaniError):
    """Raised when the picker process fails unexpectedly."""

    def __init__(self, command: str, returncode: int) -> None:
        self.returncode = returncode
        super().__init__(f"{command} exited with status {returncode}")
