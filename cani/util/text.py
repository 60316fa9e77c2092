"""Text utility helpers."""

from __future__ import annotations

from rich.text import Text

from ..constants import COLUMN_SEPARATOR


def truncate(value: str, width: int, suffix: str = "..") -> str:
    """Cut a string to width characters, marking the cut with suffix."""
    if len(value) <= width:
        return value
    return f"{value[:width].strip()}{suffix}"


def strip_ansi(value: str) -> str:
    """Drop terminal escape codes from a line."""
    return Text.from_ansi(value).plain


def split_cells(line: str) -> list[str]:
    """Split a rendered row back into its non-empty cells."""
    plain = strip_ansi(line).replace('\\"', '"')
    return [cell.strip() for cell in plain.split(COLUMN_SEPARATOR) if cell.strip()]
