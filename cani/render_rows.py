"""Row rendering for picker views."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from rich.color import ColorSystem
from rich.style import Style

from .constants import COLUMN_SEPARATOR, SUPPORT_SYMBOLS, SUPPORT_TYPES, TITLE_WIDTH
from .model import Browser, Feature, FeatureSummary
from .util.text import truncate

Row = Sequence[str]


def paint(text: str, color: str) -> str:
    """Wrap text in standard ANSI color codes."""
    return Style(color=color).render(text, color_system=ColorSystem.STANDARD)


def _column_color(colors: Sequence[str], index: int) -> str:
    if not colors:
        return "default"
    if index < len(colors):
        return colors[index]
    return colors[-1]


def column_widths(rows: Sequence[Row]) -> list[int]:
    widths: list[int] = []
    for row in rows:
        for index, cell in enumerate(row):
            if index >= len(widths):
                widths.append(0)
            widths[index] = max(widths[index], len(str(cell)))
    return widths


def format_rows(
    rows: Sequence[Row], *, colors: Sequence[str] = (), colorize: bool = False
) -> list[str]:
    """Align rows into columns, optionally painting each column."""
    widths = column_widths(rows)
    lines: list[str] = []
    for row in rows:
        cells = [str(cell).ljust(widths[index]) for index, cell in enumerate(row)]
        if not colorize:
            lines.append(COLUMN_SEPARATOR.join(cells).rstrip())
            continue

        if cells:
            cells[-1] = cells[-1].rstrip()
        painted = [
            paint(cell, _column_color(colors, index)).replace('"', '\\"')
            for index, cell in enumerate(cells)
        ]
        lines.append(COLUMN_SEPARATOR.join(painted).rstrip())
    return lines


def status_label(status: str, statuses: Mapping[str, str]) -> str:
    return statuses.get(status, status)


def use_row(
    feature: Feature, statuses: Mapping[str, str], support_cells: Sequence[str] = ()
) -> list[str]:
    """Row layout for the feature list view."""
    percent = f"{feature.percent:.2f}%".rjust(6)
    title = truncate(feature.title, TITLE_WIDTH).ljust(TITLE_WIDTH)
    return [f"[{status_label(feature.status, statuses)}]", percent, title, *support_cells]


def show_rows(
    features_by_support: Mapping[str, Sequence[FeatureSummary]], statuses: Mapping[str, str]
) -> list[list[str]]:
    """Row layout for one browser version, grouped in fixed support order."""
    rows: list[list[str]] = []
    for code, _name in SUPPORT_TYPES:
        for summary in features_by_support.get(code, ()):
            rows.append(
                [
                    f"[{status_label(summary.status, statuses)}]",
                    f"[{SUPPORT_SYMBOLS[code]}]",
                    summary.title,
                ]
            )
    return rows


def browser_rows(browsers: Sequence[Browser]) -> list[list[str]]:
    return [[browser.title, f"usage: {browser.total_usage:.4f}%"] for browser in browsers]


def version_rows(browser: Browser) -> list[list[str]]:
    """Versions of a browser, last declared first."""
    return [
        [version, f"usage: {browser.usage[version]:.4f}%"] for version in reversed(browser.versions)
    ]
