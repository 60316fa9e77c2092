"""Support status lookups across features, browsers and versions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import re

from .constants import SUPPORT_SYMBOLS, SUPPORT_TYPES, UNKNOWN_SUPPORT
from .model import Browser, Feature, FeatureSummary

_NUMERIC_RE = re.compile(r"^\d+(?:\.\d+)*$")


def _version_key(value: str) -> tuple[int, ...] | None:
    value = value.strip()
    if not _NUMERIC_RE.fullmatch(value):
        return None
    return tuple(int(part) for part in value.split("."))


def _range_contains(range_text: str, version: tuple[int, ...]) -> bool:
    """Check ``"10-15"`` and ``"16+"`` style range keys."""
    if range_text.endswith("+"):
        low = _version_key(range_text[:-1])
        return low is not None and version >= low
    if "-" in range_text:
        low_text, _, high_text = range_text.partition("-")
        low, high = _version_key(low_text), _version_key(high_text)
        if low is None or high is None:
            return False
        # "4.2-4.3" covers 4.2.x and 4.3.x, so compare on the bound's precision.
        return low <= version[: len(low)] and version[: len(high)] <= high
    return False


def support_in(feature: Feature, browser_name: str, version: str) -> str:
    """Return the support code of a feature for one browser version."""
    browser_name = browser_name.lower()
    version = str(version)

    exact = feature.support.get((browser_name, version))
    if exact is not None:
        return exact

    version_key = _version_key(version)
    if version_key is None:
        return UNKNOWN_SUPPORT

    for (name, range_text), code in feature.support.items():
        if name == browser_name and _range_contains(range_text, version_key):
            return code
    return UNKNOWN_SUPPORT


def features_for(
    features: Iterable[Feature], browser: Browser, version: str
) -> dict[str, list[FeatureSummary]]:
    """Group features by their support code for a browser version."""
    grouped: dict[str, list[FeatureSummary]] = {}
    for feature in features:
        code = support_in(feature, browser.name, version)
        grouped.setdefault(code, []).append(
            FeatureSummary(
                support=code,
                title=feature.title,
                status=feature.status,
                percent=feature.percent,
            )
        )
    return grouped


def current_support(
    feature: Feature, browsers: Sequence[Browser], versions: int = 1
) -> list[str]:
    """Render the latest support symbols per browser, suffixed with its abbr."""
    versions = max(versions, 1)
    cells: list[str] = []
    for browser in browsers:
        recent = feature.versions_for(browser.name)[-versions:]
        symbols = "".join(
            SUPPORT_SYMBOLS.get(feature.support[(browser.name, version)], "")
            for version in recent
        )
        cells.append(symbols.rjust(versions) + browser.abbr)
    return cells


def support_legend() -> str:
    return " ".join(f"{name}({SUPPORT_SYMBOLS[code]})" for code, name in SUPPORT_TYPES)
