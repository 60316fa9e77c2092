"""Normalize raw dataset records into browsers and features."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .constants import ABBR_MAP, LABEL_MAP, SUPPORT_SYMBOLS, UNKNOWN_SUPPORT
from .model import Browser, Feature


def normalize_abbr(value: str) -> str:
    """Lowercase, turn slashes into dots and trim surrounding dots."""
    abbr = value.lower().replace("/", ".").strip(".")
    return ABBR_MAP.get(abbr, abbr)


def normalize_browser(raw: Mapping[str, Any]) -> Browser:
    """Build a Browser from one raw agent record."""
    abbr = normalize_abbr(raw["abbr"])
    title = raw["browser"].lower()
    usage = {str(version): float(share or 0) for version, share in raw["usage_global"].items()}

    return Browser(
        name=str(raw.get("name", title)).lower(),
        title=title,
        abbr=abbr,
        label=LABEL_MAP.get(abbr, abbr),
        prefix=(raw.get("prefix") or "").lower(),
        type=(raw.get("type") or "").lower(),
        usage=usage,
        versions=tuple(usage),
    )


def resolve_stat(raw_stat: str | None) -> str:
    """Reduce a raw stat string like ``"a x #2"`` to a single support code."""
    tokens = (raw_stat or "").split()
    if not tokens or tokens[0] not in SUPPORT_SYMBOLS:
        return UNKNOWN_SUPPORT

    code = tokens[0]
    if code in {"y", "a"} and "x" in tokens[1:]:
        return "x"
    return code


def normalize_feature(raw: Mapping[str, Any]) -> Feature:
    """Build a Feature from one raw feature record, flattening its stats."""
    support: dict[tuple[str, str], str] = {}
    for browser_name, stats in (raw.get("stats") or {}).items():
        for version, raw_stat in stats.items():
            support[(browser_name.lower(), str(version))] = resolve_stat(raw_stat)

    return Feature(
        name=str(raw.get("name", "")).lower(),
        title=raw["title"],
        status=raw["status"],
        percent=float(raw.get("usage_perc_y") or 0),
        support=support,
    )
