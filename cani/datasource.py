"""Load the support dataset and hold the normalized browsers and features."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any

from .exceptions import DatasetError
from .model import Browser, Feature, FeatureSummary
from .normalize import normalize_browser, normalize_feature
from .support import features_for
from .util.log import debug_log


@dataclass(frozen=True)
class RawDataset:
    browsers: list[dict[str, Any]]
    features: list[dict[str, Any]]


def _named_records(section: dict[str, Any]) -> list[dict[str, Any]]:
    return [{**record, "name": name} for name, record in section.items()]


def parse_dataset(payload: dict[str, Any]) -> RawDataset:
    """Split a decoded caniuse ``data.json`` into raw browser and feature records."""
    return RawDataset(
        browsers=_named_records(payload["agents"]),
        features=_named_records(payload["data"]),
    )


def _shape_error(payload: object) -> str | None:
    if not isinstance(payload, dict):
        return "expected a JSON object"
    for section in ("agents", "data"):
        if not isinstance(payload.get(section), dict):
            return f'missing or invalid "{section}" section'
    return None


def load_dataset(path: Path) -> RawDataset:
    """Read the dataset file from disk."""
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as exc:
        raise DatasetError(path, cause="file not found") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise DatasetError(path, cause=exc.__class__.__name__) from exc
    cause = _shape_error(payload)
    if cause:
        raise DatasetError(path, cause=cause)
    dataset = parse_dataset(payload)
    debug_log(
        "loaded %d browsers and %d features from %s",
        len(dataset.browsers),
        len(dataset.features),
        path,
    )
    return dataset


class DataStore:
    """Normalized browsers and features, built once per run."""

    def __init__(self, browsers: Iterable[Browser], features: Iterable[Feature]) -> None:
        self.browsers: tuple[Browser, ...] = tuple(browsers)
        self.features: tuple[Feature, ...] = tuple(features)
        self._features_for: dict[tuple[str, str], dict[str, list[FeatureSummary]]] = {}

    @classmethod
    def from_raw(cls, dataset: RawDataset) -> DataStore:
        return cls(
            browsers=[normalize_browser(raw) for raw in dataset.browsers],
            features=[normalize_feature(raw) for raw in dataset.features],
        )

    def find_browser(self, name: str | None) -> Browser | None:
        """Find a browser by title, then by internal name, ignoring case."""
        if not name:
            return None
        needle = name.strip().lower()
        for browser in self.browsers:
            if browser.title.lower() == needle:
                return browser
        for browser in self.browsers:
            if browser.name == needle:
                return browser
        return None

    def browsers_named(self, names: Iterable[str]) -> list[Browser]:
        by_name = {browser.name: browser for browser in self.browsers}
        return [by_name[name] for name in names if name in by_name]

    def find_features(self, query: str | None) -> list[Feature]:
        """Features whose name or title contains query, ignoring case."""
        if not query:
            return []
        needle = query.strip().lower()
        return [
            feature
            for feature in self.features
            if needle in feature.name or needle in feature.title.lower()
        ]

    def features_for(self, browser: Browser, version: str) -> dict[str, list[FeatureSummary]]:
        key = (browser.name, str(version))
        if key not in self._features_for:
            self._features_for[key] = features_for(self.features, browser, str(version))
        return self._features_for[key]
