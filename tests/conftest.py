from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from cani.datasource import DataStore, parse_dataset


def _payload() -> dict[str, Any]:
    return {
        "agents": {
            "ie": {
                "browser": "IE",
                "abbr": "IE",
                "prefix": "ms",
                "type": "desktop",
                "usage_global": {"6": 1.2, "11": 3.4},
            },
            "chrome": {
                "browser": "Chrome",
                "abbr": "Chr.",
                "prefix": "webkit",
                "type": "desktop",
                "usage_global": {"60": 0.5, "61": 10.0},
            },
            "ios_saf": {
                "browser": "Safari on iOS",
                "abbr": "/saf.ios/",
                "prefix": "webkit",
                "type": "mobile",
                "usage_global": {"3.2": 0.1, "4.0-4.1": 0.2, "16": 5.0},
            },
        },
        "data": {
            "flexbox": {
                "title": "CSS Flexible Box Layout Module",
                "status": "cr",
                "usage_perc_y": 97.5,
                "stats": {
                    "ie": {"6": "n", "11": "a x #1"},
                    "chrome": {"60": "y", "61": "y"},
                    "ios_saf": {"3.2": "y x", "4.0-4.1": "y", "16": "y"},
                },
            },
            "border-radius": {
                "title": "Border-radius (rounded corners)",
                "status": "rec",
                "usage_perc_y": 98.0,
                "stats": {
                    "ie": {"6": "n", "11": "y"},
                    "chrome": {"60": "y", "61": "y"},
                },
            },
            "css-has": {
                "title": ":has() CSS relational pseudo-class",
                "status": "wd",
                "usage_perc_y": 5.25,
                "stats": {
                    "ie": {"6": "n", "11": "n"},
                    "chrome": {"60": "n", "61": "d #2"},
                },
            },
        },
    }


@pytest.fixture
def payload() -> dict[str, Any]:
    return _payload()


@pytest.fixture
def store(payload: dict[str, Any]) -> DataStore:
    return DataStore.from_raw(parse_dataset(payload))


@pytest.fixture
def data_file(tmp_path: Path, payload: dict[str, Any]) -> Path:
    path = tmp_path / "data.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
