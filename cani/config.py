"""User configuration for pycani."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import json
import os
from pathlib import Path
from typing import Any

from .constants import DEFAULT_BROWSERS, DEFAULT_CONFIG_FILE, DEFAULT_STATUSES
from .exceptions import ConfigError
from .util.log import debug_log

CONFIG_FILE = Path(os.getenv("CANI_CONFIG", str(DEFAULT_CONFIG_FILE)))

DEFAULT_CONFIG: dict[str, Any] = {
    "statuses": dict(DEFAULT_STATUSES),
    "browsers": list(DEFAULT_BROWSERS),
    "versions": 1,
}


@dataclass(frozen=True)
class Config:
    args: tuple[str, ...] = ()
    statuses: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_STATUSES))
    browsers: tuple[str, ...] = DEFAULT_BROWSERS
    versions: int = 1
    data: Path | None = None
    default: Path = CONFIG_FILE


def read_config_file(path: Path) -> dict[str, Any]:
    """Read the raw config mapping, or an empty one when the file is absent."""
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(path, cause=exc.__class__.__name__) from exc
    if not isinstance(payload, dict):
        raise ConfigError(path, cause="expected a JSON object")
    return payload


def load_config(args: Sequence[str] = (), path: Path | None = None) -> Config:
    """Merge the config file over the defaults."""
    path = path or CONFIG_FILE
    raw = read_config_file(path)
    debug_log("loaded config from %s: %s", path, sorted(raw))

    statuses = dict(DEFAULT_STATUSES)
    raw_statuses = raw.get("statuses")
    if isinstance(raw_statuses, dict):
        statuses.update({str(key): str(value) for key, value in raw_statuses.items()})

    raw_browsers = raw.get("browsers")
    browsers = (
        tuple(str(name).lower() for name in raw_browsers)
        if isinstance(raw_browsers, list)
        else DEFAULT_BROWSERS
    )

    raw_versions = raw.get("versions")
    versions = raw_versions if isinstance(raw_versions, int) and raw_versions > 0 else 1

    raw_data = raw.get("data")
    data = Path(raw_data).expanduser() if isinstance(raw_data, str) and raw_data else None

    return Config(
        args=tuple(args),
        statuses=statuses,
        browsers=browsers,
        versions=versions,
        data=data,
        default=path,
    )


def install_default(path: Path) -> bool:
    """Write the default config when none exists yet. Returns True if written."""
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(DEFAULT_CONFIG, f, indent=2)
        f.write("\n")
    return True
