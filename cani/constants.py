"""Constants used across pycani."""

from __future__ import annotations

from pathlib import Path
from typing import Final

CONFIG_DIR: Final[Path] = Path.home() / ".config" / "cani"
DEFAULT_CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"
DEFAULT_DATA_FILE: Final[Path] = CONFIG_DIR / "data.json"

DEFAULT_EDITOR: Final[str] = "vim"
FZF_BINARY: Final[str] = "fzf"

COLUMN_SEPARATOR: Final[str] = "   "
TITLE_WIDTH: Final[int] = 24

ABBR_MAP: Final[dict[str, str]] = {"ios": "saf.ios"}

LABEL_MAP: Final[dict[str, str]] = {
    "ie": "Internet Explorer",
    "edge": "Edge",
    "ff": "Firefox",
    "chr": "Chrome",
    "saf": "Safari",
    "op": "Opera",
    "saf.ios": "IOS Safari",
    "o.mini": "Opera Mini",
    "and": "Android Browser",
    "bb": "BlackBerry Browser",
    "o.mob": "Opera Mobile",
    "chr.and": "Chrome for Android",
    "ff.and": "Firefox for Android",
    "ie.mob": "Internet Explorer Mobile",
    "uc": "UC Browser for android",
    "ss": "Samsung Internet",
    "qq": "QQ Browser",
    "baidu": "Baidu Browser",
}

DEFAULT_STATUSES: Final[dict[str, str]] = {
    "rec": "rc",
    "cr": "cr",
    "wd": "wd",
    "ls": "ls",
    "unoff": "un",
    "other": "ot",
}

DEFAULT_BROWSERS: Final[tuple[str, ...]] = (
    "ie",
    "edge",
    "firefox",
    "chrome",
    "safari",
    "ios_saf",
)

# (code, name) pairs in display order.
SUPPORT_TYPES: Final[tuple[tuple[str, str], ...]] = (
    ("y", "supported"),
    ("a", "partial"),
    ("n", "unsupported"),
    ("p", "polyfill"),
    ("u", "unknown"),
    ("x", "prefix"),
    ("d", "flag"),
)

SUPPORT_SYMBOLS: Final[dict[str, str]] = {
    "y": "+",
    "a": "~",
    "n": "-",
    "p": "#",
    "u": "?",
    "x": "@",
    "d": "!",
}

UNKNOWN_SUPPORT: Final[str] = "u"

BROWSER_LIST_COLORS: Final[tuple[str, ...]] = ("white", "bright_black")
USE_COLORS: Final[tuple[str, ...]] = ("green", "bright_black", "bright_white", "bright_black")
SHOW_COLORS: Final[tuple[str, ...]] = ("green", "bright_black", "bright_white")
MENU_COLORS: Final[tuple[str, ...]] = ("white", "bright_black")
