"""Menu navigation: each view picks rows and decides the next view."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
import os
import shlex
import subprocess
from typing import Protocol

from .config import Config, install_default
from .constants import (
    BROWSER_LIST_COLORS,
    DEFAULT_EDITOR,
    MENU_COLORS,
    SHOW_COLORS,
    USE_COLORS,
)
from .datasource import DataStore
from .model import Browser
from .render_rows import Row, browser_rows, show_rows, use_row, version_rows
from .support import current_support, support_legend
from .util.log import debug_log


class Command(str, Enum):
    SHOW = "show"
    USE = "use"
    EDIT = "edit"


class View(Enum):
    ROOT_MENU = "root"
    BROWSER_LIST = "browsers"
    BROWSER_VERSIONS = "versions"
    FEATURES_AT_VERSION = "features"
    FEATURE_LIST = "use"
    EDIT_CONFIG = "edit"
    EXIT = "exit"


@dataclass(frozen=True)
class ViewState:
    view: View
    browser: Browser | None = None
    version: str | None = None
    query: str | None = None


EXIT = ViewState(View.EXIT)

ROOT_MENU_ROWS: tuple[tuple[str, str], ...] = (
    (Command.SHOW.value, "Show browser info"),
    (Command.USE.value, "Show feature info"),
    (Command.EDIT.value, "Edit the default config using $EDITOR"),
)


class RowSelector(Protocol):
    def choose(
        self, rows: Sequence[Row], *, header: str | Sequence[str], colors: Sequence[str] = ()
    ) -> list[str]: ...


def open_editor(path: os.PathLike[str] | str) -> int:
    """Open a file in $EDITOR and wait for it to close."""
    editor = os.environ.get("EDITOR") or DEFAULT_EDITOR
    return subprocess.run([*shlex.split(editor), str(path)], check=False).returncode


class Navigator:
    """Runs views until one of them yields the exit state."""

    def __init__(
        self,
        store: DataStore,
        config: Config,
        selector: RowSelector,
        *,
        editor: Callable[[str], int] = open_editor,
    ) -> None:
        self.store = store
        self.config = config
        self.selector = selector
        self.editor = editor
        self._views: dict[View, Callable[[ViewState], ViewState]] = {
            View.ROOT_MENU: self.root_menu,
            View.BROWSER_LIST: self.browser_list,
            View.BROWSER_VERSIONS: self.browser_versions,
            View.FEATURES_AT_VERSION: self.features_at_version,
            View.FEATURE_LIST: self.feature_list,
            View.EDIT_CONFIG: self.edit_config,
        }

    def run(self, state: ViewState) -> None:
        while state.view is not View.EXIT:
            debug_log("view %s", state.view.value)
            state = self._views[state.view](state)

    def start_state(self, command: Command | None, args: Sequence[str] = ()) -> ViewState:
        """Initial state for a command typed on the command line."""
        if command is None:
            return ViewState(View.ROOT_MENU)
        if command is Command.EDIT:
            return ViewState(View.EDIT_CONFIG)
        if command is Command.USE:
            return ViewState(View.FEATURE_LIST, query=args[0] if args else None)

        browser = self.store.find_browser(args[0] if args else None)
        if browser is None:
            return ViewState(View.BROWSER_LIST)
        if len(args) > 1 and args[1]:
            return ViewState(View.FEATURES_AT_VERSION, browser=browser, version=args[1])
        return ViewState(View.BROWSER_VERSIONS, browser=browser)

    def root_menu(self, state: ViewState) -> ViewState:
        chosen = self.selector.choose(ROOT_MENU_ROWS, header=["commands"], colors=MENU_COLORS)
        if not chosen:
            return EXIT
        try:
            command = Command(chosen[0])
        except ValueError:
            return EXIT
        return self.start_state(command)

    def browser_list(self, state: ViewState) -> ViewState:
        chosen = self.selector.choose(
            browser_rows(self.store.browsers), header=["show"], colors=BROWSER_LIST_COLORS
        )
        browser = self.store.find_browser(chosen[0] if chosen else None)
        if browser is None:
            return EXIT
        return ViewState(View.BROWSER_VERSIONS, browser=browser)

    def browser_versions(self, state: ViewState) -> ViewState:
        browser = state.browser
        if browser is None:
            return ViewState(View.BROWSER_LIST)

        chosen = self.selector.choose(
            version_rows(browser), header=["show", browser.title], colors=BROWSER_LIST_COLORS
        )
        if not chosen:
            return ViewState(View.BROWSER_LIST)
        return ViewState(View.FEATURES_AT_VERSION, browser=browser, version=chosen[0])

    def features_at_version(self, state: ViewState) -> ViewState:
        browser, version = state.browser, state.version
        if browser is None:
            return ViewState(View.BROWSER_LIST)
        if version is None:
            return ViewState(View.BROWSER_VERSIONS, browser=browser)

        rows = show_rows(self.store.features_for(browser, version), self.config.statuses)
        self.selector.choose(
            rows,
            header=f"show:{browser.title.lower()}:{version}]   [{support_legend()}",
            colors=SHOW_COLORS,
        )
        return ViewState(View.BROWSER_VERSIONS, browser=browser)

    def feature_list(self, state: ViewState) -> ViewState:
        features = self.store.find_features(state.query) or list(self.store.features)
        browsers = self.store.browsers_named(self.config.browsers)
        rows = [
            use_row(
                feature,
                self.config.statuses,
                current_support(feature, browsers, self.config.versions),
            )
            for feature in features
        ]
        self.selector.choose(rows, header=f"use]   [{support_legend()}", colors=USE_COLORS)
        return EXIT

    def edit_config(self, state: ViewState) -> ViewState:
        if install_default(self.config.default):
            debug_log("wrote default config to %s", self.config.default)
        self.editor(str(self.config.default))
        return EXIT
