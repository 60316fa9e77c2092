"""Row picker backed by fzf, with a Textual fallback."""

from __future__ import annotations

from collections.abc import Callable, Sequence
import shutil
import subprocess
import sys
from typing import Any

import click

from ..constants import FZF_BINARY
from ..exceptions import SelectorError
from ..render_rows import Row, format_rows
from ..util.log import debug_log
from ..util.text import split_cells

Header = str | Sequence[str]
Runner = Callable[..., "subprocess.CompletedProcess[Any]"]

# fzf exits 1 on no match and 130 when interrupted with Esc or Ctrl-C.
_NO_SELECTION_CODES = frozenset({1, 130})


def format_header(header: Header) -> str:
    """Render ``["show", "IE"]`` as ``cani:show:ie`` and ``"use"`` as ``cani:use``."""
    if isinstance(header, str):
        return f"cani:{header}"
    return ":".join(str(part).lower() for part in ("cani", *header))


class Selector:
    """Present rows in a fuzzy picker and return the chosen row's cells."""

    def __init__(
        self,
        *,
        interactive: bool | None = None,
        colorize: bool | None = None,
        runner: Runner = subprocess.run,
    ) -> None:
        self.interactive = sys.stdout.isatty() if interactive is None else interactive
        self.colorize = sys.stdin.isatty() if colorize is None else colorize
        self._runner = runner

    def choose(self, rows: Sequence[Row], *, header: Header, colors: Sequence[str] = ()) -> list[str]:
        if not self.interactive:
            # Output goes to another program: print plainly and end the run here.
            for line in format_rows(rows):
                click.echo(line)
            raise SystemExit(0)

        lines = format_rows(rows, colors=colors, colorize=self.colorize)
        if not lines:
            return []

        title = format_header(header)
        if shutil.which(FZF_BINARY) is None:
            debug_log("%s not found on PATH, using textual picker", FZF_BINARY)
            from .textual_select import run_textual_select

            # Quote escaping is only part of the fzf line protocol.
            plain_lines = [line.replace('\\"', '"') for line in lines]
            selected = run_textual_select(plain_lines, title)
        else:
            selected = self._run_fzf(lines, title)

        debug_log("selection for [%s]: %r", title, selected)
        if not selected:
            return []
        return split_cells(selected)

    def _run_fzf(self, lines: Sequence[str], header: str) -> str | None:
        command = [FZF_BINARY, "--ansi", f"--header=[{header}]"]
        result = self._runner(
            command,
            input="\n".join(lines),
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
        if result.returncode in _NO_SELECTION_CODES:
            return None
        if result.returncode != 0:
            raise SelectorError(FZF_BINARY, result.returncode)

        output = (result.stdout or "").splitlines()
        return output[0] if output else None
