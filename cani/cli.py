"""Console script for pycani."""

from __future__ import annotations

from collections.abc import Sequence
import os
from pathlib import Path

import click

from ._version import __version__ as _version
from .config import Config, load_config
from .constants import DEFAULT_DATA_FILE
from .datasource import DataStore, load_dataset
from .exceptions import CaniError
from .navigator import Command, Navigator
from .ui.fzf import Selector
from .util.log import configure_logging, debug_log


def _data_path(option: Path | None, config: Config) -> Path:
    if option is not None:
        return option
    env_path = os.environ.get("CANI_DATA", "").strip()
    if env_path:
        return Path(env_path).expanduser()
    return config.data or DEFAULT_DATA_FILE


def _load(ctx: click.Context, args: Sequence[str]) -> tuple[Config, DataStore]:
    config = load_config(args)
    path = _data_path(ctx.obj.get("data_path"), config)
    debug_log("using dataset %s", path)
    return config, DataStore.from_raw(load_dataset(path))


def _navigate(ctx: click.Context, command: Command | None, args: Sequence[str]) -> None:
    try:
        if command is Command.EDIT:
            config = load_config(args)
            store = DataStore((), ())
        else:
            config, store = _load(ctx, args)
        navigator = Navigator(store, config, Selector())
        navigator.run(navigator.start_state(command, config.args))
    except CaniError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(_version, "-v", "--version")
@click.option(
    "--data",
    "data_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a caniuse data.json file.",
)
@click.pass_context
def main(ctx: click.Context, data_path: Path | None) -> None:
    """
    Browse caniuse browser support data from the terminal

    \b
    Example usages:
      cani
      cani use box-shadow
      cani show ie
      cani show chrome 61
      cani list features
    """
    configure_logging()
    ctx.ensure_object(dict)
    ctx.obj["data_path"] = data_path
    if ctx.invoked_subcommand is None:
        _navigate(ctx, None, ())


@main.command()
@click.argument("feature", required=False)
@click.pass_context
def use(ctx: click.Context, feature: str | None) -> None:
    """Show browser support for FEATURE."""
    _navigate(ctx, Command.USE, [feature] if feature else [])


@main.command()
@click.argument("browser", required=False)
@click.argument("version", required=False)
@click.pass_context
def show(ctx: click.Context, browser: str | None, version: str | None) -> None:
    """Show information about a specific BROWSER."""
    _navigate(ctx, Command.SHOW, [arg for arg in (browser, version) if arg])


@main.command()
@click.pass_context
def edit(ctx: click.Context) -> None:
    """Edit the default config using $EDITOR."""
    _navigate(ctx, Command.EDIT, [])


@main.command("list")
@click.argument("kind", type=click.Choice(["features", "browsers"]))
@click.pass_context
def list_names(ctx: click.Context, kind: str) -> None:
    """List names of each item in KIND."""
    try:
        _config, store = _load(ctx, [kind])
    except CaniError as exc:
        raise click.ClickException(str(exc)) from exc
    items = store.features if kind == "features" else store.browsers
    for item in items:
        click.echo(item.name)


@main.command("help")
@click.pass_context
def help_(ctx: click.Context) -> None:
    """Show this help."""
    parent = ctx.parent or ctx
    click.echo(parent.get_help())


@main.command()
def version() -> None:
    """Print the version number."""
    click.echo(_version)
