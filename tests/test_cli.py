from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner
import pytest
from pytest import MonkeyPatch

from cani import __version__, cli
from cani import config as config_module


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "config.json")
    monkeypatch.delenv("CANI_DATA", raising=False)
    monkeypatch.delenv("CANI_DEBUG", raising=False)


def test_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--help"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "show" in result.output


def test_help_command() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["help"])
    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_version() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["-v"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_version_command() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["version"])
    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_unknown_command_is_rejected() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["frobnicate"])
    assert result.exit_code == 2


def test_missing_dataset_reports_error(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--data", str(tmp_path / "nope.json"), "show"])

    assert result.exit_code == 1
    assert "Unable to load support data" in result.output


def test_list_browsers(data_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--data", str(data_file), "list", "browsers"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["ie", "chrome", "ios_saf"]


def test_list_features_from_env(data_file: Path, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("CANI_DATA", str(data_file))
    runner = CliRunner()
    result = runner.invoke(cli.main, ["list", "features"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["flexbox", "border-radius", "css-has"]


def test_piped_show_prints_browser_list(data_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--data", str(data_file), "show"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "ie              usage: 4.6000%"
    assert len(lines) == 3
    assert "\x1b" not in result.output


def test_piped_show_browser_prints_versions_latest_first(data_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--data", str(data_file), "show", "IE"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["11   usage: 3.4000%", "6    usage: 1.2000%"]


def test_piped_show_version_prints_grouped_features(data_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--data", str(data_file), "show", "chrome", "61"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "[cr]   [+]   CSS Flexible Box Layout Module",
        "[rc]   [+]   Border-radius (rounded corners)",
        "[wd]   [!]   :has() CSS relational pseudo-class",
    ]


def test_piped_use_prints_feature_rows(data_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--data", str(data_file), "use", "flex"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 1
    assert lines[0] == "[cr]   97.50%   CSS Flexible Box Layout..   @ie   +chr   +saf.ios"


def test_edit_opens_config_in_editor(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    calls: list[list[str]] = []

    class _Result:
        returncode = 0

    def _fake_run(command: list[str], check: bool) -> _Result:
        calls.append(command)
        return _Result()

    monkeypatch.setenv("EDITOR", "nano -w")
    monkeypatch.setattr("cani.navigator.subprocess.run", _fake_run)
    runner = CliRunner()
    result = runner.invoke(cli.main, ["edit"])

    assert result.exit_code == 0
    assert calls == [["nano", "-w", str(tmp_path / "config.json")]]
    assert (tmp_path / "config.json").exists()
