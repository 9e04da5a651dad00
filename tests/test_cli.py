from __future__ import annotations

from collections.abc import Iterator
import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from fontrun.ui.cli import app
import fontrun.ui.cli.state as cli_state


runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_cli_state() -> Iterator[None]:
    cli_state._STATE_VAR.set(None)
    yield
    package_logger = logging.getLogger("fontrun")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


def _layout_args(tmp_path: Path, text: str, *extra: str) -> list[str]:
    return [
        "layout",
        text,
        "--fonts",
        str(tmp_path / "fonts.yaml"),
        "--size",
        "12",
        "--class",
        "regular",
        "--fallback",
        "lower",
        "--fallback",
        "upper",
        *extra,
    ]


def test_layout_prints_serialized_actions(tmp_path: Path, font_dir: Path) -> None:
    result = runner.invoke(app, _layout_args(tmp_path, "aBc"))

    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[1:] == ["f 0 12", "w a", "f 1 12", "w B", "f 0 12", "w c"]
    width, height = (float(value) for value in lines[0].split())
    assert width == pytest.approx(2 * 6.0 + 1400 / 2048 * 12)
    assert height == 12.0


def test_layout_json_output(tmp_path: Path, font_dir: Path) -> None:
    result = runner.invoke(app, _layout_args(tmp_path, "ab", "--format", "json"))

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["height"] == 12.0
    assert payload["actions"] == [
        {"action": "set_font", "handle": 0, "size": 12.0},
        {"action": "write_text", "text": "ab"},
    ]


def test_layout_table_output(tmp_path: Path, font_dir: Path) -> None:
    result = runner.invoke(app, _layout_args(tmp_path, "Ab", "--format", "table"))

    assert result.exit_code == 0, result.output
    assert "set font" in result.stdout
    assert "'b'" in result.stdout


def test_layout_reads_style_file(tmp_path: Path, font_dir: Path) -> None:
    style = tmp_path / "style.yaml"
    style.write_text("font_size: 20\nclasses: [regular]\nfallback: [upper, lower]\n")

    result = runner.invoke(
        app, ["layout", "Z", "--fonts", str(tmp_path / "fonts.yaml"), "--style", str(style)]
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines()[1:] == ["f 0 20", "w Z"]


def test_layout_reports_unsupported_character(tmp_path: Path, font_dir: Path) -> None:
    result = runner.invoke(app, _layout_args(tmp_path, "ab7"))

    assert result.exit_code == 1
    assert "no suitable font" in result.output
    assert "U+0037" in result.output


def test_layout_reports_invalid_style(tmp_path: Path, font_dir: Path) -> None:
    style = tmp_path / "style.yaml"
    style.write_text("font_size: big\n")

    result = runner.invoke(
        app, ["layout", "a", "--fonts", str(tmp_path / "fonts.yaml"), "--style", str(style)]
    )

    assert result.exit_code == 2
    assert "font_size" in result.output


def test_fonts_lists_manifest_entries(tmp_path: Path, font_dir: Path) -> None:
    result = runner.invoke(app, ["fonts", "--fonts", str(tmp_path / "fonts.yaml")])

    assert result.exit_code == 0, result.output
    assert "Lower-Regular" in result.stdout
    assert "Upper-Regular" in result.stdout
    assert "2048" in result.stdout


def test_verbose_flag_updates_state(tmp_path: Path, font_dir: Path) -> None:
    result = runner.invoke(app, ["-vv", "--debug", *_layout_args(tmp_path, "a")])

    assert result.exit_code == 0, result.output
    state = cli_state.get_cli_state(create=False)
    assert state.verbosity == 2
    assert state.show_tracebacks is True
