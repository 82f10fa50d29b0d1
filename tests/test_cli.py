"""Tests for the click command-line interface."""

import logging

import pytest
from click.testing import CliRunner

from logbar.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _lines(result) -> list:
    return result.output.splitlines()


class TestDemo:
    """Tests for ``logbar demo``."""

    def test_single_steps(self, runner) -> None:
        result = runner.invoke(cli, ["demo", "--total", "10"])
        assert result.exit_code == 0, result.output
        lines = _lines(result)
        assert len(lines) == 10
        assert lines[0] == "|" + "█" * 4 + "-" * 36 + "| 10%"
        assert lines[-1] == "|" + "█" * 40 + "| 100%"

    def test_step(self, runner) -> None:
        result = runner.invoke(cli, ["demo", "-n", "10", "--step", "3"])
        assert result.exit_code == 0, result.output
        labels = [line.rsplit(" ", 1)[1] for line in _lines(result)]
        assert labels == ["30%", "60%", "90%", "100%"]

    def test_style_options(self, runner) -> None:
        result = runner.invoke(cli, [
            "demo", "--total", "2", "--width", "10", "--no-labels",
            "--tick", "↓", "--indicator", "#", "--bar", ".",
        ])
        assert result.exit_code == 0, result.output
        assert _lines(result) == ["↓#####.....↓", "↓##########↓"]

    def test_style_file(self, runner, write_style) -> None:
        path = write_style("width: 10\nlabels: false\nindicator: '='\n")
        result = runner.invoke(cli, [
            "demo", "--total", "1", "--style", str(path),
        ])
        assert result.exit_code == 0, result.output
        assert _lines(result) == ["|==========|"]

    def test_options_override_style_file(self, runner, write_style) -> None:
        path = write_style("width: 10\nlabels: false\n")
        result = runner.invoke(cli, [
            "demo", "--total", "1", "--style", str(path), "--width", "4",
        ])
        assert result.exit_code == 0, result.output
        assert _lines(result) == ["|████|"]

    def test_header(self, runner) -> None:
        result = runner.invoke(cli, ["demo", "--total", "2", "--header"])
        assert result.exit_code == 0, result.output
        lines = _lines(result)
        assert lines[:2] == [
            "0%    20%     40%     60%     80%     100%",
            "|-------|-------|-------|-------|--------|",
        ]
        assert len(lines) == 4

    def test_zero_total(self, runner) -> None:
        result = runner.invoke(cli, ["demo", "--total", "0"])
        assert result.exit_code == 1
        assert "total must be positive" in result.output

    def test_bad_glyph(self, runner) -> None:
        result = runner.invoke(cli, ["demo", "--total", "5", "--tick", "ab"])
        assert result.exit_code == 1
        assert "single character" in result.output

    def test_missing_style_file(self, runner, tmp_path) -> None:
        missing = tmp_path / "missing.yaml"
        result = runner.invoke(cli, [
            "demo", "--total", "5", "--style", str(missing),
        ])
        assert result.exit_code == 1
        assert "Style file not found" in result.output

    def test_invalid_style_file(self, runner, write_style) -> None:
        path = write_style("width: wide\n")
        result = runner.invoke(cli, [
            "demo", "--total", "5", "--style", str(path),
        ])
        assert result.exit_code == 1
        assert "'width' must be an integer" in result.output

    def test_total_required(self, runner) -> None:
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 2


class TestTrack:
    """Tests for ``logbar track``."""

    def test_one_line_per_non_empty_input_line(self, runner) -> None:
        """Blank input lines are skipped and emit nothing."""
        result = runner.invoke(
            cli, ["track", "--total", "4", "--no-labels", "-w", "4"],
            input="a\nb\n\nc\n",
        )
        assert result.exit_code == 0, result.output
        assert _lines(result) == [
            "|█---|",
            "|██--|",
            "|███-|",
            "|████|",
        ]

    def test_more_input_than_total(self, runner) -> None:
        result = runner.invoke(
            cli, ["track", "--total", "2"],
            input="1\n2\n3\n",
        )
        assert result.exit_code == 0, result.output
        labels = [line.rsplit(" ", 1)[1] for line in _lines(result)]
        assert labels == ["50%", "100%", "100%", "100%"]

    def test_empty_input(self, runner) -> None:
        result = runner.invoke(cli, ["track", "--total", "3"], input="")
        assert result.exit_code == 0, result.output
        assert _lines(result) == ["|" + "█" * 40 + "| 100%"]

    def test_log_sink(self, runner, caplog) -> None:
        caplog.set_level(logging.INFO, logger="logbar")
        result = runner.invoke(
            cli, ["track", "--total", "2", "--log"],
            input="x\ny\n",
        )
        assert result.exit_code == 0, result.output
        messages = [
            r.getMessage() for r in caplog.records if r.name == "logbar"
        ]
        assert len(messages) == 3
        assert messages[-1].endswith("| 100%")
