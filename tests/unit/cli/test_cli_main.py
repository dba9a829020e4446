"""Tests for the dvd-term command line entry point."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from dvdterm import __version__
from dvdterm.cli.main import cli
from dvdterm.models import ScreensaverConfig
from dvdterm.utils.exceptions import FontLoadError, TerminalUnavailableError

pytestmark = [pytest.mark.unit, pytest.mark.cli]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_app():
    with patch("dvdterm.cli.main.App") as app_cls:
        yield app_cls


class TestOptions:
    """Test option parsing and configuration."""

    def test_help(self, runner):
        result = runner.invoke(cli, ["-h"])
        assert result.exit_code == 0
        for option in ("--text", "--font", "--color", "--random", "--speed", "--plain", "--art"):
            assert option in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_defaults_passed_to_app(self, runner, mock_app):
        result = runner.invoke(cli, [])

        assert result.exit_code == 0, result.output
        config = mock_app.from_config.call_args.args[0]
        assert isinstance(config, ScreensaverConfig)
        assert config.text == ["DVD"]
        assert config.color == 15
        assert config.speed == 8
        assert not config.random
        assert not config.plain
        mock_app.from_config.return_value.run.assert_called_once()

    def test_all_options(self, runner, mock_app, tmp_path):
        font = tmp_path / "font.flf"
        art = tmp_path / "art.txt"
        result = runner.invoke(
            cli,
            [
                "-t", "Hello",
                "-t", "World",
                "-f", str(font),
                "-c", "99",
                "-r",
                "-s", "20",
                "-p",
                "-a", str(art),
            ],
        )

        assert result.exit_code == 0, result.output
        config = mock_app.from_config.call_args.args[0]
        assert config.text == ["Hello", "World"]
        assert config.font_path == font
        assert config.color == 99
        assert config.random
        assert config.speed == 20
        assert config.plain
        assert config.art_path == art

    @pytest.mark.parametrize("args", [["-c", "256"], ["-s", "0"], ["-c", "red"]])
    def test_invalid_values(self, runner, mock_app, args):
        result = runner.invoke(cli, args)
        assert result.exit_code == 2
        mock_app.from_config.assert_not_called()

    def test_dump_config(self, runner, mock_app):
        result = runner.invoke(cli, ["--dump-config", "-t", "Hello", "-s", "12"])

        assert result.exit_code == 0, result.output
        assert "[screensaver]" in result.output
        assert '"Hello"' in result.output
        assert "speed = 12" in result.output
        assert 'log_level = "WARNING"' in result.output
        mock_app.from_config.assert_not_called()

    def test_config_file_with_overrides(self, runner, tmp_path):
        config_file = tmp_path / "dvd-term.toml"
        config_file.write_text("[screensaver]\nspeed = 4\nrandom = true\ncolor = 3\n")

        result = runner.invoke(
            cli, ["--config", str(config_file), "-s", "10", "--dump-config"]
        )

        assert result.exit_code == 0, result.output
        assert "speed = 10" in result.output
        assert "random = true" in result.output
        assert "color = 3" in result.output

    def test_verbose_sets_log_level(self, runner):
        result = runner.invoke(cli, ["-vv", "--dump-config"])
        assert result.exit_code == 0, result.output
        assert 'log_level = "DEBUG"' in result.output

    def test_invalid_config_file(self, runner, mock_app, tmp_path):
        config_file = tmp_path / "bad.toml"
        config_file.write_text("[screensaver\nspeed = ")

        result = runner.invoke(cli, ["--config", str(config_file)])

        assert result.exit_code == 2
        mock_app.from_config.assert_not_called()

    def test_invalid_config_value(self, runner, mock_app, tmp_path):
        config_file = tmp_path / "bad.toml"
        config_file.write_text("[screensaver]\nspeed = 0\n")

        result = runner.invoke(cli, ["--config", str(config_file)])

        assert result.exit_code == 2
        assert "Invalid configuration" in result.output


class TestErrors:
    """Test how startup and runtime errors are reported."""

    def test_missing_art_exits_cleanly(self, runner, tmp_path):
        missing = tmp_path / "nope.txt"
        with patch("dvdterm.screensaver.app.Terminal") as terminal_cls:
            result = runner.invoke(cli, ["--art", str(missing)])

        assert result.exit_code == 0
        assert f"File not found: {missing}" in result.output
        terminal_cls.return_value.enter.assert_not_called()

    def test_terminal_unavailable(self, runner, mock_app):
        mock_app.from_config.return_value.run.side_effect = TerminalUnavailableError(
            "Standard input is not a terminal"
        )

        result = runner.invoke(cli, [])

        assert result.exit_code == 1
        assert "Standard input is not a terminal" in result.output

    def test_startup_error(self, runner, mock_app):
        mock_app.from_config.side_effect = FontLoadError("No usable figlet font")

        result = runner.invoke(cli, [])

        assert result.exit_code == 1
        assert "No usable figlet font" in result.output

    def test_terminal_io_error(self, runner, mock_app):
        mock_app.from_config.return_value.run.side_effect = OSError("broken pipe")

        result = runner.invoke(cli, [])

        assert result.exit_code == 1
        assert "Terminal I/O failed" in result.output
