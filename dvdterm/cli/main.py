"""Command line interface for dvd-term.

A bouncing ASCII art DVD logo (or custom text) for the terminal.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from dvdterm import __version__
from dvdterm.cli.verbosity import VerbosityManager
from dvdterm.config.config import init_config
from dvdterm.screensaver.app import App
from dvdterm.utils.exceptions import (
    ArtFileNotFoundError,
    ConfigurationError,
    DVDTermError,
)
from dvdterm.utils.logging_config import (
    LoggingContext,
    get_logger,
    log_exception,
    setup_logging,
)

logger = get_logger(__name__)


def _raise_cli_error(message: str) -> None:
    """Raise a ClickException with the given message."""
    raise click.ClickException(message) from None


def _build_overrides(options: dict[str, Any]) -> dict[str, Any]:
    """Turn explicitly given CLI options into a nested config dict.

    Flags only override when set, so a config file can enable them.
    """
    screensaver: dict[str, Any] = {}
    if options.get("text"):
        screensaver["text"] = list(options["text"])
    if options.get("font") is not None:
        screensaver["font_path"] = options["font"]
    if options.get("color") is not None:
        screensaver["color"] = options["color"]
    if options.get("random"):
        screensaver["random"] = True
    if options.get("speed") is not None:
        screensaver["speed"] = options["speed"]
    if options.get("plain"):
        screensaver["plain"] = True
    if options.get("art") is not None:
        screensaver["art_path"] = options["art"]

    observability: dict[str, Any] = {}
    verbosity: VerbosityManager = options["verbosity"]
    if verbosity.verbosity_count > 0:
        observability["log_level"] = verbosity.to_log_level().value
    if options.get("log_file") is not None:
        observability["log_file"] = options["log_file"]

    overrides: dict[str, Any] = {}
    if screensaver:
        overrides["screensaver"] = screensaver
    if observability:
        overrides["observability"] = observability
    return overrides


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--text",
    "-t",
    multiple=True,
    help='The custom text to use. Defaults to "DVD". Can be used multiple times to display multiple logos',
)
@click.option(
    "--font",
    "-f",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Specify the path of the figlet font to use",
)
@click.option(
    "--color",
    "-c",
    type=click.IntRange(0, 255),
    help="Initial logo color code (0-255). Defaults to white (15)",
)
@click.option(
    "--random",
    "-r",
    "random_",
    is_flag=True,
    help="If included, logo will randomize color when it bounces",
)
@click.option(
    "--speed",
    "-s",
    type=click.IntRange(min=1),
    help="The speed of the logo (how many cells to move per second). Defaults to 8",
)
@click.option(
    "--plain",
    "-p",
    is_flag=True,
    help="If included, logo will be displayed in plain text instead of converted to ASCII art",
)
@click.option(
    "--art",
    "-a",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Specify the path of a plain text file with the ASCII art to display",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path (TOML)",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (-v: info, -vv: debug)",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write logs to this file",
)
@click.option(
    "--dump-config",
    is_flag=True,
    help="Print the effective configuration as TOML and exit",
)
@click.version_option(__version__, prog_name="dvd-term")
@click.pass_context
def cli(
    ctx: click.Context,
    text: tuple[str, ...],
    font: Path | None,
    color: int | None,
    random_: bool,
    speed: int | None,
    plain: bool,
    art: Path | None,
    config_file: Path | None,
    verbose: int,
    log_file: Path | None,
    dump_config: bool,
) -> None:
    """A bouncing ASCII art DVD logo (or custom text) for the terminal.

    Press q, Esc or Ctrl+C to quit.
    """
    verbosity = VerbosityManager.from_count(verbose)
    overrides = _build_overrides(
        {
            "text": text,
            "font": font,
            "color": color,
            "random": random_,
            "speed": speed,
            "plain": plain,
            "art": art,
            "log_file": log_file,
            "verbosity": verbosity,
        }
    )

    try:
        config_manager = init_config(config_file, overrides)
    except ConfigurationError as e:
        raise click.UsageError(str(e), ctx=ctx) from None

    cfg = config_manager.config
    setup_logging(cfg.observability)

    if dump_config:
        click.echo(config_manager.export(), nl=False)
        return

    try:
        app = App.from_config(cfg.screensaver)
    except ArtFileNotFoundError as e:
        # Reported before the terminal is touched, not an error exit
        click.echo(e.message)
        ctx.exit(0)
    except DVDTermError as e:
        log_exception(logger, e, "Startup failed")
        _raise_cli_error(str(e))

    try:
        with LoggingContext("screensaver"):
            app.run()
    except DVDTermError as e:
        log_exception(logger, e, "Screensaver failed")
        _raise_cli_error(str(e))
    except OSError as e:
        log_exception(logger, e, "Terminal I/O failed")
        _raise_cli_error(f"Terminal I/O failed: {e}")


def main():
    """Main CLI entry point."""
    cli(prog_name="dvd-term")


if __name__ == "__main__":
    main()
