"""Command line interface for dvd-term."""

from __future__ import annotations

from dvdterm.cli.main import cli, main

__all__ = ["cli", "main"]
