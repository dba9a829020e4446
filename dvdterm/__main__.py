#!/usr/bin/env python3
"""Allow ``python -m dvdterm``."""

from __future__ import annotations

from dvdterm.cli.main import main

if __name__ == "__main__":
    main()
