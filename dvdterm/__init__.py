"""dvd-term - A bouncing ASCII art DVD logo for the terminal."""

from __future__ import annotations

__version__ = "0.1.0"

from dvdterm.screensaver.app import App
from dvdterm.screensaver.geometry import Vec2
from dvdterm.screensaver.logo import Logo
from dvdterm.screensaver.scene import RenderMode, Scene

__all__ = [
    "App",
    "Logo",
    "RenderMode",
    "Scene",
    "Vec2",
    "__version__",
]
