"""Bouncing logo screensaver.

Logos (figlet text or custom ASCII art) move one cell per frame and bounce
off the edges of the terminal, which is re-measured every frame.
"""

from __future__ import annotations

from dvdterm.screensaver.app import App, AppState
from dvdterm.screensaver.figlet import fig_size, figlet, load_font
from dvdterm.screensaver.geometry import Vec2
from dvdterm.screensaver.logo import Logo, build_logos, load_art
from dvdterm.screensaver.renderer import Renderer
from dvdterm.screensaver.scene import RenderMode, Scene, render_mode
from dvdterm.screensaver.terminal import Terminal

__all__ = [
    "App",
    "AppState",
    "Logo",
    "RenderMode",
    "Renderer",
    "Scene",
    "Terminal",
    "Vec2",
    "build_logos",
    "fig_size",
    "figlet",
    "load_art",
    "load_font",
    "render_mode",
]
