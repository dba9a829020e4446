"""Frame rendering for the screensaver."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dvdterm.screensaver.scene import RenderMode

if TYPE_CHECKING:
    from dvdterm.screensaver.geometry import Vec2
    from dvdterm.screensaver.logo import Logo
    from dvdterm.screensaver.scene import Scene
    from dvdterm.screensaver.terminal import Terminal


def group_characters_by_spaces(line: str) -> list[tuple[int, int, str]]:
    """Split a line into runs of non-space characters.

    Args:
        line: Text line

    Returns:
        List of (start_idx, end_idx, group_text) tuples

    """
    groups = []
    start_idx = 0
    in_group = False

    for i, char in enumerate(line):
        if char != " " and not in_group:
            start_idx = i
            in_group = True
        elif char == " " and in_group:
            groups.append((start_idx, i, line[start_idx:i]))
            in_group = False

    if in_group:
        groups.append((start_idx, len(line), line[start_idx:]))

    return groups


def clip_run(x: int, y: int, text: str, canvas: Vec2) -> tuple[int, str] | None:
    """Crop a horizontal run of cells to the visible canvas.

    Returns:
        (x, text) of the visible part, or None if nothing is visible

    """
    if y < 0 or y >= canvas.y:
        return None
    if x < 0:
        text = text[-x:]
        x = 0
    text = text[: max(0, canvas.x - x)]
    if not text:
        return None
    return x, text


class Renderer:
    """Draws a scene onto a terminal."""

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal

    def draw(self, scene: Scene) -> None:
        """Clear the screen and draw every logo, later logos on top."""
        plain = scene.mode() is RenderMode.PLAIN
        with self.terminal.batch():
            self.terminal.clear()
            for logo in scene.logos:
                if plain:
                    self._draw_plain(logo, scene.canvas_size)
                else:
                    self._draw_art(logo, scene.canvas_size)

    def _put(self, x: int, y: int, text: str, color: int, canvas: Vec2) -> None:
        clipped = clip_run(x, y, text, canvas)
        if clipped is None:
            return
        cx, visible = clipped
        self.terminal.move_to(cx, y)
        self.terminal.print(visible, color)

    def _draw_plain(self, logo: Logo, canvas: Vec2) -> None:
        self._put(logo.position.x, logo.position.y, logo.text, logo.color, canvas)

    def _draw_art(self, logo: Logo, canvas: Vec2) -> None:
        # Spaces are skipped so a logo never hides the one drawn below it
        for j, line in enumerate(logo.lines):
            y = logo.position.y + j
            for start, _end, run in group_characters_by_spaces(line):
                self._put(logo.position.x + start, y, run, logo.color, canvas)
