"""Text to ASCII art conversion using pyfiglet.

Fonts are loaded through a fallback chain: a custom font file, then the
embedded default font, then pyfiglet's standard font.
"""

from __future__ import annotations

from pathlib import Path

from pyfiglet import Figlet, FigletError, FigletFont

from dvdterm.screensaver.geometry import Vec2
from dvdterm.utils.exceptions import FontLoadError, RenderConversionError
from dvdterm.utils.logging_config import get_logger

logger = get_logger(__name__)

# embedded default figlet font
DEFAULT_FONT = "3-d"
# font every pyfiglet install ships with
STANDARD_FONT = "standard"
# wide enough that pyfiglet never wraps a logo onto a second row
RENDER_WIDTH = 10_000
# handled by the renderer itself, not looked up in the font
LINE_BREAKS = "\r\n"


class FileFigletFont(FigletFont):
    """Figlet font read from an arbitrary file path."""

    def __init__(self, path: str | Path):
        path = Path(path)
        self.font = path.stem
        self.comment = ""
        self.chars = {}
        self.width = {}
        try:
            self.data = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            msg = f"Cannot read font file {path}"
            raise FontLoadError(msg, details={"error": str(e)}) from e
        self.loadFont()


def load_font(font_path: str | Path | None = None) -> FigletFont:
    """Load a font, falling back until one succeeds.

    Args:
        font_path: Optional path of a custom .flf font

    Returns:
        The first font of the chain that loads

    Raises:
        FontLoadError: If not even the standard font can be loaded

    """
    if font_path:
        try:
            font = FileFigletFont(font_path)
            logger.info("Loaded custom font %s", font_path)
            return font
        except (FontLoadError, FigletError) as e:
            logger.warning("Failed to load custom font %s: %s", font_path, e)

    for name in (DEFAULT_FONT, STANDARD_FONT):
        try:
            return FigletFont(font=name)
        except FigletError as e:
            logger.warning("Failed to load font '%s': %s", name, e)

    msg = "No usable figlet font"
    raise FontLoadError(msg, details={"tried": [str(font_path), DEFAULT_FONT, STANDARD_FONT]})


def figlet(text: str, font: FigletFont) -> str:
    """Convert text to ASCII art, dropping fully blank lines.

    Raises:
        RenderConversionError: If the font cannot render the text

    """
    missing = missing_characters(text, font)
    if missing:
        msg = f"Font {font.font!r} cannot render {''.join(missing)!r} in {text!r}"
        raise RenderConversionError(msg, details={"missing": missing})

    renderer = Figlet(font=STANDARD_FONT, width=RENDER_WIDTH)
    renderer.Font = font
    try:
        rendered = str(renderer.renderText(text))
    except FigletError as e:
        msg = f"Failed to convert {text!r} to ASCII art"
        raise RenderConversionError(msg, details={"font": font.font}) from e

    return strip_blank_lines(rendered)


def missing_characters(text: str, font: FigletFont) -> list[str]:
    """Characters of ``text`` the font has no glyph for, in first-seen order.

    pyfiglet silently drops such characters while rendering.
    """
    missing: list[str] = []
    for char in text:
        if char in LINE_BREAKS or ord(char) in font.chars:
            continue
        if char not in missing:
            missing.append(char)
    return missing


def strip_blank_lines(block: str) -> str:
    """Remove lines that contain only whitespace."""
    return "\n".join(line for line in block.splitlines() if line.strip())


def fig_size(block: str) -> Vec2:
    """Measure an ASCII art block.

    Width is the longest non-blank line, height the number of non-blank
    lines, so blank lines never count towards the size.
    """
    lines = [line for line in block.splitlines() if line.strip()]
    width = max((len(line) for line in lines), default=0)
    return Vec2(width, len(lines))
