"""Key event decoding for raw terminal input."""

from __future__ import annotations

from dataclasses import dataclass

ESC = "esc"
ENTER = "enter"
TAB = "tab"
BACKSPACE = "backspace"
UNKNOWN = "unknown"

_NAMED_CHARS = {
    "\t": TAB,
    "\n": ENTER,
    "\r": ENTER,
    "\x7f": BACKSPACE,
}

# introducers of CSI and SS3 escape sequences
_SEQUENCE_INTRODUCERS = "[O"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press.

    ``code`` is the character typed, or a named key such as ``"esc"``.
    """

    code: str
    ctrl: bool = False


def _skip_sequence(text: str, start: int) -> int:
    """Index just past the escape sequence whose ESC is at ``start``."""
    i = start + 1
    if i >= len(text):
        return i
    if text[i] not in _SEQUENCE_INTRODUCERS:
        # Alt+key: ESC plus one character
        return i + 1
    i += 1
    # parameter and intermediate bytes, then one final byte in @..~
    while i < len(text) and not "@" <= text[i] <= "~":
        i += 1
    return i + 1


def decode_keys(data: bytes) -> list[KeyEvent]:
    """Decode the bytes of one raw read into key events, in order.

    A lone ESC byte at the end of a read is the Escape key; ESC followed by
    more bytes starts an escape sequence (arrows, function keys, Alt+key)
    and decodes to a single ``"unknown"`` event.
    """
    text = data.decode("utf-8", errors="replace")
    events: list[KeyEvent] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == "\x1b":
            if i + 1 == len(text):
                events.append(KeyEvent(ESC))
                i += 1
            else:
                events.append(KeyEvent(UNKNOWN))
                i = _skip_sequence(text, i)
            continue
        if char in _NAMED_CHARS:
            events.append(KeyEvent(_NAMED_CHARS[char]))
        elif "\x01" <= char <= "\x1a":
            # Ctrl+A..Ctrl+Z arrive as 0x01..0x1a in raw mode
            events.append(KeyEvent(chr(ord(char) + 0x60), ctrl=True))
        else:
            events.append(KeyEvent(char))
        i += 1
    return events


def is_quit_key(event: KeyEvent) -> bool:
    """Return True for q, Esc and Ctrl+C."""
    if event.code == "q" and not event.ctrl:
        return True
    if event.code == ESC:
        return True
    return event.code == "c" and event.ctrl
