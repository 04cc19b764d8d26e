"""Line-based command reader for CLI frontends.

Tiles are "clicked" by typing their label and pressing Enter.
"""

from __future__ import annotations

from collections.abc import Callable

# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "q": "quit",
    "quit": "quit",
    "exit": "quit",
    "r": "reset",
    "reset": "reset",
    "n": "reset",
    "new": "reset",
    "h": "help",
    "?": "help",
}


def parse_command(raw: str, tiles_count: int) -> tuple[str, int | None]:
    """Map a line of input to an action.

    Possible return values:
        ("move", index)   — a tile label 1..tiles_count-1 (index = label-1)
        ("quit", None)    — q / quit / exit
        ("reset", None)   — r / n / reset / new
        ("help", None)    — h / ?
        ("", None)        — anything else
    """
    text = raw.strip().lower()
    if text in _KEY_MAP:
        return _KEY_MAP[text], None
    if text.isdigit():
        label = int(text)
        if 1 <= label < tiles_count:
            return "move", label - 1
    return "", None


def read_command(
    tiles_count: int, prompt: Callable[[], str] = input
) -> tuple[str, int | None]:
    """Read one line via *prompt* and parse it; end of input means quit."""
    try:
        raw = prompt()
    except (EOFError, KeyboardInterrupt):
        return "quit", None
    return parse_command(raw, tiles_count)
