"""ANSI colour codes and terminal styling helpers."""

import re

RESET = "\x1b[0m"

COLOURS: dict[str, str] = {
    "RESET": RESET,
    # styles
    "BRIGHT": "\x1b[1m",
    "DIM": "\x1b[2m",
    "ITALIC": "\x1b[3m",
    "UNDERSCORE": "\x1b[4m",
    "BLINK": "\x1b[5m",
    "REVERSE": "\x1b[7m",
    "HIDDEN": "\x1b[8m",
    "STRIKETHROUGH": "\x1b[9m",
    # foreground
    "FG_BLACK": "\x1b[30m",
    "FG_RED": "\x1b[31m",
    "FG_GREEN": "\x1b[32m",
    "FG_YELLOW": "\x1b[33m",
    "FG_BLUE": "\x1b[34m",
    "FG_MAGENTA": "\x1b[35m",
    "FG_CYAN": "\x1b[36m",
    "FG_WHITE": "\x1b[37m",
    "FG_GRAY": "\x1b[90m",
    # background
    "BG_BLACK": "\x1b[40m",
    "BG_RED": "\x1b[41m",
    "BG_GREEN": "\x1b[42m",
    "BG_YELLOW": "\x1b[43m",
    "BG_BLUE": "\x1b[44m",
    "BG_MAGENTA": "\x1b[45m",
    "BG_CYAN": "\x1b[46m",
    "BG_WHITE": "\x1b[47m",
    # bright foreground
    "FG_BRIGHT_BLACK": "\x1b[90m",
    "FG_BRIGHT_RED": "\x1b[91m",
    "FG_BRIGHT_GREEN": "\x1b[92m",
    "FG_BRIGHT_YELLOW": "\x1b[93m",
    "FG_BRIGHT_BLUE": "\x1b[94m",
    "FG_BRIGHT_MAGENTA": "\x1b[95m",
    "FG_BRIGHT_CYAN": "\x1b[96m",
    "FG_BRIGHT_WHITE": "\x1b[97m",
}

# Cycled through when assigning colours to scopes.
SCOPE_COLOURS: tuple[str, ...] = tuple(
    COLOURS[name]
    for name in (
        "FG_RED",
        "FG_GREEN",
        "FG_YELLOW",
        "FG_BLUE",
        "FG_MAGENTA",
        "FG_CYAN",
        "FG_BRIGHT_RED",
        "FG_BRIGHT_GREEN",
        "FG_BRIGHT_YELLOW",
        "FG_BRIGHT_BLUE",
        "FG_BRIGHT_MAGENTA",
        "FG_BRIGHT_CYAN",
    )
)

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def colourize(text: str, colour: str) -> str:
    """Wrap text in an ANSI colour code followed by a reset."""
    return f"{colour}{text}{RESET}"


def strip_colours(text: str) -> str:
    """Remove all ANSI colour codes from text."""
    return _ANSI_ESCAPE.sub("", text)
