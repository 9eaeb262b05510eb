"""Closed set of navigation commands consumed by the cursor and loop.

Key tokens produced by ``twinview.input`` map onto exactly one command;
anything without a binding becomes ``Command.UNRECOGNIZED``.
"""

from __future__ import annotations

from enum import Enum


class Command(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    QUIT = "quit"
    UNRECOGNIZED = "unrecognized"


KEY_COMMANDS: dict[str, Command] = {
    "UP": Command.UP,
    "DOWN": Command.DOWN,
    "LEFT": Command.LEFT,
    "RIGHT": Command.RIGHT,
    "HOME": Command.HOME,
    "END": Command.END,
    "PAGE_UP": Command.PAGE_UP,
    "PAGE_DOWN": Command.PAGE_DOWN,
    "CTRL_Q": Command.QUIT,
}


def command_for_key(key: str) -> Command:
    """Translate one decoded key token into a navigation command."""
    return KEY_COMMANDS.get(key, Command.UNRECOGNIZED)
