"""Terminal control helpers for the viewer session.

Owns raw-mode lifecycle, alternate-screen switching, and the final clear.
``raw_mode()`` guarantees restoration on every exit path.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

DEFAULT_TERMINAL_SIZE = (80, 24)


def screen_size() -> tuple[int, int]:
    """Return ``(columns, rows)`` for the controlling terminal."""
    term = shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE)
    return max(1, term.columns), max(1, term.lines)


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_raw_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Enter alternate screen.
        os.write(self.stdout_fd, b"\x1b[?1049h")

    def disable_raw_mode(self) -> None:
        try:
            # Clear, home and show cursor, then restore the main screen buffer.
            os.write(self.stdout_fd, b"\x1b[2J\x1b[H\x1b[?25h\x1b[?1049l")
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            self.enable_raw_mode()
            yield self
        finally:
            self.disable_raw_mode()
