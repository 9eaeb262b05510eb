"""Full-screen frame composition and painting.

``build_frame`` turns the document and cursor into one ANSI string covering
every screen row. ``FrameRenderer`` batches that string and writes it to the
terminal in a single flush per cycle.
"""

from __future__ import annotations

import logging
import os

from .cursor import CursorState
from .line_store import LineStore

logger = logging.getLogger(__name__)

WELCOME_TITLE = "Twin Planets Viewer"
FILLER_MARKER = "~"
BANNER_ROW_DIVISOR = 8

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CURSOR_HOME = "\033[H"
CLEAR_TO_EOL = "\033[K"


def cursor_to(column: int, row: int) -> str:
    """Return the escape sequence placing the cursor at 0-based ``(column, row)``."""
    return f"\033[{row + 1};{column + 1}H"


def banner_row(screen_rows: int) -> int:
    return screen_rows // BANNER_ROW_DIVISOR


def welcome_line(title: str, screen_columns: int) -> str:
    """Center ``title`` in ``screen_columns``, led by a filler marker.

    The title is clipped to the screen width first. With zero padding neither
    the marker nor any spaces are emitted.
    """
    title = title[:screen_columns]
    padding = (screen_columns - len(title)) // 2
    if padding == 0:
        return title
    return FILLER_MARKER + " " * (padding - 1) + title


def visible_slice(render: str, column_offset: int, screen_columns: int) -> str:
    """Return the part of a render row that falls inside the viewport."""
    return render[column_offset : column_offset + screen_columns]


def build_frame(store: LineStore, cursor: CursorState, title: str = WELCOME_TITLE) -> str:
    """Compose one complete screen refresh.

    The cursor glyph is hidden while rows are painted top to bottom, each row
    is cleared to its end so stale characters disappear, and the cursor is
    parked at its viewport-relative position before being shown again.
    """
    screen_rows = cursor.screen_rows
    screen_columns = cursor.screen_columns
    line_count = store.count()

    out: list[str] = [HIDE_CURSOR, CURSOR_HOME]
    for row in range(screen_rows):
        file_row = row + cursor.row_offset
        if file_row >= line_count:
            if line_count == 0 and row == banner_row(screen_rows):
                out.append(welcome_line(title, screen_columns))
            else:
                out.append(FILLER_MARKER)
        else:
            out.append(visible_slice(store.render(file_row), cursor.column_offset, screen_columns))

        out.append(CLEAR_TO_EOL)
        if row < screen_rows - 1:
            out.append("\r\n")

    column, row = cursor.screen_position()
    out.append(cursor_to(column, row))
    out.append(SHOW_CURSOR)
    return "".join(out)


class FrameRenderer:
    """Accumulate one frame in memory and flush it with one write."""

    def __init__(self, stdout_fd: int, title: str = WELCOME_TITLE) -> None:
        self.stdout_fd = stdout_fd
        self.title = title
        self._buffer: list[str] = []

    def queue(self, text: str) -> None:
        self._buffer.append(text)

    def flush(self) -> None:
        """Write everything queued as one payload, then clear the buffer."""
        payload = memoryview("".join(self._buffer).encode("utf-8", errors="replace"))
        self._buffer.clear()
        while payload:
            written = os.write(self.stdout_fd, payload)
            payload = payload[written:]

    def refresh(self, store: LineStore, cursor: CursorState) -> None:
        self.queue(build_frame(store, cursor, self.title))
        self.flush()
        logger.debug(
            "painted frame cursor=(%d, %d) offsets=(%d, %d)",
            cursor.x,
            cursor.y,
            cursor.row_offset,
            cursor.column_offset,
        )
