"""Cursor position and viewport offsets over a read-only document.

``CursorState`` is the only owner of cursor/viewport mutation. Every move
re-clamps the column to the current line and re-derives the offsets so the
cursor always stays inside the visible window.
"""

from __future__ import annotations

from dataclasses import dataclass

from .commands import Command
from .line_store import LineStore


@dataclass
class CursorState:
    """Cursor ``(x, y)`` in raw coordinates plus viewport offsets.

    ``y`` ranges over ``[0, store.count()]``; ``y == count()`` is the row just
    past the last line, where ``x`` is always 0.
    """

    screen_rows: int
    screen_columns: int
    x: int = 0
    y: int = 0
    row_offset: int = 0
    column_offset: int = 0

    def __post_init__(self) -> None:
        if self.screen_rows < 1 or self.screen_columns < 1:
            raise ValueError(f"screen must be at least 1x1, got {self.screen_columns}x{self.screen_rows}")

    def move(self, command: Command, store: LineStore) -> None:
        """Apply one command, clamp the column, then recompute offsets.

        The column is clamped to the line the cursor lands on; it is not
        remembered across vertical moves.
        """
        if command is Command.QUIT or command is Command.UNRECOGNIZED:
            return

        if command is Command.UP:
            self._up()
        elif command is Command.DOWN:
            self._down(store)
        elif command is Command.LEFT:
            self._left(store)
        elif command is Command.RIGHT:
            self._right(store)
        elif command is Command.HOME:
            self.x = 0
        elif command is Command.END:
            if self.y < store.count():
                self.x = store.raw_length(self.y)
        elif command is Command.PAGE_UP:
            for _ in range(self.screen_rows):
                self._up()
        elif command is Command.PAGE_DOWN:
            for _ in range(self.screen_rows):
                self._down(store)

        self._clamp_column(store)
        self.scroll(store)

    def _up(self) -> None:
        self.y = max(self.y - 1, 0)

    def _down(self, store: LineStore) -> None:
        self.y = min(self.y + 1, store.count())

    def _left(self, store: LineStore) -> None:
        if self.x > 0:
            self.x -= 1
        elif self.y > 0:
            self.y -= 1
            self.x = store.raw_length(self.y)

    def _right(self, store: LineStore) -> None:
        if self.y >= store.count():
            return
        line_length = store.raw_length(self.y)
        if self.x < line_length:
            self.x += 1
        elif self.x == line_length:
            self.y += 1
            self.x = 0

    def _clamp_column(self, store: LineStore) -> None:
        if self.y < store.count():
            self.x = min(self.x, store.raw_length(self.y))
        else:
            self.x = 0

    def scroll(self, store: LineStore) -> None:
        """Re-derive viewport offsets so ``(x, y)`` is on screen.

        Idempotent: a second call without an intervening move changes nothing.
        Offsets depend only on the cursor and screen size; ``store`` is taken
        so callers can use it interchangeably with ``move``.
        """
        self.row_offset = min(self.row_offset, self.y)
        if self.y >= self.row_offset + self.screen_rows:
            self.row_offset = self.y - self.screen_rows + 1

        self.column_offset = min(self.column_offset, self.x)
        if self.x >= self.column_offset + self.screen_columns:
            self.column_offset = self.x - self.screen_columns + 1

    def screen_position(self) -> tuple[int, int]:
        """Return the cursor's 0-based ``(column, row)`` on screen."""
        return self.x - self.column_offset, self.y - self.row_offset
