"""Read-only document lines and their tab-expanded render form.

Lines are materialized once from document text and never mutated.
Render rows are derived from raw content alone so they can be rebuilt anytime.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

TAB_STOP = 8


def expand_tabs(raw: str, tab_stop: int = TAB_STOP) -> str:
    """Expand tabs to spaces ending on the next absolute tab stop.

    ``col`` tracks the 1-based position already emitted, so a tab at column 0
    becomes eight spaces while a tab at column 6 becomes two.
    """
    if "\t" not in raw:
        return raw

    out: list[str] = []
    col = 0
    for ch in raw:
        col += 1
        if ch != "\t":
            out.append(ch)
            continue
        out.append(" ")
        while col % tab_stop != 0:
            out.append(" ")
            col += 1
    return "".join(out)


def split_document_lines(text: str) -> list[str]:
    """Split document text on LF, dropping one trailing CR per line.

    A final newline does not produce an extra empty line and empty text has
    no lines at all.
    """
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass(frozen=True)
class Line:
    """One document row: raw content plus its display form."""

    raw: str
    render: str

    @classmethod
    def from_raw(cls, raw: str) -> Line:
        return cls(raw=raw, render=expand_tabs(raw))


class LineStore:
    """Ordered, load-once sequence of document lines."""

    def __init__(self, lines: tuple[Line, ...] = ()) -> None:
        self._lines = tuple(lines)

    @classmethod
    def load(cls, lines: Iterable[str]) -> LineStore:
        """Build a store from newline-stripped line strings."""
        return cls(tuple(Line.from_raw(line) for line in lines))

    def count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def _line(self, index: int) -> Line:
        # Negative indices would silently wrap; reject them like any other miss.
        if not 0 <= index < len(self._lines):
            raise IndexError(f"line index {index} out of range for {len(self._lines)} lines")
        return self._lines[index]

    def raw(self, index: int) -> str:
        return self._line(index).raw

    def render(self, index: int) -> str:
        return self._line(index).render

    def raw_length(self, index: int) -> int:
        """Return the raw column count of line ``index``."""
        return len(self._line(index).raw)
