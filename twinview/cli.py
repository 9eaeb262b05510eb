"""Command-line front door for twinview.

Parses the optional file argument and loads the document text.
Then dispatches into the interactive navigation loop.
"""

from __future__ import annotations

import argparse
import logging
import sys
import termios
from collections.abc import Sequence
from pathlib import Path

from .config import ViewerConfig, load_viewer_config
from .cursor import CursorState
from .line_store import LineStore, split_document_lines
from .logs import configure_logging
from .loop import RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController, screen_size

logger = logging.getLogger(__name__)


def load_document(path: Path) -> list[str]:
    """Read ``path`` as strict UTF-8 and split it into lines.

    Bytes are decoded directly so a lone CR is kept as content rather than
    being turned into a line break by text-mode newline translation.
    """
    try:
        text = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("cannot read %s: %s", path, exc)
        raise SystemExit(f"twinview: cannot read {path}: {exc}") from exc
    return split_document_lines(text)


def run_viewer(lines: Sequence[str], config: ViewerConfig) -> None:
    """Build the core state for ``lines`` and run until the user quits."""
    store = LineStore.load(lines)
    columns, rows = screen_size()
    logger.info("screen %dx%d, %d lines", columns, rows, store.count())
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    run_main_loop(
        store,
        CursorState(screen_rows=rows, screen_columns=columns),
        TerminalController(stdin_fd, stdout_fd),
        stdin_fd,
        stdout_fd,
        RuntimeLoopTiming(poll_timeout_ms=config.poll_timeout_ms),
    )


def main() -> None:
    """Parse CLI arguments and launch the viewer.

    With no path the viewer starts on an empty document showing the welcome
    banner. Read failures abort before the terminal is switched to raw mode.
    """
    parser = argparse.ArgumentParser(description="View a text file in the terminal.")
    parser.add_argument("path", nargs="?", default=None, help="File to open. Omit for an empty document.")
    args = parser.parse_args()

    config = load_viewer_config()
    configure_logging(config.log_level)

    lines: list[str] = []
    if args.path is not None:
        lines = load_document(Path(args.path))
        logger.info("loaded %s (%d lines)", args.path, len(lines))

    try:
        run_viewer(lines, config)
    except (OSError, EOFError, termios.error) as exc:
        logger.error("terminal I/O failed: %s", exc)
        raise SystemExit(f"twinview: {exc}") from exc
    logger.info("exited cleanly")


if __name__ == "__main__":
    main()
