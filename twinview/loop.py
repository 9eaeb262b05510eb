"""Main interactive loop: paint, wait for one command, apply it.

The loop never consults input before the current frame has been flushed.
Quit is the only way out besides an I/O error propagating from a read or write.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .commands import Command, command_for_key
from .cursor import CursorState
from .input import DEFAULT_POLL_TIMEOUT_MS, wait_for_key
from .line_store import LineStore
from .render import FrameRenderer
from .terminal import TerminalController

logger = logging.getLogger(__name__)


class LoopState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    poll_timeout_ms: int = DEFAULT_POLL_TIMEOUT_MS


class NavigationLoop:
    """Two-state machine driving render/read/move cycles.

    ``read_command`` blocks until one decoded command is available; the loop
    owns ``cursor`` exclusively and lends it to the renderer read-only.
    """

    def __init__(
        self,
        store: LineStore,
        cursor: CursorState,
        renderer: FrameRenderer,
        read_command: Callable[[], Command],
    ) -> None:
        self.store = store
        self.cursor = cursor
        self.renderer = renderer
        self.read_command = read_command
        self.state = LoopState.RUNNING

    def step(self) -> LoopState:
        if self.state is LoopState.STOPPED:
            return self.state

        self.cursor.scroll(self.store)
        self.renderer.refresh(self.store, self.cursor)
        command = self.read_command()
        if command is Command.QUIT:
            self.state = LoopState.STOPPED
            logger.info("quit requested at line %d", self.cursor.y)
        else:
            self.cursor.move(command, self.store)
        return self.state

    def run(self) -> None:
        while self.step() is LoopState.RUNNING:
            pass


def run_main_loop(
    store: LineStore,
    cursor: CursorState,
    terminal: TerminalController,
    stdin_fd: int,
    stdout_fd: int,
    timing: RuntimeLoopTiming,
) -> None:
    """Run the viewer inside the terminal's raw-mode guard until quit."""

    def read_command() -> Command:
        return command_for_key(wait_for_key(stdin_fd, timing.poll_timeout_ms))

    navigation = NavigationLoop(store, cursor, FrameRenderer(stdout_fd), read_command)
    with terminal.raw_mode():
        navigation.run()
