"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing for arrow, Home/End and paging keys.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
DEFAULT_POLL_TIMEOUT_MS = 500
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_CSI_TILDE_KEYS: dict[bytes, str] = {
    b"1": "HOME",
    b"7": "HOME",
    b"4": "END",
    b"8": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
    b"3": "DELETE",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _decode_csi(fd: int) -> str:
    """Decode the remainder of an ``ESC [`` sequence."""
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[seq]
    if seq in _CSI_TILDE_KEYS:
        terminator = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if terminator == b"~":
            return _CSI_TILDE_KEYS[seq]
        # Modified keys (``ESC [ 1 ; 5 C`` and friends) are not bound.
        return "ESC"
    return "ESC"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read and decode one key, or return ``""`` when the poll times out.

    Raises ``EOFError`` once stdin is closed so callers cannot spin on a dead
    descriptor.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            raise EOFError("stdin closed")

    if ch == b"\x11":
        return "CTRL_Q"
    if ch == b"\x03":
        return "CTRL_C"
    if ch == b"\t":
        return "TAB"
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"
    if ch == b"\r":
        return "ENTER_CR"
    if ch == b"\n":
        return "ENTER_LF"

    if ch != b"\x1b":
        return ch.decode("utf-8", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"[":
        return _decode_csi(fd)
    if seq == b"O":
        # SS3 form sent by terminals in application cursor mode.
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ESC"
        return _CSI_FINAL_KEYS.get(final, "ESC")
    _PENDING_BYTES.append(seq)
    return "ESC"


def wait_for_key(fd: int, poll_timeout_ms: int = DEFAULT_POLL_TIMEOUT_MS) -> str:
    """Block until one key arrives, waking every ``poll_timeout_ms``."""
    while True:
        key = read_key(fd, timeout_ms=poll_timeout_ms)
        if key:
            return key
