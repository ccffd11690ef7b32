"""Non-blocking single-keypress reader for the terminal frontend.

Arrow keys and ``w``/``a``/``d`` move, ``s`` scrambles. Works on macOS /
Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "s": "scramble",
    "S": "scramble",
    "n": "hint",
    "N": "hint",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
}

# ESC [ A/B/C/D
_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

# msvcrt prefixes arrows with 0xe0 (or 0x00)
_WIN_ARROW_MAP: dict[str, str] = {
    "H": "up",
    "P": "down",
    "M": "right",
    "K": "left",
}


def _resolve(ch: str) -> str:
    return _KEY_MAP.get(ch, "")


def _poll_windows(timeout: float) -> str | None:
    import msvcrt  # type: ignore[import-not-found]
    import time

    end = time.monotonic() + timeout
    while time.monotonic() < end:
        if msvcrt.kbhit():
            ch = msvcrt.getwch()
            if ch in ("\x00", "\xe0"):
                return _WIN_ARROW_MAP.get(msvcrt.getwch(), "")
            if ch == "\x1b":
                return "quit"
            return _resolve(ch)
        time.sleep(0.005)
    return None


def _poll_unix(timeout: float) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None

        # os.read keeps the rest of an escape sequence visible to select()
        ch = os.read(fd, 1).decode("utf-8", errors="ignore")
        if ch != "\x1b":
            return _resolve(ch)

        r2, _, _ = select.select([fd], [], [], 0.05)
        if not r2:
            return "quit"  # bare Escape
        if os.read(fd, 1).decode("utf-8", errors="ignore") != "[":
            return ""
        r3, _, _ = select.select([fd], [], [], 0.05)
        if not r3:
            return ""
        return _ARROW_MAP.get(os.read(fd, 1).decode("utf-8", errors="ignore"), "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def poll_key(timeout: float) -> str | None:
    """Wait up to *timeout* seconds for a keypress.

    Returns ``None`` when nothing was pressed, otherwise one of
    ``"up"``, ``"down"``, ``"left"``, ``"right"``, ``"scramble"``,
    ``"hint"``, ``"quit"`` or ``""`` for an unmapped key.
    """
    if os.name == "nt":
        return _poll_windows(timeout)
    return _poll_unix(timeout)
