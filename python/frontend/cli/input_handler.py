"""Single-keypress reader for the terminal frontend.

Maps arrow keys and WASD to the direction the *tile* slides, plus a few
control keys.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    return _KEY_MAP.get(ch.lower(), "")


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    end = None if timeout is None else time.monotonic() + timeout
    while end is None or time.monotonic() < end:
        if msvcrt.kbhit():
            ch = msvcrt.getwch()
            if ch in ("\x00", "\xe0"):  # arrow prefix
                return {"H": "up", "P": "down", "M": "right", "K": "left"}.get(
                    msvcrt.getwch(), ""
                )
            if ch == "\x1b":
                return "quit"
            return _resolve(ch)
        time.sleep(0.02)
    return None


def _read_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def _next(wait: float | None) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = _next(timeout)
        if ch is None:
            return None
        # Arrow keys arrive as ESC [ A/B/C/D; a bare ESC quits.
        if ch == "\x1b":
            if _next(0.1) != "[":
                return "quit"
            return _ARROW_MAP.get(_next(0.1) or "", "")
        return _resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def get_key_timeout(timeout: float | None) -> str | None:
    """Read one keypress and return its action string.

    Returns ``None`` if nothing was pressed within *timeout* seconds
    (``None`` blocks).  Action strings are ``"up"``, ``"down"``,
    ``"left"``, ``"right"``, ``"quit"``, ``"restart"``, ``"enter"``, or
    ``""`` for anything unmapped.
    """
    if os.name == "nt":
        return _read_windows(timeout)
    return _read_unix(timeout)


def get_key() -> str:
    """Block until a key is pressed and return its action string."""
    key = get_key_timeout(None)
    return key or ""
