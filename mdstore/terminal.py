"""Key codes and a raw, timed single-key reader for the terminal."""

from __future__ import annotations

import os
import sys
from typing import Callable, Optional

ESCAPE = 27
LEFT_SQUARED_BRACKET = 91
ENTER = 10
TAB = 9
DELETE = 127

# Returned when no key arrived before the read timed out.
NONE = -1
# Returned when the input was closed or could not be read.
CLOSED = -2

ESCAPE_MODE_OFFSET = 1024
ESCAPE_SEQUENCE_OFFSET = 2048

ARROW_UP = 65 + ESCAPE_SEQUENCE_OFFSET
ARROW_DOWN = 66 + ESCAPE_SEQUENCE_OFFSET
ARROW_RIGHT = 67 + ESCAPE_SEQUENCE_OFFSET
ARROW_LEFT = 68 + ESCAPE_SEQUENCE_OFFSET

BACK_BUTTON = DELETE + ESCAPE_MODE_OFFSET
SAVE = ESCAPE_MODE_OFFSET + ord("s")

# Tenths of a second a single read waits for a key.
READ_TIMEOUT = 5


def decode_key(read: Callable[[], int]) -> int:
    """Read one key through ``read``, folding escape sequences into one code.

    ``read`` returns the next byte value, ``NONE`` on timeout or ``CLOSED``.
    ``ESC [ x`` becomes ``x + ESCAPE_SEQUENCE_OFFSET``; ``ESC x`` becomes
    ``x + ESCAPE_MODE_OFFSET``; repeated escapes are skipped.
    """
    ch = read()
    while ch == ESCAPE:
        ch = read()
        if ch == ESCAPE:
            continue
        if ch == LEFT_SQUARED_BRACKET:
            return read() + ESCAPE_SEQUENCE_OFFSET
        ch += ESCAPE_MODE_OFFSET
    return ch


def _read_byte(fd: int) -> int:
    try:
        data = os.read(fd, 1)
    except OSError:
        return CLOSED
    if not data:
        return NONE
    return data[0]


def getch(fd: Optional[int] = None) -> int:
    """Read one key from a terminal without echo, waiting at most half a second.

    The terminal settings are restored before returning.
    """
    import termios

    if fd is None:
        fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    new[6][termios.VMIN] = 0
    new[6][termios.VTIME] = READ_TIMEOUT
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        return decode_key(lambda: _read_byte(fd))
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)