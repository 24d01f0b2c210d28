import os
import termios
import threading

import pytest

from mdstore.terminal import (
    ARROW_DOWN,
    ARROW_UP,
    BACK_BUTTON,
    ESCAPE_MODE_OFFSET,
    NONE,
    SAVE,
    decode_key,
    getch,
)


def reader(values):
    it = iter(values)
    return lambda: next(it)


def test_plain_key_passes_through():
    assert decode_key(reader([ord("a")])) == ord("a")


def test_arrow_sequence():
    assert decode_key(reader([27, 91, 65])) == ARROW_UP


def test_escape_mode_key():
    assert decode_key(reader([27, ord("s")])) == SAVE


def test_repeated_escapes_are_skipped():
    assert decode_key(reader([27, 27, 27, ord("s")])) == ESCAPE_MODE_OFFSET + ord("s")


def test_escape_delete_is_back_button():
    assert decode_key(reader([27, 127])) == BACK_BUTTON


def test_timeout_gives_none():
    assert decode_key(reader([NONE])) == NONE


def test_reads_only_what_it_needs():
    values = iter([27, 91, 66, ord("x")])
    assert decode_key(lambda: next(values)) == ARROW_DOWN
    assert list(values) == [ord("x")]


@pytest.fixture
def pty_pair():
    master, slave = os.openpty()
    yield master, slave
    os.close(master)
    os.close(slave)


def test_getch_reads_arrow_from_tty(pty_pair):
    master, slave = pty_pair
    before = termios.tcgetattr(slave)
    timer = threading.Timer(0.05, os.write, (master, b"\x1b[B"))
    timer.start()
    try:
        key = getch(slave)
    finally:
        timer.join()
    assert key == ARROW_DOWN
    assert termios.tcgetattr(slave) == before


def test_getch_times_out(pty_pair):
    _, slave = pty_pair
    assert getch(slave) == NONE