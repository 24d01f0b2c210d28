"""Number formatting and editable text fields driven by key codes."""

from __future__ import annotations

from mdstore.terminal import ARROW_LEFT, ARROW_RIGHT, DELETE

PRICE_PREFIX = "R$ "


class FieldFull(Exception):
    """Raised when a key reaches a text field that is already full."""


def int_to_numeral(x: int, buffer_size: int = 32) -> str:
    """Return the decimal digits of ``x``.

    At most ``buffer_size - 2`` characters are kept; when the number does not
    fit, its most significant digits (and the sign) are dropped.
    """
    if buffer_size < 2:
        raise ValueError("buffer_size must be at least 2")
    if x == 0:
        return "0"
    room = buffer_size - 2
    chars: list[str] = []
    n = abs(x)
    while n and len(chars) < room:
        n, digit = divmod(n, 10)
        chars.append(str(digit))
    if x < 0 and len(chars) < room:
        chars.append("-")
    return "".join(reversed(chars))


def format_price(digits: str) -> str:
    """Format a string of cent digits as a price, e.g. ``R$ 1,50``."""
    if len(digits) >= 3:
        return f"{PRICE_PREFIX}{digits[:-2]},{digits[-2:]}"
    return f"{PRICE_PREFIX}0,{digits.rjust(2, '0')}"


def is_text_key(ch: int) -> bool:
    """Whether a key code is a letter, digit, space or hyphen."""
    return (
        ord("0") <= ch <= ord("9")
        or ord("a") <= ch <= ord("z")
        or ord("A") <= ch <= ord("Z")
        or ch in (ord(" "), ord("-"))
    )


class TextInput:
    """A bounded single-line text field with a cursor."""

    def __init__(self, max_length: int = 128) -> None:
        self.max_length = max_length
        self.text = ""
        self.cursor = 0

    def handle(self, ch: int) -> bool:
        """Apply a key; return whether the key was acted on.

        Raises FieldFull when the field has reached its maximum length.
        """
        if len(self.text) >= self.max_length:
            raise FieldFull(f"field is full at {self.max_length} characters")
        if is_text_key(ch):
            self.text = self.text[: self.cursor] + chr(ch) + self.text[self.cursor :]
            self.cursor += 1
            return True
        if ch == DELETE:
            if self.cursor < 1:
                return False
            self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
            self.cursor -= 1
            return True
        if ch == ARROW_LEFT:
            if self.cursor > 0:
                self.cursor -= 1
            return True
        if ch == ARROW_RIGHT:
            if self.cursor < len(self.text):
                self.cursor += 1
            return True
        return False


class EditBuffer:
    """An unbounded editable line with a cursor that may sit after the last character."""

    def __init__(self) -> None:
        self.cursor = 0
        self._chars: list[str] = []

    @property
    def value(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def insert_at_cursor(self, ch: str) -> None:
        """Insert a character before the cursor position."""
        self._chars.insert(self.cursor, ch)

    def remove_at_cursor(self) -> None:
        """Remove the character under the cursor."""
        if not 0 <= self.cursor < len(self._chars):
            raise IndexError("no character under the cursor")
        del self._chars[self.cursor]

    def set_cursor(self, index: int) -> None:
        """Move the cursor; valid positions run from 0 to the length."""
        if index < 0 or index > len(self._chars):
            raise IndexError(f"cursor position {index} out of range")
        self.cursor = index

    def handle(self, ch: int) -> bool:
        """Apply a key; return whether it was acted on."""
        if is_text_key(ch):
            self.insert_at_cursor(chr(ch))
            self.set_cursor(self.cursor + 1)
            return True
        if ch == DELETE:
            if self.cursor < len(self._chars):
                self.remove_at_cursor()
            if self.cursor > 0:
                self.set_cursor(self.cursor - 1)
            return True
        if ch in (ARROW_LEFT, ARROW_RIGHT):
            step = -1 if ch == ARROW_LEFT else 1
            try:
                self.set_cursor(self.cursor + step)
            except IndexError:
                return False
            return True
        return False