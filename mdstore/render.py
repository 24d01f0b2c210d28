"""Line-oriented rendering of text, bold markers and prices to a stream."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from mdstore.textinput import format_price, int_to_numeral

CLEAR_SCREEN = "\x1b[1;1H\x1b[2J"
BOLD_ON = "\x1b[1m"
BOLD_OFF = "\x1b[0m"


class Renderer:
    """Writes page elements to a stream and tracks the page height."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.height = 0
        self.bold = False

    def clear_screen(self) -> None:
        """Clear the terminal and reset the page height."""
        self.stream.write(CLEAR_SCREEN)
        self.height = 0

    def br(self) -> None:
        """End the current line."""
        self.stream.write("\n")
        self.height += 1

    def strong(self, open: bool) -> None:
        """Switch bold text on or off."""
        self.bold = bool(open)
        self.stream.write(BOLD_ON if open else BOLD_OFF)

    def span(self, text: str) -> None:
        self.stream.write(text)

    def single_char(self, letter: str) -> None:
        self.stream.write(letter[:1])

    def p(self, line: str) -> None:
        """Write a line followed by a line break."""
        self.span(line)
        self.br()

    def render(self, lines: Iterable[str]) -> None:
        """Write each line as a paragraph."""
        for line in lines:
            self.p(line)

    def currency(self, amount: int) -> None:
        """Write an amount given in cents as a price in reais."""
        self.currency_digits(int_to_numeral(amount, 32))

    def currency_digits(self, digits: str) -> None:
        """Write a string of cent digits as a price in reais."""
        self.span(format_price(digits))

    def move_cursor(self, row: int, column: int) -> None:
        """Move the terminal cursor to a 1-based position."""
        if row < 1 or column < 1:
            raise ValueError(f"cursor position must be positive: {row}, {column}")
        self.stream.write(f"\x1b[{row};{column}H")