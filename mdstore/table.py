"""Bordered text tables with fixed-width, aligned cells."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

from mdstore.render import Renderer

ELLIPSIS = "..."


class Align(enum.IntEnum):
    LEFT = 0
    RIGHT = 1


@dataclass
class Cell:
    """A table cell; ``length`` is the column width it is drawn at."""

    text: str
    length: int
    bold: bool = False
    align: Align = Align.LEFT


def divider(out: Renderer, width: int) -> None:
    """Write a horizontal rule ``width`` characters long."""
    out.span("-" * width)
    out.br()


def _cell_text(cell: Cell) -> str:
    size = len(cell.text)
    if size < cell.length:
        padding = " " * (cell.length - size)
        if cell.align is Align.RIGHT:
            return padding + cell.text
        return cell.text + padding
    if size == cell.length:
        return cell.text
    return cell.text[: max(size - 3, 0)] + ELLIPSIS


def render_table(out: Renderer, cells: Sequence[Cell], width: int, height: int) -> None:
    """Draw ``height`` rows of ``width`` cells, laid out row after row in ``cells``.

    The column widths come from the cells of the first row.
    """
    if width == 0:
        out.p("<Render Error>: Cannot have zero width table")
        return
    if height == 0:
        out.p("<Render Error>: Cannot have zero height table")
        return
    if len(cells) < width * height:
        raise ValueError(f"{width}x{height} table needs {width * height} cells, got {len(cells)}")

    line_width = (width - 1) * 3 + 4
    out.span("-")
    for cell in cells[:width]:
        out.span("-" + "-" * cell.length + "--")
        line_width += cell.length
    out.br()

    for row in range(height):
        out.span("| ")
        for column in range(width):
            cell = cells[row * width + column]
            if cell.bold:
                out.strong(True)
            out.span(_cell_text(cell))
            if cell.bold:
                out.strong(False)
            if column + 1 < width:
                out.span(" | ")
        out.span(" |")
        out.br()
        divider(out, line_width)