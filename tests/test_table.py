import io

import pytest

from mdstore.render import BOLD_OFF, BOLD_ON, Renderer
from mdstore.table import Align, Cell, divider, render_table


def _draw(cells, width, height):
    stream = io.StringIO()
    out = Renderer(stream)
    render_table(out, cells, width, height)
    return stream.getvalue().splitlines(), out


def test_divider():
    stream = io.StringIO()
    out = Renderer(stream)
    divider(out, 5)
    assert stream.getvalue() == "-----\n"
    assert out.height == 1


def test_zero_width_reports_error():
    lines, _ = _draw([], 0, 3)
    assert lines == ["<Render Error>: Cannot have zero width table"]


def test_zero_height_reports_error():
    lines, _ = _draw([Cell("a", 1)], 1, 0)
    assert lines == ["<Render Error>: Cannot have zero height table"]


def test_left_aligned_cell_padded():
    lines, _ = _draw([Cell("ab", 4)], 1, 1)
    assert lines[1] == "| ab   |"


def test_right_aligned_cell_padded():
    lines, _ = _draw([Cell("ab", 4, align=Align.RIGHT)], 1, 1)
    assert lines[1] == "|   ab |"


def test_exact_cell():
    lines, _ = _draw([Cell("abc", 3)], 1, 1)
    assert lines[1] == "| abc |"


def test_long_cell_ends_with_ellipsis():
    lines, _ = _draw([Cell("abcdef", 3)], 1, 1)
    assert lines[1] == "| abc... |"


def test_cells_separated():
    lines, _ = _draw([Cell("a", 1), Cell("b", 1)], 2, 1)
    assert lines[1] == "| a | b |"


def test_borders_match_row_width():
    cells = [
        Cell("#", 1), Cell("ID", 3), Cell("Nome", 28), Cell("Valor", 12),
        Cell(" ", 1), Cell("1", 3, align=Align.RIGHT), Cell("Bolo", 28), Cell("R$ 1,50", 12),
    ]
    lines, out = _draw(cells, 4, 2)
    assert len(lines) == 5
    assert out.height == 5
    assert all(len(line) == len(lines[0]) for line in lines)
    assert set(lines[0]) == {"-"}
    assert lines[2] == lines[4] == lines[0]


def test_bold_cells_wrapped_in_markers():
    lines, out = _draw([Cell("ID", 2, bold=True)], 1, 1)
    assert lines[1] == "| " + BOLD_ON + "ID" + BOLD_OFF + " |"
    assert out.bold is False


def test_too_few_cells_rejected():
    with pytest.raises(ValueError):
        _draw([Cell("a", 1)], 2, 1)