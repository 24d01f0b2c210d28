"""A vertical menu picked with the arrow keys."""

from __future__ import annotations

from typing import Callable, Sequence

from mdstore.render import Renderer
from mdstore.terminal import ARROW_DOWN, ARROW_UP, BACK_BUTTON, ENTER, NONE


def _draw(out: Renderer, options: Sequence[str], selected: int, blink: bool) -> None:
    for index, option in enumerate(options):
        if index == selected:
            out.strong(True)
            out.span("> " if blink else "  ")
            out.span(option)
            out.br()
            out.strong(False)
        else:
            out.span("  ")
            out.span(option)
            out.br()


def choose(
    header: Callable[[], None],
    options: Sequence[str],
    footer: Callable[[], None],
    keys: Callable[[], int],
    out: Renderer,
) -> int:
    """Let the user pick one of ``options``.

    Returns the index of the chosen option, or ``BACK_BUTTON`` when the
    user asks to go back.
    """
    options = list(options)
    if not options:
        raise ValueError("a chooser needs at least one option")
    selected = 0
    blink = False
    while True:
        out.clear_screen()
        header()
        _draw(out, options, selected, blink)
        footer()

        ch = keys()
        if ch == ARROW_UP:
            selected = (selected - 1) % len(options)
            blink = True
        elif ch == ARROW_DOWN:
            selected = (selected + 1) % len(options)
            blink = True
        elif ch == NONE:
            blink = not blink
        elif ch == ENTER:
            return selected
        elif ch == BACK_BUTTON:
            return ch