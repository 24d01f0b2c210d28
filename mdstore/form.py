"""A multi-field input form with text, number and money fields."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from mdstore.render import Renderer
from mdstore.terminal import (
    ARROW_DOWN,
    ARROW_UP,
    BACK_BUTTON,
    DELETE,
    ENTER,
    NONE,
    SAVE,
    TAB,
)
from mdstore.textinput import FieldFull, TextInput

INPUT_MAX_LENGTH = 128
CURSOR_CHAR = "_"


class FieldType(enum.IntEnum):
    TEXT = 0
    MONEY = 1
    NUMBER = 2


@dataclass
class Field:
    """One form field; ``value`` is filled in when the form is saved."""

    label: str
    type: FieldType = FieldType.TEXT
    value: Optional[Union[str, int]] = None


def _digits_value(text: str) -> int:
    value = 0
    for char in text:
        value = value * 10 + ord(char) - ord("0")
    return value


def _draw_field(out: Renderer, field: Field, entry: TextInput, focused: bool, blink: bool) -> None:
    if focused:
        out.strong(True)
    out.span("| ")
    out.span(">> " if focused else "   ")
    out.span(field.label)
    out.span(": ")
    if focused:
        out.strong(False)

    show_cursor = focused and blink
    if field.type is FieldType.MONEY:
        out.currency_digits(entry.text)
        if show_cursor:
            out.single_char(CURSOR_CHAR)
    else:
        for index, char in enumerate(entry.text):
            out.single_char(CURSOR_CHAR if show_cursor and index == entry.cursor else char)
        if show_cursor and len(entry.text) == entry.cursor:
            out.single_char(CURSOR_CHAR)
    out.br()


def _draw(
    out: Renderer,
    header: Callable[[], None],
    footer: Callable[[], None],
    title: str,
    fields: Sequence[Field],
    inputs: Sequence[TextInput],
    focus: int,
    blink: bool,
) -> None:
    out.clear_screen()
    header()
    out.p("| ")
    out.strong(True)
    out.span("| Adição de ")
    out.span(title)
    out.br()
    out.strong(False)
    out.p("| Preencha os campos abaixo:")
    out.p("| ")
    for index, (field, entry) in enumerate(zip(fields, inputs)):
        _draw_field(out, field, entry, index == focus, blink)
    out.p("| ")
    out.p("| ESC+S: Salvar")
    out.p("| ESC+BACK: Voltar")
    footer()


def _money_key(entry: TextInput, ch: int) -> bool:
    """Apply a key to a money field; return True when it was a digit."""
    if ord("0") <= ch <= ord("9"):
        if len(entry.text) < entry.max_length:
            entry.text += chr(ch)
            entry.cursor = len(entry.text)
        return True
    if ch == DELETE and entry.text:
        entry.text = entry.text[:-1]
        entry.cursor = len(entry.text)
    return False


def run_form(
    header: Callable[[], None],
    fields: Sequence[Field],
    title: str,
    footer: Callable[[], None],
    keys: Callable[[], int],
    out: Renderer,
) -> bool:
    """Let the user fill in ``fields``.

    Returns True and sets each field's ``value`` when the form is saved,
    or False, leaving the fields untouched, when the user goes back.
    """
    fields = list(fields)
    if not fields:
        raise ValueError("a form needs at least one field")
    inputs = [TextInput(INPUT_MAX_LENGTH) for _ in fields]
    last = len(fields) - 1
    focus = 0
    blink = False

    while True:
        _draw(out, header, footer, title, fields, inputs, focus, blink)
        ch = keys()
        blink = not blink if ch == NONE else True

        entry = inputs[focus]
        if fields[focus].type is FieldType.MONEY:
            if _money_key(entry, ch):
                continue
        else:
            try:
                entry.handle(ch)
            except FieldFull:
                pass

        if ch == ARROW_UP:
            focus = last if focus == 0 else focus - 1
        elif ch in (SAVE, ENTER) and focus >= last:
            break
        elif ch in (SAVE, ENTER, TAB, ARROW_DOWN):
            focus = 0 if focus == last else focus + 1
        elif ch == BACK_BUTTON:
            return False
        else:
            continue
        inputs[focus].cursor = len(inputs[focus].text)
        blink = False

    for field, entry in zip(fields, inputs):
        if field.type is FieldType.TEXT:
            field.value = entry.text
        else:
            field.value = _digits_value(entry.text)
    return True