"""The product administration page: search box, actions and product table."""

from __future__ import annotations

import enum
from typing import Optional, Sequence

from mdstore.form import Field, FieldType, run_form
from mdstore.layout import banner, breadcrumbs
from mdstore.navigation import Session
from mdstore.records import Product, load_products
from mdstore.table import Align, Cell, render_table
from mdstore.terminal import ARROW_DOWN, ARROW_UP, BACK_BUTTON, ENTER, NONE
from mdstore.textinput import FieldFull, TextInput, format_price, int_to_numeral

BREADCRUMBS = "/administração/produtos/"
QUERY_MAX_LENGTH = 128
CURSOR_CHAR = "_"
COLUMNS = 4

MARKER_WIDTH = 1
ID_WIDTH = 3
NAME_WIDTH = 28
PRICE_WIDTH = 12

# Index of the "new product" action.
ACTION_NEW = 0


class _Focus(enum.IntEnum):
    SEARCH = 0
    BUTTON = 1
    TABLE = 2


def product_cells(products: Sequence[Product], selected: Optional[int] = None) -> list[Cell]:
    """Build the table cells for ``products``, a header row first.

    The row at index ``selected`` is drawn bold with a marker; ``None`` marks none.
    """
    cells = [
        Cell("#", MARKER_WIDTH, bold=True),
        Cell("ID", ID_WIDTH, bold=True),
        Cell("Nome", NAME_WIDTH, bold=True),
        Cell("Valor", PRICE_WIDTH, bold=True),
    ]
    for index, product in enumerate(products):
        bold = index == selected
        price = format_price(int_to_numeral(product.price, 32))
        cells += [
            Cell(">" if bold else " ", MARKER_WIDTH, bold=bold),
            Cell(int_to_numeral(product.id, 32), ID_WIDTH, bold=bold, align=Align.RIGHT),
            Cell(product.label, NAME_WIDTH, bold=bold),
            Cell(price, PRICE_WIDTH, bold=bold),
        ]
    return cells


def _ensure_products(session: Session) -> list[Product]:
    if session.products is None:
        try:
            session.products = load_products(session.data_path)
        except OSError:
            session.products = []
    return session.products


def _draw(
    session: Session,
    products: list[Product],
    query: TextInput,
    focus: _Focus,
    blink: bool,
    item_selected: int,
) -> None:
    out = session.out
    out.clear_screen()
    breadcrumbs(out, BREADCRUMBS)
    banner(out)

    out.strong(True)
    out.p("Pesquisar:")
    out.strong(False)
    if focus is _Focus.SEARCH:
        out.span(">> ")
        for index, char in enumerate(query.text):
            out.single_char(CURSOR_CHAR if blink and index == query.cursor else char)
        if blink and len(query.text) == query.cursor:
            out.single_char(CURSOR_CHAR)
    else:
        out.span("   ")
        out.span(query.text)
    out.br()

    out.strong(True)
    out.p("Ações:")
    out.strong(False)
    out.p("> Novo Produto" if focus is _Focus.BUTTON else "  Novo Produto")

    out.strong(True)
    out.span(f"Tabela ({len(products)}):")
    out.br()
    out.strong(False)

    selected = item_selected if focus is _Focus.TABLE else None
    render_table(out, product_cells(products, selected), COLUMNS, len(products) + 1)


def _new_product(session: Session, products: list[Product]) -> None:
    out = session.out
    name = Field("Nome", FieldType.TEXT)
    price = Field("Preço", FieldType.MONEY)

    def header() -> None:
        breadcrumbs(out, BREADCRUMBS)
        banner(out)

    run_form(header, [name, price], "Produtos", lambda: None, session.keys, out)
    products.append(
        Product(
            id=len(products) + 1,
            price=price.value if isinstance(price.value, int) else 0,
            label=name.value if isinstance(name.value, str) else "",
        )
    )


def products_page(session: Session) -> bool:
    """Run the product page; return True when the user goes back."""
    products = _ensure_products(session)
    query = TextInput(QUERY_MAX_LENGTH)
    focus = _Focus.SEARCH
    blink = False
    item_selected = 0

    while True:
        _draw(session, products, query, focus, blink, item_selected)
        ch = session.keys()
        blink = not blink if ch == NONE else True

        if ch == BACK_BUTTON:
            return True

        if focus is _Focus.SEARCH:
            if ch == ARROW_DOWN:
                focus = _Focus.BUTTON
                continue
            try:
                query.handle(ch)
            except FieldFull:
                pass
        elif focus is _Focus.BUTTON:
            if ch == ENTER and item_selected == ACTION_NEW:
                _new_product(session, products)
            elif ch in (ENTER, ARROW_DOWN):
                focus = _Focus.TABLE
            elif ch == ARROW_UP:
                focus = _Focus.SEARCH
        else:
            if ch in (ENTER, ARROW_DOWN):
                if item_selected + 1 < len(products):
                    item_selected += 1
            elif ch == ARROW_UP:
                if item_selected == 0:
                    focus = _Focus.BUTTON
                else:
                    item_selected -= 1