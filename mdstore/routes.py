"""The menu pages of the store and the command that starts them."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from mdstore.chooser import choose
from mdstore.layout import banner, breadcrumbs
from mdstore.navigation import DEFAULT_DATA_PATH, Session, go_to
from mdstore.products_page import products_page
from mdstore.terminal import BACK_BUTTON

INDEX_OPTIONS = ("1. Administração", "2. Fazer Pedido", "3. Documentação")
ADMIN_OPTIONS = ("1. Produtos", "2. Usuários")


def _header(session: Session, path: str):
    def header() -> None:
        breadcrumbs(session.out, path)
        banner(session.out)

    return header


def index_page(session: Session) -> bool:
    """The main menu; return True when the user goes back."""
    option = choose(_header(session, "/"), INDEX_OPTIONS, lambda: None, session.keys, session.out)
    if option == BACK_BUTTON:
        return True
    if option == 0:
        go_to(admin_page, session)
    elif option == 1:
        go_to(order_page, session)
    return False


def admin_page(session: Session) -> bool:
    """The administration menu; return True when the user goes back."""
    option = choose(
        _header(session, "/administração/"), ADMIN_OPTIONS, lambda: None, session.keys, session.out
    )
    if option == BACK_BUTTON:
        return True
    if option == 0:
        go_to(products_page, session)
    elif option == 1:
        go_to(users_page, session)
    return False


def order_page(session: Session) -> bool:
    """The order page has nothing to show yet and goes straight back."""
    return True


def users_page(session: Session) -> bool:
    """The user administration page has nothing to show yet and goes straight back."""
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the store at its main menu."""
    parser = argparse.ArgumentParser(prog="mdstore", description="Terminal store front.")
    parser.add_argument(
        "--data",
        default=DEFAULT_DATA_PATH,
        help="file holding the product records",
    )
    args = parser.parse_args(argv)
    session = Session(data_path=args.data)
    go_to(index_page, session)
    return 0