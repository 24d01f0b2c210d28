"""The session shared by pages and the loop that keeps a page on screen."""

from __future__ import annotations

from os import PathLike
from typing import Callable, Optional, Union

from mdstore.render import Renderer
from mdstore.terminal import getch

DEFAULT_DATA_PATH = "../../../../data/products.dat"


class Session:
    """What a page needs to run: where to draw, where keys come from, where data lives."""

    def __init__(
        self,
        out: Optional[Renderer] = None,
        keys: Optional[Callable[[], int]] = None,
        data_path: Union[str, PathLike] = DEFAULT_DATA_PATH,
    ) -> None:
        self.out = out if out is not None else Renderer()
        self.keys = keys if keys is not None else getch
        self.data_path = data_path
        # Products loaded once and kept for the rest of the session.
        self.products: Optional[list] = None


def go_to(page: Callable[[Session], object], session: Session) -> None:
    """Show ``page`` again and again until it asks to go back by returning a true value."""
    while not page(session):
        pass