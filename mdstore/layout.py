"""Page furniture shared by every screen: the banner and the breadcrumbs."""

from __future__ import annotations

from mdstore.render import Renderer

BANNER = "-----------------Mickey & Donald-----------------"
BREADCRUMBS_PREFIX = "Caminho: "


def banner(out: Renderer) -> None:
    """Write the project banner line."""
    out.render([BANNER])


def breadcrumbs(out: Renderer, path: str) -> None:
    """Write the path of the current page on a line of its own."""
    out.span(BREADCRUMBS_PREFIX)
    out.span(path)
    out.br()