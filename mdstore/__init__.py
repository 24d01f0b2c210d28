"""Keyboard-driven terminal storefront with menus, forms and a product table."""

__version__ = "0.1.0"
__all__ = ["__version__"]