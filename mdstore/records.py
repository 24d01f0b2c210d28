"""Product records and their fixed-size binary file format."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import Union

LABEL_SIZE = 128
RECORD = struct.Struct(f"<ii{LABEL_SIZE}s")


@dataclass
class Product:
    """A product for sale; ``price`` is in cents."""

    id: int = 0
    price: int = 0
    label: str = ""


def pack_product(product: Product) -> bytes:
    """Encode a product as one fixed-size record."""
    label = product.label.encode("utf-8")
    if len(label) >= LABEL_SIZE:
        raise ValueError(f"label longer than {LABEL_SIZE - 1} bytes")
    return RECORD.pack(product.id, product.price, label)


def _unpack(fields: tuple[int, int, bytes]) -> Product:
    product_id, price, raw_label = fields
    label = raw_label.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return Product(product_id, price, label)


def unpack_products(data: bytes) -> list[Product]:
    """Decode consecutive records; trailing bytes short of a record are ignored."""
    whole = len(data) - len(data) % RECORD.size
    return [_unpack(fields) for fields in RECORD.iter_unpack(data[:whole])]


def load_products(path: Union[str, PathLike]) -> list[Product]:
    """Read every product stored in a file."""
    with open(path, "rb") as handle:
        return unpack_products(handle.read())