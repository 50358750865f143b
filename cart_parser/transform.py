"""
Conversion of validated data rows into line items.
"""

from __future__ import annotations

from cart_parser.domain.models import LineItem
from cart_parser.domain.schema import DELIMITER
from cart_parser.infrastructure.id_source import IdSource


def transform_line(raw_line: str, id_source: IdSource) -> LineItem:
    """
    Build a line item from one data row.

    The row must already have passed validation: cells are trimmed and the
    price and quantity converted with `float` without further checks. A fresh
    identifier is requested from `id_source` for every call.
    """
    name, price, quantity = (cell.strip() for cell in raw_line.split(DELIMITER))
    return LineItem(
        id=id_source(),
        name=name,
        price=float(price),
        quantity=float(quantity),
    )


__all__ = ["transform_line"]
