"""
Cart total aggregation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from cart_parser.domain.models import LineItem


def calc_total(items: Iterable["LineItem"]) -> float:
    """
    Sum `price * quantity` over all items; 0 for an empty sequence.

    No rounding is applied, so callers comparing against decimal literals
    should allow for floating point error.
    """
    return sum((item.price * item.quantity for item in items), 0.0)


__all__ = ["calc_total"]
