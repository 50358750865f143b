"""
Domain models for the cart parser.

Defines the diagnostic record produced by validation and the line items and
parse result produced by a successful parse. All models are immutable.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, Field, computed_field

from cart_parser.aggregator import calc_total

# Column index used for violations that concern a whole row.
NO_COLUMN = -1


class ViolationType(str, Enum):
    HEADER = "header"
    ROW = "row"
    CELL = "cell"


class Violation(BaseModel):
    """
    One rule failure found while validating a cart document.
    """

    type: ViolationType = Field(..., description="Which check produced the violation.")
    row: int = Field(..., description="0 for the header, 1-based position below it otherwise.")
    column: int = Field(..., description=f"0-based column index, or {NO_COLUMN} for the whole row.")
    message: str = Field(..., description="Human-readable explanation.")

    model_config = {
        "frozen": True,
    }


class LineItem(BaseModel):
    """
    A single cart entry built from one validated data row.
    """

    id: str = Field(..., description="Opaque identifier from the id source.")
    name: str = Field(..., description="Product name.")
    price: float = Field(..., description="Unit price.")
    quantity: float = Field(..., description="Number of units.")

    model_config = {
        "frozen": True,
    }

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


class ParseResult(BaseModel):
    """
    Line items of a parsed cart together with their total.

    The total is derived from the items on every access and is never stored
    separately, so it always matches the items it is reported with.
    """

    items: Tuple[LineItem, ...] = Field(default=(), description="Items in file order.")

    model_config = {
        "frozen": True,
    }

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> float:
        return calc_total(self.items)


__all__ = ["LineItem", "NO_COLUMN", "ParseResult", "Violation", "ViolationType"]
