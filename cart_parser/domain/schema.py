"""
Column schema for cart files.

The schema is plain data: an ordered tuple of column descriptors, each pairing
the expected header name with the constraint its cells must satisfy. Column
position is significant and maps directly to the line item fields.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, Field


class ConstraintKind(str, Enum):
    """Rule a cell value must satisfy."""

    NON_EMPTY_STRING = "non_empty_string"
    POSITIVE_NUMBER = "positive_number"


class ColumnSpec(BaseModel):
    """
    Expected column of a cart file.
    """

    name: str = Field(..., description="Exact header name of the column.")
    constraint: ConstraintKind = Field(..., description="Rule applied to every cell.")

    model_config = {
        "frozen": True,
    }


DELIMITER = ","

CART_SCHEMA: Tuple[ColumnSpec, ...] = (
    ColumnSpec(name="Product name", constraint=ConstraintKind.NON_EMPTY_STRING),
    ColumnSpec(name="Price", constraint=ConstraintKind.POSITIVE_NUMBER),
    ColumnSpec(name="Quantity", constraint=ConstraintKind.POSITIVE_NUMBER),
)


__all__ = ["CART_SCHEMA", "ColumnSpec", "ConstraintKind", "DELIMITER"]
