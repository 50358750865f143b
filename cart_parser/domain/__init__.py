"""
Domain package for the cart parser.

Exports the column schema and the models shared by the validators, the
transformer and the orchestrator. Keep this package focused on data
definitions.
"""

from cart_parser.domain.models import (
    NO_COLUMN,
    LineItem,
    ParseResult,
    Violation,
    ViolationType,
)
from cart_parser.domain.schema import CART_SCHEMA, DELIMITER, ColumnSpec, ConstraintKind

__all__ = [
    "CART_SCHEMA",
    "ColumnSpec",
    "ConstraintKind",
    "DELIMITER",
    "LineItem",
    "NO_COLUMN",
    "ParseResult",
    "Violation",
    "ViolationType",
]
