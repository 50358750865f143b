"""
Cart Parser - validation and parsing of shopping cart CSV files.

A cart file has a `Product name,Price,Quantity` header followed by one
comma-separated row per product. This package provides:

- `validate`, which reports every header, row and cell violation
- `parse`, which turns a valid file into line items and a total
- `CartParser`, which binds injectable file reading and id generation
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from cart_parser.aggregator import calc_total
from cart_parser.config import Settings, get_settings
from cart_parser.domain import (
    CART_SCHEMA,
    ColumnSpec,
    ConstraintKind,
    LineItem,
    ParseResult,
    Violation,
    ViolationType,
)
from cart_parser.errors import CartParserError, ValidationFailed
from cart_parser.orchestrator import CartParser, parse
from cart_parser.transform import transform_line
from cart_parser.utils.logging import configure_logging, get_logger
from cart_parser.validation import check_cell, check_header, check_row, create_error, validate

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Parsing
    "CartParser",
    "parse",
    "validate",
    "create_error",
    "transform_line",
    "calc_total",
    # Validators
    "check_cell",
    "check_header",
    "check_row",
    # Domain
    "CART_SCHEMA",
    "ColumnSpec",
    "ConstraintKind",
    "LineItem",
    "ParseResult",
    "Violation",
    "ViolationType",
    # Errors
    "CartParserError",
    "ValidationFailed",
    # Logging
    "configure_logging",
    "get_logger",
]
