"""
Validation package for the cart parser.

Re-exports the cell, header, row and document checks so callers can import
them from `cart_parser.validation` directly.
"""

from cart_parser.validation.cells import check_cell, create_error
from cart_parser.validation.content import iter_data_lines, split_document, validate
from cart_parser.validation.records import check_header, check_row

__all__ = [
    "check_cell",
    "check_header",
    "check_row",
    "create_error",
    "iter_data_lines",
    "split_document",
    "validate",
]
