"""
Exception types raised by the cart parser.

Validation problems are normally reported as `Violation` records by
`validate`; exceptions are reserved for the parse path, which either returns a
complete result or fails.
"""

from __future__ import annotations


class CartParserError(Exception):
    """Base class for cart parser failures."""


class ValidationFailed(CartParserError):
    """
    Raised by `parse` when the document has at least one violation.

    The message is fixed and the violations are not attached; call
    `validate` on the same text to find out what is wrong.
    """

    MESSAGE = "Validation failed!"

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)


__all__ = ["CartParserError", "ValidationFailed"]
