"""
Header and data row checks.

The header check stops at the first mismatching column and reports at most one
violation per document. Data rows report every failing cell. Both behaviours
are relied on by callers that display diagnostics, so keep them as they are.
"""

from __future__ import annotations

from typing import List, Sequence

from cart_parser.domain.models import NO_COLUMN, Violation, ViolationType
from cart_parser.domain.schema import CART_SCHEMA
from cart_parser.validation.cells import check_cell, create_error

HEADER_ROW = 0


def check_header(header_cells: Sequence[str]) -> List[Violation]:
    """
    Compare header names with the schema, left to right, exact match.

    Missing header cells compare as empty strings; cells past the last schema
    column are ignored.
    """
    for column, spec in enumerate(CART_SCHEMA):
        actual = header_cells[column] if column < len(header_cells) else ""
        if actual != spec.name:
            message = f'Expected header to be named "{spec.name}" but received {actual}.'
            return [create_error(ViolationType.HEADER, HEADER_ROW, column, message)]
    return []


def check_row(row_index: int, raw_cells: Sequence[str]) -> List[Violation]:
    """
    Check the width of a data row, then every cell in column order.
    """
    expected = len(CART_SCHEMA)
    if len(raw_cells) != expected:
        message = f"Expected row to have {expected} cells but received {len(raw_cells)}."
        return [create_error(ViolationType.ROW, row_index, NO_COLUMN, message)]

    violations: List[Violation] = []
    for column, (spec, raw_value) in enumerate(zip(CART_SCHEMA, raw_cells)):
        violation = check_cell(spec.constraint, raw_value, row=row_index, column=column)
        if violation is not None:
            violations.append(violation)
    return violations


__all__ = ["HEADER_ROW", "check_header", "check_row"]
