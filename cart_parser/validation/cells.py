"""
Single cell checks.

Each constraint kind maps to a predicate and a message template; `check_cell`
dispatches on the kind rather than on per-column classes.
"""

from __future__ import annotations

import math
import re
from typing import Callable, Dict, Optional, Tuple

from cart_parser.domain.models import NO_COLUMN, Violation, ViolationType
from cart_parser.domain.schema import ConstraintKind


def create_error(type: ViolationType, row: int, column: int, message: str) -> Violation:
    """Build one violation record."""
    return Violation(type=ViolationType(type), row=row, column=column, message=message)


def _is_non_empty_string(raw_value: str) -> bool:
    return raw_value.strip() != ""


_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _is_positive_number(raw_value: str) -> bool:
    # Plain ASCII decimals only; float() alone also takes "1_000" and non-ASCII digits.
    if not _DECIMAL.fullmatch(raw_value.strip()):
        return False
    value = float(raw_value)
    return math.isfinite(value) and value > 0


_RULES: Dict[ConstraintKind, Tuple[Callable[[str], bool], str]] = {
    ConstraintKind.NON_EMPTY_STRING: (
        _is_non_empty_string,
        'Expected cell to be a nonempty string but received "{value}".',
    ),
    ConstraintKind.POSITIVE_NUMBER: (
        _is_positive_number,
        'Expected cell to be a positive number but received "{value}".',
    ),
}


def check_cell(
    kind: ConstraintKind,
    raw_value: str,
    row: int = 0,
    column: int = NO_COLUMN,
) -> Optional[Violation]:
    """
    Check `raw_value` against one constraint.

    Returns None when the value is acceptable, otherwise a `cell` violation
    positioned at `row`/`column`.
    """
    predicate, template = _RULES[ConstraintKind(kind)]
    if predicate(raw_value):
        return None
    return create_error(ViolationType.CELL, row, column, template.format(value=raw_value))


__all__ = ["check_cell", "create_error"]
