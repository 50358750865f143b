from __future__ import annotations

import pytest

from cart_parser.domain.models import NO_COLUMN, ViolationType
from cart_parser.domain.schema import ConstraintKind
from cart_parser.validation.cells import check_cell, create_error


class TestNonEmptyString:
    def test_accepts_text(self):
        assert check_cell(ConstraintKind.NON_EMPTY_STRING, "Test") is None

    @pytest.mark.parametrize("raw", ["", "   ", "\t"])
    def test_rejects_blank_values(self, raw: str):
        violation = check_cell(ConstraintKind.NON_EMPTY_STRING, raw)

        assert violation is not None
        assert violation.type is ViolationType.CELL
        assert violation.message == f'Expected cell to be a nonempty string but received "{raw}".'


class TestPositiveNumber:
    @pytest.mark.parametrize("raw", ["9.00", "3", "0.01", " 2 ", "1e3"])
    def test_accepts_positive_numbers(self, raw: str):
        assert check_cell(ConstraintKind.POSITIVE_NUMBER, raw) is None

    @pytest.mark.parametrize(
        "raw", ["-3", "0", "0.00", "abc", "", "nan", "inf", "3,5", "1_000", "\u0661\u0662", "0x10"]
    )
    def test_rejects_non_positive_or_non_numeric(self, raw: str):
        violation = check_cell(ConstraintKind.POSITIVE_NUMBER, raw)

        assert violation is not None
        assert violation.message == f'Expected cell to be a positive number but received "{raw}".'


def test_check_cell_uses_given_position():
    violation = check_cell(ConstraintKind.POSITIVE_NUMBER, "-1", row=4, column=2)

    assert violation is not None
    assert (violation.row, violation.column) == (4, 2)


def test_check_cell_defaults_to_no_position():
    violation = check_cell(ConstraintKind.NON_EMPTY_STRING, "")

    assert violation is not None
    assert (violation.row, violation.column) == (0, NO_COLUMN)


def test_create_error_builds_violation():
    violation = create_error(ViolationType.ROW, 2, NO_COLUMN, "bad row")

    assert violation.type is ViolationType.ROW
    assert violation.row == 2
    assert violation.column == NO_COLUMN
    assert violation.message == "bad row"


def test_create_error_accepts_type_name():
    violation = create_error("header", 0, 0, "bad header")  # type: ignore[arg-type]

    assert violation.type is ViolationType.HEADER
