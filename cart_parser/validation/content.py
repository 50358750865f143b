"""
Whole document validation.

`validate` never raises; it returns every violation found, in document order.
Deciding whether violations are fatal is left to the caller.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from cart_parser.domain.models import Violation
from cart_parser.domain.schema import DELIMITER
from cart_parser.validation.records import check_header, check_row


def is_blank(line: str) -> bool:
    return line.strip() == ""


def split_document(raw_text: str) -> Tuple[str, List[str]]:
    """
    Split raw text into its header line and the lines below it.

    Records end at "\n" (optionally preceded by "\r") and nowhere else. An
    empty document yields an empty header and no data lines.
    """
    lines = [line[:-1] if line.endswith("\r") else line for line in raw_text.split("\n")]
    return lines[0], lines[1:]


def iter_data_lines(lines: List[str]) -> Iterator[Tuple[int, str]]:
    """
    Yield `(row_number, line)` for every non-blank data line.

    Row numbers are 1-based positions below the header, so blank lines that
    are skipped still count towards the numbering.
    """
    for row_number, line in enumerate(lines, start=1):
        if not is_blank(line):
            yield row_number, line


def validate(raw_text: str) -> List[Violation]:
    """
    Validate a cart document and return the list of violations (possibly empty).
    """
    header, lines = split_document(raw_text)
    violations: List[Violation] = list(check_header(header.split(DELIMITER)))
    for row_number, line in iter_data_lines(lines):
        violations.extend(check_row(row_number, line.split(DELIMITER)))
    return violations


__all__ = ["is_blank", "iter_data_lines", "split_document", "validate"]
