"""
Parse orchestrator for cart files.

Usage:
    from cart_parser.orchestrator import CartParser

    parser = CartParser()
    result = parser.parse("samples/cart.csv")
    print(result.total)

`validate` is the diagnostic entry point and returns the list of violations.
`parse` reads a file, validates it and either returns a complete
`ParseResult` or raises `ValidationFailed`; it never returns partial results.
"""

from __future__ import annotations

from functools import partial
from typing import Iterable, List, Optional

from cart_parser.aggregator import calc_total
from cart_parser.config import get_settings
from cart_parser.domain.models import LineItem, ParseResult, Violation, ViolationType
from cart_parser.errors import ValidationFailed
from cart_parser.infrastructure.file_reader import FileReader, PathLike, read_file
from cart_parser.infrastructure.id_source import IdSource, generate_id
from cart_parser.transform import transform_line
from cart_parser.utils.logging import get_logger
from cart_parser.validation.cells import create_error
from cart_parser.validation.content import iter_data_lines, split_document, validate

log = get_logger(__name__)


class CartParser:
    """
    Parser bound to a file reader and an id source.

    Both collaborators are plain callables and default to reading with the
    configured encoding and to random UUID ids. Instances hold no state
    between calls; every `parse` re-reads its input.
    """

    def __init__(
        self,
        reader: Optional[FileReader] = None,
        id_source: Optional[IdSource] = None,
    ) -> None:
        if reader is None:
            reader = partial(read_file, encoding=get_settings().file_encoding)
        self._reader = reader
        self._id_source = id_source or generate_id

    def validate(self, raw_text: str) -> List[Violation]:
        return validate(raw_text)

    def create_error(
        self, type: ViolationType, row: int, column: int, message: str
    ) -> Violation:
        return create_error(type, row, column, message)

    def transform_line(self, raw_line: str) -> LineItem:
        return transform_line(raw_line, self._id_source)

    def calc_total(self, items: Iterable[LineItem]) -> float:
        return calc_total(items)

    def parse(self, path: PathLike) -> ParseResult:
        """
        Read, validate and convert the cart file at `path`.

        Raises
        ------
        ValidationFailed
            If the content has any violation. Use `validate` for details.
        OSError, UnicodeDecodeError
            Propagated unchanged from the file reader.
        """
        log.debug("Parsing cart file", extra={"path": str(path)})
        raw_text = self._reader(path)

        violations = self.validate(raw_text)
        if violations:
            log.warning(
                "Cart file failed validation",
                extra={"path": str(path), "violations": len(violations)},
            )
            raise ValidationFailed()

        _, lines = split_document(raw_text)
        items = tuple(self.transform_line(line) for _, line in iter_data_lines(lines))
        result = ParseResult(items=items)
        log.info(
            "Cart file parsed",
            extra={"path": str(path), "items": len(result.items), "total": result.total},
        )
        return result


def parse(path: PathLike) -> ParseResult:
    """Parse `path` with the default collaborators."""
    return CartParser().parse(path)


__all__ = ["CartParser", "parse", "validate", "create_error"]
