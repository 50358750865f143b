"""
File reading collaborator.

The parser only needs the decoded text of a cart file. Any `OSError` or
`UnicodeDecodeError` raised while reading is propagated to the caller as is.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union, runtime_checkable

PathLike = Union[str, Path]


@runtime_checkable
class FileReader(Protocol):
    """
    Callable returning the full text content of the file at `path`.
    """

    def __call__(self, path: PathLike) -> str:
        ...


def read_file(path: PathLike, encoding: str = "utf-8") -> str:
    """
    Read and decode the whole file at `path`.
    """
    with Path(path).open("r", encoding=encoding, newline="") as f:
        return f.read()


__all__ = ["FileReader", "PathLike", "read_file"]
