"""
Identifier source collaborator.

Line items get an opaque identifier from an injected callable. The default
implementation returns random UUID4 hex strings; `SequentialIdSource` yields
predictable ids for reproducible output.
"""

from __future__ import annotations

import itertools
import threading
import uuid
from typing import Protocol, runtime_checkable


@runtime_checkable
class IdSource(Protocol):
    """
    Callable returning a new caller-unique identifier on every call.
    """

    def __call__(self) -> str:
        ...


def generate_id() -> str:
    """Return a random UUID4 as a 32 character hex string."""
    return uuid.uuid4().hex


class SequentialIdSource:
    """
    Deterministic id source producing `<prefix>1`, `<prefix>2`, ...
    """

    def __init__(self, prefix: str = "item-", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            value = next(self._counter)
        return f"{self._prefix}{value}"


__all__ = ["IdSource", "SequentialIdSource", "generate_id"]
