"""
Pytest configuration for the cart parser.

Provides fixtures for:
- The bundled sample cart file
- Writing ad-hoc cart files into a temporary directory
- Deterministic id sources and a fresh settings cache per test
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generator

import pytest

from cart_parser.config import get_settings
from cart_parser.infrastructure.id_source import SequentialIdSource
from cart_parser.orchestrator import CartParser

SAMPLES_DIR = Path(__file__).parent.parent / "samples"
HEADER = "Product name,Price,Quantity"


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """
    Clear the cached settings so environment overrides apply per test.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def sample_cart_path() -> Path:
    """
    Path to the valid five-row sample cart shipped with the repository.
    """
    return SAMPLES_DIR / "cart.csv"


@pytest.fixture
def write_cart(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory writing a cart file from data lines, prefixed with the valid header
    unless `header` is given.
    """

    def _write(*rows: str, header: str = HEADER, name: str = "cart.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def id_source() -> SequentialIdSource:
    return SequentialIdSource()


@pytest.fixture
def parser(id_source: SequentialIdSource) -> CartParser:
    """
    Parser reading real files with predictable item ids.
    """
    return CartParser(id_source=id_source)
