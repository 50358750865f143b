from __future__ import annotations

from pathlib import Path

import pytest

from cart_parser import config
from cart_parser.infrastructure.file_reader import FileReader, read_file
from cart_parser.infrastructure.id_source import IdSource, SequentialIdSource, generate_id
from cart_parser.validation.content import validate
from scripts import generate_cart

GENERATED_ROWS = 5


def test_get_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("CART_FILE_ENCODING", raising=False)
    settings = config.get_settings()
    assert settings.log_level == "INFO"
    assert settings.file_encoding == "utf-8"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CART_FILE_ENCODING", "latin-1")
    settings = config.get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.file_encoding == "latin-1"


def test_generate_id_is_unique_hex():
    ids = {generate_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(len(value) == 32 for value in ids)
    assert isinstance(generate_id, IdSource)


def test_sequential_id_source():
    source = SequentialIdSource(prefix="row-", start=10)
    assert [source(), source()] == ["row-10", "row-11"]


def test_read_file_decodes_text(tmp_path: Path):
    path = tmp_path / "cart.csv"
    path.write_bytes("Product name,Price,Quantity\nCafé,1,1\n".encode("utf-8"))
    assert read_file(path).splitlines()[1] == "Café,1,1"
    assert isinstance(read_file, FileReader)


def test_read_file_propagates_decode_errors(tmp_path: Path):
    path = tmp_path / "cart.csv"
    path.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(UnicodeDecodeError):
        read_file(path)


def test_read_file_propagates_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.csv")


def test_generate_cart_writes_valid_csv(tmp_path: Path):
    csv_path = tmp_path / "cart.csv"
    generate_cart._write_cart_csv(csv_path, rows=GENERATED_ROWS, seed=123)
    assert csv_path.exists()
    text = csv_path.read_text(encoding="utf-8")
    # header + 5 rows = 6 lines
    assert len(text.splitlines()) == GENERATED_ROWS + 1
    assert text.splitlines()[0] == "Product name,Price,Quantity"
    assert validate(text) == []


def test_generate_cart_is_deterministic():
    assert generate_cart._generate_cart_lines(3, seed=7) == generate_cart._generate_cart_lines(
        3, seed=7
    )
