"""
Infrastructure package for the cart parser.

Holds the collaborators the parser calls at its boundaries: reading cart files
and generating line item identifiers. Keep this layer free of validation logic.
"""

from cart_parser.infrastructure.file_reader import FileReader, PathLike, read_file
from cart_parser.infrastructure.id_source import IdSource, SequentialIdSource, generate_id

__all__ = [
    "FileReader",
    "IdSource",
    "PathLike",
    "SequentialIdSource",
    "generate_id",
    "read_file",
]
