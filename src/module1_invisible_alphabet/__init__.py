# file: src/module1_invisible_alphabet/__init__.py

"""
Module 1: Invisible Alphabet

Fixed bijection between 16 zero-width / format code points and the nibble
values 0-15, plus the packer that turns bytes into invisible text and back.

Public API:
    - value_to_symbol(value: int) -> str
    - symbol_to_value(symbol: str) -> Optional[int]
    - pack_bytes(data: bytes) -> str
    - unpack_scalars(text: str) -> bytes
    - extract_invisible(text: str) -> str
    - strip_invisible(text: str) -> str
"""

from .alphabet import (
    ALPHABET,
    ALPHABET_SIZE,
    value_to_symbol,
    symbol_to_value,
    is_invisible,
)
from .packer import pack_bytes, unpack_scalars, extract_invisible, strip_invisible
from .errors import AlphabetError, InvalidScalarSequenceError

__version__ = "1.0.0"

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "value_to_symbol",
    "symbol_to_value",
    "is_invisible",
    "pack_bytes",
    "unpack_scalars",
    "extract_invisible",
    "strip_invisible",
    "AlphabetError",
    "InvalidScalarSequenceError",
]
