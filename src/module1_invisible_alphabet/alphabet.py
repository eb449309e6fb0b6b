# file: src/module1_invisible_alphabet/alphabet.py

"""
The 16-symbol invisible alphabet.

Each symbol is a zero-width or format code point that renders as nothing in
ordinary text. The order below IS the wire format: symbol i encodes the
nibble value i. Notes written by earlier releases depend on it.
"""

from typing import Dict, Optional

import numpy as np


ALPHABET = (
    "\u200B",  # 0  ZERO WIDTH SPACE
    "\u200C",  # 1  ZERO WIDTH NON-JOINER
    "\u200D",  # 2  ZERO WIDTH JOINER
    "\u2060",  # 3  WORD JOINER
    "\u2061",  # 4  FUNCTION APPLICATION
    "\u2062",  # 5  INVISIBLE TIMES
    "\u2063",  # 6  INVISIBLE SEPARATOR
    "\u2064",  # 7  INVISIBLE PLUS
    "\u2066",  # 8  LEFT-TO-RIGHT ISOLATE
    "\u2067",  # 9  RIGHT-TO-LEFT ISOLATE
    "\u2068",  # 10 FIRST STRONG ISOLATE
    "\u2069",  # 11 POP DIRECTIONAL ISOLATE
    "\u200E",  # 12 LEFT-TO-RIGHT MARK
    "\u200F",  # 13 RIGHT-TO-LEFT MARK
    "\u202A",  # 14 LEFT-TO-RIGHT EMBEDDING
    "\u202B",  # 15 RIGHT-TO-LEFT EMBEDDING
)

ALPHABET_SIZE = len(ALPHABET)

REVERSE_ALPHABET: Dict[str, int] = {symbol: value for value, symbol in enumerate(ALPHABET)}

# Lookup arrays for the vectorised packer.
# CODEPOINTS[v] is the code point for value v; SORTED_CODEPOINTS is the
# same set in ascending order and SORTED_VALUES[i] the value of
# SORTED_CODEPOINTS[i] (used with np.searchsorted on decode).
CODEPOINTS = np.array([ord(symbol) for symbol in ALPHABET], dtype=np.uint32)
_ORDER = np.argsort(CODEPOINTS)
SORTED_CODEPOINTS = CODEPOINTS[_ORDER]
SORTED_VALUES = _ORDER.astype(np.uint8)

for _arr in (CODEPOINTS, SORTED_CODEPOINTS, SORTED_VALUES):
    _arr.setflags(write=False)


def value_to_symbol(value: int) -> str:
    """
    Map a nibble value to its invisible symbol.

    Args:
        value: Integer in [0, 15]

    Returns:
        Single-character string from ALPHABET

    Raises:
        ValueError: If value is outside [0, 15]
    """
    if not 0 <= value < ALPHABET_SIZE:
        raise ValueError(f"Nibble value must be in [0, 15], got {value}")
    return ALPHABET[value]


def symbol_to_value(symbol: str) -> Optional[int]:
    """Map an invisible symbol back to its nibble value, or None if unknown."""
    return REVERSE_ALPHABET.get(symbol)


def is_invisible(symbol: str) -> bool:
    return symbol in REVERSE_ALPHABET
