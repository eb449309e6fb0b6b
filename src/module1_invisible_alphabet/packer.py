"""
Nibble packer: bytes <-> invisible scalars.

Every byte becomes exactly two symbols, high nibble first. Conversions are
vectorised with numpy over the code point lookup tables in alphabet.py.
"""

import numpy as np

from .alphabet import CODEPOINTS, SORTED_CODEPOINTS, SORTED_VALUES, REVERSE_ALPHABET
from .errors import InvalidScalarSequenceError


def pack_bytes(data: bytes) -> str:
    """
    Convert bytes to a string of invisible symbols.

    Args:
        data: Arbitrary byte sequence

    Returns:
        String of length 2 * len(data), drawn only from ALPHABET
    """
    raw = np.frombuffer(bytes(data), dtype=np.uint8)

    # Interleave: even slots high nibble, odd slots low nibble
    nibbles = np.empty(raw.size * 2, dtype=np.uint8)
    nibbles[0::2] = raw >> 4
    nibbles[1::2] = raw & 0x0F

    codepoints = CODEPOINTS[nibbles].astype("<u4")
    return codepoints.tobytes().decode("utf-32-le")


def unpack_scalars(text: str) -> bytes:
    """
    Fold a string of invisible symbols back into bytes.

    Args:
        text: String produced by pack_bytes()

    Returns:
        Original bytes

    Raises:
        InvalidScalarSequenceError: If the scalar count is odd, a scalar is
            not part of the alphabet, or the string is not encodable
            (lone surrogates)
    """
    if len(text) % 2 != 0:
        raise InvalidScalarSequenceError(
            f"Scalar count must be even, got {len(text)}"
        )

    try:
        encoded = text.encode("utf-32-le")
    except UnicodeEncodeError as e:
        raise InvalidScalarSequenceError(
            f"Unencodable scalar at index {e.start}", index=e.start
        ) from e

    codepoints = np.frombuffer(encoded, dtype="<u4")

    positions = np.searchsorted(SORTED_CODEPOINTS, codepoints)
    positions = np.minimum(positions, SORTED_CODEPOINTS.size - 1)
    known = SORTED_CODEPOINTS[positions] == codepoints

    if not known.all():
        index = int(np.argmin(known))
        raise InvalidScalarSequenceError(
            f"Unrecognized scalar U+{int(codepoints[index]):04X} at index {index}",
            index=index,
        )

    values = SORTED_VALUES[positions]
    packed = (values[0::2] << 4) | values[1::2]
    return packed.astype(np.uint8).tobytes()


def extract_invisible(text: str) -> str:
    """
    Keep only alphabet symbols, in order.

    Calendar notes can carry visible user text around a hidden payload;
    this recovers just the hidden part.
    """
    return "".join(ch for ch in text if ch in REVERSE_ALPHABET)


def strip_invisible(text: str) -> str:
    """Return the visible part of text with every alphabet symbol removed."""
    return "".join(ch for ch in text if ch not in REVERSE_ALPHABET)
