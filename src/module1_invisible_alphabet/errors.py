# file: src/module1_invisible_alphabet/errors.py

"""
Alphabet-specific exception hierarchy.

All exceptions inherit from AlphabetError for unified handling.
"""

from typing import Optional


class AlphabetError(Exception):
    """Base exception for all invisible-alphabet errors."""
    pass


class InvalidScalarSequenceError(AlphabetError):
    """Raised when a scalar sequence cannot be folded back into bytes."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index
