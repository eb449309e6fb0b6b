"""
Codec-specific exception hierarchy.

Alphabet and stream errors are raised by Modules 1 and 2 directly;
CODEC_ERRORS collects everything the Optional-returning facade folds into
None.
"""

from module1_invisible_alphabet.errors import AlphabetError
from module2_stream_compression.errors import CompressionError


class CodecError(Exception):
    """Base exception for Module 3 codec errors."""
    pass


class InvalidUtf8Error(CodecError):
    """Raised when decompressed bytes are not valid UTF-8."""
    pass


class UnencodableTextError(CodecError):
    """Raised when text cannot be encoded as UTF-8 (lone surrogates)."""
    pass


class CodecConfigurationError(CodecError):
    """Raised when codec configuration is invalid."""
    pass


CODEC_ERRORS = (AlphabetError, CompressionError, InvalidUtf8Error, UnencodableTextError)
