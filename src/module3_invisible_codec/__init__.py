"""
Module 3: Invisible Codec

Composes the invisible alphabet (Module 1) and stream compression
(Module 2) into a text <-> invisible-text codec.

Public Interface:
    - InvisibleCodec: Codec class (checked and Optional variants)
    - invisible_encode / invisible_decode: Optional-returning entry points
    - load_config: YAML configuration loader

Example usage:
    >>> from module3_invisible_codec import InvisibleCodec
    >>> codec = InvisibleCodec()
    >>> hidden = codec.encode('{"exercises":"12=5.0"}')
    >>> codec.decode(hidden)
    '{"exercises":"12=5.0"}'
"""

from .codec import InvisibleCodec, invisible_encode, invisible_decode
from .config import load_config, get_default_config, get_compression_settings
from .errors import (
    CodecError,
    InvalidUtf8Error,
    UnencodableTextError,
    CodecConfigurationError,
    CODEC_ERRORS,
)

__all__ = [
    "InvisibleCodec",
    "invisible_encode",
    "invisible_decode",
    "load_config",
    "get_default_config",
    "get_compression_settings",
    "CodecError",
    "InvalidUtf8Error",
    "UnencodableTextError",
    "CodecConfigurationError",
    "CODEC_ERRORS",
]

__version__ = "1.0.0"
