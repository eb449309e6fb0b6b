# file: src/module2_stream_compression/__init__.py
"""
Module 2: Stream Compression

Raw DEFLATE compress/decompress through a fixed-size buffer loop.
"""

from .stream import (
    DeflateStream,
    compress,
    decompress,
    DEFAULT_BUFFER_SIZE,
    DEFAULT_LEVEL,
    DEFAULT_MAX_OUTPUT_SIZE,
    MODE_COMPRESS,
    MODE_DECOMPRESS,
)
from .errors import (
    CompressionError,
    StreamInitError,
    StreamProcessingError,
    StreamTeardownError,
)


__all__ = [
    'DeflateStream',
    'compress',
    'decompress',
    'DEFAULT_BUFFER_SIZE',
    'DEFAULT_LEVEL',
    'DEFAULT_MAX_OUTPUT_SIZE',
    'MODE_COMPRESS',
    'MODE_DECOMPRESS',
    'CompressionError',
    'StreamInitError',
    'StreamProcessingError',
    'StreamTeardownError',
]


__version__ = '1.0.0'
