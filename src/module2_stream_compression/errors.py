# file: src/module2_stream_compression/errors.py
"""
Stream compression error types for Module 2.
"""


class CompressionError(Exception):
    """Base exception for Module 2 stream operations."""
    pass


class StreamInitError(CompressionError):
    """Raised when the DEFLATE engine cannot be initialised."""
    pass


class StreamProcessingError(CompressionError):
    """Raised when the engine reports an error or never reaches end-of-stream."""
    pass


class StreamTeardownError(CompressionError):
    """Raised when stream teardown fails."""
    pass
