# file: src/module2_stream_compression/stream.py

"""
Chunked raw-DEFLATE compression through a fixed-size buffer.

The stream format is raw DEFLATE (RFC 1951): no zlib header, no adler32
trailer. Notes persisted by earlier releases use exactly this format.

Both directions follow the same lifecycle:
    open -> process in a loop, draining the buffer every pass -> close

A single pass is never enough: any payload whose output exceeds one buffer
would be truncated, so the loops only stop when the engine reports the
stream complete.
"""

import logging
import zlib
from typing import Optional

from .errors import StreamInitError, StreamProcessingError, StreamTeardownError


logger = logging.getLogger(__name__)

WBITS_RAW_DEFLATE = -15
DEFAULT_BUFFER_SIZE = 4096
DEFAULT_LEVEL = -1
DEFAULT_MAX_OUTPUT_SIZE = 16 * 1024 * 1024  # 16 MiB

MODE_COMPRESS = "compress"
MODE_DECOMPRESS = "decompress"


class DeflateStream:
    """
    One raw-DEFLATE engine with an explicit open/process/close lifecycle.

    Parameters:
        mode (str): MODE_COMPRESS or MODE_DECOMPRESS
        buffer_size (int): Bytes per pass (input window on compress,
            output limit on decompress)
        level (int): Compression level, -1 (zlib default) or 0..9

    Invariants:
        - close() runs exactly once per successful open()
        - finalize is asserted at most once, after all source is consumed

    Use as a context manager so teardown happens on every exit path:

        >>> with DeflateStream(MODE_COMPRESS) as stream:
        ...     deflated = stream.run(b"payload")
    """

    def __init__(self, mode: str, buffer_size: int = DEFAULT_BUFFER_SIZE, level: int = DEFAULT_LEVEL):
        if mode not in (MODE_COMPRESS, MODE_DECOMPRESS):
            raise StreamInitError(f"Unknown stream mode: {mode}")
        if not isinstance(buffer_size, int) or buffer_size <= 0:
            raise StreamInitError(f"buffer_size must be a positive int, got {buffer_size!r}")

        self.mode = mode
        self.buffer_size = buffer_size
        self.level = level
        self.finalized = False
        self.finished = False
        self._engine = None
        self._torn_down = False

    def open(self) -> "DeflateStream":
        """
        Initialise the zlib engine.

        Raises:
            StreamInitError: If zlib rejects the parameters
        """
        if self._engine is not None or self._torn_down:
            raise StreamInitError("Stream already opened")
        try:
            if self.mode == MODE_COMPRESS:
                self._engine = zlib.compressobj(self.level, zlib.DEFLATED, WBITS_RAW_DEFLATE)
            else:
                self._engine = zlib.decompressobj(WBITS_RAW_DEFLATE)
        except (ValueError, zlib.error) as e:
            raise StreamInitError(f"Failed to initialise {self.mode} stream: {e}") from e
        return self

    def close(self) -> None:
        """
        Tear the stream down and drop the engine.

        Raises:
            StreamTeardownError: If the stream was never opened or is
                already torn down
        """
        if self._torn_down:
            raise StreamTeardownError("Stream already torn down")
        if self._engine is None:
            raise StreamTeardownError("Stream was never opened")
        self._engine = None
        self._torn_down = True

    def __enter__(self) -> "DeflateStream":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def process(self, source: bytes, finalize: bool = False) -> bytes:
        """
        Run one pass of the engine.

        For compression, source is at most one window of input and
        finalize asserts Z_FINISH. For decompression, at most buffer_size
        bytes are produced; input that did not fit stays in
        unconsumed_tail.

        Raises:
            StreamProcessingError: On any engine error
        """
        if self._engine is None:
            raise StreamProcessingError("Stream is not open")
        if self.finalized:
            raise StreamProcessingError("Finalize asserted twice" if finalize else "Stream already finalized")

        try:
            if self.mode == MODE_COMPRESS:
                produced = self._engine.compress(source)
                if finalize:
                    self.finalized = True
                    produced += self._engine.flush(zlib.Z_FINISH)
                    self.finished = True
            else:
                produced = self._engine.decompress(source, self.buffer_size)
                self.finished = self._engine.eof
        except zlib.error as e:
            raise StreamProcessingError(f"{self.mode} engine error: {e}") from e

        return produced

    @property
    def unconsumed_tail(self) -> bytes:
        return self._engine.unconsumed_tail if self.mode == MODE_DECOMPRESS else b""

    @property
    def unused_data(self) -> bytes:
        return self._engine.unused_data if self.mode == MODE_DECOMPRESS else b""

    def run(self, data: bytes, max_output_size: Optional[int] = None) -> bytes:
        """
        Feed all of data through the engine until it reports completion.

        Args:
            data: Complete source
            max_output_size: Abort decompression once output exceeds this

        Returns:
            Complete output. Never a partial result.

        Raises:
            StreamProcessingError: On engine error, truncated input, or
                output above max_output_size
        """
        if self.mode == MODE_COMPRESS:
            return self._run_compress(bytes(data))
        return self._run_decompress(bytes(data), max_output_size)

    def _run_compress(self, data: bytes) -> bytes:
        result = bytearray()
        offset = 0

        while not self.finished:
            window = data[offset:offset + self.buffer_size]
            offset += len(window)

            # Source exhausted -> finalize on this pass
            result += self.process(window, finalize=offset >= len(data))

        return bytes(result)

    def _run_decompress(self, data: bytes, max_output_size: Optional[int]) -> bytes:
        result = bytearray()
        pending = data

        while not self.finished:
            produced = self.process(pending)
            pending = self.unconsumed_tail
            result += produced

            if max_output_size is not None and len(result) > max_output_size:
                raise StreamProcessingError(
                    f"Decompressed size exceeds limit of {max_output_size} bytes"
                )

            if self.finished:
                break

            # Engine idle with nothing left to feed: stream never ended
            if not produced and not pending:
                raise StreamProcessingError(
                    f"Stream truncated: source exhausted after {len(data)} bytes without end-of-stream"
                )

        trailing = self.unused_data
        if trailing:
            logger.debug("Ignoring %d bytes after end-of-stream", len(trailing))

        return bytes(result)


def compress(data: bytes, buffer_size: int = DEFAULT_BUFFER_SIZE, level: int = DEFAULT_LEVEL) -> bytes:
    """
    Compress data to a raw DEFLATE stream.

    Args:
        data: Source bytes (may be empty)
        buffer_size: Input window per pass
        level: -1 or 0..9

    Returns:
        Complete raw DEFLATE stream

    Raises:
        StreamInitError: If the engine cannot be initialised
        StreamProcessingError: If the engine fails mid-stream
        StreamTeardownError: If teardown fails
    """
    with DeflateStream(MODE_COMPRESS, buffer_size=buffer_size, level=level) as stream:
        return stream.run(data)


def decompress(
    data: bytes,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    max_output_size: Optional[int] = DEFAULT_MAX_OUTPUT_SIZE,
) -> bytes:
    """
    Inflate a complete raw DEFLATE stream.

    Args:
        data: Raw DEFLATE stream
        buffer_size: Output bytes drained per pass
        max_output_size: Inflation limit, None for unbounded

    Returns:
        Original bytes

    Raises:
        StreamInitError: If the engine cannot be initialised
        StreamProcessingError: On corrupt, truncated or oversized streams
        StreamTeardownError: If teardown fails
    """
    with DeflateStream(MODE_DECOMPRESS, buffer_size=buffer_size) as stream:
        return stream.run(data, max_output_size=max_output_size)
