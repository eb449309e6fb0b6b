# file: src/module3_invisible_codec/codec.py

"""
Invisible codec facade.

    encode: text -> UTF-8 -> raw DEFLATE -> nibbles -> invisible symbols
    decode: invisible symbols -> nibbles -> inflate -> UTF-8 -> text

encode_checked / decode_checked raise the typed error of whichever stage
failed. encode / decode return None instead, which is all the notes
container needs to know.
"""

import logging
from typing import Any, Dict, Optional

from module1_invisible_alphabet import pack_bytes, unpack_scalars
from module2_stream_compression import compress, decompress

from .config import load_config, get_compression_settings
from .errors import InvalidUtf8Error, UnencodableTextError, CODEC_ERRORS


logger = logging.getLogger(__name__)


class InvisibleCodec:
    """
    Reversible text <-> invisible-text codec.

    Parameters:
        config (dict): Configuration with a 'compression' section. If None,
            default_config.yaml / built-in defaults are used.

    Invariants:
        - len(encode(x)) is even and equals 2 * compressed length
        - decode(encode(x)) == x for every str x
        - decode never returns text from a corrupted payload
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        if config is None:
            config = load_config()
        settings = get_compression_settings(config)

        self.buffer_size = settings["buffer_size"]
        self.level = settings["level"]
        self.max_output_size = settings["max_output_size"]

    def encode_checked(self, text: str) -> str:
        """
        Encode text as invisible symbols.

        Raises:
            UnencodableTextError: If text is not encodable as UTF-8
            StreamInitError / StreamProcessingError / StreamTeardownError:
                If compression fails
        """
        try:
            source = text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise UnencodableTextError(f"Text is not encodable as UTF-8: {e}") from e

        deflated = compress(source, buffer_size=self.buffer_size, level=self.level)
        return pack_bytes(deflated)

    def decode_checked(self, invisible: str) -> str:
        """
        Decode invisible symbols back to text.

        Raises:
            InvalidScalarSequenceError: Odd length or foreign symbol
            StreamProcessingError: Corrupt, truncated or oversized stream
            InvalidUtf8Error: Inflated bytes are not UTF-8
        """
        deflated = unpack_scalars(invisible)
        inflated = decompress(
            deflated,
            buffer_size=self.buffer_size,
            max_output_size=self.max_output_size,
        )
        try:
            return inflated.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidUtf8Error(f"Decoded payload is not valid UTF-8: {e}") from e

    def encode(self, text: str) -> Optional[str]:
        """Encode text, or return None if compression fails."""
        try:
            return self.encode_checked(text)
        except CODEC_ERRORS as e:
            logger.debug("Invisible encode failed: %s: %s", type(e).__name__, e)
            return None

    def decode(self, invisible: str) -> Optional[str]:
        """Decode invisible text, or return None on any failure."""
        try:
            return self.decode_checked(invisible)
        except CODEC_ERRORS as e:
            logger.debug("Invisible decode failed: %s: %s", type(e).__name__, e)
            return None


def invisible_encode(text: str, config: Optional[Dict[str, Any]] = None) -> Optional[str]:
    """
    Encode text into zero-width symbols.

    Args:
        text: Arbitrary text (may be empty)
        config: Optional configuration dictionary

    Returns:
        Invisible string, or None if compression failed

    Example:
        >>> hidden = invisible_encode("12=5.0|34=2.5")
        >>> invisible_decode(hidden)
        '12=5.0|34=2.5'
    """
    return InvisibleCodec(config).encode(text)


def invisible_decode(invisible: str, config: Optional[Dict[str, Any]] = None) -> Optional[str]:
    """
    Decode zero-width symbols back into text.

    Returns:
        Original text, or None if the input is not a valid payload
    """
    return InvisibleCodec(config).decode(invisible)
