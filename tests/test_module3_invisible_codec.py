# file: tests/test_module3_invisible_codec.py

"""
Unit tests for Module 3: Invisible Codec.

Test coverage:
    - encode/decode round-trip (ASCII, multilingual, empty, large)
    - Even-length invariant
    - Rejection of odd-length, foreign-symbol and non-stream input
    - Distinguishable failure kinds on the checked API
    - YAML configuration loading and validation
"""

import random
import string

import pytest

from module1_invisible_alphabet import ALPHABET, pack_bytes, InvalidScalarSequenceError
from module2_stream_compression import compress, StreamInitError, StreamProcessingError
from module3_invisible_codec import (
    InvisibleCodec,
    invisible_encode,
    invisible_decode,
    load_config,
    get_default_config,
    InvalidUtf8Error,
    UnencodableTextError,
    CodecConfigurationError,
)


def random_text(length: int, seed: int = 11) -> str:
    rng = random.Random(seed)
    alphabet = string.ascii_letters + string.digits + "|=.{}"
    return "".join(rng.choice(alphabet) for _ in range(length))


@pytest.fixture
def codec():
    return InvisibleCodec(get_default_config())


class TestRoundTrip:
    """Test decode(encode(x)) == x."""

    @pytest.mark.parametrize("text", [
        "12=5.0|34=2.5",
        '{"exercises":"1=30.0","detailedLog":{"logs":[]}}',
        "Тренировка за крака 💪",
        "a",
        "\n\t ",
    ])
    def test_roundtrip(self, codec, text):
        """decode(encode(text)) returns text."""
        assert codec.decode(codec.encode(text)) == text

    def test_empty(self, codec):
        """The empty string round trips."""
        encoded = codec.encode("")
        assert encoded is not None
        assert codec.decode(encoded) == ""

    def test_empty_known_vector(self, codec):
        """Raw DEFLATE of nothing is 03 00; fixed for stored notes."""
        assert codec.encode("") == ALPHABET[0] + ALPHABET[3] + ALPHABET[0] + ALPHABET[0]

    def test_output_is_invisible(self, codec):
        """Encoded text contains alphabet symbols only."""
        encoded = codec.encode("visible text")
        assert set(encoded) <= set(ALPHABET)

    def test_even_length_matches_compressed_size(self, codec):
        """Encoded length is twice the compressed size."""
        text = random_text(2000)
        encoded = codec.encode(text)
        assert len(encoded) % 2 == 0
        assert len(encoded) == 2 * len(compress(text.encode("utf-8")))

    def test_large_payload(self, codec):
        """Compressed payload several times the 4096-byte buffer."""
        text = random_text(60000)
        encoded = codec.encode(text)
        assert len(encoded) // 2 > 3 * 4096
        assert codec.decode(encoded) == text

    def test_module_level_entry_points(self):
        """Module-level functions match the codec methods."""
        hidden = invisible_encode("12=5.0")
        assert invisible_decode(hidden) == "12=5.0"


class TestDecodeFailures:
    """Test that corrupt input yields None, never wrong text."""

    def test_odd_length(self, codec):
        """Odd-length input decodes to None."""
        encoded = codec.encode("payload")
        assert codec.decode(encoded[:-1]) is None

    def test_foreign_symbol(self, codec):
        """A foreign scalar decodes to None."""
        encoded = codec.encode("payload")
        corrupted = encoded[:3] + "x" + encoded[4:]
        assert codec.decode(corrupted) is None

    def test_empty_string_is_not_a_payload(self, codec):
        """Decoding the empty string returns None."""
        assert codec.decode("") is None

    def test_plain_text(self, codec):
        """Visible text decodes to None."""
        assert codec.decode("12=5.0|34=2.5") is None

    def test_valid_symbols_invalid_stream(self, codec):
        """Well-formed symbols that are not DEFLATE decode to None."""
        assert codec.decode(pack_bytes(b"\xff\xff\xff\xff")) is None

    def test_checked_reports_scalar_error(self, codec):
        """decode_checked raises the scalar error."""
        with pytest.raises(InvalidScalarSequenceError):
            codec.decode_checked(ALPHABET[1] * 3)

    def test_checked_reports_stream_error(self, codec):
        """decode_checked raises the stream error."""
        with pytest.raises(StreamProcessingError):
            codec.decode_checked(pack_bytes(b"\xff\xff"))

    def test_checked_reports_utf8_error(self, codec):
        """decode_checked raises on invalid UTF-8."""
        hidden = pack_bytes(compress(b"\xff\xfe\xfd"))
        with pytest.raises(InvalidUtf8Error, match="UTF-8"):
            codec.decode_checked(hidden)
        assert codec.decode(hidden) is None

    def test_encode_failure_returns_none(self, codec, monkeypatch):
        """A compressor failure makes encode return None."""
        def broken(*args, **kwargs):
            raise StreamInitError("engine unavailable")

        monkeypatch.setattr("module3_invisible_codec.codec.compress", broken)
        assert codec.encode("payload") is None
        with pytest.raises(StreamInitError):
            codec.encode_checked("payload")


class TestConfig:
    """Test YAML configuration handling."""

    def test_defaults(self):
        """No file falls back to hard-coded defaults."""
        config = get_default_config()
        assert config["compression"]["buffer_size"] == 4096
        assert config["compression"]["level"] == -1

    def test_repo_default_file(self):
        """The repo default_config.yaml loads."""
        config = load_config()
        assert config["compression"]["buffer_size"] == 4096

    def test_partial_file_merged(self, tmp_path):
        """Missing keys are filled from defaults."""
        path = tmp_path / "codec.yaml"
        path.write_text("compression:\n  buffer_size: 128\n")

        config = load_config(str(path))

        assert config["compression"]["buffer_size"] == 128
        assert config["compression"]["level"] == -1

    def test_small_buffer_roundtrip(self, tmp_path):
        """A small configured buffer still round trips."""
        path = tmp_path / "codec.yaml"
        path.write_text("compression:\n  buffer_size: 16\n  level: 9\n")
        codec = InvisibleCodec(load_config(str(path)))

        text = random_text(3000)
        assert codec.decode(codec.encode(text)) == text

    def test_missing_explicit_file(self, tmp_path):
        """A missing explicit path is a configuration error."""
        with pytest.raises(CodecConfigurationError, match="not found"):
            load_config(str(tmp_path / "missing.yaml"))

    def test_malformed_yaml(self, tmp_path):
        """Unparseable YAML is a configuration error."""
        path = tmp_path / "bad.yaml"
        path.write_text("compression: [unclosed\n")
        with pytest.raises(CodecConfigurationError):
            load_config(str(path))

    @pytest.mark.parametrize("section", [
        {"buffer_size": 0, "level": -1, "max_output_size": 1024},
        {"buffer_size": 4096, "level": 10, "max_output_size": 1024},
        {"buffer_size": 4096, "level": -1, "max_output_size": -5},
        {"buffer_size": "big", "level": -1, "max_output_size": 1024},
    ])
    def test_invalid_values(self, section):
        """Out-of-range settings are rejected."""
        with pytest.raises(CodecConfigurationError):
            InvisibleCodec({"compression": section})

    def test_missing_section(self):
        """A config without a compression section is rejected."""
        with pytest.raises(CodecConfigurationError, match="Missing"):
            InvisibleCodec({})

    def test_inflation_limit_from_config(self):
        """The configured inflation limit is enforced."""
        config = get_default_config()
        config["compression"]["max_output_size"] = 100
        codec = InvisibleCodec(config)

        hidden = codec.encode("x" * 1000)
        assert codec.decode(hidden) is None


class TestEncodeFailures:
    """Test that unencodable text is a typed codec failure."""

    def test_lone_surrogate_returns_none(self, codec):
        """A lone surrogate has no UTF-8 form; encode folds it into None."""
        assert codec.encode("bad " + chr(0xD800)) is None

    def test_lone_surrogate_checked(self, codec):
        """The checked API names the failing stage."""
        with pytest.raises(UnencodableTextError, match="UTF-8"):
            codec.encode_checked("x" + chr(0xDC00))

    def test_module_level_entry_point(self):
        """invisible_encode follows the same contract."""
        assert invisible_encode(chr(0xD800)) is None
