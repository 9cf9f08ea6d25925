"""
Tests for the builder interface and the Base1024 facade.
"""
import io

import pytest

from Base1024 import (
    AlphabetContext,
    Base1024,
    CodecConfig,
    InvalidSymbolError,
    TruncationError,
    get_decoder,
    get_encoder,
)
from Base1024.alphabet import Alphabet


EMOJI = Alphabet.from_listing(range(0x1F300, 0x1F300 + 1027), 0x2615, 0x269C)


# ============================================================================
# Encoder Builder Tests
# ============================================================================

def test_encode_string_uses_utf8(symbols):
    """Test a str source is encoded to UTF-8 bytes first."""
    assert get_encoder().read_from("abc").write_to_string() == symbols(389, 550, 192, "PAD")
    assert get_encoder().read_from("\u00e9").write_to_string() == get_encoder().read_from(b"\xc3\xa9").write_to_string()


def test_encode_string_with_other_encoding():
    """Test the encoding argument for string sources."""
    expected = get_encoder().read_from("\u00e9".encode("latin-1")).write_to_string()
    assert get_encoder().read_from("\u00e9", encoding="latin-1").write_to_string() == expected


def test_encode_write_to_returns_symbol_count():
    out = io.StringIO()
    assert get_encoder().read_from(b"0123456789a").write_to(out) == 12
    assert len(out.getvalue()) == 12


def test_encode_write_to_bytes():
    """Test encoded text as UTF-8 bytes, 3 bytes per default symbol."""
    encoded = get_encoder().read_from(b"abc").write_to_bytes()
    assert len(encoded) == 12
    assert encoded.decode("utf-8") == get_encoder().read_from(b"abc").write_to_string()


def test_encode_stream_not_closed():
    """Test the source stream is left open."""
    source = io.BytesIO(b"payload")
    get_encoder().read_from(source).write_to_string()
    assert not source.closed


# ============================================================================
# Decoder Builder Tests
# ============================================================================

def test_decode_to_string(symbols):
    assert get_decoder().read_from(symbols(389, 550, 192, "PAD")).write_to_string() == "abc"


def test_decode_to_string_replaces_invalid_text():
    """Test undecodable bytes become replacement characters."""
    encoded = get_encoder().read_from(b"\xff\xfeok").write_to_string()
    assert get_decoder().read_from(encoded).write_to_string() == "\ufffd\ufffdok"


def test_decode_from_encoded_text_bytes():
    """Test bytes sources hold the encoded text in UTF-8."""
    encoded = get_encoder().read_from(b"hello world").write_to_bytes()
    assert get_decoder().read_from(encoded).write_to_bytes() == b"hello world"


def test_decode_from_binary_stream_split_characters():
    """Test a multi-byte character split between reads is decoded whole."""
    encoded = get_encoder().read_from(b"hello world").write_to_bytes()
    config = CodecConfig(read_size=2)
    decoder = Base1024(config=config).get_decoder()
    assert decoder.read_from(io.BytesIO(encoded)).write_to_bytes() == b"hello world"


def test_decode_from_text_stream():
    encoded = get_encoder().read_from(b"streamed").write_to_string()
    out = io.BytesIO()
    assert get_decoder().read_from(io.StringIO(encoded)).write_to(out) == 8
    assert out.getvalue() == b"streamed"


def test_decode_errors_propagate(symbols):
    with pytest.raises(TruncationError):
        get_decoder().read_from(symbols(1, 2)).write_to_bytes()
    with pytest.raises(InvalidSymbolError):
        get_decoder().read_from("abcd").write_to_bytes()


# ============================================================================
# Facade Tests
# ============================================================================

def test_facade_round_trip():
    codec = Base1024()
    text = codec.encode(b"hello world")
    assert len(text) == 12
    assert codec.decode(text) == b"hello world"
    assert codec.decode_to_string(text) == "hello world"


def test_facade_vectorized_path_matches_streaming():
    """Test inputs above the threshold give the same output."""
    data = bytes(range(256)) * 40
    vectorized = Base1024(config=CodecConfig(vectorize_threshold=1))
    streaming = Base1024(config=CodecConfig(vectorize_threshold=10 ** 9))

    text = vectorized.encode(data)
    assert text == streaming.encode(data)
    assert vectorized.decode(text) == data
    assert streaming.decode(text) == data


def test_facade_strict_mode(symbols):
    text = symbols(4, "PAD", 7, "PAD")
    assert Base1024().decode(text) == bytes([1])
    with pytest.raises(InvalidSymbolError):
        Base1024(config=CodecConfig(strict=True)).decode(text)


def test_facade_custom_alphabet():
    """Test a codec bound to its own alphabet."""
    codec = Base1024(alphabet=EMOJI)
    text = codec.encode(b"k")
    assert text == chr(0x1F300 + (ord("k") << 2) + 1) + "\u2615" * 3
    assert codec.decode(text) == b"k"
    assert codec.alphabet is EMOJI

    with pytest.raises(InvalidSymbolError):
        Base1024().decode(text)


def test_facade_streams():
    codec = Base1024()
    encoded = io.StringIO()
    assert codec.encode_stream(io.BytesIO(b"0123456789"), encoded) == 8

    decoded = io.BytesIO()
    assert codec.decode_stream(io.StringIO(encoded.getvalue()), decoded) == 10
    assert decoded.getvalue() == b"0123456789"


def test_facade_from_listing_file(tmp_path):
    path = tmp_path / "emojis.txt"
    path.write_text("\n".join(f"{c:X}" for c in range(0x1F300, 0x1F300 + 1027)), encoding="ascii")

    codec = Base1024.from_listing_file(str(path))
    assert codec.encode(b"k") == Base1024(alphabet=EMOJI).encode(b"k")


def test_facade_from_env(monkeypatch):
    monkeypatch.setenv("BASE1024_STRICT", "yes")
    assert Base1024.from_env().config.strict is True


def test_module_level_builders_follow_process_alphabet():
    """Test the default encoder resolves the alphabet at call time."""
    encoder = get_encoder()
    with AlphabetContext(EMOJI):
        text = encoder.read_from(b"k").write_to_string()
    assert text[0] == chr(0x1F300 + (ord("k") << 2) + 1)
    assert encoder.read_from(b"k").write_to_string() == Base1024().encode(b"k")
