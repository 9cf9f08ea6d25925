"""
Tests for source helpers, logging and timing utilities.
"""
import io
import logging
from array import array

import numpy as np
import pytest

from Base1024.codec import decode_stream, encode_stream
from Base1024.utils import (
    Timer,
    byte_view,
    get_logger,
    iter_byte_blocks,
    iter_byte_chunks,
    iter_symbols,
    iter_text_blocks,
)


def test_byte_chunks_from_bytes():
    assert list(iter_byte_chunks(b"abcdefghijkl")) == [b"abcde", b"fghij", b"kl"]


def test_byte_chunks_accumulate_short_reads():
    """Test blocks of odd sizes are regrouped into full chunks."""
    blocks = [b"ab", b"c", b"defg", b"", b"hijklm"]
    assert list(iter_byte_chunks(blocks)) == [b"abcde", b"fghij", b"klm"]


def test_byte_blocks_reject_text_stream():
    with pytest.raises(TypeError):
        list(iter_byte_blocks(io.StringIO("text")))


def test_byte_blocks_reject_unknown_source():
    with pytest.raises(TypeError):
        list(iter_byte_blocks(42))


@pytest.mark.parametrize(
    "source",
    [
        [1, 2, 3],
        (0xAB, 0xCD),
        [b"ab", 3],
        ["ab"],
        range(4),
    ],
)
def test_byte_blocks_reject_non_byte_items(source):
    """Test iterables whose items are not byte blocks are rejected."""
    with pytest.raises(TypeError):
        list(iter_byte_blocks(source))
    with pytest.raises(TypeError):
        encode_stream(source, io.StringIO())


@pytest.mark.parametrize(
    "source",
    [
        array("B", [1, 2, 3, 4, 5, 6]),
        array("H", [0x0102, 0x0304]),
        np.array([1, 2, 3, 250], dtype=np.uint8),
        np.arange(6, dtype=np.uint16).reshape(2, 3),
        np.arange(12, dtype=np.uint8)[::2],
    ],
)
def test_buffer_sources_encode_their_raw_bytes(source):
    """Test buffer-protocol objects are read as the bytes they hold."""
    raw = np.asarray(source).tobytes()
    assert bytes(byte_view(source)) == raw
    assert b"".join(iter_byte_blocks(source)) == raw
    assert b"".join(iter_byte_chunks(source)) == raw

    text = io.StringIO()
    encode_stream(source, text)
    out = io.BytesIO()
    decode_stream(text.getvalue(), out)
    assert out.getvalue() == raw


def test_iterable_of_buffers():
    blocks = [np.array([1, 2], dtype=np.uint8), bytearray(b"cde"), memoryview(b"fg")]
    assert list(iter_byte_chunks(blocks)) == [b"\x01\x02cde", b"fg"]


def test_byte_view_of_non_buffers():
    assert byte_view("text") is None
    assert byte_view(42) is None
    assert byte_view([1, 2]) is None


def test_text_blocks_keep_split_characters_whole():
    data = "一丁丂".encode("utf-8")
    text = "".join(iter_text_blocks(io.BytesIO(data), read_size=1))
    assert text == "一丁丂"


def test_text_blocks_incomplete_character():
    with pytest.raises(UnicodeDecodeError):
        list(iter_text_blocks(b"\xe4\xb8"))


def test_symbols_from_sources():
    assert list(iter_symbols("ab")) == ["a", "b"]
    assert list(iter_symbols(io.StringIO("abc"), read_size=2)) == ["a", "b", "c"]
    assert list(iter_symbols(["ab", "c"])) == ["a", "b", "c"]


def test_symbols_reject_unknown_source():
    with pytest.raises(TypeError):
        list(iter_symbols(3.5))


@pytest.mark.parametrize("source", [[b"ab"], ["", 7], np.array([1, 2], dtype=np.uint8)])
def test_symbols_reject_non_string_items(source):
    """Test non-string items raise TypeError from the source helper."""
    with pytest.raises(TypeError):
        list(iter_symbols(source))
    with pytest.raises(TypeError):
        decode_stream(source, io.BytesIO())


def test_logger_is_shared():
    assert get_logger() is get_logger()


def test_logger_set_level_by_name():
    logger = get_logger()
    previous = logger.logger.level
    try:
        logger.set_level("debug")
        assert logger.is_debug()
        logger.set_level(logging.WARNING)
        assert not logger.is_debug()
    finally:
        logger.set_level(previous)


def test_timer_measures_and_rates():
    with Timer() as timer:
        sum(range(1000))
    assert timer.elapsed > 0.0
    assert timer.rate(100) > 0.0


def test_timer_stop_without_start():
    with pytest.raises(RuntimeError):
        Timer().stop()
