"""
Source and sink helpers for Base1024.

Byte sources are bytes-like objects (anything exporting a buffer), readable
binary streams or iterables of byte blocks. Symbol sources are strings,
readable text streams or iterables of strings. Python strings are sequences of
code points, and every symbol is a single code point, so reading a text source
never splits a symbol.
"""

import codecs
import os
from typing import Any, Iterable, Iterator, Optional

from Base1024.alphabet.constants import CHUNK_SIZE

BYTES_LIKE = (bytes, bytearray, memoryview)


def is_readable(source: Any) -> bool:
    return callable(getattr(source, "read", None))


def byte_view(source: Any) -> Optional[memoryview]:
    """
    Gets a flat byte view of any buffer-protocol object.

    Returns None for objects that do not export a buffer. ``array.array`` and
    numpy arrays are viewed as their raw memory, the same bytes ``bytes()``
    would give.
    """
    try:
        view = memoryview(source)
    except TypeError:
        return None
    if view.ndim == 1 and view.format == "B" and view.c_contiguous:
        return view
    return memoryview(view.tobytes())


def iter_byte_blocks(source: Any, read_size: int = 8192) -> Iterator[bytes]:
    """Yields raw blocks from a byte source, in whatever sizes it delivers them."""
    if isinstance(source, str):
        raise TypeError("Expected a byte source, got str; encode it first")

    view = byte_view(source)
    if view is not None:
        yield bytes(view)
    elif is_readable(source):
        while True:
            block = source.read(read_size)
            if not block:
                break
            if isinstance(block, str):
                raise TypeError("Expected a binary stream, got a text stream")
            yield block
    elif isinstance(source, Iterable):
        for block in source:
            view = byte_view(block)
            if view is None:
                raise TypeError(
                    f"Expected byte blocks, got an item of type {type(block).__name__}"
                )
            yield bytes(view)
    else:
        raise TypeError(f"Unsupported byte source: {type(source).__name__}")


def iter_byte_chunks(
    source: Any,
    size: int = CHUNK_SIZE,
    read_size: int = 8192,
) -> Iterator[bytes]:
    """
    Yields fixed-size chunks from a byte source.

    Short reads are accumulated, so every chunk except possibly the last one
    is exactly ``size`` bytes long.
    """
    data = byte_view(source)
    if data is not None:
        for i in range(0, len(data), size):
            yield bytes(data[i:i + size])
        return

    pending = bytearray()
    for block in iter_byte_blocks(source, read_size):
        pending += block
        full = len(pending) - len(pending) % size
        for i in range(0, full, size):
            yield bytes(pending[i:i + size])
        del pending[:full]

    if pending:
        yield bytes(pending)


def iter_text_blocks(
    source: Any,
    encoding: str = "utf-8",
    errors: str = "strict",
    read_size: int = 8192,
) -> Iterator[str]:
    """
    Decodes a byte source into text blocks.

    Uses an incremental decoder so a multi-byte character spanning two reads
    comes out whole.
    """
    decoder = codecs.getincrementaldecoder(encoding)(errors)
    for block in iter_byte_blocks(source, read_size):
        text = decoder.decode(block)
        if text:
            yield text
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


def iter_symbols(source: Any, read_size: int = 8192) -> Iterator[str]:
    """Yields one symbol at a time from a symbol source."""
    if isinstance(source, str):
        yield from source
    elif byte_view(source) is not None:
        raise TypeError("Expected a symbol source, got bytes; decode the text first")
    elif is_readable(source):
        while True:
            block = source.read(read_size)
            if not block:
                break
            if not isinstance(block, str):
                raise TypeError("Expected a text stream, got a binary stream")
            yield from block
    elif isinstance(source, Iterable):
        for item in source:
            if not isinstance(item, str):
                raise TypeError(
                    f"Expected strings, got an item of type {type(item).__name__}"
                )
            yield from item
    else:
        raise TypeError(f"Unsupported symbol source: {type(source).__name__}")


def ensure_dir(path: str) -> str:
    """Ensures that a directory exists. Create it if it doesn't."""
    os.makedirs(path, exist_ok=True)
    return path
