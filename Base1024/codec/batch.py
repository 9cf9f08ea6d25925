"""
Vectorized encoding and decoding of in-memory buffers.

Full 5-byte chunks and padding-free groups are packed with numpy; the short
tail goes through the per-group functions. Results are identical to the
streaming codec, and any invalid input is handed to the streaming decoder so
errors carry the same positions.
"""

import io
import numpy as np
from typing import Optional, Union

from Base1024.alphabet import Alphabet, get_alphabet
from Base1024.alphabet.constants import CHUNK_SIZE, GROUP_SIZE
from Base1024.codec.encoder import encode_symbols
from Base1024.codec.decoder import decode_group, decode_stream, find_malformed

BytesLike = Union[bytes, bytearray, memoryview]


def encode_buffer(data: BytesLike, alphabet: Optional[Alphabet] = None) -> str:
    """
    Encodes a whole buffer into a symbol string.

    Args:
        data: Bytes to encode

    Returns:
        Encoded string, 4 symbols per started 5 bytes
    """
    if alphabet is None:
        alphabet = get_alphabet()

    arr = np.frombuffer(data, dtype=np.uint8)
    full = len(arr) - len(arr) % CHUNK_SIZE

    chunks = arr[:full].reshape(-1, CHUNK_SIZE).astype(np.uint16)
    b0, b1, b2, b3, b4 = chunks.T

    values = np.empty((len(chunks), GROUP_SIZE), dtype=np.uint16)
    values[:, 0] = (b0 << 2) | (b1 >> 6)
    values[:, 1] = ((b1 & 0x3F) << 4) | (b2 >> 4)
    values[:, 2] = ((b2 & 0x0F) << 6) | (b3 >> 2)
    values[:, 3] = ((b3 & 0x03) << 8) | b4

    code_points = alphabet.code_points[values].astype("<u4")
    text = code_points.tobytes().decode("utf-32-le")

    if full < len(arr):
        text += encode_symbols(arr[full:].tobytes(), alphabet)
    return text


def decode_buffer(
    text: str,
    alphabet: Optional[Alphabet] = None,
    strict: bool = False,
) -> bytes:
    """
    Decodes a whole symbol string into bytes.

    Args:
        text: Encoded string
        alphabet: Symbol table (default: process-wide alphabet)
        strict: Reject padding in positions an encoder never uses

    Returns:
        Decoded bytes

    Raises:
        InvalidSymbolError: A symbol is neither in the alphabet nor padding
        TruncationError: The length is not a multiple of 4
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    if alphabet is None:
        alphabet = get_alphabet()

    if len(text) % GROUP_SIZE:
        return _decode_streaming(text, alphabet, strict)
    if not text:
        return b""

    code_points = np.frombuffer(text.encode("utf-32-le", "surrogatepass"), dtype="<u4")
    values, known = alphabet.lookup_code_points(code_points)

    groups = len(text) // GROUP_SIZE
    body = groups if known[-GROUP_SIZE:].all() else groups - 1
    split = body * GROUP_SIZE

    # padding anywhere but the last group, or an unknown symbol
    if not known[:split].all():
        return _decode_streaming(text, alphabet, strict)

    v = values[:split].reshape(-1, GROUP_SIZE).astype(np.uint16)
    v0, v1, v2, v3 = v.T

    out = np.empty((body, CHUNK_SIZE), dtype=np.uint8)
    out[:, 0] = (v0 >> 2).astype(np.uint8)
    out[:, 1] = (((v0 & 0x3) << 6) | (v1 >> 4)).astype(np.uint8)
    out[:, 2] = (((v1 & 0xF) << 4) | (v2 >> 6)).astype(np.uint8)
    out[:, 3] = (((v2 & 0x3F) << 2) | (v3 >> 8)).astype(np.uint8)
    out[:, 4] = (v3 & 0xFF).astype(np.uint8)
    head = out.tobytes()

    if split == len(text):
        return head

    tail = [alphabet.slot_for(symbol) for symbol in text[split:]]
    if any(slot is None for slot in tail):
        return _decode_streaming(text, alphabet, strict)
    if strict and find_malformed(tail) is not None:
        return _decode_streaming(text, alphabet, strict)
    return head + decode_group(tail)


def _decode_streaming(text: str, alphabet: Alphabet, strict: bool) -> bytes:
    sink = io.BytesIO()
    decode_stream(text, sink, alphabet=alphabet, strict=strict)
    return sink.getvalue()
