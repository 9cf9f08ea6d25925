"""
Encoding of byte chunks into base-1024 symbol groups.

Every chunk of up to 5 bytes becomes exactly 4 slots. Bytes missing from a
short final chunk count as zero for the bit arithmetic and are marked by
padding sentinels.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from Base1024.alphabet import Alphabet, Slot, SlotKind, PAD_FULL, PAD_SHORT, get_alphabet
from Base1024.alphabet.constants import CHUNK_SIZE, GROUP_SIZE
from Base1024.utils.io import iter_byte_chunks
from Base1024.utils.logging import get_logger


@dataclass(frozen=True)
class ChunkLayout:
    """How a chunk of a given length fills its group."""

    values: int
    padding: Optional[SlotKind]


CHUNK_LAYOUTS: Dict[int, ChunkLayout] = {
    1: ChunkLayout(values=1, padding=SlotKind.PAD_FULL),
    2: ChunkLayout(values=2, padding=SlotKind.PAD_FULL),
    3: ChunkLayout(values=3, padding=SlotKind.PAD_FULL),
    # the two low bits of b3 select the closing sentinel
    4: ChunkLayout(values=3, padding=SlotKind.PAD_SHORT),
    5: ChunkLayout(values=4, padding=None),
}


def chunk_layout(length: int) -> ChunkLayout:
    try:
        return CHUNK_LAYOUTS[length]
    except KeyError:
        raise ValueError(f"Unexpected chunk length: {length}") from None


def pack_values(chunk: bytes) -> Tuple[int, int, int, int]:
    """Splits up to 5 bytes into four 10-bit values, big-endian."""
    b0, b1, b2, b3, b4 = bytes(chunk).ljust(CHUNK_SIZE, b"\x00")
    return (
        (b0 << 2) | (b1 >> 6),
        ((b1 & 0x3F) << 4) | (b2 >> 4),
        ((b2 & 0x0F) << 6) | (b3 >> 2),
        ((b3 & 0x03) << 8) | b4,
    )


def encode_chunk(chunk: bytes) -> Tuple[Slot, ...]:
    """
    Encodes one chunk of 1 to 5 bytes into a group of 4 slots.

    Args:
        chunk: Raw bytes

    Returns:
        Tuple of 4 slots
    """
    layout = chunk_layout(len(chunk))
    values = pack_values(chunk)

    slots = [Slot.of(v) for v in values[:layout.values]]
    if layout.padding is SlotKind.PAD_SHORT:
        slots.append(PAD_SHORT[chunk[3] & 0x03])
    slots.extend([PAD_FULL] * (GROUP_SIZE - len(slots)))
    return tuple(slots)


def encode_symbols(chunk: bytes, alphabet: Optional[Alphabet] = None) -> str:
    """Encodes one chunk straight into its 4 symbols."""
    if alphabet is None:
        alphabet = get_alphabet()
    return "".join(alphabet.symbol_for(slot) for slot in encode_chunk(chunk))


def encode_stream(
    source: Any,
    sink: Any,
    alphabet: Optional[Alphabet] = None,
    read_size: int = 8192,
) -> int:
    """
    Encodes a byte source into a symbol sink, one group at a time.

    The source is read to completion but not closed. Errors raised by the
    source or the sink propagate unchanged; groups already written stay
    written.

    Args:
        source: Bytes-like object, readable binary stream or iterable of blocks
        sink: Object with a ``write(str)`` method
        alphabet: Symbol table (default: process-wide alphabet)
        read_size: Bytes requested per read from a stream

    Returns:
        Number of symbols written
    """
    if alphabet is None:
        alphabet = get_alphabet()

    bytes_read = 0
    symbols_written = 0

    for chunk in iter_byte_chunks(source, CHUNK_SIZE, read_size):
        sink.write(encode_symbols(chunk, alphabet))
        bytes_read += len(chunk)
        symbols_written += GROUP_SIZE

    get_logger().transfer_summary("encode", bytes_read, symbols_written)
    return symbols_written
