"""
Decoding of base-1024 symbol groups back into bytes.
"""

from enum import Enum
from itertools import islice
from typing import Any, List, Optional, Sequence, Tuple

from Base1024.alphabet import Alphabet, Slot, SlotKind, get_alphabet
from Base1024.alphabet.constants import GROUP_SIZE
from Base1024.errors import Base1024Error, InvalidSymbolError, TruncationError
from Base1024.utils.io import iter_symbols
from Base1024.utils.logging import get_logger


class DecoderState(Enum):
    AWAITING_GROUP = "awaiting_group"
    DONE = "done"


def group_length(slots: Sequence[Slot]) -> int:
    """Number of bytes a group stands for, from its padding."""
    if slots[1].kind is SlotKind.PAD_FULL:
        return 1
    if slots[2].kind is SlotKind.PAD_FULL:
        return 2
    if slots[3].kind is SlotKind.PAD_FULL:
        return 3
    if slots[3].kind is SlotKind.PAD_SHORT:
        return 4
    return 5


def unpack_values(v0: int, v1: int, v2: int, v3: int) -> bytes:
    """Joins four 10-bit values back into 5 bytes."""
    return bytes((
        v0 >> 2,
        ((v0 & 0x3) << 6) | (v1 >> 4),
        ((v1 & 0xF) << 4) | (v2 >> 6),
        ((v2 & 0x3F) << 2) | (v3 >> 8),
        v3 & 0xFF,
    ))


def decode_group(slots: Sequence[Slot]) -> bytes:
    """
    Decodes one group of 4 slots into 1 to 5 bytes.

    Args:
        slots: Exactly 4 slots

    Returns:
        Decoded bytes
    """
    if len(slots) != GROUP_SIZE:
        raise ValueError(f"A group has {GROUP_SIZE} slots, got {len(slots)}")

    v0, v1, v2, v3 = (slot.bits(i) for i, slot in enumerate(slots))
    return unpack_values(v0, v1, v2, v3)[:group_length(slots)]


def find_malformed(slots: Sequence[Slot]) -> Optional[Tuple[int, str]]:
    """
    Finds the first slot that an encoder would never produce there.

    Returns:
        Tuple of (index, reason), or None for a well-formed group
    """
    if slots[0].is_padding:
        return 0, "is padding at the start of a group"

    after_pad_full = False
    for i, slot in enumerate(slots[1:], start=1):
        if slot.kind is SlotKind.PAD_SHORT and i != GROUP_SIZE - 1:
            return i, "is a short pad before the end of a group"
        if after_pad_full and slot.kind is not SlotKind.PAD_FULL:
            return i, "follows full padding"
        if slot.kind is SlotKind.PAD_FULL:
            after_pad_full = True
    return None


def decode_stream(
    source: Any,
    sink: Any,
    alphabet: Optional[Alphabet] = None,
    strict: bool = False,
    read_size: int = 8192,
) -> int:
    """
    Decodes a symbol source into a byte sink, one group at a time.

    A group is validated completely before its bytes are written, so a failing
    group never leaves partial output behind. Bytes of earlier groups stay in
    the sink and are counted in the error's ``bytes_written``.

    Args:
        source: String, readable text stream or iterable of strings
        sink: Object with a ``write(bytes)`` method
        alphabet: Symbol table (default: process-wide alphabet)
        strict: Also reject padding in positions an encoder never uses
        read_size: Characters requested per read from a stream

    Returns:
        Number of bytes written

    Raises:
        InvalidSymbolError: A symbol is neither in the alphabet nor padding
        TruncationError: The source ended in the middle of a group
    """
    if alphabet is None:
        alphabet = get_alphabet()

    symbols = iter_symbols(source, read_size)
    state = DecoderState.AWAITING_GROUP
    position = 0
    bytes_written = 0

    try:
        while state is DecoderState.AWAITING_GROUP:
            chars: List[str] = []
            group: List[Slot] = []

            for symbol in islice(symbols, GROUP_SIZE):
                slot = alphabet.slot_for(symbol)
                if slot is None:
                    raise InvalidSymbolError(symbol, position, bytes_written)
                chars.append(symbol)
                group.append(slot)
                position += 1

            if not group:
                state = DecoderState.DONE
                continue
            if len(group) < GROUP_SIZE:
                raise TruncationError(position, GROUP_SIZE - len(group), bytes_written)

            if strict:
                malformed = find_malformed(group)
                if malformed is not None:
                    index, reason = malformed
                    raise InvalidSymbolError(
                        chars[index],
                        position - GROUP_SIZE + index,
                        bytes_written,
                        reason=reason,
                    )

            out = decode_group(group)
            sink.write(out)
            bytes_written += len(out)
    except Base1024Error as e:
        get_logger().warning(f"decode failed: {e}")
        raise

    get_logger().transfer_summary("decode", position, bytes_written)
    return bytes_written
