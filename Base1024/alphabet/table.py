"""
The 1024-symbol alphabet and its padding sentinels.
"""

import numpy as np
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from Base1024.alphabet.constants import (
    ALPHABET_SIZE,
    LISTING_SIZE,
    SENTINEL_COUNT,
    SHORT_PAD_COUNT,
    SHORT_PAD_POSITIONS,
)
from Base1024.alphabet.slots import Slot, SlotKind, PAD_FULL, PAD_SHORT


def _check_symbol(symbol: str) -> None:
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValueError(f"Alphabet symbols must be single code points, got {symbol!r}")
    if 0xD800 <= ord(symbol) <= 0xDFFF:
        raise ValueError(f"Surrogate code point U+{ord(symbol):04X} cannot be a symbol")


class Alphabet:
    """
    Immutable bijection between the values 0..1023 and 1024 symbols, plus the
    five padding sentinels ``PAD_FULL`` and ``PAD_0``..``PAD_3``.

    Every symbol is a single Unicode code point, so a symbol is never split
    by a text reader.

    Usage:
        alphabet = Alphabet.from_listing(range(0x4E02, 0x5205), 0x4E00, 0x4E01)
        alphabet.forward(389)          # -> symbol
        alphabet.reverse(symbol)       # -> 389, or None
        alphabet.slot_for(symbol)      # -> Slot, or None
    """

    def __init__(self, symbols: Sequence[str], pad_full: str, short_pads: Sequence[str]):
        symbols = tuple(symbols)
        short_pads = tuple(short_pads)

        if len(symbols) != ALPHABET_SIZE:
            raise ValueError(f"Expected {ALPHABET_SIZE} symbols, got {len(symbols)}")
        if len(short_pads) != SHORT_PAD_COUNT:
            raise ValueError(f"Expected {SHORT_PAD_COUNT} short pads, got {len(short_pads)}")

        for symbol in symbols + (pad_full,) + short_pads:
            _check_symbol(symbol)

        reverse = {s: i for i, s in enumerate(symbols)}
        if len(reverse) != ALPHABET_SIZE:
            raise ValueError("Alphabet symbols must be distinct")

        sentinels: Dict[str, Slot] = {pad_full: PAD_FULL}
        for k, pad in enumerate(short_pads):
            sentinels[pad] = PAD_SHORT[k]
        if len(sentinels) != SENTINEL_COUNT:
            raise ValueError("Padding sentinels must be distinct")

        overlap = set(sentinels) & set(reverse)
        if overlap:
            shown = ", ".join(f"U+{ord(s):04X}" for s in sorted(overlap))
            raise ValueError(f"Padding sentinels overlap the alphabet: {shown}")

        self._forward = symbols
        self._reverse = reverse
        self._sentinels = sentinels
        self.pad_full = pad_full
        self.short_pads = short_pads

        self._code_points = np.array([ord(s) for s in symbols], dtype=np.uint32)
        order = np.argsort(self._code_points, kind="stable")
        self._sorted_code_points = self._code_points[order]
        self._sorted_values = order.astype(np.uint16)
        for arr in (self._code_points, self._sorted_code_points, self._sorted_values):
            arr.flags.writeable = False

    @classmethod
    def from_code_points(
        cls,
        code_points: Iterable[int],
        pad_full: int,
        short_pads: Sequence[int],
    ) -> "Alphabet":
        """Creates an alphabet from code points already in value order."""
        return cls(
            [chr(c) for c in code_points],
            chr(pad_full),
            [chr(c) for c in short_pads],
        )

    @classmethod
    def from_listing(cls, listing: Iterable[int], pad_full: int, pad_0: int) -> "Alphabet":
        """
        Creates an alphabet from a listing of code points.

        ``PAD_1``..``PAD_3`` are removed from the listing at positions 256, 512
        and 768 (each index applies after the previous removal); the first 1024
        remaining code points become the symbols for values 0..1023.

        Args:
            listing: At least 1027 code points
            pad_full: Code point of the ``PAD_FULL`` sentinel
            pad_0: Code point of the ``PAD_0`` sentinel

        Returns:
            Alphabet instance
        """
        remaining: List[int] = list(listing)
        if len(remaining) < LISTING_SIZE:
            raise ValueError(
                f"A listing needs at least {LISTING_SIZE} code points, got {len(remaining)}"
            )

        short_pads = [pad_0]
        for position in SHORT_PAD_POSITIONS:
            short_pads.append(remaining.pop(position))

        return cls.from_code_points(remaining[:ALPHABET_SIZE], pad_full, short_pads)

    def __len__(self) -> int:
        return ALPHABET_SIZE

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._reverse

    def __repr__(self) -> str:
        return (
            f"Alphabet(U+{ord(self._forward[0]):04X}..U+{ord(self._forward[-1]):04X}, "
            f"pad_full=U+{ord(self.pad_full):04X})"
        )

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._forward

    @property
    def sentinels(self) -> Tuple[str, ...]:
        """Gets the sentinels in the order ``PAD_FULL, PAD_0, .., PAD_3``."""
        return (self.pad_full,) + self.short_pads

    @property
    def code_points(self) -> np.ndarray:
        """Gets the code point of every symbol, indexed by value (read-only)."""
        return self._code_points

    def forward(self, value: int) -> str:
        if not 0 <= value < ALPHABET_SIZE:
            raise ValueError(f"Value {value} is outside 0..{ALPHABET_SIZE - 1}")
        return self._forward[value]

    def reverse(self, symbol: str) -> Optional[int]:
        return self._reverse.get(symbol)

    def is_valid(self, symbol: str) -> bool:
        """Checks whether a symbol is an alphabet member or a sentinel."""
        return symbol in self._reverse or symbol in self._sentinels

    def slot_for(self, symbol: str) -> Optional[Slot]:
        value = self._reverse.get(symbol)
        if value is not None:
            return Slot.of(value)
        return self._sentinels.get(symbol)

    def symbol_for(self, slot: Slot) -> str:
        if slot.kind is SlotKind.VALUE:
            return self._forward[slot.value]
        if slot.kind is SlotKind.PAD_SHORT:
            return self.short_pads[slot.value]
        return self.pad_full

    def lookup_code_points(self, code_points: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Vectorized reverse lookup.

        Args:
            code_points: Array of code points

        Returns:
            Tuple of (values, mask); ``values`` is only meaningful where ``mask``
            is True, i.e. where the code point is an alphabet member
        """
        idx = np.searchsorted(self._sorted_code_points, code_points)
        idx = np.minimum(idx, ALPHABET_SIZE - 1)
        mask = self._sorted_code_points[idx] == code_points
        return self._sorted_values[idx], mask
