"""
Group slot model.

A group position holds either a 10-bit alphabet value or one of the padding
sentinels. Concrete symbols only appear at the I/O boundary, through
:class:`Base1024.alphabet.table.Alphabet`.
"""

from dataclasses import dataclass
from enum import Enum

from Base1024.alphabet.constants import (
    ALPHABET_SIZE,
    GROUP_SIZE,
    RESIDUAL_SHIFT,
    SHORT_PAD_COUNT,
)


class SlotKind(Enum):
    VALUE = "value"
    PAD_FULL = "pad_full"
    PAD_SHORT = "pad_short"


@dataclass(frozen=True)
class Slot:
    """
    One position of a group.

    ``value`` is the 10-bit symbol value for ``VALUE`` slots, the 2-bit
    residual for ``PAD_SHORT`` slots and always 0 for ``PAD_FULL``.
    """

    kind: SlotKind
    value: int = 0

    def __post_init__(self):
        if self.kind is SlotKind.VALUE:
            limit = ALPHABET_SIZE
        elif self.kind is SlotKind.PAD_SHORT:
            limit = SHORT_PAD_COUNT
        else:
            limit = 1
        if not 0 <= self.value < limit:
            raise ValueError(f"Slot value {self.value} out of range for {self.kind.value}")

    @classmethod
    def of(cls, value: int) -> "Slot":
        if not 0 <= value < ALPHABET_SIZE:
            raise ValueError(f"Slot value {value} out of range for value")
        return VALUES[value]

    @property
    def is_value(self) -> bool:
        return self.kind is SlotKind.VALUE

    @property
    def is_padding(self) -> bool:
        return self.kind is not SlotKind.VALUE

    def bits(self, index: int) -> int:
        """
        Contribution of this slot to the 10-bit value at group position ``index``.

        A short pad carries its residual in the two high bits of the last
        value. Sentinels anywhere else contribute nothing.
        """
        if self.kind is SlotKind.VALUE:
            return self.value
        if self.kind is SlotKind.PAD_SHORT and index == GROUP_SIZE - 1:
            return self.value << RESIDUAL_SHIFT
        return 0


PAD_FULL = Slot(SlotKind.PAD_FULL)
PAD_SHORT = tuple(Slot(SlotKind.PAD_SHORT, k) for k in range(SHORT_PAD_COUNT))
VALUES = tuple(Slot(SlotKind.VALUE, v) for v in range(ALPHABET_SIZE))
