"""
The 1024-symbol alphabet shared by the encoder and decoder.

Provides the symbol table, its padding sentinels and the process-wide default.
"""

from Base1024.alphabet.table import Alphabet
from Base1024.alphabet.slots import Slot, SlotKind, PAD_FULL, PAD_SHORT
from Base1024.alphabet.default import (
    DEFAULT_ALPHABET,
    get_alphabet,
    set_alphabet,
    AlphabetContext,
)
from Base1024.alphabet.loader import load_alphabet, load_listing
from Base1024.alphabet.checks import (
    check_bijection,
    check_sentinels,
    check_order_preserving,
    analyze_alphabet,
    AlphabetReport,
)
from Base1024.alphabet.constants import (
    ALPHABET_SIZE,
    BITS_PER_SYMBOL,
    CHUNK_SIZE,
    GROUP_SIZE,
)

__all__ = [
    "Alphabet",
    "Slot",
    "SlotKind",
    "PAD_FULL",
    "PAD_SHORT",
    "DEFAULT_ALPHABET",
    "get_alphabet",
    "set_alphabet",
    "AlphabetContext",
    "load_alphabet",
    "load_listing",
    "check_bijection",
    "check_sentinels",
    "check_order_preserving",
    "analyze_alphabet",
    "AlphabetReport",
    "ALPHABET_SIZE",
    "BITS_PER_SYMBOL",
    "CHUNK_SIZE",
    "GROUP_SIZE",
]
