from typing import Optional
from contextlib import contextmanager

from Base1024.alphabet.constants import DEFAULT_LISTING, DEFAULT_PAD_FULL, DEFAULT_PAD_0
from Base1024.alphabet.table import Alphabet


DEFAULT_ALPHABET = Alphabet.from_listing(DEFAULT_LISTING, DEFAULT_PAD_FULL, DEFAULT_PAD_0)

_alphabet: Optional[Alphabet] = None

def get_alphabet() -> Alphabet:
    if _alphabet is None:
        return DEFAULT_ALPHABET
    return _alphabet

def set_alphabet(alphabet: Optional[Alphabet]) -> None:
    """Replaces the process-wide alphabet. ``None`` restores the default."""
    global _alphabet
    _alphabet = alphabet

@contextmanager
def AlphabetContext(alphabet: Alphabet):
    global _alphabet
    previous_alphabet = _alphabet
    _alphabet = alphabet
    try:
        yield alphabet
    finally:
        _alphabet = previous_alphabet
