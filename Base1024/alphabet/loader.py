"""
Loading alphabet listings from text files.
"""

import os
from typing import List

from Base1024.alphabet.constants import LISTING_PAD_FULL, LISTING_PAD_0
from Base1024.alphabet.table import Alphabet


def parse_code_point(token: str) -> int:
    """Parses ``1F004``, ``0x1F004`` or ``U+1F004``."""
    token = token.strip()
    if token[:2].lower() in ("0x", "u+"):
        token = token[2:]
    return int(token, 16)


def load_listing(filepath: str) -> List[int]:
    """
    Reads a listing of hexadecimal code points, one per line.

    Blank lines and anything after ``#`` are ignored.
    """
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"Alphabet listing not found: {filepath}")

    listing = []
    with open(filepath, "r", encoding="ascii") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.split("#", 1)[0].strip()
            if not line:
                continue
            try:
                listing.append(parse_code_point(line))
            except ValueError:
                raise ValueError(f"{filepath}:{lineno}: invalid code point {line!r}") from None
    return listing


def load_alphabet(
    filepath: str,
    pad_full: int = LISTING_PAD_FULL,
    pad_0: int = LISTING_PAD_0,
) -> Alphabet:
    """
    Loads an alphabet from a listing file.

    Args:
        filepath: Path to the listing
        pad_full: Code point of the ``PAD_FULL`` sentinel
        pad_0: Code point of the ``PAD_0`` sentinel

    Returns:
        Alphabet instance
    """
    return Alphabet.from_listing(load_listing(filepath), pad_full, pad_0)
