"""
Consistency checks for alphabet tables.

Whether encoded strings sort in the same order as their inputs depends on the
table, not on the codec, so it is checked per alphabet.
"""

from dataclasses import dataclass, field
from typing import List

from Base1024.alphabet.constants import ALPHABET_SIZE, RESIDUAL_SHIFT
from Base1024.alphabet.table import Alphabet


def check_bijection(alphabet: Alphabet) -> bool:
    """Checks ``reverse(forward(v)) == v`` for every value."""
    return all(alphabet.reverse(alphabet.forward(v)) == v for v in range(ALPHABET_SIZE))


def check_sentinels(alphabet: Alphabet) -> bool:
    """Checks the five sentinels are distinct and outside the alphabet."""
    sentinels = alphabet.sentinels
    if len(set(sentinels)) != len(sentinels):
        return False
    return not any(s in alphabet for s in sentinels)


def check_order_preserving(alphabet: Alphabet) -> bool:
    """
    Checks the table layout under which sorting encoded strings by code point
    gives the same order as sorting the inputs bytewise.

    Conditions:
        - symbols increase strictly with their value
        - PAD_FULL < PAD_0 < forward(0)
        - forward(256k - 1) < PAD_k < forward(256k) for k in 1..3
    """
    code_points = [ord(s) for s in alphabet.symbols]
    if any(a >= b for a, b in zip(code_points, code_points[1:])):
        return False

    pad_full = ord(alphabet.pad_full)
    pads = [ord(p) for p in alphabet.short_pads]
    if not pad_full < pads[0] < code_points[0]:
        return False

    for k in range(1, len(pads)):
        boundary = k << RESIDUAL_SHIFT
        if not code_points[boundary - 1] < pads[k] < code_points[boundary]:
            return False
    return True


@dataclass
class AlphabetReport:
    bijective: bool
    sentinels_disjoint: bool
    order_preserving: bool
    problems: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.bijective and self.sentinels_disjoint and self.order_preserving

    def summary(self) -> str:
        lines = [
            f"bijective:          {'yes' if self.bijective else 'NO'}",
            f"sentinels disjoint: {'yes' if self.sentinels_disjoint else 'NO'}",
            f"order preserving:   {'yes' if self.order_preserving else 'NO'}",
        ]
        lines.extend(f"  - {p}" for p in self.problems)
        return "\n".join(lines)


def analyze_alphabet(alphabet: Alphabet) -> AlphabetReport:
    report = AlphabetReport(
        bijective=check_bijection(alphabet),
        sentinels_disjoint=check_sentinels(alphabet),
        order_preserving=check_order_preserving(alphabet),
    )
    if not report.bijective:
        report.problems.append("reverse lookup does not invert forward lookup")
    if not report.sentinels_disjoint:
        report.problems.append("sentinels collide with each other or with the alphabet")
    if not report.order_preserving:
        report.problems.append("encoded strings will not sort like their inputs")
    return report
