"""
Alphabet service
================
Maps single characters to and from their position in a fixed alphabet,
preserving case, and performs the non-negative modular arithmetic the
substitution ciphers need.

Instances are immutable; `STANDARD` (a-z) is the one every cipher
uses unless another alphabet is injected.
"""

import string
from typing import Optional

from .errors import InvalidInput


class Alphabet:
    """A fixed, ordered set of letters."""

    def __init__(self, letters: str):
        if not letters:
            raise InvalidInput("Alphabet must contain at least one letter.")
        if len(letters.lower()) != len(letters) or len(letters.upper()) != len(letters):
            # e.g. "ß".upper() == "SS" would misalign the two cases
            raise InvalidInput("Alphabet letters must keep their length when case-folded.")
        self._lower = letters.lower()
        self._upper = letters.upper()

    def __len__(self) -> int:
        return len(self._lower)

    def __repr__(self):
        return f"Alphabet({self._lower!r})"

    def position_of(self, ch: str) -> Optional[int]:
        """Position of `ch` (either case), or None if it isn't a letter of this alphabet."""
        if len(ch) != 1:
            return None
        idx = self._lower.find(ch)
        if idx < 0:
            idx = self._upper.find(ch)
        return idx if idx >= 0 else None

    def letter_at(self, index: int, uppercase: bool = False) -> Optional[str]:
        """Letter at `index`, or None when the index is out of bounds."""
        if not 0 <= index < len(self):
            return None
        return self._upper[index] if uppercase else self._lower[index]

    def modulo(self, i: int) -> int:
        """Reduce any integer into [0, len(alphabet))."""
        return i % len(self)

    def is_valid(self, text: str) -> bool:
        return all(self.position_of(c) is not None for c in text)

    def scrub(self, text: str) -> str:
        """Drop every character that has no position in the alphabet."""
        return "".join(c for c in text if self.position_of(c) is not None)


STANDARD = Alphabet(string.ascii_lowercase)
