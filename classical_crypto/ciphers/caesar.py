"""
Caesar Cipher — MONOALPHABETIC: Fixed Shift
============================================
Every letter moves a fixed number of places along the alphabet.
Case is preserved; anything that isn't a-z/A-Z passes through.

    E(x) = (x + n) mod 26
    D(x) = (x - n) mod 26

Historical note: named after Julius Caesar, who reportedly used a shift
of three for military correspondence. 25 useful keys: broken by hand.
"""

from ..alphabet import STANDARD
from ..cipher import Cipher
from ..errors import InvalidKey


class CaesarCipher(Cipher):
    """Caesar shift cipher, shift in 1-26."""

    def __init__(self, shift: int):
        if not isinstance(shift, int) or not 1 <= shift <= 26:
            raise InvalidKey("Invalid shift factor. Must be in the range 1-26.")
        self._shift = shift

    @property
    def shift(self) -> int:
        return self._shift

    def encrypt(self, message: str) -> str:
        return self._substitute(message, self._shift)

    def decrypt(self, ciphertext: str) -> str:
        return self._substitute(ciphertext, -self._shift)

    def __repr__(self):
        return f"CaesarCipher(shift={self._shift})"

    @staticmethod
    def _substitute(text: str, shift: int) -> str:
        out = []
        for ch in text:
            pos = STANDARD.position_of(ch)
            if pos is None:
                out.append(ch)
            else:
                out.append(STANDARD.letter_at(STANDARD.modulo(pos + shift), ch.isupper()))
        return "".join(out)
