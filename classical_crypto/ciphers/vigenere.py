"""
Vigenère Cipher — POLYALPHABETIC: Repeated-Key Shift
=====================================================
Each letter is shifted by the alphabet position of the matching letter
in a repeating key. The key only advances over letters: spaces,
punctuation and anything outside a-z pass through untouched.

    message   ATTACK AT DAWN
    keystream CRYPTC RY PTCR

Historical note: Blaise de Vigenère, 1553. Called "le chiffre
indéchiffrable" for 300 years, until Kasiski published a general
attack in 1863.

Role in the catalogue: classic polyalphabetic baseline. Educational only.
"""

from itertools import cycle, islice

from ..alphabet import STANDARD
from ..cipher import Cipher
from ..errors import InvalidKey


class VigenereCipher(Cipher):
    """Vigenère cipher with a plain repeating key. Case is preserved."""

    def __init__(self, key: str):
        if not key:
            raise InvalidKey("Invalid key. It must have at least one character.")
        if not STANDARD.is_valid(key):
            raise InvalidKey("Invalid key. Vigenère keys cannot contain non-alphabetic symbols.")
        self._key = key

    def keystream(self, message: str) -> str:
        """The key repeated (or truncated) to the letter count of `message`."""
        letters = len(STANDARD.scrub(message))
        return "".join(islice(cycle(self._key), letters))

    def encrypt(self, message: str) -> str:
        """Ci = (Mi + Ki) mod 26"""
        return self._substitute(message, +1)

    def decrypt(self, ciphertext: str) -> str:
        """Mi = (Ci - Ki) mod 26"""
        return self._substitute(ciphertext, -1)

    def __repr__(self):
        return f"VigenereCipher(key_length={len(self._key)})"

    def _substitute(self, text: str, direction: int) -> str:
        stream = iter(self.keystream(text))
        result = []
        for ch in text:
            pos = STANDARD.position_of(ch)
            if pos is None:
                result.append(ch)
                continue
            shift = STANDARD.position_of(next(stream))
            result.append(STANDARD.letter_at(STANDARD.modulo(pos + direction * shift),
                                             ch.isupper()))
        return "".join(result)
