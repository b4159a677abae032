"""
Hill Cipher — POLYGRAPHIC: Modular Linear Algebra
==================================================
Each block of n letters becomes a column vector of alphabet positions,
is multiplied by an n×n key matrix, and is reduced modulo 26.
Decryption runs the same pipeline with the key's inverse modulo 26.

Historical note: Lester S. Hill, 1929. The first polygraphic cipher
practical to operate on more than three symbols at once. Linear, so a
handful of known plaintext blocks recovers the key outright.

Key admissibility:
    - square, at least 2x2, integer entries
    - invertible over the reals (det != 0)
    - gcd(det mod 26, 26) == 1, so det has an inverse modulo 26

Padding: messages whose length is not a multiple of n are right-padded
with 'a'. Decryption does NOT strip it; the engine cannot tell filler
from genuine trailing letters. Callers drop
`len(ciphertext) - len(message)` trailing characters themselves.

Role in the catalogue: the only cipher that needs real algorithmic work.
Not secure. Educational only.

Dependencies: numpy >= 1.24 (via classical_crypto.matrix)
"""

import logging
import math
import numbers
from typing import List, Sequence

from ..alphabet import STANDARD, Alphabet
from ..cipher import Cipher
from ..errors import DimensionMismatch, InvalidInput, InvalidKey
from ..matrix import Matrix, integer_determinant, inverse_key_matrix

logger = logging.getLogger(__name__)


class HillCipher(Cipher):
    """
    Hill cipher over a square integer key matrix.

    Build from a matrix:      HillCipher([[2, 4, 5], [9, 2, 1], [3, 17, 7]])
    or from a key phrase:     HillCipher.from_phrase("CEFJCBDRH", 3)
    """

    MODULUS  = 26
    FILLER   = "a"
    MIN_SIZE = 2

    def __init__(self, key: Sequence[Sequence[int]], alphabet: Alphabet = STANDARD):
        if len(alphabet) != self.MODULUS:
            raise InvalidKey(f"Hill cipher needs a {self.MODULUS}-letter alphabet.")
        self._alphabet = alphabet
        self._rows = self._validate_key(key)
        # Only residues mod 26 matter; reducing keeps float products exact.
        self._key = Matrix([[x % self.MODULUS for x in r] for r in self._rows])
        self._inverse_key = inverse_key_matrix(self._key, self.MODULUS)
        logger.debug(f"Hill key accepted: {self.chunk_size}x{self.chunk_size}")

    @classmethod
    def from_phrase(cls, phrase: str, chunk_size: int,
                    alphabet: Alphabet = STANDARD) -> "HillCipher":
        """
        Build the key row-major from the alphabet positions of `phrase`.

        `phrase` must hold exactly chunk_size² letters. The resulting
        matrix still goes through the usual key validation, so an
        unlucky phrase is rejected with InvalidKey.
        """
        if chunk_size < cls.MIN_SIZE:
            raise InvalidInput(f"Chunk size must be at least {cls.MIN_SIZE}.")
        if chunk_size * chunk_size != len(phrase):
            raise InvalidInput(
                f"Phrase length {len(phrase)} does not match a "
                f"{chunk_size}x{chunk_size} key ({chunk_size * chunk_size} letters)."
            )
        positions = [alphabet.position_of(c) for c in phrase]
        if None in positions:
            raise InvalidInput("Key phrase must contain only alphabetic characters.")

        key = [positions[r * chunk_size:(r + 1) * chunk_size] for r in range(chunk_size)]
        return cls(key, alphabet=alphabet)

    # ── properties ───────────────────────────────────────────────────────────

    @property
    def chunk_size(self) -> int:
        return self._key.rows

    @property
    def key(self) -> List[List[int]]:
        return [list(r) for r in self._rows]

    def inverse_key(self) -> List[List[int]]:
        """The key's inverse modulo 26, as integer rows."""
        return [[int(x) for x in row] for row in self._inverse_key.tolist()]

    def padding_for(self, message: str) -> int:
        """Number of filler letters encrypt() will append to `message`."""
        remainder = len(message) % self.chunk_size
        return self.chunk_size - remainder if remainder else 0

    # ── Cipher contract ──────────────────────────────────────────────────────

    def encrypt(self, message: str) -> str:
        """
        Encrypt an alphabetic message. Case is preserved per position.

        Raises InvalidInput on whitespace, digits or symbols. The
        ciphertext may be longer than `message` by the padding.
        """
        self._check_alphabetic(message)
        padding = self.padding_for(message)
        if padding:
            logger.debug(f"Padding message of {len(message)} letters with {padding} filler")
        return self._transform(self._key, message + self.FILLER * padding)

    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt a ciphertext produced by encrypt().

        Any filler letters added during encryption are returned as-is.
        """
        self._check_alphabetic(ciphertext)
        if len(ciphertext) % self.chunk_size:
            raise InvalidInput(
                f"Ciphertext length {len(ciphertext)} is not a multiple "
                f"of the key size {self.chunk_size}."
            )
        return self._transform(self._inverse_key, ciphertext)

    def __repr__(self):
        return f"HillCipher({self.chunk_size}x{self.chunk_size})"

    # ── helpers ──────────────────────────────────────────────────────────────

    def _validate_key(self, key) -> List[List[int]]:
        try:
            rows = [list(r) for r in key]
        except TypeError as e:
            raise InvalidKey("Key must be a matrix (a sequence of rows).") from e
        n = len(rows)
        if n < self.MIN_SIZE:
            raise InvalidKey(f"Key must be at least {self.MIN_SIZE}x{self.MIN_SIZE}.")
        if any(len(r) != n for r in rows):
            raise InvalidKey("Key must be a square matrix.")
        if not all(_is_integral(x) for r in rows for x in r):
            raise InvalidKey("Key entries must be integers.")

        rows = [[int(x) for x in r] for r in rows]
        # Exact: a float determinant loses digits once it nears 2**53.
        det = integer_determinant(rows)
        if det == 0:
            raise InvalidKey(
                "The inverse of this matrix cannot be calculated for decryption."
            )
        if math.gcd(det % self.MODULUS, self.MODULUS) != 1:
            raise InvalidKey(
                f"Determinant {det} shares a factor with {self.MODULUS}; "
                f"the key has no inverse modulo {self.MODULUS}."
            )
        logger.debug(f"Key determinant {det} (mod {self.MODULUS} = {det % self.MODULUS})")
        return rows

    def _check_alphabetic(self, text: str):
        if not self._alphabet.is_valid(text):
            raise InvalidInput(
                "Invalid message. Please strip any whitespace or non-alphabetic symbols."
            )

    def _transform(self, key: Matrix, text: str) -> str:
        n = key.rows
        return "".join(self._transform_chunk(key, text[i:i + n])
                       for i in range(0, len(text), n))

    def _transform_chunk(self, key: Matrix, chunk: str) -> str:
        if len(chunk) != key.rows:
            raise DimensionMismatch(
                f"Cannot transform a chunk of {len(chunk)} letters with a "
                f"{key.rows}x{key.rows} key."
            )
        vector = [self._alphabet.position_of(c) for c in chunk]
        product = key.multiply(vector)

        out = []
        for orig, value in zip(chunk, product):
            pos = int(round(value)) % self.MODULUS
            out.append(self._alphabet.letter_at(pos, orig.isupper()))
        return "".join(out)


def _is_integral(x) -> bool:
    return (isinstance(x, numbers.Real)
            and math.isfinite(x)
            and float(x).is_integer())
