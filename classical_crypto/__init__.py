"""
classical_crypto — A catalogue of historical ciphers
=====================================================
From Caesar's shift to Hill's matrices (1929).

Ciphers:
    MONOALPHABETIC  — Caesar (fixed shift)
    POLYALPHABETIC  — Vigenère (repeating key)
    POLYGRAPHIC     — Hill (modular linear algebra over 26 letters)

Every cipher validates its key on construction (raising InvalidKey)
and then exposes encrypt() / decrypt() on plain strings.

None of these are secure. They are teaching tools; do not protect
anything of value with them.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .alphabet        import Alphabet, STANDARD
from .cipher          import Cipher
from .errors          import (CipherError, InvalidKey, InvalidInput,
                              DimensionMismatch, SingularMatrixError)
from .matrix          import (Matrix, mod_inverse, inverse_key_matrix,
                              integer_determinant, is_modular_inverse)
from .ciphers.caesar  import CaesarCipher
from .ciphers.vigenere import VigenereCipher
from .ciphers.hill    import HillCipher

__all__ = [
    "Alphabet",
    "STANDARD",
    "Cipher",
    "CipherError",
    "InvalidKey",
    "InvalidInput",
    "DimensionMismatch",
    "SingularMatrixError",
    "Matrix",
    "mod_inverse",
    "inverse_key_matrix",
    "integer_determinant",
    "is_modular_inverse",
    "CaesarCipher",
    "VigenereCipher",
    "HillCipher",
]
