"""
Error taxonomy shared by every cipher in the catalogue.

All errors are ValueError subclasses, so callers that already guard
key/message handling with `except ValueError` keep working.
"""


class CipherError(ValueError):
    """Base class for every error raised by classical_crypto."""


class InvalidKey(CipherError):
    """The key cannot be used: bad shape, bad range, or not invertible."""


class InvalidInput(CipherError):
    """The message (or key phrase) holds characters or sizes we can't process."""


class DimensionMismatch(CipherError):
    """A vector's length does not match the key matrix dimension."""


class SingularMatrixError(CipherError):
    """The matrix has no real-valued inverse."""
