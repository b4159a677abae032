"""
The contract every cipher in the catalogue implements.

A cipher is built once from its key (the constructor validates it and
raises InvalidKey on failure) and is immutable afterwards, so one
instance can be shared freely between threads.
"""

from abc import ABC, abstractmethod


class Cipher(ABC):
    """Initialise with a key, then encrypt / decrypt text."""

    @classmethod
    def new(cls, key) -> "Cipher":
        """Alias for the constructor: validate `key` and build the cipher."""
        return cls(key)

    @abstractmethod
    def encrypt(self, message: str) -> str:
        """Encrypt `message` using the cipher's algorithm."""

    @abstractmethod
    def decrypt(self, ciphertext: str) -> str:
        """Decrypt `ciphertext` using the cipher's algorithm."""
