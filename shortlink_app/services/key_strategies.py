"""
Random key generation strategies for short links.
Uses Strategy Pattern so the identifier source can be swapped (tests inject
deterministic ones).
"""

import secrets
import string
from abc import ABC, abstractmethod

# Same alphabet as the JS nanoid helper used by the dashboard: 0-9A-Za-z
KEY_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase


class KeyStrategy(ABC):
    """Abstract base class for key generation strategies"""

    @abstractmethod
    def generate(self) -> str:
        """
        Generate one candidate key.

        Uniqueness is NOT checked here; the caller checks the candidate
        against the Link table and asks again on collision.
        """
        pass


class RandomKeyStrategy(KeyStrategy):
    """
    Fixed-length random identifier from a URL-safe alphabet.

    Uses `secrets` so keys can't be predicted from previous ones.
    With the default alphabet: 62^7 ≈ 3.5e12 short keys, 62^69 long keys.
    """

    def __init__(self, length: int = 7, alphabet: str = KEY_ALPHABET):
        if length < 1:
            raise ValueError(f"Key length must be positive, got {length}")
        self.length = length
        self.alphabet = alphabet

    def generate(self) -> str:
        return ''.join(secrets.choice(self.alphabet) for _ in range(self.length))
