"""
Factory for creating key generation strategies.
Uses caching to avoid creating multiple instances.
"""

from enum import Enum
from shortlink_app.services.key_strategies import KeyStrategy, RandomKeyStrategy
from shortlink_app.config import settings


class KeyLength(Enum):
    """Available key sizes"""
    SHORT = "short"
    LONG = "long"


class KeyFactory:
    """Factory for creating key strategies with caching"""

    _instances = {}  # Cache for strategy instances

    @classmethod
    def create_strategy(cls, kind: KeyLength = KeyLength.SHORT) -> KeyStrategy:
        """
        Create or return cached key strategy.

        Args:
            kind: Key size. Lengths come from settings.

        Returns:
            A cached instance of a KeyStrategy

        Raises:
            ValueError: If kind is unknown
        """
        if kind in cls._instances:
            return cls._instances[kind]

        if kind == KeyLength.SHORT:
            instance = RandomKeyStrategy(length=settings.short_key_length)
        elif kind == KeyLength.LONG:
            instance = RandomKeyStrategy(length=settings.long_key_length)
        else:
            raise ValueError(f"Unknown key length: {kind}")

        cls._instances[kind] = instance
        return instance

    @classmethod
    def clear_instances(cls):
        """Clear cached instances (for testing)"""
        cls._instances = {}
