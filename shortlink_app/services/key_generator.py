"""
Collision-checked random key generation.

Generate a candidate, check the Link table, repeat on collision. The loop is
bounded: `max_attempts` candidates at the requested size, then (for short
keys) `max_attempts` more from the long key space, then KeyGenerationError.
"""

from typing import Awaitable, Callable, Optional

from shortlink_app.config import settings
from shortlink_app.exceptions import KeyGenerationError
from shortlink_app.services.key_factory import KeyFactory, KeyLength
from shortlink_app.services.key_strategies import KeyStrategy
from shortlink_app.utils.keys import clean_prefix

# (domain, key) -> True if taken. None (database disabled) counts as free.
ExistsCheck = Callable[[str, str], Awaitable[Optional[bool]]]


class KeyGenerator:
    def __init__(
        self,
        strategy_factory: Callable[[KeyLength], KeyStrategy] = KeyFactory.create_strategy,
        max_attempts: Optional[int] = None
    ):
        self.strategy_factory = strategy_factory
        self.max_attempts = max_attempts if max_attempts is not None else settings.max_key_attempts

    def candidate(self, kind: KeyLength, prefix: Optional[str] = None) -> str:
        """One candidate key, with the cleaned prefix joined by `/`"""
        key = self.strategy_factory(kind).generate()
        if prefix:
            cleaned = clean_prefix(prefix)
            if cleaned:
                key = f"{cleaned}/{key}"
        return key

    async def generate(
        self,
        domain: str,
        exists: ExistsCheck,
        prefix: Optional[str] = None,
        long: bool = False
    ) -> str:
        """
        Return the first candidate key that is free on `domain`.

        Raises:
            KeyGenerationError: every candidate collided
        """
        sizes = [KeyLength.LONG] if long else [KeyLength.SHORT, KeyLength.LONG]
        attempts = 0

        for kind in sizes:
            if attempts:
                print(
                    f"⚠️  {attempts} colliding {sizes[0].value} keys on {domain}, "
                    f"widening to {kind.value} keys"
                )
            for _ in range(self.max_attempts):
                attempts += 1
                key = self.candidate(kind, prefix)
                if not await exists(domain, key):
                    return key

        raise KeyGenerationError(domain, attempts)
