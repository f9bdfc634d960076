"""
Short Code Generator

Produces random fixed-length codes over the base62 alphabet. A generated
code is not guaranteed to be unique; the store retries until it finds one
that is free.

Why random instead of a counter?
- No shared counter to coordinate
- Codes are not guessable from their neighbours
- 62^6 (about 56.8 billion) codes keep collisions rare
"""

import random
import string
from typing import Optional

BASE62_CHARS = string.ascii_uppercase + string.ascii_lowercase + string.digits


class CodeGenerator:
    """
    Random short code generator.

    The alphabet and RNG are injectable so tests can shrink the code space
    and make collisions deterministic.
    """

    def __init__(
        self,
        alphabet: str = BASE62_CHARS,
        length: int = 6,
        rng: Optional[random.Random] = None
    ):
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        if length <= 0:
            raise ValueError(f"length must be positive, got {length}")
        self.alphabet = alphabet
        self.length = length
        self._rng = rng or random.SystemRandom()

    @property
    def space_size(self) -> int:
        """Number of distinct codes this generator can produce."""
        return len(self.alphabet) ** self.length

    def generate(self) -> str:
        """Return a code of `length` characters drawn uniformly from the alphabet."""
        return ''.join(self._rng.choice(self.alphabet) for _ in range(self.length))
