"""
Short code generation strategies for URL shortener.
Uses Strategy Pattern to allow different generation algorithms.
"""

import string
import random
from abc import ABC, abstractmethod

from urlgen.database.store import URLStore


class ShortCodeGenerationError(Exception):
    """Raised when no unique short code could be produced"""


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""

    @abstractmethod
    def generate(self, url_id: int, store: URLStore) -> str:
        """
        Generate a short code.

        Args:
            url_id: The database ID of the URL record
            store: Store for strategies that need to check uniqueness

        Returns:
            A unique short code string
        """
        pass


class RandomShortCodeStrategy(ShortCodeStrategy):
    """
    Random alphanumeric codes, checked against the store for collisions.

    Pros: Simple, unpredictable
    Cons: Collision risk, one store lookup per attempt
    """

    def __init__(self, length: int = 5, max_retries: int = 5):
        self.length = length
        self.max_retries = max_retries
        self.characters = string.ascii_letters + string.digits

    def generate(self, url_id: int, store: URLStore) -> str:
        """Generate random short code with collision checking"""
        for _ in range(self.max_retries):
            short_code = self._generate_random_string()

            _, taken = store.get(short_code)
            if not taken:
                return short_code

        raise ShortCodeGenerationError(
            f"Could not generate unique short code after {self.max_retries} attempts"
        )

    def _generate_random_string(self) -> str:
        return ''.join(random.choice(self.characters) for _ in range(self.length))


class Base62ShortCodeStrategy(ShortCodeStrategy):
    """
    Base62 encoding of the row ID plus a salt.

    Pros: No collisions, no store lookups
    Cons: Predictable if salt is known
    """

    BASE62_CHARS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

    def __init__(self, salt: int = 1000, max_length: int = 5):
        self.salt = salt
        self.max_length = max_length

    def generate(self, url_id: int, store: URLStore) -> str:
        """
        Encode ``url_id + salt`` in Base62.

        Raises ValueError if the code is longer than max_length; truncating
        would produce duplicates.
        """
        obfuscated_id = url_id + self.salt
        encoded = self._base62_encode(obfuscated_id)

        if len(encoded) > self.max_length:
            raise ValueError(
                f"Generated code '{encoded}' exceeds max length {self.max_length}. "
                f"URL ID: {url_id}, Obfuscated ID: {obfuscated_id}."
            )

        return encoded

    def _base62_encode(self, number: int) -> str:
        if number == 0:
            return self.BASE62_CHARS[0]

        result = ""
        while number > 0:
            result = self.BASE62_CHARS[number % 62] + result
            number //= 62

        return result
