"""Short code generation utilities."""

import random
import string
from typing import Callable, Optional

from .errors import CodeGenerationError


class ShortCodeGenerator:
    """Generate short codes for URLs."""

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9

    def __init__(self, default_length: int = 6, max_attempts: int = 10):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
            max_attempts: Codes tried before giving up in generate_unique
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.default_length = default_length
        self.max_attempts = max_attempts
        self._random = random.SystemRandom()

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        length = length or self.default_length
        return ''.join(self._random.choices(self.BASE62_CHARS, k=length))

    def generate_unique(
        self,
        is_taken: Callable[[str], bool],
        length: Optional[int] = None,
    ) -> str:
        """Generate a random code that ``is_taken`` reports as free.

        The predicate is consulted on every attempt, so callers that need
        the result to stay free must hold their own lock around this call
        and the subsequent insert.

        Args:
            is_taken: Returns True if a code is already in use
            length: Length of the code (uses default if not specified)

        Returns:
            Unused short code

        Raises:
            CodeGenerationError: If every attempt collided
        """
        for _ in range(self.max_attempts):
            code = self.generate_random(length)
            if not is_taken(code):
                return code

        raise CodeGenerationError(
            f"Unable to generate unique short code after {self.max_attempts} attempts"
        )

