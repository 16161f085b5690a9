"""Shortcode generation utility

This module provides a generator of fixed-length random shortcodes drawn from
the Base62 alphabet [a-zA-Z0-9].

Classes:
    ShortcodeGenerator(length=6, seed=None):
        Produce random shortcodes from a private, per-instance random source.

Functions:
    is_valid_shortcode(value, length=None) -> bool:
        Check whether a string only uses characters of the shortcode alphabet.

Example:
    >>> from shortlinks.utils import ShortcodeGenerator
    >>> generator = ShortcodeGenerator(length=6)
    >>> shortcode = generator.generate()
    >>> len(shortcode)
    6

NOTE:
    - Shortcodes are collision-avoidance keys, not security tokens. The
      generator deliberately uses the non-cryptographic `random.Random`.
    - Each generator owns its random source, so unrelated stores never
      contend over a shared global generator.
"""

import random
import string
import time


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits


class ShortcodeGenerator:
    """Generate fixed-length random Base62 shortcodes.

    Attributes:
        length (int):
            Number of characters in every generated shortcode.

    Methods:
        generate() -> str:
            Return a new random shortcode.
    """

    def __init__(self, length: int = 6, seed: int | None = None):
        """Initialize the generator and seed its private random source.

        Args:
            length (int, optional):
                Length of generated shortcodes. Defaults to 6.

            seed (int | None, optional):
                Seed for the random source. Defaults to the current time
                in nanoseconds (seeded once per generator).

        Raises:
            TypeError: If length is not an integer.
            ValueError: If length is smaller than 1.
        """
        if not isinstance(length, int) or isinstance(length, bool):
            raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
        if length < 1:
            raise ValueError(f'Length must be a positive integer (given value: {length}).')

        self.length = length
        self._random = random.Random(time.time_ns() if seed is None else seed)  # noqa: S311

    def generate(self) -> str:
        """Return a random shortcode.

        Each character is drawn uniformly, with replacement, from ALPHABET.

        Returns:
            str: shortcode of exactly `self.length` characters.
        """
        return ''.join(self._random.choices(ALPHABET, k=self.length))

    def __call__(self) -> str:
        return self.generate()


def is_valid_shortcode(value: str, length: int | None = None) -> bool:
    """Check whether `value` is a well-formed shortcode.

    Args:
        value (str):
            Candidate shortcode.

        length (int | None, optional):
            Required length. Any non-zero length is accepted when None.

    Returns:
        bool: True if `value` is non-empty, only uses ALPHABET characters
              and (optionally) has the required length.

    Example:
        >>> is_valid_shortcode('abc123')
        True
        >>> is_valid_shortcode('abc-123')
        False
        >>> is_valid_shortcode('abc123', length=7)
        False
    """
    if not isinstance(value, str) or not value:
        return False
    if length is not None and len(value) != length:
        return False
    return all(c in ALPHABET for c in value)
