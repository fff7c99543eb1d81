"""CatalogSearch Secure Random - Random Strings and Salts.

Random values for credential handling, drawn from the operating
system's cryptographically strong source.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import locale
import logging
import secrets
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# Inclusive codepoint range: "1" through "z".
MINIMUM_CODEPOINT = 49
MAXIMUM_CODEPOINT = 122

SALT_LENGTH = 8

_system_random = secrets.SystemRandom()


class RandomSourceUnavailableError(RuntimeError):
    """Raised when the host has no strong source of randomness."""


def _is_alphanumeric(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _generate(length: int, predicate: Optional[Callable[[str], bool]] = None) -> str:
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"Length must be an int, got {type(length).__name__}")
    if length < 0:
        raise ValueError(f"Length must not be negative: {length}")

    chars = []
    try:
        while len(chars) < length:
            char = chr(_system_random.randint(MINIMUM_CODEPOINT, MAXIMUM_CODEPOINT))
            if predicate is None or predicate(char):
                chars.append(char)
    except NotImplementedError as e:
        logger.error(f"No strong random source available: {e}")
        raise RandomSourceUnavailableError("No cryptographically strong random source available") from e

    return "".join(chars)


def generate_alphanumeric(length: int) -> str:
    """Generate a random string of ASCII letters and digits.

    Characters are drawn uniformly from the codepoint range and
    anything that is not a letter or digit is discarded.

    Args:
        length: Number of characters

    Returns:
        Random string
    """
    return _generate(length, _is_alphanumeric)


def generate_full(length: int) -> str:
    """Generate a random string over the whole codepoint range.

    Includes the punctuation between the digits and the letters.

    Args:
        length: Number of characters

    Returns:
        Random string
    """
    return _generate(length)


def generate_salt() -> bytes:
    """Generate an 8-byte salt in the platform's preferred encoding."""
    return generate_full(SALT_LENGTH).encode(locale.getpreferredencoding(False))


__all__ = [
    "MAXIMUM_CODEPOINT",
    "MINIMUM_CODEPOINT",
    "SALT_LENGTH",
    "RandomSourceUnavailableError",
    "generate_alphanumeric",
    "generate_full",
    "generate_salt",
]
