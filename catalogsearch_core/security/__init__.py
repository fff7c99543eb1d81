"""CatalogSearch Security Utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from catalogsearch_core.security.secure_random import (
    MAXIMUM_CODEPOINT,
    MINIMUM_CODEPOINT,
    SALT_LENGTH,
    RandomSourceUnavailableError,
    generate_alphanumeric,
    generate_full,
    generate_salt,
)

__all__ = ["MAXIMUM_CODEPOINT", "MINIMUM_CODEPOINT", "SALT_LENGTH", "RandomSourceUnavailableError", "generate_alphanumeric", "generate_full", "generate_salt"]
