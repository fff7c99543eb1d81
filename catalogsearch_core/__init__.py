"""CatalogSearch - Search Analysis for Metadata Catalogs.

Text analysis for catalog paths, plus the importer form configuration
and secure random helpers that sit alongside it.

Architecture:
┌─────────────────────────────────────────────────────────────────────┐
│                       Path Analysis Pipeline                        │
│  ┌────────────┐      ┌────────────┐      ┌────────────┐             │
│  │    Path    │  →   │ Lowercase  │  →   │  Stopword  │  → tokens   │
│  │ Tokenizer  │      │   Filter   │      │   Filter   │             │
│  └────────────┘      └────────────┘      └────────────┘             │
└─────────────────────────────────────────────────────────────────────┘

Key Features:
- Lossless path segmentation with offsets and positions
- Locale-independent lowercasing
- English stopword removal with position renumbering
- Importer parameter grouping and ordering
- Cryptographically strong random strings and salts

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

from catalogsearch_core.analyzers import (
    Analyzer,
    EmptyTokenFilter,
    ENGLISH_STOP_WORDS,
    LowercaseFilter,
    PathAnalyzerConfig,
    PathTokenizer,
    PathTokenizerAnalyzer,
    StopwordFilter,
    Token,
    TokenFilter,
    TokenStream,
    Tokenizer,
    get_analyzer,
    load_stopwords,
)
from catalogsearch_core.importer import (
    ImportGroupConfig,
    ImportParameter,
    ImportParameterConfig,
    ImportParameterGroup,
    ImportParameterSet,
)
from catalogsearch_core.security import (
    RandomSourceUnavailableError,
    generate_alphanumeric,
    generate_full,
    generate_salt,
)

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Analyzers
    "Analyzer",
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
    "PathTokenizer",
    "LowercaseFilter",
    "StopwordFilter",
    "EmptyTokenFilter",
    "PathAnalyzerConfig",
    "PathTokenizerAnalyzer",
    "ENGLISH_STOP_WORDS",
    "get_analyzer",
    "load_stopwords",
    # Importer
    "ImportGroupConfig",
    "ImportParameter",
    "ImportParameterConfig",
    "ImportParameterGroup",
    "ImportParameterSet",
    # Security
    "RandomSourceUnavailableError",
    "generate_alphanumeric",
    "generate_full",
    "generate_salt",
]
