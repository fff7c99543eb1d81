"""CatalogSearch Analyzers - Text Analysis Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from catalogsearch_core.analyzers.base import (
    Analyzer,
    AnalyzerRegistry,
    FilteringTokenFilter,
    Token,
    TokenFilter,
    TokenStream,
    Tokenizer,
    get_analyzer,
    register_analyzer,
)
from catalogsearch_core.analyzers.filters import (
    EmptyTokenFilter,
    LowercaseFilter,
    StopwordFilter,
)
from catalogsearch_core.analyzers.path import (
    PathAnalyzerConfig,
    PathTokenizerAnalyzer,
)
from catalogsearch_core.analyzers.stopwords import (
    ENGLISH_STOP_WORDS,
    load_stopwords,
)
from catalogsearch_core.analyzers.tokenizers import PathTokenizer

__all__ = [
    "Analyzer",
    "AnalyzerRegistry",
    "FilteringTokenFilter",
    "Token",
    "TokenFilter",
    "TokenStream",
    "Tokenizer",
    "get_analyzer",
    "register_analyzer",
    "EmptyTokenFilter",
    "LowercaseFilter",
    "StopwordFilter",
    "PathAnalyzerConfig",
    "PathTokenizerAnalyzer",
    "ENGLISH_STOP_WORDS",
    "load_stopwords",
    "PathTokenizer",
]
