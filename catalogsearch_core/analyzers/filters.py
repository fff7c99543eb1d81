"""CatalogSearch Token Filters - Token Transformation Pipeline.

Filters for normalizing and removing tokens.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Iterator, Optional

from catalogsearch_core.analyzers.base import (
    FilteringTokenFilter,
    TokenFilter,
    Token,
    TokenStream,
)
from catalogsearch_core.analyzers.stopwords import ENGLISH_STOP_WORDS, to_stopword_set


def lowercase(text: str) -> str:
    """Lowercase each codepoint on its own with the simple mapping.

    No context rules (a word-final capital sigma maps to ``σ``) and no
    expansions (``İ`` maps to ``i``), so the length never changes.
    """
    return "".join(char.lower()[:1] for char in text)


class LowercaseFilter(TokenFilter):
    """Converts tokens to lowercase.

    Uses per-codepoint case mapping, so results do not depend on the
    host locale or on neighbouring characters.
    """

    def filter(self, stream: TokenStream) -> TokenStream:
        """Convert all tokens to lowercase."""
        return TokenStream(self._lowered(stream))

    @staticmethod
    def _lowered(stream: TokenStream) -> Iterator[Token]:
        for token in stream:
            lowered = lowercase(token.text)
            yield token if lowered == token.text else replace(token, text=lowered)


class StopwordFilter(FilteringTokenFilter):
    """Removes common stopwords.

    Stopwords are common words that don't carry significant meaning
    and can be removed to improve search performance. Matching is
    case-sensitive unless ``ignore_case`` is set.
    """

    DEFAULT_STOPWORDS = ENGLISH_STOP_WORDS

    def __init__(
        self,
        stopwords: Optional[Iterable[str]] = None,
        ignore_case: bool = False,
    ):
        """Initialize filter.

        Args:
            stopwords: Custom stopword set, copied on construction
            ignore_case: Case-insensitive matching
        """
        words = to_stopword_set(stopwords)
        self.stopwords = self.DEFAULT_STOPWORDS if words is None else words
        self.ignore_case = ignore_case

        if ignore_case:
            self.stopwords = frozenset(lowercase(w) for w in self.stopwords)

    def accept(self, token: Token) -> bool:
        term = lowercase(token.text) if self.ignore_case else token.text
        return term not in self.stopwords


class EmptyTokenFilter(FilteringTokenFilter):
    """Removes empty-string tokens left by repeated delimiters."""

    def accept(self, token: Token) -> bool:
        return bool(token.text)


__all__ = [
    "EmptyTokenFilter",
    "LowercaseFilter",
    "StopwordFilter",
    "lowercase",
]
