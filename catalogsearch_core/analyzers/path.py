"""CatalogSearch Path Analyzer - Analysis of Hierarchical Identifiers.

Turns catalog paths such as ``folder/subfolder/item`` into lowercase,
stopword-free search tokens.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, Optional, Set

from catalogsearch_core.analyzers.base import Analyzer, register_analyzer
from catalogsearch_core.analyzers.filters import LowercaseFilter, StopwordFilter
from catalogsearch_core.analyzers.stopwords import (
    ENGLISH_STOP_WORDS,
    load_stopwords,
    to_stopword_set,
)
from catalogsearch_core.analyzers.tokenizers import PathTokenizer

logger = logging.getLogger(__name__)


@dataclass
class PathAnalyzerConfig:
    """Path analyzer configuration.

    Attributes:
        stopwords: Explicit stopword set, None for the default set
        stopwords_path: Word-list file to read stopwords from
        extend_default: Add configured stopwords to the default set
            instead of replacing it
    """

    stopwords: Optional[Set[str]] = None
    stopwords_path: Optional[str] = None
    extend_default: bool = False

    def resolve_stopwords(self) -> Optional[FrozenSet[str]]:
        """Build the stopword set this configuration describes."""
        words = to_stopword_set(self.stopwords)
        if self.stopwords_path:
            loaded = load_stopwords(self.stopwords_path)
            words = loaded if words is None else words | loaded

        if self.extend_default:
            return ENGLISH_STOP_WORDS | (words or frozenset())
        return words

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "stopwords": sorted(self.stopwords) if self.stopwords is not None else None,
            "stopwords_path": self.stopwords_path,
            "extend_default": self.extend_default,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PathAnalyzerConfig":
        """Create from dictionary."""
        stopwords = data.get("stopwords")
        return cls(
            stopwords=set(stopwords) if stopwords is not None else None,
            stopwords_path=data.get("stopwords_path"),
            extend_default=data.get("extend_default", False),
        )


@register_analyzer("path")
class PathTokenizerAnalyzer(Analyzer):
    """Analyzer for slash-separated paths.

    Splits on ``/``, lowercases each segment and drops stopwords, in
    that order. The field name passed to :meth:`analyze` does not
    change the result. The stopword set is copied into a frozenset
    owned by the analyzer, so one instance can serve many threads.
    """

    STOP_WORDS_SET: FrozenSet[str] = ENGLISH_STOP_WORDS

    def __init__(self, stopwords: Optional[Iterable[str]] = None):
        """Initialize path analyzer.

        Args:
            stopwords: Custom stopword set, None for STOP_WORDS_SET
        """
        words = to_stopword_set(stopwords)
        self._stopwords = self.STOP_WORDS_SET if words is None else words

        super().__init__(
            tokenizer=PathTokenizer(PathTokenizer.DELIMITER),
            token_filters=[
                LowercaseFilter(),
                StopwordFilter(stopwords=self._stopwords),
            ],
        )
        logger.debug(f"Path analyzer created with {len(self._stopwords)} stopwords")

    @property
    def stopwords(self) -> FrozenSet[str]:
        """Stopword set used by this analyzer."""
        return self._stopwords

    @classmethod
    def from_config(cls, config: Optional[PathAnalyzerConfig] = None) -> "PathTokenizerAnalyzer":
        """Build an analyzer from configuration."""
        config = config or PathAnalyzerConfig()
        return cls(stopwords=config.resolve_stopwords())


__all__ = [
    "PathAnalyzerConfig",
    "PathTokenizerAnalyzer",
]
