"""CatalogSearch Analyzer Base - Core Text Analysis Components.

Provides base classes for the text analysis pipeline including
tokens, token streams, tokenizers, filters, and analyzers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    """A token in the analysis stream.

    Attributes:
        text: Token text
        start_offset: Start character offset in the original input
        end_offset: End character offset in the original input
        position: Sequential position among emitted tokens
    """

    text: str
    start_offset: int = 0
    end_offset: int = 0
    position: int = 0

    def __repr__(self) -> str:
        return f"Token({self.text!r}, pos={self.position}, offsets={self.start_offset}:{self.end_offset})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "text": self.text,
            "start_offset": self.start_offset,
            "end_offset": self.end_offset,
            "position": self.position,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Token":
        """Create from dictionary."""
        return cls(
            text=data["text"],
            start_offset=data.get("start_offset", 0),
            end_offset=data.get("end_offset", 0),
            position=data.get("position", 0),
        )


class TokenStream:
    """A lazy, single-pass stream of tokens.

    Wraps an iterator of tokens. Once consumed the stream stays
    exhausted; analyze the input again to get a fresh stream.
    """

    def __init__(self, tokens: Optional[Iterable[Token]] = None):
        """Initialize token stream.

        Args:
            tokens: Source of tokens, consumed lazily
        """
        self._tokens: Iterator[Token] = iter(tokens if tokens is not None else ())

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        return next(self._tokens)

    def next_token(self) -> Optional[Token]:
        """Get next token, or None once the stream is exhausted."""
        return next(self._tokens, None)

    def to_list(self) -> List[Token]:
        """Consume the remaining tokens into a list."""
        return list(self._tokens)

    def get_texts(self) -> List[str]:
        """Consume the remaining tokens and return their texts."""
        return [t.text for t in self._tokens]


def check_text(text: Any) -> str:
    """Validate analysis input.

    None is treated as empty input. Anything else that is not a
    string is rejected before it reaches the pipeline.
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        raise TypeError(f"Expected text to be str, got {type(text).__name__}")
    return text


class Tokenizer(ABC):
    """Base class for tokenizers.

    Tokenizers break text into tokens.
    """

    @abstractmethod
    def tokenize(self, text: Optional[str]) -> TokenStream:
        """Tokenize text.

        Args:
            text: Input text

        Returns:
            Token stream
        """
        pass


class TokenFilter(ABC):
    """Base class for token filters.

    Token filters transform or remove tokens in the stream.
    """

    @abstractmethod
    def filter(self, stream: TokenStream) -> TokenStream:
        """Filter token stream.

        Args:
            stream: Input token stream

        Returns:
            Filtered token stream
        """
        pass


class FilteringTokenFilter(TokenFilter):
    """Base class for filters that drop tokens.

    Surviving tokens are renumbered so positions stay consecutive;
    dropped tokens do not keep a position slot.
    """

    @abstractmethod
    def accept(self, token: Token) -> bool:
        """Return True to keep the token."""
        pass

    def filter(self, stream: TokenStream) -> TokenStream:
        return TokenStream(self._accepted(stream))

    def _accepted(self, stream: TokenStream) -> Iterator[Token]:
        position = 0
        for token in stream:
            if self.accept(token):
                if token.position != position:
                    token = replace(token, position=position)
                yield token
                position += 1


class Analyzer(ABC):
    """Base class for text analyzers.

    An analyzer combines a tokenizer and a fixed chain of token
    filters into a complete text analysis pipeline.
    """

    def __init__(
        self,
        tokenizer: Tokenizer,
        token_filters: Optional[Sequence[TokenFilter]] = None,
    ):
        """Initialize analyzer.

        Args:
            tokenizer: Tokenizer to use
            token_filters: Token filters to apply, in order
        """
        self._tokenizer = tokenizer
        self._token_filters = tuple(token_filters or ())

    def analyze(self, field_name: Optional[str], text: Optional[str]) -> TokenStream:
        """Analyze text into tokens.

        Args:
            field_name: Name of the field being analyzed
            text: Input text

        Returns:
            Token stream
        """
        text = check_text(text)
        stream = self._tokenizer.tokenize(text)

        for token_filter in self._token_filters:
            stream = token_filter.filter(stream)

        return stream

    def get_terms(self, field_name: Optional[str], text: Optional[str]) -> List[str]:
        """Get analyzed terms from text.

        Args:
            field_name: Name of the field being analyzed
            text: Input text

        Returns:
            List of term strings
        """
        return self.analyze(field_name, text).get_texts()


class AnalyzerRegistry:
    """Registry for analyzer instances.

    Provides lookup of analyzers by name.
    """

    _instance: Optional["AnalyzerRegistry"] = None

    def __new__(cls) -> "AnalyzerRegistry":
        """Singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._analyzers = {}
        return cls._instance

    def register(self, name: str, analyzer: Analyzer) -> None:
        """Register an analyzer.

        Args:
            name: Analyzer name
            analyzer: Analyzer instance
        """
        logger.debug(f"Registering analyzer: {name}")
        self._analyzers[name] = analyzer

    def get(self, name: str) -> Optional[Analyzer]:
        """Get analyzer by name."""
        return self._analyzers.get(name)

    def list_analyzers(self) -> List[str]:
        """List registered analyzer names."""
        return list(self._analyzers.keys())


_registry = AnalyzerRegistry()


def register_analyzer(name: str) -> callable:
    """Decorator to register an analyzer.

    The decorated class is instantiated with no arguments.

    Args:
        name: Analyzer name

    Returns:
        Decorator function
    """
    def decorator(cls: type) -> type:
        _registry.register(name, cls())
        return cls
    return decorator


def get_analyzer(name: str) -> Optional[Analyzer]:
    """Get analyzer by name.

    Args:
        name: Analyzer name

    Returns:
        Analyzer or None
    """
    return _registry.get(name)


__all__ = [
    "Analyzer",
    "AnalyzerRegistry",
    "FilteringTokenFilter",
    "Token",
    "TokenFilter",
    "TokenStream",
    "Tokenizer",
    "check_text",
    "get_analyzer",
    "register_analyzer",
]
