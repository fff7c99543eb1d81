"""CatalogSearch Tokenizers - Path Segmentation.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Iterator, Optional

from catalogsearch_core.analyzers.base import (
    Tokenizer,
    Token,
    TokenStream,
    check_text,
)


class PathTokenizer(Tokenizer):
    """Path tokenizer.

    Splits a path on every occurrence of a literal delimiter. The
    delimiter is never emitted; leading, trailing and consecutive
    delimiters produce empty-string tokens so that joining the token
    texts with the delimiter restores the input.
    """

    DELIMITER = "/"

    def __init__(self, delimiter: str = DELIMITER):
        """Initialize tokenizer.

        Args:
            delimiter: Literal path delimiter
        """
        if not isinstance(delimiter, str) or not delimiter:
            raise ValueError("Delimiter must be a non-empty string")
        self.delimiter = delimiter

    def tokenize(self, text: Optional[str]) -> TokenStream:
        """Tokenize path."""
        return TokenStream(self._segments(check_text(text)))

    def _segments(self, text: str) -> Iterator[Token]:
        if not text:
            return

        step = len(self.delimiter)
        start = 0
        position = 0

        while True:
            end = text.find(self.delimiter, start)
            if end == -1:
                break
            yield Token(text=text[start:end], start_offset=start, end_offset=end, position=position)
            position += 1
            start = end + step

        # Last segment
        yield Token(text=text[start:], start_offset=start, end_offset=len(text), position=position)


__all__ = [
    "PathTokenizer",
]
