"""CatalogSearch Stopwords - Built-in and File-based Stopword Sets.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Union

logger = logging.getLogger(__name__)

# Common English function words, stored lowercase. Includes the classic
# 33-word Lucene list.
ENGLISH_STOP_WORDS: FrozenSet[str] = frozenset(
    # articles and determiners
    "a an the this that these those each every either neither some any "
    "all both few many much more most other another such no "
    # pronouns
    "i me my mine myself we us our ours ourselves you your yours yourself "
    "yourselves he him his himself she her hers herself it its itself "
    "they them their theirs themselves what which who whom whose "
    # prepositions
    "about above across after against along among around at before behind "
    "below beneath beside between beyond by down during except for from in "
    "inside into near of off on onto out outside over past since through "
    "throughout till to toward towards under until up upon with within without "
    # conjunctions
    "and but or nor so yet if then than because although though unless "
    "whereas while whether as "
    # auxiliaries and common verbs
    "am is are was were be been being have has had having do does did doing "
    "will would shall should can could may might must "
    # adverbs and particles
    "not only own same too very just there here when where why how again "
    "further once now also".split()
)


def load_stopwords(path: Union[str, Path], encoding: str = "utf-8") -> FrozenSet[str]:
    """Load stopwords from a word-list file.

    One word per line. Blank lines are ignored and ``#`` starts a
    comment. Words are stored exactly as written.

    Args:
        path: Path to the word-list file
        encoding: File encoding

    Returns:
        Frozen set of stopwords
    """
    words = set()
    lines = Path(path).read_text(encoding=encoding).splitlines()
    for lineno, line in enumerate(lines, start=1):
        word = line.split("#", 1)[0].strip()
        if not word:
            continue
        if any(c.isspace() for c in word):
            logger.warning(f"Skipping stopword line {lineno} in {path}: contains whitespace")
            continue
        words.add(word)

    logger.debug(f"Loaded {len(words)} stopwords from {path}")
    return frozenset(words)


def to_stopword_set(stopwords: Optional[Iterable[str]]) -> Optional[FrozenSet[str]]:
    """Copy a caller-supplied stopword collection into a frozenset.

    Returns None when no collection was given.
    """
    if stopwords is None:
        return None
    if isinstance(stopwords, (str, bytes)):
        raise TypeError("Stopwords must be a collection of strings, not a single string")

    words = frozenset(stopwords)
    for word in words:
        if not isinstance(word, str):
            raise TypeError(f"Stopwords must be strings, got {type(word).__name__}")
    return words


__all__ = [
    "ENGLISH_STOP_WORDS",
    "load_stopwords",
    "to_stopword_set",
]
