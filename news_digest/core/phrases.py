"""
Tokenization and key-phrase extraction.

Functions here are pure: they depend only on their arguments, which is what
lets them run on worker pool threads without any locking.
"""

from __future__ import annotations

import re
from typing import AbstractSet, Iterable

from ..config import DEFAULT_STOPWORDS

STOPWORDS: frozenset[str] = frozenset(DEFAULT_STOPWORDS)

_NON_WORD_RE = re.compile(r"[^\w\s]")


def tokenize(text: str, stopwords: AbstractSet[str] = STOPWORDS) -> list[str]:
    """Lower-case, strip punctuation, split on whitespace and drop stopwords."""
    cleaned = _NON_WORD_RE.sub("", text.lower())
    return [token for token in cleaned.split() if token not in stopwords]


def extract_phrases(
    text: str,
    stopwords: AbstractSet[str] = STOPWORDS,
    width: int = 3,
) -> list[str]:
    """Return every ``width``-token window of the filtered tokens.

    Args:
        text: Source text
        stopwords: Tokens to drop before windows are built
        width: Tokens per phrase

    Returns:
        Phrases in text order, each made of ``width`` tokens joined by a
        single space. Empty when fewer than ``width`` tokens remain.
    """
    tokens = tokenize(text, stopwords)
    return [
        " ".join(tokens[i:i + width])
        for i in range(len(tokens) - width + 1)
    ]


def split_sentences(text: str) -> list[str]:
    """Split on runs of sentence punctuation, trimming and dropping empties."""
    return [part.strip() for part in re.split(r"[.!?]+", text) if part.strip()]


def freeze_stopwords(words: Iterable[str]) -> frozenset[str]:
    return frozenset(word.lower() for word in words)
