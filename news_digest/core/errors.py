"""
Error taxonomy for the digest engine.

Every error carries an explicit ``kind`` so call sites can branch on it
directly. Only SummarizationFailure ever escapes ``NewsSummarizer.summarize``;
the other kinds are isolated to the unit of work that produced them.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    EXTRACTION = "extraction"
    SIMILARITY = "similarity"
    SUMMARIZATION = "summarization"


class DigestError(Exception):
    """Base class for engine errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DigestError):
    """An article is missing a required field. Dropped, never fatal."""

    kind = ErrorKind.VALIDATION


class ExtractionError(DigestError):
    """Phrase extraction failed for one text. An empty phrase list is substituted."""

    kind = ErrorKind.EXTRACTION


class SimilarityError(DigestError):
    """Similarity scoring failed for one pair. The pair is treated as not similar."""

    kind = ErrorKind.SIMILARITY


class SummarizationFailure(DigestError):
    """Non-sequence input or an unrecoverable internal fault."""

    kind = ErrorKind.SUMMARIZATION
