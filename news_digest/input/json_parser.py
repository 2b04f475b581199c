"""JSON parser for source-provider article payloads.

The source provider delivers already-cleaned news records either as a bare
list or wrapped in an object:

    {
        "articles": [
            {
                "title": "Hamilton wins GP",
                "url": "https://example.com/f1/1",
                "source": "F1 News",
                "publishDate": "2024-01-15T10:30:00Z",
                "snippet": "Lewis Hamilton wins the race."
            }
        ]
    }
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..core.types import Article


def parse_articles(data: Any) -> list[Article]:
    """Convert a provider payload into Article records.

    Records with missing or blank fields are kept as-is; rejecting them is
    the summarizer's validation step, which logs each one.

    Raises:
        ValueError: If the payload is neither a list nor an object with an
                    'articles' list
    """
    if isinstance(data, Mapping):
        if "articles" not in data:
            raise ValueError("Invalid JSON format: missing 'articles' key")
        data = data["articles"]
    if not isinstance(data, list):
        raise ValueError("Invalid JSON format: 'articles' must be a list")
    return [to_article(item) for item in data]


def to_article(item: Any) -> Article:
    """Coerce a single record into an Article without altering the input."""
    if isinstance(item, Article):
        return item
    if not isinstance(item, Mapping):
        return Article(title=None, snippet=None, source=None)
    return Article(
        title=item.get("title"),
        snippet=item.get("snippet"),
        source=item.get("source"),
        publish_date=item.get("publishDate", item.get("publish_date")),
        url=item.get("url"),
    )


def load_articles(path: str | Path) -> list[Article]:
    with open(path, encoding="utf-8") as f:
        return parse_articles(json.load(f))
