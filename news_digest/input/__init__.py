"""Input parsing for source-provider payloads."""

from .json_parser import load_articles, parse_articles, to_article

__all__ = ["load_articles", "parse_articles", "to_article"]
