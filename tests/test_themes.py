"""Tests for cross-article theme detection."""

import asyncio

from news_digest.core.metrics import Metrics
from news_digest.core.themes import ThemeDetector, rank_themes
from news_digest.core.types import Article


def test_rank_themes_by_count():
    phrase_lists = [
        ["alpha beta gamma", "xray yankee zulu", "alpha beta gamma"],
        ["alpha beta gamma", "delta echo fox"],
        ["delta echo fox", "quarterly earnings beat"],
    ]
    assert rank_themes(phrase_lists) == ["alpha beta gamma", "delta echo fox"]


def test_phrase_repeated_in_one_article_is_not_a_theme():
    assert rank_themes([["pole position lap", "pole position lap"], ["rain delayed start"]]) == []


def test_ties_keep_first_occurrence_order():
    phrase_lists = [["second place finish", "first corner crash"], ["first corner crash", "second place finish"]]
    assert rank_themes(phrase_lists) == ["second place finish", "first corner crash"]


def test_detect_extracts_title_and_snippet_concurrently():
    seen: list[str] = []
    outputs = {
        "Summit opens Leaders meet": ["world leaders gather", "summit opens leaders"],
        "Summit news Leaders talk": ["world leaders gather", "leaders talk climate"],
    }

    async def fake_extract(text: str) -> list[str]:
        seen.append(text)
        await asyncio.sleep(0)
        return outputs[text]

    metrics = Metrics()
    detector = ThemeDetector(fake_extract, metrics=metrics)
    articles = [
        Article(title="Summit opens", snippet="Leaders meet", source="A"),
        Article(title="Summit news", snippet="Leaders talk", source="B"),
    ]

    themes = asyncio.run(detector.detect(articles))

    assert themes == ["world leaders gather"]
    assert sorted(seen) == sorted(outputs)
    assert metrics.theme_detection_time >= 0.0


def test_detect_empty_articles():
    async def fake_extract(text: str) -> list[str]:
        raise AssertionError("should not be called")

    assert asyncio.run(ThemeDetector(fake_extract).detect([])) == []
