"""Tests for the similarity engine and the sentence deduplicator."""

import logging

from news_digest.core.dedup import Deduplicator
from news_digest.core.metrics import Metrics
from news_digest.core.similarity import SimilarityEngine, compare


def _engine(**kwargs) -> SimilarityEngine:
    return SimilarityEngine(logger=logging.getLogger("test_similarity"), **kwargs)


def test_identical_strings_score_one():
    assert compare("Hamilton wins", "Hamilton wins") == 1.0


def test_case_and_punctuation_are_ignored():
    assert compare("Hamilton wins!", "hamilton wins") == 1.0


def test_disjoint_strings_score_zero():
    assert compare("abc", "xyz") == 0.0
    assert compare("abc", "!!!") == 0.0


def test_multi_word_strings_without_common_letters_score_zero():
    assert compare("abcd efgh", "wxyz ijkl") == 0.0
    assert compare("abcd efgh", "ijkl wxyz") == compare("ijkl wxyz", "abcd efgh") == 0.0
    assert compare("Hamilton wins", "hamilton   wins!") == 1.0


def test_similarity_is_symmetric():
    a = "Lewis Hamilton wins the race"
    b = "Hamilton takes the win"
    assert compare(a, b) == compare(b, a)
    assert 0.0 <= compare(a, b) <= 1.0


def test_paraphrased_sentences_are_similar():
    engine = _engine()
    assert engine.is_similar("Hamilton wins the race", "Hamilton is victorious in the race")


def test_unscorable_pair_is_not_similar():
    engine = _engine()
    assert engine.similarity("Hamilton wins", None) == 0.0
    assert not engine.is_similar("Hamilton wins", None)
    assert len(engine.cache) == 0


def test_cache_key_is_directional():
    metrics = Metrics()
    engine = _engine(metrics=metrics)
    engine.similarity("first sentence", "second sentence")
    engine.similarity("second sentence", "first sentence")
    engine.similarity("first sentence", "second sentence")

    assert len(engine.cache) == 2
    assert ("first sentence", "second sentence") in engine.cache
    assert ("second sentence", "first sentence") in engine.cache
    assert metrics.cache_misses == 2
    assert metrics.cache_hits == 1


def test_similarity_cache_is_bounded():
    engine = _engine(capacity=3)
    for i in range(4):
        engine.similarity(f"sentence {i}", "other")
    assert len(engine.cache) == 3
    assert ("sentence 0", "other") not in engine.cache


def test_remove_duplicates_drops_paraphrase():
    dedup = Deduplicator(_engine())
    sentences = [
        "Hamilton wins the race",
        "Hamilton is victorious in the race",
        "Verstappen finished second",
    ]
    unique = dedup.remove_duplicates(sentences)
    assert len(unique) < len(sentences)
    assert unique == ["Hamilton wins the race", "Verstappen finished second"]


def test_remove_duplicates_skips_non_text():
    dedup = Deduplicator(_engine())
    assert dedup.remove_duplicates([None, "", "   ", 42, "Real sentence"]) == ["Real sentence"]


def test_kept_sentences_span_batches():
    sentences = [f"{c * 5} {c * 5}" for c in "abcdefghijk"] + ["AAAAA aaaaa!"]
    small = Deduplicator(_engine(), batch_size=3).remove_duplicates(sentences)
    large = Deduplicator(_engine(), batch_size=10).remove_duplicates(sentences)
    single = Deduplicator(_engine(), batch_size=100).remove_duplicates(sentences)

    assert small == large == single
    assert "AAAAA aaaaa!" not in small
    assert len(small) == 11


def test_remove_duplicates_is_idempotent_and_ordered():
    dedup = Deduplicator(_engine())
    sentences = [
        "Qualifying started early on Saturday",
        "Rain delayed the second session",
        "Qualifying started early on saturday!",
        "Verstappen took pole position",
        "Rain delayed the second session again",
        "Ferrari struggled with tyre wear",
    ]
    once = dedup.remove_duplicates(sentences)
    twice = dedup.remove_duplicates(once)

    assert twice == once
    positions = [sentences.index(sentence) for sentence in once]
    assert positions == sorted(positions)
    assert once[0] == "Qualifying started early on Saturday"


def test_remove_duplicates_records_time():
    metrics = Metrics()
    dedup = Deduplicator(_engine(metrics=metrics))
    dedup.remove_duplicates(["one sentence", "another one"])
    assert metrics.duplicate_removal_time >= 0.0
    assert metrics.cache_misses == 1
