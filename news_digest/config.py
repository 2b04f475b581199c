"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- EngineConfig: Worker pool size and scoring thresholds
- CacheConfig: Bounded in-memory cache settings
- ExtractConfig: Phrase extraction settings
- SummaryConfig: Summary composition settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import os
from typing import Any

import yaml


DEFAULT_STOPWORDS = [
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
]


@dataclass
class EngineConfig:
    """Configuration for the summarization engine.

    Attributes:
        workers: Number of phrase-extraction workers; None derives it from the CPU count
        similarity_threshold: Sentences scoring above this (0-1) are duplicates
        min_confidence: Minimum processed/valid ratio required for a full summary
    """

    workers: int | None = None
    similarity_threshold: float = 0.6
    min_confidence: float = 0.5


@dataclass
class CacheConfig:
    """Configuration for the in-memory caches.

    Attributes:
        capacity: Maximum entries per cache before FIFO eviction
        phrase_key_chars: Number of leading text characters used as phrase cache key
    """

    capacity: int = 1000
    phrase_key_chars: int = 100


@dataclass
class ExtractConfig:
    """Configuration for phrase extraction.

    Attributes:
        phrase_width: Number of consecutive tokens per phrase
        stopwords: Tokens dropped before phrases are built
    """

    phrase_width: int = 3
    stopwords: list[str] = field(default_factory=lambda: list(DEFAULT_STOPWORDS))


@dataclass
class SummaryConfig:
    """Configuration for summary composition.

    Attributes:
        max_themes: Themes listed on the "Key themes" line
        max_sentences: Sentences kept in the body line
        dedup_batch_size: Group size used while walking sentences during dedup
    """

    max_themes: int = 3
    max_sentences: int = 3
    dedup_batch_size: int = 10


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
        directory: Folder for the log file; file logging needs one
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "digest.jsonl"
    directory: str | None = None


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    extract: ExtractConfig = field(default_factory=ExtractConfig)
    summary: SummaryConfig = field(default_factory=SummaryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data or value is None:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        engine=EngineConfig(**data["engine"]),
        cache=CacheConfig(**data["cache"]),
        extract=ExtractConfig(**data["extract"]),
        summary=SummaryConfig(**data["summary"]),
        logging=LoggingConfig(**data["logging"]),
    )


def get_worker_count(cfg: EngineConfig) -> int:
    """Resolve the worker pool size.

    Order: explicit config, then the NEWS_DIGEST_WORKERS environment
    variable, then one less than the CPU count. Never below one.
    """
    if cfg.workers:
        return max(1, cfg.workers)
    env_value = os.getenv("NEWS_DIGEST_WORKERS")
    if env_value and env_value.strip().isdigit():
        return max(1, int(env_value))
    return max(1, (os.cpu_count() or 1) - 1)
