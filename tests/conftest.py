"""Pytest fixtures and configuration for foldbench tests."""

from __future__ import annotations

import pytest

from foldbench.core.config import BenchConfig
from foldbench.core.display import Labeled
from foldbench.core.timing import Bencher


@pytest.fixture
def ten_words() -> list[str]:
    """Ten distinct lower-case ASCII words."""
    return [
        "alpha",
        "bravo",
        "charlie",
        "delta",
        "echo",
        "foxtrot",
        "golf",
        "hotel",
        "india",
        "juliet",
    ]


@pytest.fixture
def twelve_words(ten_words: list[str]) -> list[str]:
    """Twelve distinct words, enough for the 2/3 stride lookup."""
    return ten_words + ["kilo", "lima"]


@pytest.fixture
def cyrillic_words() -> list[str]:
    """Distinct Bulgarian words without any ASCII characters."""
    return ["ябълка", "круша", "слива", "череша", "кайсия", "праскова", "дюля", "смокиня"]


@pytest.fixture
def fast_config() -> BenchConfig:
    """A configuration that measures each closure only a couple of times."""
    return BenchConfig(warmup_runs=0, measured_runs=2, iterations=1)


@pytest.fixture
def fast_bencher(fast_config: BenchConfig) -> Bencher:
    return Bencher(fast_config)


@pytest.fixture
def small_params(ten_words: list[str], cyrillic_words: list[str]) -> list[Labeled]:
    """Two small labeled corpora standing in for the packaged ones."""
    return [
        Labeled(name="tiny_ascii", words=tuple(ten_words)),
        Labeled(name="tiny_cyrillic", words=tuple(cyrillic_words)),
    ]
