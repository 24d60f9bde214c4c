"""Pytest configuration and fixtures for heredity tests."""

import random

import pytest

from heredity.genetics import GenePool


class FixedRandom(random.Random):
    """Random whose random() always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def fixed_rng():
    """Factory for an RNG whose random() is pinned, for forcing coin flips."""
    return FixedRandom


@pytest.fixture
def gene_pool(seeded_rng):
    """Provide a fresh gene pool with no mutations."""
    return GenePool(rng=seeded_rng)
