"""Seed sources and element generators for `Matrix.random`.

`Matrix.random(rows, columns, generator, seed_source)` calls
``generator(seed_source())`` once per element. The helpers here cover the
usual case: a reproducible stream of integer seeds and a generator that turns
one seed into one value.
"""

from __future__ import annotations

import random
from typing import Any, Callable, Optional

import numpy as np

from .matrix import Matrix, S

_SEED_HIGH = 2**63 - 1


def seed_source(seed: Optional[int] = None) -> Callable[[], int]:
    """Return a callable producing a stream of integer seeds.

    With a fixed `seed` the stream is identical across runs; with ``None`` it
    is drawn from fresh OS entropy.
    """
    rng = np.random.default_rng(None if seed is None else int(seed))

    def _next() -> int:
        return int(rng.integers(0, _SEED_HIGH))

    return _next


def uniform(seed: int) -> float:
    """Uniform float in ``[0, 1)`` determined by `seed`."""
    return random.Random(int(seed)).random()


def randint(low: int, high: int) -> Callable[[int], int]:
    """Generator of integers in ``[low, high]`` (inclusive), one per seed."""
    if int(high) < int(low):
        raise ValueError("high must be >= low")

    def _gen(seed: int) -> int:
        return random.Random(int(seed)).randint(int(low), int(high))

    return _gen


def random_fill(
    rows: int,
    columns: int,
    generator: Callable[[S], Any],
    seed_source: Callable[[], S],
) -> Matrix:
    """Module-level form of `Matrix.random`."""
    return Matrix.random(rows, columns, generator, seed_source)
