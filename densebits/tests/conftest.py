from __future__ import annotations

import pytest

from densebits.bitset import Bitset


@pytest.fixture  # type: ignore[misc]
def odd() -> Bitset:
    return Bitset().set(1).set(3).set(5)


@pytest.fixture  # type: ignore[misc]
def shifted() -> Bitset:
    return Bitset().set(3).set(5).set(7)


@pytest.fixture  # type: ignore[misc]
def wide() -> Bitset:
    """A three word bitset with bits in every word."""
    return Bitset([0, 31, 32, 40, 70, 95])


@pytest.fixture  # type: ignore[misc]
def narrow() -> Bitset:
    """A single word bitset."""
    return Bitset([0, 2, 31])


@pytest.fixture(  # type: ignore[misc]
    params=[
        ([], []),
        ([1, 3, 5], [3, 5, 7]),
        ([0, 31, 32, 40, 70, 95], [0, 2, 31]),
        ([0, 2, 31], [0, 31, 32, 40, 70, 95]),
        ([5, 200], [5]),
        ([64], [64, 65]),
        (range(0, 128, 3), range(0, 96, 2)),
    ],
    ids=[
        "empty",
        "same-length",
        "longer-left",
        "longer-right",
        "sparse-tail",
        "superset-right",
        "dense",
    ],
)
def pair(request: pytest.FixtureRequest) -> tuple[Bitset, Bitset]:
    left, right = request.param
    return Bitset(left), Bitset(right)
