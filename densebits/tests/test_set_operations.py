from __future__ import annotations

import pytest

from densebits.bitset import Bitset

F, T = False, True


def test_scenario(odd: Bitset, shifted: Bitset) -> None:
    assert odd.intersection(shifted).get_range(0, 8) == [F, F, F, T, F, T, F, F]
    assert odd.symmetric_diff(shifted).get_range(0, 8) == [F, T, F, F, F, F, F, T]
    assert odd.union(shifted).count() == 4
    assert odd.difference(shifted).get_range(0, 8) == [F, T, F, F, F, F, F, F]


def test_operators(odd: Bitset, shifted: Bitset) -> None:
    assert list(odd & shifted) == [3, 5]
    assert list(odd | shifted) == [1, 3, 5, 7]
    assert list(odd - shifted) == [1]
    assert list(odd ^ shifted) == [1, 7]


def test_operators_reject_other_types(odd: Bitset) -> None:
    with pytest.raises(TypeError):
        odd & {1, 2}  # type: ignore[operator]
    with pytest.raises(TypeError):
        odd |= 3  # type: ignore[operator]


def test_named_operations_reject_other_types(odd: Bitset) -> None:
    with pytest.raises(TypeError, match="expected Bitset"):
        odd.union({1, 2})  # type: ignore[arg-type]


def test_result_lengths(wide: Bitset, narrow: Bitset) -> None:
    assert wide.dump_len() == 3
    assert narrow.dump_len() == 1

    assert wide.intersection(narrow).dump_len() == 1
    assert narrow.intersection(wide).dump_len() == 1
    assert wide.union(narrow).dump_len() == 3
    assert narrow.union(wide).dump_len() == 3
    assert wide.difference(narrow).dump_len() == 3
    assert narrow.difference(wide).dump_len() == 1
    assert wide.symmetric_diff(narrow).dump_len() == 3
    assert narrow.symmetric_diff(wide).dump_len() == 3


def test_mismatched_lengths(wide: Bitset, narrow: Bitset) -> None:
    assert list(wide & narrow) == [0, 31]
    assert list(wide | narrow) == [0, 2, 31, 32, 40, 70, 95]
    assert list(wide - narrow) == [32, 40, 70, 95]
    assert list(narrow - wide) == [2]
    assert list(wide ^ narrow) == [2, 32, 40, 70, 95]
    assert list(narrow ^ wide) == [2, 32, 40, 70, 95]


def test_commutativity(pair: tuple[Bitset, Bitset]) -> None:
    a, b = pair
    assert a.intersection(b) == b.intersection(a)
    assert a.union(b) == b.union(a)
    assert a.symmetric_diff(b) == b.symmetric_diff(a)


def test_idempotence(pair: tuple[Bitset, Bitset]) -> None:
    a, _ = pair
    assert a.union(a) == a
    assert a.intersection(a) == a
    assert a.difference(a).count() == 0
    assert a.symmetric_diff(a).count() == 0


def test_symmetric_diff_is_union_of_differences(pair: tuple[Bitset, Bitset]) -> None:
    a, b = pair
    assert a.symmetric_diff(b) == a.difference(b).union(b.difference(a))


def test_matches_python_sets(pair: tuple[Bitset, Bitset]) -> None:
    a, b = pair
    sa, sb = set(a), set(b)
    assert set(a & b) == sa & sb
    assert set(a | b) == sa | sb
    assert set(a - b) == sa - sb
    assert set(a ^ b) == sa ^ sb


def test_constructive_operands_unmodified(pair: tuple[Bitset, Bitset]) -> None:
    a, b = pair
    a_words, b_words = a.words, b.words
    for operation in (
        Bitset.intersection,
        Bitset.union,
        Bitset.difference,
        Bitset.symmetric_diff,
    ):
        result = operation(a, b)
        assert result is not a
        assert result is not b
        result.set(1000)
        assert a.words == a_words
        assert b.words == b_words


@pytest.mark.parametrize(
    ("constructive", "mutating"),
    [
        ("intersection", "intersection_mut"),
        ("union", "union_mut"),
        ("difference", "difference_mut"),
        ("symmetric_diff", "symmetric_diff_mut"),
    ],
)
def test_mutating_matches_constructive(
    pair: tuple[Bitset, Bitset], constructive: str, mutating: str
) -> None:
    a, b = pair
    expected = getattr(a, constructive)(b)
    b_words = b.words
    result = getattr(a, mutating)(b)
    assert result is a
    assert a == expected
    assert b.words == b_words


def test_intersection_mut_shrinks(wide: Bitset, narrow: Bitset) -> None:
    wide.intersection_mut(narrow)
    assert wide.dump_len() == 1
    assert list(wide) == [0, 31]


def test_intersection_mut_shorter_lhs(wide: Bitset, narrow: Bitset) -> None:
    narrow.intersection_mut(wide)
    assert narrow.dump_len() == 1
    assert list(narrow) == [0, 31]


def test_union_mut_grows_with_rhs_words(wide: Bitset, narrow: Bitset) -> None:
    narrow.union_mut(wide)
    assert narrow.dump_len() == 3
    assert narrow.words[1:] == wide.words[1:]
    assert list(narrow) == [0, 2, 31, 32, 40, 70, 95]


def test_difference_mut_never_grows(wide: Bitset, narrow: Bitset) -> None:
    narrow.difference_mut(wide)
    assert narrow.dump_len() == 1
    assert list(narrow) == [2]

    wide.difference_mut(Bitset([0, 31]))
    assert wide.dump_len() == 3
    assert list(wide) == [32, 40, 70, 95]


def test_symmetric_diff_mut_grows(wide: Bitset, narrow: Bitset) -> None:
    narrow.symmetric_diff_mut(wide)
    assert narrow.dump_len() == 3
    assert list(narrow) == [2, 32, 40, 70, 95]


def test_in_place_operators(odd: Bitset, shifted: Bitset) -> None:
    bs = odd.clone()
    alias = bs
    bs |= shifted
    assert bs is alias
    assert list(bs) == [1, 3, 5, 7]

    bs &= shifted
    assert bs is alias
    assert list(bs) == [3, 5, 7]

    bs -= Bitset([7])
    assert bs is alias
    assert list(bs) == [3, 5]

    bs ^= odd
    assert bs is alias
    assert list(bs) == [1]


def test_mutating_with_itself(odd: Bitset) -> None:
    assert list(odd.clone().union_mut(odd)) == [1, 3, 5]

    bs = odd.clone()
    assert list(bs.intersection_mut(bs)) == [1, 3, 5]
    assert list(bs.union_mut(bs)) == [1, 3, 5]
    assert list(bs.symmetric_diff_mut(bs)) == []

    bs = odd.clone()
    assert list(bs.difference_mut(bs)) == []
