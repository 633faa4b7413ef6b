"""densebits functional API.

.. note::

   Every function that operates on an existing bitset takes that bitset as its
   **last** argument. Binary operations take `right` and then `left`.

   This is intentional, and is the way the functions must be written to enable
   `currying <https://en.wikipedia.org/wiki/Currying>`_.  Currying is the
   technique that allows us to use the right shift operator (``>>``) to chain
   operations.

Examples
--------
>>> from densebits.api import allocate, set, set_range, get_range, count
>>> bits = allocate() >> set(1) >> set_range(4, 6)
>>> bits >> get_range(0, 7)
[False, True, False, False, True, True, False]
>>> bits >> count
3

"""

from __future__ import annotations

import inspect
from typing import Any, List

import tabulate
import toolz
from public import private, public

from .bitset import Bitset
from .words import WORD_BITS, popcount


@private  # type: ignore[misc]
class shiftable(toolz.curry):
    """Shiftable curry."""

    @property
    def __signature__(self) -> inspect.Signature:
        return inspect.signature(self.func)  # pragma: no cover

    def __rrshift__(self, other: Bitset) -> Any:
        return self(other)


@public  # type: ignore[misc]
def allocate(capacity: int | None = None, fill: bool = False) -> Bitset:
    """Allocate a new bitset.

    Parameters
    ----------
    capacity
        The number of bits to make room for. ``None`` allocates the smallest
        possible bitset.
    fill
        If true, bits ``[0, capacity)`` start out set.

    """
    return Bitset.allocate(capacity, fill=fill)


@public  # type: ignore[misc]
@shiftable
def clone(bitset: Bitset) -> Bitset:
    """Return an independent copy of `bitset`."""
    return bitset.clone()


@public  # type: ignore[misc]
@shiftable
def set(index: int, bitset: Bitset) -> Bitset:
    """Set bit `index` of `bitset`, growing it as needed.

    Parameters
    ----------
    index
        A non-negative bit index
    bitset
        The bitset to modify in place

    """
    return bitset.set(index)


@public  # type: ignore[misc]
@shiftable
def set_range(lo: int, hi: int, bitset: Bitset) -> Bitset:
    """Set bits ``[lo, hi)`` of `bitset`, in whichever order they're given.

    Parameters
    ----------
    lo
        Inclusive bound
    hi
        Exclusive bound
    bitset
        The bitset to modify in place

    """
    return bitset.set_range(lo, hi)


@public  # type: ignore[misc]
@shiftable
def clear(index: int, bitset: Bitset) -> Bitset:
    """Clear bit `index` of `bitset`. Never grows `bitset`."""
    return bitset.clear(index)


@public  # type: ignore[misc]
@shiftable
def clear_range(lo: int, hi: int, bitset: Bitset) -> Bitset:
    """Clear bits ``[lo, hi)`` of `bitset`. Never grows `bitset`."""
    return bitset.clear_range(lo, hi)


@public  # type: ignore[misc]
@shiftable
def get(index: int, bitset: Bitset) -> bool:
    """Return whether bit `index` of `bitset` is set."""
    return bitset.get(index)


@public  # type: ignore[misc]
@shiftable
def get_range(lo: int, hi: int, bitset: Bitset) -> List[bool]:
    """Return the state of bits ``[lo, hi)`` of `bitset` as a list."""
    return bitset.get_range(lo, hi)


@public  # type: ignore[misc]
@shiftable
def count(bitset: Bitset) -> int:
    """Return the number of set bits in `bitset`."""
    return bitset.count()


@public  # type: ignore[misc]
@shiftable
def intersection(right: Bitset, left: Bitset) -> Bitset:
    """Return a new bitset holding the bits set in both `left` and `right`."""
    return left.intersection(right)


@public  # type: ignore[misc]
@shiftable
def intersection_mut(right: Bitset, left: Bitset) -> Bitset:
    """Intersect `left` with `right` in place."""
    return left.intersection_mut(right)


@public  # type: ignore[misc]
@shiftable
def union(right: Bitset, left: Bitset) -> Bitset:
    """Return a new bitset holding the bits set in `left` or `right`."""
    return left.union(right)


@public  # type: ignore[misc]
@shiftable
def union_mut(right: Bitset, left: Bitset) -> Bitset:
    """Add the bits of `right` to `left` in place."""
    return left.union_mut(right)


@public  # type: ignore[misc]
@shiftable
def difference(right: Bitset, left: Bitset) -> Bitset:
    """Return a new bitset holding the bits set in `left` but not `right`.

    Parameters
    ----------
    right
        The bits to remove
    left
        The bits to remove from

    """
    return left.difference(right)


@public  # type: ignore[misc]
@shiftable
def difference_mut(right: Bitset, left: Bitset) -> Bitset:
    """Remove the bits of `right` from `left` in place."""
    return left.difference_mut(right)


@public  # type: ignore[misc]
@shiftable
def symmetric_diff(right: Bitset, left: Bitset) -> Bitset:
    """Return a new bitset holding the bits set in exactly one operand."""
    return left.symmetric_diff(right)


@public  # type: ignore[misc]
@shiftable
def symmetric_diff_mut(right: Bitset, left: Bitset) -> Bitset:
    """Toggle the bits of `left` that are set in `right`, in place."""
    return left.symmetric_diff_mut(right)


@public  # type: ignore[misc]
@shiftable
def equals(right: Bitset, left: Bitset) -> bool:
    """Return whether `left` and `right` hold the same bits."""
    return left.equals(right)


@public  # type: ignore[misc]
@shiftable
def subset(right: Bitset, left: Bitset) -> bool:
    """Return whether every bit of `left` is also set in `right`."""
    return left.subset(right)


@public  # type: ignore[misc]
@shiftable
def strict_subset(right: Bitset, left: Bitset) -> bool:
    """Return whether `left` is a subset of `right` and differs from it."""
    return left.strict_subset(right)


@public  # type: ignore[misc]
@shiftable
def dump_raw(index: int, bitset: Bitset) -> int:
    """Return word `index` of the buffer backing `bitset`."""
    return bitset.dump_raw(index)


@public  # type: ignore[misc]
@shiftable
def dump_len(bitset: Bitset) -> int:
    """Return the number of words allocated by `bitset`."""
    return bitset.dump_len()


@public  # type: ignore[misc]
def pretty(
    bitset: Bitset,
    *,
    tablefmt: str = "simple",
    headers: Any = ("word", "bits", "hex", "binary", "count"),
    **kwargs: Any,
) -> str:
    """Pretty-format the words of a bitset.

    Parameters
    ----------
    bitset
        The bitset whose words to format
    tablefmt
        The kind of table to use for formatting
    headers
        The column names
    kwargs
        Additional keyword arguments passed to the `tabulate.tabulate`
        function

    Returns
    -------
    str
        Pretty-formatted words

    See Also
    --------
    densebits.api.show

    """
    rows = (
        (
            index,
            f"{index * WORD_BITS}-{(index + 1) * WORD_BITS - 1}",
            f"{word:#010x}",
            f"{word:0{WORD_BITS}b}",
            popcount(word),
        )
        for index, word in enumerate(bitset.words)
    )
    return tabulate.tabulate(
        rows, tablefmt=tablefmt, headers=headers, disable_numparse=True, **kwargs
    )


@public  # type: ignore[misc]
def show(bitset: Bitset, **kwargs: Any) -> None:
    """Pretty-print the words of a bitset.

    Parameters
    ----------
    bitset
        The bitset to print
    kwargs
        Additional keyword arguments passed to the `densebits.api.pretty`
        function

    See Also
    --------
    densebits.api.pretty

    """
    print(pretty(bitset, **kwargs))
