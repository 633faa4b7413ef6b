"""A dense, growable set of unsigned integers stored as 32-bit words."""

from __future__ import annotations

import logging
import operator
from array import array
from itertools import chain, islice, repeat
from typing import Any, Iterable, Iterator, List, Tuple

from .exceptions import AllocationError, InvalidArgumentError
from .typehints import BitRange
from .words import (
    ALL_ONES,
    WORD_BITS,
    andnot,
    bit_mask,
    bit_offset,
    high_mask,
    locate,
    low_mask,
    popcount,
    span_mask,
    word_index,
    words_for,
)

logger = logging.getLogger(__name__)

_TYPECODE = "I"
_ITEMSIZE = array(_TYPECODE).itemsize


def _build(words: Iterable[int]) -> array:
    """Materialize `words` into a fresh word buffer."""
    try:
        return array(_TYPECODE, words)
    except MemoryError as e:
        logger.error("could not allocate bitset words")
        raise AllocationError("out of memory, could not allocate bitset") from e


def _zero_bytes(nwords: int) -> bytes:
    return bytes(nwords * _ITEMSIZE)


def _zeroed(nwords: int) -> array:
    """Return a buffer of `nwords` zero words."""
    try:
        return array(_TYPECODE, _zero_bytes(nwords))
    except (MemoryError, OverflowError) as e:
        logger.error("could not allocate %d bitset words", nwords)
        raise AllocationError(
            f"out of memory, could not allocate {nwords:d} words"
        ) from e


def _check_index(value: Any, name: str) -> int:
    index = operator.index(value)
    if index < 0:
        raise InvalidArgumentError(
            f"{name} not greater than or equal to 0, {name} == {index}"
        )
    return index


def _check_range(lo: Any, hi: Any) -> BitRange:
    lo = _check_index(lo, "lo")
    hi = _check_index(hi, "hi")
    if lo > hi:
        lo, hi = hi, lo
    return lo, hi


def _ordered(left: array, right: array) -> Tuple[array, array]:
    """Return `left` and `right` as ``(shorter, longer)``."""
    if len(left) <= len(right):
        return left, right
    return right, left


class Bitset:
    """A dense set of unsigned integers backed by 32-bit words.

    Bits beyond the allocated words read as unset. Setting a bit beyond the
    allocation grows the buffer; clearing never does.

    Examples
    --------
    >>> from densebits import Bitset
    >>> a = Bitset([1, 3, 5])
    >>> b = Bitset([3, 5, 7])
    >>> a & b
    Bitset({3, 5})
    >>> (a | b).count()
    4
    >>> a.get_range(0, 4)
    [False, True, False, True]

    """

    __slots__ = ("_words",)

    def __init__(self, bits: Iterable[int] = ()) -> None:
        """Construct a bitset with every index in `bits` set."""
        self._words = _zeroed(1)

        for bit in bits:
            self.set(bit)

    @classmethod
    def _wrap(cls, words: array) -> Bitset:
        bitset = cls.__new__(cls)
        bitset._words = words
        return bitset

    @classmethod
    def allocate(cls, capacity: int | None = None, fill: bool = False) -> Bitset:
        """Allocate a bitset able to address bit `capacity` without growing.

        Parameters
        ----------
        capacity
            Number of bits to make room for. ``None`` allocates a single word.
        fill
            If true, set bits ``[0, capacity)``.

        Raises
        ------
        InvalidArgumentError
            If `capacity` is negative
        AllocationError
            If the word buffer cannot be allocated

        """
        if capacity is None:
            return cls()
        capacity = _check_index(capacity, "capacity")
        nwords = words_for(capacity)
        if not fill:
            return cls._wrap(_zeroed(nwords))
        top = low_mask(bit_offset(capacity))
        return cls._wrap(_build(chain(repeat(ALL_ONES, nwords - 1), (top,))))

    @classmethod
    def from_words(cls, words: Iterable[int]) -> Bitset:
        """Construct a bitset whose buffer is a copy of `words`."""
        values = list(map(operator.index, words))
        for value in values:
            if not 0 <= value <= ALL_ONES:
                raise InvalidArgumentError(
                    f"word not in [0, {ALL_ONES:#x}], word == {value}"
                )
        return cls._wrap(_build(values) if values else _zeroed(1))

    def clone(self) -> Bitset:
        """Return an independent copy of this bitset."""
        return self._wrap(_build(self._words))

    __copy__ = clone

    @property
    def capacity(self) -> int:
        """Return the number of addressable bits in the current allocation."""
        return len(self._words) * WORD_BITS

    @property
    def words(self) -> Tuple[int, ...]:
        """Return a snapshot of the underlying words, lowest first."""
        return tuple(self._words)

    def dump_raw(self, index: int) -> int:
        """Return word `index` of the buffer."""
        return self._words[_check_index(index, "index")]

    def dump_len(self) -> int:
        """Return the number of allocated words."""
        return len(self._words)

    def _resize(self, nwords: int) -> None:
        words = self._words
        length = len(words)
        # array resizes in place and leaves the buffer untouched on failure
        try:
            if nwords > length:
                words.frombytes(_zero_bytes(nwords - length))
            else:
                del words[nwords:]
        except (MemoryError, OverflowError) as e:
            logger.error("could not resize bitset from %d to %d words", length, nwords)
            raise AllocationError(
                f"out of memory, could not resize bitset to {nwords:d} words"
            ) from e
        logger.debug("resized bitset from %d to %d words", length, nwords)

    def ensure_capacity(self, index: int) -> Bitset:
        """Grow the buffer so that bit `index` is addressable.

        Raises
        ------
        InvalidArgumentError
            If `index` is negative

        """
        index = _check_index(index, "index")
        if index >= self.capacity:
            self._resize(words_for(index))
        return self

    def set(self, index: int) -> Bitset:
        """Set bit `index`, growing if needed, and return this bitset.

        Raises
        ------
        InvalidArgumentError
            If `index` is negative

        """
        index = _check_index(index, "index")
        self.ensure_capacity(index)
        word, offset = locate(index)
        self._words[word] |= bit_mask(offset)
        return self

    def set_range(self, lo: int, hi: int) -> Bitset:
        """Set every bit in ``[lo, hi)`` and return this bitset.

        The bounds may be given in either order.

        Raises
        ------
        InvalidArgumentError
            If either bound is negative

        """
        lo, hi = _check_range(lo, hi)
        self.ensure_capacity(hi)

        words = self._words
        lo_word, lo_bit = locate(lo)
        hi_word, hi_bit = locate(hi)

        if lo_word == hi_word:
            words[lo_word] |= span_mask(lo_bit, hi_bit)
        else:
            words[lo_word] |= high_mask(lo_bit)
            for word in range(lo_word + 1, hi_word):
                words[word] = ALL_ONES
            if hi_bit:
                words[hi_word] |= low_mask(hi_bit)
        return self

    def clear(self, index: int) -> Bitset:
        """Clear bit `index` and return this bitset.

        Clearing beyond the current capacity does nothing.

        Raises
        ------
        InvalidArgumentError
            If `index` is negative

        """
        index = _check_index(index, "index")
        if index < self.capacity:
            word, offset = locate(index)
            self._words[word] &= ~bit_mask(offset)
        return self

    def clear_range(self, lo: int, hi: int) -> Bitset:
        """Clear every bit in ``[lo, hi)`` and return this bitset.

        The bounds may be given in either order. The range is clipped to the
        current capacity; clearing never grows the buffer.

        Raises
        ------
        InvalidArgumentError
            If either bound is negative

        """
        lo, hi = _check_range(lo, hi)
        capacity = self.capacity
        if lo >= capacity:
            return self
        hi = min(hi, capacity)

        words = self._words
        lo_word, lo_bit = locate(lo)
        hi_word, hi_bit = locate(hi)

        if lo_word == hi_word:
            words[lo_word] &= ~span_mask(lo_bit, hi_bit)
        else:
            words[lo_word] &= low_mask(lo_bit)
            for word in range(lo_word + 1, hi_word):
                words[word] = 0
            # hi == capacity lands on a word past the end with hi_bit == 0
            if hi_bit:
                words[hi_word] &= high_mask(hi_bit)
        return self

    def _test(self, index: int) -> bool:
        if index >= self.capacity:
            return False
        return (self._words[word_index(index)] >> bit_offset(index)) & 1 == 1

    def get(self, index: int) -> bool:
        """Return whether bit `index` is set.

        Raises
        ------
        InvalidArgumentError
            If `index` is negative

        """
        return self._test(_check_index(index, "index"))

    def get_range(self, lo: int, hi: int) -> List[bool]:
        """Return the state of every bit in ``[lo, hi)``, lowest first.

        Raises
        ------
        InvalidArgumentError
            If either bound is negative

        """
        lo, hi = _check_range(lo, hi)
        return [self._test(index) for index in range(lo, hi)]

    def count(self) -> int:
        """Return the number of set bits."""
        return sum(map(popcount, self._words))

    def intersection(self, other: Bitset) -> Bitset:
        """Return a new bitset with the bits set in both operands."""
        theirs = _words_of(other)
        return self._wrap(_build(map(operator.and_, self._words, theirs)))

    def intersection_mut(self, other: Bitset) -> Bitset:
        """Keep only the bits also set in `other` and return this bitset."""
        theirs = _words_of(other)
        if len(self._words) > len(theirs):
            self._resize(len(theirs))
        words = self._words
        for index, word in enumerate(islice(theirs, len(words))):
            words[index] &= word
        return self

    def union(self, other: Bitset) -> Bitset:
        """Return a new bitset with the bits set in either operand."""
        shorter, longer = _ordered(self._words, _words_of(other))
        return self._wrap(
            _build(
                chain(
                    map(operator.or_, shorter, longer),
                    islice(longer, len(shorter), None),
                )
            )
        )

    def union_mut(self, other: Bitset) -> Bitset:
        """Add every bit set in `other` and return this bitset."""
        theirs = _words_of(other)
        if len(theirs) > len(self._words):
            self._resize(len(theirs))
        words = self._words
        for index, word in enumerate(theirs):
            words[index] |= word
        return self

    def difference(self, other: Bitset) -> Bitset:
        """Return a new bitset with the bits set here but not in `other`."""
        mine = self._words
        theirs = _words_of(other)
        return self._wrap(
            _build(
                chain(
                    map(andnot, mine, theirs),
                    islice(mine, len(theirs), None),
                )
            )
        )

    def difference_mut(self, other: Bitset) -> Bitset:
        """Remove every bit set in `other` and return this bitset."""
        words = self._words
        for index, word in enumerate(islice(_words_of(other), len(words))):
            words[index] = andnot(words[index], word)
        return self

    def symmetric_diff(self, other: Bitset) -> Bitset:
        """Return a new bitset with the bits set in exactly one operand."""
        shorter, longer = _ordered(self._words, _words_of(other))
        return self._wrap(
            _build(
                chain(
                    map(operator.xor, shorter, longer),
                    islice(longer, len(shorter), None),
                )
            )
        )

    def symmetric_diff_mut(self, other: Bitset) -> Bitset:
        """Toggle every bit set in `other` and return this bitset."""
        theirs = _words_of(other)
        if len(theirs) > len(self._words):
            self._resize(len(theirs))
        words = self._words
        for index, word in enumerate(theirs):
            words[index] ^= word
        return self

    def equals(self, other: Bitset) -> bool:
        """Return whether both operands have exactly the same bits set."""
        mine = self._words
        theirs = _words_of(other)
        common = min(len(mine), len(theirs))
        return (
            all(map(operator.eq, mine, theirs))
            and not any(islice(mine, common, None))
            and not any(islice(theirs, common, None))
        )

    def subset(self, other: Bitset) -> bool:
        """Return whether every bit set here is also set in `other`."""
        mine = self._words
        theirs = _words_of(other)
        return all(
            (left | right) == right for left, right in zip(mine, theirs)
        ) and not any(islice(mine, len(theirs), None))

    def strict_subset(self, other: Bitset) -> bool:
        """Return whether this is a subset of `other` and not equal to it."""
        return self.subset(other) and not self.equals(other)

    def __contains__(self, bit: Any) -> bool:
        """Check whether `bit` is in the set."""
        if not isinstance(bit, int) or isinstance(bit, bool) or bit < 0:
            return False
        return self._test(bit)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the set bits in ascending order."""
        for index, word in enumerate(self._words):
            base = index * WORD_BITS
            while word:
                lowest = word & -word
                yield base + lowest.bit_length() - 1
                word ^= lowest

    def __len__(self) -> int:
        """Return the number of set bits."""
        return self.count()

    def __bool__(self) -> bool:
        return any(self._words)

    def __repr__(self) -> str:
        """Return the string representation of a bitset."""
        values = "{" + ", ".join(map(str, self)) + "}" if self else ""
        return f"{self.__class__.__name__}({values})"

    def __and__(self, other: Any) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.intersection(other)

    def __or__(self, other: Any) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.union(other)

    def __sub__(self, other: Any) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: Any) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.symmetric_diff(other)

    def __iand__(self, other: Any) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.intersection_mut(other)

    def __ior__(self, other: Any) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.union_mut(other)

    def __isub__(self, other: Any) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.difference_mut(other)

    def __ixor__(self, other: Any) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.symmetric_diff_mut(other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.equals(other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.subset(other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.strict_subset(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Bitset):
            return NotImplemented
        return other.subset(self)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Bitset):
            return NotImplemented
        return other.strict_subset(self)

    # mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]


def _words_of(other: Any) -> array:
    if not isinstance(other, Bitset):
        raise TypeError(f"expected Bitset, got {type(other).__name__}")
    return other._words
