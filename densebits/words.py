"""Word-level arithmetic for packing logical bits into 32-bit words.

Every mask produced here is truncated to :data:`WORD_BITS` bits. Shifts by the
full word width are special-cased rather than left to the integer semantics
of the host, so ``low_mask(32)`` and ``high_mask(32)`` mean what they say.
"""

from __future__ import annotations

from typing import Tuple

WORD_BITS = 32
ALL_ONES = (1 << WORD_BITS) - 1


def word_index(index: int) -> int:
    """Return the index of the word holding bit `index`."""
    return index // WORD_BITS


def bit_offset(index: int) -> int:
    """Return the position of bit `index` inside its word."""
    return index % WORD_BITS


def locate(index: int) -> Tuple[int, int]:
    """Return the ``(word, offset)`` pair for bit `index`."""
    return divmod(index, WORD_BITS)


def words_for(capacity: int) -> int:
    """Return the number of words needed so that bit `capacity` is addressable.

    This is ``ceil((capacity + 1) / WORD_BITS)`` and is never less than one.
    """
    return capacity // WORD_BITS + 1


def low_mask(nbits: int) -> int:
    """Return a word with bits ``[0, nbits)`` set.

    Parameters
    ----------
    nbits
        Number of low bits to set, between 0 and :data:`WORD_BITS` inclusive.

    """
    if nbits <= 0:
        return 0
    if nbits >= WORD_BITS:
        return ALL_ONES
    return (1 << nbits) - 1


def high_mask(nbits: int) -> int:
    """Return a word with bits ``[nbits, WORD_BITS)`` set."""
    return ALL_ONES & ~low_mask(nbits)


def span_mask(lo: int, hi: int) -> int:
    """Return a word with bits ``[lo, hi)`` set, both offsets within one word."""
    return high_mask(lo) & low_mask(hi)


def bit_mask(offset: int) -> int:
    """Return a word with only bit `offset` set."""
    return 1 << offset


def andnot(word: int, other: int) -> int:
    """Return the bits of `word` that are not set in `other`."""
    return word & ~other & ALL_ONES


def popcount(word: int) -> int:
    """Return the number of set bits in `word`."""
    return bin(word).count("1")
