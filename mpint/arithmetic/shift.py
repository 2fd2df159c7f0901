"""Bit shifts across word boundaries.

Values are shifted in two's complement. Each output word is assembled from
the two adjacent source words that straddle it; bits shifted in from below
are zero, and bits read from above the top of the source are copies of the
sign. That sign fill makes right shifts of negative values round toward
negative infinity, for any shift amount, exactly like Python's >> on ints.
"""

from ..words import store
from ..words.store import Words, Pair
from ..words.utils import WORD_BITS, WORD_MASK
from .bitwise import to_twos_complement, from_twos_complement


def _source_word(src: Words, i: int, fill: int) -> int:
    if i < 0:
        return 0
    elif i >= len(src):
        return fill
    else:
        return src[i]


def shift_words(src: Words, fill: int, shift: int, size: int) -> Words:
    """Produce size words whose bit p is bit (p - shift) of src.
    A positive shift moves bits up, a negative one moves them down.
    """
    z = []
    for i in range(size):
        block, offset = divmod(i * WORD_BITS - shift, WORD_BITS)
        lo = _source_word(src, block, fill)
        if offset:
            hi = _source_word(src, block + 1, fill)
            z.append(((lo >> offset) | (hi << (WORD_BITS - offset))) & WORD_MASK)
        else:
            z.append(lo)
    return z


def shift_left(sign: bool, words: Words, shift: int) -> Pair:
    """x << shift, i.e. x * 2**shift."""
    if shift < 0:
        raise ValueError('negative shift count')
    if shift == 0 or store.is_zero(words):
        return sign, list(words)

    width = len(words) + 1
    src = to_twos_complement(sign, words, width)
    fill = 0 if sign else WORD_MASK
    z = shift_words(src, fill, shift, width + shift // WORD_BITS + 1)
    return from_twos_complement(z)


def shift_right(sign: bool, words: Words, shift: int) -> Pair:
    """x >> shift, i.e. floor(x / 2**shift)."""
    if shift < 0:
        raise ValueError('negative shift count')
    if shift == 0:
        return sign, list(words)

    width = len(words) + 1
    src = to_twos_complement(sign, words, width)
    fill = 0 if sign else WORD_MASK
    z = shift_words(src, fill, -shift, width)
    return from_twos_complement(z)
