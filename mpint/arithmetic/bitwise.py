"""Bitwise logic on signed magnitudes, emulating infinite two's complement.

Both operands are widened to one word more than the longer of them, so the
top word of each encoding holds nothing but copies of the sign bit. The bit
function is applied word by word to fresh encodings; the operands themselves
are never touched, so x & x and friends are safe.
"""

import operator
import typing

from ..words import store
from ..words.store import Words, Pair
from ..words.utils import WORD_BITS, WORD_MASK
from .additive import add_word, negate, subtract


def to_twos_complement(sign: bool, words: Words, size: int) -> Words:
    """Encode a signed value as size words of two's complement.
    Non-negative values are zero extended. Negative values become the
    inverse of |x| - 1, which equals x modulo 2**(size * WORD_BITS).
    """
    if sign:
        return store.extended(words, size)
    else:
        _, less_one = subtract(True, words, True, [1])
        inverted = [w ^ WORD_MASK for w in less_one]
        return store.extended(inverted, size, fill=WORD_MASK)


def _decode_negative(words: Words) -> Pair:
    inverted = [w ^ WORD_MASK for w in words]
    _, magnitude = add_word(True, store.normalize(True, inverted)[1], 1)
    return store.normalize(False, magnitude)


def from_twos_complement(words: Words) -> Pair:
    """Decode two's complement words, taking the top bit as the sign."""
    if words[-1] >> (WORD_BITS - 1):
        return _decode_negative(words)
    else:
        return store.normalize(True, list(words))


def apply(a_sign: bool, a: Words, b_sign: bool, b: Words,
          function: typing.Callable[[int, int], int]) -> Pair:
    size = max(len(a), len(b)) + 1
    x = to_twos_complement(a_sign, a, size)
    y = to_twos_complement(b_sign, b, size)

    # the sign bits combine like any other bits
    negative = function(int(not a_sign), int(not b_sign)) & 1

    z = [function(u, v) & WORD_MASK for u, v in zip(x, y)]

    if negative:
        return _decode_negative(z)
    else:
        return store.normalize(True, z)


def bitwise_and(a_sign: bool, a: Words, b_sign: bool, b: Words) -> Pair:
    return apply(a_sign, a, b_sign, b, operator.and_)


def bitwise_or(a_sign: bool, a: Words, b_sign: bool, b: Words) -> Pair:
    return apply(a_sign, a, b_sign, b, operator.or_)


def bitwise_xor(a_sign: bool, a: Words, b_sign: bool, b: Words) -> Pair:
    return apply(a_sign, a, b_sign, b, operator.xor)


def invert(sign: bool, words: Words) -> Pair:
    """~x == -x - 1"""
    sign, words = negate(sign, words)
    return subtract(sign, words, True, [1])
