"""Truncating division with remainder.

Each shape of operands is handled separately:
  - the divisor is zero, which raises DivideByZero;
  - |dividend| < |divisor|, where the quotient is zero;
  - a single word divisor, which uses short division;
  - anything else, which uses long division in the style of Knuth's
    Algorithm D, estimating each quotient word from the top three words
    of the running remainder and the top two words of the divisor.

The quotient is non-negative iff the operands have the same sign, and the
remainder takes the sign of the dividend, so that for any b != 0,
a == (a / b) * b + a % b, rounding toward zero like C.
"""

import typing

from ..words import store
from ..words.store import Words, Pair
from ..words.utils import WORD_BITS, WORD_MASK, DivideByZero, maskword
from .compare import compare_magnitude
from .multiplicative import multiply_word


def divmod_short(words: Words, d: int) -> typing.Tuple[Words, int]:
    """Divide a magnitude by a single nonzero word, returning the normalized
    quotient magnitude and the remainder word.
    """
    if not 0 < d <= WORD_MASK:
        raise ValueError('divisor {} is not a nonzero word'.format(repr(d)))
    q = [0] * len(words)
    rem = 0
    for i in range(len(words) - 1, -1, -1):
        rem = (rem << WORD_BITS) | words[i]
        hi = rem // d
        q[i] = hi
        rem -= hi * d
    return store.normalize(True, q)[1], rem


def _window_smaller(v: Words, start: int, size: int, w: Words) -> bool:
    """Is the window v[start:start+size] smaller than the magnitude w?"""
    for i in range(size - 1, -1, -1):
        vd = v[start + i]
        wd = store.word_at(w, i)
        if vd != wd:
            return vd < wd
    return False


def _window_isub(v: Words, start: int, size: int, w: Words) -> None:
    """Subtract w from the window v[start:start+size] in place.
    The window must be at least as large as w.
    """
    borrow = 0
    for i in range(size):
        diff = v[start + i] - store.word_at(w, i) - borrow
        borrow = 1 if diff < 0 else 0
        v[start + i] = maskword(diff)
    assert borrow == 0


def _sub_word_magnitude(a: Words, b: Words) -> Words:
    """a - b for magnitudes with a >= b; only used for the trial correction."""
    z = list(a)
    _window_isub(z, 0, len(z), b)
    return store.normalize(True, z)[1]


def divmod_long(v: Words, w: Words) -> typing.Tuple[Words, Words]:
    """Unsigned long division of v by w, where len(w) >= 2 and |v| >= |w|.
    Returns normalized (quotient, remainder) magnitudes.
    """
    size_w = len(w)
    if size_w < 2 or len(v) < size_w:
        raise ValueError('cannot long divide {:d} words by {:d} words'.format(len(v), size_w))

    # the running remainder, with one extra word on top; windows of size_w + 1
    # words slide down it, one quotient word per position
    rem = v + [0]
    window = size_w + 1
    k = len(v) - size_w + 1
    q = [0] * k

    denominator = (w[-1] << WORD_BITS) | w[-2]

    for j in range(k - 1, -1, -1):
        top = j + window
        numerator = (rem[top - 1] << (2 * WORD_BITS)) | (rem[top - 2] << WORD_BITS) | rem[top - 3]

        # never too low, and at most one too high
        estimate = min(numerator // denominator, WORD_MASK)
        trial = multiply_word(w, estimate)

        if _window_smaller(rem, j, window, trial):
            estimate -= 1
            trial = _sub_word_magnitude(trial, w)

        q[j] = estimate
        _window_isub(rem, j, window, trial)

    return store.normalize(True, q)[1], store.normalize(True, rem)[1]


def divrem(a_sign: bool, a: Words, b_sign: bool, b: Words) -> typing.Tuple[Pair, Pair]:
    """Truncating division of signed values: returns (quotient, remainder) pairs."""
    if store.is_zero(b):
        raise DivideByZero('division by zero')

    if compare_magnitude(a, b) < 0:
        return store.zero(), (a_sign, list(a))

    if len(b) == 1:
        q, r = divmod_short(a, b[0])
        rem = [r]
    else:
        q, rem = divmod_long(a, b)

    return store.normalize(a_sign == b_sign, q), store.normalize(a_sign, rem)
