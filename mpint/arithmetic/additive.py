"""Addition and subtraction of signed magnitudes, with carry and borrow
propagated one word at a time.
"""

from ..words import store
from ..words.store import Words, Pair
from ..words.utils import maskword, split_wide
from .compare import compare


def negate(sign: bool, words: Words) -> Pair:
    """Flip the sign, keeping zero non-negative. Returns a copy."""
    if store.is_zero(words):
        return True, list(words)
    return not sign, list(words)


def _add_magnitudes(a: Words, b: Words) -> Words:
    if len(a) < len(b):
        a, b = b, a
    z = []
    carry = 0
    for i in range(len(a)):
        word, carry = split_wide(carry + a[i] + store.word_at(b, i))
        z.append(word)
    if carry:
        z.append(carry)
    return z


def _sub_magnitudes(a: Words, b: Words) -> Words:
    """|a| - |b|, assuming |a| >= |b|."""
    z = list(a)
    borrow = 0
    for i in range(len(z)):
        if i >= len(b) and not borrow:
            break
        diff = z[i] - store.word_at(b, i) - borrow
        borrow = 1 if diff < 0 else 0
        z[i] = maskword(diff)
    assert borrow == 0
    if len(z) > 1 and z[-1] == 0:
        z.pop()
    return z


def add(a_sign: bool, a: Words, b_sign: bool, b: Words) -> Pair:
    if store.is_zero(b):
        return a_sign, list(a)
    elif a_sign != b_sign:
        return subtract(a_sign, a, not b_sign, b)

    return store.normalize(a_sign, _add_magnitudes(a, b))


def subtract(a_sign: bool, a: Words, b_sign: bool, b: Words) -> Pair:
    if store.is_zero(b):
        return a_sign, list(a)
    elif a_sign != b_sign:
        return add(a_sign, a, not b_sign, b)

    order = compare(a_sign, a, b_sign, b)
    if (a_sign and order < 0) or (not a_sign and order > 0):
        # |a| < |b|: compute b - a instead and flip it
        sign, words = subtract(b_sign, b, a_sign, a)
        return negate(sign, words)

    return store.normalize(a_sign, _sub_magnitudes(a, b))


def add_word(sign: bool, words: Words, w: int) -> Pair:
    """Add a single non-negative word."""
    return add(sign, words, True, [w])
