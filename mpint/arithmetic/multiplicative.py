"""Schoolbook multiplication of signed magnitudes."""

from ..words import store
from ..words.store import Words, Pair
from ..words.utils import split_wide


def _mul_magnitudes(a: Words, b: Words) -> Words:
    size = len(a) + len(b)
    # The buffer starts out holding a. Output positions are filled from the
    # top down, so every word of a at or below position k is still unread
    # when position k is computed.
    z = a + [0] * len(b)
    for k in range(size, 0, -1):
        carry = 0
        cur = 0
        for j in range(max(0, k - len(a)), min(k, len(b))):
            prod = z[k - 1 - j] * b[j] + carry + cur
            cur, carry = split_wide(prod)

            # push the escaped carry into the finished higher positions
            pos = k
            while pos < size and carry:
                z[pos], carry = split_wide(carry + z[pos])
                pos += 1

        z[k - 1] = cur
    return z


def multiply(a_sign: bool, a: Words, b_sign: bool, b: Words) -> Pair:
    return store.normalize(a_sign == b_sign, _mul_magnitudes(a, b))


def multiply_word(words: Words, w: int) -> Words:
    """Unsigned product of a magnitude and a single word, normalized."""
    z = []
    carry = 0
    for x in words:
        word, carry = split_wide(carry + x * w)
        z.append(word)
    z.append(carry)
    return store.normalize(True, z)[1]
