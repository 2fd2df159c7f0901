"""Conversions between decimal text and (sign, words) pairs.

Text is read and written DECIMAL_CHUNK digits at a time, so most of the
work happens on whole words: parsing folds each chunk in with one word
multiply and one word add, and printing peels off chunks with short
division by DECIMAL_BASE.
"""

from ..words.utils import DECIMAL_BASE, DECIMAL_CHUNK, FormatError
from ..words import store
from ..words.store import Words, Pair
from .additive import add_word
from .multiplicative import multiply_word
from .division import divmod_short


DIGITS = '0123456789'


def _check_digit(s: str, i: int) -> int:
    d = DIGITS.find(s[i])
    if d < 0:
        raise FormatError('digit expected at position {:d}, {} found'.format(i, repr(s[i])))
    return d


def parse_decimal(s: str) -> Pair:
    """Parse [+-]?[0-9]+ into a normalized pair.
    Raises FormatError on an empty string or any unexpected character.
    """
    if not s:
        raise FormatError('cannot parse empty string')

    if s[0] in '+-':
        start = 1
        if len(s) == 1:
            raise FormatError('digit expected after sign {}'.format(repr(s[0])))
    else:
        start = 0

    words = [0]
    i = start
    while i < len(s):
        chunk = s[i:i + DECIMAL_CHUNK]
        scale = 1
        value = 0
        for j in range(len(chunk)):
            value = value * 10 + _check_digit(s, i + j)
            scale *= 10
        words = multiply_word(words, scale)
        _, words = add_word(True, words, value)
        i += len(chunk)

    return store.normalize(s[0] != '-', words)


def format_decimal(sign: bool, words: Words) -> str:
    """Canonical decimal text: no leading zeros, and a '-' iff negative."""
    chunks = []
    c = list(words)
    while True:
        c, r = divmod_short(c, DECIMAL_BASE)
        chunks.append(r)
        if store.is_zero(c):
            break

    # only the most significant chunk goes unpadded
    text = str(chunks[-1]) + ''.join(
        '{:0{width}d}'.format(r, width=DECIMAL_CHUNK) for r in reversed(chunks[:-1]))

    if sign:
        return text
    else:
        return '-' + text
