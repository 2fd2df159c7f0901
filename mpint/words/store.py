"""Word-level access to the sign-magnitude representation.

This is the only module that knows how magnitudes are laid out: a list of
unsigned WORD_BITS words, least significant first, paired with a sign flag
that is True for non-negative values. The arithmetic engines work on raw
(sign, words) pairs through these helpers; the BigInt type never hands its
word list out to callers.

A pair is canonical (normalized) when:
  - words is never empty,
  - the most significant word is nonzero, unless words == [0],
  - zero is always non-negative.
"""

import typing

from .utils import WORD_BITS, WORD_MASK, split_wide

Words = typing.List[int]
Pair = typing.Tuple[bool, Words]


def normalize(sign: bool, words: Words) -> Pair:
    """Strip most significant zero words (in place) and fix the sign of zero.
    The list must be owned by the caller.
    """
    while len(words) > 1 and words[-1] == 0:
        words.pop()
    if not words:
        words.append(0)
    if len(words) == 1 and words[0] == 0:
        sign = True
    return sign, words


def is_zero(words: Words) -> bool:
    return len(words) == 1 and words[0] == 0


def zero() -> Pair:
    return True, [0]


def word_at(words: Words, i: int) -> int:
    """Read word i, with the magnitude implicitly extended by zeros."""
    if i < len(words):
        return words[i]
    else:
        return 0


def extended(words: Words, size: int, fill: int = 0) -> Words:
    """Copy of words resized to exactly size words, padding with fill at the top."""
    if size <= len(words):
        return words[:size]
    else:
        return words + [fill] * (size - len(words))


def check_words(words: typing.Iterable[int]) -> Words:
    """Copy an iterable of words into a fresh list, rejecting anything that is
    not an unsigned WORD_BITS integer.
    """
    checked = []
    for w in words:
        w = int(w)
        if w < 0 or w > WORD_MASK:
            raise ValueError('word {} does not fit in {:d} unsigned bits'.format(repr(w), WORD_BITS))
        checked.append(w)
    return checked


def from_int(x: int) -> Pair:
    """Capture the magnitude of a native integer directly into words."""
    sign = x >= 0
    c = abs(x)
    words = []
    while c > 0:
        word, c = split_wide(c)
        words.append(word)
    return normalize(sign, words)


def to_int(sign: bool, words: Words) -> int:
    c = 0
    for w in reversed(words):
        c = (c << WORD_BITS) | w
    if sign:
        return c
    else:
        return -c
