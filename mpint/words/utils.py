"""General utilities, such as exception classes and word size constants."""

import typing

# mpint-specific exceptions

class MPIntError(Exception):
    """Base mpint error."""

class FormatError(MPIntError, ValueError):
    """Malformed numeric text, such as an empty string or a stray character."""

class DivideByZero(MPIntError, ZeroDivisionError):
    """Division or modulo by zero."""


# word representation

WORD_BITS: int = 32
WORD_BASE: int = 1 << WORD_BITS
WORD_MASK: int = WORD_BASE - 1

# decimal text is converted nine digits at a time
DECIMAL_CHUNK: int = 9
DECIMAL_BASE: int = 10 ** DECIMAL_CHUNK


# Useful things

def maskword(x: int) -> int:
    """Keep only the low WORD_BITS bits of x, as an unsigned word.

    >>> maskword(WORD_BASE + 5)
    5
    >>> maskword(-1) == WORD_MASK
    True
    """
    return x & WORD_MASK

def split_wide(x: int) -> typing.Tuple[int, int]:
    """Split a double-width value into (low word, carry).

    >>> split_wide(WORD_BASE + 7)
    (7, 1)
    >>> split_wide(3)
    (3, 0)
    >>> split_wide(WORD_MASK * WORD_MASK) == (1, WORD_MASK - 1)
    True
    """
    return x & WORD_MASK, x >> WORD_BITS


if __name__ == '__main__':
    import doctest
    doctest.testmod()
