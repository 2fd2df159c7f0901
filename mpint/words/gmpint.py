"""Reference integer arithmetic implemented with GMP as a backend,
operating on the same (sign, words) pairs as the engines.

This is the oracle for the differential tests: results computed here never
touch mpint's own engines, only the word store.
"""

import operator

import gmpy2 as gmp

from .ops import OP, SHIFT_OPS
from .utils import WORD_BITS, WORD_MASK
from . import store


def words_to_mpz(sign, words):
    c = gmp.mpz(0)
    for w in reversed(words):
        c = (c << WORD_BITS) | w
    if sign:
        return c
    else:
        return -c


def mpz_to_words(x):
    sign = x >= 0
    c = abs(gmp.mpz(x))
    words = []
    while c > 0:
        words.append(int(c & WORD_MASK))
        c >>= WORD_BITS
    return store.normalize(sign, words)


# indexed by OP; division truncates toward zero, like the engines
gmp_ops = [
    gmp.add,
    gmp.sub,
    gmp.mul,
    gmp.t_div,
    gmp.t_mod,
    operator.neg,
    operator.invert,
    operator.and_,
    operator.or_,
    operator.xor,
    operator.lshift,
    operator.rshift,
]


def compute(opcode, *args):
    """Compute op(*args) exactly with gmpy2.
    Integer arguments are (sign, words) pairs, except the shift count of
    OP.lshift and OP.rshift, which is a native int. Returns a normalized pair.
    Division by zero raises ZeroDivisionError from gmpy2.
    """
    op = gmp_ops[opcode]
    if opcode in SHIFT_OPS:
        (sign, words), shift = args
        inputs = [words_to_mpz(sign, words), shift]
    else:
        inputs = [words_to_mpz(sign, words) for sign, words in args]
    result = op(*inputs)
    return mpz_to_words(result)
