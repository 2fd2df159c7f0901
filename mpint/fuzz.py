"""Randomized differential testing of the mpint engines against gmpy2.

Operands are drawn from a seeded numpy Generator, biased toward words that
make carries, borrows and quotient corrections happen (0, 1, and values
near 2**32). Each result must match gmpy2 exactly, word for word, which
also checks that the engines return normalized values.

Run as a module for a long session:
    python -m mpint.fuzz [reps] [seed]
"""

import sys
import operator

import numpy

from .words import gmpint
from .words.ops import OP, SHIFT_OPS, DIVISION_OPS, UNARY_OPS
from .words.utils import WORD_MASK
from .arithmetic.bigint import BigInt


# indexed by OP, like gmpint.gmp_ops
mpint_ops = [
    operator.add,
    operator.sub,
    operator.mul,
    operator.truediv,
    operator.mod,
    operator.neg,
    operator.invert,
    operator.and_,
    operator.or_,
    operator.xor,
    operator.lshift,
    operator.rshift,
]

edge_words = numpy.array([0, 1, WORD_MASK - 1, WORD_MASK], dtype=numpy.uint32)


def random_words(rng, nwords):
    words = rng.integers(0, WORD_MASK, size=nwords, dtype=numpy.uint32, endpoint=True)
    special = rng.random(nwords) < 0.25
    words[special] = rng.choice(edge_words, size=int(special.sum()))
    return [int(w) for w in words]


def random_bigint(rng, max_words):
    nwords = int(rng.integers(1, max_words, endpoint=True))
    negative = bool(rng.integers(0, 1, endpoint=True))
    return BigInt(sign=not negative, words=random_words(rng, nwords))


def as_pair(x):
    return x.positive(), list(x.words)


def test_op(opcode, rng, max_words=8, max_shift=200):
    """Check one random application of opcode. Returns True on failure."""
    a = random_bigint(rng, max_words)
    if opcode in UNARY_OPS:
        args = [a]
    elif opcode in SHIFT_OPS:
        args = [a, int(rng.integers(0, max_shift, endpoint=True))]
    else:
        b = random_bigint(rng, max_words)
        if opcode in DIVISION_OPS and b.is_zero():
            b = BigInt(1)
        args = [a, b]

    answer = mpint_ops[opcode](*args)
    if opcode in SHIFT_OPS:
        reference = gmpint.compute(opcode, as_pair(args[0]), args[1])
    else:
        reference = gmpint.compute(opcode, *[as_pair(x) for x in args])

    if as_pair(answer) != reference:
        print('failure on {}\n  {}\n  mpint={} vs. gmp={}'.format(
            opcode.name, repr(args), repr(answer), repr(BigInt(sign=reference[0], words=reference[1])),
        ), flush=True)
        return True
    return False


def test_decimal(rng, max_words=8):
    """Check that printing matches gmpy2 and parsing round-trips. Returns True on failure."""
    a = random_bigint(rng, max_words)
    text = str(a)
    reference = str(gmpint.words_to_mpz(*as_pair(a)))

    failed = False
    if text != reference:
        print('failure on decimal output\n  {}\n  mpint={} vs. gmp={}'.format(
            repr(a), text, reference,
        ), flush=True)
        failed = True

    parsed = BigInt(text)
    if as_pair(parsed) != as_pair(a):
        print('failure on decimal input\n  {}\n  parsed={}'.format(
            text, repr(parsed),
        ), flush=True)
        failed = True

    return failed


def run_test(test, cases, rng, reps=10, **kwargs):
    """Run test on each case reps times, printing a '.' for each pass and a '!'
    for each failure. Returns (attempts, failures).
    """
    print('Running test {} on {:d} cases...'.format(test.__name__, len(cases)))
    attempts = 0
    failures = 0
    for case in cases:
        label = test.__name__ if case is None else case.name
        print('{} '.format(label), end='', flush=True)
        any_fails = False
        for rep in range(reps):
            if case is None:
                attempt = test(rng, **kwargs)
            else:
                attempt = test(case, rng, **kwargs)
            any_fails = any_fails or attempt
            if attempt:
                print('!', end='', flush=True)
            else:
                print('.', end='', flush=True)
        print('')
        attempts += 1
        if any_fails:
            failures += 1
    print('...Done. {:d} attempts, {:d} failures.'.format(attempts, failures))
    return attempts, failures


def run_all(reps=100, seed=0, max_words=8):
    rng = numpy.random.default_rng(seed)
    _, op_failures = run_test(test_op, list(OP), rng, reps=reps, max_words=max_words)
    _, dec_failures = run_test(test_decimal, [None], rng, reps=reps, max_words=max_words)
    return op_failures + dec_failures


if __name__ == '__main__':
    reps = int(sys.argv[1]) if len(sys.argv) > 1 else 1000
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else 0
    failures = run_all(reps=reps, seed=seed)
    if failures:
        print('{:d} failing cases'.format(failures), file=sys.stderr, flush=True)
        sys.exit(1)
