"""Standard operation codes, shared by the engines, the gmp oracle, and the fuzzer."""

from enum import IntEnum, unique

@unique
class OP(IntEnum):
    add = 0
    sub = 1
    mul = 2
    div = 3
    mod = 4
    neg = 5
    invert = 6
    and_ = 7
    or_ = 8
    xor = 9
    lshift = 10
    rshift = 11

# operations taking a non-negative native shift count as the second argument
SHIFT_OPS = frozenset((OP.lshift, OP.rshift))

# operations that raise on a zero second argument
DIVISION_OPS = frozenset((OP.div, OP.mod))

UNARY_OPS = frozenset((OP.neg, OP.invert))
