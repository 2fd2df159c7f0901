"""Arbitrary-precision signed integers."""

from ..words import store
from . import compare
from . import additive
from . import multiplicative
from . import division
from . import bitwise
from . import shift
from . import conversion


class BigInt(object):

    # the magnitude is exactly sum(_words[i] * 2**(WORD_BITS * i))
    _words : list = None

    # the sign is stored separately; True for non-negative values
    _sign : bool = True

    # the internal state is not directly visible: expose it with properties

    @property
    def negative(self):
        """The sign bit - is this value negative?"""
        return not self._sign

    @property
    def words(self):
        """Unsigned magnitude words, least significant first, as a tuple.
        Always normalized: no zero words on top, except for zero itself.
        """
        return tuple(self._words)

    def positive(self):
        """Is this value non-negative? Zero is positive."""
        return self._sign

    def is_zero(self):
        return store.is_zero(self._words)

    def __init__(self, x=None, sign=None, words=None):
        """Create a new integer. The first argument, "x", can be an int, a
        decimal string in the format [+-]?[0-9]+, or another BigInt to copy.
        Alternatively, the magnitude can be given directly as an iterable of
        unsigned words, least significant first, with the sign (True for
        non-negative) given separately; the result is always normalized.
        """
        if words is not None:
            if x is not None:
                raise ValueError('cannot specify both x={} and words={}'.format(repr(x), repr(words)))
            if sign is None:
                sign = True
            self._sign, self._words = store.normalize(bool(sign), store.check_words(words))
            return
        elif sign is not None:
            raise ValueError('cannot specify sign={} without words'.format(repr(sign)))

        if x is None:
            self._sign, self._words = store.zero()
        elif isinstance(x, BigInt):
            self._sign, self._words = x._sign, list(x._words)
        elif isinstance(x, int):
            self._sign, self._words = store.from_int(x)
        elif isinstance(x, str):
            self._sign, self._words = conversion.parse_decimal(x)
        else:
            raise TypeError('expected int, str, or BigInt, got {}'.format(repr(type(x))))

    @classmethod
    def _from_pair(cls, pair):
        """Wrap a normalized pair produced by one of the engines."""
        x = cls.__new__(cls)
        x._sign, x._words = pair
        return x

    @classmethod
    def _coerce(cls, other):
        if isinstance(other, cls):
            return other
        elif isinstance(other, int):
            return cls(other)
        else:
            return None

    @classmethod
    def _require(cls, other):
        coerced = cls._coerce(other)
        if coerced is None:
            raise TypeError('expected int or BigInt, got {}'.format(repr(type(other))))
        return coerced

    def __repr__(self):
        return '{}(negative={}, words={})'.format(
            type(self).__name__, repr(self.negative), repr(self._words),
        )

    def __str__(self):
        return conversion.format_decimal(self._sign, self._words)

    def __int__(self):
        return store.to_int(self._sign, self._words)

    def __bool__(self):
        return not store.is_zero(self._words)

    def __hash__(self):
        # consistent with BigInt(x) == x for native ints
        return hash(int(self))

    def compareto(self, other):
        """Compare to another integer. The ordering returned is:
            -1 iff self < other
             0 iff self = other
             1 iff self > other
        """
        other = self._require(other)
        return compare.compare(self._sign, self._words, other._sign, other._words)

    def _order(self, other):
        other = self._coerce(other)
        if other is None:
            return None
        return compare.compare(self._sign, self._words, other._sign, other._words)

    def __lt__(self, other):
        order = self._order(other)
        if order is None:
            return NotImplemented
        return order < 0

    def __le__(self, other):
        order = self._order(other)
        if order is None:
            return NotImplemented
        return order <= 0

    def __eq__(self, other):
        order = self._order(other)
        if order is None:
            return NotImplemented
        return order == 0

    def __ne__(self, other):
        order = self._order(other)
        if order is None:
            return NotImplemented
        return order != 0

    def __ge__(self, other):
        order = self._order(other)
        if order is None:
            return NotImplemented
        return order >= 0

    def __gt__(self, other):
        order = self._order(other)
        if order is None:
            return NotImplemented
        return order > 0

    # unary operators

    def __pos__(self):
        return BigInt(self)

    def __neg__(self):
        return self._from_pair(additive.negate(self._sign, self._words))

    def __abs__(self):
        return self._from_pair((True, list(self._words)))

    def __invert__(self):
        return self._from_pair(bitwise.invert(self._sign, self._words))

    def increment(self):
        """The next integer, self + 1."""
        return self._from_pair(additive.add_word(self._sign, self._words, 1))

    def decrement(self):
        """The previous integer, self - 1."""
        return self._from_pair(additive.subtract(self._sign, self._words, True, [1]))

    # binary operators; native ints are accepted on either side

    def _binop(self, fn, other, reflected=False):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if reflected:
            return self._from_pair(fn(other._sign, other._words, self._sign, self._words))
        else:
            return self._from_pair(fn(self._sign, self._words, other._sign, other._words))

    def __add__(self, other):
        return self._binop(additive.add, other)

    def __radd__(self, other):
        return self._binop(additive.add, other, reflected=True)

    def __sub__(self, other):
        return self._binop(additive.subtract, other)

    def __rsub__(self, other):
        return self._binop(additive.subtract, other, reflected=True)

    def __mul__(self, other):
        return self._binop(multiplicative.multiply, other)

    def __rmul__(self, other):
        return self._binop(multiplicative.multiply, other, reflected=True)

    def divrem(self, other):
        """Truncating division: returns (quotient, remainder) such that
        self == quotient * other + remainder, with the quotient rounded toward
        zero and the remainder taking the sign of self.
        Raises DivideByZero if other is zero, and TypeError unless other is
        an int or a BigInt.
        """
        other = self._require(other)
        q, r = division.divrem(self._sign, self._words, other._sign, other._words)
        return self._from_pair(q), self._from_pair(r)

    def __truediv__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.divrem(other)[0]

    def __rtruediv__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return BigInt(other).divrem(self)[0]

    def __mod__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.divrem(other)[1]

    def __rmod__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return BigInt(other).divrem(self)[1]

    def __and__(self, other):
        return self._binop(bitwise.bitwise_and, other)

    def __rand__(self, other):
        return self._binop(bitwise.bitwise_and, other, reflected=True)

    def __or__(self, other):
        return self._binop(bitwise.bitwise_or, other)

    def __ror__(self, other):
        return self._binop(bitwise.bitwise_or, other, reflected=True)

    def __xor__(self, other):
        return self._binop(bitwise.bitwise_xor, other)

    def __rxor__(self, other):
        return self._binop(bitwise.bitwise_xor, other, reflected=True)

    @staticmethod
    def _shift_count(n):
        if isinstance(n, BigInt):
            n = int(n)
        elif not isinstance(n, int):
            return None
        if n < 0:
            raise ValueError('negative shift count')
        return n

    def __lshift__(self, n):
        n = self._shift_count(n)
        if n is None:
            return NotImplemented
        return self._from_pair(shift.shift_left(self._sign, self._words, n))

    def __rshift__(self, n):
        n = self._shift_count(n)
        if n is None:
            return NotImplemented
        return self._from_pair(shift.shift_right(self._sign, self._words, n))
