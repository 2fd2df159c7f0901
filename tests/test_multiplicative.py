import random
import unittest

from mpint.words import store
from mpint.words.utils import WORD_MASK
from mpint.arithmetic import multiplicative


def mul(x, y):
    return store.to_int(*multiplicative.multiply(*store.from_int(x), *store.from_int(y)))


class TestMultiply(unittest.TestCase):
    def test_single_words(self):
        self.assertEqual(multiplicative.multiply(True, [6], True, [7]), (True, [42]))
        self.assertEqual(multiplicative.multiply(True, [WORD_MASK], True, [WORD_MASK]),
                         (True, [1, WORD_MASK - 1]))

    def test_all_ones(self):
        # (2**96 - 1)**2 pushes carries through every position
        x = (1 << 96) - 1
        self.assertEqual(mul(x, x), x * x)

    def test_signs(self):
        self.assertEqual(mul(-3, 4), -12)
        self.assertEqual(mul(-3, -4), 12)
        self.assertEqual(mul(3, -4), -12)

    def test_zero_is_positive(self):
        self.assertEqual(multiplicative.multiply(False, [5, 1], True, [0]), (True, [0]))
        self.assertEqual(multiplicative.multiply(True, [0], False, [9]), (True, [0]))

    def test_square_does_not_alias(self):
        a = [WORD_MASK, 12, 1]
        sign, z = multiplicative.multiply(True, a, True, a)
        self.assertEqual(a, [WORD_MASK, 12, 1])
        self.assertEqual(store.to_int(sign, z), store.to_int(True, a) ** 2)

    def test_multiply_word(self):
        self.assertEqual(multiplicative.multiply_word([WORD_MASK, WORD_MASK], 2), [WORD_MASK - 1, WORD_MASK, 1])
        self.assertEqual(multiplicative.multiply_word([5, 7], 0), [0])

    def test_random_lopsided(self):
        rng = random.Random(4)
        for _ in range(200):
            x = rng.randint(-(1 << 400), 1 << 400) >> rng.randint(0, 390)
            y = rng.randint(-(1 << 100), 1 << 100) >> rng.randint(0, 90)
            self.assertEqual(mul(x, y), x * y, (x, y))
            self.assertEqual(mul(y, x), x * y, (y, x))


if __name__ == '__main__':
    unittest.main()
