import random
import unittest

from mpint.words import store
from mpint.words.utils import WORD_BASE, WORD_MASK
from mpint.arithmetic import additive


def add(x, y):
    return store.to_int(*additive.add(*store.from_int(x), *store.from_int(y)))


def sub(x, y):
    return store.to_int(*additive.subtract(*store.from_int(x), *store.from_int(y)))


class TestAdd(unittest.TestCase):
    def test_carry_into_new_word(self):
        self.assertEqual(additive.add(True, [WORD_MASK], True, [1]), (True, [0, 1]))

    def test_carry_chain(self):
        sign, words = additive.add(True, [WORD_MASK, WORD_MASK, WORD_MASK], True, [1])
        self.assertEqual((sign, words), (True, [0, 0, 0, 1]))

    def test_mixed_signs_delegate(self):
        self.assertEqual(add(5, -8), -3)
        self.assertEqual(add(-5, 8), 3)
        self.assertEqual(add(-5, 5), 0)

    def test_add_zero_is_copy(self):
        words = [1, 2]
        sign, z = additive.add(False, words, True, [0])
        self.assertEqual((sign, z), (False, [1, 2]))
        self.assertIsNot(z, words)

    def test_inputs_untouched(self):
        a = [WORD_MASK, 3]
        b = [1]
        additive.add(True, a, True, b)
        additive.subtract(True, a, False, b)
        self.assertEqual(a, [WORD_MASK, 3])
        self.assertEqual(b, [1])

    def test_random(self):
        rng = random.Random(2)
        for _ in range(300):
            x = rng.randint(-(1 << 200), 1 << 200) >> rng.randint(0, 190)
            y = rng.randint(-(1 << 200), 1 << 200) >> rng.randint(0, 190)
            self.assertEqual(add(x, y), x + y, (x, y))


class TestSubtract(unittest.TestCase):
    def test_borrow_chain(self):
        self.assertEqual(additive.subtract(True, [0, 0, 1], True, [1]), (True, [WORD_MASK, WORD_MASK]))

    def test_smaller_minuend_flips(self):
        self.assertEqual(sub(3, 10), -7)
        self.assertEqual(sub(-10, -3), -7)
        self.assertEqual(sub(-3, -10), 7)

    def test_zero_result_is_positive(self):
        self.assertEqual(additive.subtract(True, [0], True, [0]), (True, [0]))
        self.assertEqual(additive.subtract(False, [4, 9], False, [4, 9]), (True, [0]))

    def test_zero_minuend(self):
        self.assertEqual(sub(0, 5), -5)
        self.assertEqual(sub(0, -5), 5)

    def test_mixed_signs_delegate(self):
        self.assertEqual(sub(WORD_MASK, -1), WORD_BASE)
        self.assertEqual(sub(-WORD_MASK, 1), -WORD_BASE)

    def test_random(self):
        rng = random.Random(3)
        for _ in range(300):
            x = rng.randint(-(1 << 200), 1 << 200) >> rng.randint(0, 190)
            y = rng.randint(-(1 << 200), 1 << 200) >> rng.randint(0, 190)
            self.assertEqual(sub(x, y), x - y, (x, y))


class TestNegate(unittest.TestCase):
    def test_negate(self):
        self.assertEqual(additive.negate(True, [3]), (False, [3]))
        self.assertEqual(additive.negate(False, [3]), (True, [3]))
        self.assertEqual(additive.negate(True, [0]), (True, [0]))


if __name__ == '__main__':
    unittest.main()
