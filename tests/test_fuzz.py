import contextlib
import io
import unittest

import gmpy2
import numpy

from mpint import BigInt
from mpint import fuzz
from mpint.words import gmpint
from mpint.words.ops import OP


class TestGmpInt(unittest.TestCase):
    def test_words_to_mpz(self):
        self.assertEqual(gmpint.words_to_mpz(True, [0, 1]), gmpy2.mpz(1 << 32))
        self.assertEqual(gmpint.words_to_mpz(False, [5]), gmpy2.mpz(-5))

    def test_mpz_to_words(self):
        self.assertEqual(gmpint.mpz_to_words(gmpy2.mpz(-(1 << 64))), (False, [0, 0, 1]))
        self.assertEqual(gmpint.mpz_to_words(gmpy2.mpz(0)), (True, [0]))

    def test_ops_table_matches_opcodes(self):
        self.assertEqual(len(gmpint.gmp_ops), len(OP))
        self.assertEqual(len(fuzz.mpint_ops), len(OP))

    def test_compute_truncates(self):
        self.assertEqual(gmpint.compute(OP.div, (False, [7]), (True, [2])), (False, [3]))
        self.assertEqual(gmpint.compute(OP.mod, (False, [7]), (True, [2])), (False, [1]))
        self.assertEqual(gmpint.compute(OP.rshift, (False, [7]), 1), (False, [4]))


class TestFuzz(unittest.TestCase):
    def quietly(self, fn, *args, **kwargs):
        with contextlib.redirect_stdout(io.StringIO()) as out:
            result = fn(*args, **kwargs)
        return result, out.getvalue()

    def test_random_bigint_is_normalized(self):
        rng = numpy.random.default_rng(1)
        for _ in range(100):
            x = fuzz.random_bigint(rng, 6)
            words = x.words
            self.assertTrue(1 <= len(words) <= 6)
            self.assertTrue(len(words) == 1 or words[-1] != 0)

    def test_every_op(self):
        rng = numpy.random.default_rng(2)
        for opcode in OP:
            for _ in range(25):
                failed, out = self.quietly(fuzz.test_op, opcode, rng, max_words=6)
                self.assertFalse(failed, out)

    def test_decimal(self):
        rng = numpy.random.default_rng(3)
        for _ in range(50):
            failed, out = self.quietly(fuzz.test_decimal, rng, max_words=10)
            self.assertFalse(failed, out)

    def test_run_all(self):
        failures, out = self.quietly(fuzz.run_all, reps=5, seed=4, max_words=5)
        self.assertEqual(failures, 0, out)
        self.assertIn('...Done.', out)
        self.assertNotIn('!', out)

    def test_reports_failures(self):
        rng = numpy.random.default_rng(5)
        broken = list(fuzz.mpint_ops)
        broken[OP.add] = lambda a, b: a + b + 1
        original = fuzz.mpint_ops
        fuzz.mpint_ops = broken
        try:
            failed, out = self.quietly(fuzz.test_op, OP.add, rng)
        finally:
            fuzz.mpint_ops = original
        self.assertTrue(failed)
        self.assertIn('failure on add', out)


if __name__ == '__main__':
    unittest.main()
