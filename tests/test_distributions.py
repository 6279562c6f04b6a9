import random
import unittest
from collections import Counter
from itertools import islice

from cryptonum.distributions import UniformBigUint, UniformBigInt, RandomBits, UniformSampler
from cryptonum.error import InvalidRangeError, NegativeMagnitudeError
from cryptonum.source import RandomSource


class TestUniformBigUint(unittest.TestCase):

    def test_construction(self):
        dist = UniformBigUint(10, 25)
        self.assertEqual(dist.base, 10)
        self.assertEqual(dist.length, 15)
        self.assertEqual(dist, UniformBigUint(10, 25))
        self.assertEqual(repr(dist), 'UniformBigUint(10, 25)')

    def test_sample(self):
        rng = random.Random(1)
        low, high = 2 ** 70, 2 ** 70 + 2 ** 40
        dist = UniformBigUint(low, high)
        for _ in range(500):
            self.assertTrue(low <= dist.sample(rng) < high)

    def test_inclusive(self):
        rng = random.Random(2)
        dice = UniformBigUint.new_inclusive(1, 6)
        counts = Counter(dice.sample(rng) for _ in range(6000))
        self.assertEqual(set(counts), set(range(1, 7)))
        self.assertEqual(UniformBigUint.new_inclusive(3, 3).sample(rng), 3)

    def test_sample_single(self):
        rng = random.Random(3)
        for _ in range(200):
            self.assertTrue(5 <= UniformBigUint.sample_single(5, 9, rng) < 9)

    def test_sample_iter(self):
        values = list(islice(UniformBigUint(0, 4).sample_iter(RandomSource(4)), 100))
        self.assertEqual(len(values), 100)
        self.assertEqual(set(values), {0, 1, 2, 3})

    def test_invalid(self):
        with self.assertRaises(InvalidRangeError):
            UniformBigUint(5, 5)
        with self.assertRaises(InvalidRangeError):
            UniformBigUint(7, 3)
        with self.assertRaises(InvalidRangeError):
            UniformBigUint.new_inclusive(4, 3)
        with self.assertRaises(InvalidRangeError):
            UniformBigUint.sample_single(10, 10)
        with self.assertRaises(NegativeMagnitudeError):
            UniformBigUint(-1, 3)

    def test_immutable(self):
        dist = UniformBigUint(0, 10)
        with self.assertRaises(AttributeError):
            dist.base = 5
        with self.assertRaises(AttributeError):
            dist.extra = 1


class TestUniformBigInt(unittest.TestCase):

    def test_sample(self):
        rng = random.Random(5)
        dist = UniformBigInt(-2 ** 65, 2 ** 3)
        self.assertEqual(dist.length, 2 ** 65 + 2 ** 3)
        values = [dist.sample(rng) for _ in range(500)]
        self.assertTrue(all(-2 ** 65 <= v < 2 ** 3 for v in values))

    def test_inclusive_negative(self):
        rng = random.Random(6)
        dist = UniformBigInt.new_inclusive(-3, -1)
        self.assertEqual({dist.sample(rng) for _ in range(300)}, {-3, -2, -1})

    def test_sample_single(self):
        rng = random.Random(7)
        for low, high in ((-5, 0), (0, 5), (-5, 5)):
            for _ in range(100):
                self.assertTrue(low <= UniformBigInt.sample_single(low, high, rng) < high)

    def test_invalid(self):
        with self.assertRaises(InvalidRangeError):
            UniformBigInt(0, -1)
        with self.assertRaises(InvalidRangeError):
            UniformBigInt.sample_single(-2, -2)

    def test_not_equal_to_unsigned(self):
        self.assertNotEqual(UniformBigInt(0, 10), UniformBigUint(0, 10))

    def test_base_interface(self):
        with self.assertRaises(NotImplementedError):
            UniformSampler.sample_single(0, 1)


class TestRandomBits(unittest.TestCase):

    def test_unsigned(self):
        rng = random.Random(8)
        dist = RandomBits(70)
        values = [dist.sample(rng) for _ in range(300)]
        self.assertTrue(all(0 <= v < 2 ** 70 for v in values))

    def test_signed(self):
        rng = random.Random(9)
        dist = RandomBits(5, signed=True)
        values = {dist.sample(rng) for _ in range(3000)}
        self.assertEqual(values, set(range(-31, 32)))

    def test_same_seed_same_values(self):
        dist = RandomBits(200, signed=True)
        self.assertEqual(dist.sample(random.Random(1)), dist.sample(random.Random(1)))

    def test_value_semantics(self):
        self.assertEqual(RandomBits(8), RandomBits(8))
        self.assertNotEqual(RandomBits(8), RandomBits(8, signed=True))
        self.assertEqual(len({RandomBits(8), RandomBits(8)}), 1)
        self.assertEqual(repr(RandomBits(8)), 'RandomBits(8, signed=False)')

    def test_invalid(self):
        with self.assertRaises(ValueError):
            RandomBits(-1)


if __name__ == '__main__':
    unittest.main()
