"""Uniform and fixed bit width distributions over big integers"""

from cryptonum.bigint import magnitude
from cryptonum.bigrand import sample_magnitude, sample_signed, sample_below, sample_range_unsigned, sample_range_signed
from cryptonum.error import InvalidRangeError, NegativeMagnitudeError
from cryptonum.source import as_source

__all__ = ['Distribution', 'UniformSampler', 'UniformBigUint', 'UniformBigInt', 'RandomBits']


class Distribution:
    """Something that can be sampled repeatedly with a random source"""

    __slots__ = ()

    def sample(self, rng=None) -> int:
        raise NotImplementedError

    def sample_iter(self, rng=None):
        rng = as_source(rng)
        while True:
            yield self.sample(rng)


class UniformSampler(Distribution):
    """A distribution over the half open interval [low, high)"""

    __slots__ = ('_base', '_len')

    def __init__(self, low: int, high: int):
        if not low < high:
            raise InvalidRangeError(f"Empty range [{low}, {high})", low, high)
        self._base = low
        self._len = magnitude(high - low)

    @classmethod
    def new_inclusive(cls, low: int, high: int) -> 'UniformSampler':
        if not low <= high:
            raise InvalidRangeError(f"Empty range [{low}, {high}]", low, high)
        return cls(low, high + 1)

    @staticmethod
    def sample_single(low: int, high: int, rng=None) -> int:
        raise NotImplementedError

    @property
    def base(self) -> int:
        return self._base

    @property
    def length(self) -> int:
        return self._len

    def sample(self, rng=None):
        return self._base + sample_below(self._len, rng)

    def __eq__(self, other):
        return type(self) is type(other) and (self._base, self._len) == (other._base, other._len)

    def __hash__(self):
        return hash((type(self), self._base, self._len))

    def __repr__(self):
        return f"{self.__class__.__name__}({self._base}, {self._base + self._len})"


class UniformBigUint(UniformSampler):

    __slots__ = ()

    def __init__(self, low: int, high: int):
        super().__init__(low, high)
        if low < 0:
            raise NegativeMagnitudeError(f"Lower bound {low} is negative")

    @staticmethod
    def sample_single(low, high, rng=None):
        return sample_range_unsigned(low, high, rng)


class UniformBigInt(UniformSampler):

    __slots__ = ()

    @staticmethod
    def sample_single(low, high, rng=None):
        return sample_range_signed(low, high, rng)


class RandomBits(Distribution):
    """Values of a fixed bit size: [0, 2**bits) or, signed, (-2**bits, 2**bits)"""

    __slots__ = ('_bits', '_signed')

    def __init__(self, bits: int, signed=False):
        if bits < 0:
            raise ValueError(f"Bit size must be non-negative, got {bits}")
        self._bits = bits
        self._signed = signed

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def signed(self) -> bool:
        return self._signed

    def sample(self, rng=None):
        if self._signed:
            return sample_signed(self._bits, rng)
        return sample_magnitude(self._bits, rng)

    def __eq__(self, other):
        return isinstance(other, RandomBits) and (self._bits, self._signed) == (other._bits, other._signed)

    def __hash__(self):
        return hash((RandomBits, self._bits, self._signed))

    def __repr__(self):
        return f"RandomBits({self._bits}, signed={self._signed})"
