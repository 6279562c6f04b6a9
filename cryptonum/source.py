"""Pseudorandom sources handed to the sampling functions"""

import random
import secrets
import struct
from typing import List

from cryptonum.bigdigit import WORD_BITS

__all__ = ['Source', 'RandomSource', 'SystemSource', 'as_source']


class Source:
    """An interface for drawing uniformly distributed random bits"""

    def fill(self, count: int) -> List[int]:
        """Return a sequence of `count` random 32-bit words"""
        raise NotImplementedError

    def gen_bool(self) -> bool:
        raise NotImplementedError


class RandomSource(Source):
    """Draws from a random.Random instance (or anything with getrandbits). Seedable."""

    def __init__(self, seed=None, rng=None):
        self._rng = rng if rng is not None else random.Random(seed)

    def __repr__(self):
        return f"{self.__class__.__name__}({self._rng!r})"

    def fill(self, count):
        if count == 0:
            return []
        # one draw for the whole block, split into words afterwards
        block = self._rng.getrandbits(WORD_BITS * count)
        return list(struct.unpack(f'<{count}I', block.to_bytes(4 * count, 'little')))

    def gen_bool(self):
        return bool(self._rng.getrandbits(1))


class SystemSource(RandomSource):
    """Draws from the operating system's entropy pool"""

    def __init__(self):
        super().__init__(rng=secrets.SystemRandom())


def as_source(rng=None) -> Source:
    if rng is None:
        return SystemSource()
    if isinstance(rng, Source):
        return rng
    if hasattr(rng, 'getrandbits'):
        return RandomSource(rng=rng)
    raise TypeError(f"Cannot draw random bits from {rng!r}")
