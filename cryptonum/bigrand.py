"""Randomization of big integers"""

import logging
from typing import List

from cryptonum.bigdigit import BITS, WORD_BITS, from_digits, repack
from cryptonum.bigint import Sign, from_biguint, magnitude
from cryptonum.error import ZeroBoundError, InvalidRangeError, NegativeMagnitudeError
from cryptonum.source import Source, as_source

__all__ = ['sample_magnitude', 'sample_signed', 'sample_below', 'sample_range_unsigned', 'sample_range_signed']

logger = logging.getLogger(__name__)


def gen_bits(rng: Source, count: int, rem: int) -> List[int]:
    data = list(rng.fill(count))
    if rem > 0:
        data[-1] >>= WORD_BITS - rem
    return data


def _gen_biguint(rng: Source, bit_size: int) -> int:
    digits, rem = divmod(bit_size, WORD_BITS)
    words = gen_bits(rng, digits + (rem > 0), rem)
    # low word first, so the value is the same whatever the native digit width
    return from_digits(repack(words, WORD_BITS, BITS))


def _gen_biguint_below(rng: Source, bound: int) -> int:
    if bound == 0:
        raise ZeroBoundError('Cannot sample below a zero bound')
    if bound < 0:
        raise NegativeMagnitudeError(f"Bound {bound} is negative")
    bits = bound.bit_length()
    attempts = 1
    while True:
        n = _gen_biguint(rng, bits)
        if n < bound:
            if attempts > 1:
                logger.debug('Rejection sampling below a %d-bit bound took %d draws', bits, attempts)
            return n
        attempts += 1


def sample_magnitude(bit_size: int, rng=None) -> int:
    """Random magnitude in [0, 2**bit_size)"""
    if bit_size < 0:
        raise ValueError(f"Bit size must be non-negative, got {bit_size}")
    return _gen_biguint(as_source(rng), bit_size)


def sample_signed(bit_size: int, rng=None) -> int:
    """Random integer in (-2**bit_size, 2**bit_size)"""
    if bit_size < 0:
        raise ValueError(f"Bit size must be non-negative, got {bit_size}")
    rng = as_source(rng)
    while True:
        biguint = _gen_biguint(rng, bit_size)
        if biguint == 0:
            # A zero magnitude comes out of both the PLUS and MINUS branches,
            # so it is kept only half of the time.
            if rng.gen_bool():
                continue
            sign = Sign.NOSIGN
        elif rng.gen_bool():
            sign = Sign.PLUS
        else:
            sign = Sign.MINUS
        return from_biguint(sign, biguint)


def sample_below(bound: int, rng=None) -> int:
    """Random magnitude in [0, bound). Fails when the bound is zero."""
    return _gen_biguint_below(as_source(rng), bound)


def sample_range_unsigned(lbound: int, ubound: int, rng=None) -> int:
    """Random magnitude in [lbound, ubound)"""
    if not lbound < ubound:
        raise InvalidRangeError(f"Empty range [{lbound}, {ubound})", lbound, ubound)
    if lbound < 0:
        raise NegativeMagnitudeError(f"Lower bound {lbound} is negative")
    rng = as_source(rng)
    if lbound == 0:
        return _gen_biguint_below(rng, ubound)
    return lbound + _gen_biguint_below(rng, ubound - lbound)


def sample_range_signed(lbound: int, ubound: int, rng=None) -> int:
    """Random integer in [lbound, ubound)"""
    if not lbound < ubound:
        raise InvalidRangeError(f"Empty range [{lbound}, {ubound})", lbound, ubound)
    rng = as_source(rng)
    if lbound == 0:
        return _gen_biguint_below(rng, magnitude(ubound))
    elif ubound == 0:
        return lbound + _gen_biguint_below(rng, magnitude(lbound))
    delta = ubound - lbound
    return lbound + _gen_biguint_below(rng, magnitude(delta))
