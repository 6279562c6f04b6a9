from math import gcd

from cryptonum.bigrand import sample_magnitude, sample_range_unsigned
from cryptonum.error import NonInvertibleError, NegativeMagnitudeError
from cryptonum.monty import modpow
from cryptonum.source import as_source

__all__ = ['powmod', 'miller_rabin', 'random_prime', 'random_coprime', 'xgcd', 'mulinv']


def powmod(base, exponent, modulus):
    """base**exponent mod modulus for any positive modulus. Odd moduli use Montgomery multiplication."""
    if modulus == 0:
        raise ZeroDivisionError('modulus is zero')
    for name, value in (('base', base), ('exponent', exponent), ('modulus', modulus)):
        if value < 0:
            raise NegativeMagnitudeError(f"{name} {value} is negative")
    if modulus & 1:
        return modpow(base, exponent, modulus)

    # right-to-left square and multiply
    result = 1 % modulus
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def miller_rabin(n, runs=40, rng=None):
    # Implementation uses the Miller-Rabin Primality Test
    # The optimal number of rounds for this test is 40
    # See http://stackoverflow.com/questions/6325576/how-many-iterations-of-rabin-miller-should-i-use-for-cryptographic-safe-primes
    # for justification

    if n in (2, 3):
        return True

    # 0, 1 and even numbers are composite
    if n < 2 or not n & 1:
        return False

    rng = as_source(rng)
    r, s = 0, n - 1
    while s % 2 == 0:
        r += 1
        s //= 2
    for _ in range(runs):
        a = sample_range_unsigned(2, n - 1, rng)
        x = powmod(a, s, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = powmod(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def random_prime(bits, rng=None):
    """A random odd prime of exactly `bits` bits"""
    if bits < 2:
        raise ValueError(f"There are no primes of {bits} bits")
    rng = as_source(rng)
    while True:
        n = sample_magnitude(bits, rng) | (1 << (bits - 1)) | 1
        if miller_rabin(n, rng=rng):
            return n


def random_coprime(n, rng=None):
    assert n > 1
    rng = as_source(rng)
    while True:
        e = sample_range_unsigned(1, n, rng)
        if gcd(n, e) == 1:
            return e


def xgcd(b, n):
    """Takes positive integers a, b as input, and return a triple (g, x, y), such that ax + by = g = gcd(a, b)"""
    x0, x1, y0, y1 = 1, 0, 0, 1
    while n != 0:
        q, b, n = b // n, n, b % n
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return b, x0, y0


def mulinv(b, n):
    """An application of extended GCD algorithm to finding modular inverses"""
    g, x, _ = xgcd(b, n)
    if g != 1:
        raise NonInvertibleError(f"{b} and {n} are not coprime")
    return x % n
