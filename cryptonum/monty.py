"""Modular exponentiation in the Montgomery domain"""

import logging

from cryptonum.bigdigit import BITS, to_digits, from_digits, mac_digit
from cryptonum.error import NonInvertibleError, NegativeMagnitudeError

__all__ = ['modpow']

logger = logging.getLogger(__name__)


def inv_mod(num: int, bits=BITS) -> int:
    """
        Inverse of an odd digit modulo 2**bits, by extended GCD.
        Brent & Zimmermann, Modern Computer Arithmetic, Algorithm 1.20
    """
    if num % 2 == 0:
        raise NonInvertibleError(f"{num} is even and has no inverse mod 2**{bits}")

    a, b = num, 1 << bits
    # v is not needed for a modular inverse, only u
    u, w = 1, 0
    while b != 0:
        q, r = divmod(a, b)
        a, b = b, r
        u, w = w, u - q * w

    assert a == 1
    return u & ((1 << bits) - 1)


class MontyReducer:

    __slots__ = ('_n', '_bits', '_digits', '_n0inv')

    def __init__(self, n: int, bits=BITS):
        self._n = n
        self._bits = bits
        self._digits = tuple(to_digits(n, bits))
        self._n0inv = inv_mod(self._digits[0] if self._digits else 0, bits)
        logger.debug('Montgomery reducer for a %d-digit modulus (%d-bit digits)', len(self._digits), bits)

    @property
    def n(self) -> int:
        return self._n

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def digits(self) -> tuple:
        return self._digits

    @property
    def n0inv(self) -> int:
        """Inverse of the lowest modulus digit mod 2**bits"""
        return self._n0inv

    def __repr__(self):
        return f"MontyReducer({self.n}, bits={self.bits})"


def monty_redc(a: int, mr: MontyReducer) -> int:
    """
        Montgomery reduction: a * β^(-len(n)) mod n, for a < n * β^len(n)
        Brent & Zimmermann, Modern Computer Arithmetic, Algorithm 2.6
    """
    bits = mr.bits
    mask = (1 << bits) - 1
    n = mr.digits
    n_size = len(n)

    c = to_digits(a, bits)
    c.extend([0] * (2 * n_size + 2 - len(c)))

    # -N^(-1) mod β
    mu = -mr.n0inv & mask

    for i in range(n_size):
        q_i = (c[i] * mu) & mask
        # C <- C + q_i * N * β^i
        mac_digit(c, n, q_i, offset=i, bits=bits)

    # dropping the low n_size digits divides by β^n_size
    ret = from_digits(c[n_size:], bits)

    # REDC only guarantees ret < 2n
    if ret < mr.n:
        return ret
    return ret - mr.n


def monty_mult(a: int, b: int, mr: MontyReducer) -> int:
    return monty_redc(a * b, mr)


def monty_sqr(a: int, mr: MontyReducer) -> int:
    return monty_redc(a * a, mr)


def monty_modpow(a: int, exp: int, modulus: int, bits=BITS) -> int:
    mr = MontyReducer(modulus, bits)

    # Montgomery parameter β^len(n)
    r = from_digits([0] * len(mr.digits) + [1], bits)

    apri = a * r % modulus

    ans = r % modulus
    e = exp
    while e != 0:
        if e & 1:
            ans = monty_mult(ans, apri, mr)
        apri = monty_sqr(apri, mr)
        e >>= 1

    return monty_redc(ans, mr)


def modpow(base: int, exponent: int, modulus: int) -> int:
    """base**exponent mod modulus, for an odd modulus"""
    for name, value in (('base', base), ('exponent', exponent), ('modulus', modulus)):
        if value < 0:
            raise NegativeMagnitudeError(f"{name} {value} is negative")
    return monty_modpow(base, exponent, modulus)
