import logging

from cryptonum.monty import modpow
from cryptonum.number_theory_stuff import random_prime, random_coprime, mulinv
from cryptonum.source import as_source

logger = logging.getLogger(__name__)


def generate_keypair(bits, rng=None):
    if bits < 5:
        raise ValueError(f"A {bits}-bit modulus is too small")
    rng = as_source(rng)
    p = random_prime(bits // 2, rng)
    q = random_prime(bits - bits // 2, rng)
    while q == p:
        q = random_prime(bits - bits // 2, rng)

    n = p * q
    phi = (p - 1) * (q - 1)

    e = random_coprime(phi, rng)  # alternative e = 65537

    d = mulinv(e, phi)
    logger.debug('Generated a %d-bit RSA modulus', n.bit_length())

    private = (d, n)
    public = (e, n)
    return private, public


def _apply(m, key):
    exponent, n = key
    if not 0 <= m < n:
        raise ValueError('Message must be a non-negative integer smaller than the modulus')
    return modpow(m, exponent, n)


def encrypt(m, key):
    return _apply(m, key)


def decrypt(c, key):
    return _apply(c, key)


def sign(m, private):
    return _apply(m, private)


def verify(m, signature, public):
    return _apply(signature, public) == m
