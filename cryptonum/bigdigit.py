"""Digit width configuration and little-endian digit vectors"""

import os
import struct
from enum import Enum, unique
from typing import List

from cryptonum.error import NegativeMagnitudeError


@unique
class DIGIT(Enum):
    U32 = 32
    U64 = 64


def current_digit():
    return DIGIT(int(os.environ.get('CRYPTONUM_DIGIT_BITS', '64')))


BITS = current_digit().value
MASK = (1 << BITS) - 1

# random bits are always drawn in 32-bit words so sampled values do not depend on BITS
WORD_BITS = 32

_FORMAT = {32: 'I', 64: 'Q'}


def to_digits(n: int, bits=BITS) -> List[int]:
    """Split a magnitude into little-endian digits. Zero is the empty vector."""
    if n < 0:
        raise NegativeMagnitudeError(f"{n} is not a magnitude")
    size = bits // 8
    count = (n.bit_length() + bits - 1) // bits
    return list(struct.unpack(f'<{count}{_FORMAT[bits]}', n.to_bytes(count * size, 'little')))


def normalize(data: List[int]) -> List[int]:
    while data and data[-1] == 0:
        data.pop()
    return data


def from_digits(data, bits=BITS) -> int:
    data = normalize(list(data))
    return int.from_bytes(struct.pack(f'<{len(data)}{_FORMAT[bits]}', *data), 'little')


def repack(words: List[int], src_bits: int, dst_bits: int) -> List[int]:
    """Reinterpret a little-endian word vector at another word width, zero padding the top"""
    per = dst_bits // src_bits
    if per > 1 and len(words) % per:
        words = words + [0] * (per - len(words) % per)
    bts = struct.pack(f'<{len(words)}{_FORMAT[src_bits]}', *words)
    return list(struct.unpack(f'<{len(bts) * 8 // dst_bits}{_FORMAT[dst_bits]}', bts))


def mac_digit(acc: List[int], b: List[int], c: int, offset=0, bits=BITS):
    """acc[offset:] += b * c, carrying through the rest of acc"""
    if c == 0:
        return
    mask = (1 << bits) - 1
    carry = 0
    i = offset
    for digit in b:
        carry += acc[i] + digit * c
        acc[i] = carry & mask
        carry >>= bits
        i += 1
    while carry:
        if i == len(acc):
            raise OverflowError('carry overflow during multiplication')
        carry += acc[i]
        acc[i] = carry & mask
        carry >>= bits
        i += 1
