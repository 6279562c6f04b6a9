from enum import Enum, unique

from cryptonum.error import NegativeMagnitudeError

__all__ = ['Sign', 'from_biguint', 'magnitude']


@unique
class Sign(Enum):
    MINUS = -1
    NOSIGN = 0
    PLUS = 1


def from_biguint(sign: Sign, mag: int) -> int:
    """Attach a sign to a magnitude. A zero magnitude is always NOSIGN."""
    if mag < 0:
        raise NegativeMagnitudeError(f"{mag} is not a magnitude")
    if sign is Sign.NOSIGN:
        if mag:
            raise ValueError('NOSIGN requires a zero magnitude')
        return 0
    return sign.value * mag


def magnitude(x: int) -> int:
    return abs(x)
