"""
BN254 base field helpers built on py_ecc's optimized field element
"""

from py_ecc.optimized_bn128 import FQ

from .constant import BN254_MODULUS
from .utils import parse_uint


def reduce(a: int) -> int:
    """Reduce `a` into the [0, P) range"""
    return int(FQ(a))


def negate(a: int) -> int:
    """
    Return the additive inverse of `a` in Fp, that is the value
    `x` in [0, P) such that `a + x = 0 mod P`.
    `a` does not need to be reduced beforehand.
    """
    return int(-FQ(a))


def to_field_element(value) -> int:
    """Parse `value` as an unsigned integer and reduce it modulo P"""
    return parse_uint(value) % BN254_MODULUS
