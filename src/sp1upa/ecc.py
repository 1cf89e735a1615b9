from enum import Enum

from py_ecc import optimized_bn128

from .constant import BN254_MODULUS


class CurveType(Enum):
    BN128 = optimized_bn128
    BN254 = optimized_bn128
    ALT_BN128 = optimized_bn128


class CurveField(Enum):
    BN128 = BN254_MODULUS
    BN254 = BN254_MODULUS
    ALT_BN128 = BN254_MODULUS


def ispointG1(p):
    return (
        isinstance(p, (tuple, list))
        and len(p) == 2
        and all(isinstance(c, int) for c in p)
    )


def ispointG2(p):
    return (
        isinstance(p, (tuple, list))
        and len(p) == 2
        and all(
            isinstance(c, (tuple, list))
            and len(c) == 2
            and all(isinstance(v, int) for v in c)
            for c in p
        )
    )


class EllipticCurve:
    """
    Thin wrapper over py_ecc used to inspect affine points as they
    appear in the UPA verifying key and proof. G2 coordinates are
    expected as `(c0, c1)` pairs.
    """

    def __init__(self, curve: str = "BN254"):
        self.name = curve
        self.curve = CurveType[curve].value
        self.field_modulus = CurveField[curve].value

    def G1(self):
        """
        Return generator G1 of the curve in affine form
        """
        x, y = self.curve.normalize(self.curve.G1)
        return (int(x), int(y))

    def G2(self):
        """
        Return generator G2 of the curve in affine form
        """
        x, y = self.curve.normalize(self.curve.G2)
        return (tuple(int(c) for c in x.coeffs), tuple(int(c) for c in y.coeffs))

    def to_point(self, p):
        """
        Lift an affine G1 or G2 point into py_ecc's projective representation
        """
        if ispointG1(p):
            x, y = p
            fq = self.curve.FQ
            return (fq(x), fq(y), fq.one())
        if ispointG2(p):
            x, y = p
            fq2 = self.curve.FQ2
            return (fq2(list(x)), fq2(list(y)), fq2.one())

        raise TypeError(f"Unknown point type: {p!r}")

    def is_on_curve(self, p) -> bool:
        """
        Check whether affine point `p` satisfies the curve (or twist) equation
        """
        point = self.to_point(p)
        b = self.curve.b2 if ispointG2(p) else self.curve.b
        return self.curve.is_on_curve(point, b)
