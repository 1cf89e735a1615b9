from dataclasses import dataclass
from typing import List, Tuple

from ..utils import parse_uint

G1Point = Tuple[int, int]
G2Point = Tuple[Tuple[int, int], Tuple[int, int]]


def g1_to_json(p: G1Point) -> list:
    return [str(c) for c in p]


def g2_to_json(p: G2Point) -> list:
    return [[str(c) for c in coord] for coord in p]


def g1_from_json(p) -> G1Point:
    x, y = p
    return (parse_uint(x), parse_uint(y))


def g2_from_json(p) -> G2Point:
    (x0, x1), (y0, y1) = p
    return (
        (parse_uint(x0), parse_uint(x1)),
        (parse_uint(y0), parse_uint(y1)),
    )


def _g1(p) -> G1Point:
    x, y = p
    return (x, y)


def _g2(p) -> G2Point:
    x, y = p
    return (tuple(x), tuple(y))


class _ReadOnly:
    """Attributes are only assigned once, from `__init__`"""

    def _init_attrs(self, **attrs):
        for name, value in attrs.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is read-only")


class Proof(_ReadOnly):
    """
    Groth16 proof in UPA layout. `pi_b` coordinates are `(c0, c1)`.
    `m` and `pok` are reserved for commitment extensions and stay empty.
    """

    def __init__(self, pi_a: G1Point, pi_b: G2Point, pi_c: G1Point, m=(), pok=()):
        self._init_attrs(
            pi_a=_g1(pi_a),
            pi_b=_g2(pi_b),
            pi_c=_g1(pi_c),
            m=tuple(_g1(p) for p in m),
            pok=tuple(_g1(p) for p in pok),
        )

    def __str__(self):
        return f"A = {self.pi_a}\nB = {self.pi_b}\nC = {self.pi_c}"

    def __repr__(self):
        return self.__str__()

    def __eq__(self, other):
        if not isinstance(other, Proof):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @classmethod
    def from_bytes(cls, s: bytes):
        """Parse Proof from raw SP1 proof bytes (selector included)"""
        from .sp1 import decode_proof, proof_from_fields

        return proof_from_fields(decode_proof(s.hex()))

    @classmethod
    def from_hex(cls, s: str):
        """Parse Proof from raw SP1 proof hex, with or without `0x` prefix"""
        from .sp1 import decode_proof, proof_from_fields

        return proof_from_fields(decode_proof(s))

    def to_dict(self) -> dict:
        """Return JSON-compatible representation of the Proof"""
        return {
            "pi_a": g1_to_json(self.pi_a),
            "pi_b": g2_to_json(self.pi_b),
            "pi_c": g1_to_json(self.pi_c),
            "m": [g1_to_json(p) for p in self.m],
            "pok": [g1_to_json(p) for p in self.pok],
        }

    @classmethod
    def from_dict(cls, d: dict):
        """Construct Proof from its JSON representation"""
        return Proof(
            g1_from_json(d["pi_a"]),
            g2_from_json(d["pi_b"]),
            g1_from_json(d["pi_c"]),
            [g1_from_json(p) for p in d.get("m", [])],
            [g1_from_json(p) for p in d.get("pok", [])],
        )


class VerifyingKey(_ReadOnly):
    def __init__(
        self,
        alpha: G1Point,  # vk_alpha_1
        beta: G2Point,  # vk_beta_2
        gamma: G2Point,  # vk_gamma_2
        delta: G2Point,  # vk_delta_2
        s,  # ic
        h1=(),
        h2=(),
    ):
        self._init_attrs(
            alpha=_g1(alpha),
            beta=_g2(beta),
            gamma=_g2(gamma),
            delta=_g2(delta),
            s=tuple(_g1(p) for p in s),
            h1=tuple(_g2(p) for p in h1),
            h2=tuple(_g2(p) for p in h2),
        )

    def __str__(self):
        return (
            f"alpha = {self.alpha}\nbeta = {self.beta}\n"
            f"gamma = {self.gamma}\ndelta = {self.delta}\ns = {self.s}"
        )

    def __repr__(self):
        return self.__str__()

    def __eq__(self, other):
        if not isinstance(other, VerifyingKey):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @property
    def num_public_inputs(self) -> int:
        return len(self.s) - 1

    def to_dict(self) -> dict:
        """Return JSON-compatible representation of the VerifyingKey"""
        return {
            "alpha": g1_to_json(self.alpha),
            "beta": g2_to_json(self.beta),
            "gamma": g2_to_json(self.gamma),
            "delta": g2_to_json(self.delta),
            "s": [g1_to_json(p) for p in self.s],
            "h1": [g2_to_json(p) for p in self.h1],
            "h2": [g2_to_json(p) for p in self.h2],
        }

    @classmethod
    def from_dict(cls, d: dict):
        """Construct VerifyingKey from its JSON representation"""
        return VerifyingKey(
            g1_from_json(d["alpha"]),
            g2_from_json(d["beta"]),
            g2_from_json(d["gamma"]),
            g2_from_json(d["delta"]),
            [g1_from_json(p) for p in d["s"]],
            [g2_from_json(p) for p in d.get("h1", [])],
            [g2_from_json(p) for p in d.get("h2", [])],
        )


@dataclass(frozen=True)
class ProofBundle:
    """Proof, verifying key and public inputs submitted together to UPA"""

    proof: Proof
    vk: VerifyingKey
    inputs: Tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, "inputs", tuple(self.inputs))
        if len(self.vk.s) != len(self.inputs) + 1:
            raise ValueError(
                f"Verifying key expects {self.vk.num_public_inputs} public inputs, "
                f"got {len(self.inputs)}"
            )

    def to_dict(self) -> dict:
        return {
            "proof": self.proof.to_dict(),
            "vk": self.vk.to_dict(),
            "inputs": [str(x) for x in self.inputs],
        }

    @classmethod
    def from_dict(cls, d: dict):
        inputs: List[int] = [parse_uint(x) for x in d["inputs"]]
        return ProofBundle(
            Proof.from_dict(d["proof"]), VerifyingKey.from_dict(d["vk"]), inputs
        )
