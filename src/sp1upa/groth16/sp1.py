"""
Conversion of SP1 Groth16 proofs into UPA Groth16 structures.

An SP1 Groth16 proof is the hex encoding of

    selector (4 bytes) || A.x || A.y || B.x1 || B.x0 || B.y1 || B.y0 || C.x || C.y

where every field element is 32 bytes big-endian. The selector is the
prefix of the verifier hash used by SP1's gateway contract to route the
proof and it is not part of the UPA proof. Note that the G2 point `B` is
encoded with the `i` component first, while UPA expects `(c0, c1)`.

The verifying key constants of SP1's Groth16Verifier.sol store beta,
gamma and delta negated, whereas UPA expects them as-is. Only the y
coordinate of a negated point differs, so the x coordinates pass through
unchanged.
"""

import logging
from typing import NamedTuple

from ..constant import FIELD_ELEMENT_SIZE, SP1_SELECTOR_SIZE, SP1_V1_2_0
from ..errors import MalformedProofError
from ..field import negate
from ..utils import is_hex, parse_uint, split_list, strip_hex_prefix
from .serialization import G2Point, Proof, ProofBundle, VerifyingKey

logger = logging.getLogger(__name__)

SELECTOR_HEX_LENGTH = SP1_SELECTOR_SIZE * 2
FIELD_ELEMENT_HEX_LENGTH = FIELD_ELEMENT_SIZE * 2
PROOF_HEX_LENGTH = SELECTOR_HEX_LENGTH + 8 * FIELD_ELEMENT_HEX_LENGTH


class RawProofFields(NamedTuple):
    """Proof segments in the order they appear in the SP1 encoding"""

    selector: bytes
    a_x: int
    a_y: int
    b_x1: int
    b_x0: int
    b_y1: int
    b_y0: int
    c_x: int
    c_y: int


def decode_proof(raw_hex: str) -> RawProofFields:
    """
    Slice a raw SP1 proof hex string into its selector and the eight
    field elements of A, B and C. A `0x` prefix is tolerated.
    """
    s = strip_hex_prefix(raw_hex)

    if len(s) != PROOF_HEX_LENGTH:
        raise MalformedProofError(
            f"Length of the proof must equal {PROOF_HEX_LENGTH} hex characters, "
            f"got {len(s)}"
        )
    if not is_hex(s):
        raise MalformedProofError("Proof contains non-hex characters")

    selector = bytes.fromhex(s[:SELECTOR_HEX_LENGTH])
    elements = [
        int(block, 16)
        for block in split_list(s[SELECTOR_HEX_LENGTH:], FIELD_ELEMENT_HEX_LENGTH)
    ]

    logger.debug("Decoded SP1 proof with verifier selector 0x%s", selector.hex())

    return RawProofFields(selector, *elements)


def proof_from_fields(fields: RawProofFields) -> Proof:
    """Arrange decoded segments into a UPA Proof"""
    return Proof(
        (fields.a_x, fields.a_y),
        ((fields.b_x0, fields.b_x1), (fields.b_y0, fields.b_y1)),
        (fields.c_x, fields.c_y),
    )


def unnegate_g2(point: G2Point) -> G2Point:
    """
    Undo the negation SP1's verifier applies to its G2 verifying key
    points. The x coordinate is kept, each y component is negated in Fp.
    """
    x, (y0, y1) = point
    return (tuple(x), (negate(y0), negate(y1)))


def build_verifying_key(constants=SP1_V1_2_0) -> VerifyingKey:
    """Build the UPA VerifyingKey from SP1 verifier constants"""
    logger.debug("Building verifying key from SP1 %s constants", constants.version)

    return VerifyingKey(
        tuple(constants.alpha),
        unnegate_g2(constants.beta_neg),
        unnegate_g2(constants.gamma_neg),
        unnegate_g2(constants.delta_neg),
        [tuple(p) for p in constants.s],
    )


def build_public_inputs(vkey, public_values_digest) -> list:
    """
    UPA public inputs of an SP1 proof: the program vkey followed by
    the public values digest
    """
    return [parse_uint(vkey), parse_uint(public_values_digest)]


def build_proof_bundle(proof: Proof, public_inputs, vk: VerifyingKey) -> ProofBundle:
    return ProofBundle(proof, vk, public_inputs)
