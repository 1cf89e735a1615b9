"""
Groth16 structures in UPA layout and conversion from SP1 proofs
"""

from .serialization import G1Point, G2Point, Proof, ProofBundle, VerifyingKey
from .sp1 import (
    RawProofFields,
    build_proof_bundle,
    build_public_inputs,
    build_verifying_key,
    decode_proof,
    proof_from_fields,
    unnegate_g2,
)
