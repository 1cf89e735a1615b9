"""
Convert SP1 Groth16 proofs into UPA Groth16 proofs and verifying keys
"""

from .errors import (
    ConversionError,
    FixtureReadError,
    InvalidFieldElementError,
    MalformedProofError,
    SerializationError,
)
from .field import negate
from .groth16 import Proof, ProofBundle, VerifyingKey

__version__ = "0.1.0"
