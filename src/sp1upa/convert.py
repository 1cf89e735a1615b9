import logging

from .config import ConversionConfig
from .constant import SP1_V1_2_0
from .ecc import EllipticCurve
from .fixture import SP1ProofFixture, load_fixture, write_outputs
from .groth16 import (
    Proof,
    build_proof_bundle,
    build_public_inputs,
    build_verifying_key,
)

logger = logging.getLogger(__name__)


def convert_fixture(fixture: SP1ProofFixture, constants=SP1_V1_2_0):
    """
    Convert an SP1 proof fixture into a UPA verifying key and
    the proof/vk/inputs bundle
    """
    inputs = build_public_inputs(fixture.vkey, fixture.public_values_digest)
    proof = Proof.from_hex(fixture.proof)
    vk = build_verifying_key(constants)

    return vk, build_proof_bundle(proof, inputs, vk)


def check_curve_points(vk, proof, curve="BN254"):
    """Return names of the points that do not lie on the curve"""
    E = EllipticCurve(curve)

    points = {
        "vk.alpha": vk.alpha,
        "vk.beta": vk.beta,
        "vk.gamma": vk.gamma,
        "vk.delta": vk.delta,
        "proof.pi_a": proof.pi_a,
        "proof.pi_b": proof.pi_b,
        "proof.pi_c": proof.pi_c,
    }
    for i, p in enumerate(vk.s):
        points[f"vk.s[{i}]"] = p

    return [name for name, p in points.items() if not E.is_on_curve(p)]


def run(config: ConversionConfig):
    """Load the fixture, convert it and write both outputs"""
    logger.info("Generating UPA proof files from %s", config.fixture_path)

    fixture = load_fixture(config.fixture_path)
    vk, bundle = convert_fixture(fixture)

    if config.check_curve:
        for name in check_curve_points(vk, bundle.proof):
            logger.warning("%s is not on the BN254 curve", name)

    return write_outputs(
        vk,
        bundle,
        config.output_dir,
        config.vk_filename,
        config.bundle_filename,
        config.indent,
    )
