import json
import logging
import os
import tempfile
from pathlib import Path

from .errors import FixtureReadError, InvalidFieldElementError, SerializationError
from .groth16 import ProofBundle, VerifyingKey

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("vkey", "publicValuesDigest", "proof")


class SP1ProofFixture:
    """
    Proof fixture exported by an SP1 script, e.g. `sp1FibonacciProofFixture.json`
    """

    def __init__(self, vkey, public_values_digest, proof):
        self.vkey = vkey
        self.public_values_digest = public_values_digest
        self.proof = proof

    def __repr__(self):
        return (
            f"SP1ProofFixture(vkey={self.vkey!r}, "
            f"publicValuesDigest={self.public_values_digest!r})"
        )

    @classmethod
    def from_dict(cls, d: dict):
        if not isinstance(d, dict):
            raise FixtureReadError(
                f"Fixture must be a JSON object, got {type(d).__name__}"
            )

        missing = [k for k in REQUIRED_FIELDS if k not in d]
        if missing:
            raise FixtureReadError(f"Fixture is missing field(s): {', '.join(missing)}")

        for k in REQUIRED_FIELDS:
            if not isinstance(d[k], str):
                raise FixtureReadError(f"Fixture field {k!r} must be a string")

        return cls(d["vkey"], d["publicValuesDigest"], d["proof"])


def load_fixture(path) -> SP1ProofFixture:
    """Read and validate an SP1 proof fixture"""
    path = Path(path)
    try:
        with path.open("r", encoding="ascii") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise FixtureReadError(f"Fixture not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise FixtureReadError(f"Failed to read fixture {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise FixtureReadError(f"Invalid JSON in fixture {path}: {exc}") from exc

    logger.debug("Loaded fixture from %s", path)
    return SP1ProofFixture.from_dict(data)


def dumps(obj: dict, indent: int = 2) -> str:
    try:
        return json.dumps(obj, indent=indent) + "\n"
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Failed to serialize: {exc}") from exc


def write_json_files(documents, indent: int = 2):
    """
    Write each `(path, obj)` of `documents` as JSON. Every document is
    rendered and staged into a temp file next to its target before any
    target is replaced, so a failure leaves none of them written.
    """
    staged = [(Path(path), dumps(obj, indent)) for path, obj in documents]

    tmp_names = []
    try:
        for path, payload in staged:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
            )
            tmp_names.append(tmp_name)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)

        for (path, payload), tmp_name in zip(staged, tmp_names):
            os.replace(tmp_name, path)
            logger.debug("Wrote %d bytes to %s", len(payload), path)
    except OSError as exc:
        for tmp_name in tmp_names:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
        raise SerializationError(f"Failed to write output: {exc}") from exc

    return [path for path, _ in staged]


def write_outputs(
    vk: VerifyingKey,
    bundle: ProofBundle,
    out_dir,
    vk_name: str = "upaVk.json",
    bundle_name: str = "upaProofVkInputs.json",
    indent: int = 2,
):
    """
    Write the UPA verifying key and the proof/vk/inputs bundle.
    Both files are staged before either one is replaced.
    """
    out_dir = Path(out_dir)

    vk_path, bundle_path = write_json_files(
        [
            (out_dir / vk_name, vk.to_dict()),
            (out_dir / bundle_name, bundle.to_dict()),
        ],
        indent,
    )
    return vk_path, bundle_path


def read_verifying_key(path) -> VerifyingKey:
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            return VerifyingKey.from_dict(json.load(f))
    except (
        OSError,
        KeyError,
        TypeError,
        ValueError,
        InvalidFieldElementError,
    ) as exc:
        raise FixtureReadError(f"Failed to read verifying key {path}: {exc}") from exc


def read_proof_bundle(path) -> ProofBundle:
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            return ProofBundle.from_dict(json.load(f))
    except (
        OSError,
        KeyError,
        TypeError,
        ValueError,
        InvalidFieldElementError,
    ) as exc:
        raise FixtureReadError(f"Failed to read proof bundle {path}: {exc}") from exc
