import json

import pytest

SELECTOR = "aabbccdd"


def sample_proof_hex(values=range(1, 9), selector=SELECTOR):
    return selector + "".join(hex(v)[2:].zfill(64) for v in values)


@pytest.fixture
def proof_hex():
    return sample_proof_hex()


@pytest.fixture
def fixture_dict(proof_hex):
    return {
        "a": 0,
        "b": 1,
        "n": 20,
        "vkey": "3",
        "publicValues": "0x00",
        "publicValuesDigest": "5",
        "proof": "0x" + proof_hex,
    }


@pytest.fixture
def fixture_file(tmp_path, fixture_dict):
    path = tmp_path / "sp1FibonacciProofFixture.json"
    path.write_text(json.dumps(fixture_dict), encoding="ascii")
    return path
