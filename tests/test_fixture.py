import json

import pytest

from sp1upa.errors import FixtureReadError, SerializationError
from sp1upa.fixture import (
    load_fixture,
    read_proof_bundle,
    read_verifying_key,
    write_outputs,
)
from sp1upa.convert import convert_fixture


def test_load_fixture(fixture_file, proof_hex):
    fixture = load_fixture(fixture_file)

    assert fixture.vkey == "3"
    assert fixture.public_values_digest == "5"
    assert fixture.proof == "0x" + proof_hex


def test_load_fixture_missing_file(tmp_path):
    with pytest.raises(FixtureReadError):
        load_fixture(tmp_path / "missing.json")


def test_load_fixture_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="ascii")

    with pytest.raises(FixtureReadError):
        load_fixture(path)


def test_load_fixture_missing_field(tmp_path, fixture_dict):
    for field in ("vkey", "publicValuesDigest", "proof"):
        d = dict(fixture_dict)
        del d[field]
        path = tmp_path / f"no_{field}.json"
        path.write_text(json.dumps(d), encoding="ascii")

        with pytest.raises(FixtureReadError):
            load_fixture(path)

    path = tmp_path / "list.json"
    path.write_text("[]", encoding="ascii")
    with pytest.raises(FixtureReadError):
        load_fixture(path)


def test_write_outputs(tmp_path, fixture_file):
    vk, bundle = convert_fixture(load_fixture(fixture_file))
    out_dir = tmp_path / "out"

    vk_path, bundle_path = write_outputs(vk, bundle, out_dir)

    assert vk_path == out_dir / "upaVk.json"
    assert bundle_path == out_dir / "upaProofVkInputs.json"

    text = bundle_path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "proof": {')

    data = json.loads(text)
    assert data["inputs"] == ["3", "5"]
    assert json.loads(vk_path.read_text(encoding="utf-8")) == vk.to_dict()

    assert read_verifying_key(vk_path) == vk
    parsed = read_proof_bundle(bundle_path)
    assert parsed.inputs == (3, 5)
    assert parsed.proof == bundle.proof
    assert parsed.vk == vk

    # no temp files left behind
    assert sorted(p.name for p in out_dir.iterdir()) == [
        "upaProofVkInputs.json",
        "upaVk.json",
    ]


def test_write_outputs_failure(tmp_path, fixture_file):
    vk, bundle = convert_fixture(load_fixture(fixture_file))
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(SerializationError):
        write_outputs(vk, bundle, blocker / "out")


def test_write_outputs_second_file_failure(tmp_path, fixture_file):
    vk, bundle = convert_fixture(load_fixture(fixture_file))
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    (out_dir / "blocker").write_text("", encoding="utf-8")

    with pytest.raises(SerializationError):
        write_outputs(vk, bundle, out_dir, bundle_name="blocker/bundle.json")

    # the verifying key must not be written on its own
    assert sorted(p.name for p in out_dir.iterdir()) == ["blocker"]


def test_write_outputs_keeps_previous_pair(tmp_path, fixture_file):
    vk, bundle = convert_fixture(load_fixture(fixture_file))
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    (out_dir / "upaVk.json").write_text("{}\n", encoding="utf-8")

    (out_dir / "blocker").write_text("", encoding="utf-8")
    with pytest.raises(SerializationError):
        write_outputs(vk, bundle, out_dir, bundle_name="blocker/b.json")

    assert (out_dir / "upaVk.json").read_text(encoding="utf-8") == "{}\n"
    assert not [p for p in out_dir.iterdir() if p.name.endswith(".tmp")]


def test_read_proof_bundle_invalid(tmp_path):
    path = tmp_path / "bundle.json"
    path.write_text('{"proof": {}}', encoding="utf-8")

    with pytest.raises(FixtureReadError):
        read_proof_bundle(path)


def test_read_verifying_key_malformed_number(tmp_path, fixture_file):
    vk, _ = convert_fixture(load_fixture(fixture_file))
    d = vk.to_dict()
    d["alpha"][0] = "not a number"
    path = tmp_path / "vk.json"
    path.write_text(json.dumps(d), encoding="utf-8")

    with pytest.raises(FixtureReadError):
        read_verifying_key(path)


def test_read_proof_bundle_malformed_input(tmp_path, fixture_file):
    _, bundle = convert_fixture(load_fixture(fixture_file))
    d = bundle.to_dict()
    d["inputs"][1] = "-5"
    path = tmp_path / "bundle.json"
    path.write_text(json.dumps(d), encoding="utf-8")

    with pytest.raises(FixtureReadError):
        read_proof_bundle(path)
