import json

from sp1upa.cli import main
from sp1upa.config import ConversionConfig


def test_cli_convert(tmp_path, fixture_file):
    out_dir = tmp_path / "out"

    assert main([str(fixture_file), "-o", str(out_dir), "-q"]) == 0

    vk = json.loads((out_dir / "upaVk.json").read_text(encoding="utf-8"))
    bundle = json.loads((out_dir / "upaProofVkInputs.json").read_text(encoding="utf-8"))

    assert bundle["inputs"] == ["3", "5"]
    assert bundle["vk"] == vk
    assert bundle["proof"]["pi_a"] == ["1", "2"]
    assert bundle["proof"]["pi_b"] == [["4", "3"], ["6", "5"]]
    assert bundle["proof"]["pi_c"] == ["7", "8"]


def test_cli_writes_next_to_fixture(fixture_file):
    assert main([str(fixture_file), "--vk-name", "vk.json", "--check-curve"]) == 0

    assert (fixture_file.parent / "vk.json").exists()
    assert (fixture_file.parent / "upaProofVkInputs.json").exists()


def test_cli_default_fixture_from_env(tmp_path, fixture_file, monkeypatch):
    monkeypatch.setenv("SP1UPA_FIXTURES_DIR", str(fixture_file.parent))

    assert main([]) == 0
    assert (fixture_file.parent / "upaVk.json").exists()


def test_cli_malformed_proof(tmp_path, fixture_dict):
    fixture_dict["proof"] = "0x1234"
    path = tmp_path / "fixture.json"
    path.write_text(json.dumps(fixture_dict), encoding="ascii")

    assert main([str(path)]) == 1
    assert not (tmp_path / "upaVk.json").exists()
    assert not (tmp_path / "upaProofVkInputs.json").exists()


def test_cli_missing_fixture(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1


def test_config_from_env(monkeypatch, tmp_path):
    monkeypatch.delenv("SP1UPA_FIXTURES_DIR", raising=False)
    config = ConversionConfig.from_env()
    assert str(config.fixture_path) == "fixtures/sp1FibonacciProofFixture.json"
    assert config.vk_path.name == "upaVk.json"

    monkeypatch.setenv("SP1UPA_FIXTURES_DIR", str(tmp_path))
    config = ConversionConfig.from_env(indent=4)
    assert config.output_dir == tmp_path
    assert config.bundle_path == tmp_path / "upaProofVkInputs.json"
    assert config.indent == 4


def test_cli_oversized_public_input(tmp_path, fixture_dict):
    fixture_dict["vkey"] = "1" * 5000
    path = tmp_path / "fixture.json"
    path.write_text(json.dumps(fixture_dict), encoding="ascii")

    assert main([str(path), "-q"]) == 1
    assert not (tmp_path / "upaVk.json").exists()
