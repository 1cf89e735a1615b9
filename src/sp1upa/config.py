import os
from dataclasses import dataclass
from pathlib import Path

FIXTURES_DIR_ENV = "SP1UPA_FIXTURES_DIR"
DEFAULT_FIXTURES_DIR = "fixtures"
DEFAULT_FIXTURE_NAME = "sp1FibonacciProofFixture.json"
DEFAULT_VK_NAME = "upaVk.json"
DEFAULT_BUNDLE_NAME = "upaProofVkInputs.json"


def get_fixtures_dir() -> Path:
    """Get fixtures directory, overridable through SP1UPA_FIXTURES_DIR"""
    check_env = os.environ.get(FIXTURES_DIR_ENV)
    if check_env:
        return Path(check_env)
    else:
        return Path(DEFAULT_FIXTURES_DIR)


@dataclass
class ConversionConfig:
    fixture_path: Path
    output_dir: Path
    vk_filename: str = DEFAULT_VK_NAME
    bundle_filename: str = DEFAULT_BUNDLE_NAME
    indent: int = 2
    check_curve: bool = False

    @classmethod
    def from_env(cls, **overrides):
        fixtures_dir = get_fixtures_dir()
        config = cls(
            fixture_path=fixtures_dir / DEFAULT_FIXTURE_NAME,
            output_dir=fixtures_dir,
        )
        for k, v in overrides.items():
            if v is None:
                continue
            if not hasattr(config, k):
                raise TypeError(f"Unknown config option: {k}")
            setattr(config, k, v)
        return config

    @property
    def vk_path(self) -> Path:
        return Path(self.output_dir) / self.vk_filename

    @property
    def bundle_path(self) -> Path:
        return Path(self.output_dir) / self.bundle_filename
