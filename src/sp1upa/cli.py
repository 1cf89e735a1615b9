import argparse
import logging
import sys
from pathlib import Path

from .config import ConversionConfig
from .convert import run
from .errors import ConversionError

logger = logging.getLogger("sp1upa")


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="sp1upa",
        description="Convert an SP1 Groth16 proof fixture into UPA verifying key and proof files.",
    )
    p.add_argument(
        "fixture",
        nargs="?",
        help="Path to the SP1 proof fixture (default: <fixtures>/sp1FibonacciProofFixture.json)",
    )
    p.add_argument(
        "-o",
        "--out-dir",
        help="Output directory (default: the fixtures directory)",
    )
    p.add_argument("--vk-name", help="File name of the UPA verifying key")
    p.add_argument("--bundle-name", help="File name of the proof/vk/inputs bundle")
    p.add_argument(
        "--check-curve",
        action="store_true",
        help="Warn about converted points that are not on BN254",
    )
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    config = ConversionConfig.from_env(
        fixture_path=Path(args.fixture) if args.fixture else None,
        output_dir=Path(args.out_dir) if args.out_dir else None,
        vk_filename=args.vk_name,
        bundle_filename=args.bundle_name,
        check_curve=args.check_curve or None,
    )
    if args.fixture and not args.out_dir:
        config.output_dir = Path(args.fixture).parent

    try:
        vk_path, bundle_path = run(config)
    except ConversionError as exc:
        logger.error("%s", exc)
        return 1

    print(f"Wrote verifying key: {vk_path}")
    print(f"Wrote proof bundle: {bundle_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
