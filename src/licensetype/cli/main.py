# main.py
# SPDX-License-Identifier: MIT

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

from ..core.config import LicenseTypeConfig, load_config_from_path
from ..core.licenses import License, new_license_from_file
from ..core.log import configure_logging
from ..core.registry import KNOWN_LICENSES
from ..core.rules import classify_text
from ..core.scan import new_license_from_directory, new_licenses_from_directory


def _build_parser() -> argparse.ArgumentParser:
    """Build the licensetype argument parser with one subcommand per lookup."""
    parser = argparse.ArgumentParser(prog="licensetype", description="Identify software licenses from their text.")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g., DEBUG, INFO, WARNING). Overrides the config file.",
    )
    parser.add_argument("-c", "--config", help="Path to config file (TOML or JSON).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    file_p = subparsers.add_parser("file", help="Classify a single license file.")
    file_p.add_argument("path", help="License file to read.")

    dir_p = subparsers.add_parser("dir", help="Find and classify license files in a directory.")
    dir_p.add_argument("path", help="Directory to scan (non-recursive).")
    dir_p.add_argument("--all", action="store_true", help="Print every classified license, not just the first.")
    dir_p.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail when more than one license file is classified.",
    )

    text_p = subparsers.add_parser("text", help="Classify license text from a file or stdin.")
    text_p.add_argument("path", nargs="?", default="-", help="Text file to read, or '-' for stdin.")

    subparsers.add_parser("known", help="List the recognized license identifiers.")

    return parser


def _load_config(path: Optional[str]) -> LicenseTypeConfig:
    if not path:
        return LicenseTypeConfig()
    return load_config_from_path(path)


def _print_license(lic: License) -> None:
    print(json.dumps(lic.to_dict(), indent=2))


def _dispatch(args: argparse.Namespace) -> int:
    """Run the selected subcommand and return its exit code."""
    cfg = _load_config(args.config)
    if args.log_level:
        cfg.logging.level = args.log_level
    cfg.logging.apply()
    cmd = args.command

    if cmd == "file":
        _print_license(new_license_from_file(args.path, cfg.scan))
        return 0

    if cmd == "dir":
        if args.all:
            licenses = new_licenses_from_directory(args.path, cfg.scan)
            print(json.dumps([lic.to_dict() for lic in licenses], indent=2))
        else:
            _print_license(new_license_from_directory(args.path, cfg.scan, strict=args.strict))
        return 0

    if cmd == "text":
        if args.path == "-":
            text = sys.stdin.read()
        else:
            with open(args.path, "rb") as fh:
                text = cfg.scan.decode(fh.read())
        print(classify_text(text))
        return 0

    if cmd == "known":
        for license_id in KNOWN_LICENSES:
            print(license_id)
        return 0

    print(f"Unknown command: {cmd}", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the licensetype command-line interface.

    Args:
        argv (Sequence[str] | None): Argument strings to parse instead of
            ``sys.argv[1:]``. Primarily useful for tests.

    Returns:
        int: Process exit code; 0 on success, 1 on any error.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    try:
        return _dispatch(args)
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
