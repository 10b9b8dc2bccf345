#!/usr/bin/env python3
"""
GitHub Update Check CLI Entry Point

Handles:
- Checking a version against the latest release
- Printing the latest released version
"""

import argparse
import sys
from dataclasses import replace

from github_update_check import __package_name__, __version__
from github_update_check.checker import GithubUpdateCheck
from github_update_check.config import load_config
from github_update_check.errors import InvalidVersionError, UpdateCheckError
from github_update_check.utils import Logger
from github_update_check.versioning import CompareType
from github_update_check.versioning.models import parse_depth

EXIT_UP_TO_DATE = 0
EXIT_UPDATE_AVAILABLE = 1
EXIT_ERROR = 2


def _depth(value: str) -> int:
    try:
        return parse_depth(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid depth {value!r} (use major, minor, build, revision or a positive number)"
        )


def _timeout(value: str) -> float:
    try:
        timeout = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout {value!r}")
    if timeout <= 0:
        raise argparse.ArgumentTypeError(f"timeout must be positive, got {value}")
    return timeout


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=__package_name__,
        description="Check a GitHub repository for a newer release",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  github-update-check Mayerch1 GithubUpdateCheck              Print the latest release
  github-update-check Mayerch1 GithubUpdateCheck 1.2.0        Check for a newer minor release
  github-update-check Mayerch1 GithubUpdateCheck 1.2.0 --depth build
  github-update-check Mayerch1 GithubUpdateCheck v.1.2.0 --boolean

Exit codes:
  0  up to date (or latest version printed)
  1  update available
  2  invalid version, no release, or lookup failed
"""
    )
    parser.add_argument("owner", help="Repository owner")
    parser.add_argument("repository", help="Repository name")
    parser.add_argument(
        "current_version",
        nargs="?",
        help="Local version to compare (omit to print the latest release)"
    )
    parser.add_argument(
        "--depth", "-d",
        type=_depth,
        default=2,
        help="Compare depth: major, minor, build, revision or a number (default: minor)"
    )
    parser.add_argument(
        "--boolean", "-b",
        action="store_true",
        help="Treat any difference to the released tag as an update"
    )
    parser.add_argument(
        "--timeout", "-t",
        type=_timeout,
        help="Request timeout in seconds"
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"{__package_name__} v{__version__}"
    )
    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    config = load_config()
    Logger("github-update-check", level=config.log_level)
    if args.timeout is not None:
        config = replace(config, timeout=args.timeout)

    compare_type = CompareType.BOOLEAN if args.boolean else CompareType.INCREMENTAL
    checker = GithubUpdateCheck(args.owner, args.repository, compare_type, config=config)

    if args.current_version is None:
        try:
            print(checker.version())
        except UpdateCheckError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_ERROR
        return EXIT_UP_TO_DATE

    try:
        available = checker.is_update_available(args.current_version, args.depth)
    except InvalidVersionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if available:
        print(f"Update available for {args.owner}/{args.repository} (local {args.current_version})")
        return EXIT_UPDATE_AVAILABLE

    print(f"{args.owner}/{args.repository} is up to date (local {args.current_version})")
    return EXIT_UP_TO_DATE


if __name__ == "__main__":
    sys.exit(main())
