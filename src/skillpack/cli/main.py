"""CLI entrypoint for Skillpack."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from skillpack import __version__
from skillpack.cli.handlers import handle_package, handle_validate
from skillpack.constants.branding import CLI_DESCRIPTION


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillpack",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    validate = subparsers.add_parser("validate", parents=[common], help="Validate a skill folder's SKILL.md")
    validate.add_argument("skill_path", type=Path, help="Skill folder containing SKILL.md")

    package = subparsers.add_parser("package", parents=[common], help="Package a skill folder into a zip archive")
    package.add_argument("skill_path", type=Path, help="Skill folder containing SKILL.md")
    package.add_argument(
        "output_dir",
        type=Path,
        nargs="?",
        default=None,
        help="Directory for the archive (default: current directory)",
    )
    package.add_argument("-c", "--config", type=Path, help="Explicit config file")
    package.add_argument("-n", "--no-validate", action="store_true", help="Skip validation before packaging")
    package.add_argument("-q", "--quiet", action="store_true", help="Do not list archived entries")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    if args.command == "validate":
        return handle_validate(args)
    if args.command == "package":
        return handle_package(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
