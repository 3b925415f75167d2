"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from skillpack.config import load_config
from skillpack.exceptions import ConfigError, PackagingError, SkillValidationError
from skillpack.model import ValidationResult
from skillpack.packaging import package_skill
from skillpack.validation import validate_skill


def handle_validate(args: argparse.Namespace) -> int:
    """Validate one skill folder and print the verdict."""
    result = validate_skill(args.skill_path)
    print(result.message)
    return 0 if result.ok else 1


def handle_package(args: argparse.Namespace) -> int:
    """Validate and zip one skill folder."""
    try:
        config = load_config(config_path=args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print(f"Packaging skill: {args.skill_path}")
    if args.output_dir is not None:
        print(f"   Output directory: {args.output_dir}")
    print()

    run_validation = config.validate and not args.no_validate
    if run_validation:
        print("Validating skill...")

    try:
        destination = package_skill(
            args.skill_path,
            args.output_dir,
            validator=_announce_validation if run_validation else None,
            config=config,
            on_entry=None if args.quiet else _print_entry,
        )
    except SkillValidationError as exc:
        print(f"Validation failed: {exc.result.message}", file=sys.stderr)
        print("   Please fix the validation errors before packaging.", file=sys.stderr)
        return 1
    except PackagingError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"\nSuccessfully packaged skill to: {destination}")
    return 0


def _announce_validation(skill_path: Path) -> ValidationResult:
    result = validate_skill(skill_path)
    if result.ok:
        print(f"{result.message}\n")
    return result


def _print_entry(entry_name: str) -> None:
    print(f"  Added: {entry_name}")
