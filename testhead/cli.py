#!/usr/bin/env python3
"""
Testhead CLI

Command-line interface for turning pick-and-place exports into testhead
drill tables.

Usage:
    testhead convert <placements.csv> [options]
    testhead check <placements.csv> [options]
    testhead profile [--profile <profile.yaml>]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import TestheadError


def parse_inclusions(value: str) -> List[str]:
    """Split a comma-delimited inclusion list, dropping blanks."""
    return [part.strip() for part in value.split(",") if part.strip()]


def resolve_profile(args):
    """Pick the fixture profile from --profile (YAML path or preset name)."""
    from .fixture.profiles import TESTHEAD_STANDARD, get_profile, load_profile

    profile_arg = getattr(args, 'profile', None)
    if not profile_arg:
        return TESTHEAD_STANDARD

    if Path(profile_arg).suffix in (".yaml", ".yml"):
        return load_profile(profile_arg)
    return get_profile(profile_arg)


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s: %(message)s'
    )


def build_pipeline(args):
    from .pipeline.runner import FixturePipeline

    inclusions: List[str] = []
    for value in getattr(args, 'inclusions', None) or []:
        inclusions.extend(value)

    return FixturePipeline(
        profile=resolve_profile(args),
        named=getattr(args, 'named', False),
        rotation=getattr(args, 'rotation', None),
        inclusions=inclusions,
        deduplicate=getattr(args, 'dedupe_inclusions', False),
        allow_empty=getattr(args, 'allow_empty', False),
    )


def run_pipeline(args):
    """Load placements and run the pipeline for convert/check."""
    from .placement.reader import read_placements

    print(f"Selected file: {args.input}")
    records = read_placements(args.input)
    print(f"  Placement records: {len(records)}")

    pipeline = build_pipeline(args)
    if pipeline.rotation is not None:
        print(f"  Rotation: {pipeline.rotation.value} degrees")
    return pipeline, pipeline.run(records)


def cmd_convert(args):
    """Generate a drill table."""
    from .pipeline.output import write_rows

    pipeline, result = run_pipeline(args)
    print(result.summary())

    if result.violations:
        print("\n" + pipeline.sizer.get_summary())

    output_path = Path(args.output or "output.csv")
    if args.dry_run:
        print("\nDry run - not writing drill table")
        return 0

    write_rows(result.rows, output_path, named=result.named)
    print(f"\nSaved to: {output_path}")
    return 0


def cmd_check(args):
    """Check probe spacing without writing anything."""
    pipeline, result = run_pipeline(args)
    print(result.summary())
    print("\n" + pipeline.sizer.get_summary())
    return 1 if result.violations else 0


def cmd_profile(args):
    """Print the effective fixture profile."""
    from .fixture.profiles import dump_profile, list_profiles

    profile = resolve_profile(args)
    print(f"# Available presets: {', '.join(list_profiles())}")
    print(dump_profile(profile), end="")
    return 0


def add_pipeline_arguments(parser: argparse.ArgumentParser):
    parser.add_argument('input', help='Pick-and-place CSV export')
    parser.add_argument('-n', '--named', action='store_true',
                        help='Include designators in the drill table')
    parser.add_argument('-r', '--rotation', type=int, choices=[90, 180, 270],
                        help='Rotate the board (270 flips vertically)')
    parser.add_argument('-c', '--inclusions', type=parse_inclusions, action='append',
                        help='Comma-separated designator substrings to force in')
    parser.add_argument('--dedupe-inclusions', action='store_true',
                        help='Include a record once even if it matches several inclusions')
    parser.add_argument('--allow-empty', action='store_true',
                        help='Emit fixture points only when no test points qualify')
    parser.add_argument('--profile', help='Fixture profile name or YAML file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    from . import __version__

    parser = argparse.ArgumentParser(
        description="Testhead - pick-and-place to test fixture converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  testhead convert board-pnp.csv
  testhead convert board-pnp.csv -o fixture.csv --named --rotation 90
  testhead convert board-pnp.csv -c R12,LED      # force R12* and *LED* in
  testhead check board-pnp.csv
  testhead profile --profile my_testhead.yaml
        """,
    )

    parser.add_argument('--version', action='version', version=f'testhead {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Convert command
    convert_parser = subparsers.add_parser('convert', help='Generate a drill table')
    add_pipeline_arguments(convert_parser)
    convert_parser.add_argument('-o', '--output', help='Output file path (default: output.csv)')
    convert_parser.add_argument('--dry-run', action='store_true', help="Don't write the drill table")

    # Check command
    check_parser = subparsers.add_parser('check', help='Report probe spacing violations')
    add_pipeline_arguments(check_parser)

    # Profile command
    profile_parser = subparsers.add_parser('profile', help='Show the effective fixture profile')
    profile_parser.add_argument('--profile', help='Fixture profile name or YAML file')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(getattr(args, 'verbose', False))

    # Dispatch command
    commands = {
        'convert': cmd_convert,
        'check': cmd_check,
        'profile': cmd_profile,
    }

    try:
        return commands[args.command](args)
    except TestheadError as e:
        print(f"Error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
