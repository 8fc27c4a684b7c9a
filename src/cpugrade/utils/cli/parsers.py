# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Argument parser setup for CLI commands.

Contains the main argument parser configuration and all subparsers
for the CLI commands, keeping argument definitions centralized.
"""

import argparse

from cpugrade.utils.config import get_dist_version, get_project_name


def get_cli_name() -> str:
    """Get the CLI command name."""
    return get_project_name().lower()


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--verbose", "-v", action="store_true", help="Display more detailed output")
    parser.add_argument("--debug", "-d", action="store_true", help="Display debug output with full traceback")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the main argument parser with all subcommands.

    Returns:
        argparse.ArgumentParser: Configured parser ready for argument parsing
    """
    cli_name = get_cli_name()

    parser = argparse.ArgumentParser(
        prog=cli_name,
        description="CPU Performance Grading CLI",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=f"{get_dist_version()}")

    parser.add_argument("--verbose", "-v", action="store_true", help="Display more detailed output")

    parser.add_argument("--debug", "-d", action="store_true", help="Display debug output with full traceback")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Grade command
    grade_parser = subparsers.add_parser(
        "grade",
        help="Grade the CPU performance tier (LOW, MID or HIGH)",
        description=f"""
Grade the performance tier of this machine's CPU, or of a CPU described on
the command line. Any value given on the command line overrides the value
detected on this machine.

EXAMPLES:
  {cli_name} grade                                        # Grade this machine's CPU
  {cli_name} grade --name "Intel Core i5-1135G7"          # Grade by name only
  {cli_name} grade --name "AMD Ryzen 7 5800X" --cores 8 --threads 16 --frequency 3800
  {cli_name} grade --config ./grading.yml --json          # Custom thresholds, JSON output
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    spec_group = grade_parser.add_argument_group("CPU SPECIFICATION")
    spec_group.add_argument("--name", "-n", metavar="CPU_NAME", help="CPU name string (e.g., 'Intel Core i7-10700')")
    spec_group.add_argument("--cores", "-c", type=int, metavar="COUNT", help="Physical core count")
    spec_group.add_argument("--threads", "-t", type=int, metavar="COUNT", help="Logical thread count")
    spec_group.add_argument("--frequency", "-f", type=int, metavar="MHZ", help="Maximum clock frequency in MHz")
    spec_group.add_argument(
        "--no-detect", action="store_true", help="Do not query this machine; unspecified values are unknown"
    )

    grade_parser.add_argument("--config", metavar="PATH", help="Grading configuration YAML file")
    _add_output_arguments(grade_parser)

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse CPU name strings into family, platform and year")
    parse_parser.add_argument("names", nargs="+", metavar="CPU_NAME", help="One or more CPU name strings")
    parse_parser.add_argument("--config", metavar="PATH", help="Grading configuration YAML file")
    _add_output_arguments(parse_parser)

    # Info command
    info_parser = subparsers.add_parser("info", help="Show the CPU information detected on this machine")
    _add_output_arguments(info_parser)

    return parser
