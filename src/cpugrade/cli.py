# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Command Line Interface for CPU performance grading.

This is the main CLI entry point; command implementations live in
utils.cli.commands.
"""

import atexit
import sys
from typing import List, Optional

from cpugrade.utils.cli.commands import get_command_function
from cpugrade.utils.cli.parsers import create_argument_parser
from cpugrade.utils.logging import cleanup_logging, configure_logging

_cleanup_registered = False


def _register_cleanup() -> None:
    """Clean up log handlers on exit, registering the hook once per process."""
    global _cleanup_registered
    if not _cleanup_registered:
        atexit.register(cleanup_logging)
        _cleanup_registered = True


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments, sys.argv[1:] when omitted

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # Verbose/debug may be given before the subcommand or after it
    command_index = argv.index(args.command) if args.command and args.command in argv else len(argv)
    global_args = argv[:command_index]

    verbose = "-v" in global_args or "--verbose" in global_args or getattr(args, "verbose", False)
    debug = "-d" in global_args or "--debug" in global_args or getattr(args, "debug", False)

    configure_logging(verbose=verbose, debug=debug, stream=sys.stderr if getattr(args, "json", False) else None)
    _register_cleanup()

    try:
        if args.command == "grade":
            run_grade = get_command_function("run_grade")
            return run_grade(
                name=args.name,
                cores=args.cores,
                threads=args.threads,
                frequency=args.frequency,
                no_detect=args.no_detect,
                config_path=args.config,
                as_json=args.json,
                verbose=verbose,
                debug=debug,
            )
        elif args.command == "parse":
            run_parse = get_command_function("run_parse")
            return run_parse(
                names=args.names,
                config_path=args.config,
                as_json=args.json,
                verbose=verbose,
                debug=debug,
            )
        elif args.command == "info":
            run_cpu_info = get_command_function("run_cpu_info")
            return run_cpu_info(as_json=args.json, verbose=verbose, debug=debug)
        else:
            parser.print_help()
            return 0
    except Exception as e:
        import logging

        logger = logging.getLogger(__name__)
        logger.error(f"Command execution failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
