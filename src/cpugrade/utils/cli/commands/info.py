# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
CPU information command implementation.

Collects and displays the CPU values the grade command would use.
"""

import json
import logging
import sys

from cpugrade.utils.config import setup_data_dir
from cpugrade.utils.logging import setup_command_logging
from cpugrade.utils.system import collect_cpu_info, collect_raw_spec, format_raw_spec

logger = logging.getLogger(__name__)


def run_cpu_info(as_json: bool = False, verbose: bool = False, debug: bool = False) -> int:
    """
    Run CPU information collection and display the detected values.

    Args:
        as_json: Whether to print the full collected data as JSON
        verbose: Whether to show more detailed output
        debug: Whether to show debug level logs

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    try:
        data_dir = setup_data_dir()
        # Keep stdout for the JSON document
        log_stream = sys.stderr if as_json else None
        setup_command_logging("info", verbose=verbose, debug=debug, data_dir=data_dir, stream=log_stream)

        logger.debug("Collecting CPU information...")
        if as_json:
            print(json.dumps(collect_cpu_info(), indent=2, default=str))
        else:
            print(format_raw_spec(collect_raw_spec()))

        return 0

    except Exception as e:
        logger.error(f"Error collecting CPU information: {e}", exc_info=debug)
        return 1
