# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Parse command implementation.

Shows how CPU name strings are classified by the model parser.
"""

import json
import logging
import sys
from typing import List, Optional

from cpugrade.utils.config import load_grading_config, setup_data_dir
from cpugrade.utils.logging import setup_command_logging
from cpugrade.utils.system import format_model_info, parse_cpu_model

logger = logging.getLogger(__name__)


def run_parse(
    names: List[str],
    config_path: Optional[str] = None,
    as_json: bool = False,
    verbose: bool = False,
    debug: bool = False,
) -> int:
    """
    Parse CPU name strings and display family, platform and introduction year.

    Args:
        names: CPU name strings to parse
        config_path: Optional grading configuration file (for fallback years)
        as_json: Whether to print JSON instead of text
        verbose: Whether to show more detailed output
        debug: Whether to show debug level logs

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    try:
        data_dir = setup_data_dir()
        # Keep stdout for the JSON document
        log_stream = sys.stderr if as_json else None
        setup_command_logging("parse", verbose=verbose, debug=debug, data_dir=data_dir, stream=log_stream)

        fallback_years = load_grading_config(config_path).fallback_years
        results = [(name, parse_cpu_model(name, fallback_years)) for name in names]

        if as_json:
            print(json.dumps([{"name": name, **info.to_dict()} for name, info in results], indent=2))
        else:
            print("\n".join(format_model_info(name, info) for name, info in results))

        return 0

    except Exception as e:
        logger.error(f"Error parsing CPU names: {e}", exc_info=debug)
        return 1
