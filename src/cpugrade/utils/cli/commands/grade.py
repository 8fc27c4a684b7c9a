# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Grade command implementation.

Grades the CPU of this machine, or a CPU described on the command line,
and prints the performance tier.
"""

import json
import logging
import sys
from typing import Optional

from cpugrade.utils.config import load_grading_config, setup_data_dir
from cpugrade.utils.logging import setup_command_logging
from cpugrade.utils.system import RawSpec, collect_raw_spec, explain_grade, format_grade_report

logger = logging.getLogger(__name__)


def _resolve_spec(
    name: Optional[str],
    cores: Optional[int],
    threads: Optional[int],
    frequency: Optional[int],
    no_detect: bool,
) -> RawSpec:
    """Combine detected host values with command line overrides."""
    detected = RawSpec() if no_detect else collect_raw_spec()
    return RawSpec(
        name=name if name is not None else detected.name,
        core_count=cores if cores is not None else detected.core_count,
        thread_count=threads if threads is not None else detected.thread_count,
        max_frequency_mhz=frequency if frequency is not None else detected.max_frequency_mhz,
    )


def run_grade(
    name: Optional[str] = None,
    cores: Optional[int] = None,
    threads: Optional[int] = None,
    frequency: Optional[int] = None,
    no_detect: bool = False,
    config_path: Optional[str] = None,
    as_json: bool = False,
    verbose: bool = False,
    debug: bool = False,
) -> int:
    """
    Grade a CPU and display the result.

    Args:
        name: CPU name override
        cores: Physical core count override
        threads: Logical thread count override
        frequency: Maximum frequency override in MHz
        no_detect: Skip host detection; unspecified values are unknown
        config_path: Optional grading configuration file
        as_json: Whether to print JSON instead of a text report
        verbose: Whether to show more detailed output
        debug: Whether to show debug level logs

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    try:
        data_dir = setup_data_dir()
        # Keep stdout for the JSON document
        log_stream = sys.stderr if as_json else None
        setup_command_logging("grade", verbose=verbose, debug=debug, data_dir=data_dir, stream=log_stream)

        grading_config = load_grading_config(config_path)
        spec = _resolve_spec(name, cores, threads, frequency, no_detect)
        logger.debug(f"Grading CPU specification: {spec}")

        decision = explain_grade(spec, grading_config.thresholds, grading_config.fallback_years)

        if as_json:
            output = {
                "cpu": {
                    "name": spec.name,
                    "core_count": spec.core_count,
                    "thread_count": spec.thread_count,
                    "max_frequency_mhz": spec.max_frequency_mhz,
                },
                **decision.to_dict(),
            }
            print(json.dumps(output, indent=2))
        else:
            print(format_grade_report(spec, decision, verbose=verbose or debug))

        return 0

    except Exception as e:
        logger.error(f"Error grading CPU: {e}", exc_info=debug)
        return 1
