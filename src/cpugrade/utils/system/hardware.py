# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Host CPU information collection.

Reads the processor name, physical core count, logical thread count and
maximum clock frequency of the running machine. Every value the host cannot
provide is reported as 0 (or an empty name) so the grade decider can treat
it as unknown.
"""

import logging
import platform
from typing import Any, Dict

import cpuinfo
import psutil

from .cpu_types import RawSpec

logger = logging.getLogger(__name__)


def _max_frequency_mhz(cpu_info_data: Dict[str, Any]) -> int:
    """
    Get the maximum CPU frequency in MHz.

    psutil reports the scaling maximum where the OS exposes it; otherwise
    fall back to the frequency advertised in the brand string.
    """
    try:
        freq = psutil.cpu_freq()
        if freq and freq.max:
            return int(freq.max)
    except Exception as e:
        logger.debug(f"psutil could not read CPU frequency: {e}")

    hz_advertised = cpu_info_data.get("hz_advertised")
    if isinstance(hz_advertised, (list, tuple)) and hz_advertised:
        return int(hz_advertised[0] / 1_000_000)

    return 0


def collect_cpu_info() -> Dict[str, Any]:
    """
    Collect CPU name, counts and frequency.

    Returns:
        Dict containing CPU information; unknown values are 0 or ""
    """
    try:
        cpu_info_data = cpuinfo.get_cpu_info()
    except Exception as e:
        logger.warning(f"Failed to collect CPU info: {e}")
        cpu_info_data = {}

    cpu_info = {
        "brand": cpu_info_data.get("brand_raw", ""),
        "vendor_id": cpu_info_data.get("vendor_id_raw", ""),
        "architecture": cpu_info_data.get("arch", platform.machine()),
        "count": 0,
        "logical_count": 0,
        "max_frequency_mhz": _max_frequency_mhz(cpu_info_data),
    }

    try:
        cpu_info["count"] = psutil.cpu_count(logical=False) or 0  # Physical cores
        cpu_info["logical_count"] = psutil.cpu_count(logical=True) or 0  # Including hyperthreading
    except Exception as e:
        logger.warning(f"Failed to read CPU core counts: {e}")

    return cpu_info


def collect_raw_spec() -> RawSpec:
    """Collect the host CPU as a RawSpec for grading."""
    cpu_info = collect_cpu_info()
    logger.debug(f"Collected CPU information: {cpu_info}")
    return RawSpec(
        name=cpu_info["brand"],
        core_count=cpu_info["count"],
        thread_count=cpu_info["logical_count"],
        max_frequency_mhz=cpu_info["max_frequency_mhz"],
    )
