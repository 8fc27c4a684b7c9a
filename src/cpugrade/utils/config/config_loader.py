# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Configuration loader utilities.

This module provides utilities for locating packaged configuration files
and reading package metadata.
"""

import importlib.metadata
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

PROJECT_NAME = "cpugrade"


def get_project_name() -> str:
    """Get the project name used for the CLI, data folder and log files."""
    return PROJECT_NAME


def get_dist_name() -> Optional[str]:
    """Get the distribution name for the current package."""
    pkg = __name__.split(".", 1)[0]
    mapping = importlib.metadata.packages_distributions()
    return mapping.get(pkg, [None])[0]


def get_dist_version(dist: Optional[str] = None) -> str:
    """Get the version of a distribution."""
    if not dist:
        dist = get_dist_name()
    if not dist:
        return "unknown"
    try:
        return importlib.metadata.version(dist)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_configs_directory() -> Path:
    """Get the directory holding the packaged configuration files."""
    return Path(__file__).resolve().parent.parent.parent / "configs"
