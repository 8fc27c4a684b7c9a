# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Configuration utilities package.

Provides utilities for loading the grading configuration from YAML files,
environment variables and package metadata.
"""

from .config import *
from .config_loader import *

# Re-export all functions and classes
__all__ = [
    # From config
    "GradingConfig",
    "DEFAULT_CONFIG_FILE",
    "ENV_CONFIG_PATH",
    "ENV_DATA_DIR",
    "setup_data_dir",
    "load_yaml_config",
    "merge_configs",
    "find_config_file",
    "get_default_config",
    "validate_grading_config",
    "build_grading_config",
    "load_grading_config",
    # From config_loader
    "PROJECT_NAME",
    "get_project_name",
    "get_dist_name",
    "get_dist_version",
    "get_configs_directory",
]
