# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Utilities for handling grading configuration files.

The grade decider and model parser take their configuration as immutable
values; this module builds those values from YAML files. Lookup order:

1. Explicit path passed by the caller (e.g. the CLI --config option)
2. CPUGRADE_CONFIG_PATH environment variable
3. The packaged configs/grading.yml
"""

import logging
import os
from dataclasses import asdict, dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

import yaml

from cpugrade.utils.system.cpu_tables import FALLBACK_YEARS, MIN_INTRODUCTION_YEAR
from cpugrade.utils.system.grading import DEFAULT_THRESHOLDS, GradingThresholds

from .config_loader import get_configs_directory, get_project_name

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "grading.yml"

# Environment variables understood by the configuration layer
ENV_CONFIG_PATH = "CPUGRADE_CONFIG_PATH"
ENV_DATA_DIR = "CPUGRADE_DATA_DIR"


@dataclass(frozen=True)
class GradingConfig:
    """Immutable grading configuration: decider thresholds and parser fallback years."""

    thresholds: GradingThresholds = DEFAULT_THRESHOLDS
    fallback_years: Mapping[str, int] = field(default_factory=lambda: FALLBACK_YEARS)

    def to_dict(self) -> Dict[str, Any]:
        return {"thresholds": asdict(self.thresholds), "fallback_years": dict(self.fallback_years)}


def get_default_config() -> Dict[str, Any]:
    """Get the built-in configuration as a plain dictionary."""
    return GradingConfig().to_dict()


def setup_data_dir(data_dir: str = None) -> str:
    """
    Setup data directory for logs.

    Args:
        data_dir: Optional data directory path

    Returns:
        str: Path to the data directory
    """
    if data_dir is None:
        data_dir = os.environ.get(ENV_DATA_DIR)

    if data_dir is None:
        data_dir = os.path.join(os.getcwd(), f"{get_project_name()}_data")

    os.makedirs(data_dir, exist_ok=True)
    os.makedirs(os.path.join(data_dir, "logs"), exist_ok=True)

    return data_dir


def load_yaml_config(config_path: str) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Dict containing the configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r") as file:
            config = yaml.safe_load(file)
            return config if config is not None else {}
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML in {config_path}: {e}")


def merge_configs(base_config: Dict[str, Any], override_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge two configuration dictionaries.

    Args:
        base_config: Base configuration
        override_config: Configuration to override base with

    Returns:
        Merged configuration dictionary
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def find_config_file(config_path: Optional[str] = None) -> Optional[str]:
    """
    Find the grading configuration file.

    Args:
        config_path: Optional explicit path, takes precedence over everything else

    Returns:
        Path to the configuration file if found, None otherwise
    """
    if config_path:
        return config_path

    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        logger.debug(f"Using configuration from {ENV_CONFIG_PATH}: {env_path}")
        return env_path

    packaged_path = get_configs_directory() / DEFAULT_CONFIG_FILE
    if packaged_path.exists():
        return str(packaged_path)

    return None


def _is_valid_number(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _check_threshold_order(thresholds: Dict[str, int]) -> List[str]:
    """Check that paired thresholds keep the grading cascade ordered."""
    errors = []
    if thresholds["mid_era_year"] > thresholds["high_era_year"]:
        errors.append(
            f"Threshold 'mid_era_year' ({thresholds['mid_era_year']}) must not exceed "
            f"'high_era_year' ({thresholds['high_era_year']})"
        )
    if thresholds["low_freq_mhz"] >= thresholds["high_freq_mhz"]:
        errors.append(
            f"Threshold 'low_freq_mhz' ({thresholds['low_freq_mhz']}) must be below "
            f"'high_freq_mhz' ({thresholds['high_freq_mhz']})"
        )
    return errors


def validate_grading_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate a grading configuration dictionary.

    Args:
        config: Configuration with optional "thresholds" and "fallback_years" sections

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    unknown_sections = set(config) - {"thresholds", "fallback_years"}
    for section in sorted(unknown_sections):
        errors.append(f"Unknown configuration section '{section}'")

    thresholds = config.get("thresholds") or {}
    if not isinstance(thresholds, dict):
        errors.append("Section 'thresholds' must be a dictionary")
    else:
        known_thresholds = {f.name for f in fields(GradingThresholds)}
        threshold_errors = []
        for key, value in thresholds.items():
            if key not in known_thresholds:
                threshold_errors.append(f"Unknown threshold '{key}'")
            elif not _is_valid_number(value):
                threshold_errors.append(f"Threshold '{key}' must be a non-negative integer, got {value!r}")
        errors.extend(threshold_errors)

        # Orderings are checked against the defaults for keys the file leaves out
        if not threshold_errors:
            errors.extend(_check_threshold_order({**asdict(DEFAULT_THRESHOLDS), **thresholds}))

    fallback_years = config.get("fallback_years") or {}
    if not isinstance(fallback_years, dict):
        errors.append("Section 'fallback_years' must be a dictionary")
    else:
        for key, value in fallback_years.items():
            if key not in FALLBACK_YEARS:
                errors.append(f"Unknown fallback year family '{key}'")
            elif not _is_valid_number(value) or value < MIN_INTRODUCTION_YEAR:
                errors.append(
                    f"Fallback year '{key}' must be a year no earlier than {MIN_INTRODUCTION_YEAR}, got {value!r}"
                )

    return errors


def build_grading_config(config: Dict[str, Any]) -> GradingConfig:
    """
    Build an immutable GradingConfig from a configuration dictionary.

    Missing values keep their built-in defaults.

    Raises:
        ValueError: If the configuration is invalid
    """
    errors = validate_grading_config(config)
    if errors:
        raise ValueError("Invalid grading configuration: " + "; ".join(errors))

    # Empty sections in YAML load as None
    config = {key: value for key, value in config.items() if value}
    merged = merge_configs(get_default_config(), config)
    return GradingConfig(
        thresholds=GradingThresholds(**merged["thresholds"]),
        fallback_years=MappingProxyType(dict(merged["fallback_years"])),
    )


def load_grading_config(config_path: Optional[str] = None) -> GradingConfig:
    """
    Load the grading configuration.

    Args:
        config_path: Optional path to a YAML configuration file

    Returns:
        GradingConfig with file values merged over the built-in defaults

    Raises:
        FileNotFoundError: If an explicitly requested file doesn't exist
        yaml.YAMLError: If the file is invalid YAML
        ValueError: If the configuration contains unknown keys or invalid values
    """
    path = find_config_file(config_path)
    if path is None:
        logger.debug("No grading configuration file found, using defaults")
        return GradingConfig()

    config = load_yaml_config(path)
    if not isinstance(config, dict):
        raise ValueError(f"Grading configuration in {path} must be a mapping")

    logger.debug(f"Loaded grading configuration from {path}")
    return build_grading_config(config)
