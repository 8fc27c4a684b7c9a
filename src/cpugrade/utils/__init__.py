# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Utility modules for CPU performance grading.

- system: CPU model parsing, grade decision and host CPU detection
- config: Grading configuration management
- logging: Logging configuration and utilities
- cli: Command line parsers and command implementations
"""

from . import config, logging, system

__all__ = [
    "system",
    "config",
    "logging",
]
