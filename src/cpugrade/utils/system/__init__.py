# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
CPU classification package.

This package provides the CPU model parser, the performance grade decider
and host CPU information collection.
"""

from . import cpu_tables
from .cpu import detect_family, detect_vendor, normalize_cpu_name, parse_cpu_model
from .cpu_types import UNRECOGNIZED, ModelInfo, PerfGrade, PlatformClass, RawSpec, VendorFamily
from .formatter import format_grade_report, format_model_info, format_raw_spec
from .grading import (
    DEFAULT_THRESHOLDS,
    GradeDecision,
    GradeRule,
    GradingThresholds,
    effective_frequency,
    era_offset,
    explain_grade,
    grade_cpu,
    grade_cpu_name,
    grade_for_year,
)
from .hardware import collect_cpu_info, collect_raw_spec

__all__ = [
    # Types
    "RawSpec",
    "ModelInfo",
    "VendorFamily",
    "PlatformClass",
    "PerfGrade",
    "UNRECOGNIZED",
    # Model parser
    "parse_cpu_model",
    "detect_vendor",
    "detect_family",
    "normalize_cpu_name",
    # Grade decider
    "GradingThresholds",
    "DEFAULT_THRESHOLDS",
    "GradeDecision",
    "GradeRule",
    "grade_cpu",
    "grade_cpu_name",
    "explain_grade",
    "effective_frequency",
    "era_offset",
    "grade_for_year",
    # Host collection
    "collect_cpu_info",
    "collect_raw_spec",
    # Formatting functions
    "format_raw_spec",
    "format_model_info",
    "format_grade_report",
    # Submodules
    "cpu_tables",
]
