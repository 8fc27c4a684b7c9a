# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
CPU grading report formatting utilities.

Formats raw specifications, parsed models and grade decisions into
human-readable text for the CLI.
"""

from .cpu_types import ModelInfo, RawSpec
from .grading import GradeDecision


def _or_unknown(value) -> str:
    return str(value) if value else "Unknown"


def format_raw_spec(spec: RawSpec) -> str:
    """
    Format a raw CPU specification.

    Args:
        spec: Raw CPU specification

    Returns:
        Formatted multi-line summary
    """
    lines = []
    lines.append("CPU INFORMATION")
    lines.append("-" * 40)
    lines.append(f"CPU: {spec.name or 'Unknown'}")
    lines.append(f"  Cores: {_or_unknown(spec.core_count)}")
    lines.append(f"  Threads: {_or_unknown(spec.thread_count)}")
    if spec.max_frequency_mhz:
        freq_ghz = round(spec.max_frequency_mhz / 1000, 2)
        lines.append(f"  Max Frequency: {freq_ghz} GHz")
    else:
        lines.append("  Max Frequency: Unknown")
    return "\n".join(lines)


def format_model_info(name: str, model_info: ModelInfo) -> str:
    """Format a parsed CPU model."""
    lines = [f"Name: {name}"]
    if not model_info:
        lines.append("  Model: Not recognized")
        return "\n".join(lines)

    lines.append(f"  Family: {model_info.family.display_name}")
    lines.append(f"  Platform: {model_info.platform.value.capitalize()}")
    lines.append(f"  Introduction Year: {model_info.introduction_year}")
    return "\n".join(lines)


def format_grade_report(spec: RawSpec, decision: GradeDecision, verbose: bool = False) -> str:
    """
    Format the grading result for a CPU.

    Args:
        spec: Raw CPU specification that was graded
        decision: Grade decision for the specification
        verbose: Whether to include the deciding rule and parsed model

    Returns:
        Formatted report
    """
    lines = [format_raw_spec(spec), ""]
    lines.append(f"Performance Grade: {decision.grade.label}")

    if verbose:
        lines.append(f"  Decided By: {decision.rule.value}")
        if decision.effective_frequency_mhz != spec.max_frequency_mhz:
            lines.append(f"  Effective Frequency: {decision.effective_frequency_mhz} MHz")
        if decision.model_info:
            lines.append(f"  Family: {decision.model_info.family.display_name}")
            lines.append(f"  Platform: {decision.model_info.platform.value.capitalize()}")
            lines.append(f"  Introduction Year: {decision.model_info.introduction_year}")
        if decision.adjusted_year is not None:
            lines.append(f"  Era-Adjusted Year: {decision.adjusted_year}")

    return "\n".join(lines)
