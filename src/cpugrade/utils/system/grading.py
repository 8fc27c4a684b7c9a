# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
CPU performance grade decision.

Grades a CPU as LOW, MID or HIGH from its raw specification using an
ordered rule cascade; the first rule that fires decides:

1. AMD frequency correction (reported boost clocks are optimistic)
2. Low fast path: low clock OR few cores and threads
3. High fast path: high clock AND many cores and threads
4. Mid fast path: mid clock AND many cores and threads
5. Model era: parse the name, shift the introduction year back for
   laptop parts, and grade by year
6. Anything unrecognized or failing grades MID

Important:
- Grades are a coarse tier, not a benchmark score
- Under uncertainty the decider prefers MID over penalizing or over-praising
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .cpu import parse_cpu_model
from .cpu_tables import AMD_MARKER
from .cpu_types import ModelInfo, PerfGrade, PlatformClass, RawSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GradingThresholds:
    """Complete numeric configuration of the grade decider."""

    low_core_threshold: int = 4  # <= 4 cores and <= 4 threads is low end
    low_thread_threshold: int = 4
    high_freq_mhz: int = 2600  # >= 2.6 GHz with many cores is high end
    low_freq_mhz: int = 2000  # <= 2.0 GHz is low end
    high_era_year: int = 2016
    mid_era_year: int = 2011
    mobile_year_offset: int = 1  # same-generation laptop parts trail desktop by a year
    amd_freq_correction_mhz: int = 300


DEFAULT_THRESHOLDS = GradingThresholds()


class GradeRule(Enum):
    """Rule of the cascade that produced a grade."""

    LOW_FAST_PATH = "low-fast-path"
    HIGH_FAST_PATH = "high-fast-path"
    MID_FAST_PATH = "mid-fast-path"
    MODEL_ERA = "model-era"
    UNRECOGNIZED = "unrecognized"
    ERROR = "error"


@dataclass(frozen=True)
class GradeDecision:
    """A grade together with the evidence that produced it."""

    grade: PerfGrade
    rule: GradeRule
    effective_frequency_mhz: int = 0
    model_info: Optional[ModelInfo] = None
    adjusted_year: Optional[int] = None

    def to_dict(self):
        return {
            "grade": self.grade.label,
            "rule": self.rule.value,
            "effective_frequency_mhz": self.effective_frequency_mhz,
            "model": self.model_info.to_dict() if self.model_info is not None else None,
            "adjusted_year": self.adjusted_year,
        }


def effective_frequency(name: str, frequency_mhz: int, thresholds: GradingThresholds = DEFAULT_THRESHOLDS) -> int:
    """
    Apply the AMD boost clock correction to a reported frequency.

    Unknown frequency (0) stays unknown and the result never drops below 0.
    """
    if frequency_mhz > 0 and AMD_MARKER in (name or "").lower():
        return max(frequency_mhz - thresholds.amd_freq_correction_mhz, 0)
    return frequency_mhz


def era_offset(platform: PlatformClass, frequency_mhz: int, thresholds: GradingThresholds = DEFAULT_THRESHOLDS) -> int:
    """
    Years to subtract from the introduction year for a platform.

    Desktop parts get no offset and mobile parts the mobile offset. When the
    name did not disclose the form factor, a low clock is taken as a sign of
    a laptop part.
    """
    if platform is PlatformClass.DESKTOP:
        return 0
    if platform is PlatformClass.MOBILE:
        return thresholds.mobile_year_offset
    return thresholds.mobile_year_offset if frequency_mhz < thresholds.low_freq_mhz else 0


def grade_for_year(year: int, thresholds: GradingThresholds = DEFAULT_THRESHOLDS) -> PerfGrade:
    """Map an era-adjusted introduction year to a grade."""
    if year >= thresholds.high_era_year:
        return PerfGrade.HIGH
    if year >= thresholds.mid_era_year:
        return PerfGrade.MID
    return PerfGrade.LOW


def _decide(
    spec: RawSpec, thresholds: GradingThresholds, fallback_years: Optional[Mapping[str, int]]
) -> GradeDecision:
    frequency = effective_frequency(spec.name, spec.max_frequency_mhz, thresholds)
    cores = spec.core_count
    threads = spec.thread_count

    low_frequency = 0 < frequency <= thresholds.low_freq_mhz
    few_cores = 0 < cores <= thresholds.low_core_threshold and 0 < threads <= thresholds.low_thread_threshold
    if low_frequency or few_cores:
        return GradeDecision(PerfGrade.LOW, GradeRule.LOW_FAST_PATH, frequency)

    many_cores = cores > thresholds.low_core_threshold and threads > thresholds.low_thread_threshold
    if frequency >= thresholds.high_freq_mhz and many_cores:
        return GradeDecision(PerfGrade.HIGH, GradeRule.HIGH_FAST_PATH, frequency)

    if frequency > thresholds.low_freq_mhz and many_cores:
        return GradeDecision(PerfGrade.MID, GradeRule.MID_FAST_PATH, frequency)

    model_info = parse_cpu_model(spec.name, fallback_years)
    if not model_info or model_info.introduction_year <= 0:
        return GradeDecision(PerfGrade.MID, GradeRule.UNRECOGNIZED, frequency, model_info)

    adjusted_year = model_info.introduction_year - era_offset(model_info.platform, frequency, thresholds)
    return GradeDecision(
        grade_for_year(adjusted_year, thresholds), GradeRule.MODEL_ERA, frequency, model_info, adjusted_year
    )


def explain_grade(
    spec: RawSpec,
    thresholds: Optional[GradingThresholds] = None,
    fallback_years: Optional[Mapping[str, int]] = None,
) -> GradeDecision:
    """
    Grade a CPU and report which rule decided.

    Args:
        spec: Raw CPU specification (0 for unknown numeric values)
        thresholds: Decider configuration, DEFAULT_THRESHOLDS when omitted
        fallback_years: Optional overrides for the parser's fallback years

    Returns:
        GradeDecision; never raises, failures decide MID with rule ERROR
    """
    try:
        decision = _decide(spec, thresholds or DEFAULT_THRESHOLDS, fallback_years)
    except Exception as e:
        logger.debug(f"Failed to grade CPU {spec!r}: {e}")
        return GradeDecision(PerfGrade.MID, GradeRule.ERROR)

    logger.debug(f"Graded '{spec.name}' as {decision.grade.label} by {decision.rule.value}")
    return decision


def grade_cpu(
    spec: RawSpec,
    thresholds: Optional[GradingThresholds] = None,
    fallback_years: Optional[Mapping[str, int]] = None,
) -> PerfGrade:
    """Grade a CPU as LOW, MID or HIGH. Never raises."""
    return explain_grade(spec, thresholds, fallback_years).grade


def grade_cpu_name(
    name: str,
    core_count: int = 0,
    thread_count: int = 0,
    max_frequency_mhz: int = 0,
    thresholds: Optional[GradingThresholds] = None,
) -> PerfGrade:
    """
    Grade a CPU from loose values instead of a RawSpec.

    Values that cannot be turned into a RawSpec grade MID.
    """
    try:
        spec = RawSpec(name, core_count, thread_count, max_frequency_mhz)
    except (TypeError, ValueError) as e:
        logger.debug(f"Invalid CPU specification for '{name}': {e}")
        return PerfGrade.MID
    return grade_cpu(spec, thresholds)
