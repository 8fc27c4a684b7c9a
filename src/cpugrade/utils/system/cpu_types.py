# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Value types shared by the CPU model parser and the grade decider.

All types here are immutable and recomputed per classification call.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class VendorFamily(Enum):
    """Recognized CPU product lines, prefixed by vendor."""

    UNKNOWN = "unknown"
    INTEL_CORE = "intel_core"
    INTEL_XEON = "intel_xeon"
    INTEL_PENTIUM = "intel_pentium"
    INTEL_CELERON = "intel_celeron"
    INTEL_ITANIUM = "intel_itanium"
    INTEL_ATOM = "intel_atom"
    AMD_RYZEN = "amd_ryzen"
    AMD_EPYC = "amd_epyc"
    AMD_ATHLON = "amd_athlon"
    AMD_FX = "amd_fx"
    AMD_OPTERON = "amd_opteron"
    AMD_PHENOM = "amd_phenom"
    AMD_SEMPRON = "amd_sempron"
    AMD_TURION = "amd_turion"
    AMD_DURON = "amd_duron"

    @property
    def vendor(self) -> Optional[str]:
        """Vendor key ("intel" or "amd"), None for UNKNOWN."""
        if self is VendorFamily.UNKNOWN:
            return None
        return self.value.split("_", 1)[0]

    @property
    def display_name(self) -> str:
        if self is VendorFamily.UNKNOWN:
            return "Unknown"
        line = self.value.split("_", 1)[1]
        vendor_name = "AMD" if self.vendor == "amd" else "Intel"
        line_name = "FX" if line == "fx" else line.capitalize()
        return f"{vendor_name} {line_name}"


class PlatformClass(Enum):
    """Form factor a part targets. UNKNOWN may be either desktop or laptop."""

    UNKNOWN = "unknown"
    DESKTOP = "desktop"
    MOBILE = "mobile"


class PerfGrade(IntEnum):
    """Coarse performance tier, ordered LOW < MID < HIGH."""

    LOW = 1
    MID = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True)
class RawSpec:
    """
    CPU description as reported by the host.

    Numeric fields use 0 for "unknown". Negative or missing values are
    clamped to 0 so downstream comparisons only ever see unsigned counts.
    """

    name: str = ""
    core_count: int = 0
    thread_count: int = 0
    max_frequency_mhz: int = 0

    def __post_init__(self):
        object.__setattr__(self, "name", self.name or "")
        for field_name in ("core_count", "thread_count", "max_frequency_mhz"):
            value = int(getattr(self, field_name) or 0)
            object.__setattr__(self, field_name, max(value, 0))


@dataclass(frozen=True)
class ModelInfo:
    """
    Result of parsing a CPU name string.

    A recognized result always carries a concrete introduction year; an
    unrecognized one is the UNRECOGNIZED constant. Truthiness follows
    ``recognized`` so callers can write ``if info:``.
    """

    family: VendorFamily
    platform: PlatformClass
    introduction_year: int
    recognized: bool = True

    def __bool__(self) -> bool:
        return self.recognized

    def to_dict(self):
        return {
            "family": self.family.value,
            "platform": self.platform.value,
            "introduction_year": self.introduction_year,
            "recognized": self.recognized,
        }


UNRECOGNIZED = ModelInfo(
    family=VendorFamily.UNKNOWN,
    platform=PlatformClass.UNKNOWN,
    introduction_year=0,
    recognized=False,
)
