# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Lookup tables for CPU model name parsing.

Every vendor and family rule used by the model parser lives here as data:
vendor markers, boilerplate tokens, family keywords in dispatch order,
generation -> introduction year maps, SKU suffix -> platform sets, the
Xeon product line rules and the single-bucket legacy families.

Years are the approximate launch year of a generation (or the market exit
year for legacy lines) and act as a proxy for the part's performance era.

Data Sources:
- Intel ARK product specifications and processor numbering documentation
- AMD product specifications
- Wikipedia: List of Intel processors, List of AMD processors
"""

from types import MappingProxyType
from typing import NamedTuple, Optional, Tuple

from .cpu_types import PlatformClass, VendorFamily

# Sentinel for "family recognized but sub-model year unresolved". Never
# returned by the parser.
UNRESOLVED_YEAR = -1

# Earliest introduction year of any recognized part
MIN_INTRODUCTION_YEAR = 2000

# Vendor markers, checked in this order (Intel first)
VENDOR_MARKERS = (
    ("intel", ("intel", "英特尔")),
    ("amd", ("amd",)),
)

AMD_MARKER = "amd"

# Boilerplate removed before family matching, per vendor
CLEANUP_TOKENS = MappingProxyType(
    {
        "intel": ("cpu ", "(r)", "(tm)", "processor "),
        "amd": ("with radeon graphics", "processor ", "with radeon vega graphics"),
    }
)

# Family keywords in dispatch priority order. First match wins, so a name
# carrying two keywords resolves to the earlier family.
FAMILY_KEYWORDS = MappingProxyType(
    {
        "intel": (
            ("core", VendorFamily.INTEL_CORE),
            ("xeon", VendorFamily.INTEL_XEON),
            ("pentium", VendorFamily.INTEL_PENTIUM),
            ("celeron", VendorFamily.INTEL_CELERON),
            ("itanium", VendorFamily.INTEL_ITANIUM),
            ("atom", VendorFamily.INTEL_ATOM),
        ),
        "amd": (
            ("ryzen", VendorFamily.AMD_RYZEN),
            ("epyc", VendorFamily.AMD_EPYC),
            ("athlon", VendorFamily.AMD_ATHLON),
            ("amd fx", VendorFamily.AMD_FX),
            ("opteron", VendorFamily.AMD_OPTERON),
            ("phenom", VendorFamily.AMD_PHENOM),
            ("sempron", VendorFamily.AMD_SEMPRON),
            ("turion", VendorFamily.AMD_TURION),
            ("duron", VendorFamily.AMD_DURON),
        ),
    }
)

# "Assume newest" years for generation tokens missing from a family table.
# Optimistic on purpose: an unknown token is most likely a part released
# after the table was written. Keys are VendorFamily values, plus
# "amd_ryzen_extended" for Ryzen generation tokens longer than two digits.
FALLBACK_YEARS = MappingProxyType(
    {
        "intel_core": 2024,
        "intel_xeon": 2024,
        "intel_celeron": 2022,
        "amd_ryzen": 2024,
        "amd_ryzen_extended": 2026,
        "amd_epyc": 2023,
    }
)

# ---------------------------------------------------------------------------
# Intel Core (i3/i5/i7/i9, m3/m5/m7)
# ---------------------------------------------------------------------------

# Generation prefix of the model number -> launch year
# 10th gen (Comet Lake / Ice Lake) shipped in 2020, not 2019
CORE_GENERATION_YEARS = MappingProxyType(
    {
        "1": 2010,  # Nehalem / Westmere
        "2": 2011,  # Sandy Bridge
        "3": 2012,  # Ivy Bridge
        "4": 2013,  # Haswell
        "5": 2014,  # Broadwell
        "6": 2015,  # Skylake
        "7": 2016,  # Kaby Lake
        "8": 2017,  # Coffee Lake
        "9": 2018,  # Coffee Lake Refresh
        "10": 2020,  # Comet Lake / Ice Lake
        "11": 2021,  # Tiger Lake / Rocket Lake
        "12": 2022,  # Alder Lake
        "13": 2023,  # Raptor Lake
        "14": 2024,  # Raptor Lake Refresh
        "15": 2025,
        "16": 2026,
    }
)

# Laptop SKU suffixes. Anything else (K, F, KF, T, S, X, none) is desktop.
CORE_MOBILE_SUFFIXES = frozenset(
    {"h", "hk", "hx", "p", "u", "y", "m", "q", "l", "qm", "mq", "g1", "g2", "g3", "g4", "g5", "g6", "g7"}
)

# Core 2 (Conroe / Merom / Penryn), discontinued
CORE2_MARKER = "core2"
CORE2_YEAR = 2006

# ---------------------------------------------------------------------------
# Intel Xeon
# ---------------------------------------------------------------------------

# Xeon Scalable product line number prefixes: metal + first two digits.
# Second digit is the Scalable generation (1 Skylake-SP, 2 Cascade Lake,
# 3 Ice Lake-SP).
XEON_PRODUCT_LINE_YEARS = (
    (("bronze 31",), 2017),
    (("bronze 32",), 2020),
    (("silver 41", "gold 61", "gold 51", "platinum 81"), 2017),
    (("silver 42", "gold 62", "gold 52", "platinum 82", "platinum 92"), 2019),
    (("silver 43", "gold 63", "gold 53", "platinum 83"), 2021),
)


class XeonSeries(NamedTuple):
    """
    A Xeon series selected by marker, resolved to a year by sub-model.

    markers: any one of these selects the series
    requires: all of these must also be present for the series to apply
    models: ordered (tokens, year) pairs; first pair with any token present wins
    year: year for series that have no sub-model breakdown
    """

    markers: Tuple[str, ...]
    requires: Tuple[str, ...] = ()
    models: Tuple[Tuple[Tuple[str, ...], int], ...] = ()
    year: Optional[int] = None


# Only the first series whose markers match is consulted
XEON_SERIES = (
    XeonSeries(
        markers=("xeon e-",),
        models=(
            (("e-21",), 2018),  # Coffee Lake
            (("e-22",), 2019),  # Coffee Lake Refresh
            (("e-23",), 2021),  # Rocket Lake
        ),
    ),
    XeonSeries(
        markers=("xeon d-",),
        models=(
            (("d-15",), 2017),
            (("d-21",), 2018),
            (("d-16",), 2019),
            (("d-27",), 2022),
            (("d-17",), 2022),
        ),
    ),
    XeonSeries(
        markers=("xeon w-",),
        models=(
            (("w-21",), 2017),  # Skylake-W
            (("w-31",), 2018),
            (("w-22",), 2019),  # Cascade Lake-W
            (("w-32",), 2019),
            (("w-33",), 2021),  # Ice Lake-W
            (("w-10", "w-12"), 2020),  # Comet Lake-W
            (("w-11", "w-13"), 2021),  # Tiger Lake-W / Rocket Lake-W
        ),
    ),
    XeonSeries(markers=("xeon x",), year=2010),
    XeonSeries(markers=("xeon e7",), requires=("v2",), year=2014),
    XeonSeries(
        markers=("xeon e5",),
        models=(
            (("v2",), 2013),
            (("v3",), 2014),
            (("v4",), 2016),
        ),
    ),
    XeonSeries(
        markers=("xeon e3",),
        models=(
            (("v3",), 2013),
            (("v5",), 2016),
            (("v6",), 2017),
        ),
    ),
    XeonSeries(
        markers=("xeon w3", "xeon w5", "xeon w7", "xeon w9"),
        models=(
            # Sapphire Rapids-WS
            (("xeon w3-24", "xeon w5-24", "xeon w5-34", "xeon w7-24", "xeon w7-34", "xeon w9-34"), 2023),
        ),
    ),
)

# ---------------------------------------------------------------------------
# Intel Celeron
# ---------------------------------------------------------------------------

CELERON_GENERATION_YEARS = MappingProxyType(
    {
        "6": 2022,
        "5": 2020,
        "4": 2018,
        "3": 2016,
        "2": 2013,
        "1": 2013,
    }
)

# Modern Celeron SKUs carry at least three digits after the generation
# digit; two or fewer means a much older part.
CELERON_SHORT_SKU_LENGTH = 2
CELERON_SHORT_SKU_YEAR = 2012

# ---------------------------------------------------------------------------
# AMD Ryzen / Epyc
# ---------------------------------------------------------------------------

# First digit of the four-digit model number -> launch year
RYZEN_GENERATION_YEARS = MappingProxyType(
    {
        "1": 2017,  # Zen
        "2": 2018,  # Zen+
        "3": 2019,  # Zen 2
        "4": 2020,
        "5": 2021,  # Zen 3
        "6": 2022,
        "7": 2023,  # Zen 4
    }
)

# E is also a 2nd gen desktop suffix, but later generations use it for
# fanless mobile parts
RYZEN_MOBILE_SUFFIXES = frozenset({"h", "hs", "hx", "hx3d", "u", "c", "e"})

# Generation tokens longer than this signal a far-future numbering scheme
RYZEN_EXTENDED_GENERATION_LENGTH = 2

# Last digit of the Epyc model number -> launch year
EPYC_GENERATION_YEARS = MappingProxyType(
    {
        "1": 2017,  # Naples
        "2": 2019,  # Rome
        "3": 2021,  # Milan
        "4": 2022,  # Genoa
    }
)

# ---------------------------------------------------------------------------
# Single-bucket families: (platform, approximate era year)
# ---------------------------------------------------------------------------

LEGACY_FAMILY_MODELS = MappingProxyType(
    {
        VendorFamily.INTEL_PENTIUM: (PlatformClass.DESKTOP, 2016),  # last parts 2022
        VendorFamily.INTEL_ITANIUM: (PlatformClass.DESKTOP, 2017),  # last part 2017
        VendorFamily.INTEL_ATOM: (PlatformClass.MOBILE, 2010),  # low-end market
        VendorFamily.AMD_ATHLON: (PlatformClass.UNKNOWN, 2011),
        VendorFamily.AMD_FX: (PlatformClass.UNKNOWN, 2010),
        VendorFamily.AMD_OPTERON: (PlatformClass.DESKTOP, 2010),  # server
        VendorFamily.AMD_PHENOM: (PlatformClass.UNKNOWN, 2010),
        VendorFamily.AMD_SEMPRON: (PlatformClass.MOBILE, 2006),
        VendorFamily.AMD_TURION: (PlatformClass.MOBILE, 2010),
        VendorFamily.AMD_DURON: (PlatformClass.UNKNOWN, 2001),
    }
)
