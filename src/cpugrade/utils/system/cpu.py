# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
CPU model detection from processor name strings.

This module parses vendor marketing name strings (e.g. "Intel(R) Core(TM)
i7-10700 CPU @ 2.90GHz", "AMD Ryzen 7 5800X 8-Core Processor") into a
ModelInfo descriptor: vendor family, platform class and introduction year.

Parsing steps:
1. Lower-case the name and detect the vendor by marker substring
2. Strip the vendor's boilerplate tokens ("(r)", "(tm)", "processor ", ...)
3. Pick the family by keyword, in fixed per-vendor priority order
4. Extract generation and SKU suffix with the family's pattern and map them
   through the family tables in cpu_tables

Unknown generation tokens resolve to the family's "assume newest" fallback
year. The parser never raises; anything it cannot place is UNRECOGNIZED.
"""

import logging
import re
from typing import Mapping, Optional, Tuple

from .cpu_tables import (
    CELERON_GENERATION_YEARS,
    CELERON_SHORT_SKU_LENGTH,
    CELERON_SHORT_SKU_YEAR,
    CLEANUP_TOKENS,
    CORE2_MARKER,
    CORE2_YEAR,
    CORE_GENERATION_YEARS,
    CORE_MOBILE_SUFFIXES,
    EPYC_GENERATION_YEARS,
    FALLBACK_YEARS,
    FAMILY_KEYWORDS,
    LEGACY_FAMILY_MODELS,
    MIN_INTRODUCTION_YEAR,
    RYZEN_EXTENDED_GENERATION_LENGTH,
    RYZEN_GENERATION_YEARS,
    RYZEN_MOBILE_SUFFIXES,
    UNRESOLVED_YEAR,
    VENDOR_MARKERS,
    XEON_PRODUCT_LINE_YEARS,
    XEON_SERIES,
)
from .cpu_types import UNRECOGNIZED, ModelInfo, PlatformClass, VendorFamily

logger = logging.getLogger(__name__)

# Intel Core: "core i7-10700", "core i5 1135g7", "core m3-8100y"
CORE_MODEL_PATTERN = re.compile(r"(core [mi]\d)[ |-](\w+)")
# 10th gen and later graphics-tier suffix (g1..g7)
CORE_GRAPHICS_TIER_PATTERN = re.compile(r"\w+g\d")
# Graphics-tier SKUs have a two-digit SKU, optionally followed by "n"
CORE_GRAPHICS_SKU_PATTERN = re.compile(r"(\d+)[0-9][0-9]n*([a-z]*\d*)")
CORE_SKU_PATTERN = re.compile(r"(\d+)[0-9a-z][0-9a-z][0-9]([a-z]*\d*)")

# Celeron: "celeron n4020 ", "celeron g5905 ", "celeron g530 "
CELERON_PATTERN = re.compile(r"celeron [a-z]*(\d)(\d+)\w* ")

# Ryzen: "ryzen 7 5800x ", "ryzen 7 pro 4750u ", "ryzen 9 7945hx3d "
RYZEN_PATTERN = re.compile(r"ryzen[\w()]* (\d)[ pro]* (\d+)\d\d\d([a-z]*\w*) ")

# Epyc: "epyc 7763 ", "epyc 7402p "
EPYC_PATTERN = re.compile(r"epyc[\w()]* \w+(\d)p* ")


def _group(match: Optional[re.Match], index: int) -> str:
    """Return a captured group, or an empty string when the pattern did not match."""
    if match is None:
        return ""
    return match.group(index) or ""


def _fallback_year(fallback_years: Mapping[str, int], key: str) -> int:
    year = fallback_years.get(key, FALLBACK_YEARS[key])
    if not isinstance(year, int) or year < MIN_INTRODUCTION_YEAR:
        logger.debug(f"Ignoring fallback year {year!r} for {key}")
        return FALLBACK_YEARS[key]
    return year


def detect_vendor(name: str) -> Optional[str]:
    """
    Detect the CPU vendor from a lower-cased name string.

    Args:
        name: Lower-cased CPU name

    Returns:
        "intel", "amd", or None when no vendor marker is present
    """
    for vendor, markers in VENDOR_MARKERS:
        if any(marker in name for marker in markers):
            return vendor
    return None


def normalize_cpu_name(name: str, vendor: str) -> str:
    """Strip the vendor's boilerplate tokens from a lower-cased CPU name."""
    for token in CLEANUP_TOKENS.get(vendor, ()):
        name = name.replace(token, "")
    return name


def detect_family(name: str, vendor: str) -> Optional[VendorFamily]:
    """Return the first family whose keyword appears in the name, in dispatch order."""
    for keyword, family in FAMILY_KEYWORDS.get(vendor, ()):
        if keyword in name:
            return family
    return None


def _parse_intel_core(name: str, fallback_years: Mapping[str, int]) -> Tuple[PlatformClass, int]:
    # Some firmware reports the brand as "Core(TM)" with a stray "t" left after cleanup
    name = name.replace("coret", "core")

    if CORE2_MARKER in name:
        return PlatformClass.DESKTOP, CORE2_YEAR

    model = _group(CORE_MODEL_PATTERN.search(name), 2)
    if CORE_GRAPHICS_TIER_PATTERN.search(model):
        sku_match = CORE_GRAPHICS_SKU_PATTERN.search(model)
    else:
        sku_match = CORE_SKU_PATTERN.search(model)

    generation = _group(sku_match, 1)
    suffix = _group(sku_match, 2)

    platform = PlatformClass.MOBILE if suffix in CORE_MOBILE_SUFFIXES else PlatformClass.DESKTOP
    year = CORE_GENERATION_YEARS.get(generation, UNRESOLVED_YEAR)
    if year == UNRESOLVED_YEAR:
        logger.debug(f"Unknown Intel Core generation '{generation}' in '{name}', assuming a newer part")
        year = _fallback_year(fallback_years, VendorFamily.INTEL_CORE.value)

    return platform, year


def _match_xeon_year(name: str) -> int:
    for tokens, year in XEON_PRODUCT_LINE_YEARS:
        if any(token in name for token in tokens):
            return year

    for series in XEON_SERIES:
        if not any(marker in name for marker in series.markers):
            continue
        if not all(token in name for token in series.requires):
            continue
        if series.year is not None:
            return series.year
        for tokens, year in series.models:
            if any(token in name for token in tokens):
                return year
        # Only the first matching series is consulted
        break

    return UNRESOLVED_YEAR


def _parse_intel_xeon(name: str, fallback_years: Mapping[str, int]) -> Tuple[PlatformClass, int]:
    year = _match_xeon_year(name)
    if year == UNRESOLVED_YEAR:
        logger.debug(f"Unknown Xeon product line in '{name}', assuming a newer part")
        year = _fallback_year(fallback_years, VendorFamily.INTEL_XEON.value)
    return PlatformClass.DESKTOP, year


def _parse_intel_celeron(name: str, fallback_years: Mapping[str, int]) -> Tuple[PlatformClass, int]:
    match = CELERON_PATTERN.search(name)
    generation = _group(match, 1)
    sku = _group(match, 2)

    year = CELERON_GENERATION_YEARS.get(generation, UNRESOLVED_YEAR)
    if year == UNRESOLVED_YEAR:
        year = _fallback_year(fallback_years, VendorFamily.INTEL_CELERON.value)

    # Short SKUs (e.g. G530) predate the three-digit numbering
    if len(sku) <= CELERON_SHORT_SKU_LENGTH:
        year = CELERON_SHORT_SKU_YEAR

    return PlatformClass.DESKTOP, year


def _parse_amd_ryzen(name: str, fallback_years: Mapping[str, int]) -> Tuple[PlatformClass, int]:
    match = RYZEN_PATTERN.search(name)
    generation = _group(match, 2)
    suffix = _group(match, 3)

    platform = PlatformClass.MOBILE if suffix in RYZEN_MOBILE_SUFFIXES else PlatformClass.DESKTOP
    year = RYZEN_GENERATION_YEARS.get(generation, UNRESOLVED_YEAR)
    if year == UNRESOLVED_YEAR:
        logger.debug(f"Unknown Ryzen generation '{generation}' in '{name}', assuming a newer part")
        if len(generation) > RYZEN_EXTENDED_GENERATION_LENGTH:
            year = _fallback_year(fallback_years, "amd_ryzen_extended")
        else:
            year = _fallback_year(fallback_years, VendorFamily.AMD_RYZEN.value)

    return platform, year


def _parse_amd_epyc(name: str, fallback_years: Mapping[str, int]) -> Tuple[PlatformClass, int]:
    generation = _group(EPYC_PATTERN.search(name), 1)
    year = EPYC_GENERATION_YEARS.get(generation, UNRESOLVED_YEAR)
    if year == UNRESOLVED_YEAR:
        logger.debug(f"Unknown Epyc generation '{generation}' in '{name}', assuming a newer part")
        year = _fallback_year(fallback_years, VendorFamily.AMD_EPYC.value)
    return PlatformClass.DESKTOP, year


# Families with sub-model structure; every other family is a single bucket
# in LEGACY_FAMILY_MODELS
FAMILY_PARSERS = {
    VendorFamily.INTEL_CORE: _parse_intel_core,
    VendorFamily.INTEL_XEON: _parse_intel_xeon,
    VendorFamily.INTEL_CELERON: _parse_intel_celeron,
    VendorFamily.AMD_RYZEN: _parse_amd_ryzen,
    VendorFamily.AMD_EPYC: _parse_amd_epyc,
}


def parse_cpu_model(name: str, fallback_years: Optional[Mapping[str, int]] = None) -> ModelInfo:
    """
    Parse a CPU name string into family, platform and introduction year.

    Args:
        name: Raw CPU name as reported by the host (any casing, may be empty)
        fallback_years: Optional overrides for the per-family "assume newest"
            years, keyed like cpu_tables.FALLBACK_YEARS

    Returns:
        ModelInfo for a recognized family, UNRECOGNIZED otherwise
    """
    try:
        normalized = (name or "").lower()

        vendor = detect_vendor(normalized)
        if vendor is None:
            return UNRECOGNIZED

        normalized = normalize_cpu_name(normalized, vendor)
        family = detect_family(normalized, vendor)
        if family is None:
            logger.debug(f"No known {vendor} family in CPU name '{name}'")
            return UNRECOGNIZED

        parser = FAMILY_PARSERS.get(family)
        if parser is not None:
            platform, year = parser(normalized, fallback_years or FALLBACK_YEARS)
        else:
            platform, year = LEGACY_FAMILY_MODELS[family]

        return ModelInfo(family=family, platform=platform, introduction_year=year)

    except Exception as e:
        logger.debug(f"Failed to parse CPU name '{name}': {e}")
        return UNRECOGNIZED
