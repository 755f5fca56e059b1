# bulk_units/schemas/labels.py
from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from re import Pattern

# =========================
# Canonical label enums
# =========================


class UnitType(str, Enum):
    """Bedroom-count category of a unit. Drives default size and bedroom inference."""

    studio = "studio"
    one_bhk = "1bhk"
    two_bhk = "2bhk"
    three_bhk = "3bhk"
    four_bhk = "4bhk"


class PropertyType(str, Enum):
    single_family = "single_family"
    multi_family = "multi_family"
    student_housing = "student_housing"
    affordable_single = "affordable_single"
    affordable_multi = "affordable_multi"
    commercial = "commercial"


# =========================
# Display labels & defaults
# =========================

UNIT_TYPE_LABELS: Mapping[UnitType, str] = {
    UnitType.studio: "Studio",
    UnitType.one_bhk: "1 BHK",
    UnitType.two_bhk: "2 BHK",
    UnitType.three_bhk: "3 BHK",
    UnitType.four_bhk: "4 BHK",
}

PROPERTY_TYPE_LABELS: Mapping[PropertyType, str] = {
    PropertyType.single_family: "Single Family",
    PropertyType.multi_family: "Multi-Family Housing",
    PropertyType.student_housing: "Student Housing",
    PropertyType.affordable_single: "Affordable Housing - Single Family",
    PropertyType.affordable_multi: "Affordable Housing - Multi-Family",
    PropertyType.commercial: "Commercial",
}

# Square feet assumed when a segment states no size
DEFAULT_SIZE_BY_TYPE: Mapping[UnitType, int] = {
    UnitType.studio: 450,
    UnitType.one_bhk: 600,
    UnitType.two_bhk: 850,
    UnitType.three_bhk: 1100,
    UnitType.four_bhk: 1400,
}

_UNIT_HOSTING_TYPES = frozenset(
    {
        PropertyType.multi_family,
        PropertyType.affordable_multi,
        PropertyType.student_housing,
    }
)

# =========================
# Unit-type phrase patterns
# =========================

# Most specific first: a "4-bed" must win over anything smaller. The digit may not
# follow another digit, so "24-bed" is not read as "4-bed".
UNIT_TYPE_PATTERNS: tuple[tuple[UnitType, Pattern[str]], ...] = (
    (UnitType.four_bhk, re.compile(r"(?i)(?<![\w.])4[\s-]?b(?:ed|hk|r)\b")),
    (UnitType.three_bhk, re.compile(r"(?i)(?<![\w.])3[\s-]?b(?:ed|hk|r)\b")),
    (UnitType.two_bhk, re.compile(r"(?i)(?<![\w.])2[\s-]?b(?:ed|hk|r)\b")),
    (UnitType.one_bhk, re.compile(r"(?i)(?<![\w.])1[\s-]?b(?:ed|hk|r)\b")),
    (UnitType.studio, re.compile(r"(?i)\bstudio\b")),
)

# =========================
# Helpers
# =========================


def detect_unit_type(text: str) -> UnitType | None:
    """Return the first unit type whose phrase appears in text, checked most specific first."""
    for unit_type, pattern in UNIT_TYPE_PATTERNS:
        if pattern.search(text):
            return unit_type
    return None


def default_bedrooms(unit_type: UnitType) -> int:
    """studio → 0; otherwise the leading digit of the type code."""
    if unit_type is UnitType.studio:
        return 0
    return int(unit_type.value[0])


def default_size(unit_type: UnitType) -> int:
    return DEFAULT_SIZE_BY_TYPE[unit_type]


def unit_type_label(unit_type: UnitType | str) -> str:
    try:
        return UNIT_TYPE_LABELS[UnitType(unit_type)]
    except ValueError:
        return str(unit_type)


def needs_units(property_type: PropertyType | str) -> bool:
    """Only multi-unit property types host a unit/bed list."""
    try:
        return PropertyType(property_type) in _UNIT_HOSTING_TYPES
    except ValueError:
        return False


def is_shared_occupancy(property_type: PropertyType | str) -> bool:
    """Student housing is set up bed-by-bed, everything else unit-by-unit."""
    try:
        return PropertyType(property_type) is PropertyType.student_housing
    except ValueError:
        return False


__all__ = [
    "UnitType",
    "PropertyType",
    "UNIT_TYPE_LABELS",
    "PROPERTY_TYPE_LABELS",
    "DEFAULT_SIZE_BY_TYPE",
    "UNIT_TYPE_PATTERNS",
    "detect_unit_type",
    "default_bedrooms",
    "default_size",
    "unit_type_label",
    "needs_units",
    "is_shared_occupancy",
]
