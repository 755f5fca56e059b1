# tests/utils.py
"""
Single source of truth for test data, factories, and canonical prompts.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from typing import Any

from bulk_units.inputs.inputs import BulkSetupConfig
from bulk_units.schemas.labels import UnitType
from bulk_units.schemas.models import BulkUnitCandidate, PropertyUnit, UnitAttributes

# -----------------------------
# Canonical prompts
# -----------------------------

PROMPT_STUDIO_RANGE = "101-105: studio, 500 sq ft, 1 bath"
PROMPT_ADD_UNITS = "add 3 units"
PROMPT_ALPHA_RANGE = "A1-A5: 2-bed, 900 sq ft, 2 bath"
PROMPT_SHARED_BEDS = "Bed 1-3: shared, 120 sq ft, 1 bath"
PROMPT_MULTI_GROUP = "101-105: studio, 500 sq ft, 1 bath\n151-152: 1-bed, 650 sq ft, 1 bath; A1-A2: 2-bed, 900 sq ft, 2 bath"


# -----------------------------
# Factories
# -----------------------------


def make_attributes(**overrides: Any) -> UnitAttributes:
    data: dict[str, Any] = {
        "size": 450,
        "unit_type": UnitType.studio,
        "bedrooms": 0,
        "bathrooms": 1,
    }
    data.update(overrides)
    return UnitAttributes(**data)


def make_candidate(identifier: str = "101", **overrides: Any) -> BulkUnitCandidate:
    data: dict[str, Any] = {
        "identifier": identifier,
        "size": 450,
        "unit_type": UnitType.studio,
        "bedrooms": 0,
        "bathrooms": 1,
    }
    data.update(overrides)
    return BulkUnitCandidate(**data)


def make_candidates(*identifiers: str) -> list[BulkUnitCandidate]:
    return [make_candidate(i) for i in identifiers]


def make_property_unit(unit_number: str, unit_id: str | None = None, **overrides: Any) -> PropertyUnit:
    data: dict[str, Any] = {
        "id": unit_id or f"u-{unit_number}",
        "unit_number": unit_number,
        "size": 450,
        "bedrooms": 0,
        "bathrooms": 1,
    }
    data.update(overrides)
    return PropertyUnit(**data)


def make_config(**overrides: Any) -> BulkSetupConfig:
    return BulkSetupConfig(**overrides)


def sequential_ids(prefix: str = "id-") -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"
