# tests/unit/test_labels.py
import pytest

from bulk_units.schemas.labels import (
    DEFAULT_SIZE_BY_TYPE,
    PropertyType,
    UnitType,
    default_bedrooms,
    default_size,
    is_shared_occupancy,
    needs_units,
    unit_type_label,
)


@pytest.mark.parametrize(
    "unit_type, size, beds",
    [
        (UnitType.studio, 450, 0),
        (UnitType.one_bhk, 600, 1),
        (UnitType.two_bhk, 850, 2),
        (UnitType.three_bhk, 1100, 3),
        (UnitType.four_bhk, 1400, 4),
    ],
)
def test_type_defaults(unit_type, size, beds):
    assert default_size(unit_type) == size
    assert default_bedrooms(unit_type) == beds


def test_every_type_has_a_default_size():
    assert set(DEFAULT_SIZE_BY_TYPE) == set(UnitType)


def test_unit_type_label():
    assert unit_type_label(UnitType.two_bhk) == "2 BHK"
    assert unit_type_label("studio") == "Studio"
    assert unit_type_label("penthouse") == "penthouse"


def test_property_type_helpers():
    assert needs_units(PropertyType.multi_family)
    assert needs_units("student_housing")
    assert not needs_units(PropertyType.single_family)
    assert not needs_units("castle")
    assert is_shared_occupancy(PropertyType.student_housing)
    assert not is_shared_occupancy(PropertyType.affordable_multi)
