# tests/test_bulk_prompt_parser.py
from bulk_units.core.parse import NOTHING_PARSED, parse, parse_bulk_prompt, parse_segment
from bulk_units.schemas.labels import UnitType
from tests.utils import (
    PROMPT_ADD_UNITS,
    PROMPT_ALPHA_RANGE,
    PROMPT_MULTI_GROUP,
    PROMPT_SHARED_BEDS,
    PROMPT_STUDIO_RANGE,
)


def test_range_expands_to_studios_with_stated_details():
    res = parse(PROMPT_STUDIO_RANGE, False)

    assert res.errors == []
    assert res.identifiers == ["101", "102", "103", "104", "105"]
    for c in res.candidates:
        assert c.unit_type is UnitType.studio
        assert c.size == 500
        assert c.bathrooms == 1
        assert c.bedrooms == 0


def test_count_expands_from_one_with_type_defaults():
    res = parse(PROMPT_ADD_UNITS, False)

    assert res.errors == []
    assert res.identifiers == ["1", "2", "3"]
    assert all(c.unit_type is UnitType.studio and c.size == 450 for c in res.candidates)


def test_alpha_prefix_is_kept_on_every_identifier():
    res = parse(PROMPT_ALPHA_RANGE, False)

    assert res.identifiers == ["A1", "A2", "A3", "A4", "A5"]
    c = res.candidates[0]
    assert c.unit_type is UnitType.two_bhk
    assert (c.bedrooms, c.size, c.bathrooms) == (2, 900, 2)


def test_shared_beds_flagged_shared_without_washroom():
    res = parse(PROMPT_SHARED_BEDS, True)

    assert len(res.candidates) == 3
    assert all(c.is_shared for c in res.candidates)
    assert not any(c.independent_washroom for c in res.candidates)
    assert res.candidates[0].size == 120


def test_reversed_range_is_rejected():
    res = parse("150-101: studio", False)

    assert res.candidates == []
    assert any("Invalid range" in e for e in res.errors)
    assert res.errors == ["Invalid range: 150 to 101"]


def test_oversized_range_is_rejected():
    res = parse("1-2000: studio", False)

    assert res.candidates == []
    assert res.errors == ["Range too large (2000). Maximum 1,000 per batch."]


def test_bad_segment_does_not_sink_the_prompt():
    res = parse("101-105: studio; 9999999999-1: studio", False)

    assert res.identifiers == ["101", "102", "103", "104", "105"]
    assert res.errors == ["Invalid range: 9999999999 to 1"]


def test_regeneration_is_idempotent():
    a = parse(PROMPT_MULTI_GROUP, False)
    b = parse(PROMPT_MULTI_GROUP, False)

    assert a.model_dump() == b.model_dump()
    assert a.candidates[0] is not b.candidates[0]


def test_multi_group_concatenates_in_prompt_order():
    res = parse_bulk_prompt(PROMPT_MULTI_GROUP)

    assert res.identifiers == ["101", "102", "103", "104", "105", "151", "152", "A1", "A2"]
    assert res.candidates[5].unit_type is UnitType.one_bhk
    assert res.candidates[5].size == 650
    assert res.candidates[-1].bathrooms == 2


def test_empty_or_separator_only_prompt_reports_nothing_parsed():
    for prompt in ("", "   ", ";;\n ; "):
        res = parse(prompt, False)
        assert res.candidates == []
        assert res.errors == [NOTHING_PARSED]


def test_out_of_bounds_value_becomes_segment_error():
    res = parse("101-102: studio, 0 bath; 201-202: 1bhk", False)

    assert res.identifiers == ["201", "202"]
    assert len(res.errors) == 1
    assert res.errors[0].startswith('Could not parse: "101-102: studio, 0 bath')


def test_invalid_range_reported_before_attribute_bounds():
    res = parse("9-1: studio, 0 bath", False)

    assert res.candidates == []
    assert res.errors == ["Invalid range: 9 to 1"]


def test_parse_segment_collects_validation_failure():
    res = parse_segment("studio, 0 bath")

    assert res.candidates == []
    assert res.errors == ['Could not parse: "studio, 0 bath..."']


def test_grouped_thousands_size_is_read_whole():
    res = parse("301-302: 3-bed, 1,200 sq ft, 2 bath", False)

    assert res.identifiers == ["301", "302"]
    assert res.candidates[0].size == 1200
    assert res.candidates[0].unit_type is UnitType.three_bhk


def test_hyphenated_bath_count_is_read():
    res = parse("A1-A2: 2-bed, 900 sq ft, 2-bath", False)

    assert res.identifiers == ["A1", "A2"]
    assert all(c.bathrooms == 2 and c.bedrooms == 2 for c in res.candidates)


def test_segment_without_numbers_yields_single_unit_one():
    res = parse("studio, 500 sq ft", False)

    assert res.identifiers == ["1"]
    assert res.errors == []


def test_amenities_are_not_shared_between_generated_units():
    res = parse("101-102: 1bhk with balcony, parking", False)

    assert res.candidates[0].amenities == ["balcony", "parking"]
    res.candidates[0].amenities.append("gym")
    assert res.candidates[1].amenities == ["balcony", "parking"]
