# tests/unit/test_duplicates.py
from bulk_units.core.duplicates import find_duplicates
from tests import make_candidates


def test_existing_collision_and_repeat_are_flagged():
    cands = make_candidates("101", "102", "101")
    assert find_duplicates(cands, ["101"]) == {0, 2}


def test_first_in_batch_occurrence_not_flagged():
    cands = make_candidates("A1", "a1", "A2", "A1")
    assert find_duplicates(cands) == {1, 3}


def test_comparison_ignores_case_and_surrounding_space():
    cands = make_candidates("bed 1", " Bed 2 ")
    assert find_duplicates(cands, ["BED 1", "bed 2"]) == {0, 1}


def test_no_duplicates():
    assert find_duplicates(make_candidates("1", "2", "3"), ["4"]) == set()
    assert find_duplicates([], ["1"]) == set()
