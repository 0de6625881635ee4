"""Unit tests for the pure filter/search view."""

from hr_admin.application.services.record_filter import (
    ALL,
    facet_options,
    filter_entities,
)
from hr_admin.domain.entities import EmployeeStatus

PEOPLE = [
    {"name": "Alice", "dept": "HR"},
    {"name": "Bob", "dept": "IT"},
]


def test_query_is_case_insensitive_substring():
    assert filter_entities(PEOPLE, "ali", searchable=["name", "dept"]) == [{"name": "Alice", "dept": "HR"}]


def test_facet_is_exact_match():
    assert filter_entities(PEOPLE, facets={"dept": "IT"}, searchable=["name"]) == [{"name": "Bob", "dept": "IT"}]


def test_all_sentinel_disables_facet():
    assert filter_entities(PEOPLE, facets={"dept": ALL}) == PEOPLE


def test_blank_query_matches_everything():
    assert filter_entities(PEOPLE, "   ", searchable=["name"]) == PEOPLE


def test_query_only_looks_at_searchable_fields():
    assert filter_entities(PEOPLE, "hr", searchable=["name"]) == []


def test_facet_does_not_match_substrings():
    assert filter_entities(PEOPLE, facets={"dept": "H"}) == []


def test_case_insensitive_facet():
    docs = [{"type": "resume"}, {"type": "offer"}]
    result = filter_entities(docs, facets={"type": "RESUME"}, case_insensitive=["type"])
    assert result == [{"type": "resume"}]


def test_query_and_facets_combine():
    people = [*PEOPLE, {"name": "Alina", "dept": "IT"}]
    assert filter_entities(people, "ali", {"dept": "IT"}, searchable=["name"]) == [{"name": "Alina", "dept": "IT"}]


def test_original_order_and_input_preserved():
    people = [{"name": n, "dept": "IT"} for n in ["Zed", "Amy", "Max"]]
    snapshot = list(people)
    assert [p["name"] for p in filter_entities(people, facets={"dept": "IT"})] == ["Zed", "Amy", "Max"]
    assert people == snapshot


def test_enum_values_are_compared_by_value():
    class Row:
        def __init__(self, status):
            self.status = status

    rows = [Row(EmployeeStatus.ACTIVE), Row(EmployeeStatus.JOINING)]
    assert filter_entities(rows, facets={"status": "Joining"}) == [rows[1]]


def test_facet_options_are_distinct_in_first_seen_order():
    people = [*PEOPLE, {"name": "Cy", "dept": "HR"}, {"name": "Di", "dept": ""}]
    assert facet_options(people, "dept") == [ALL, "HR", "IT"]
