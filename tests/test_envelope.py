import pytest

from conftest import envelope
from core.envelope import empty, wrap
from core.errors import SchemaValidationError
from core.models import Character, Issue, Movie, SearchResult


def test_empty_is_the_canonical_zero_result_envelope():
    expected = {
        "status_code": 1,
        "error": "OK",
        "number_of_total_results": 0,
        "number_of_page_results": 0,
        "limit": 10,
        "offset": 0,
        "results": [],
    }
    assert empty(10, 0) == expected
    assert empty(10, 0) == expected
    assert empty(10, 0) is not empty(10, 0)


def test_empty_defaults_limit_and_offset():
    assert empty()["limit"] == 20
    assert empty()["offset"] == 0


def test_wrap_fills_missing_counters_from_results():
    wrapped = wrap(Character, {"results": [{"id": 1, "name": "Batman"}, {"id": 2, "name": "Robin"}]})

    assert wrapped == {
        "status_code": 1,
        "error": "OK",
        "number_of_total_results": 2,
        "number_of_page_results": 2,
        "limit": 20,
        "offset": 0,
        "results": [{"id": 1, "name": "Batman"}, {"id": 2, "name": "Robin"}],
    }


def test_wrap_keeps_upstream_counters():
    wrapped = wrap(Issue, envelope([{"id": 6}], number_of_total_results=900, limit=1, offset=5))

    assert wrapped["number_of_total_results"] == 900
    assert wrapped["number_of_page_results"] == 1
    assert wrapped["limit"] == 1
    assert wrapped["offset"] == 5


def test_wrap_single_record_counts_one():
    wrapped = wrap(Movie, {"results": {"id": 3, "name": "Man of Steel"}}, many=False)

    assert wrapped["number_of_total_results"] == 1
    assert wrapped["number_of_page_results"] == 1
    assert wrapped["results"] == {"id": 3, "name": "Man of Steel"}


def test_wrap_turns_a_bare_object_into_a_list():
    wrapped = wrap(Movie, {"results": {"id": 3, "name": "Man of Steel"}})

    assert wrapped["results"] == [{"id": 3, "name": "Man of Steel"}]
    assert wrapped["number_of_total_results"] == 1


def test_wrap_drops_nulls_and_keeps_unknown_fields():
    wrapped = wrap(Character, {"results": [{"id": 1, "deck": None, "first_appeared_in_issue": {"id": 9}, "zodiac": "Leo"}]})

    assert wrapped["results"] == [{"id": 1, "first_appeared_in_issue": {"id": 9}, "zodiac": "Leo"}]


def test_wrap_never_invents_an_id():
    wrapped = wrap(SearchResult, {"results": [{"name": "Gotham", "resource_type": "location"}]})

    assert "id" not in wrapped["results"][0]


def test_search_result_null_name_becomes_empty_string():
    wrapped = wrap(SearchResult, {"results": [{"name": None, "id": 1}]})

    assert wrapped["results"] == [{"name": "", "id": 1}]


def test_wrapped_envelope_revalidates_to_itself():
    raw = envelope(
        [
            {
                "id": 1699,
                "name": "Batman",
                "real_name": "Bruce Wayne",
                "image": {"super_url": "https://img/1.jpg", "tiny_url": None},
                "movies": [{"id": 1, "name": "Batman Begins"}],
                "origin": {"id": 4, "name": "Human"},
                "gender": 1,
                "deck": None,
            }
        ]
    )
    once = wrap(Character, raw)

    assert wrap(Character, once) == once


def test_wrap_rejects_wrong_types_and_names_the_field():
    with pytest.raises(SchemaValidationError) as excinfo:
        wrap(Issue, {"results": [{"id": "not-a-number"}]})

    assert excinfo.value.fields == ["results.0.id"]


def test_wrap_rejects_a_list_for_a_single_record():
    with pytest.raises(SchemaValidationError):
        wrap(Character, {"status_code": 101, "error": "Object Not Found", "results": []}, many=False)


def test_wrap_rejects_bad_counters():
    with pytest.raises(SchemaValidationError) as excinfo:
        wrap(Issue, {"limit": "lots", "results": []})

    assert excinfo.value.fields == ["limit"]


def test_wrap_rejects_non_object_payload():
    with pytest.raises(SchemaValidationError):
        wrap(Issue, ["not", "an", "envelope"])
