import pytest

from conftest import SCHEMA_DIRECT
from jsonschemac.errors import CycleDetectedError, UnresolvedReferenceError
from jsonschemac.helpers.ref import resolve_ref, resolve_ref_chain
from jsonschemac.schema import Kind, parse


def test_non_reference_is_returned_unchanged(movie_index):
    movie = movie_index["#/definitions/movie"]
    assert resolve_ref(movie, movie_index) is movie


def test_reference_resolves_to_target(movie_index):
    categories = movie_index["#/definitions/movie/properties/categories"]
    resolved = resolve_ref(categories, movie_index)
    assert resolved is movie_index["#/definitions/categories"]
    assert resolved.kind is Kind.ARRAY


def test_resolve_is_idempotent(movie_index):
    categories = movie_index["#/definitions/movie/properties/categories"]
    once = resolve_ref(categories, movie_index)
    assert resolve_ref(once, movie_index) is once


def test_unresolved_reference():
    idx = parse(SCHEMA_DIRECT)
    with pytest.raises(UnresolvedReferenceError) as exc_info:
        resolve_ref(idx["#/properties/categories"], idx)
    assert exc_info.value.pointer == "#/properties/categories"
    assert exc_info.value.target == "#/definitions/categories"
    assert "#/definitions/categories" in str(exc_info.value)


def test_reference_to_root_is_unresolved():
    idx = parse('{"definitions": {"me": {"$ref": "#"}}}')
    with pytest.raises(UnresolvedReferenceError):
        resolve_ref(idx["#/definitions/me"], idx)


def test_resolve_is_one_hop():
    idx = parse(
        '{"definitions": {"a": {"$ref": "#/definitions/b"}, "b": {"$ref": "#/definitions/c"},'
        ' "c": {"type": "string"}}}'
    )
    assert resolve_ref(idx["#/definitions/a"], idx) is idx["#/definitions/b"]
    assert resolve_ref_chain(idx["#/definitions/a"], idx) is idx["#/definitions/c"]


def test_reference_cycle():
    idx = parse('{"definitions": {"a": {"$ref": "#/definitions/b"}, "b": {"$ref": "#/definitions/a"}}}')
    # a single hop never loops
    assert resolve_ref(idx["#/definitions/a"], idx) is idx["#/definitions/b"]
    with pytest.raises(CycleDetectedError) as exc_info:
        resolve_ref_chain(idx["#/definitions/a"], idx)
    assert exc_info.value.pointer == "#/definitions/a"
    assert exc_info.value.chain == ("#/definitions/a", "#/definitions/b")
