import pytest
from pulumi.errors import InputPropertyError

from pulumi_cognito import ResourceServerStateError, Scope, expand_scopes, flatten_scopes, scope_identifiers
from pulumi_cognito.scopes import MAX_SCOPES, validate_scopes


def test_expand_scopes():
    scopes = [
        Scope("read", "Read access"),
        {"scope_name": "write", "scope_description": "Write access"},
    ]
    assert expand_scopes(scopes) == [
        {"ScopeName": "read", "ScopeDescription": "Read access"},
        {"ScopeName": "write", "ScopeDescription": "Write access"},
    ]


def test_expand_empty():
    assert expand_scopes([]) == []


def test_expand_missing_key():
    with pytest.raises(InputPropertyError) as exc_info:
        expand_scopes([{"scope_name": "read"}])
    assert exc_info.value.property_path == "scope.scope_description"


def test_flatten_keeps_order():
    wire = [
        {"ScopeName": "write", "ScopeDescription": "Write access"},
        {"ScopeName": "read", "ScopeDescription": "Read access"},
    ]
    assert flatten_scopes(wire) == [Scope("write", "Write access"), Scope("read", "Read access")]


def test_flatten_none():
    assert flatten_scopes(None) == []


def test_flatten_incomplete_entry():
    with pytest.raises(ResourceServerStateError):
        flatten_scopes([{"ScopeName": "read"}])


@pytest.mark.parametrize("count", [0, 1, 17, MAX_SCOPES])
def test_flatten_expand_is_set_equal(count):
    scopes = {Scope(f"scope-{i}", "d" * (1 + i * 255 // max(count, 1))) for i in range(count)}
    assert set(flatten_scopes(expand_scopes(scopes))) == scopes


def test_scope_identifiers():
    scopes = [Scope("read", "Read access"), Scope("write", "Write access")]
    assert scope_identifiers("myapi", scopes) == ["myapi/read", "myapi/write"]


def test_scope_is_hashable_value():
    assert {Scope("read", "Read access"), Scope("read", "Read access")} == {Scope("read", "Read access")}
    assert Scope.from_input({"scope_name": "a", "scope_description": "b"}).to_dict() == \
        {"scope_name": "a", "scope_description": "b"}


def test_validate_valid():
    assert validate_scopes([
        Scope("read", "Read access"),
        {"scope_name": "orders.write", "scope_description": "x" * 256},
    ]) == []


def test_validate_too_many():
    scopes = [Scope(f"s{i}", "d") for i in range(MAX_SCOPES + 1)]
    assert validate_scopes(scopes) == [("scope", "at most 100 scopes are allowed, got 101")]


@pytest.mark.parametrize("description", ["", "x" * 257])
def test_validate_description_length(description):
    failures = validate_scopes([Scope("read", description)])
    assert len(failures) == 1
    assert failures[0][0] == "scope"
    assert "scope_description must be between 1 and 256 characters" in failures[0][1]


@pytest.mark.parametrize("name", ["", "has space", "a/b", 'quote"', "back\\slash", "x" * 257])
def test_validate_bad_name(name):
    failures = validate_scopes([Scope(name, "d")])
    assert len(failures) == 1
    assert "scope_name" in failures[0][1]


def test_validate_duplicate_names():
    failures = validate_scopes([Scope("read", "one"), Scope("read", "two")])
    assert failures == [("scope", "duplicate scope_name 'read'")]


def test_validate_missing_fields():
    failures = validate_scopes([{}])
    assert failures == [("scope", "scope_name is required"), ("scope", "scope_description is required")]
