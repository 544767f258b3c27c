import json

import pytest

from cffkit.errors import ValidationError
from cffkit.models import Index, Person
from cffkit.validation import SchemaRegistry, ValidationIssue, Validator, build_schema_registry

TINY_SCHEMA = {
    "type": "object",
    "required": ["title", "version"],
    "properties": {"title": {"type": "string"}, "version": {"type": "string"}},
}


def _valid_index() -> Index:
    index = Index("My Software")
    index.authors.append(Person("Robert", "Haines"))
    return index


def test_default_schema_accepts_minimal_document() -> None:
    ok, errors = _valid_index().validate()
    assert ok
    assert errors == []


def test_default_schema_requires_authors() -> None:
    result = Index("My Software").validate()
    assert not result.ok
    assert result.version == "1.2.0"
    assert any(error.keyword == "required" and "authors" in error.message for error in result.errors)


def test_fail_fast_stops_at_first_error() -> None:
    index = Index({"title": 42, "cff-version": "1.2.0"})
    ok, errors = index.validate()
    assert not ok
    assert len(errors) > 1

    ok, errors = index.validate(fail_fast=True)
    assert not ok
    assert len(errors) == 1


def test_nested_errors_carry_a_path() -> None:
    index = _valid_index()
    index.authors[0].country = "United Kingdom"
    ok, errors = index.validate()
    assert not ok
    assert errors[0].path[:2] == ("authors", 0)
    assert errors[0].location.startswith("authors/0")


def test_validate_or_raise() -> None:
    _valid_index().validate_or_raise()
    with pytest.raises(ValidationError) as excinfo:
        Index("My Software").validate_or_raise()
    assert "authors" in str(excinfo.value)
    assert excinfo.value.errors


def test_injected_registry_and_validate_as() -> None:
    registry = SchemaRegistry({"tiny": TINY_SCHEMA})
    validator = Validator(registry)
    index = Index("My Software")

    result = index.validate(validate_as="tiny", validator=validator)
    assert result.version == "tiny"
    assert [issue.keyword for issue in result.errors] == ["required"]

    index.version = "1.0"
    assert index.validate(validate_as="tiny", validator=validator).ok


def test_unknown_version_without_default_schema() -> None:
    validator = Validator(SchemaRegistry({"tiny": TINY_SCHEMA}))
    with pytest.raises(LookupError):
        validator.validate(Index("My Software"))


def test_schema_directory_is_loaded(tmp_path) -> None:
    (tmp_path / "9.9.9.json").write_text(json.dumps(TINY_SCHEMA), encoding="utf-8")
    registry = build_schema_registry(tmp_path)
    assert "1.2.0" in registry
    assert "9.9.9" in registry
    assert registry.resolve(None, "unknown") == "1.2.0"


def test_issue_rendering() -> None:
    issue = ValidationIssue(message="'x' is bad", path=("authors", 0, "email"), keyword="pattern")
    assert str(issue) == "authors/0/email: 'x' is bad"
    assert ValidationIssue(message="root").location == "#"


def test_license_must_be_an_spdx_identifier() -> None:
    fields = {
        "cff-version": "1.2.0",
        "message": "Cite me",
        "title": "My Software",
        "authors": [{"family-names": "Haines", "given-names": "Robert"}],
    }
    assert Index({**fields, "license": "MIT"}).validate().ok
    assert Index({**fields, "license": ["MIT", "Apache-2.0"]}).validate().ok

    ok, errors = Index({**fields, "license": "Not-A-License"}).validate()
    assert not ok
    assert errors[0].location == "license"


def test_bundled_schemas_enumerate_spdx_licenses() -> None:
    registry = build_schema_registry()
    assert registry.versions() == ["1.2.0", "1.3.0"]
    for version in registry.versions():
        licenses = registry.validator_for(version).schema["definitions"]["license-enum"]["enum"]
        assert "MIT" in licenses
        assert "Not-A-License" not in licenses
