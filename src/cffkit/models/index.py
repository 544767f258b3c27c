"""The top-level CITATION.cff document."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import yaml

from cffkit.fields import (
    DEFAULT_MESSAGE,
    DEFAULT_SPEC_VERSION,
    INDEX_COLLECTION_FIELDS,
    INDEX_FIELDS,
    MIN_VALIDATABLE_VERSION,
    MODEL_TYPES,
)
from cffkit.models.actors import build_actor_collection
from cffkit.models.base import ModelPart, enum_value
from cffkit.models.citable import Citable
from cffkit.models.identifier import build_identifiers, stamp_version
from cffkit.models.licensable import set_license
from cffkit.models.reference import Reference
from cffkit.utils import update_cff_version

if TYPE_CHECKING:
    from cffkit.validation import ValidationResult, Validator


def _build_references(source: Any, cff_version: str) -> Any:
    if not isinstance(source, (list, tuple)):
        return source
    references = [Reference(item) if isinstance(item, Mapping) else item for item in source]
    for reference in references:
        if isinstance(reference, Reference):
            reference.use_version(cff_version)
    return references


class Index(Citable, ModelPart):
    """The core data structure of a CITATION.cff file.

    ``Index("My software")`` starts a new document with the default
    ``cff-version`` and ``message``; ``Index(mapping)`` wraps an already
    parsed document, promoting nested authors, identifiers and references
    into model objects. A field that has not been set reads as ``''``, and
    ``authors``, ``contact``, ``identifiers``, ``keywords`` and
    ``references`` are always lists. ``date_released`` is a ``date``.
    """

    kind = "index"
    ALLOWED_FIELDS = INDEX_FIELDS
    COLLECTION_FIELDS = INDEX_COLLECTION_FIELDS
    MODEL_COLLECTIONS = ("authors", "contact", "identifiers", "references")
    DATE_FIELDS = ("date-released",)
    SETTERS = {"cff-version": "_set_cff_version", "license": "_set_license", "type": "_set_type"}

    def __init__(self, param: Mapping[str, Any] | str | None = None) -> None:
        if isinstance(param, Mapping):
            super().__init__(param)
            # Only update the version if one was given.
            version = self._fields.get("cff-version")
            if version:
                self._fields["cff-version"] = update_cff_version(str(version), MIN_VALIDATABLE_VERSION)
        else:
            super().__init__()
            self._fields["cff-version"] = DEFAULT_SPEC_VERSION
            self._fields["message"] = DEFAULT_MESSAGE
            self._fields["title"] = "" if param is None else param

        for field in INDEX_COLLECTION_FIELDS:
            self._collection(field)
        self._stamp_version()

    @classmethod
    def read(cls, text: str) -> Index:
        """Parse CITATION.cff YAML text into an Index."""
        return cls(yaml.safe_load(text) or {})

    def to_yaml(self) -> str:
        return yaml.safe_dump(
            self.to_fields(), sort_keys=False, allow_unicode=True, width=float("inf")
        )

    # Validation -----------------------------------------------------------

    def validate(
        self,
        fail_fast: bool = False,
        validate_as: str | None = None,
        validator: Validator | None = None,
    ) -> ValidationResult:
        """Validate against the CFF schema and return ``(ok, errors)``."""
        from cffkit.validation import get_default_validator

        validator = validator or get_default_validator()
        return validator.validate(self, fail_fast=fail_fast, validate_as=validate_as)

    def validate_or_raise(
        self,
        fail_fast: bool = False,
        validate_as: str | None = None,
        validator: Validator | None = None,
    ) -> None:
        """Validate and raise ``ValidationError`` listing the failures."""
        self.validate(fail_fast=fail_fast, validate_as=validate_as, validator=validator).raise_for_errors()

    # Setters --------------------------------------------------------------

    def _set_type(self, value: Any) -> None:
        candidate = enum_value(value)
        if candidate in MODEL_TYPES:
            self._fields["type"] = candidate
        else:
            self._ignore("type", value)

    def _set_cff_version(self, value: Any) -> None:
        self._fields["cff-version"] = "" if value is None else str(value)
        self._stamp_version()

    def _set_license(self, value: Any) -> None:
        set_license(self, value)

    def _stamp_version(self) -> None:
        """Pass the document's ``cff-version`` on to its identifiers and references."""
        version = str(self._fields.get("cff-version") or DEFAULT_SPEC_VERSION)
        stamp_version(self._fields.get("identifiers"), version)
        references = self._fields.get("references")
        preferred = self._fields.get("preferred-citation")
        for reference in [*(references if isinstance(references, list) else []), preferred]:
            if isinstance(reference, Reference):
                reference.use_version(version)

    def _promote(self, field: str, value: Any) -> Any:
        if field in ("authors", "contact"):
            return build_actor_collection(value)
        version = str(self._fields.get("cff-version") or DEFAULT_SPEC_VERSION)
        if field == "identifiers":
            return build_identifiers(value, version)
        if field == "references":
            return _build_references(value, version)
        if field == "preferred-citation" and isinstance(value, Mapping):
            reference = Reference(value)
            reference.use_version(version)
            return reference
        return value
