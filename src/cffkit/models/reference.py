"""Bibliographic references and preferred citations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from cffkit.fields import (
    DEFAULT_SPEC_VERSION,
    REFERENCE_ACTOR_FIELDS,
    REFERENCE_DATE_FIELDS,
    REFERENCE_ENTITY_FIELDS,
    REFERENCE_FIELDS,
    REFERENCE_STATUS_TYPES,
    REFERENCE_TYPES,
)
from cffkit.models.actors import build_actor_collection
from cffkit.models.base import ModelPart, enum_value
from cffkit.models.citable import Citable
from cffkit.models.entity import Entity
from cffkit.models.identifier import build_identifiers, stamp_version
from cffkit.models.licensable import set_license
from cffkit.services.languages import LanguageLookup, get_language_lookup

if TYPE_CHECKING:
    from cffkit.models.index import Index

# Fields copied when citing a whole document as a reference.
DOCUMENT_FIELDS = (
    "abstract",
    "authors",
    "contact",
    "commit",
    "date-released",
    "doi",
    "identifiers",
    "keywords",
    "license",
    "license-url",
    "repository",
    "repository-artifact",
    "repository-code",
    "title",
    "url",
    "version",
)


class Reference(Citable, ModelPart):
    """A reference to other work: a paper, a book, a dataset, some software.

    ``Reference("Title", "article")`` creates a titled reference; an unknown
    or missing type falls back to ``generic``. Invalid ``type`` and
    ``status`` assignments are ignored. Entity-valued fields
    (``conference``, ``publisher``, ``institution``, ...) hold Entity
    objects and the actor collections hold Person or Entity objects.
    """

    kind = "reference"
    ALLOWED_FIELDS = REFERENCE_FIELDS
    COLLECTION_FIELDS = (*REFERENCE_ACTOR_FIELDS, "identifiers", "keywords", "patent-states")
    MODEL_COLLECTIONS = (*REFERENCE_ACTOR_FIELDS, "identifiers")
    DATE_FIELDS = REFERENCE_DATE_FIELDS
    SETTERS = {
        "languages": "_set_languages",
        "license": "_set_license",
        "status": "_set_status",
        "type": "_set_type",
    }
    # cff-version of the document holding this reference.
    _cff_version = DEFAULT_SPEC_VERSION

    def __init__(self, param: Mapping[str, Any] | str | None = None, type: str | None = None) -> None:
        if isinstance(param, Mapping):
            super().__init__(param)
            return
        super().__init__()
        candidate = enum_value(type)
        self._fields["type"] = candidate if candidate in REFERENCE_TYPES else "generic"
        self._fields["title"] = "" if param is None else param

    @classmethod
    def from_document(cls, document: Index, type: str = "software") -> Reference:
        """Create a Reference that cites ``document`` itself."""
        reference = cls(document.title, type)
        for field in DOCUMENT_FIELDS:
            value = document.raw(field)
            if isinstance(value, list):
                value = list(value)
            if value is not None and value != "":
                reference.store_raw(field, value)
        reference.use_version(str(document.raw("cff-version") or DEFAULT_SPEC_VERSION))
        return reference

    def use_version(self, cff_version: str) -> None:
        self._cff_version = cff_version
        stamp_version(self._fields.get("identifiers"), cff_version)

    # Languages ------------------------------------------------------------

    def add_language(self, language: str, lookup: LanguageLookup | None = None) -> None:
        """Add a language, converted to its ISO 639-3 code.

        ``GER`` becomes ``deu``, ``french`` becomes ``fra`` and ``en``
        becomes ``eng``. Unknown languages and duplicates are ignored.
        """
        code = (lookup or get_language_lookup()).lookup(language)
        if code is None:
            self._ignore("languages", language)
            return
        languages = self._fields.get("languages")
        if not isinstance(languages, list):
            languages = []
            self._fields["languages"] = languages
        if code not in languages:
            languages.append(code)

    def reset_languages(self) -> None:
        self._fields.pop("languages", None)

    @property
    def languages(self) -> list[str]:
        return list(self._fields.get("languages") or [])

    @languages.setter
    def languages(self, value: list[str]) -> None:
        self._set_languages(value)

    def get(self, field: str) -> Any:
        if self._check_field(field) == "languages":
            return self.languages
        return super().get(field)

    # Setters --------------------------------------------------------------

    def _set_languages(self, value: Any) -> None:
        self._fields["languages"] = [value] if isinstance(value, str) else list(value or [])

    def _set_type(self, value: Any) -> None:
        candidate = enum_value(value)
        if candidate in REFERENCE_TYPES:
            self._fields["type"] = candidate
        else:
            self._ignore("type", value)

    def _set_status(self, value: Any) -> None:
        candidate = enum_value(value)
        if candidate in REFERENCE_STATUS_TYPES:
            self._fields["status"] = candidate
        else:
            self._ignore("status", value)

    def _set_license(self, value: Any) -> None:
        set_license(self, value)

    def _promote(self, field: str, value: Any) -> Any:
        if field in REFERENCE_ACTOR_FIELDS:
            return build_actor_collection(value)
        if field in REFERENCE_ENTITY_FIELDS and isinstance(value, Mapping):
            return Entity(value)
        if field == "identifiers":
            return build_identifiers(value, self._cff_version)
        return value
