"""Typed identifiers (DOI, URL, Software Heritage, other)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cffkit.fields import (
    DEFAULT_SPEC_VERSION,
    IDENTIFIER_FIELDS,
    IDENTIFIER_RELATIONS,
    IDENTIFIER_TYPES,
    RELATION_MIN_VERSION,
)
from cffkit.models.base import ModelPart, enum_value
from cffkit.utils import version_tuple


def supports_relation(cff_version: str) -> bool:
    """Whether identifiers may carry a ``relation`` under ``cff_version``."""
    current = version_tuple(cff_version)
    return current is not None and current >= version_tuple(RELATION_MIN_VERSION)


class Identifier(ModelPart):
    """An identifier with a ``type``, ``value`` and ``description``.

    ``Identifier("doi", "10.5281/zenodo.1184077")`` sets the type and value;
    if the type is not one of ``IDENTIFIER_TYPES`` neither is set. A
    ``relation`` is only accepted once the identifier belongs to a document
    of ``cff-version`` 1.3.0 or later.
    """

    kind = "identifier"
    ALLOWED_FIELDS = IDENTIFIER_FIELDS
    SETTERS = {"type": "_set_type", "relation": "_set_relation"}

    def __init__(
        self,
        param: Mapping[str, Any] | str | None = None,
        value: str | None = None,
        cff_version: str = DEFAULT_SPEC_VERSION,
    ) -> None:
        self._cff_version = cff_version
        if isinstance(param, Mapping):
            super().__init__(param)
            return
        super().__init__()
        if param is not None:
            self._set_type(param)
            if "type" in self._fields and value is not None:
                self._fields["value"] = value

    def use_version(self, cff_version: str) -> None:
        self._cff_version = cff_version

    def _set_type(self, value: Any) -> None:
        candidate = enum_value(value)
        if candidate in IDENTIFIER_TYPES:
            self._fields["type"] = candidate
        else:
            self._ignore("type", value)

    def _set_relation(self, value: Any) -> None:
        candidate = enum_value(value)
        if candidate in IDENTIFIER_RELATIONS and supports_relation(self._cff_version):
            self._fields["relation"] = candidate
        else:
            self._ignore("relation", value)


def build_identifiers(source: Any, cff_version: str = DEFAULT_SPEC_VERSION) -> Any:
    if not isinstance(source, (list, tuple)):
        return source
    return [
        Identifier(item, cff_version=cff_version) if isinstance(item, Mapping) else item
        for item in (source or [])
    ]


def stamp_version(identifiers: Any, cff_version: str) -> None:
    """Tell every Identifier in ``identifiers`` which version it belongs to."""
    for identifier in identifiers if isinstance(identifiers, list) else []:
        if isinstance(identifier, Identifier):
            identifier.use_version(cff_version)
