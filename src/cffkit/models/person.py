"""People who can be authors, contacts, editors and so on."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cffkit.fields import PERSON_FIELDS
from cffkit.models.base import ModelPart


class Person(ModelPart):
    """A human actor in a CITATION.cff file.

    ``Person("Robert", "Haines")`` sets the given and family names; a
    mapping of raw fields may be passed instead.
    """

    kind = "person"
    ALLOWED_FIELDS = PERSON_FIELDS

    def __init__(
        self,
        param: Mapping[str, Any] | str | None = None,
        family_names: str | None = None,
    ) -> None:
        if isinstance(param, Mapping):
            super().__init__(param)
            return
        super().__init__()
        if param is not None:
            self._fields["given-names"] = param
        if family_names is not None:
            self._fields["family-names"] = family_names
