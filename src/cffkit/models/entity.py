"""Non-human actors: organisations, conferences, publishers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cffkit.fields import ENTITY_FIELDS
from cffkit.models.base import ModelPart


class Entity(ModelPart):
    """An organisation, venue or event. ``date_start`` and ``date_end`` are dates."""

    kind = "entity"
    ALLOWED_FIELDS = ENTITY_FIELDS
    DATE_FIELDS = ("date-end", "date-start")

    def __init__(self, param: Mapping[str, Any] | str | None = None) -> None:
        if isinstance(param, Mapping):
            super().__init__(param)
            return
        super().__init__()
        if param is not None:
            self._fields["name"] = param
