"""Classification of raw actor records into people and entities."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from cffkit.models.base import ModelPart
from cffkit.models.entity import Entity
from cffkit.models.person import Person

Actor = Person | Entity


def build_actor(source: Any) -> Any:
    """Promote one raw actor record.

    A mapping with a ``name`` key is an Entity, any other mapping a Person.
    Model parts and non-mapping values are returned unchanged.
    """
    if isinstance(source, ModelPart) or not isinstance(source, Mapping):
        return source
    return Entity(source) if "name" in source else Person(source)


def build_actor_collection(source: Iterable[Any] | None) -> Any:
    if not isinstance(source, (list, tuple)):
        return source
    return [build_actor(item) for item in source]
