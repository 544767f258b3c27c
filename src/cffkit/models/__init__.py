"""The CITATION.cff document model."""

from .actors import Actor, build_actor, build_actor_collection
from .base import ModelPart, parse_date
from .entity import Entity
from .identifier import Identifier
from .index import Index
from .person import Person
from .reference import Reference

__all__ = [
    "Actor",
    "Entity",
    "Identifier",
    "Index",
    "ModelPart",
    "Person",
    "Reference",
    "build_actor",
    "build_actor_collection",
    "parse_date",
]
