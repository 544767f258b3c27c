"""Behaviour shared by every citation formatter."""

from __future__ import annotations

from datetime import date
from typing import Any, ClassVar, Protocol, runtime_checkable

import structlog

from cffkit.utils import is_empty

logger = structlog.get_logger(__name__)

ACTOR_KINDS = ("person", "entity")


@runtime_checkable
class CitationFormatter(Protocol):
    """Protocol for formatters held by the registry."""

    label: str

    def format(self, model: Any, *, preferred_citation: bool = True, **options: Any) -> str | None:
        ...


def field(model: Any, name: str) -> Any:
    """Read ``name`` from ``model``, or ``''`` if the model has no such field."""
    return model.get(name) if model.has_field(name) else ""


def text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


def actors(collection: Any) -> list[Any]:
    """Keep the people and entities from an actor collection."""
    return [item for item in collection or [] if getattr(item, "kind", None) in ACTOR_KINDS]


def is_reference(model: Any) -> bool:
    return getattr(model, "kind", None) == "reference"


def affiliation(actor: Any) -> str:
    return text(actor.get("affiliation")) if actor.kind == "person" else ""


class Formatter:
    """Base class for the built-in formatters."""

    label: ClassVar[str] = ""

    STATUS_TEXT_MAP: ClassVar[dict[str, str]] = {
        "advance-online": "Advance online publication",
        "in-preparation": "Manuscript in preparation.",
        "submitted": "Manuscript submitted for publication.",
    }

    def format(self, model: Any, *, preferred_citation: bool = True, **options: Any) -> str | None:
        raise NotImplementedError

    def select_and_check_model(self, model: Any, preferred_citation: bool) -> Any | None:
        """Pick the model to cite, or ``None`` if it cannot be cited."""
        if preferred_citation and model.has_field("preferred-citation"):
            preferred = model.get("preferred-citation")
            if is_reference(preferred):
                model = preferred

        if not actors(model.get("authors")) or is_empty(text(model.get("title")).strip()):
            logger.debug("formatter.ineligible", formatter=self.label, model=model.kind)
            return None
        return model

    @staticmethod
    def initials(name: str) -> str:
        return ". ".join(part[0].upper() for part in name.split())

    def note_from_model(self, model: Any) -> str | None:
        return self.STATUS_TEXT_MAP.get(field(model, "status"))

    @staticmethod
    def url(model: Any) -> str:
        """Prefer ``repository-code`` over ``url``."""
        repository_code = text(model.get("repository-code"))
        return repository_code if repository_code else text(model.get("url"))

    def month_and_year_from_model(self, model: Any) -> tuple[str, str]:
        if field(model, "status") == "in-press":
            return "", "in press"
        if model.has_field("year") and text(model.get("year")):
            return text(model.get("month")), text(model.get("year"))

        result = self.month_and_year_from_date(model.get("date-released"))
        if result == ("", "") and model.has_field("date-published"):
            result = self.month_and_year_from_date(model.get("date-published"))
        return result

    @staticmethod
    def month_and_year_from_date(value: Any) -> tuple[str, str]:
        if not isinstance(value, date):
            return "", ""
        return str(value.month), str(value.year)

    # CFF 'pages' is the number of pages, which has no equivalent in BibTeX or
    # APA; page ranges come from 'start' and 'end'.
    @staticmethod
    def pages_from_model(model: Any, dash: str = "--") -> str:
        start = text(field(model, "start"))
        if not start:
            return ""
        finish = text(field(model, "end"))
        if not finish or start == finish:
            return start
        return f"{start}{dash}{finish}"


def entity(model: Any, name: str) -> Any | None:
    """Return the Entity held in field ``name``, if there is one."""
    value = field(model, name)
    return value if getattr(value, "kind", None) == "entity" else None
