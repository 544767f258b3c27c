"""Field container shared by every part of the CFF model."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, ClassVar

import structlog

from cffkit.errors import InvalidDateError, UnknownFieldError
from cffkit.utils import is_empty, method_to_field

logger = structlog.get_logger(__name__)


def parse_date(value: Any) -> date:
    """Coerce ``value`` into a ``date``, parsing ISO-8601 strings."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as exc:
        raise InvalidDateError(value) from exc


class ModelPart:
    """A record of kebab-case fields restricted to an allow-list.

    Fields can be reached through ``get``/``set`` or as attributes, where
    ``given_names`` stands for ``given-names``. Unset scalar fields read as
    the empty string and unset collection fields as an empty list that the
    caller may append to.
    """

    kind: ClassVar[str] = "part"
    ALLOWED_FIELDS: ClassVar[frozenset[str]] = frozenset()
    # Fields holding lists owned by the part.
    COLLECTION_FIELDS: ClassVar[tuple[str, ...]] = ()
    # Collections whose entries must be model parts to be serialized.
    MODEL_COLLECTIONS: ClassVar[tuple[str, ...]] = ()
    DATE_FIELDS: ClassVar[tuple[str, ...]] = ()
    # Field name -> name of a method taking the new value.
    SETTERS: ClassVar[dict[str, str]] = {}

    def __init__(self, fields: Mapping[str, Any] | None = None) -> None:
        object.__setattr__(self, "_fields", {})
        for key, value in (fields or {}).items():
            if isinstance(value, list):
                value = list(value)
            self._fields[key] = self._promote(key, value)

    # Field access ---------------------------------------------------------

    @classmethod
    def has_field(cls, field: str) -> bool:
        return method_to_field(field) in cls.ALLOWED_FIELDS

    def get(self, field: str) -> Any:
        name = self._check_field(field)
        if name in self.COLLECTION_FIELDS:
            return self._collection(name)
        if name in self.DATE_FIELDS:
            return self.get_date(name)
        value = self._fields.get(name)
        return "" if value is None else value

    def set(self, field: str, value: Any) -> None:
        name = self._check_field(field)
        setter = self.SETTERS.get(name)
        if setter is not None:
            getattr(self, setter)(value)
        elif name in self.DATE_FIELDS:
            self.set_date(name, value)
        else:
            self._fields[name] = "" if value is None else self._promote(name, value)

    def get_date(self, field: str) -> date | str:
        """Return a date-valued field, or ``''`` if unset or unparsable."""
        name = self._check_field(field)
        value = self._fields.get(name)
        if is_empty(value):
            return ""
        try:
            return parse_date(value)
        except InvalidDateError:
            logger.debug("model.unparsable_date", model=self.kind, field=name, value=value)
            return ""

    def set_date(self, field: str, value: date | str | None) -> None:
        """Store a date; ``None`` or ``''`` unsets the field."""
        name = self._check_field(field)
        if is_empty(value):
            self._fields.pop(name, None)
            return
        self._fields[name] = parse_date(value)

    def raw(self, field: str, default: Any = None) -> Any:
        """Return the stored value of ``field`` without any conversion."""
        return self._fields.get(self._check_field(field), default)

    def store_raw(self, field: str, value: Any) -> None:
        """Store ``value`` without running the field's setter."""
        self._fields[self._check_field(field)] = value

    def to_fields(self) -> dict[str, Any]:
        """Flatten this part, and any parts inside it, into plain mappings."""
        output: dict[str, Any] = {}
        for key, value in self._fields.items():
            value = self._flatten(key, value)
            if not is_empty(value):
                output[key] = value
        return output

    # Attribute sugar ------------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(method_to_field(name))

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or isinstance(getattr(type(self), name, None), property):
            object.__setattr__(self, name, value)
            return
        self.set(method_to_field(name), value)

    # A part always counts as present, even with every field unset.
    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fields!r})"

    # Internal helpers -----------------------------------------------------

    def _check_field(self, field: str) -> str:
        name = method_to_field(field)
        if name not in self.ALLOWED_FIELDS:
            raise UnknownFieldError(type(self).__name__, name)
        return name

    def _collection(self, name: str) -> list[Any]:
        value = self._fields.get(name)
        if not isinstance(value, list):
            value = [] if is_empty(value) else [value]
            self._fields[name] = value
        return value

    def _promote(self, field: str, value: Any) -> Any:
        """Turn raw nested data for ``field`` into model parts."""
        return value

    def _flatten(self, field: str, value: Any) -> Any:
        if isinstance(value, ModelPart):
            return value.to_fields()
        if isinstance(value, datetime):
            return value.date().isoformat()
        if isinstance(value, date):
            return value.isoformat()
        if isinstance(value, list):
            if field in self.MODEL_COLLECTIONS:
                return [item.to_fields() for item in value if isinstance(item, ModelPart)]
            if field == "keywords":
                return [str(item) for item in value]
            return list(value)
        return value

    def _ignore(self, field: str, value: Any) -> None:
        logger.debug("model.ignored_value", model=self.kind, field=field, value=value)


def enum_value(value: Any) -> str:
    """Normalize a candidate enumeration value."""
    return str(value).strip().lower() if value is not None else ""
