"""Citations rendered through a Citation Style Language processor."""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from cffkit.formatters.base import Formatter, actors, text
from cffkit.services.citeproc import CiteprocRenderer, CslRenderer
from cffkit.settings import get_settings
from cffkit.utils import parameterize

logger = structlog.get_logger(__name__)


class CslName(BaseModel):
    """A CSL-JSON name."""

    model_config = ConfigDict(populate_by_name=True)

    given: str | None = None
    family: str | None = None
    non_dropping_particle: str | None = Field(default=None, alias="non-dropping-particle")
    suffix: str | None = None
    literal: str | None = None


class CslDate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date_parts: list[list[int]] = Field(alias="date-parts")


class CslItem(BaseModel):
    """The CSL-JSON item handed to the renderer."""

    model_config = ConfigDict(populate_by_name=True)

    # CSL has no software type that every processor understands.
    type: str = "book"
    id: str
    author: list[CslName] = Field(default_factory=list)
    issued: CslDate | None = None
    doi: str | None = Field(default=None, alias="DOI")
    title: str
    url: str | None = Field(default=None, alias="URL")
    keyword: str | None = None
    abstract: str | None = None
    version: str | None = None

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def _optional(value: Any) -> str | None:
    return text(value) or None


def get_date_parts(iso_date: str) -> CslDate | None:
    """Slice ``YYYY-MM-DD`` into CSL date parts, dropping zero parts."""
    if not iso_date:
        return None
    parts = []
    for start, end in ((0, 4), (5, 7), (8, 10)):
        piece = iso_date[start:end]
        if piece.isdigit() and int(piece) != 0:
            parts.append(int(piece))
    return CslDate(date_parts=[parts]) if parts else None


class CslFormatter(Formatter):
    """Builds a CSL-JSON item and renders it with a CSL style.

    Style and locale default to the configured ones and can be overridden
    per call with the ``style`` and ``locale`` options.
    """

    label = "CSL"

    def __init__(
        self,
        renderer: CslRenderer | None = None,
        style: str | None = None,
        locale: str | None = None,
    ) -> None:
        self._renderer = renderer or CiteprocRenderer()
        self._style = style
        self._locale = locale

    def format(self, model: Any, *, preferred_citation: bool = True, **options: Any) -> str | None:
        model = self.select_and_check_model(model, preferred_citation)
        if model is None:
            return None
        if not text(model.get("version")):
            logger.debug("formatter.ineligible", formatter=self.label, model=model.kind, missing="version")
            return None

        settings = get_settings()
        style = options.get("style") or self._style or settings.csl_style
        locale = options.get("locale") or self._locale or settings.csl_locale
        item = self.build_item(model)
        return self._renderer.render(item.to_json(), style, locale)

    def build_item(self, model: Any) -> CslItem:
        doi = text(model.get("doi"))
        title = text(model.get("title"))
        released = model.get("date-released")
        return CslItem(
            id=f"https://doi.org/{doi}" if doi else parameterize(title),
            author=[self.to_name(author) for author in actors(model.get("authors"))],
            issued=get_date_parts(released.isoformat() if released else ""),
            doi=doi or None,
            title=title,
            url=_optional(self.url(model)),
            keyword=_optional(model.get("keywords")),
            abstract=_optional(model.get("abstract")),
            version=text(model.get("version")),
        )

    @staticmethod
    def to_name(actor: Any) -> CslName:
        if actor.kind == "entity":
            return CslName(literal=_optional(actor.get("name")))
        return CslName(
            given=_optional(actor.get("given-names")),
            family=_optional(actor.get("family-names")),
            non_dropping_particle=_optional(actor.get("name-particle")),
            suffix=_optional(actor.get("name-suffix")),
        )
