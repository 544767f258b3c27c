"""CSL rendering backed by citeproc-py."""

from __future__ import annotations

from typing import Any, Protocol

import structlog
from citeproc import (
    Citation,
    CitationItem,
    CitationStylesBibliography,
    CitationStylesStyle,
    formatter,
)
from citeproc.source.json import CiteProcJSON

logger = structlog.get_logger(__name__)


class CslRenderer(Protocol):
    """Protocol for CSL processors."""

    def render(self, item: dict[str, Any], style: str, locale: str) -> str | None:
        ...


class CiteprocRenderer:
    """Renders a single CSL-JSON item as a plain-text bibliography entry.

    ``style`` is either the name of a style bundled with citeproc-py (such
    as ``harvard-cite-them-right``) or a path to a ``.csl`` file. Unknown
    styles render nothing.
    """

    def render(self, item: dict[str, Any], style: str, locale: str) -> str | None:
        try:
            csl_style = CitationStylesStyle(style, locale=locale, validate=False)
        except (ValueError, OSError):
            logger.warning("csl.unknown_style", style=style)
            return None
        source = CiteProcJSON([item])
        bibliography = CitationStylesBibliography(csl_style, source, formatter.plain)
        bibliography.register(Citation([CitationItem(item["id"].lower())]))
        entries = bibliography.bibliography()
        if not entries:
            return None
        return str(entries[0]).strip()
