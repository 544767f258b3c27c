"""Lookup of citation formatters by label."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import structlog

from cffkit.formatters.apalike import ApaLikeFormatter
from cffkit.formatters.base import CitationFormatter
from cffkit.formatters.bibtex import BibtexFormatter
from cffkit.formatters.csl import CslFormatter

logger = structlog.get_logger(__name__)


class FormatterRegistry:
    """Formatters keyed by case-insensitive label."""

    def __init__(self, formatters: list[CitationFormatter] | None = None) -> None:
        self._formatters: dict[str, CitationFormatter] = {}
        self._labels: dict[str, str] = {}
        for formatter in formatters or []:
            self.register(formatter)

    def register(self, formatter: Any) -> None:
        """Add ``formatter``, replacing any with the same label.

        Objects without a callable ``format`` are ignored.
        """
        if not callable(getattr(formatter, "format", None)):
            logger.debug("formatters.ignored", formatter=repr(formatter))
            return
        label = str(getattr(formatter, "label", "") or type(formatter).__name__)
        key = label.lower()
        if key in self._formatters:
            logger.info("formatters.replace", label=label)
        else:
            logger.debug("formatters.register", label=label)
        self._formatters[key] = formatter
        self._labels[key] = label

    def formatter_for(self, label: str) -> CitationFormatter | None:
        return self._formatters.get(label.lower())

    def labels(self) -> list[str]:
        return list(self._labels.values())

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and label.lower() in self._formatters


@lru_cache(maxsize=1)
def get_default_registry() -> FormatterRegistry:
    return FormatterRegistry([BibtexFormatter(), ApaLikeFormatter(), CslFormatter()])


def register_formatter(formatter: Any) -> None:
    """Register ``formatter`` with the default registry."""
    get_default_registry().register(formatter)


def formatter_for(label: str) -> CitationFormatter | None:
    return get_default_registry().formatter_for(label)


def list_formatters() -> list[str]:
    return get_default_registry().labels()
