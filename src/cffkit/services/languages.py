"""Language lookup: free-form names and codes to ISO 639-3."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Protocol

import pycountry
import structlog

logger = structlog.get_logger(__name__)

# Codes are matched before names; "en" is also the name of a language.
CODE_FIELDS = ("alpha_2", "alpha_3", "bibliographic")


class LanguageLookup(Protocol):
    """Protocol for language resolvers."""

    def lookup(self, value: str) -> str | None:
        ...


class PycountryLanguageLookup:
    """Resolves languages against the ISO 639-3 tables shipped with pycountry.

    Two-letter codes, three-letter (including bibliographic) codes and
    English names are accepted, so ``en``, ``GER`` and ``french`` all
    resolve.
    """

    def lookup(self, value: str) -> str | None:
        text = (value or "").strip().lower()
        if not text:
            return None
        language = self._by_code(text)
        if language is None:
            try:
                language = pycountry.languages.lookup(text)
            except LookupError:
                logger.debug("languages.miss", value=value)
                return None
        return getattr(language, "alpha_3", None)

    @staticmethod
    def _by_code(code: str) -> Any | None:
        for field in CODE_FIELDS:
            try:
                language = pycountry.languages.get(**{field: code})
            except KeyError:
                language = None
            if language is not None:
                return language
        return None


@lru_cache(maxsize=1)
def get_language_lookup() -> LanguageLookup:
    return PycountryLanguageLookup()
