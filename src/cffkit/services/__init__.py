"""External collaborators used by the model and formatters."""

from .citeproc import CiteprocRenderer, CslRenderer
from .languages import LanguageLookup, PycountryLanguageLookup, get_language_lookup

__all__ = [
    "CiteprocRenderer",
    "CslRenderer",
    "LanguageLookup",
    "PycountryLanguageLookup",
    "get_language_lookup",
]
