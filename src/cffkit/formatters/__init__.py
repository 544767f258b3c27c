"""Citation formatters and the registry that names them."""

from .apalike import ApaLikeFormatter
from .base import CitationFormatter, Formatter
from .bibtex import BibtexFormatter
from .csl import CslFormatter, CslItem, CslName
from .registry import (
    FormatterRegistry,
    formatter_for,
    get_default_registry,
    list_formatters,
    register_formatter,
)

__all__ = [
    "ApaLikeFormatter",
    "BibtexFormatter",
    "CitationFormatter",
    "CslFormatter",
    "CslItem",
    "CslName",
    "Formatter",
    "FormatterRegistry",
    "formatter_for",
    "get_default_registry",
    "list_formatters",
    "register_formatter",
]
