"""Turning model objects into citations through the formatter registry."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cffkit.formatters.registry import FormatterRegistry


def _registry(registry: FormatterRegistry | None) -> FormatterRegistry:
    from cffkit.formatters.registry import get_default_registry

    return registry if registry is not None else get_default_registry()


class Citable:
    """Adds ``citation`` and the ``to_<label>`` shortcuts to a model class.

    Every label in the formatter registry gets a shortcut, so with the
    built-in formatters ``to_bibtex``, ``to_apalike`` and ``to_csl`` are
    available.
    """

    def citation(
        self,
        format: str,
        preferred_citation: bool = True,
        registry: FormatterRegistry | None = None,
        **options: Any,
    ) -> str | None:
        """Output this model in the named ``format``.

        Unknown formats give ``''``; a formatter returns ``None`` when the
        model lacks the authors or title it needs.
        """
        formatter = _registry(registry).formatter_for(format)
        if formatter is None:
            return ""
        return formatter.format(self, preferred_citation=preferred_citation, **options)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("to_"):
            label = name[len("to_") :]
            if _registry(None).formatter_for(label) is not None:
                return partial(self.citation, label)
        return super().__getattr__(name)  # type: ignore[misc]
