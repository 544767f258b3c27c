"""BibTeX output."""

from __future__ import annotations

import calendar
import re
from typing import Any

from cffkit.formatters.base import (
    Formatter,
    actors,
    affiliation,
    entity,
    field,
    is_reference,
    text,
)
from cffkit.utils import is_empty, parameterize

# Fields without `!` are copied from the model; those with `!` are derived
# by the matching `_<name>_from_model` method.
ENTRY_TYPE_MAP: dict[str, tuple[str, ...]] = {
    "article": ("doi", "journal", "note!", "number!", "pages!", "volume"),
    "book": ("address!", "doi", "editor!", "isbn", "number!", "pages!", "publisher!", "volume"),
    "booklet": ("address!", "doi"),
    "inproceedings": ("address!", "booktitle!", "doi", "editor!", "pages!", "publisher!", "series!"),
    "manual": ("address!", "doi"),
    "mastersthesis": ("address!", "doi", "school!", "type!"),
    "misc": ("doi", "pages!"),
    "phdthesis": ("address!", "doi", "school!", "type!"),
    "proceedings": ("address!", "booktitle!", "doi", "editor!", "pages!", "publisher!", "series!"),
    "software": ("doi", "license", "version"),
    "techreport": ("address!", "doi", "institution!", "number!"),
    "unpublished": ("doi", "note!"),
}

# Three letter lowercase month names, indexed by month number.
MONTHS = tuple(name.lower() for name in calendar.month_abbr)

ESCAPE_CHARS = re.compile(r"([&%$#_{}])")


def latex_escape(value: Any) -> str:
    """Escape LaTeX special characters."""
    return ESCAPE_CHARS.sub(r"\\\1", text(value))


class BibtexFormatter(Formatter):
    """Generates a BibTeX entry."""

    label = "BibTeX"

    def format(self, model: Any, *, preferred_citation: bool = True, **options: Any) -> str | None:
        model = self.select_and_check_model(model, preferred_citation)
        if model is None:
            return None

        values: dict[str, str] = {
            "author": self.actor_list(model.get("authors")),
            "title": f"{{{latex_escape(model.get('title'))}}}",
        }

        publication_type = self.bibtex_type(model)
        self.publication_data_from_model(model, publication_type, values)

        month, year = self.month_and_year_from_model(model)
        if month.isdigit() and 1 <= int(month) <= 12:
            values["month"] = MONTHS[int(month)]
        values["year"] = year
        values["url"] = self.url(model)

        if is_reference(model) and not values.get("note"):
            values["note"] = latex_escape(model.get("notes"))

        entries = []
        for key, value in sorted(values.items()):
            if is_empty(value):
                continue
            entries.append(f"{key} = {value}" if key == "month" else f"{key} = {{{value}}}")
        citekey = self.generate_citekey({key: value for key, value in values.items() if value})

        body = ",\n".join([citekey, *entries])
        return f"@{publication_type}{{{body}\n}}"

    def publication_data_from_model(self, model: Any, entry_type: str, values: dict[str, str]) -> None:
        """Fill in the fields ``entry_type`` carries."""
        for name in ENTRY_TYPE_MAP[entry_type]:
            if name.endswith("!"):
                name = name[:-1]
                values[name] = getattr(self, f"_{name}_from_model")(model)
            else:
                values[name] = latex_escape(field(model, name))

    def bibtex_type(self, model: Any) -> str:
        """Map a CFF type onto a BibTeX entry type."""
        cff_type = text(model.get("type"))
        if not cff_type or "software" in cff_type:
            return "software"
        if cff_type in ("article", "book", "manual", "unpublished"):
            return cff_type
        if cff_type in ("conference", "proceedings"):
            return "proceedings"
        if cff_type == "conference-paper":
            return "inproceedings"
        if cff_type in ("magazine-article", "newspaper-article"):
            return "article"
        if cff_type == "pamphlet":
            return "booklet"
        if cff_type == "report":
            return "techreport"
        if cff_type == "thesis":
            thesis_type = text(field(model, "thesis-type")).lower()
            return "mastersthesis" if "master" in thesis_type else "phdthesis"
        return "misc"

    # If we're citing a conference paper, try and use the date of the
    # conference. Otherwise use the specified month and year, or the date of
    # release.
    def month_and_year_from_model(self, model: Any) -> tuple[str, str]:
        conference = entity(model, "conference")
        if field(model, "type") == "conference-paper" and conference is not None:
            start = conference.get("date-start")
            if start != "":
                return self.month_and_year_from_date(start)
        return super().month_and_year_from_model(model)

    # Actors ---------------------------------------------------------------

    @staticmethod
    def format_actor(actor: Any) -> str:
        if actor.kind == "entity":
            return f"{{{latex_escape(actor.get('name'))}}}"

        family = text(actor.get("family-names"))
        given = text(actor.get("given-names"))
        if not family and not given:
            return f"{{{latex_escape(actor.get('alias'))}}}"

        particle = text(actor.get("name-particle"))
        surname = f"{particle} {family}" if particle else family
        parts = [surname, text(actor.get("name-suffix")), given]
        return ", ".join(latex_escape(part) for part in parts if part)

    def actor_list(self, collection: Any) -> str:
        return " and ".join(self.format_actor(actor) for actor in actors(collection))

    @staticmethod
    def generate_citekey(values: dict[str, Any]) -> str:
        """Build ``surname_first_three_words_year`` from rendered values."""
        parts: list[str] = []
        if values.get("author"):
            parts.append(values["author"].split(",", 1)[0])
        if values.get("title"):
            parts.extend(values["title"].split()[:3])
        if values.get("year"):
            parts.append(str(values["year"]))
        return parameterize("_".join(parts))

    # Derived fields -------------------------------------------------------

    # 'number' is CFF 'issue'.
    def _number_from_model(self, model: Any) -> str:
        return text(field(model, "issue"))

    # 'address' comes from the conference for conference papers and from the
    # publisher otherwise.
    def _address_from_model(self, model: Any) -> str:
        entity_field = "conference" if field(model, "type") == "conference-paper" else "publisher"
        source = entity(model, entity_field)
        if source is None:
            return ""
        parts = (text(source.get(name)) for name in ("city", "region", "country"))
        return ", ".join(part for part in parts if part)

    def _institution_from_model(self, model: Any) -> str:
        institution = entity(model, "institution")
        if institution is not None:
            return latex_escape(institution.get("name"))
        authors = actors(model.get("authors"))
        return latex_escape(affiliation(authors[0])) if authors else ""

    def _school_from_model(self, model: Any) -> str:
        return self._institution_from_model(model)

    def _type_from_model(self, model: Any) -> str:
        return latex_escape(field(model, "thesis-type"))

    def _booktitle_from_model(self, model: Any) -> str:
        return latex_escape(field(model, "collection-title"))

    def _editor_from_model(self, model: Any) -> str:
        editors = actors(field(model, "editors"))
        if not editors:
            editors = actors(field(model, "editors-series"))
        return self.actor_list(editors)

    def _publisher_from_model(self, model: Any) -> str:
        publisher = entity(model, "publisher")
        return "" if publisher is None else latex_escape(publisher.get("name"))

    def _series_from_model(self, model: Any) -> str:
        conference = entity(model, "conference")
        return "" if conference is None else latex_escape(conference.get("name"))

    def _pages_from_model(self, model: Any) -> str:
        return self.pages_from_model(model)

    def _note_from_model(self, model: Any) -> str:
        return self.note_from_model(model) or ""
