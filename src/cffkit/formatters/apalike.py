"""APA-like citation strings."""

from __future__ import annotations

import calendar
from datetime import date
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


class ApaLikeFormatter(Formatter):
    """Generates an APA-like citation string."""

    label = "APALike"

    def format(self, model: Any, *, preferred_citation: bool = True, **options: Any) -> str | None:
        model = self.select_and_check_model(model, preferred_citation)
        if model is None:
            return None

        output = [self.combine_authors([self.format_author(author) for author in actors(model.get("authors"))])]

        published = self.date_from_model(model)
        if published:
            output.append(f"({published})")

        version = text(model.get("version"))
        version_text = f" (Version {version})" if version else ""
        output.append(f"{text(model.get('title'))}{version_text}{self.type_label(model)}")
        output.append(self.publication_data_from_model(model))
        output.append(self.url(model))

        return ". ".join(segment for segment in output if segment)

    def publication_data_from_model(self, model: Any) -> str:
        cff_type = field(model, "type")
        if cff_type == "article":
            parts = [
                text(field(model, "journal")),
                self.volume_from_model(model),
                self.pages_from_model(model, dash="–"),
                self.note_from_model(model) or "",
            ]
            return ", ".join(part for part in parts if part)
        if cff_type == "book":
            publisher = entity(model, "publisher")
            return "" if publisher is None else text(publisher.get("name"))
        if cff_type == "conference-paper":
            parts = [
                text(field(model, "collection-title")),
                self.volume_from_model(model),
                self.pages_from_model(model, dash="–"),
            ]
            return ", ".join(part for part in parts if part)
        if cff_type == "report":
            return self.institution_from_model(model)
        if cff_type == "thesis":
            return self.type_and_school_from_model(model, "Doctoral dissertation")
        if cff_type == "unpublished":
            return self.note_from_model(model) or ""
        return ""

    def institution_from_model(self, model: Any) -> str:
        institution = entity(model, "institution")
        if institution is not None:
            return text(institution.get("name"))
        authors = actors(model.get("authors"))
        return affiliation(authors[0]) if authors else ""

    def type_and_school_from_model(self, model: Any, default_type: str) -> str:
        thesis_type = text(field(model, "thesis-type")) or default_type
        return f"[{thesis_type}, {self.institution_from_model(model)}]"

    @staticmethod
    def volume_from_model(model: Any) -> str:
        volume = text(field(model, "volume"))
        if not volume:
            return ""
        issue = text(field(model, "issue"))
        return f"{volume}({issue})" if issue else volume

    # If we're citing a conference paper, try and use the date of the
    # conference. Otherwise use the specified year, or the year of release.
    def date_from_model(self, model: Any) -> str:
        conference = entity(model, "conference")
        if field(model, "type") == "conference-paper" and conference is not None:
            start = conference.get("date-start")
            if isinstance(start, date):
                finish = conference.get("date-end")
                if not isinstance(finish, date) or start >= finish:
                    return str(start.year)
                return self.date_range(start, finish)
        return self.month_and_year_from_model(model)[1]

    @staticmethod
    def date_range(start: date, finish: date) -> str:
        """Render a span such as ``2021, September 21–24``."""
        finish_text = str(finish.day)
        if (start.year, start.month) != (finish.year, finish.month):
            finish_text = f"{calendar.month_name[finish.month]} {finish_text}"
        if start.year != finish.year:
            finish_text = f"{finish.year}, {finish_text}"
        return f"{start.year}, {calendar.month_name[start.month]} {start.day}–{finish_text}"

    def url(self, model: Any) -> str:
        """Prefer a DOI over the other URI options."""
        doi = text(model.get("doi"))
        return f"https://doi.org/{doi}" if doi else super().url(model)

    @staticmethod
    def type_label(model: Any) -> str:
        cff_type = text(field(model, "type"))
        if "data" in cff_type:
            return " [Data set]"
        if "conference" in cff_type:
            return " [Conference paper]"
        if is_reference(model) and "software" not in cff_type:
            return ""
        return " [Computer software]"

    @staticmethod
    def combine_authors(authors: list[str]) -> str:
        if not authors:
            return ""
        if len(authors) == 1:
            combined = authors[0]
        else:
            combined = f"{', '.join(authors[:-1])}, & {authors[-1]}"
        return combined[:-1] if combined.endswith(".") else combined

    def format_author(self, author: Any) -> str:
        if author.kind == "entity":
            return text(author.get("name"))

        particle = text(author.get("name-particle"))
        suffix = text(author.get("name-suffix"))
        particle_text = f"{particle} " if particle else ""
        suffix_text = f", {suffix}" if suffix else ""
        return f"{particle_text}{self.format_name(author)}{suffix_text}"

    # Falls back to the alias for people known only by a pseudonym.
    def format_name(self, author: Any) -> str:
        family = text(author.get("family-names"))
        given = text(author.get("given-names"))
        if not family:
            return given or text(author.get("alias"))
        if not given:
            return family
        return f"{family}, {self.initials(given)}."
