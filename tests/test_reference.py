from datetime import date

from cffkit.models import Entity, Index, Person, Reference


class DictLanguageLookup:
    def __init__(self, table: dict[str, str]) -> None:
        self.table = table

    def lookup(self, value: str) -> str | None:
        return self.table.get(value.lower())


def test_defaults() -> None:
    reference = Reference("A Paper")
    assert reference.title == "A Paper"
    assert reference.type == "generic"
    assert reference.authors == []
    assert reference.languages == []


def test_constructor_type_is_checked() -> None:
    assert Reference("A Paper", "article").type == "article"
    assert Reference("A Paper", "Article ").type == "article"
    assert Reference("A Paper", "not-a-type").type == "generic"


def test_invalid_type_and_status_are_ignored() -> None:
    reference = Reference("A Paper", "article")
    reference.type = "nonsense"
    reference.status = "in-press"
    reference.status = "rejected"
    assert reference.type == "article"
    assert reference.status == "in-press"


def test_license_filtering() -> None:
    reference = Reference("A Paper")
    reference.license = "Apache-2.0"
    assert reference.license == "Apache-2.0"
    reference.license = "not-a-license"
    assert reference.license == "Apache-2.0"
    reference.license = ["MIT", "nope", "GPL-3.0-or-later"]
    assert reference.license == ["MIT", "GPL-3.0-or-later"]
    reference.license = ["MIT", "nope"]
    assert reference.license == "MIT"


def test_add_language_with_lookup() -> None:
    lookup = DictLanguageLookup({"en": "eng", "french": "fra"})
    reference = Reference("A Paper")
    reference.add_language("en", lookup=lookup)
    reference.add_language("French", lookup=lookup)
    reference.add_language("EN", lookup=lookup)
    reference.add_language("klingon", lookup=lookup)
    assert reference.languages == ["eng", "fra"]

    reference.reset_languages()
    assert reference.languages == []
    assert "languages" not in reference.to_fields()


def test_add_language_with_pycountry() -> None:
    reference = Reference("A Paper")
    reference.add_language("en")
    reference.add_language("GER")
    reference.add_language("french")
    assert reference.languages == ["eng", "deu", "fra"]


def test_languages_returns_a_copy() -> None:
    reference = Reference("A Paper")
    reference.languages = ["eng"]
    reference.languages.append("fra")
    assert reference.languages == ["eng"]


def test_nested_parts_are_promoted() -> None:
    reference = Reference(
        {
            "type": "conference-paper",
            "title": "A Talk",
            "authors": [{"given-names": "Robert", "family-names": "Haines"}, {"name": "The Team"}],
            "conference": {"name": "RSE Conference", "date-start": "2021-09-06"},
            "identifiers": [{"type": "doi", "value": "10.0000/xyz"}],
        }
    )
    assert [author.kind for author in reference.authors] == ["person", "entity"]
    assert isinstance(reference.conference, Entity)
    assert reference.conference.date_start == date(2021, 9, 6)
    assert reference.identifiers[0].value == "10.0000/xyz"
    assert reference.to_fields()["conference"] == {"name": "RSE Conference", "date-start": "2021-09-06"}


def test_collections_are_owned_lists() -> None:
    reference = Reference("A Paper")
    reference.authors.append(Person("Robert", "Haines"))
    reference.keywords.append("citation")
    assert reference.to_fields()["authors"] == [{"given-names": "Robert", "family-names": "Haines"}]
    assert reference.to_fields()["keywords"] == ["citation"]


def test_from_document() -> None:
    index = Index("My Software")
    index.authors.append(Person("Robert", "Haines"))
    index.version = "1.0.0"
    index.date_released = "2021-01-02"
    index.message = "Cite me"

    reference = Reference.from_document(index)
    assert reference.type == "software"
    assert reference.title == "My Software"
    assert reference.version == "1.0.0"
    assert reference.date_released == date(2021, 1, 2)
    assert reference.authors[0].family_names == "Haines"

    index.authors.append(Person("Someone", "Else"))
    assert len(reference.authors) == 1
