from datetime import date

from cffkit.formatters import BibtexFormatter
from cffkit.models import Entity, Index, Person, Reference


def _software() -> Index:
    index = Index("T")
    index.authors.append(Person("Robert", "Haines"))
    index.version = "1.0.0"
    index.date_released = "2020-01-20"
    return index


def test_software_entry() -> None:
    assert _software().to_bibtex() == (
        "@software{Haines_T_2020,\n"
        "author = {Haines, Robert},\n"
        "month = jan,\n"
        "title = {{T}},\n"
        "version = {1.0.0},\n"
        "year = {2020}\n"
        "}"
    )


def test_article_from_preferred_citation() -> None:
    index = _software()
    paper = Reference("My Paper", "article")
    paper.authors.append(Person("Robert", "Haines"))
    paper.journal = "Journal of Things"
    paper.volume = 3
    paper.issue = 2
    paper.start = 10
    paper.end = 20
    paper.year = 2021
    paper.month = 3
    paper.doi = "10.0000/abc"
    index.preferred_citation = paper

    assert index.to_bibtex() == (
        "@article{Haines_My_Paper_2021,\n"
        "author = {Haines, Robert},\n"
        "doi = {10.0000/abc},\n"
        "journal = {Journal of Things},\n"
        "month = mar,\n"
        "number = {2},\n"
        "pages = {10--20},\n"
        "title = {{My Paper}},\n"
        "volume = {3},\n"
        "year = {2021}\n"
        "}"
    )
    assert index.to_bibtex(preferred_citation=False).startswith("@software{Haines_T_2020,")


def test_citekeys() -> None:
    citekey = BibtexFormatter.generate_citekey
    assert citekey(
        {"author": "von Haines, Robert", "title": "{My Family and Other Animals}", "year": "2021"}
    ) == "von_Haines_My_Family_and_2021"
    assert citekey(
        {"author": "von Haines, Jr, Robert and Robert, Haines", "title": "My Family and Other Animals", "year": "2021"}
    ) == "von_Haines_My_Family_and_2021"
    assert citekey(
        {"author": "{An Organisation}", "title": "{Really Everyone Disagrees}"}
    ) == "An_Organisation_Really_Everyone_Disagrees"
    assert citekey(
        {"author": "Solskjær, Ole Gunnar", "title": "{My Straße}", "year": "2021"}
    ) == "Solskjaer_My_Strasse_2021"


def test_entry_types() -> None:
    formatter = BibtexFormatter()
    assert formatter.bibtex_type(Index("X")) == "software"
    assert formatter.bibtex_type(Reference("X", "software-code")) == "software"
    assert formatter.bibtex_type(Reference("X", "conference-paper")) == "inproceedings"
    assert formatter.bibtex_type(Reference("X", "magazine-article")) == "article"
    assert formatter.bibtex_type(Reference("X", "pamphlet")) == "booklet"
    assert formatter.bibtex_type(Reference("X", "report")) == "techreport"
    assert formatter.bibtex_type(Reference("X", "thesis")) == "phdthesis"
    assert formatter.bibtex_type(Reference("X", "website")) == "misc"

    masters = Reference("X", "thesis")
    masters.thesis_type = "Master's thesis"
    assert formatter.bibtex_type(masters) == "mastersthesis"


def test_actor_formatting_and_escaping() -> None:
    person = Person("Ludwig", "Beethoven")
    person.name_particle = "van"
    person.name_suffix = "Jr."
    assert BibtexFormatter.format_actor(person) == "van Beethoven, Jr., Ludwig"
    assert BibtexFormatter.format_actor(Entity("The R&D Team")) == "{The R\\&D Team}"
    assert BibtexFormatter.format_actor(Person({"alias": "ghost_writer"})) == "{ghost\\_writer}"


def test_conference_paper_uses_conference_details() -> None:
    paper = Reference("A Talk", "conference-paper")
    paper.authors.append(Person("Robert", "Haines"))
    conference = Entity("RSE Conference")
    conference.city = "Manchester"
    conference.country = "GB"
    conference.date_start = date(2021, 9, 6)
    paper.conference = conference
    paper.collection_title = "Proceedings"

    output = BibtexFormatter().format(paper)
    assert output.startswith("@inproceedings{Haines_A_Talk_2021,")
    assert "address = {Manchester, GB}" in output
    assert "booktitle = {Proceedings}" in output
    assert "series = {RSE Conference}" in output
    assert "month = sep" in output


def test_reference_notes_and_status() -> None:
    draft = Reference("Draft", "unpublished")
    draft.authors.append(Person("Robert", "Haines"))
    draft.notes = "See the appendix"
    assert "note = {See the appendix}" in draft.to_bibtex()

    draft.status = "submitted"
    assert "note = {Manuscript submitted for publication.}" in draft.to_bibtex()
