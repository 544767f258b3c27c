from cffkit.models import Identifier, Index, Person, Reference


def test_type_and_value_from_constructor() -> None:
    identifier = Identifier("doi", "10.5281/zenodo.1184077")
    assert identifier.type == "doi"
    assert identifier.value == "10.5281/zenodo.1184077"


def test_invalid_type_sets_nothing() -> None:
    identifier = Identifier("isbn", "978-3-16-148410-0")
    assert identifier.to_fields() == {}


def test_invalid_assignments_are_ignored() -> None:
    identifier = Identifier("url", "https://example.org", cff_version="1.3.0")
    identifier.type = "nonsense"
    identifier.relation = "is-frobnicated-by"
    assert identifier.type == "url"
    assert identifier.relation == ""


def test_relation_is_normalized() -> None:
    identifier = Identifier("swh", cff_version="1.3.0")
    identifier.relation = " Is-Part-Of "
    assert identifier.relation == "is-part-of"


def test_relation_is_ignored_before_1_3_0() -> None:
    identifier = Identifier("doi", "10.5281/zenodo.1184077")
    identifier.relation = "cites"
    assert identifier.relation == ""
    assert "relation" not in identifier.to_fields()


def test_relation_follows_the_document_version() -> None:
    index = Index({"cff-version": "1.3.0", "identifiers": [{"type": "doi", "value": "10.5281/zenodo.1184077"}]})
    index.identifiers[0].relation = "cites"
    assert index.identifiers[0].relation == "cites"

    old = Index("My Software")
    old.identifiers = [{"type": "doi", "value": "10.5281/zenodo.1184077"}]
    old.identifiers[0].relation = "cites"
    assert old.identifiers[0].relation == ""

    old.cff_version = "1.3.0"
    old.identifiers[0].relation = "cites"
    assert old.identifiers[0].relation == "cites"


def test_reference_identifiers_follow_the_document_version() -> None:
    index = Index({"cff-version": "1.3.0", "references": [{"type": "software", "title": "Ruby"}]})
    reference = index.references[0]
    reference.identifiers = [{"type": "url", "value": "https://www.ruby-lang.org"}]
    reference.identifiers[0].relation = "requires"
    assert reference.identifiers[0].relation == "requires"

    detached = Reference("Ruby", "software")
    detached.identifiers.append(Identifier("url", "https://www.ruby-lang.org"))
    detached.identifiers[0].relation = "requires"
    assert detached.identifiers[0].relation == ""


def test_relation_keeps_a_1_2_0_document_valid() -> None:
    index = Index("My Software")
    index.authors.append(Person("Robert", "Haines"))
    index.identifiers.append(Identifier("doi", "10.5281/zenodo.1184077"))
    index.identifiers[0].relation = "cites"
    assert index.validate().ok


def test_relation_validates_under_1_3_0() -> None:
    index = Index({"cff-version": "1.3.0", "message": "Cite me", "title": "My Software"})
    index.authors.append(Person("Robert", "Haines"))
    index.identifiers.append(Identifier("doi", "10.5281/zenodo.1184077", cff_version="1.3.0"))
    index.identifiers[0].relation = "cites"

    result = index.validate()
    assert result.version == "1.3.0"
    assert result.ok, result.errors
    assert index.to_fields()["identifiers"][0]["relation"] == "cites"
