"""Field allow-lists and enumerations of the Citation File Format."""

from __future__ import annotations

from spdx_license_list import LICENSES as SPDX_LICENSES

DEFAULT_SPEC_VERSION = "1.2.0"
MIN_VALIDATABLE_VERSION = "1.2.0"
# First schema version whose identifiers carry a `relation`.
RELATION_MIN_VERSION = "1.3.0"

DEFAULT_MESSAGE = (
    "If you use this software in your work, please cite it using the following metadata"
)

LICENSES = frozenset(SPDX_LICENSES)

PERSON_FIELDS = frozenset(
    {
        "address",
        "affiliation",
        "alias",
        "city",
        "country",
        "email",
        "family-names",
        "fax",
        "given-names",
        "name-particle",
        "name-suffix",
        "orcid",
        "post-code",
        "region",
        "tel",
        "website",
    }
)

ENTITY_FIELDS = frozenset(
    {
        "address",
        "alias",
        "city",
        "country",
        "date-end",
        "date-start",
        "email",
        "fax",
        "location",
        "name",
        "orcid",
        "post-code",
        "region",
        "tel",
        "website",
    }
)

IDENTIFIER_FIELDS = frozenset({"description", "relation", "type", "value"})

IDENTIFIER_TYPES = ("doi", "url", "swh", "other")

# Relation types, kebab-cased from the DataCite metadata schema.
IDENTIFIER_RELATIONS = (
    "cites",
    "compiles",
    "continues",
    "describes",
    "documents",
    "has-metadata",
    "has-part",
    "has-version",
    "is-cited-by",
    "is-compiled-by",
    "is-continued-by",
    "is-derived-from",
    "is-described-by",
    "is-documented-by",
    "is-identical-to",
    "is-metadata-for",
    "is-new-version-of",
    "is-obsoleted-by",
    "is-original-form-of",
    "is-part-of",
    "is-previous-version-of",
    "is-published-in",
    "is-referenced-by",
    "is-required-by",
    "is-reviewed-by",
    "is-source-of",
    "is-supplement-to",
    "is-supplemented-by",
    "is-variant-form-of",
    "is-version-of",
    "obsoletes",
    "references",
    "requires",
    "reviews",
)

REFERENCE_FIELDS = frozenset(
    {
        "abbreviation",
        "abstract",
        "authors",
        "collection-doi",
        "collection-title",
        "collection-type",
        "commit",
        "conference",
        "contact",
        "copyright",
        "data-type",
        "database",
        "database-provider",
        "date-accessed",
        "date-downloaded",
        "date-published",
        "date-released",
        "department",
        "doi",
        "edition",
        "editors",
        "editors-series",
        "end",
        "entry",
        "filename",
        "format",
        "identifiers",
        "institution",
        "isbn",
        "issn",
        "issue",
        "issue-date",
        "issue-title",
        "journal",
        "keywords",
        "languages",
        "license",
        "license-url",
        "loc-end",
        "loc-start",
        "location",
        "medium",
        "month",
        "nihmsid",
        "notes",
        "number",
        "number-volumes",
        "pages",
        "patent-states",
        "pmcid",
        "publisher",
        "recipients",
        "repository",
        "repository-artifact",
        "repository-code",
        "scope",
        "section",
        "senders",
        "start",
        "status",
        "term",
        "thesis-type",
        "title",
        "translators",
        "type",
        "url",
        "version",
        "volume",
        "volume-title",
        "year",
        "year-original",
    }
)

REFERENCE_ACTOR_FIELDS = (
    "authors",
    "contact",
    "editors",
    "editors-series",
    "recipients",
    "senders",
    "translators",
)

REFERENCE_ENTITY_FIELDS = (
    "conference",
    "database-provider",
    "institution",
    "location",
    "publisher",
)

REFERENCE_DATE_FIELDS = (
    "date-accessed",
    "date-downloaded",
    "date-published",
    "date-released",
)

REFERENCE_TYPES = (
    "art",
    "article",
    "audiovisual",
    "bill",
    "blog",
    "book",
    "catalogue",
    "conference",
    "conference-paper",
    "data",
    "database",
    "dictionary",
    "edited-work",
    "encyclopedia",
    "film-broadcast",
    "generic",
    "government-document",
    "grant",
    "hearing",
    "historical-work",
    "legal-case",
    "legal-rule",
    "magazine-article",
    "manual",
    "map",
    "multimedia",
    "music",
    "newspaper-article",
    "pamphlet",
    "patent",
    "personal-communication",
    "proceedings",
    "report",
    "serial",
    "slides",
    "software",
    "software-code",
    "software-container",
    "software-executable",
    "software-virtual-machine",
    "sound-recording",
    "standard",
    "statute",
    "thesis",
    "unpublished",
    "video",
    "website",
)

REFERENCE_STATUS_TYPES = (
    "abstract",
    "advance-online",
    "in-preparation",
    "in-press",
    "preprint",
    "submitted",
)

INDEX_FIELDS = frozenset(
    {
        "abstract",
        "authors",
        "cff-version",
        "commit",
        "contact",
        "date-released",
        "doi",
        "identifiers",
        "keywords",
        "license",
        "license-url",
        "message",
        "preferred-citation",
        "references",
        "repository",
        "repository-artifact",
        "repository-code",
        "title",
        "type",
        "url",
        "version",
    }
)

INDEX_COLLECTION_FIELDS = ("authors", "contact", "identifiers", "keywords", "references")

MODEL_TYPES = ("software", "dataset")
