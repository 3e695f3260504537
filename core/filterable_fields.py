# =============================================================================
# core/filterable_fields.py  -  Filterable Field Reference Tables
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Lists, per entity kind, the field names a caller can put into the
#   `filter` argument of the search tools ("publication_year:2020",
#   "authorships.author.id:A123", ...).  Pure data plus one lookup; no
#   network access.
#
# TWO CATEGORIES:
#   attribute    - a field of the entity object itself (cited_by_count, doi)
#   convenience  - a filter OpenAlex derives for you (title.search,
#                  from_publication_date, has_doi)
#
# These tables are a starting point, not the complete OpenAlex catalogue.
# The full list lives in the OpenAlex documentation.
# =============================================================================

from dataclasses import asdict, dataclass
from typing import Any

from core.errors import UnknownEntityTypeError


@dataclass(frozen=True)
class FilterableField:
    name: str
    type: str          # string | integer | number | boolean | date
    category: str      # attribute | convenience
    description: str


def _attr(name: str, type_: str, description: str) -> FilterableField:
    return FilterableField(name, type_, "attribute", description)


def _conv(name: str, type_: str, description: str) -> FilterableField:
    return FilterableField(name, type_, "convenience", description)


_WORKS_FIELDS: tuple[FilterableField, ...] = (
    _attr("authorships.author.id", "string", "OpenAlex ID of an author."),
    _attr("authorships.author.orcid", "string", "ORCID of an author."),
    _attr("authorships.countries", "string", "Country codes associated with author affiliations."),
    _attr("authorships.institutions.id", "string", "OpenAlex ID of an author's institution."),
    _attr("apc_paid.value_usd", "number", "APC paid value in USD."),
    _attr("best_oa_location.license", "string", "License of the best OA location."),
    _attr("biblio.volume", "string", "Volume number."),
    _attr("cited_by_count", "integer", "Total number of times this work has been cited."),
    _attr("concepts.id", "string", "OpenAlex ID of an associated concept/topic."),
    _attr("doi", "string", "Digital Object Identifier of the work."),
    _attr("has_fulltext", "boolean", "Indicates if full text is available via OpenAlex."),
    _attr("ids.openalex", "string", "OpenAlex ID of the work."),
    _attr("ids.pmid", "string", "PubMed ID of the work."),
    _attr("is_paratext", "boolean", "Indicates if the work is paratext (e.g., cover, table of contents)."),
    _attr("is_retracted", "boolean", "Indicates if the work has been retracted."),
    _attr("language", "string", "Language code of the work."),
    _attr("locations.is_oa", "boolean", "Indicates if a specific location is Open Access."),
    _attr("open_access.is_oa", "boolean", "Overall Open Access status of the work."),
    _attr("open_access.oa_status", "string", "OA status (e.g., gold, green, hybrid)."),
    _attr("primary_location.source.id", "string", "OpenAlex ID of the primary hosting source."),
    _attr("publication_year", "integer", "Year of publication."),
    _attr("publication_date", "date", "Full publication date (YYYY-MM-DD)."),
    _attr("type", "string", "Type of the work (e.g., article, book)."),
    _conv("abstract.search", "string", "Full-text search within the work's abstract."),
    _conv("authors_count", "integer", "Number of authors for the work."),
    _conv("cited_by", "string", "OpenAlex ID of a work that this work cites (outgoing citations)."),
    _conv("cites", "string", "OpenAlex ID of a work that cites this work (incoming citations)."),
    _conv("display_name.search", "string", "Full-text search within the work's title (alias: title.search)."),
    _conv("from_publication_date", "date", "Filter for works published on or after this date."),
    _conv("to_publication_date", "date", "Filter for works published on or before this date."),
    _conv("has_abstract", "boolean", "Indicates if the work has an abstract."),
    _conv("has_doi", "boolean", "Indicates if the work has a DOI."),
)

_AUTHORS_FIELDS: tuple[FilterableField, ...] = (
    _attr("orcid", "string", "Author's ORCID iD."),
    _attr("cited_by_count", "integer", "Total citations of the author's works."),
    _attr("works_count", "integer", "Number of works by the author."),
    _attr("last_known_institutions.id", "string", "OpenAlex ID of the author's last known institution."),
    _attr("last_known_institutions.country_code", "string", "Country code of the last known institution."),
    _attr("summary_stats.h_index", "integer", "The author's h-index."),
    _conv("display_name.search", "string", "Search by author's display name."),
    _conv("has_orcid", "boolean", "Indicates if the author has an ORCID iD."),
)

_SOURCES_FIELDS: tuple[FilterableField, ...] = (
    _attr("issn", "string", "Source's ISSN."),
    _attr("is_oa", "boolean", "If the source is fully OA."),
    _attr("is_in_doaj", "boolean", "If the source is indexed in DOAJ."),
    _attr("country_code", "string", "Country code of the source's publisher."),
    _attr("host_organization", "string", "OpenAlex ID of the hosting publisher or institution."),
    _attr("type", "string", "Source type (e.g., journal, repository, conference)."),
    _attr("works_count", "integer", "Number of works hosted by the source."),
    _conv("display_name.search", "string", "Search by source's display name."),
    _conv("has_issn", "boolean", "Indicates if the source has an ISSN."),
)

_INSTITUTIONS_FIELDS: tuple[FilterableField, ...] = (
    _attr("ror", "string", "Institution's ROR ID."),
    _attr("country_code", "string", "Institution's country code."),
    _attr("type", "string", "Institution type (e.g., education, healthcare, company)."),
    _attr("lineage", "string", "OpenAlex ID of the institution or any of its parents."),
    _attr("works_count", "integer", "Number of works affiliated with the institution."),
    _attr("cited_by_count", "integer", "Total citations of affiliated works."),
    _conv("display_name.search", "string", "Search by institution's display name."),
    _conv("continent", "string", "Continent the institution is located in."),
    _conv("is_global_south", "boolean", "Indicates if the institution is in the Global South."),
)

_TOPICS_FIELDS: tuple[FilterableField, ...] = (
    _attr("domain.id", "string", "ID of the topic's domain."),
    _attr("field.id", "string", "ID of the topic's field."),
    _attr("subfield.id", "string", "ID of the topic's subfield."),
    _attr("works_count", "integer", "Number of works tagged with the topic."),
    _attr("cited_by_count", "integer", "Total citations of works tagged with the topic."),
    _conv("display_name.search", "string", "Search by topic's display name."),
    _conv("description.search", "string", "Search within the topic's description."),
)

_PUBLISHERS_FIELDS: tuple[FilterableField, ...] = (
    _attr("country_codes", "string", "Publisher's country codes."),
    _attr("hierarchy_level", "integer", "Level in the publisher hierarchy (0 is top level)."),
    _attr("parent_publisher", "string", "OpenAlex ID of the parent publisher."),
    _attr("works_count", "integer", "Number of works published."),
    _conv("display_name.search", "string", "Search by publisher's display name."),
)

_FUNDERS_FIELDS: tuple[FilterableField, ...] = (
    _attr("country_code", "string", "Funder's country code."),
    _attr("grants_count", "integer", "Number of grants awarded by the funder."),
    _attr("works_count", "integer", "Number of works acknowledging the funder."),
    _attr("cited_by_count", "integer", "Total citations of funded works."),
    _conv("display_name.search", "string", "Search by funder's display name."),
    _conv("description.search", "string", "Search within the funder's description."),
)

FILTERABLE_FIELDS: dict[str, tuple[FilterableField, ...]] = {
    "works": _WORKS_FIELDS,
    "authors": _AUTHORS_FIELDS,
    "sources": _SOURCES_FIELDS,
    "institutions": _INSTITUTIONS_FIELDS,
    "topics": _TOPICS_FIELDS,
    "publishers": _PUBLISHERS_FIELDS,
    "funders": _FUNDERS_FIELDS,
}


def get_filterable_fields(entity_type: str) -> list[dict[str, Any]]:
    """Return the filterable fields of one entity kind as plain dicts.

    Raises:
        UnknownEntityTypeError: ``entity_type`` has no table.
    """
    fields = FILTERABLE_FIELDS.get(entity_type)
    if fields is None:
        raise UnknownEntityTypeError(entity_type)
    return [asdict(f) for f in fields]
