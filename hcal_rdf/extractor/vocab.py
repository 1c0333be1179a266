"""RDF vocabularies used by the extractors and writers."""

from __future__ import annotations

from rdflib import Namespace, URIRef

from hcal_rdf import config

ICAL = Namespace(config.ICAL_NS)
ANY23 = Namespace(config.ANY23_NS)

# Provenance predicate linking a document to the extractors run on it.
EXTRACTOR = ANY23["extractor"]


def get_resource(name: str) -> URIRef:
    """Class term for a component kind, e.g. ``Vevent``."""
    return ICAL[name]


def get_property(name: str) -> URIRef:
    """Property term for an hCalendar field name, e.g. ``dtstart``."""
    return ICAL[name]


def get_extractor_resource(extractor_name: str) -> URIRef:
    return ANY23[f"extractor/{extractor_name}"]
