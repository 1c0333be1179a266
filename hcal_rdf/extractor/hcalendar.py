"""Extractor for the hCalendar microformat (http://microformats.org/wiki/hcalendar)."""

from __future__ import annotations

import logging
from typing import List

from bs4 import Tag
from rdflib import RDF, URIRef
from rdflib.term import Identifier

from hcal_rdf import config
from hcal_rdf.extractor import vocab
from hcal_rdf.extractor.html_document import HTMLDocument
from hcal_rdf.extractor.microformat import ExtractionSession, MicroformatExtractor
from hcal_rdf.extractor.models import ExtractorDescription
from hcal_rdf.extractor.vocab import ICAL

logger = logging.getLogger(__name__)

COMPONENTS = ("Vevent", "Vtodo", "Vjournal", "Vfreebusy")

TEXT_SINGULAR_PROPS = (
    "dtstart",
    "dtstamp",
    "dtend",
    "summary",
    "class",
    "transp",
    "description",
    "status",
    "location",
)

DESCRIPTION = ExtractorDescription(
    name=config.HCALENDAR_EXTRACTOR_NAME,
    prefixes={"rdf": config.RDF_NS, "ical": config.ICAL_NS},
    media_types=config.HCALENDAR_MEDIA_TYPES,
)


class HCalendarExtractor(MicroformatExtractor):
    """Maps vcalendar/vevent/vtodo/vjournal/vfreebusy markup to ICAL triples."""

    description = DESCRIPTION

    def extract(self, session: ExtractionSession) -> bool:
        document = session.document
        calendars: List[Tag] = document.find_all_by_class_name("vcalendar")
        if not calendars and document.find_all_by_class_name("vevent"):
            # hCalendar allows omitting the vcalendar root; then the whole
            # page is the calendar.
            calendars = [document.root]

        found_any = False
        for node in calendars:
            found_any |= self._extract_calendar(session, node)
        return found_any

    def _extract_calendar(self, session: ExtractionSession, node: Tag) -> bool:
        cal = session.document_resource()
        session.write(cal, RDF.type, ICAL["Vcalendar"])
        return self._add_components(session, node, cal)

    def _add_components(self, session: ExtractionSession, node: Tag, cal: URIRef) -> bool:
        calendar_doc = session.document.scoped(node)
        found_any = False
        for component in COMPONENTS:
            nodes = calendar_doc.find_all_by_class_name(component)
            if nodes:
                logger.debug(f"Found {len(nodes)} {component} component(s) in {session.base_uri}")
            for component_node in nodes:
                found_any |= self._extract_component(session, component_node, cal, component)
        return found_any

    def _extract_component(
        self,
        session: ExtractionSession,
        node: Tag,
        cal: URIRef,
        component: str,
    ) -> bool:
        compo_doc = session.document.scoped(node)
        evt = session.new_blank_node()
        session.write(evt, RDF.type, vocab.get_resource(component))
        self._add_text_props(session, compo_doc, evt)
        self._add_url(session, compo_doc, evt)
        self._add_rrule(session, compo_doc, evt)
        self._add_organizer(session, compo_doc, evt)
        self._add_uid(session, compo_doc, evt)
        session.write(cal, ICAL["component"], evt)
        return True

    def _add_text_props(
        self,
        session: ExtractionSession,
        compo_doc: HTMLDocument,
        evt: Identifier,
    ) -> None:
        for prop in TEXT_SINGULAR_PROPS:
            value = compo_doc.get_singular_text_field(prop)
            session.conditionally_add_string_property(evt, vocab.get_property(prop), value)
        for value in compo_doc.get_plural_text_field("category"):
            session.conditionally_add_string_property(evt, ICAL["categories"], value)

    def _add_url(self, session: ExtractionSession, compo_doc: HTMLDocument, evt: Identifier) -> None:
        url = compo_doc.get_singular_url_field("url")
        if not url:
            return
        session.write(evt, ICAL["url"], URIRef(session.absolutize_uri(url)))

    def _add_rrule(self, session: ExtractionSession, compo_doc: HTMLDocument, evt: Identifier) -> None:
        for rule in compo_doc.find_all_by_class_name("rrule"):
            rrule = session.new_blank_node()
            session.write(rrule, RDF.type, ICAL["DomainOf_rrule"])
            freq = compo_doc.scoped(rule).get_singular_text_field("freq")
            session.conditionally_add_string_property(rrule, ICAL["freq"], freq)
            session.write(evt, ICAL["rrule"], rrule)

    def _add_organizer(
        self,
        session: ExtractionSession,
        compo_doc: HTMLDocument,
        evt: Identifier,
    ) -> None:
        for organizer in compo_doc.find_all_by_class_name("organizer"):
            # untyped
            blank = session.new_blank_node()
            mail = compo_doc.scoped(organizer).get_singular_url_field("organizer")
            session.conditionally_add_string_property(blank, ICAL["calAddress"], mail)
            session.write(evt, ICAL["organizer"], blank)

    def _add_uid(self, session: ExtractionSession, compo_doc: HTMLDocument, evt: Identifier) -> None:
        # Read like a URL field, emitted as a plain literal.
        uid = compo_doc.get_singular_url_field("uid")
        session.conditionally_add_string_property(evt, ICAL["uid"], uid)
