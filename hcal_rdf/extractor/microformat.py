"""
Base classes for class-attribute microformat extractors.

An extractor object carries no per-call state. Each run builds an
``ExtractionSession`` holding the document, the context and the output
handler, and passes it to ``extract``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from rdflib import BNode, Literal, URIRef
from rdflib.term import Identifier, Node

from hcal_rdf.extractor.html_document import HTMLDocument
from hcal_rdf.extractor.models import ExtractionContext, ExtractorDescription
from hcal_rdf.writer.base import TripleHandler

logger = logging.getLogger(__name__)


class ExtractionSession:
    """Per-call state and term helpers shared by microformat extractors."""

    def __init__(
        self,
        document: HTMLDocument,
        context: ExtractionContext,
        out: TripleHandler,
    ) -> None:
        self.document = document
        self.context = context
        self.out = out

    @property
    def base_uri(self) -> str:
        return self.document.base_uri

    def document_resource(self) -> URIRef:
        return URIRef(self.base_uri)

    def new_blank_node(self) -> BNode:
        return BNode()

    def absolutize_uri(self, relative: str) -> str:
        return self.document.absolutize_uri(relative)

    def write(self, subject: Identifier, predicate: URIRef, obj: Node) -> None:
        self.out.receive_triple(subject, predicate, obj, self.context)

    def conditionally_add_string_property(
        self,
        subject: Identifier,
        predicate: URIRef,
        value: str,
    ) -> bool:
        """Write ``value`` as a plain literal unless it is empty."""
        if not value:
            return False
        self.write(subject, predicate, Literal(value))
        return True


class MicroformatExtractor(ABC):
    """Extractor for one class-attribute microformat."""

    description: ExtractorDescription

    @property
    def name(self) -> str:
        return self.description.name

    def run(self, document: HTMLDocument, out: TripleHandler) -> bool:
        """Extract from ``document`` into ``out`` under a whole-document context.

        Returns True if any microformat data was found. When data was found
        and the page has a title, the title is reported as the document label.
        """
        context = ExtractionContext(self.name, document.base_uri)
        session = ExtractionSession(document, context, out)
        out.open_context(context)
        try:
            found = self.extract(session)
            if found:
                title = document.get_title()
                if title:
                    out.receive_label(title, context)
        finally:
            out.close_context(context)
        logger.debug(f"{self.name} on {document.base_uri}: found={found}")
        return found

    @abstractmethod
    def extract(self, session: ExtractionSession) -> bool:
        ...
