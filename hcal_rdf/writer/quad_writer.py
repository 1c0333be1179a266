"""Triple handler that turns triples into quads keyed by document URI."""

from __future__ import annotations

import logging
from typing import Optional

from rdflib import Literal, URIRef
from rdflib.namespace import RDFS
from rdflib.term import Identifier, Node

from hcal_rdf.extractor import vocab
from hcal_rdf.extractor.models import ExtractionContext
from hcal_rdf.writer.base import HandlerClosedError, QuadHandler, TripleHandler

logger = logging.getLogger(__name__)


class QuadWriter(TripleHandler):
    """Converts triples to quads using each context's document URI as graph.

    With a metadata graph configured, the writer also records in that graph
    which extractors ran on each document and the document label, if any.
    """

    def __init__(
        self,
        quad_handler: QuadHandler,
        metadata_graph_uri: Optional[str] = None,
    ) -> None:
        self.quad_handler = quad_handler
        self.metadata_graph = URIRef(metadata_graph_uri) if metadata_graph_uri else None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def open_context(self, context: ExtractionContext) -> None:
        self._check_open()
        if self.metadata_graph is None:
            return
        self.quad_handler.write_quad(
            URIRef(context.document_uri),
            vocab.EXTRACTOR,
            vocab.get_extractor_resource(context.extractor_name),
            self.metadata_graph,
        )

    def close_context(self, context: ExtractionContext) -> None:
        # Nothing to record when a context ends.
        pass

    def receive_triple(
        self,
        subject: Identifier,
        predicate: URIRef,
        obj: Node,
        context: ExtractionContext,
    ) -> None:
        self._check_open()
        self.quad_handler.write_quad(subject, predicate, obj, URIRef(context.document_uri))

    def receive_label(self, label: str, context: ExtractionContext) -> None:
        self._check_open()
        if self.metadata_graph is None or not context.is_document_context:
            return
        self.quad_handler.write_quad(
            URIRef(context.document_uri),
            RDFS.label,
            Literal(label),
            self.metadata_graph,
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        logger.debug(f"Closing quad handler {type(self.quad_handler).__name__}")
        self.quad_handler.close()

    def _check_open(self) -> None:
        if self._closed:
            raise HandlerClosedError("QuadWriter is closed")
