"""Downstream quad consumers: an in-memory rdflib Dataset and N-Quads text."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from rdflib import Dataset, Literal, URIRef
from rdflib.plugins.serializers.nt import _quoteLiteral
from rdflib.term import Identifier, Node

from hcal_rdf.writer.base import HandlerClosedError, QuadHandler

logger = logging.getLogger(__name__)


class DatasetQuadHandler(QuadHandler):
    """Collects quads into an rdflib ``Dataset``, one named graph per graph URI."""

    def __init__(self, dataset: Optional[Dataset] = None) -> None:
        self.dataset = dataset if dataset is not None else Dataset()
        self.quad_count = 0
        self._closed = False

    def write_quad(
        self,
        subject: Identifier,
        predicate: URIRef,
        obj: Node,
        graph: URIRef,
    ) -> None:
        if self._closed:
            raise HandlerClosedError("DatasetQuadHandler is closed")
        self.dataset.add((subject, predicate, obj, graph))
        self.quad_count += 1

    def close(self) -> None:
        self._closed = True
        logger.debug(f"Dataset handler closed after {self.quad_count} quads")


class NQuadsQuadHandler(QuadHandler):
    """Streams quads as N-Quads lines.

    The stream is flushed on ``close()`` but left open; whoever opened it
    owns it.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.quad_count = 0
        self._closed = False

    def write_quad(
        self,
        subject: Identifier,
        predicate: URIRef,
        obj: Node,
        graph: URIRef,
    ) -> None:
        if self._closed:
            raise HandlerClosedError("NQuadsQuadHandler is closed")
        self.stream.write(
            f"{subject.n3()} {predicate.n3()} {_nquads_term(obj)} {graph.n3()} .\n"
        )
        self.quad_count += 1

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.stream.flush()
        logger.debug(f"Wrote {self.quad_count} N-Quads lines")


def _nquads_term(term: Node) -> str:
    """N-Quads form of a term; literals use the N-Triples escaping rules."""
    if isinstance(term, Literal):
        return _quoteLiteral(term)
    return term.n3()
