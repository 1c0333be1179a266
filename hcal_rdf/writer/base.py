"""
Base classes for triple and quad output.

Extractors write to a ``TripleHandler``. A handler receives one
``open_context`` per extraction run, any number of triples and labels for
that context, then ``close_context``; ``close`` ends the handler for good.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rdflib.term import Identifier, Node, URIRef

from hcal_rdf.extractor.models import ExtractionContext


class TripleHandlerException(Exception):
    """Raised when a handler cannot accept output."""


class HandlerClosedError(TripleHandlerException):
    """Raised when output is written to a handler after ``close()``."""


class TripleHandler(ABC):
    """Sink for the triples produced by an extraction run."""

    @abstractmethod
    def open_context(self, context: ExtractionContext) -> None:
        ...

    @abstractmethod
    def close_context(self, context: ExtractionContext) -> None:
        ...

    @abstractmethod
    def receive_triple(
        self,
        subject: Identifier,
        predicate: URIRef,
        obj: Node,
        context: ExtractionContext,
    ) -> None:
        ...

    @abstractmethod
    def receive_label(self, label: str, context: ExtractionContext) -> None:
        ...

    @abstractmethod
    def close(self) -> None:
        """Flush buffered output and release resources."""


class QuadHandler(ABC):
    """Downstream consumer of named-graph quads."""

    @abstractmethod
    def write_quad(
        self,
        subject: Identifier,
        predicate: URIRef,
        obj: Node,
        graph: URIRef,
    ) -> None:
        ...

    @abstractmethod
    def close(self) -> None:
        ...
