"""Tests for the Dataset and N-Quads quad handlers."""

from __future__ import annotations

import io

import pytest
from rdflib import BNode, Literal, URIRef

from hcal_rdf.writer.base import HandlerClosedError
from hcal_rdf.writer.quad_handlers import DatasetQuadHandler, NQuadsQuadHandler

S = URIRef("http://example.org/s")
P = URIRef("http://example.org/p")
G = URIRef("http://example.org/g")


def test_dataset_handler_uses_named_graphs():
    handler = DatasetQuadHandler()
    handler.write_quad(S, P, Literal("o"), G)
    handler.close()
    graph = handler.dataset.graph(G)
    assert (S, P, Literal("o")) in graph
    assert handler.quad_count == 1
    with pytest.raises(HandlerClosedError):
        handler.write_quad(S, P, Literal("o"), G)


def test_nquads_lines():
    stream = io.StringIO()
    handler = NQuadsQuadHandler(stream)
    handler.write_quad(S, P, URIRef("http://example.org/o"), G)
    handler.write_quad(BNode("b1"), P, Literal('say "hi"\nbye'), G)
    handler.close()
    lines = stream.getvalue().splitlines()
    assert lines == [
        "<http://example.org/s> <http://example.org/p> <http://example.org/o> <http://example.org/g> .",
        '_:b1 <http://example.org/p> "say \\"hi\\"\\nbye" <http://example.org/g> .',
    ]
    assert not stream.closed


def test_nquads_rejects_writes_after_close():
    handler = NQuadsQuadHandler(io.StringIO())
    handler.close()
    with pytest.raises(HandlerClosedError):
        handler.write_quad(S, P, Literal("o"), G)
