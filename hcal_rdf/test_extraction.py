"""End-to-end tests: HTML in, quads out."""

from __future__ import annotations

import io

import pytest
from rdflib import Dataset, Literal, URIRef
from rdflib.namespace import RDFS

from hcal_rdf.extraction import extract_html
from hcal_rdf.extractor import vocab
from hcal_rdf.writer.base import QuadHandler
from hcal_rdf.writer.quad_handlers import DatasetQuadHandler, NQuadsQuadHandler
from hcal_rdf.writer.quad_writer import QuadWriter

DOC = "http://example.org/events"
META = "http://example.org/meta"

PAGE = """
<html><head><title>Upcoming</title></head><body>
  <div class="vcalendar">
    <div class="vevent">
      <span class="summary">Meeting</span>
      <span class="dtstart">2020-01-01</span>
    </div>
  </div>
</body></html>
"""


class BrokenQuadHandler(QuadHandler):
    def __init__(self) -> None:
        self.closed = False

    def write_quad(self, subject, predicate, obj, graph):
        raise OSError("downstream unavailable")

    def close(self):
        self.closed = True


def test_quads_land_in_document_graph_with_metadata():
    handler = DatasetQuadHandler()
    found = extract_html(PAGE, DOC, QuadWriter(handler, META))
    assert found is True
    assert len(handler.dataset.graph(URIRef(DOC))) == 5
    meta = handler.dataset.graph(URIRef(META))
    assert (URIRef(DOC), RDFS.label, Literal("Upcoming")) in meta
    assert (URIRef(DOC), vocab.EXTRACTOR, vocab.get_extractor_resource("html-mf-hcalendar")) in meta
    assert handler.quad_count == 7


def test_page_without_calendar_writes_nothing():
    stream = io.StringIO()
    found = extract_html("<p>no events</p>", DOC, QuadWriter(NQuadsQuadHandler(stream)))
    assert found is False
    assert stream.getvalue() == ""


def test_handler_closed_when_sink_fails():
    downstream = BrokenQuadHandler()
    writer = QuadWriter(downstream)
    with pytest.raises(OSError):
        extract_html(PAGE, DOC, writer)
    assert writer.closed
    assert downstream.closed


def test_nquads_output_parses_back_with_encoded_url():
    stream = io.StringIO()
    html = "<div class='vevent'><a class='url' href='my event.html'>x</a></div>"
    found = extract_html(html, DOC, QuadWriter(NQuadsQuadHandler(stream)))
    assert found is True

    dataset = Dataset()
    dataset.parse(data=stream.getvalue(), format="nquads")
    graph = dataset.graph(URIRef(DOC))
    assert URIRef("http://example.org/my%20event.html") in set(graph.objects(None, vocab.ICAL["url"]))
    assert len(graph) == 4
