"""Tests for the class-token field reader."""

from __future__ import annotations

from hcal_rdf.extractor.html_document import HTMLDocument

PAGE = """
<html><head><title>  Team   page </title></head><body>
  <div class="vevent extra">
    <abbr class="dtstart" title="2020-01-01T10:00">Jan 1</abbr>
    <span class="category">Work</span>
    <span class="category">Planning</span>
    <span class="category"></span>
    <a class="url" href="/events/1">details</a>
    <span class="uid">abc-123</span>
  </div>
  <div class="vevent-like">not an event</div>
</body></html>
"""


def make_document() -> HTMLDocument:
    return HTMLDocument.from_html(PAGE, "http://example.org/page")


def test_class_match_is_token_based():
    """Only whole class tokens match; `vevent-like` is not a `vevent`."""
    nodes = make_document().find_all_by_class_name("vevent")
    assert len(nodes) == 1
    assert "extra" in nodes[0]["class"]


def test_class_match_ignores_case():
    assert len(make_document().find_all_by_class_name("Vevent")) == 1


def test_scoped_reader_includes_the_node_itself():
    document = make_document()
    node = document.find_all_by_class_name("url")[0]
    assert document.scoped(node).get_singular_url_field("url") == "/events/1"


def test_abbr_title_wins_over_text():
    assert make_document().get_singular_text_field("dtstart") == "2020-01-01T10:00"


def test_plural_field_keeps_source_order_and_empty_values():
    assert make_document().get_plural_text_field("category") == ["Work", "Planning", ""]


def test_missing_fields_are_empty():
    document = make_document()
    assert document.get_singular_text_field("summary") == ""
    assert document.get_plural_text_field("summary") == []
    assert document.get_singular_url_field("summary") == ""


def test_url_field_falls_back_to_text():
    assert make_document().get_singular_url_field("uid") == "abc-123"


def test_absolutize_and_title():
    document = make_document()
    assert document.absolutize_uri("/events/1") == "http://example.org/events/1"
    assert document.absolutize_uri("https://other.org/x") == "https://other.org/x"
    assert document.get_title() == "Team page"


def test_absolutize_percent_encodes_illegal_characters():
    document = make_document()
    assert document.absolutize_uri("my event.html") == "http://example.org/my%20event.html"
    assert document.absolutize_uri("/a%20b") == "http://example.org/a%20b"
