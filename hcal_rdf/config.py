"""Configuration constants for the hCalendar to RDF extractor."""

from __future__ import annotations

import os

# ---------------------------------------------------------------------------
# Extractor registration metadata
# ---------------------------------------------------------------------------

HCALENDAR_EXTRACTOR_NAME = "html-mf-hcalendar"
HCALENDAR_MEDIA_TYPES = ("text/html;q=0.1", "application/xhtml+xml;q=0.1")

# ---------------------------------------------------------------------------
# Vocabularies
# ---------------------------------------------------------------------------

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
ICAL_NS = "http://www.w3.org/2002/12/cal/icaltzd#"
ANY23_NS = "http://vocab.sindice.net/any23#"

# ---------------------------------------------------------------------------
# HTML parsing
# ---------------------------------------------------------------------------

HTML_PARSER = "lxml"

# ---------------------------------------------------------------------------
# HTTP fetching (CLI only)
# ---------------------------------------------------------------------------

USER_AGENT = os.getenv(
    "HCAL_RDF_USER_AGENT",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36",
)
REQUEST_TIMEOUT = float(os.getenv("HCAL_RDF_REQUEST_TIMEOUT", "30"))
ACCEPT_HEADER = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"

OUTPUT_FORMATS = ("nquads", "trig")
