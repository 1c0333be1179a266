"""Extract hCalendar microformat data from HTML pages as RDF."""

from hcal_rdf.extraction import extract_html
from hcal_rdf.extractor.hcalendar import HCalendarExtractor
from hcal_rdf.writer.quad_writer import QuadWriter

__version__ = "0.1.0"

__all__ = ["extract_html", "HCalendarExtractor", "QuadWriter", "__version__"]
