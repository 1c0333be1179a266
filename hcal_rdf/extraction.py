"""Run an extractor over an HTML page and close the output handler."""

from __future__ import annotations

import logging
from typing import Optional

from hcal_rdf.extractor.hcalendar import HCalendarExtractor
from hcal_rdf.extractor.html_document import HTMLDocument
from hcal_rdf.extractor.microformat import MicroformatExtractor
from hcal_rdf.writer.base import TripleHandler

logger = logging.getLogger(__name__)


def extract_html(
    html: str,
    document_uri: str,
    handler: TripleHandler,
    extractor: Optional[MicroformatExtractor] = None,
) -> bool:
    """Parse ``html`` and write its microformat triples to ``handler``.

    The handler is closed on return and on error; errors raised by the
    handler propagate to the caller.
    """
    extractor = extractor or HCalendarExtractor()
    try:
        document = HTMLDocument.from_html(html, document_uri)
        found = extractor.run(document, handler)
    finally:
        handler.close()
    if not found:
        logger.info(f"No {extractor.name} data found in {document_uri}")
    return found
