"""CLI that extracts hCalendar data from an HTML page and prints RDF quads."""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import Iterable, Optional, TextIO

import requests

from hcal_rdf import config
from hcal_rdf.extraction import extract_html
from hcal_rdf.extractor.hcalendar import HCalendarExtractor
from hcal_rdf.io import fetch
from hcal_rdf.writer.quad_handlers import DatasetQuadHandler, NQuadsQuadHandler
from hcal_rdf.writer.quad_writer import QuadWriter

logger = logging.getLogger(__name__)


def run_nquads_mode(
    html: str,
    document_uri: str,
    stream: TextIO,
    metadata_graph: Optional[str],
) -> bool:
    writer = QuadWriter(NQuadsQuadHandler(stream), metadata_graph)
    return extract_html(html, document_uri, writer)


def run_trig_mode(
    html: str,
    document_uri: str,
    stream: TextIO,
    metadata_graph: Optional[str],
) -> bool:
    extractor = HCalendarExtractor()
    handler = DatasetQuadHandler()
    extractor.description.bind_prefixes(handler.dataset)
    found = extract_html(html, document_uri, QuadWriter(handler, metadata_graph), extractor)
    stream.write(handler.dataset.serialize(format="trig"))
    return found


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("source", help="HTML file path or http(s) URL.")
    parser.add_argument(
        "--base-uri",
        help="Document URI used as graph name and for resolving relative URLs.",
    )
    parser.add_argument(
        "--meta-graph",
        help="Graph URI recording which extractors ran and the page title.",
    )
    parser.add_argument(
        "--format",
        choices=config.OUTPUT_FORMATS,
        default="nquads",
        help="Output serialization.",
    )
    parser.add_argument("--output", type=Path, help="Output file (default: stdout).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: Iterable[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        html, document_uri = fetch.load_source(args.source)
    except (requests.RequestException, OSError) as e:
        logger.error(f"Failed to load {args.source}: {e}")
        raise SystemExit(2)
    document_uri = args.base_uri or document_uri

    run_mode = run_trig_mode if args.format == "trig" else run_nquads_mode
    with ExitStack() as stack:
        if args.output:
            stream = stack.enter_context(args.output.open("w", encoding="utf-8"))
        else:
            stream = sys.stdout
        found = run_mode(html, document_uri, stream, args.meta_graph)

    if not found:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
