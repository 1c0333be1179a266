"""Load HTML pages from the web or the local filesystem."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Tuple
from urllib.parse import urlparse

import requests

from hcal_rdf import config

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": config.USER_AGENT,
    "Accept": config.ACCEPT_HEADER,
}


def is_url(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def fetch_html(url: str) -> Tuple[str, str]:
    """Fetch ``url`` and return ``(html, final_url)`` after redirects."""
    logger.info(f"Fetching {url}")
    response = requests.get(url, headers=DEFAULT_HEADERS, timeout=config.REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.text, response.url


def read_html_file(path: Path) -> Tuple[str, str]:
    """Read a local HTML file and return ``(html, file_uri)``."""
    resolved = path.resolve()
    if not resolved.exists():
        raise FileNotFoundError(f"HTML file not found: {path}")
    return resolved.read_text(encoding="utf-8", errors="replace"), resolved.as_uri()


def load_source(source: str) -> Tuple[str, str]:
    """Load a page given as URL or file path; returns ``(html, document_uri)``."""
    if is_url(source):
        return fetch_html(source)
    return read_html_file(Path(source))
