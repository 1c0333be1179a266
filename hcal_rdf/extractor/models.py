"""Shared data models for the microformat extractors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from rdflib import URIRef


@dataclass(frozen=True, slots=True)
class ExtractionContext:
    """Identifies the source document and the extractor producing triples."""

    extractor_name: str
    document_uri: str
    local_id: Optional[str] = None

    @property
    def is_document_context(self) -> bool:
        """True when the context covers the whole document, not a fragment."""
        return self.local_id is None


@dataclass(frozen=True, slots=True)
class ExtractorDescription:
    """Registration metadata consumed by an external extractor registry."""

    name: str
    prefixes: Dict[str, str] = field(default_factory=dict)
    media_types: Tuple[str, ...] = ()

    def bind_prefixes(self, graph) -> None:
        """Bind the extractor's namespace prefixes on an rdflib graph."""
        for prefix, namespace in self.prefixes.items():
            graph.bind(prefix, URIRef(namespace))
