"""Field reader over a BeautifulSoup tree for class-based microformats."""

from __future__ import annotations

from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from requests.utils import requote_uri

from hcal_rdf import config

# Attribute holding the URL value for URL-style fields, by element name.
_URL_ATTRIBUTES = {
    "a": "href",
    "link": "href",
    "img": "src",
    "area": "src",
    "object": "data",
}


def clean_text(value: Optional[str]) -> str:
    """Normalize whitespace and strip strings; ``None`` becomes ``""``."""
    if value is None:
        return ""
    return " ".join(value.split())


def class_tokens(node: Tag) -> List[str]:
    class_attr = node.get("class")
    if class_attr is None:
        return []
    if isinstance(class_attr, str):
        return class_attr.split()
    return list(class_attr)


def has_class_token(node: Tag, class_name: str) -> bool:
    """Return True if ``class_name`` is one of the node's class tokens."""
    wanted = class_name.lower()
    return any(token.lower() == wanted for token in class_tokens(node))


class HTMLDocument:
    """A parsed HTML tree, or a subtree of one, plus the base URI of the page.

    All field lookups search the root node itself and its descendants, so a
    reader scoped to a matched node sees that node's own value too.
    """

    def __init__(self, root: Tag, base_uri: str = "") -> None:
        self._root = root
        self.base_uri = base_uri

    @classmethod
    def from_html(cls, html: str, base_uri: str = "") -> "HTMLDocument":
        return cls(BeautifulSoup(html, config.HTML_PARSER), base_uri)

    @property
    def root(self) -> Tag:
        return self._root

    def scoped(self, node: Tag) -> "HTMLDocument":
        """Return a reader over ``node`` sharing this document's base URI."""
        return HTMLDocument(node, self.base_uri)

    def find_all_by_class_name(self, class_name: str) -> List[Tag]:
        """Elements carrying ``class_name`` as a class token, in document order."""
        nodes: List[Tag] = []
        if has_class_token(self._root, class_name):
            nodes.append(self._root)
        nodes.extend(self._root.find_all(lambda tag: has_class_token(tag, class_name)))
        return nodes

    def get_plural_text_field(self, class_name: str) -> List[str]:
        return [_node_text(node) for node in self.find_all_by_class_name(class_name)]

    def get_singular_text_field(self, class_name: str) -> str:
        values = self.get_plural_text_field(class_name)
        return values[0] if values else ""

    def get_singular_url_field(self, class_name: str) -> str:
        """First match as a URL-like string: link target or element text."""
        nodes = self.find_all_by_class_name(class_name)
        if not nodes:
            return ""
        node = nodes[0]
        attribute = _URL_ATTRIBUTES.get(node.name)
        if attribute and node.get(attribute):
            return clean_text(node.get(attribute))
        return _node_text(node)

    def absolutize_uri(self, relative: str) -> str:
        """Resolve ``relative`` against the base URI, percent-encoding illegal characters."""
        return requote_uri(urljoin(self.base_uri, relative))

    def get_title(self) -> str:
        title = self._root.find("title")
        if title is None:
            return ""
        return clean_text(title.get_text(" ", strip=True))


def _node_text(node: Tag) -> str:
    if node.name == "abbr" and node.get("title"):
        return clean_text(node.get("title"))
    return clean_text(node.get_text(" ", strip=True))
