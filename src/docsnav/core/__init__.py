"""Core documentation tree building."""

from docsnav.core.documents import DocumentLoader, DocumentRecord, discover_slugs
from docsnav.core.frontmatter import ParsedDocument, parse_frontmatter
from docsnav.core.library import DocsLibrary
from docsnav.core.navigator import PrevNext, flatten_tree, get_prev_next
from docsnav.core.tree import NavNode, build_tree, section_title
from docsnav.core.types import NO_ROUTE, ROOT_ROUTE, Slug, URLPath, route_for_slug

__all__ = [
    "NO_ROUTE",
    "ROOT_ROUTE",
    "DocsLibrary",
    "DocumentLoader",
    "DocumentRecord",
    "NavNode",
    "ParsedDocument",
    "PrevNext",
    "Slug",
    "URLPath",
    "build_tree",
    "discover_slugs",
    "flatten_tree",
    "get_prev_next",
    "parse_frontmatter",
    "route_for_slug",
    "section_title",
]
