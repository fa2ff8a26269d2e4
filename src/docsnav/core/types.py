"""Core type definitions and route constants."""

from collections.abc import Sequence
from typing import NewType

# Route for the docs site (e.g., "/docs", "/docs/guide/intro")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)

# Ordered path segments identifying a document, e.g. ("guide", "intro")
Slug = tuple[str, ...]

INDEX_SEGMENT = "index"
ROOT_ROUTE = URLPath("/docs")
ROUTE_PREFIX = "/docs/"

# Url of section nodes that group children but have no document
NO_ROUTE = URLPath("#")


def to_slug(segments: Sequence[str] | str) -> Slug:
    """Normalize a segment sequence or "a/b/c" string to a Slug.

    Args:
        segments: Slug segments, or a slash-separated path

    Returns:
        Tuple of segments

    Raises:
        ValueError: If the slug is empty or contains an empty segment
    """
    if isinstance(segments, str):
        segments = segments.strip("/").split("/")
    slug = tuple(segments)
    if not slug or any(not segment for segment in slug):
        raise ValueError(f"Invalid slug: {list(slug)!r}")
    return slug


def route_for_slug(slug: Sequence[str]) -> URLPath:
    """Build the route for a slug.

    The single-segment slug ("index",) is the docs root.
    """
    if len(slug) == 1 and slug[0] == INDEX_SEGMENT:
        return ROOT_ROUTE
    return URLPath(ROUTE_PREFIX + "/".join(slug))
