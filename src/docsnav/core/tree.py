"""Navigation tree builder.

Assembles flat document slugs into a nested tree of NavNode. Path segments
without their own document become section nodes that only group children.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol, TypedDict

from docsnav.core.types import NO_ROUTE, ROOT_ROUTE, Slug, URLPath, route_for_slug, to_slug

_WORD_START_RE = re.compile(r"\b\w")


class NavNodeDict(TypedDict):
    """Dictionary representation of a navigation node."""

    title: str
    slug: list[str]
    url: str
    children: list["NavNodeDict"]


class TitledSlug(Protocol):
    """Anything carrying a slug and a title, e.g. a DocumentRecord."""

    @property
    def slug(self) -> Slug: ...

    @property
    def title(self) -> str: ...


@dataclass
class NavNode:
    """Navigation tree node.

    A node is content-bearing when its url is a real route, and a section
    when its url is NO_ROUTE.
    """

    title: str
    slug: Slug
    url: URLPath
    children: list["NavNode"] = field(default_factory=list)

    @property
    def is_section(self) -> bool:
        return self.url == NO_ROUTE

    def to_dict(self) -> NavNodeDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "title": self.title,
            "slug": list(self.slug),
            "url": self.url,
            "children": [child.to_dict() for child in self.children],
        }


def section_title(segment: str) -> str:
    """Derive a display title from a path segment.

    Hyphens become spaces and each word gets an upper-case first letter;
    the rest of each word is left as is ("getting-started" -> "Getting Started").
    """
    return _WORD_START_RE.sub(lambda m: m.group().upper(), segment.replace("-", " "))


def build_tree(records: Iterable[TitledSlug]) -> list[NavNode]:
    """Build the navigation tree from (slug, title) records.

    Records are sorted first: the root document leads, then the rest by
    joined slug in code-point order. Sibling order is the order in which
    nodes were first inserted at each level. When a record lands on a node
    that already exists (a section created for a deeper record), the node
    takes the record's title and route.

    Args:
        records: Records with unique slugs

    Returns:
        Top-level navigation nodes

    Raises:
        ValueError: If a record has an empty slug or an empty segment
    """
    ordered = sorted(records, key=_sort_key)

    roots: list[NavNode] = []
    index: dict[Slug, NavNode] = {}

    for record in ordered:
        slug = to_slug(record.slug)
        level = roots

        for depth in range(1, len(slug) + 1):
            prefix = slug[:depth]
            is_leaf = depth == len(slug)
            node = index.get(prefix)

            if node is None:
                if is_leaf:
                    node = NavNode(title=record.title, slug=prefix, url=route_for_slug(slug))
                else:
                    node = NavNode(title=section_title(prefix[-1]), slug=prefix, url=NO_ROUTE)
                index[prefix] = node
                level.append(node)
            elif is_leaf:
                node.title = record.title
                node.url = route_for_slug(slug)

            level = node.children

    return roots


def _sort_key(record: TitledSlug) -> tuple[bool, str]:
    return route_for_slug(record.slug) != ROOT_ROUTE, "/".join(record.slug)
