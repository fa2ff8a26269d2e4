"""Linear prev/next navigation over a navigation tree."""

from collections.abc import Sequence
from dataclasses import dataclass

from docsnav.core.tree import NavNode
from docsnav.core.types import route_for_slug


@dataclass(frozen=True)
class PrevNext:
    """Neighbours of a document in reading order."""

    prev: NavNode | None = None
    next: NavNode | None = None


def flatten_tree(tree: Sequence[NavNode]) -> list[NavNode]:
    """List content-bearing nodes in pre-order.

    Parents come before their children and children keep tree order.
    Section nodes are skipped but their children are still visited.
    """
    flat: list[NavNode] = []

    def visit(nodes: Sequence[NavNode]) -> None:
        for node in nodes:
            if not node.is_section:
                flat.append(node)
            visit(node.children)

    visit(tree)
    return flat


def get_prev_next(tree: Sequence[NavNode], slug: Sequence[str]) -> PrevNext:
    """Find the documents before and after a slug in reading order.

    Args:
        tree: Navigation tree from build_tree
        slug: Target document slug

    Returns:
        PrevNext with None at either boundary, or both None when the slug
        is not in the tree
    """
    flat = flatten_tree(tree)
    url = route_for_slug(slug)

    for i, node in enumerate(flat):
        if node.url == url:
            return PrevNext(
                prev=flat[i - 1] if i > 0 else None,
                next=flat[i + 1] if i < len(flat) - 1 else None,
            )

    return PrevNext()
