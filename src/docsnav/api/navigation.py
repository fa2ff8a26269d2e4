"""Navigation API endpoints.

Provides the full navigation tree and the flattened reading order.
"""

from aiohttp import web

from docsnav.app_keys import library_key
from docsnav.core.tree import NavNode


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/navigation/flat", get_flat_navigation),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    library = request.app[library_key]
    tree = await library.build_tree()
    return web.json_response({"items": [node.to_dict() for node in tree]})


async def get_flat_navigation(request: web.Request) -> web.Response:
    library = request.app[library_key]
    flat = await library.flatten()
    return web.json_response({"items": [node_link(node) for node in flat]})


def node_link(node: NavNode | None) -> dict[str, object] | None:
    """Serialize a node without its children."""
    if node is None:
        return None
    return {"title": node.title, "slug": list(node.slug), "url": node.url}
