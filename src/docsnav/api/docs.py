"""Documents API endpoint.

Returns a document's frontmatter and raw body with prev/next links.
"""

import logging

from aiohttp import web

from docsnav.api.navigation import node_link
from docsnav.app_keys import library_key
from docsnav.core.types import INDEX_SEGMENT, to_slug

logger = logging.getLogger(__name__)


def create_docs_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/docs", get_document),
        web.get("/api/docs/{path:.*}", get_document),
    ]


async def get_document(request: web.Request) -> web.Response:
    path = request.match_info.get("path", "")
    library = request.app[library_key]

    try:
        slug = to_slug(path) if path.strip("/") else (INDEX_SEGMENT,)
    except ValueError:
        return _not_found(path)

    document = await library.get_document(slug)
    if document is None:
        return _not_found(path)

    prev_next = await library.get_prev_next(slug)

    return web.json_response(
        {
            "slug": list(document.slug),
            "url": document.url,
            "title": document.title,
            "description": document.description,
            "frontmatter": document.frontmatter,
            "content": document.body,
            "prev": node_link(prev_next.prev),
            "next": node_link(prev_next.next),
        },
    )


def _not_found(path: str) -> web.Response:
    logger.debug(f"Document not found: {path!r}")
    return web.json_response(
        {"error": "Document not found", "path": path},
        status=404,
    )
