"""Application keys for type-safe app configuration access."""

from aiohttp import web

from docsnav.core.library import DocsLibrary

library_key = web.AppKey("library", DocsLibrary)
