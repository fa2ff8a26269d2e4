"""Documentation library over a source directory.

Wires slug discovery, document loading, the tree builder and the navigator
together. Everything is rebuilt from the filesystem on each call.
"""

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from docsnav.core.documents import (
    DEFAULT_EXTENSIONS,
    DocumentLoader,
    DocumentRecord,
    discover_slugs,
)
from docsnav.core.navigator import PrevNext, flatten_tree, get_prev_next
from docsnav.core.tree import NavNode, build_tree
from docsnav.core.types import Slug

logger = logging.getLogger(__name__)


class DocsLibrary:
    """Builds navigation and serves documents from a source directory."""

    def __init__(
        self,
        source_dir: Path,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    ) -> None:
        """Initialize library.

        Args:
            source_dir: Root directory containing documents
            extensions: Document file extensions, in lookup order
        """
        self._source_dir = source_dir
        self._extensions = tuple(extensions)
        self._loader = DocumentLoader(source_dir, self._extensions)

    @property
    def source_dir(self) -> Path:
        """Root directory containing documents."""
        return self._source_dir

    async def list_slugs(self) -> list[Slug]:
        """Discover all document slugs."""
        slugs = await asyncio.to_thread(discover_slugs, self._source_dir, self._extensions)
        logger.debug(f"Discovered {len(slugs)} documents in {self._source_dir}")
        return slugs

    async def get_document(self, slug: Sequence[str]) -> DocumentRecord | None:
        """Load a single document, or None if it does not exist."""
        return await asyncio.to_thread(self._loader.load, slug)

    async def load_records(self) -> list[DocumentRecord]:
        """Load every discovered document concurrently.

        Documents that disappear between discovery and loading are dropped.

        Returns:
            Records in discovery order
        """
        slugs = await self.list_slugs()
        documents = await asyncio.gather(*(self.get_document(slug) for slug in slugs))

        records: list[DocumentRecord] = []
        for slug, document in zip(slugs, documents, strict=True):
            if document is None:
                logger.debug(f"Dropping document that failed to load: {'/'.join(slug)}")
                continue
            records.append(document)
        return records

    async def build_tree(self) -> list[NavNode]:
        """Build the navigation tree for all documents."""
        records = await self.load_records()
        tree = build_tree(records)
        logger.debug(f"Built navigation tree with {len(tree)} top-level nodes")
        return tree

    async def flatten(self) -> list[NavNode]:
        """List content-bearing nodes in reading order."""
        return flatten_tree(await self.build_tree())

    async def get_prev_next(self, slug: Sequence[str]) -> PrevNext:
        """Find the neighbours of a document in reading order."""
        return get_prev_next(await self.build_tree(), slug)
