"""Tests for DocsLibrary."""

import logging
from pathlib import Path

import pytest
from docsnav.core.library import DocsLibrary
from docsnav.core.navigator import PrevNext
from docsnav.core.types import NO_ROUTE


class TestDocsLibrary:
    """Tests for DocsLibrary."""

    @pytest.mark.asyncio
    async def test__load_records__loads_all_documents(self, docs_dir: Path) -> None:
        library = DocsLibrary(docs_dir)

        records = await library.load_records()

        assert sorted(record.title for record in records) == [
            "API Reference",
            "Home",
            "Intro",
            "Setup",
            "endpoints",
        ]

    @pytest.mark.asyncio
    async def test__build_tree__assembles_sample_docs(self, docs_dir: Path) -> None:
        library = DocsLibrary(docs_dir)

        tree = await library.build_tree()

        assert [node.title for node in tree] == ["Home", "Guide", "Reference"]
        reference = tree[2]
        assert reference.url == NO_ROUTE
        api = reference.children[0]
        assert (api.title, api.url) == ("API Reference", "/docs/reference/api")
        assert [child.title for child in api.children] == ["endpoints"]

    @pytest.mark.asyncio
    async def test__flatten__returns_reading_order(self, docs_dir: Path) -> None:
        library = DocsLibrary(docs_dir)

        flat = await library.flatten()

        assert [node.url for node in flat] == [
            "/docs",
            "/docs/guide/intro",
            "/docs/guide/setup",
            "/docs/reference/api",
            "/docs/reference/api/endpoints",
        ]

    @pytest.mark.asyncio
    async def test__get_prev_next__crosses_sections(self, docs_dir: Path) -> None:
        library = DocsLibrary(docs_dir)

        result = await library.get_prev_next(("guide", "setup"))

        assert result.prev is not None
        assert result.next is not None
        assert result.prev.title == "Intro"
        assert result.next.title == "API Reference"

    @pytest.mark.asyncio
    async def test__get_prev_next__unknown_slug(self, docs_dir: Path) -> None:
        library = DocsLibrary(docs_dir)

        assert await library.get_prev_next(("unknown",)) == PrevNext()

    @pytest.mark.asyncio
    async def test__get_document__returns_record(self, docs_dir: Path) -> None:
        library = DocsLibrary(docs_dir)

        record = await library.get_document(("guide", "intro"))

        assert record is not None
        assert record.description == "Start here"

    @pytest.mark.asyncio
    async def test__empty_dir__builds_empty_tree(self, tmp_path: Path) -> None:
        library = DocsLibrary(tmp_path)

        assert await library.build_tree() == []
        assert await library.flatten() == []

    @pytest.mark.asyncio
    async def test__rebuilds_on_each_call(self, docs_dir: Path) -> None:
        """Pick up documents added after a previous build."""
        library = DocsLibrary(docs_dir)
        await library.build_tree()

        (docs_dir / "changelog.md").write_text("---\ntitle: Changelog\n---\n")
        tree = await library.build_tree()

        assert "Changelog" in [node.title for node in tree]

    @pytest.mark.asyncio
    async def test__unloadable_document__dropped_with_debug_log(
        self,
        docs_dir: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Skip discovered documents that fail to load and log them."""
        (docs_dir / "guide" / "binary.md").write_bytes(b"\xff\xfe\x00bad")
        library = DocsLibrary(docs_dir)

        with caplog.at_level(logging.DEBUG, logger="docsnav.core.library"):
            records = await library.load_records()

        assert ("guide", "binary") not in [record.slug for record in records]
        assert len(records) == 5
        assert "Dropping document that failed to load: guide/binary" in caplog.text

    @pytest.mark.asyncio
    async def test__extensions__limit_discovery(self, docs_dir: Path) -> None:
        library = DocsLibrary(docs_dir, extensions=(".md",))

        flat = await library.flatten()

        assert [node.title for node in flat] == ["Setup"]
