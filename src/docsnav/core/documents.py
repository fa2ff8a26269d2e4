"""Document discovery and loading from a docs source directory."""

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from docsnav.core.frontmatter import parse_frontmatter
from docsnav.core.types import Slug, URLPath, route_for_slug, to_slug

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".mdx", ".md")


@dataclass(frozen=True)
class DocumentRecord:
    """Document content combined with its parsed frontmatter."""

    slug: Slug
    title: str
    body: str
    description: str | None = None
    frontmatter: dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> URLPath:
        return route_for_slug(self.slug)


def discover_slugs(
    source_dir: Path,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
) -> list[Slug]:
    """Enumerate document slugs under a directory.

    Walks the directory recursively. Each file with a matching extension
    yields its relative path without extension, split into segments.
    A slug backed by several files (page.md and page.mdx) is listed once.
    Unreadable or missing directories contribute nothing.

    Args:
        source_dir: Root directory containing documents
        extensions: File extensions to include, with leading dot

    Returns:
        Slugs in walk order
    """
    slugs: list[Slug] = []
    seen: set[Slug] = set()

    def on_error(error: OSError) -> None:
        logger.debug(f"Skipping unreadable directory: {error.filename}")

    for dirpath, dirnames, filenames in os.walk(source_dir, onerror=on_error):
        dirnames.sort()
        relative = Path(dirpath).relative_to(source_dir)
        for filename in sorted(filenames):
            stem = _strip_extension(filename, extensions)
            if stem is None:
                continue
            slug = (*relative.parts, stem)
            if slug not in seen:
                seen.add(slug)
                slugs.append(slug)

    return slugs


def _strip_extension(filename: str, extensions: Sequence[str]) -> str | None:
    for extension in extensions:
        if filename.endswith(extension) and len(filename) > len(extension):
            return filename[: -len(extension)]
    return None


class DocumentLoader:
    """Reads documents by slug from a source directory.

    A slug maps to `<source_dir>/<segments joined by />.<ext>`, trying
    extensions in order. A missing file is a normal outcome (None).
    """

    def __init__(
        self,
        source_dir: Path,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    ) -> None:
        """Initialize loader.

        Args:
            source_dir: Root directory containing documents
            extensions: Extensions to try, in order
        """
        self._source_dir = source_dir
        self._extensions = tuple(extensions)

    @property
    def source_dir(self) -> Path:
        """Root directory containing documents."""
        return self._source_dir

    def read(self, slug: Sequence[str]) -> str | None:
        """Read raw document text.

        Args:
            slug: Document slug

        Returns:
            Raw text, or None if no document exists for the slug

        Raises:
            OSError: On I/O errors other than a missing file
        """
        source_path = self._resolve_source_path(slug)
        if source_path is None:
            return None

        try:
            return source_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError:
            logger.warning(f"Skipping document that is not valid UTF-8: {source_path}")
            return None

    def load(self, slug: Sequence[str]) -> DocumentRecord | None:
        """Load and parse a document.

        The title comes from the frontmatter `title` key, falling back to
        the last slug segment.

        Args:
            slug: Document slug

        Returns:
            DocumentRecord, or None if the document does not exist
        """
        try:
            normalized = to_slug(slug)
        except ValueError:
            return None

        raw = self.read(normalized)
        if raw is None:
            return None

        parsed = parse_frontmatter(raw)
        return DocumentRecord(
            slug=normalized,
            title=parsed.frontmatter.get("title", normalized[-1]),
            body=parsed.body,
            description=parsed.frontmatter.get("description"),
            frontmatter=parsed.frontmatter,
        )

    def _resolve_source_path(self, slug: Sequence[str]) -> Path | None:
        """Resolve a slug to an existing source file.

        Returns None for slugs with segments that would leave the source
        directory, and when no file exists for any extension.
        """
        separators = [sep for sep in (os.sep, os.altsep, "/") if sep]
        if not slug or any(
            not s or s in (".", "..") or any(sep in s for sep in separators) for s in slug
        ):
            return None

        base = self._source_dir.joinpath(*slug)
        for extension in self._extensions:
            candidate = base.with_name(base.name + extension)
            if candidate.is_file():
                return candidate
        return None
