"""Shared test fixtures."""

from pathlib import Path

import pytest
from docsnav.config import Config, DocsConfig, ServerConfig


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create docs directory with sample structure.

    content/docs/
    ├── index.mdx                 # Home
    ├── guide/
    │   ├── intro.mdx             # Intro
    │   └── setup.md              # Setup
    └── reference/
        ├── api/
        │   └── endpoints.mdx     # no frontmatter
        └── api.mdx               # API Reference
    """
    docs = tmp_path / "content" / "docs"
    docs.mkdir(parents=True)

    (docs / "index.mdx").write_text("---\ntitle: Home\n---\n# Welcome\n")

    guide = docs / "guide"
    guide.mkdir()
    (guide / "intro.mdx").write_text(
        "---\ntitle: Intro\ndescription: \"Start here\"\n---\nIntro body.\n",
    )
    (guide / "setup.md").write_text("---\ntitle: Setup\n---\nSetup body.\n")

    api = docs / "reference" / "api"
    api.mkdir(parents=True)
    (api / "endpoints.mdx").write_text("Endpoints without frontmatter.\n")
    (docs / "reference" / "api.mdx").write_text("---\ntitle: API Reference\n---\n")

    return docs


@pytest.fixture
def test_config(docs_dir: Path) -> Config:
    """Create a test configuration pointing at docs_dir."""
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(source_dir=docs_dir, base_dir=docs_dir.parent.parent),
    )
