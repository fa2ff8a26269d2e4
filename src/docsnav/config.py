"""Configuration management for docsnav.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from docsnav.core.documents import DEFAULT_EXTENSIONS

CONFIG_FILENAME = "docsnav.toml"

# Tried in order when docs.source_dir is not configured
DEFAULT_SOURCE_CANDIDATES = ("content/docs", "apps/web/content/docs")


class DocsDirectoryNotFoundError(FileNotFoundError):
    """Raised when no documentation source directory exists."""

    def __init__(self, candidates: list[Path]) -> None:
        self.candidates = candidates
        checked = ", ".join(str(c) for c in candidates)
        super().__init__(f"Docs directory not found. Checked: {checked}")


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class DocsConfig:
    """Documentation configuration.

    source_dir is None until configured; candidates relative to base_dir
    are then tried by Config.resolve_source_dir().
    """

    source_dir: Path | None = None
    base_dir: Path = field(default_factory=Path)
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    docs: DocsConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Read docsnav.toml.

        An explicit path must exist. Without one, the nearest docsnav.toml
        in the working directory or an ancestor is used; with none found,
        every setting is a default and docs candidates resolve against the
        working directory.

        Raises:
            FileNotFoundError: If config_path is given but missing
            ValueError: On malformed TOML or a mistyped setting
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls(server=ServerConfig(), docs=DocsConfig(base_dir=Path.cwd()))

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Nearest docsnav.toml walking up from the working directory."""
        cwd = Path.cwd()
        for directory in (cwd, *cwd.parents):
            candidate = directory / CONFIG_FILENAME
            if candidate.exists():
                return candidate
        return None

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Build a Config from one TOML file.

        Relative docs paths are anchored at the file's directory.
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        return cls(
            server=cls._parse_server(data.get("server")),
            docs=cls._parse_docs(data.get("docs"), path.parent),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Validate the [server] table; a missing table means defaults."""
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", ServerConfig.host)
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", ServerConfig.port)
        if isinstance(port, bool) or not isinstance(port, int):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Validate the [docs] table.

        source_dir is taken relative to config_dir; leaving it out defers
        to the content/docs candidates under config_dir.
        """
        if data is None:
            return DocsConfig(base_dir=config_dir)

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        source_dir = data.get("source_dir")
        source_path: Path | None = None
        if source_dir is not None:
            if not isinstance(source_dir, str):
                raise ValueError("docs.source_dir must be a string")
            source_path = config_dir / source_dir

        extensions_raw = data.get("extensions", list(DEFAULT_EXTENSIONS))
        if not isinstance(extensions_raw, list) or not extensions_raw:
            raise ValueError("docs.extensions must be a non-empty list")
        extensions: list[str] = []
        for item in extensions_raw:
            if not isinstance(item, str) or not item.startswith("."):
                raise ValueError("docs.extensions items must be strings starting with '.'")
            extensions.append(item)

        return DocsConfig(source_dir=source_path, base_dir=config_dir, extensions=extensions)

    def source_candidates(self) -> list[Path]:
        """Directories tried, in order, when resolving the source directory."""
        if self.docs.source_dir is not None:
            return [self.docs.source_dir]
        return [self.docs.base_dir / candidate for candidate in DEFAULT_SOURCE_CANDIDATES]

    def resolve_source_dir(self) -> Path:
        """Return the first existing documentation source directory.

        Returns:
            Existing source directory

        Raises:
            DocsDirectoryNotFoundError: If no candidate directory exists
        """
        candidates = self.source_candidates()
        for candidate in candidates:
            if candidate.is_dir():
                return candidate
        raise DocsDirectoryNotFoundError(candidates)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        source_dir: Path | None = None,
    ) -> "Config":
        """Return a copy with command-line values layered on top.

        None means "not given on the command line" and keeps the file value.
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        docs = self.docs
        if source_dir is not None:
            docs = replace(self.docs, source_dir=source_dir)

        return replace(self, server=server, docs=docs)
