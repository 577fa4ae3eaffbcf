"""Configuration management for govanity.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from govanity.core.redirect import DEFAULT_DOCS_HOST
from govanity.core.types import ImportPath

CONFIG_FILENAME = "govanity.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class RedirectConfig:
    """Documentation redirect configuration."""

    docs_host: str = DEFAULT_DOCS_HOST


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    redirect: RedirectConfig
    imports: tuple[ImportPath, ...] = field(default_factory=tuple)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for govanity.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(server=ServerConfig(), redirect=RedirectConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        return cls(
            server=cls._parse_server(data.get("server")),
            redirect=cls._parse_redirect(data.get("redirect")),
            imports=cls._parse_imports(data.get("imports")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_redirect(cls, data: object) -> RedirectConfig:
        if data is None:
            return RedirectConfig()

        if not isinstance(data, dict):
            raise ValueError("redirect section must be a dictionary")

        docs_host = data.get("docs_host", DEFAULT_DOCS_HOST)
        if not isinstance(docs_host, str) or not docs_host:
            raise ValueError("redirect.docs_host must be a non-empty string")

        return RedirectConfig(docs_host=docs_host)

    @classmethod
    def _parse_imports(cls, data: object) -> tuple[ImportPath, ...]:
        """Parse the [[imports]] array of tables.

        Order is preserved; the first matching mapping wins at request time.

        Args:
            data: Raw imports array

        Returns:
            Tuple of ImportPath mappings
        """
        if data is None:
            return ()

        if not isinstance(data, list):
            raise ValueError("imports must be an array of tables")

        return tuple(cls._parse_import(item, i) for i, item in enumerate(data))

    @classmethod
    def _parse_import(cls, data: object, index: int) -> ImportPath:
        key = f"imports[{index}]"
        if not isinstance(data, dict):
            raise ValueError(f"{key} must be a table")

        from_path = data.get("from")
        if not isinstance(from_path, str) or not from_path:
            raise ValueError(f"{key}.from must be a non-empty string")

        to = data.get("to")
        if not isinstance(to, str) or not to:
            raise ValueError(f"{key}.to must be a non-empty string")

        vcs = data.get("vcs", "git")
        if not isinstance(vcs, str) or not vcs:
            raise ValueError(f"{key}.vcs must be a non-empty string")

        wildcard = data.get("wildcard", False)
        if not isinstance(wildcard, bool):
            raise ValueError(f"{key}.wildcard must be a boolean")

        return ImportPath(vcs=vcs, from_path=from_path, to=to, wildcard=wildcard)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        docs_host: str | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            docs_host: Override redirect.docs_host

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        redirect = self.redirect
        if docs_host is not None:
            redirect = replace(self.redirect, docs_host=docs_host)

        return replace(self, server=server, redirect=redirect)
