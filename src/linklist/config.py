"""Configuration management for linklist.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from linklist.core.href import DEFAULT_DOCUMENT_PATTERN
from linklist.core.resolver import DEFAULT_DOCUMENT_TYPE, DEFAULT_FRAGMENT_NAME

CONFIG_FILENAME = "linklist.toml"


@dataclass
class ApiConfig:
    """Content API configuration."""

    endpoint: str | None = None
    access_token: str | None = None
    timeout: float = 10.0
    ref_ttl: float = 5.0


@dataclass
class LinkListConfig:
    """Link list document configuration."""

    document_type: str = DEFAULT_DOCUMENT_TYPE
    fragment_name: str = DEFAULT_FRAGMENT_NAME


@dataclass
class HrefConfig:
    """Href resolution configuration."""

    document_pattern: str = DEFAULT_DOCUMENT_PATTERN


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class FixturesConfig:
    """Local JSON documents used instead of the content API."""

    directory: Path | None = None


@dataclass
class Config:
    """Application configuration."""

    api: ApiConfig = field(default_factory=ApiConfig)
    link_list: LinkListConfig = field(default_factory=LinkListConfig)
    href: HrefConfig = field(default_factory=HrefConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    fixtures: FixturesConfig = field(default_factory=FixturesConfig)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for linklist.toml in current directory and parents.

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
            return cls()

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
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        config_dir = path.parent

        return cls(
            api=cls._parse_api(data.get("api")),
            link_list=cls._parse_link_list(data.get("link_list")),
            href=cls._parse_href(data.get("href")),
            server=cls._parse_server(data.get("server")),
            fixtures=cls._parse_fixtures(data.get("fixtures"), config_dir),
            config_path=path,
        )

    @classmethod
    def _parse_api(cls, data: object) -> ApiConfig:
        """Parse api configuration section.

        Args:
            data: Raw api section data

        Returns:
            ApiConfig instance
        """
        if data is None:
            return ApiConfig()

        if not isinstance(data, dict):
            raise ValueError("api section must be a dictionary")

        endpoint = data.get("endpoint")
        if endpoint is not None and not isinstance(endpoint, str):
            raise ValueError("api.endpoint must be a string")

        access_token = data.get("access_token")
        if access_token is not None and not isinstance(access_token, str):
            raise ValueError("api.access_token must be a string")

        timeout = data.get("timeout", 10.0)
        if isinstance(timeout, bool) or not isinstance(timeout, int | float):
            raise ValueError("api.timeout must be a number")

        ref_ttl = data.get("ref_ttl", 5.0)
        if isinstance(ref_ttl, bool) or not isinstance(ref_ttl, int | float):
            raise ValueError("api.ref_ttl must be a number")

        return ApiConfig(
            endpoint=endpoint,
            access_token=access_token,
            timeout=float(timeout),
            ref_ttl=float(ref_ttl),
        )

    @classmethod
    def _parse_link_list(cls, data: object) -> LinkListConfig:
        """Parse link_list configuration section.

        Args:
            data: Raw link_list section data

        Returns:
            LinkListConfig instance
        """
        if data is None:
            return LinkListConfig()

        if not isinstance(data, dict):
            raise ValueError("link_list section must be a dictionary")

        document_type = data.get("document_type", DEFAULT_DOCUMENT_TYPE)
        if not isinstance(document_type, str):
            raise ValueError("link_list.document_type must be a string")

        fragment_name = data.get("fragment_name", DEFAULT_FRAGMENT_NAME)
        if not isinstance(fragment_name, str):
            raise ValueError("link_list.fragment_name must be a string")

        return LinkListConfig(document_type=document_type, fragment_name=fragment_name)

    @classmethod
    def _parse_href(cls, data: object) -> HrefConfig:
        if data is None:
            return HrefConfig()

        if not isinstance(data, dict):
            raise ValueError("href section must be a dictionary")

        document_pattern = data.get("document_pattern", DEFAULT_DOCUMENT_PATTERN)
        if not isinstance(document_pattern, str):
            raise ValueError("href.document_pattern must be a string")

        return HrefConfig(document_pattern=document_pattern)

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
        if isinstance(port, bool) or not isinstance(port, int):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_fixtures(cls, data: object, config_dir: Path) -> FixturesConfig:
        """Parse fixtures configuration section.

        Args:
            data: Raw fixtures section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            FixturesConfig instance
        """
        if data is None:
            return FixturesConfig()

        if not isinstance(data, dict):
            raise ValueError("fixtures section must be a dictionary")

        directory = data.get("directory")
        if directory is None:
            return FixturesConfig()
        if not isinstance(directory, str):
            raise ValueError("fixtures.directory must be a string")

        return FixturesConfig(directory=config_dir / directory)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        document_type: str | None = None,
        fragment_name: str | None = None,
        fixtures_dir: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            document_type: Override link_list.document_type
            fragment_name: Override link_list.fragment_name
            fixtures_dir: Override fixtures.directory

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

        link_list = self.link_list
        if document_type is not None or fragment_name is not None:
            link_list = replace(
                self.link_list,
                document_type=(
                    document_type if document_type is not None else self.link_list.document_type
                ),
                fragment_name=(
                    fragment_name if fragment_name is not None else self.link_list.fragment_name
                ),
            )

        fixtures = self.fixtures
        if fixtures_dir is not None:
            fixtures = replace(self.fixtures, directory=fixtures_dir)

        return replace(self, server=server, link_list=link_list, fixtures=fixtures)
