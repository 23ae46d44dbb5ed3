"""
Database connection descriptor resolution for the legacy and modern config sources.
"""
from .exceptions import (
    ConfigurationError,
    ConnectionResolutionError,
    FileReadError,
    NotConfiguredError,
    PortParseError,
)
from .legacy import LegacyConnectionResolver, parse_port, resolve_legacy_connection
from .loader import load_legacy_config, load_modern_config, parse_legacy_config, parse_modern_config
from .modern import ModernConnectionResolver, resolve_modern_connection
from .tls import FileReader, LocalFileReader, TlsMaterialLoader
from .types import (
    ConnectionDescriptor,
    LegacyDatabaseConfig,
    LegacyPostgresArgs,
    LegacyPostgresConfig,
    LegacySqliteArgs,
    LegacySqliteConfig,
    ModernDatabaseConfig,
    ModernFieldsConfig,
    ModernUriConfig,
    PostgresConnection,
    PostgresDescriptor,
    SqliteDescriptor,
    TlsMaterial,
    TlsSource,
)
from .urls import build_url, render_url

__all__ = [
    "ConfigurationError",
    "ConnectionResolutionError",
    "FileReadError",
    "NotConfiguredError",
    "PortParseError",
    "LegacyConnectionResolver",
    "parse_port",
    "resolve_legacy_connection",
    "load_legacy_config",
    "load_modern_config",
    "parse_legacy_config",
    "parse_modern_config",
    "ModernConnectionResolver",
    "resolve_modern_connection",
    "FileReader",
    "LocalFileReader",
    "TlsMaterialLoader",
    "ConnectionDescriptor",
    "LegacyDatabaseConfig",
    "LegacyPostgresArgs",
    "LegacyPostgresConfig",
    "LegacySqliteArgs",
    "LegacySqliteConfig",
    "ModernDatabaseConfig",
    "ModernFieldsConfig",
    "ModernUriConfig",
    "PostgresConnection",
    "PostgresDescriptor",
    "SqliteDescriptor",
    "TlsMaterial",
    "TlsSource",
    "build_url",
    "render_url",
]
