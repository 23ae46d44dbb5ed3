"""
Data models for database connection resolution.

Input configs are pydantic models validated from the legacy and modern
config documents. Resolution results are frozen dataclasses.
"""
from dataclasses import dataclass, field
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Discriminator, Field, Tag

from .constants import DRIVER_POSTGRES, DRIVER_SQLITE, SQLITE_ENGINES

SslMode = Literal["disable", "allow", "prefer", "require", "verify-ca", "verify-full"]


# ---------------------------------------------------------------------------
# Legacy config
# ---------------------------------------------------------------------------

class LegacySqliteArgs(BaseModel):
    """Arguments of a file-based legacy database."""
    model_config = ConfigDict(frozen=True)

    database: str = Field(description="Path to the SQLite database file")


class LegacyPostgresArgs(BaseModel):
    """Arguments of a networked legacy database.

    The legacy arg bag also carries pool tuning keys (cp_min, cp_max, ...)
    which are ignored here.
    Numeric values (e.g. a numeric password in YAML) are read as strings.
    """
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    database: Optional[str] = None
    dbname: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    host: Optional[str] = None
    port: Optional[Union[int, str]] = None
    sslmode: Optional[SslMode] = None
    sslcert: Optional[str] = Field(default=None, description="Path to client certificate")
    sslrootcert: Optional[str] = Field(default=None, description="Path to CA certificate")
    sslkey: Optional[str] = Field(default=None, description="Path to client key")
    sslpassword: Optional[str] = Field(default=None, description="Passphrase of the client key")


class LegacySqliteConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    engine: Literal["sqlite", "sqlite3"] = Field(validation_alias=AliasChoices("engine", "name"))
    args: LegacySqliteArgs


class LegacyPostgresConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    engine: str = Field(validation_alias=AliasChoices("engine", "name"))
    args: LegacyPostgresArgs = Field(default_factory=LegacyPostgresArgs)


def _legacy_variant(value: Any) -> str:
    if isinstance(value, dict):
        engine = value.get("engine", value.get("name"))
    else:
        engine = getattr(value, "engine", None)
    return "sqlite" if engine in SQLITE_ENGINES else "postgres"


# Any engine other than sqlite is handled as postgres
LegacyDatabaseConfig = Annotated[
    Union[
        Annotated[LegacySqliteConfig, Tag("sqlite")],
        Annotated[LegacyPostgresConfig, Tag("postgres")],
    ],
    Discriminator(_legacy_variant),
]


# ---------------------------------------------------------------------------
# Modern config
# ---------------------------------------------------------------------------

class ModernTlsFields(BaseModel):
    """SSL settings shared by both modern config forms.

    Each of ca/certificate/key can be given inline (PEM text) or as a path.
    """
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    ssl_mode: Optional[SslMode] = None
    ssl_ca: Optional[str] = None
    ssl_ca_file: Optional[str] = None
    ssl_certificate: Optional[str] = None
    ssl_certificate_file: Optional[str] = None
    ssl_key: Optional[str] = None
    ssl_key_file: Optional[str] = None


class ModernUriConfig(ModernTlsFields):
    uri: str = Field(description="Full connection string")


class ModernFieldsConfig(ModernTlsFields):
    database: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None


def _modern_variant(value: Any) -> str:
    if isinstance(value, dict):
        return "uri" if isinstance(value.get("uri"), str) else "fields"
    return "uri" if isinstance(value, ModernUriConfig) else "fields"


ModernDatabaseConfig = Annotated[
    Union[
        Annotated[ModernUriConfig, Tag("uri")],
        Annotated[ModernFieldsConfig, Tag("fields")],
    ],
    Discriminator(_modern_variant),
]


# ---------------------------------------------------------------------------
# Resolution results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TlsSource:
    """One TLS field: an inline value and/or a file path."""
    inline: Optional[Union[str, bytes]] = None
    path: Optional[str] = None


@dataclass(frozen=True)
class TlsMaterial:
    """TLS bundle handed to the driver. Present only if ca, cert or key is set."""
    ca: Optional[bytes] = None
    cert: Optional[bytes] = None
    key: Optional[bytes] = field(default=None, repr=False)
    passphrase: Optional[bytes] = field(default=None, repr=False)


@dataclass(frozen=True)
class PostgresConnection:
    host: Optional[str] = None
    port: Optional[int] = None
    database: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    connection_string: Optional[str] = field(default=None, repr=False)
    ssl_mode: Optional[str] = None
    tls: Optional[TlsMaterial] = None


@dataclass(frozen=True)
class SqliteDescriptor:
    path: str
    driver: Literal["sqlite"] = DRIVER_SQLITE


@dataclass(frozen=True)
class PostgresDescriptor:
    connection: PostgresConnection
    driver: Literal["postgres"] = DRIVER_POSTGRES


ConnectionDescriptor = Union[SqliteDescriptor, PostgresDescriptor]
