"""
Connection resolution for the modern service's database block.
"""
import logging
from typing import Optional

from .tls import FileReader, TlsMaterialLoader
from .types import (
    ConnectionDescriptor,
    ModernDatabaseConfig,
    ModernTlsFields,
    ModernUriConfig,
    PostgresConnection,
    PostgresDescriptor,
    TlsMaterial,
    TlsSource,
)
from .urls import render_url

logger = logging.getLogger(__name__)


class ModernConnectionResolver:
    """Resolves the modern config (uri or discrete fields) into a ConnectionDescriptor.

    The modern source is always considered configured. A string uri takes
    the whole connection; discrete fields are then never looked at.
    Discrete fields are copied only when truthy, so port 0 counts as unset.
    """

    def __init__(self, reader: Optional[FileReader] = None):
        self.tls_loader = TlsMaterialLoader(reader)

    async def resolve(self, config: ModernDatabaseConfig) -> ConnectionDescriptor:
        tls = await self._load_tls(config)

        if isinstance(config, ModernUriConfig):
            logger.debug("Using uri form of the modern database config")
            connection = PostgresConnection(
                connection_string=config.uri,
                ssl_mode=config.ssl_mode,
                tls=tls,
            )
        else:
            logger.debug("Using discrete fields of the modern database config")
            connection = PostgresConnection(
                host=config.host or None,
                port=config.port or None,
                database=config.database or None,
                user=config.username or None,
                password=config.password or None,
                ssl_mode=config.ssl_mode,
                tls=tls,
            )

        descriptor = PostgresDescriptor(connection=connection)
        logger.info(f"Resolved modern database connection: {render_url(descriptor)}")
        return descriptor

    async def _load_tls(self, config: ModernTlsFields) -> Optional[TlsMaterial]:
        return await self.tls_loader.load(
            ca=TlsSource(inline=config.ssl_ca, path=config.ssl_ca_file),
            cert=TlsSource(inline=config.ssl_certificate, path=config.ssl_certificate_file),
            key=TlsSource(inline=config.ssl_key, path=config.ssl_key_file),
        )


async def resolve_modern_connection(
    config: ModernDatabaseConfig,
    reader: Optional[FileReader] = None,
) -> ConnectionDescriptor:
    """Resolve the modern database config once with a fresh resolver."""
    return await ModernConnectionResolver(reader).resolve(config)
