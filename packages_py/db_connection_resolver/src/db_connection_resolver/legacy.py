"""
Connection resolution for the legacy server's database block.
"""
import logging
from typing import Optional, Union

from .exceptions import NotConfiguredError, PortParseError
from .tls import FileReader, TlsMaterialLoader
from .types import (
    ConnectionDescriptor,
    LegacyDatabaseConfig,
    LegacyPostgresArgs,
    LegacySqliteConfig,
    PostgresConnection,
    PostgresDescriptor,
    SqliteDescriptor,
    TlsSource,
)
from .urls import render_url

logger = logging.getLogger(__name__)


def parse_port(value: Union[int, str, None]) -> Optional[int]:
    """Return the port as an int.

    Ints are copied as-is, strings must hold a non-negative integer,
    anything else means no port.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            port = int(value)
        except ValueError:
            raise PortParseError(value) from None
        if port < 0:
            raise PortParseError(value)
        return port
    return None


class LegacyConnectionResolver:
    """Resolves the legacy config (engine + args) into a ConnectionDescriptor."""

    def __init__(self, reader: Optional[FileReader] = None):
        self.tls_loader = TlsMaterialLoader(reader)

    async def resolve(self, config: Optional[LegacyDatabaseConfig]) -> ConnectionDescriptor:
        if config is None:
            raise NotConfiguredError("Legacy database is not configured")

        if isinstance(config, LegacySqliteConfig):
            logger.debug(f"Legacy engine '{config.engine}' uses the sqlite branch")
            descriptor: ConnectionDescriptor = SqliteDescriptor(path=config.args.database)
        else:
            logger.debug(f"Legacy engine '{config.engine}' uses the postgres branch")
            descriptor = PostgresDescriptor(connection=await self._resolve_postgres(config.args))

        logger.info(f"Resolved legacy database connection: {render_url(descriptor)}")
        return descriptor

    async def _resolve_postgres(self, args: LegacyPostgresArgs) -> PostgresConnection:
        database = None
        if args.database:
            database = args.database
        # dbname wins over database
        if args.dbname:
            database = args.dbname

        port = parse_port(args.port)

        tls = await self.tls_loader.load(
            ca=TlsSource(path=args.sslrootcert),
            cert=TlsSource(path=args.sslcert),
            key=TlsSource(path=args.sslkey),
            passphrase=args.sslpassword,
        )

        return PostgresConnection(
            host=args.host or None,
            port=port,
            database=database,
            user=args.user or None,
            password=args.password or None,
            ssl_mode=args.sslmode,
            tls=tls,
        )


async def resolve_legacy_connection(
    config: Optional[LegacyDatabaseConfig],
    reader: Optional[FileReader] = None,
) -> ConnectionDescriptor:
    """Resolve the legacy database config once with a fresh resolver."""
    return await LegacyConnectionResolver(reader).resolve(config)
