"""
SQLAlchemy URL rendering for connection descriptors.
"""
from sqlalchemy.engine.url import URL, make_url
from sqlalchemy.exc import ArgumentError

from .constants import (
    SQLALCHEMY_POSTGRES_ASYNC,
    SQLALCHEMY_POSTGRES_SYNC,
    SQLALCHEMY_SQLITE_ASYNC,
    SQLALCHEMY_SQLITE_SYNC,
)
from .exceptions import ConfigurationError
from .types import ConnectionDescriptor, SqliteDescriptor


def build_url(descriptor: ConnectionDescriptor, async_driver: bool = True) -> URL:
    """Return a SQLAlchemy URL for the descriptor.

    TLS material is not part of the URL; it is passed to the driver separately.
    """
    if isinstance(descriptor, SqliteDescriptor):
        return URL.create(
            drivername=SQLALCHEMY_SQLITE_ASYNC if async_driver else SQLALCHEMY_SQLITE_SYNC,
            database=descriptor.path,
        )

    drivername = SQLALCHEMY_POSTGRES_ASYNC if async_driver else SQLALCHEMY_POSTGRES_SYNC
    conn = descriptor.connection

    if conn.connection_string:
        try:
            url = make_url(conn.connection_string)
        except (ArgumentError, ValueError) as e:
            raise ConfigurationError(f"Invalid database uri: {e}") from e
        return url.set(drivername=drivername)

    return URL.create(
        drivername=drivername,
        username=conn.user,
        password=conn.password,
        host=conn.host,
        port=conn.port,
        database=conn.database,
    )


def render_url(descriptor: ConnectionDescriptor) -> str:
    """Render the descriptor as a URL string with the password masked."""
    try:
        return build_url(descriptor).render_as_string(hide_password=True)
    except ConfigurationError:
        return "<invalid database uri>"
