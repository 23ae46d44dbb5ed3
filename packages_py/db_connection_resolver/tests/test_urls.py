import pytest

from db_connection_resolver import (
    ConfigurationError,
    PostgresConnection,
    PostgresDescriptor,
    SqliteDescriptor,
    build_url,
    render_url,
)


class TestBuildUrl:
    def test_sqlite(self):
        url = build_url(SqliteDescriptor(path="/var/db.sqlite"))
        assert url.drivername == "sqlite+aiosqlite"
        assert url.database == "/var/db.sqlite"

    def test_sqlite_sync(self):
        url = build_url(SqliteDescriptor(path="/var/db.sqlite"), async_driver=False)
        assert url.drivername == "sqlite"

    def test_discrete(self):
        descriptor = PostgresDescriptor(
            connection=PostgresConnection(host="db", port=5432, database="syn", user="u", password="p")
        )
        url = build_url(descriptor, async_driver=False)
        assert url.drivername == "postgresql+psycopg2"
        assert (url.host, url.port, url.database, url.username, url.password) == ("db", 5432, "syn", "u", "p")

    def test_connection_string(self):
        descriptor = PostgresDescriptor(
            connection=PostgresConnection(connection_string="postgres://u:p@h/db")
        )
        url = build_url(descriptor)
        assert url.drivername == "postgresql+asyncpg"
        assert url.host == "h"
        assert url.database == "db"

    def test_non_numeric_port_in_connection_string(self):
        descriptor = PostgresDescriptor(
            connection=PostgresConnection(connection_string="postgres://u:p@h:abc/db")
        )
        with pytest.raises(ConfigurationError):
            build_url(descriptor)
        assert render_url(descriptor) == "<invalid database uri>"

    def test_invalid_connection_string(self):
        descriptor = PostgresDescriptor(connection=PostgresConnection(connection_string="not a url"))
        with pytest.raises(ConfigurationError):
            build_url(descriptor)


class TestRenderUrl:
    def test_password_hidden(self):
        descriptor = PostgresDescriptor(
            connection=PostgresConnection(host="db", user="u", password="secret")
        )
        rendered = render_url(descriptor)
        assert "secret" not in rendered
        assert "db" in rendered

    def test_invalid_connection_string(self):
        descriptor = PostgresDescriptor(connection=PostgresConnection(connection_string="not a url"))
        assert render_url(descriptor) == "<invalid database uri>"
