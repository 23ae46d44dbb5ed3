"""
TLS material assembly shared by the legacy and modern resolvers.
"""
import asyncio
import logging
from pathlib import Path
from typing import Optional, Protocol, Union

from .exceptions import FileReadError
from .types import TlsMaterial, TlsSource

logger = logging.getLogger(__name__)


class FileReader(Protocol):
    """Filesystem capability used to read certificate, key and CA files."""

    async def read_bytes(self, path: str) -> bytes: ...


class LocalFileReader:
    """Reads files from the local filesystem in a worker thread."""

    async def read_bytes(self, path: str) -> bytes:
        logger.debug(f"Reading TLS file {path}")
        try:
            return await asyncio.to_thread(Path(path).read_bytes)
        except OSError as e:
            logger.error(f"Failed to read TLS file {path}: {e}")
            raise FileReadError(path, e.strerror or str(e)) from e


def _to_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


class TlsMaterialLoader:
    """Builds an optional TlsMaterial from inline values or file paths.

    Precedence per field:
    1. Inline value (the file is never read)
    2. File contents, read in full through the FileReader
    3. Absent

    The passphrase is always inline.
    """

    def __init__(self, reader: Optional[FileReader] = None):
        self.reader = reader or LocalFileReader()

    async def _load_field(self, name: str, source: TlsSource) -> Optional[bytes]:
        if source.inline:
            logger.debug(f"Using inline value for TLS {name}")
            return _to_bytes(source.inline)
        if source.path:
            logger.debug(f"Using file for TLS {name}")
            return await self.reader.read_bytes(source.path)
        return None

    async def load(
        self,
        ca: TlsSource,
        cert: TlsSource,
        key: TlsSource,
        passphrase: Optional[Union[str, bytes]] = None,
    ) -> Optional[TlsMaterial]:
        """Return the TLS bundle, or None when none of ca/cert/key resolved."""
        ca_value = await self._load_field("ca", ca)
        cert_value = await self._load_field("cert", cert)
        key_value = await self._load_field("key", key)

        if not (ca_value or cert_value or key_value):
            logger.debug("No TLS material configured")
            return None

        return TlsMaterial(
            ca=ca_value or None,
            cert=cert_value or None,
            key=key_value or None,
            passphrase=_to_bytes(passphrase) if passphrase else None,
        )
