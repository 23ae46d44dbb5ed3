from typing import Dict, List

import pytest

from db_connection_resolver import FileReadError


class CountingFileReader:
    """In-memory FileReader that records every read."""

    def __init__(self, files: Dict[str, bytes]):
        self.files = files
        self.reads: List[str] = []

    async def read_bytes(self, path: str) -> bytes:
        self.reads.append(path)
        if path not in self.files:
            raise FileReadError(path, "No such file or directory")
        return self.files[path]


@pytest.fixture
def reader():
    return CountingFileReader({
        "/ca.pem": b"CAFAKE",
        "/cert.pem": b"CERTFAKE",
        "/key.pem": b"KEYFAKE",
        "/empty.pem": b"",
    })
