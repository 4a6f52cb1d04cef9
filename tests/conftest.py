import pytest
from fastapi.testclient import TestClient

from leaderboard.app import create_app
from leaderboard.storage import JsonFileStore, MemoryStore, StoreError


class WriteFailingStore(MemoryStore):
    """Reads work, every write fails."""

    def _write(self, document):
        raise StoreError("disk full")


class ReadFailingStore(MemoryStore):
    def _read(self):
        raise StoreError("connection refused")


@pytest.fixture()
def store():
    memory_store = MemoryStore()
    with memory_store:
        yield memory_store


@pytest.fixture()
def json_store(tmp_path):
    file_store = JsonFileStore(tmp_path / "data" / "leaderboard.json")
    with file_store:
        yield file_store


@pytest.fixture()
def write_failing_store():
    return WriteFailingStore()


@pytest.fixture()
def read_failing_store():
    return ReadFailingStore()


@pytest.fixture()
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client


@pytest.fixture()
def broken_client(read_failing_store):
    with TestClient(create_app(read_failing_store)) as test_client:
        yield test_client
