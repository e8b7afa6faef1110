import pytest

from arango_core.connection import Connection
from arango_core.database import Database
from arango_core.tests.utils import FakeHTTPClient


@pytest.fixture
def client():
    return FakeHTTPClient()


@pytest.fixture
def conn(client):
    return Connection(client=client)


@pytest.fixture
def db(conn):
    return Database(conn)
