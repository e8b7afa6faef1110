import pytest

from arango_core.cursor import Cursor
from arango_core.document import Document
from arango_core.exceptions import *
from arango_core.tests.utils import api_url, raw_document


def test_single_batch(db, client):
    cursor = Cursor(db, {'result': [1, 'two', {'a': 3}], 'hasMore': False})
    assert cursor.id is None
    assert cursor.count is None
    assert cursor.finished is False
    assert repr(cursor) == '<ArangoDB cursor>'
    assert list(cursor) == [1, 'two', {'a': 3}]
    assert cursor.finished is True
    assert client.requests == []


def test_documents_are_wrapped(db):
    cursor = Cursor(db, {
        'result': [raw_document('users', '1', color='red')],
        'hasMore': False
    })
    doc = next(cursor)
    assert isinstance(doc, Document)
    assert doc.id == 'users/1'
    assert doc['color'] == 'red'


def test_paging(db, client):
    cursor = Cursor(db, {
        'id': '33',
        'result': [1, 2],
        'hasMore': True,
        'count': 5
    })
    assert repr(cursor) == "<ArangoDB cursor '33'>"
    assert cursor.count == 5
    client.respond({'id': '33', 'result': [3, 4], 'hasMore': True})
    client.respond({'result': [5], 'hasMore': False})

    assert next(cursor) == 1
    assert next(cursor) == 2
    assert client.requests == []

    assert next(cursor) == 3
    assert len(client.requests) == 1
    assert client.last['method'] == 'put'
    assert client.last['url'] == api_url('/cursor/33')

    assert list(cursor) == [4, 5]
    assert len(client.requests) == 2
    assert cursor.finished is True
    assert cursor.has_more is False
    assert cursor.count == 5

    # exhausted cursors are not restarted
    assert list(cursor) == []
    assert client.pending == 0
    assert len(client.requests) == 2


def test_paging_error(db, client):
    cursor = Cursor(db, {'id': '33', 'result': [], 'hasMore': True})
    client.fail(404, 1600, 'cursor not found')
    with pytest.raises(ClientError):
        next(cursor)


def test_delete(db, client):
    cursor = Cursor(db, {'id': '33', 'result': [1], 'hasMore': True})
    client.respond({'id': '33', 'error': False}, status_code=202)
    assert cursor.delete() is True
    assert client.last['method'] == 'delete'
    assert client.last['url'] == api_url('/cursor/33')
    assert cursor.finished is True
    assert list(cursor) == []

    assert cursor.delete() is False
    assert len(client.requests) == 1


def test_paging_skips_empty_batches(db, client):
    cursor = Cursor(db, {'id': '33', 'result': [1], 'hasMore': True})
    client.respond({'result': [], 'hasMore': True})
    client.respond({'result': [2], 'hasMore': False})

    assert list(cursor) == [1, 2]
    assert [r['url'] for r in client.requests] == [
        api_url('/cursor/33'),
        api_url('/cursor/33'),
    ]
    assert cursor.has_more is False
    assert cursor.finished is True
    assert list(cursor) == []
    assert client.pending == 0


def test_large_batch(db, client):
    cursor = Cursor(db, {'result': list(range(100000)), 'hasMore': False})
    assert sum(1 for _ in cursor) == 100000
    assert cursor.finished is True
    assert client.requests == []
