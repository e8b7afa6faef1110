from collections import deque

from arango_core.document import Document


class Cursor(object):
    """Forward-only iterator over the result of a query.

    Documents (objects carrying an ``_id``) are yielded as Document objects,
    other values as they were returned by the server. The next batch is only
    requested once the current one is drained.

    :param database: the database the query was executed in
    :type database: arango_core.database.Database
    :param raw_cursor: the response body of the query
    :type raw_cursor: dict
    """

    def __init__(self, database, raw_cursor):
        self._database = database
        self._count = raw_cursor.get('count')
        self._id = None
        self._parse(raw_cursor)

    def _parse(self, raw_cursor):
        if raw_cursor.get('hasMore', False):
            self._id = raw_cursor.get('id', self._id)
        else:
            self._id = raw_cursor.get('id')
        self._items = deque(raw_cursor.get('result', []))
        self._has_more = raw_cursor.get('hasMore', False)

    def __repr__(self):
        if self._id is None:
            return '<ArangoDB cursor>'
        return "<ArangoDB cursor '{}'>".format(self._id)

    def __iter__(self):
        return self

    def __next__(self):
        while not self._items and self._has_more:
            self._parse(self._database.send_request(
                '/cursor/{}'.format(self._id), method='put'
            ))
        if not self._items:
            raise StopIteration()
        return self._wrap(self._items.popleft())

    def _wrap(self, item):
        if isinstance(item, dict) and '_id' in item:
            return Document(self._database, item)
        return item

    @property
    def id(self):
        """Return the server cursor ID.

        :returns: the cursor ID (None once the whole result was delivered)
        :rtype: str | None
        """
        return self._id

    @property
    def count(self):
        """Return the total number of results if ``count`` was requested.

        :returns: the number of results
        :rtype: int | None
        """
        return self._count

    @property
    def has_more(self):
        """Return True if the server holds more batches.

        :rtype: bool
        """
        return self._has_more

    @property
    def finished(self):
        """Return True once every result has been yielded.

        :rtype: bool
        """
        return not self._items and not self._has_more

    def delete(self):
        """Release the server cursor before it is exhausted.

        :returns: whether a server cursor was deleted
        :rtype: bool
        :raises: ArangoError
        """
        if self._id is None or not self._has_more:
            return False
        self._database.send_request(
            '/cursor/{}'.format(self._id), method='delete'
        )
        self._items.clear()
        self._has_more = False
        return True
