from arango_core.collection import Collection
from arango_core.connection import Connection
from arango_core.exceptions import CollectionNotFoundError
from arango_core.query import Query


class Database(object):
    """Wrapper for ArangoDB's database-specific API.

    :param connection: the connection or the URL of the server
    :type connection: arango_core.connection.Connection | str
    """

    def __init__(self, connection):
        if isinstance(connection, str):
            connection = Connection(connection)
        self._conn = connection

    def __repr__(self):
        return "<ArangoDB database at '{}'>".format(self._conn.url_prefix)

    def __getitem__(self, identifier):
        """Return the collection of the given name or id, creating it."""
        return self.get_or_create(identifier)

    @property
    def connection(self):
        return self._conn

    @property
    def host(self):
        return self._conn.host

    @property
    def port(self):
        return self._conn.port

    @property
    def protocol(self):
        return self._conn.protocol

    scheme = protocol

    def authenticate_with(self, username, password):
        """Use HTTP basic authentication for all subsequent requests.

        :param username: ArangoDB username
        :type username: str
        :param password: ArangoDB password
        :type password: str
        :returns: this database
        :rtype: arango_core.database.Database
        """
        self._conn.authenticate_with(username, password)
        return self

    def send_request(self, path, method='get', data=None, params=None):
        """Send a request through the connection of this database.

        See :meth:`arango_core.connection.Connection.send_request`.
        """
        return self._conn.send_request(
            path, method=method, data=data, params=params
        )

    @property
    def query(self):
        """Return a query bound to this database.

        :rtype: arango_core.query.Query
        """
        return Query(self)

    #########################
    # Collection Management #
    #########################

    def collections(self, include_system=False):
        """Return the collections in this database.

        :param include_system: whether to include the system collections
        :type include_system: bool
        :returns: the collections in the order the server lists them
        :rtype: list
        :raises: ArangoError
        """
        body = self.send_request('/collection')
        return [
            Collection(self, raw_collection)
            for raw_collection in body['collections']
            if include_system or not raw_collection.get('isSystem', False)
        ]

    def collection(self, identifier):
        """Return the existing collection of the given name or id.

        :param identifier: the name or id of the collection
        :type identifier: str | int
        :returns: the collection
        :rtype: arango_core.collection.Collection
        :raises: CollectionNotFoundError
        """
        body = self.send_request('/collection/{}'.format(identifier))
        return Collection(self, body)

    def create_collection(self, name, edge=False, wait_for_sync=None):
        """Create a new collection in this database.

        :param name: the name of the new collection
        :type name: str
        :param edge: whether the collection is an edge collection
        :type edge: bool
        :param wait_for_sync: whether writes block until synced to disk
        :type wait_for_sync: bool | None
        :returns: the new collection
        :rtype: arango_core.collection.Collection
        :raises: ClientError
        """
        data = {'name': name}
        if edge:
            data['type'] = 3
        if wait_for_sync is not None:
            data['waitForSync'] = wait_for_sync
        body = self.send_request('/collection', method='post', data=data)
        return Collection(self, body)

    def get_or_create(self, identifier):
        """Return the collection of the given name or id.

        If no such collection exists, one named ``identifier`` is created.
        The lookup and the creation are two separate requests, so a
        concurrent creation makes the second one fail with a ClientError.

        :param identifier: the name or id of the collection
        :type identifier: str | int
        :returns: the collection
        :rtype: arango_core.collection.Collection
        :raises: ClientError
        """
        try:
            return self.collection(identifier)
        except CollectionNotFoundError:
            return self.create_collection(str(identifier))

    def truncate(self):
        """Delete the documents of every non-system collection.

        :returns: the truncated collections
        :rtype: list
        """
        collections = self.collections()
        for collection in collections:
            collection.truncate()
        return collections
