from arango_core.constants import COLLECTION_STATUSES, COLLECTION_TYPES
from arango_core.document import Document
from arango_core.query import Query


class Collection(object):
    """Wrapper for ArangoDB's collection-specific API endpoints.

    A collection is known by its name, its id or both. Whichever one is
    missing is fetched from the server the first time it is needed.

    :param database: the database the collection belongs to
    :type database: arango_core.database.Database
    :param raw_collection: the collection as returned by the server
    :type raw_collection: dict
    """

    def __init__(self, database, raw_collection):
        if raw_collection.get('name') is None and \
                raw_collection.get('id') is None:
            raise ValueError('a collection needs a name or an id')
        self._database = database
        self._parse(raw_collection)

    def _parse(self, raw_collection):
        self._name = raw_collection.get('name')
        self._id = raw_collection.get('id')
        self._status = raw_collection.get('status')
        self._type = raw_collection.get('type')

    def __repr__(self):
        return "<ArangoDB collection '{}'>".format(
            self._name if self._name is not None else self._id
        )

    def __eq__(self, other):
        if not isinstance(other, Collection):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __bool__(self):
        return True

    def __len__(self):
        return self.length()

    def __getitem__(self, key):
        return self.fetch(key)

    def __setitem__(self, key, data):
        self.replace(key, data)

    @property
    def _endpoint(self):
        return '/collection/{}'.format(
            self._name if self._name is not None else self._id
        )

    def _resolve(self):
        """Fetch the collection attributes missing from the server.

        :raises: CollectionNotFoundError
        """
        self._parse(self._database.send_request(self._endpoint))

    @property
    def database(self):
        return self._database

    @property
    def name(self):
        """Return the name of this collection.

        :returns: the name of this collection
        :rtype: str
        :raises: CollectionNotFoundError
        """
        if self._name is None:
            self._resolve()
        return self._name

    @property
    def id(self):
        """Return the server-assigned id of this collection.

        :returns: the id of this collection
        :rtype: str
        :raises: CollectionNotFoundError
        """
        if self._id is None:
            self._resolve()
        return self._id

    @property
    def status(self):
        """Return the current status of this collection.

        :returns: the status ('new', 'unloaded', 'loaded' ...)
        :rtype: str
        :raises: CollectionNotFoundError
        """
        self._resolve()
        return COLLECTION_STATUSES.get(
            self._status, 'corrupted ({})'.format(self._status)
        )

    @property
    def edge(self):
        """Return True if this is an edge collection.

        :rtype: bool
        """
        if self._type is None:
            self._resolve()
        return COLLECTION_TYPES.get(self._type) == 'edge'

    @property
    def wait_for_sync(self):
        """Return whether writes block until synced to disk.

        :rtype: bool
        :raises: CollectionNotFoundError
        """
        body = self._database.send_request(self._endpoint + '/properties')
        return body['waitForSync']

    def set_wait_for_sync(self, sync):
        """Set whether writes block until synced to disk.

        :param sync: the new value
        :type sync: bool
        :returns: the value stored by the server
        :rtype: bool
        :raises: CollectionNotFoundError
        """
        body = self._database.send_request(
            self._endpoint + '/properties',
            method='put',
            data={'waitForSync': sync}
        )
        return body['waitForSync']

    def rename(self, new_name):
        """Rename this collection.

        :param new_name: the new name for the collection
        :type new_name: str
        :returns: this collection
        :rtype: arango_core.collection.Collection
        :raises: CollectionNotFoundError
        """
        body = self._database.send_request(
            self._endpoint + '/rename',
            method='put',
            data={'name': new_name}
        )
        self._name = body.get('name', new_name)
        return self

    def length(self):
        """Return the number of documents in this collection.

        :returns: the number of documents
        :rtype: int
        :raises: CollectionNotFoundError
        """
        return self._database.send_request(self._endpoint + '/count')['count']

    def load(self):
        """Load this collection into memory.

        :returns: the status of the collection
        :rtype: str
        """
        return self._change_status('/load')

    def unload(self):
        """Unload this collection from memory.

        :returns: the status of the collection
        :rtype: str
        """
        return self._change_status('/unload')

    def truncate(self):
        """Delete all documents from this collection.

        :returns: the status of the collection
        :rtype: str
        """
        return self._change_status('/truncate')

    def _change_status(self, action):
        body = self._database.send_request(
            self._endpoint + action, method='put'
        )
        self._status = body.get('status', self._status)
        return COLLECTION_STATUSES.get(self._status)

    def delete(self):
        """Drop this collection from the database.

        :returns: whether the drop was successful
        :rtype: bool
        :raises: CollectionNotFoundError
        """
        body = self._database.send_request(self._endpoint, method='delete')
        return not body.get('error', False)

    ##########################
    # Document Access by Key #
    ##########################

    def _document_endpoint(self, key):
        return '/document/{}/{}'.format(self.name, key)

    def fetch(self, key):
        """Return the document with the given key.

        :param key: the document key
        :type key: str | int
        :returns: the document
        :rtype: arango_core.document.Document
        :raises: DocumentNotFoundError
        """
        return Document(
            self._database,
            self._database.send_request(self._document_endpoint(key))
        )

    def create_document(self, data):
        """Store a new document in this collection.

        :param data: the fields of the new document
        :type data: dict
        :returns: the stored document with its id, key and revision
        :rtype: arango_core.document.Document
        :raises: CollectionNotFoundError
        """
        meta = self._database.send_request(
            '/document',
            method='post',
            data=data,
            params={'collection': self.name}
        )
        return self._merge(data, meta)

    def replace(self, key, data):
        """Replace the fields of the document with the given key.

        :param key: the document key
        :type key: str | int
        :param data: the new fields of the document
        :type data: dict
        :returns: the stored document with its new revision
        :rtype: arango_core.document.Document
        :raises: DocumentNotFoundError
        """
        meta = self._database.send_request(
            self._document_endpoint(key), method='put', data=data
        )
        return self._merge(data, meta)

    def delete_document(self, key):
        """Delete the document with the given key.

        :param key: the document key
        :type key: str | int
        :returns: whether the deletion was successful
        :rtype: bool
        :raises: DocumentNotFoundError
        """
        body = self._database.send_request(
            self._document_endpoint(key), method='delete'
        )
        return not body.get('error', False)

    def _merge(self, data, meta):
        raw_document = dict(data)
        for field in ('_id', '_key', '_rev'):
            if field in meta:
                raw_document[field] = meta[field]
        return Document(self._database, raw_document)

    @property
    def query(self):
        """Return a query bound to this collection.

        :rtype: arango_core.query.Query
        """
        return Query(self._database, self)
