import logging
from enum import Enum

from arango_core.cursor import Cursor
from arango_core.document import Document
from arango_core.exceptions import BadSyntaxError, NoCollectionProvidedError
from arango_core.utils import camelify, filter_keys

logger = logging.getLogger(__name__)

# The options each endpoint accepts, before they are camelified
ALLOWED_KEYS = {
    'simple/all': (
        'limit', 'skip', 'collection'
    ),
    'simple/by-example': (
        'limit', 'skip', 'example', 'collection'
    ),
    'simple/near': (
        'latitude', 'longitude', 'distance', 'skip', 'limit', 'geo',
        'collection'
    ),
    'simple/within': (
        'latitude', 'longitude', 'radius', 'distance', 'skip', 'limit', 'geo',
        'collection'
    ),
    'simple/range': (
        'attribute', 'left', 'right', 'closed', 'limit', 'skip', 'collection'
    ),
    'cursor': (
        'query', 'count', 'batch_size', 'collection', 'bind_vars'
    ),
    'query': (
        'query',
    ),
    'simple/first-example': (
        'example', 'collection'
    ),
}


class QueryScope(Enum):
    """What a query is bound to."""

    DATABASE = 'database'
    COLLECTION = 'collection'


class Query(object):
    """Simple queries and AQL queries.

    A query bound to a database can only execute and validate AQL. The simple
    queries additionally need a collection; calling them on a database scoped
    query raises NoCollectionProvidedError before anything is sent.

    Options an endpoint does not know are dropped silently.

    :param database: the database to send the queries to
    :type database: arango_core.database.Database
    :param collection: the collection the simple queries run on
    :type collection: arango_core.collection.Collection | None
    """

    def __init__(self, database, collection=None):
        self._database = database
        self._collection = collection
        if collection is None:
            self._scope = QueryScope.DATABASE
        else:
            self._scope = QueryScope.COLLECTION

    def __repr__(self):
        if self._scope is QueryScope.COLLECTION:
            return "<ArangoDB query on collection '{}'>".format(
                self._collection.name
            )
        return '<ArangoDB query>'

    @property
    def scope(self):
        return self._scope

    @property
    def database(self):
        return self._database

    @property
    def collection(self):
        """Return the collection this query is bound to.

        :returns: the bound collection
        :rtype: arango_core.collection.Collection
        :raises: NoCollectionProvidedError
        """
        if self._scope is not QueryScope.COLLECTION:
            raise NoCollectionProvidedError()
        return self._collection

    def all(self, **options):
        """Return all documents of the collection.

        :param limit: the maximum number of documents to return
        :type limit: int
        :param skip: the number of documents to skip
        :type skip: int
        :returns: document cursor
        :rtype: arango_core.cursor.Cursor
        :raises: NoCollectionProvidedError
        """
        return self._simple_query('simple/all', options)

    def by_example(self, example=None, **options):
        """Return the documents matching the example.

        :param example: the attribute values to match
        :type example: dict
        :param limit: the maximum number of documents to return
        :type limit: int
        :param skip: the number of documents to skip
        :type skip: int
        :returns: document cursor
        :rtype: arango_core.cursor.Cursor
        :raises: NoCollectionProvidedError
        """
        options['example'] = example or {}
        return self._simple_query('simple/by-example', options)

    def first_example(self, example=None):
        """Return the first document matching the example.

        :param example: the attribute values to match
        :type example: dict
        :returns: the matching document
        :rtype: arango_core.document.Document
        :raises: NoCollectionProvidedError, DocumentNotFoundError
        """
        data = self._prepare('simple/first-example', {
            'example': example or {},
            'collection': self.collection.name
        })
        body = self._database.send_request(
            '/simple/first-example', method='put', data=data
        )
        return Document(self._database, body['document'])

    def near(self, **options):
        """Return the documents near a location (needs a geo index).

        :param latitude: the latitude of the location
        :type latitude: float
        :param longitude: the longitude of the location
        :type longitude: float
        :param distance: the attribute to store the distance in
        :type distance: str
        :param skip: the number of documents to skip
        :type skip: int
        :param limit: the maximum number of documents to return
        :type limit: int
        :param geo: the identifier of the geo index to use
        :type geo: str
        :returns: document cursor
        :rtype: arango_core.cursor.Cursor
        :raises: NoCollectionProvidedError
        """
        return self._simple_query('simple/near', options)

    def within(self, **options):
        """Return the documents within a radius around a location.

        Takes the options of :meth:`near` plus ``radius``.

        :returns: document cursor
        :rtype: arango_core.cursor.Cursor
        :raises: NoCollectionProvidedError
        """
        return self._simple_query('simple/within', options)

    def in_range(self, **options):
        """Return the documents with an attribute between two values.

        :param attribute: the attribute path to check
        :type attribute: str
        :param left: the lower bound
        :param right: the upper bound
        :param closed: whether the interval includes ``right``
        :type closed: bool
        :param skip: the number of documents to skip
        :type skip: int
        :param limit: the maximum number of documents to return
        :type limit: int
        :returns: document cursor
        :rtype: arango_core.cursor.Cursor
        :raises: NoCollectionProvidedError
        """
        return self._simple_query('simple/range', options)

    def execute(self, query, **options):
        """Execute an AQL query.

        :param query: the AQL query
        :type query: str
        :param count: whether the total number of results should be returned
        :type count: bool
        :param batch_size: the maximum number of results per round trip
        :type batch_size: int
        :param bind_vars: the values of the bind parameters
        :type bind_vars: dict
        :returns: result cursor
        :rtype: arango_core.cursor.Cursor
        """
        options['query'] = query
        return self._request('cursor', 'post', options)

    def is_valid(self, query):
        """Return True if the server can parse the AQL query.

        :param query: the AQL query
        :type query: str
        :returns: whether the query is valid
        :rtype: bool
        """
        try:
            self._database.send_request(
                '/query',
                method='post',
                data=self._prepare('query', {'query': query})
            )
        except BadSyntaxError:
            return False
        return True

    def _prepare(self, path, options):
        """Return the request body for the endpoint.

        :param path: the endpoint (a key of ALLOWED_KEYS)
        :type path: str
        :param options: the snake_case options
        :type options: dict
        :returns: the whitelisted options with camelCase keys
        :rtype: dict
        """
        kept, dropped = filter_keys(options, ALLOWED_KEYS[path])
        if dropped:
            logger.debug(
                'Ignoring options %s not supported by %s',
                ', '.join(sorted(dropped)), path
            )
        return {camelify(key): value for key, value in kept.items()}

    def _simple_query(self, path, options):
        options['collection'] = self.collection.name
        return self._request(path, 'put', options)

    def _request(self, path, method, options):
        body = self._database.send_request(
            '/' + path, method=method, data=self._prepare(path, options)
        )
        return Cursor(self._database, body)
