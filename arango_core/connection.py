import logging
from urllib.parse import urlsplit

from arango_core.clients import DefaultHTTPClient
from arango_core.constants import (
    API_PREFIX,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_PROTOCOL,
    ERROR_COLLECTION_NOT_FOUND,
    ERROR_DOCUMENT_NOT_FOUND,
    ERROR_QUERY_PARSE
)
from arango_core.exceptions import (
    BadSyntaxError,
    ClientError,
    CollectionNotFoundError,
    DocumentNotFoundError,
    ServerError
)
from arango_core.request import Request
from arango_core.utils import normalize_path

logger = logging.getLogger(__name__)

# Resource path prefixes whose 404 responses have a dedicated exception
NOT_FOUND_ERRORS = (
    ('/document', DocumentNotFoundError),
    ('/simple/first-example', DocumentNotFoundError),
    ('/collection', CollectionNotFoundError),
)

ERROR_NUMBERS = {
    ERROR_QUERY_PARSE: BadSyntaxError,
    ERROR_DOCUMENT_NOT_FOUND: DocumentNotFoundError,
    ERROR_COLLECTION_NOT_FOUND: CollectionNotFoundError,
}


class Connection(object):
    """ArangoDB connection.

    If ``url`` is given (e.g. ``'http://localhost:8529'``), its scheme, host
    and port take precedence over ``protocol``, ``host`` and ``port``.

    :param url: the server URL
    :type url: str | None
    :param protocol: the internet transfer protocol (default: 'http')
    :type protocol: str
    :param host: ArangoDB host (default: 'localhost')
    :type host: str
    :param port: ArangoDB port (default: 8529)
    :type port: int
    :param username: ArangoDB username
    :type username: str | None
    :param password: ArangoDB password
    :type password: str | None
    :param client: the HTTP client
    :type client: arango_core.clients.base.BaseHTTPClient | None
    """

    def __init__(self, url=None, protocol=DEFAULT_PROTOCOL, host=DEFAULT_HOST,
                 port=DEFAULT_PORT, username=None, password=None,
                 client=None):
        if url is not None:
            parts = urlsplit(url)
            if not parts.scheme or not parts.hostname:
                raise ValueError('invalid server URL {!r}'.format(url))
            protocol = parts.scheme
            host = parts.hostname
            port = parts.port or DEFAULT_PORT
        self._protocol = protocol
        self._host = host
        self._port = int(port)
        self._username = username
        self._password = password
        self._client = client or DefaultHTTPClient()

    def __repr__(self):
        return "<ArangoDB connection at '{}'>".format(self.url_prefix)

    @property
    def protocol(self):
        """Return the HTTP protocol.

        :returns: the HTTP protocol
        :rtype: str
        """
        return self._protocol

    scheme = protocol

    @property
    def host(self):
        """Return the server host.

        :returns: the server host
        :rtype: str
        """
        return self._host

    @property
    def port(self):
        """Return the server port.

        :returns: the server port
        :rtype: int
        """
        return self._port

    @property
    def username(self):
        """Return the username used for basic authentication.

        :returns: the username or None
        :rtype: str | None
        """
        return self._username

    @property
    def client(self):
        return self._client

    @property
    def url_prefix(self):
        return '{}://{}:{}{}'.format(
            self._protocol,
            self._host,
            self._port,
            API_PREFIX
        )

    @property
    def auth(self):
        if self._username is None:
            return None
        return self._username, self._password or ''

    def authenticate_with(self, username, password):
        """Use HTTP basic authentication for all subsequent requests.

        :param username: ArangoDB username
        :type username: str
        :param password: ArangoDB password
        :type password: str
        :returns: this connection
        :rtype: arango_core.connection.Connection
        """
        self._username = username
        self._password = password
        return self

    def send_request(self, path, method='get', data=None, params=None):
        """Send a request to the server and return the parsed JSON body.

        :param path: the server-relative resource path (e.g. '/collection')
        :type path: str
        :param method: the HTTP method (get, post, put, patch or delete)
        :type method: str
        :param data: the request payload, encoded as JSON
        :type data: dict | list | None
        :param params: the request parameters
        :type params: dict | None
        :returns: the parsed JSON body
        :rtype: dict | list | None
        :raises: ValueError, ArangoError
        """
        request = Request(
            method=method.lower(),
            endpoint=normalize_path(path),
            params=params,
            data=data
        )
        res = self._execute(request)
        if not res.ok:
            raise self._error(request, res)
        return res.body

    def _execute(self, request):
        """Execute the request through the HTTP client.

        :param request: the request to make
        :type request: arango_core.request.Request
        :returns: response from ArangoDB
        :rtype: arango_core.response.Response
        :raises: ValueError
        """
        method = request.method
        url = self.url_prefix + request.endpoint
        logger.debug('Sending %r', request)
        if method in {'get', 'delete', 'head'}:
            return getattr(self._client, method)(
                url=url,
                params=request.params,
                auth=self.auth,
            )
        elif method in {'post', 'put', 'patch'}:
            return getattr(self._client, method)(
                url=url,
                data=request.payload,
                params=request.params,
                auth=self.auth,
            )
        raise ValueError('Unsupported HTTP method {}'.format(method))

    @staticmethod
    def _error(request, response):
        """Return the exception matching the failed response.

        :param request: the request that failed
        :type request: arango_core.request.Request
        :param response: the error response
        :type response: arango_core.response.Response
        :returns: the typed exception
        :rtype: arango_core.exceptions.ArangoError
        """
        error_class = ERROR_NUMBERS.get(response.error_number)
        if error_class is not None:
            return error_class(response)
        if response.status_code == 404:
            for prefix, error_class in NOT_FOUND_ERRORS:
                if request.endpoint.startswith(prefix):
                    return error_class(response)
        if 400 <= response.status_code < 500:
            return ClientError(response)
        return ServerError(response)

    def version(self, details=False):
        """Return the version of the ArangoDB server.

        :param details: whether to return the component details instead
        :type details: bool
        :returns: the server version (or the details if requested)
        :rtype: str | dict
        :raises: ArangoError
        """
        body = self.send_request(
            '/version',
            params={'details': 'true'} if details else None
        )
        return body['details'] if details else body['version']
