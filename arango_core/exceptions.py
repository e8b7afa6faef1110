"""ArangoDB Exceptions."""


class ArangoError(Exception):
    """Base class for ArangoDB request errors.

    :param response: the response object
    :type response: arango_core.response.Response
    """

    def __init__(self, response):
        message = response.error_message
        self.error_code = response.error_number
        super(ArangoError, self).__init__(message)
        self.message = message
        self.method = response.method
        self.url = response.url
        self.http_code = response.status_code

    def __str__(self):
        return '[HTTP {}] {}'.format(self.http_code, self.message)


class ClientError(ArangoError):
    """The server rejected the request (HTTP 4xx)."""


class ServerError(ArangoError):
    """The server failed to process the request (HTTP 5xx)."""


class DocumentNotFoundError(ClientError):
    """The requested document does not exist on the server."""


class CollectionNotFoundError(ClientError):
    """The requested collection does not exist on the server."""


class BadSyntaxError(ClientError):
    """The server could not parse the AQL query."""


class NoCollectionProvidedError(ValueError):
    """A collection query was issued on a query bound to a database."""

    def __init__(self, message=None):
        super(NoCollectionProvidedError, self).__init__(
            message or 'this query is not bound to a collection'
        )
