"""ArangoDB HTTP response."""

import json

from arango_core.constants import HTTP_OK


class Response(object):
    """ArangoDB HTTP response class.

    The clients in arango_core.clients must return an instance of this class.
    The body is parsed as JSON; it is None when the server sent no JSON.

    :param method: the HTTP method
    :type method: str
    :param url: the request URL
    :type url: str
    :param headers: the response headers
    :type headers: dict
    :param status_code: the HTTP status code
    :type status_code: int
    :param status_text: the HTTP status description if any
    :type status_text: str | None
    :param body: the raw HTTP response body
    :type body: str | None
    """

    __slots__ = (
        'method',
        'url',
        'headers',
        'status_code',
        'status_text',
        'raw_body',
        'body'
    )

    def __init__(self, method, url, headers, status_code, status_text, body):
        self.method = method
        self.url = url
        self.headers = headers
        self.status_code = status_code
        self.status_text = status_text
        self.raw_body = body
        try:
            self.body = json.loads(body)
        except (TypeError, ValueError):
            self.body = None

    def __repr__(self):
        return '<ArangoDB response {} {} [{}]>'.format(
            self.method.upper(), self.url, self.status_code
        )

    def _error_field(self, field):
        if isinstance(self.body, dict):
            return self.body.get(field)
        return None

    @property
    def ok(self):
        """Return True if the status code is a success (2xx)."""
        return self.status_code in HTTP_OK

    @property
    def error_number(self):
        """Return the server error number (``errorNum``) if any.

        :rtype: int | None
        """
        return self._error_field('errorNum')

    @property
    def error_message(self):
        """Return the best description of the failure.

        This is the server ``errorMessage``, else the HTTP status text.

        :rtype: str
        """
        message = self._error_field('errorMessage')
        if message is not None:
            return message
        if self.status_text is not None:
            return self.status_text
        return 'request failed'
