"""Session based client using the requests library."""

import logging

import requests

from arango_core.clients.base import BaseHTTPClient
from arango_core.response import Response

logger = logging.getLogger(__name__)


class DefaultHTTPClient(BaseHTTPClient):
    """Session based HTTP client for ArangoDB.

    :param timeout: seconds to wait for the server (None waits forever)
    :type timeout: int | float | None
    """

    def __init__(self, timeout=None):
        self.session = requests.Session()
        self.timeout = timeout

    def _send(self, method, url, data=None, params=None, headers=None,
              auth=None):
        logger.debug('%s %s', method.upper(), url)
        res = self.session.request(
            method=method,
            url=url,
            data=data,
            params=params,
            headers=headers,
            auth=auth,
            timeout=self.timeout
        )
        return Response(
            method=method,
            url=url,
            headers=res.headers,
            status_code=res.status_code,
            status_text=res.reason,
            body=res.text,
        )

    def head(self, url, params=None, headers=None, auth=None):
        return self._send('head', url, params=params, headers=headers,
                          auth=auth)

    def get(self, url, params=None, headers=None, auth=None):
        return self._send('get', url, params=params, headers=headers,
                          auth=auth)

    def put(self, url, data=None, params=None, headers=None, auth=None):
        return self._send('put', url, data=data, params=params,
                          headers=headers, auth=auth)

    def post(self, url, data=None, params=None, headers=None, auth=None):
        return self._send('post', url, data=data, params=params,
                          headers=headers, auth=auth)

    def patch(self, url, data=None, params=None, headers=None, auth=None):
        return self._send('patch', url, data=data, params=params,
                          headers=headers, auth=auth)

    def delete(self, url, params=None, headers=None, auth=None):
        return self._send('delete', url, params=params, headers=headers,
                          auth=auth)

    def close(self):
        """Close the underlying session."""
        self.session.close()
