import json

from arango_core.clients.base import BaseHTTPClient
from arango_core.response import Response

STATUS_TEXTS = {
    200: 'OK',
    201: 'Created',
    202: 'Accepted',
    400: 'Bad Request',
    404: 'Not Found',
    409: 'Conflict',
    500: 'Internal Server Error',
}


class FakeHTTPClient(BaseHTTPClient):
    """HTTP client replaying canned responses and recording the requests.

    Every request pops the next queued response, so tests queue exactly the
    responses they expect the code under test to ask for.
    """

    def __init__(self):
        self.requests = []
        self._responses = []

    def respond(self, body=None, status_code=200):
        self._responses.append((status_code, body))
        return self

    def fail(self, status_code, error_num=None, message=None):
        body = {'error': True, 'code': status_code}
        if error_num is not None:
            body['errorNum'] = error_num
        if message is not None:
            body['errorMessage'] = message
        return self.respond(body, status_code)

    @property
    def last(self):
        return self.requests[-1]

    @property
    def pending(self):
        return len(self._responses)

    def _record(self, method, url, data=None, params=None, auth=None):
        self.requests.append({
            'method': method,
            'url': url,
            'data': json.loads(data) if data is not None else None,
            'params': params,
            'auth': auth,
        })
        if not self._responses:
            raise AssertionError(
                'unexpected request {} {}'.format(method.upper(), url)
            )
        status_code, body = self._responses.pop(0)
        return Response(
            method=method,
            url=url,
            headers={},
            status_code=status_code,
            status_text=STATUS_TEXTS.get(status_code),
            body=json.dumps(body) if body is not None else '',
        )

    def head(self, url, params=None, headers=None, auth=None):
        return self._record('head', url, params=params, auth=auth)

    def get(self, url, params=None, headers=None, auth=None):
        return self._record('get', url, params=params, auth=auth)

    def put(self, url, data=None, params=None, headers=None, auth=None):
        return self._record('put', url, data, params, auth)

    def post(self, url, data=None, params=None, headers=None, auth=None):
        return self._record('post', url, data, params, auth)

    def patch(self, url, data=None, params=None, headers=None, auth=None):
        return self._record('patch', url, data, params, auth)

    def delete(self, url, params=None, headers=None, auth=None):
        return self._record('delete', url, params=params, auth=auth)


def api_url(path):
    """Return the URL the default test connection uses for ``path``."""
    return 'http://localhost:8529/_api' + path


def raw_collection(name, collection_id='1234', status=3, system=False):
    return {
        'id': collection_id,
        'name': name,
        'status': status,
        'type': 2,
        'isSystem': system,
    }


def raw_document(collection, key, rev='1', **fields):
    document = {
        '_id': '{}/{}'.format(collection, key),
        '_key': key,
        '_rev': rev,
    }
    document.update(fields)
    return document
