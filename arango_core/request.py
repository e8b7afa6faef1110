from json import dumps


class Request(object):

    __slots__ = ('method', 'endpoint', 'params', 'data')

    def __init__(self, method, endpoint, params=None, data=None):
        self.method = method
        self.endpoint = endpoint
        self.params = params
        self.data = data

    def __repr__(self):
        return "<ArangoDB API request '{} {}'>".format(
            self.method.upper(), self.endpoint
        )

    @property
    def payload(self):
        """Return the JSON encoded request body (None if there is no body)."""
        if self.data is None:
            return None
        return dumps(self.data)
