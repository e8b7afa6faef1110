"""Base class for the HTTP clients used by the connection."""

from abc import ABCMeta, abstractmethod


class BaseHTTPClient(object, metaclass=ABCMeta):
    """Base class for ArangoDB HTTP clients.

    Every method must return an instance of arango_core.response.Response.
    """

    @abstractmethod
    def head(self, url, params=None, headers=None, auth=None):
        """Execute an HTTP **HEAD** method.

        :param url: request URL
        :type url: str
        :param params: request parameters
        :type params: dict | None
        :param headers: request headers
        :type headers: dict | None
        :param auth: username and password tuple
        :type auth: tuple | None
        :returns: ArangoDB HTTP response object
        :rtype: arango_core.response.Response
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, url, params=None, headers=None, auth=None):
        """Execute an HTTP **GET** method.

        :param url: request URL
        :type url: str
        :param params: request parameters
        :type params: dict | None
        :param headers: request headers
        :type headers: dict | None
        :param auth: username and password tuple
        :type auth: tuple | None
        :returns: ArangoDB HTTP response object
        :rtype: arango_core.response.Response
        """
        raise NotImplementedError

    @abstractmethod
    def put(self, url, data=None, params=None, headers=None, auth=None):
        """Execute an HTTP **PUT** method.

        :param url: request URL
        :type url: str
        :param data: request payload
        :type data: str | None
        :param params: request parameters
        :type params: dict | None
        :param headers: request headers
        :type headers: dict | None
        :param auth: username and password tuple
        :type auth: tuple | None
        :returns: ArangoDB HTTP response object
        :rtype: arango_core.response.Response
        """
        raise NotImplementedError

    @abstractmethod
    def post(self, url, data=None, params=None, headers=None, auth=None):
        """Execute an HTTP **POST** method.

        :param url: request URL
        :type url: str
        :param data: request payload
        :type data: str | None
        :param params: request parameters
        :type params: dict | None
        :param headers: request headers
        :type headers: dict | None
        :param auth: username and password tuple
        :type auth: tuple | None
        :returns: ArangoDB HTTP response object
        :rtype: arango_core.response.Response
        """
        raise NotImplementedError

    @abstractmethod
    def patch(self, url, data=None, params=None, headers=None, auth=None):
        """Execute an HTTP **PATCH** method.

        :param url: request URL
        :type url: str
        :param data: request payload
        :type data: str | None
        :param params: request parameters
        :type params: dict | None
        :param headers: request headers
        :type headers: dict | None
        :param auth: username and password tuple
        :type auth: tuple | None
        :returns: ArangoDB HTTP response object
        :rtype: arango_core.response.Response
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, url, params=None, headers=None, auth=None):
        """Execute an HTTP **DELETE** method.

        :param url: request URL
        :type url: str
        :param params: request parameters
        :type params: dict | None
        :param headers: request headers
        :type headers: dict | None
        :param auth: username and password tuple
        :type auth: tuple | None
        :returns: ArangoDB HTTP response object
        :rtype: arango_core.response.Response
        """
        raise NotImplementedError
