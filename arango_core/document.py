"""ArangoDB Document."""

from collections.abc import MutableMapping

SYSTEM_KEYS = frozenset(['_id', '_key', '_rev', '_from', '_to'])


class Document(MutableMapping):
    """Wrapper for a single ArangoDB document.

    The fields mirror the last JSON object received from the server with the
    system attributes (``_id``, ``_key``, ``_rev`` ...) stripped; those are
    exposed through properties instead.

    :param database: the database the document belongs to
    :type database: arango_core.database.Database
    :param raw_document: the document as returned by the server
    :type raw_document: dict
    """

    def __init__(self, database, raw_document):
        self._database = database
        self._parse(raw_document)

    def _parse(self, raw_document):
        self._id = raw_document.get('_id')
        self._key = raw_document.get('_key')
        self._revision = raw_document.get('_rev')
        if self._key is None and self._id is not None:
            self._key = self._id.split('/', 1)[-1]
        self._content = {
            key: value for key, value in raw_document.items()
            if key not in SYSTEM_KEYS
        }

    def __repr__(self):
        return "<ArangoDB document '{}'>".format(self._id)

    def __getitem__(self, field):
        return self._content[field]

    def __setitem__(self, field, value):
        self._content[field] = value

    def __delitem__(self, field):
        del self._content[field]

    def __iter__(self):
        return iter(self._content)

    def __len__(self):
        return len(self._content)

    @property
    def id(self):
        """Return the document handle (``<collection>/<key>``).

        :returns: the document handle
        :rtype: str | None
        """
        return self._id

    @property
    def key(self):
        """Return the document key.

        :returns: the document key
        :rtype: str | None
        """
        return self._key

    @property
    def revision(self):
        """Return the document revision.

        :returns: the document revision
        :rtype: str | None
        """
        return self._revision

    @property
    def collection_id(self):
        """Return the collection part of the document handle.

        :returns: the collection name or id
        :rtype: str | None
        """
        if self._id is None:
            return None
        return self._id.split('/', 1)[0]

    def to_dict(self):
        """Return a copy of the document fields.

        :returns: the fields without the system attributes
        :rtype: dict
        """
        return dict(self._content)

    def _check_persisted(self):
        if self._id is None:
            raise ValueError('the document has not been stored yet')

    def refresh(self):
        """Reload the document fields from the server.

        :returns: this document
        :rtype: arango_core.document.Document
        :raises: DocumentNotFoundError
        """
        self._check_persisted()
        self._parse(
            self._database.send_request('/document/{}'.format(self._id))
        )
        return self

    def save(self):
        """Replace the stored document with the local fields.

        :returns: this document
        :rtype: arango_core.document.Document
        :raises: DocumentNotFoundError
        """
        self._check_persisted()
        body = self._database.send_request(
            '/document/{}'.format(self._id),
            method='put',
            data=self._content
        )
        self._revision = body.get('_rev', self._revision)
        return self

    def delete(self):
        """Delete the document from the server.

        :returns: whether the deletion was successful
        :rtype: bool
        :raises: DocumentNotFoundError
        """
        self._check_persisted()
        body = self._database.send_request(
            '/document/{}'.format(self._id),
            method='delete'
        )
        return not body.get('error', False)
