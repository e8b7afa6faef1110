"""ArangoDB constants."""

HTTP_OK = {200, 201, 202, 203, 204, 205, 206}

DEFAULT_PROTOCOL = 'http'

DEFAULT_HOST = 'localhost'

DEFAULT_PORT = 8529

API_PREFIX = '/_api'

# Server error numbers
ERROR_DOCUMENT_NOT_FOUND = 1202

ERROR_COLLECTION_NOT_FOUND = 1203

ERROR_QUERY_PARSE = 1501

COLLECTION_STATUSES = {
    1: 'new',
    2: 'unloaded',
    3: 'loaded',
    4: 'unloading',
    5: 'deleted',
    6: 'loading'
}

COLLECTION_TYPES = {
    2: 'document',
    3: 'edge'
}
