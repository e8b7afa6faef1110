from arango_core.clients.base import BaseHTTPClient
from arango_core.clients.default import DefaultHTTPClient
