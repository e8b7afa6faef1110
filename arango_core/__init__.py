"""Object-oriented client for the ArangoDB HTTP API."""

from arango_core.collection import Collection
from arango_core.connection import Connection
from arango_core.cursor import Cursor
from arango_core.database import Database
from arango_core.document import Document
from arango_core.exceptions import *
from arango_core.query import Query, QueryScope
from arango_core.version import VERSION

__version__ = VERSION
