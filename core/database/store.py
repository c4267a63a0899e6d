from contextlib import contextmanager
from typing import Any, Dict, Generator, List, Optional
from urllib.parse import urlsplit, urlunsplit
import logging
import threading

from pymongo import MongoClient
from pymongo.client_session import ClientSession
from pymongo.errors import PyMongoError

from core.errors import ConfigurationError, StoreError
from .queries import DocumentQuery

logger = logging.getLogger(__name__)


def mask_uri(uri: str) -> str:
    """Hide the password part of a connection string for logging."""
    try:
        parts = urlsplit(uri)
    except ValueError:
        return "<unparseable uri>"
    if parts.password is None:
        return uri
    netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
    return urlunsplit(parts._replace(netloc=netloc))


class DocumentStore:
    """
    Read-only access to the trades database.

    Holds one long-lived MongoClient (which pools connections internally).
    Each query borrows a client session and ends it on every exit path,
    returning the underlying server session to the pool.
    """

    def __init__(self, client: MongoClient, database_name: str = "trades"):
        self._client = client
        self._db = client[database_name]
        self.database_name = database_name
        self._lock = threading.Lock()
        self._active_sessions = 0

    @classmethod
    def from_settings(cls, settings) -> "DocumentStore":
        if not settings.tradedb_uri:
            raise ConfigurationError("TRADEDB_URI environment variable must be set")

        logger.info(
            f"Connecting to document store {mask_uri(settings.tradedb_uri)} "
            f"(db={settings.tradedb_name}, max_pool_size={settings.tradedb_max_pool_size})"
        )
        try:
            client = MongoClient(
                settings.tradedb_uri,
                maxPoolSize=settings.tradedb_max_pool_size,
                connect=False,
            )
        except (PyMongoError, ValueError) as e:
            raise StoreError(f"Could not create document store client: {e}") from e
        return cls(client, settings.tradedb_name)

    @property
    def active_sessions(self) -> int:
        """Number of sessions currently borrowed and not yet released."""
        with self._lock:
            return self._active_sessions

    @contextmanager
    def session(self) -> Generator[ClientSession, None, None]:
        try:
            session = self._client.start_session()
        except PyMongoError as e:
            raise StoreError(f"Could not acquire store session: {e}") from e

        with self._lock:
            self._active_sessions += 1
        try:
            yield session
        finally:
            with self._lock:
                self._active_sessions -= 1
            try:
                session.end_session()
            except PyMongoError as e:
                raise StoreError(f"Failed to release store session: {e}") from e

    def find(self, query: DocumentQuery) -> List[Dict[str, Any]]:
        """Run a DocumentQuery and return every matching document."""
        try:
            with self.session() as session:
                cursor = self._db[query.collection].find(
                    query.filter, sort=query.sort, session=session
                )
                documents = list(cursor)
        except PyMongoError as e:
            raise StoreError(f"Query on '{query.collection}' failed: {e}") from e

        logger.debug(f"{query.collection}: {len(documents)} documents for {query.filter}")
        return documents

    def ping(self) -> bool:
        try:
            self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"Document store ping failed: {e}")
            return False

    def close(self):
        self._client.close()
        logger.info("Document store client closed")


def create_store(settings, client: Optional[MongoClient] = None) -> DocumentStore:
    """Build a store from settings, or around an already-constructed client."""
    if client is not None:
        return DocumentStore(client, settings.tradedb_name)
    return DocumentStore.from_settings(settings)
