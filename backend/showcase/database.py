"""
Showcase Backend - Document Store Access
==========================================

What:  MongoDB client construction, the DocumentStore handle, the FastAPI
       dependency that injects it, and driver-error translation.
How:   One pymongo AsyncMongoClient per process (the driver owns the
       connection pool and is safe to share between concurrent requests).
       The lifespan in main.py creates it and places a DocumentStore on
       app.state; routes receive it through get_store().
Who:   main.py (lifecycle), routes (dependency), services (store_errors).

Collections:
    adds        artwork documents
    favorites   {userEmail, artworkId} join records

Tests inject a fake store exposing the same attributes, so nothing here
is a module-level singleton.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import ConnectionFailure, PyMongoError
from pymongo.server_api import ServerApi

from showcase.config import Settings
from showcase.exceptions import DatabaseError, StoreUnavailableError

logger = logging.getLogger(__name__)


def create_client(config: Settings) -> AsyncMongoClient:
    """
    Build the shared async client.

    Stable API v1 in strict mode: commands outside the stable API and
    deprecated behaviour are rejected by the server.
    """
    return AsyncMongoClient(
        config.mongodb_url,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
        serverSelectionTimeoutMS=config.mongodb_server_selection_timeout_ms,
        maxPoolSize=config.mongodb_max_pool_size,
        tz_aware=True,
    )


class DocumentStore:
    """
    The two collections the API works on, plus the client that owns them.

    Attributes:
        artworks:   collection of artwork documents
        favorites:  collection of favorite documents
    """

    def __init__(self, client: Any, database_name: str, artworks: str, favorites: str):
        self.client = client
        self.database = client[database_name]
        self.artworks = self.database[artworks]
        self.favorites = self.database[favorites]

    @classmethod
    def from_settings(cls, config: Settings, client: Optional[AsyncMongoClient] = None) -> "DocumentStore":
        return cls(
            client or create_client(config),
            database_name=config.database_name,
            artworks=config.artworks_collection,
            favorites=config.favorites_collection,
        )

    async def ping(self) -> bool:
        """Round-trip to the server; raises on failure."""
        with store_errors("ping"):
            await self.client.admin.command("ping")
        return True

    async def close(self) -> None:
        await self.client.close()


@contextmanager
def store_errors(operation: str, **context: Any) -> Iterator[None]:
    """
    Translate driver exceptions raised inside the block.

        ConnectionFailure (incl. server selection and network timeouts) → StoreUnavailableError
        any other PyMongoError                                          → DatabaseError

    Application exceptions pass through untouched.
    """
    try:
        yield
    except ConnectionFailure as e:
        logger.error("Store unreachable during %s: %s", operation, str(e))
        raise StoreUnavailableError(
            context={"operation": operation, "error_type": type(e).__name__, **context},
        ) from e
    except PyMongoError as e:
        logger.error("Store error during %s: %s", operation, str(e), exc_info=True)
        raise DatabaseError(
            context={"operation": operation, "error_type": type(e).__name__, **context},
        ) from e


def get_store(request: Request) -> DocumentStore:
    """
    FastAPI dependency returning the process-wide DocumentStore.

    Raises:
        StoreUnavailableError: the lifespan has not connected (or already closed) the store
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreUnavailableError(message="The artwork store is not connected.")
    return store
