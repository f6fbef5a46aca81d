"""
Showcase Backend - Artwork Service
====================================

What:  One method per artwork endpoint, each a single collection call.
How:   Filters and updates come from showcase.queries; driver errors are
       translated by store_errors(); raw documents are made JSON-safe with
       to_public().
Who:   Called by showcase.routes.artworks.

ArtworkService is stateless. The DocumentStore is passed in on every call
(it is a request dependency), so the same instance serves every request.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from showcase.database import DocumentStore, store_errors
from showcase.exceptions import NotFoundError
from showcase.identifiers import to_public
from showcase.queries import (
    by_id_filter,
    like_update,
    list_artworks_filter,
    merge_update,
    owner_filter,
)
from showcase.schemas.artwork import (
    ArtistArtworkCount,
    DeleteAck,
    InsertAck,
    UpdateAck,
)

logger = logging.getLogger(__name__)


class ArtworkService:
    """
    Business logic layer for artwork operations.

    Responsibilities:
        - create_artwork(): insert as received
        - list_artworks(): public search with optional category
        - get_artwork(): point lookup, NotFoundError on a miss
        - like_artwork(): atomic like increment
        - update_artwork(): shallow merge + updatedAt stamp
        - delete_artwork(): delete by id (favorites are left in place)
        - count_by_owner() / list_by_owner(): artist views keyed on userEmail
    """

    async def create_artwork(self, store: DocumentStore, artwork: Dict[str, Any]) -> InsertAck:
        document = dict(artwork)
        with store_errors("create_artwork"):
            result = await store.artworks.insert_one(document)
        logger.info("Artwork created: %s", result.inserted_id)
        return InsertAck.from_result(result)

    async def list_artworks(
        self,
        store: DocumentStore,
        search: Optional[str] = "",
        category: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Public artworks matching the search text, optionally within a category.

        Args:
            search: substring of title or userName, case-insensitive ("" = all)
            category: exact category; None or "" = any category
        """
        query = list_artworks_filter(search, category)
        with store_errors("list_artworks"):
            artworks = await store.artworks.find(query).to_list(length=None)
        return to_public(artworks)

    async def get_artwork(self, store: DocumentStore, artwork_id: str) -> Dict[str, Any]:
        """
        Raises:
            InvalidIdentifierError: artwork_id is malformed (→ 400)
            NotFoundError: no artwork with that id (→ 404)
        """
        query = by_id_filter(artwork_id, resource="artwork")
        with store_errors("get_artwork", artwork_id=artwork_id):
            artwork = await store.artworks.find_one(query)
        if artwork is None:
            raise NotFoundError(resource="artwork", resource_id=artwork_id)
        return to_public(artwork)

    async def like_artwork(self, store: DocumentStore, artwork_id: str) -> UpdateAck:
        # $inc is applied server-side; concurrent likes never lose an increment.
        query = by_id_filter(artwork_id, resource="artwork")
        with store_errors("like_artwork", artwork_id=artwork_id):
            result = await store.artworks.update_one(query, like_update())
        return UpdateAck.from_result(result)

    async def update_artwork(
        self,
        store: DocumentStore,
        artwork_id: str,
        fields: Dict[str, Any],
        now: Optional[datetime] = None,
    ) -> UpdateAck:
        query = by_id_filter(artwork_id, resource="artwork")
        update = merge_update(fields, now=now)
        with store_errors("update_artwork", artwork_id=artwork_id):
            result = await store.artworks.update_one(query, update)
        logger.info(
            "Artwork %s updated: fields=%s matched=%d",
            artwork_id,
            sorted(update["$set"]),
            result.matched_count,
        )
        return UpdateAck.from_result(result)

    async def delete_artwork(self, store: DocumentStore, artwork_id: str) -> DeleteAck:
        query = by_id_filter(artwork_id, resource="artwork")
        with store_errors("delete_artwork", artwork_id=artwork_id):
            result = await store.artworks.delete_one(query)
        logger.info("Artwork %s delete: deleted=%d", artwork_id, result.deleted_count)
        return DeleteAck.from_result(result)

    async def count_by_owner(self, store: DocumentStore, email: str) -> ArtistArtworkCount:
        with store_errors("count_by_owner"):
            count = await store.artworks.count_documents(owner_filter(email))
        return ArtistArtworkCount(totalArtworks=count)

    async def list_by_owner(self, store: DocumentStore, email: Optional[str]) -> List[Dict[str, Any]]:
        """Every artwork owned by `email`, private ones included."""
        with store_errors("list_by_owner"):
            artworks = await store.artworks.find(owner_filter(email)).to_list(length=None)
        return to_public(artworks)


artwork_service = ArtworkService()
