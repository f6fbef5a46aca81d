"""
Showcase Backend - Favorite Service
=====================================

What:  Adding, listing and removing favorites.
Who:   Called by showcase.routes.favorites.

Favorites listing (GET /favorites?email=):
    ┌──────────────────┐    ┌───────────────────────┐    ┌──────────────┐
    │ favorites where  │───▶│ artworks where        │───▶│ join by      │
    │ userEmail=email  │    │ _id in {artworkId...} │    │ id, {} if    │
    └──────────────────┘    └───────────────────────┘    │ missing      │
                                                         └──────────────┘

A favorite whose artwork was deleted (or whose artworkId never was a valid
id) keeps appearing with an empty artwork object.
"""

import logging
from typing import Any, Dict, List, Optional

from showcase.database import DocumentStore, store_errors
from showcase.identifiers import to_public
from showcase.queries import (
    artwork_ids_from_favorites,
    by_id_filter,
    ids_in_filter,
    join_favorites,
    owner_filter,
)
from showcase.schemas.artwork import DeleteAck, InsertAck

logger = logging.getLogger(__name__)


class FavoriteService:

    async def add_favorite(self, store: DocumentStore, favorite: Dict[str, Any]) -> InsertAck:
        document = dict(favorite)
        with store_errors("add_favorite"):
            result = await store.favorites.insert_one(document)
        logger.info(
            "Favorite %s created for artwork %s",
            result.inserted_id,
            document.get("artworkId"),
        )
        return InsertAck.from_result(result)

    async def list_favorites(self, store: DocumentStore, email: Optional[str]) -> List[Dict[str, Any]]:
        """
        Favorites of `email`, each with its artwork under the `artwork` key.

        Two reads: the owner's favorites, then every referenced artwork in
        one $in query. The second read is skipped when nothing resolvable
        is referenced.
        """
        with store_errors("list_favorites"):
            favorites = await store.favorites.find(owner_filter(email)).to_list(length=None)

            artwork_ids = artwork_ids_from_favorites(favorites)
            artworks: List[Dict[str, Any]] = []
            if artwork_ids:
                artworks = await store.artworks.find(ids_in_filter(artwork_ids)).to_list(length=None)

        combined = join_favorites(favorites, artworks)
        dangling = sum(1 for item in combined if not item["artwork"])
        if dangling:
            logger.debug("%d favorite(s) of %s reference missing artworks", dangling, email)
        return to_public(combined)

    async def remove_favorite(self, store: DocumentStore, favorite_id: str) -> DeleteAck:
        query = by_id_filter(favorite_id, resource="favorite")
        with store_errors("remove_favorite", favorite_id=favorite_id):
            result = await store.favorites.delete_one(query)
        logger.info("Favorite %s delete: deleted=%d", favorite_id, result.deleted_count)
        return DeleteAck.from_result(result)


favorite_service = FavoriteService()
