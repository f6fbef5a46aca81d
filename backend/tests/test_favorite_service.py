"""
Showcase Backend - Favorite Service Unit Tests
================================================

What:  Tests for adding, listing (with the artwork join) and removing favorites.
"""

import pytest
from bson import ObjectId
from pymongo.errors import AutoReconnect

from showcase.exceptions import InvalidIdentifierError, StoreUnavailableError
from showcase.services.artwork_service import ArtworkService
from showcase.services.favorite_service import FavoriteService


class TestFavoriteService:

    def setup_method(self):
        self.artworks = ArtworkService()
        self.service = FavoriteService()

    @pytest.mark.asyncio
    async def test_list_joins_artworks(self, store, sample_artwork):
        art = await self.artworks.create_artwork(store, sample_artwork)
        await self.service.add_favorite(store, {"userEmail": "bo@example.com", "artworkId": art.insertedId})

        favorites = await self.service.list_favorites(store, "bo@example.com")

        assert len(favorites) == 1
        assert favorites[0]["artworkId"] == art.insertedId
        assert favorites[0]["artwork"]["_id"] == art.insertedId
        assert favorites[0]["artwork"]["title"] == "Sunset"
        assert isinstance(favorites[0]["_id"], str)

    @pytest.mark.asyncio
    async def test_artworkId_is_stored_as_string(self, store, sample_artwork):
        art = await self.artworks.create_artwork(store, sample_artwork)
        await self.service.add_favorite(store, {"userEmail": "bo@example.com", "artworkId": art.insertedId})
        assert store.favorites.documents[0]["artworkId"] == art.insertedId

    @pytest.mark.asyncio
    async def test_only_the_owner_favorites_are_listed(self, store, sample_artwork):
        art = await self.artworks.create_artwork(store, sample_artwork)
        await self.service.add_favorite(store, {"userEmail": "bo@example.com", "artworkId": art.insertedId})
        await self.service.add_favorite(store, {"userEmail": "cy@example.com", "artworkId": art.insertedId})

        favorites = await self.service.list_favorites(store, "cy@example.com")

        assert [f["userEmail"] for f in favorites] == ["cy@example.com"]

    @pytest.mark.asyncio
    async def test_deleting_artwork_keeps_favorite_with_placeholder(self, store, sample_artwork):
        art = await self.artworks.create_artwork(store, sample_artwork)
        await self.service.add_favorite(store, {"userEmail": "bo@example.com", "artworkId": art.insertedId})

        await self.artworks.delete_artwork(store, art.insertedId)
        favorites = await self.service.list_favorites(store, "bo@example.com")

        assert len(store.favorites.documents) == 1
        assert favorites[0]["artwork"] == {}

    @pytest.mark.asyncio
    async def test_malformed_reference_gets_placeholder(self, store, sample_artwork):
        art = await self.artworks.create_artwork(store, sample_artwork)
        await self.service.add_favorite(store, {"userEmail": "bo@example.com", "artworkId": "not-an-id"})
        await self.service.add_favorite(store, {"userEmail": "bo@example.com", "artworkId": art.insertedId})

        favorites = await self.service.list_favorites(store, "bo@example.com")

        assert favorites[0]["artwork"] == {}
        assert favorites[1]["artwork"]["title"] == "Sunset"

    @pytest.mark.asyncio
    async def test_no_resolvable_references_skips_artwork_query(self, store):
        await self.service.add_favorite(store, {"userEmail": "bo@example.com", "artworkId": "bad"})

        favorites = await self.service.list_favorites(store, "bo@example.com")

        assert favorites[0]["artwork"] == {}
        assert store.artworks.queries == []

    @pytest.mark.asyncio
    async def test_empty_favorites(self, store):
        assert await self.service.list_favorites(store, "nobody@example.com") == []

    @pytest.mark.asyncio
    async def test_remove_favorite(self, store):
        ack = await self.service.add_favorite(store, {"userEmail": "bo@example.com", "artworkId": str(ObjectId())})

        removed = await self.service.remove_favorite(store, ack.insertedId)

        assert removed.deletedCount == 1
        assert store.favorites.documents == []

    @pytest.mark.asyncio
    async def test_remove_with_malformed_id(self, store):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            await self.service.remove_favorite(store, "xyz")
        assert exc_info.value.resource == "favorite"

    @pytest.mark.asyncio
    async def test_store_unreachable_during_join(self, store, sample_artwork):
        art = await self.artworks.create_artwork(store, sample_artwork)
        await self.service.add_favorite(store, {"userEmail": "bo@example.com", "artworkId": art.insertedId})
        store.artworks.error = AutoReconnect("connection reset")

        with pytest.raises(StoreUnavailableError):
            await self.service.list_favorites(store, "bo@example.com")
