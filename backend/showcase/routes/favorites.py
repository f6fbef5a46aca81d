"""
Showcase Backend - Favorite Route Handlers
============================================

Routes:
    POST   /favorites           {userEmail, artworkId} → insert ack
    GET    /favorites?email=    [{...favorite, artwork}]
    DELETE /favorites/{id}      delete ack
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query

from showcase.database import DocumentStore, get_store
from showcase.schemas.artwork import DeleteAck, ErrorResponse, FavoriteCreate, InsertAck
from showcase.services.favorite_service import favorite_service

router = APIRouter(tags=["Favorites"])


@router.post("/favorites", response_model=InsertAck, summary="Add a favorite")
async def add_favorite(
    favorite: FavoriteCreate,
    store: DocumentStore = Depends(get_store),
) -> InsertAck:
    return await favorite_service.add_favorite(store, favorite.to_document())


@router.get(
    "/favorites",
    summary="List a user's favorites with their artworks",
    description=(
        "Each favorite carries the referenced artwork under `artwork`; "
        "an empty object when the artwork no longer exists."
    ),
)
async def list_favorites(
    email: str | None = Query(default=None, description="Owner email"),
    store: DocumentStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    return await favorite_service.list_favorites(store, email)


@router.delete(
    "/favorites/{favorite_id}",
    response_model=DeleteAck,
    summary="Remove a favorite",
    responses={400: {"description": "Malformed favorite id", "model": ErrorResponse}},
)
async def remove_favorite(
    favorite_id: str,
    store: DocumentStore = Depends(get_store),
) -> DeleteAck:
    return await favorite_service.remove_favorite(store, favorite_id)
