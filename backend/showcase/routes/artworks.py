"""
Showcase Backend - Artwork Route Handlers
===========================================

What:  Artwork CRUD, search, likes and the per-artist views.
How:   Each handler pulls its inputs off the request, delegates to
       ArtworkService and returns the result unchanged.
Who:   The showcase frontend (gallery, detail page, dashboard).

Routes:
    POST   /add-artwork                  insert
    GET    /artworks?search=&category=   public search
    GET    /artworks/{id}                detail
    PATCH  /artworks/{id}/like           likes + 1
    PUT    /artworks/{id}                merge update
    DELETE /artworks/{id}                delete
    GET    /artist/{email}/artworks      {"totalArtworks": n}
    GET    /my-artworks?email=           owner's artworks
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query

from showcase.database import DocumentStore, get_store
from showcase.schemas.artwork import (
    ArtistArtworkCount,
    ArtworkCreate,
    ArtworkUpdate,
    DeleteAck,
    ErrorResponse,
    InsertAck,
    UpdateAck,
)
from showcase.services.artwork_service import artwork_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Artworks"])

_ID_ERRORS = {
    400: {"description": "Malformed artwork id", "model": ErrorResponse},
    503: {"description": "Store unavailable", "model": ErrorResponse},
}


@router.post(
    "/add-artwork",
    response_model=InsertAck,
    summary="Create an artwork",
    description="Stores the body as a new artwork document. Unknown fields are kept.",
)
async def add_artwork(
    artwork: ArtworkCreate,
    store: DocumentStore = Depends(get_store),
) -> InsertAck:
    return await artwork_service.create_artwork(store, artwork.to_document())


@router.get(
    "/artworks",
    summary="Search public artworks",
    description=(
        "Public artworks whose title or artist name contains `search` "
        "(case-insensitive). `category`, when given, must match exactly."
    ),
)
async def list_artworks(
    search: str = Query(default="", description="Substring of title or userName"),
    category: str | None = Query(default=None, description="Exact category filter"),
    store: DocumentStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    return await artwork_service.list_artworks(store, search=search, category=category)


@router.get(
    "/artworks/{artwork_id}",
    summary="Get a single artwork",
    responses={404: {"description": "Artwork not found", "model": ErrorResponse}, **_ID_ERRORS},
)
async def get_artwork(
    artwork_id: str,
    store: DocumentStore = Depends(get_store),
) -> Dict[str, Any]:
    return await artwork_service.get_artwork(store, artwork_id)


@router.patch(
    "/artworks/{artwork_id}/like",
    response_model=UpdateAck,
    summary="Like an artwork",
    description="Atomically adds one to the artwork's `likes` counter.",
    responses=_ID_ERRORS,
)
async def like_artwork(
    artwork_id: str,
    store: DocumentStore = Depends(get_store),
) -> UpdateAck:
    return await artwork_service.like_artwork(store, artwork_id)


@router.put(
    "/artworks/{artwork_id}",
    response_model=UpdateAck,
    summary="Update an artwork",
    description=(
        "Overwrites every supplied field and stamps `updatedAt`. "
        "Fields not in the body are left as they are."
    ),
    responses=_ID_ERRORS,
)
async def update_artwork(
    artwork_id: str,
    changes: ArtworkUpdate,
    store: DocumentStore = Depends(get_store),
) -> UpdateAck:
    return await artwork_service.update_artwork(store, artwork_id, changes.to_document())


@router.delete(
    "/artworks/{artwork_id}",
    response_model=DeleteAck,
    summary="Delete an artwork",
    description="Favorites pointing at the artwork are not removed.",
    responses=_ID_ERRORS,
)
async def delete_artwork(
    artwork_id: str,
    store: DocumentStore = Depends(get_store),
) -> DeleteAck:
    return await artwork_service.delete_artwork(store, artwork_id)


@router.get(
    "/artist/{email}/artworks",
    response_model=ArtistArtworkCount,
    summary="Count an artist's artworks",
)
async def count_artist_artworks(
    email: str,
    store: DocumentStore = Depends(get_store),
) -> ArtistArtworkCount:
    return await artwork_service.count_by_owner(store, email)


@router.get(
    "/my-artworks",
    summary="List the caller's artworks",
    description="All artworks whose `userEmail` equals `email`, regardless of visibility.",
)
async def my_artworks(
    email: str | None = Query(default=None, description="Owner email"),
    store: DocumentStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    return await artwork_service.list_by_owner(store, email)
