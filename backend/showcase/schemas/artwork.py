"""
Showcase Backend - Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract with the showcase frontend.
How:   Request bodies type the handful of fields the frontend always sends
       and allow any other field through (`extra="allow"`). Acknowledgment
       models mirror the driver result shapes the frontend already reads
       (insertedId, modifiedCount, deletedCount).
Who:   Route handlers (bodies, response_model) and services (ack builders).

Field names are camelCase because they are stored and returned verbatim.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from showcase.identifiers import format_object_id


# ══════════════════════════════════════════════════════════════════════════
# Request Bodies
# ══════════════════════════════════════════════════════════════════════════


class OpenDocument(BaseModel):
    """
    Base for bodies stored as-is.

    Known fields are named for the API docs but accept any JSON value;
    nothing is checked or coerced. Unknown fields are kept.
    """

    model_config = ConfigDict(extra="allow")

    def to_document(self) -> Dict[str, Any]:
        """Only what the client actually sent, extras included."""
        known = type(self).model_fields
        document = {name: getattr(self, name) for name in self.model_fields_set if name in known}
        document.update(self.model_extra or {})
        return document


class ArtworkCreate(OpenDocument):
    """
    What:  Body of POST /add-artwork.
    How:   Inserted unchanged; no field is required.

    Example:
        {
            "title": "Sunset",
            "userName": "ana",
            "userEmail": "ana@example.com",
            "category": "painting",
            "visibility": "Public",
            "likes": 0,
            "image": "https://i.ibb.co/sunset.jpg"
        }
    """
    title: Any = None
    userName: Any = None
    userEmail: Any = None
    category: Any = None
    visibility: Any = Field(default=None, description='"Public" or "Private"')
    likes: Any = Field(default=None, description="Like counter, usually an integer")


class ArtworkUpdate(ArtworkCreate):
    """Body of PUT /artworks/{id}. Every supplied field overwrites the stored one."""


class FavoriteCreate(OpenDocument):
    """
    What:  Body of POST /favorites.

    `artworkId` is the artwork's identifier as a string. It is never
    converted on write.
    """
    userEmail: Any = None
    artworkId: Any = None


# ══════════════════════════════════════════════════════════════════════════
# Acknowledgments
# ══════════════════════════════════════════════════════════════════════════


class InsertAck(BaseModel):
    acknowledged: bool
    insertedId: Optional[str] = None

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertAck":
        inserted = result.inserted_id
        return cls(
            acknowledged=result.acknowledged,
            insertedId=format_object_id(inserted) if inserted is not None else None,
        )


class UpdateAck(BaseModel):
    """
    What:  Outcome of a like or a merge update.

    matchedCount == 0 means the id exists nowhere; it is not an error.
    """
    acknowledged: bool
    matchedCount: int = 0
    modifiedCount: int = 0
    upsertedCount: int = 0
    upsertedId: Optional[str] = None

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateAck":
        if not result.acknowledged:
            return cls(acknowledged=False)
        upserted = result.upserted_id
        return cls(
            acknowledged=True,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedCount=0 if upserted is None else 1,
            upsertedId=format_object_id(upserted) if upserted is not None else None,
        )


class DeleteAck(BaseModel):
    acknowledged: bool
    deletedCount: int = 0

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteAck":
        if not result.acknowledged:
            return cls(acknowledged=False)
        return cls(acknowledged=True, deletedCount=result.deleted_count)


class ArtistArtworkCount(BaseModel):
    """Returned by GET /artist/{email}/artworks."""
    totalArtworks: int = Field(description="Number of artworks owned by the email, any visibility")


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every exception handler.

    Example:
        {
            "error": "invalid_identifier",
            "message": "'abc' is not a valid artwork identifier",
            "details": {"resource": "artwork", "value": "abc"},
            "request_id": "1f3a9c0e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
