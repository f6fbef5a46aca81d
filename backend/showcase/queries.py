"""
Showcase Backend - Query Builder
==================================

What:  Builds the MongoDB filter and update documents for every operation.
How:   Pure functions, no I/O. Services call these and hand the result to a
       single collection method.
Who:   ArtworkService and FavoriteService.

Filters produced here:
    list_artworks_filter   {visibility: "Public", $and: [{$or: [title~s, userName~s]}, {category}?]}
    by_id_filter           {_id: ObjectId}
    owner_filter           {userEmail: email}
    ids_in_filter          {_id: {$in: [...]}}

Updates produced here:
    like_update            {$inc: {likes: 1}}
    merge_update           {$set: {...fields, updatedAt: now}}
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional

from bson import ObjectId

from showcase.identifiers import format_object_id, parse_object_id, try_parse_object_id

PUBLIC_VISIBILITY = "Public"

Filter = Dict[str, Any]


def _contains(field: str, text: str) -> Filter:
    # Literal, case-insensitive substring match. An empty pattern matches
    # every string value.
    return {field: {"$regex": re.escape(text), "$options": "i"}}


def list_artworks_filter(search: Optional[str] = "", category: Optional[str] = None) -> Filter:
    """
    Filter for GET /artworks.

    Matches public artworks whose title or owner name contains `search`
    (case-insensitive). The category clause is only added when a non-empty
    category was supplied; it is an exact match.
    """
    search = search or ""
    clauses: List[Filter] = [
        {"$or": [_contains("title", search), _contains("userName", search)]},
    ]
    if category:
        clauses.append({"category": category})
    return {"visibility": PUBLIC_VISIBILITY, "$and": clauses}


def by_id_filter(document_id: str, resource: str = "document") -> Filter:
    """Exact match on `_id`; raises InvalidIdentifierError for malformed ids."""
    return {"_id": parse_object_id(document_id, resource=resource)}


def owner_filter(email: Optional[str]) -> Filter:
    return {"userEmail": email}


def like_update() -> Filter:
    return {"$inc": {"likes": 1}}


def merge_update(fields: Mapping[str, Any], now: Optional[datetime] = None) -> Filter:
    """
    Shallow merge of `fields` into the stored document.

    Every supplied key overwrites the stored one except `_id`, which is
    immutable. `updatedAt` is always stamped, overriding any client value.
    """
    changes = {key: value for key, value in fields.items() if key != "_id"}
    changes["updatedAt"] = now or datetime.now(timezone.utc)
    return {"$set": changes}


def artwork_ids_from_favorites(favorites: Iterable[Mapping[str, Any]]) -> List[ObjectId]:
    """
    Collect the distinct artwork ids referenced by `favorites`.

    References that cannot be parsed are skipped; their favorites fall back
    to the empty placeholder in join_favorites().
    """
    ids: List[ObjectId] = []
    seen = set()
    for favorite in favorites:
        oid = try_parse_object_id(favorite.get("artworkId"))
        if oid is not None and oid not in seen:
            seen.add(oid)
            ids.append(oid)
    return ids


def ids_in_filter(ids: Iterable[ObjectId]) -> Filter:
    return {"_id": {"$in": list(ids)}}


def join_favorites(
    favorites: Iterable[Mapping[str, Any]],
    artworks: Iterable[Mapping[str, Any]],
) -> List[Dict[str, Any]]:
    """
    Attach the referenced artwork to each favorite.

    Artworks are matched on the string form of their `_id` against the
    favorite's `artworkId`. Missing or dangling references get `{}`.
    Order follows `favorites`.
    """
    by_id = {format_object_id(artwork["_id"]): artwork for artwork in artworks}
    combined = []
    for favorite in favorites:
        artwork_id = favorite.get("artworkId")
        key = format_object_id(artwork_id) if artwork_id is not None else None
        combined.append({**favorite, "artwork": by_id.get(key, {})})
    return combined
