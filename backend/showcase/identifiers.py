"""
Showcase Backend - Document Identifiers
=========================================

What:  Conversion between the opaque string ids of the HTTP API and the
       store-native bson.ObjectId.
How:   parse_object_id() for path parameters (raises on bad input),
       try_parse_object_id() for stored references that may be stale or
       malformed, and to_public() to turn a raw document into JSON-safe data.

The favorites collection stores `artworkId` as a plain string. ObjectId
never leaves this module's callers: routes and schemas only see strings.
"""

from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId

from showcase.exceptions import InvalidIdentifierError


def parse_object_id(value: str, resource: str = "document") -> ObjectId:
    """
    Parse a client-supplied identifier.

    Raises:
        InvalidIdentifierError: value is not a 24-character hex string (→ 400)
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidIdentifierError(value=str(value), resource=resource)


def try_parse_object_id(value: Any) -> Optional[ObjectId]:
    """Like parse_object_id but returns None instead of raising."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def format_object_id(value: Any) -> str:
    return str(value)


def to_public(value: Any) -> Any:
    """
    Recursively convert a stored document into JSON-serializable data.

    ObjectId values (at any depth) become hex strings. Datetimes are left
    alone; FastAPI's encoder renders them as ISO 8601.
    """
    if isinstance(value, ObjectId):
        return format_object_id(value)
    if isinstance(value, dict):
        return {key: to_public(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_public(item) for item in value]
    return value
