"""Tests for the exception hierarchy messages and context."""

from showcase.exceptions import (
    DatabaseError,
    InvalidIdentifierError,
    NotFoundError,
    ShowcaseError,
    StoreUnavailableError,
)


def test_all_errors_share_the_base():
    for exc in (InvalidIdentifierError("x"), NotFoundError(), StoreUnavailableError(), DatabaseError()):
        assert isinstance(exc, ShowcaseError)
        assert str(exc) == exc.message


def test_not_found_message_includes_id():
    exc = NotFoundError(resource="artwork", resource_id="64b7f0c2e4b0a1a2b3c4d5e6")
    assert exc.message == "artwork with ID '64b7f0c2e4b0a1a2b3c4d5e6' was not found"
    assert exc.context == {"resource": "artwork", "resource_id": "64b7f0c2e4b0a1a2b3c4d5e6"}


def test_not_found_without_id():
    assert NotFoundError(resource="favorite").message == "The requested favorite was not found"


def test_invalid_identifier_message():
    exc = InvalidIdentifierError(value="abc", resource="artwork")
    assert exc.message == "'abc' is not a valid artwork identifier"


def test_context_is_not_shared_between_instances():
    first = DatabaseError()
    first.context["extra"] = 1
    assert DatabaseError().context == {}
