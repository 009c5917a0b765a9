from uuid import uuid1, uuid4

import pytest

from postboard.domain.common.exceptions import ValidationError
from postboard.domain.common.value_objects import CommentId, PostId, TagId, UserId


def test_round_trip_through_string() -> None:
    """Test that parsing an identifier's string gives back an equal identifier."""
    post_id = PostId.generate()

    assert PostId.from_string(post_id.to_string()) == post_id


def test_same_string_gives_equal_identifiers() -> None:
    raw = str(uuid4())

    assert UserId.from_string(raw) == UserId.from_string(raw)
    assert hash(UserId.from_string(raw)) == hash(UserId.from_string(raw))


def test_generated_identifiers_differ() -> None:
    assert PostId.generate() != PostId.generate()


def test_uppercase_input_is_normalized_to_lowercase() -> None:
    raw = str(uuid4())

    assert CommentId.from_string(raw.upper()) == CommentId.from_string(raw)
    assert CommentId.from_string(raw.upper()).to_string() == raw


def test_identifiers_of_different_types_are_not_equal() -> None:
    """Test that a PostId never equals a UserId wrapping the same string."""
    raw = str(uuid4())

    assert PostId.from_string(raw) != UserId.from_string(raw)


@pytest.mark.parametrize(
    "raw",
    ["", "not-a-uuid", "1234", str(uuid4()) + "0", " " + str(uuid4()), str(uuid4()) + "\n"],
)
def test_invalid_identifier_raises_validation_error(raw: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        TagId.from_string(raw)

    assert exc_info.value.field == "id"
    assert "Invalid TagId format" in exc_info.value.message


def test_str_returns_canonical_string() -> None:
    raw = str(uuid4())

    assert str(PostId.from_string(raw)) == raw


def test_any_uuid_version_is_accepted() -> None:
    raw = str(uuid1())

    assert PostId.from_string(raw).to_string() == raw
