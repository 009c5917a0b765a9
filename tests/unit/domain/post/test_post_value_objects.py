import pytest

from postboard.domain.common.exceptions import ValidationError
from postboard.domain.post.value_objects import PostContent, PostStatus, PostTitle


class TestPostTitle:
    """Test title length and whitespace rules."""

    @pytest.mark.parametrize("raw", ["abc", "Hello World", "x" * 255, "  padded  "])
    def test_valid_titles_round_trip_unchanged(self, raw: str) -> None:
        assert PostTitle.from_string(raw).to_string() == raw

    @pytest.mark.parametrize("raw", ["", "ab", "x" * 256])
    def test_out_of_range_lengths_are_rejected(self, raw: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PostTitle.from_string(raw)

        assert exc_info.value.field == "title"

    def test_whitespace_only_title_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="only whitespace"):
            PostTitle.from_string("     ")


class TestPostContent:
    def test_valid_content(self) -> None:
        content = PostContent.from_string("This is more than ten characters")

        assert content.to_string() == "This is more than ten characters"

    def test_short_content_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="at least 10 characters"):
            PostContent.from_string("too short")

    def test_whitespace_only_content_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PostContent.from_string(" " * 20)


class TestPostStatus:
    """Test the draft -> published -> archived lifecycle."""

    def test_factories(self) -> None:
        assert PostStatus.draft().to_string() == "draft"
        assert PostStatus.published().to_string() == "published"
        assert PostStatus.archived().to_string() == "archived"

    def test_unknown_status_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Invalid post status"):
            PostStatus.from_string("deleted")

    def test_legal_transitions(self) -> None:
        assert PostStatus.draft().can_transition_to(PostStatus.published())
        assert PostStatus.published().can_transition_to(PostStatus.archived())

    @pytest.mark.parametrize(
        ("source", "target"),
        [
            ("draft", "archived"),
            ("draft", "draft"),
            ("published", "draft"),
            ("published", "published"),
            ("archived", "draft"),
            ("archived", "published"),
            ("archived", "archived"),
        ],
    )
    def test_illegal_transitions(self, source: str, target: str) -> None:
        assert not PostStatus.from_string(source).can_transition_to(PostStatus.from_string(target))

    def test_predicates(self) -> None:
        assert PostStatus.draft().is_draft
        assert PostStatus.published().is_published
        assert PostStatus.archived().is_archived
        assert not PostStatus.draft().is_published
