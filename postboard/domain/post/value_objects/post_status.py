"""
Post status value object.

A post moves through a fixed lifecycle:

    draft -> published -> archived

No other transition is legal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from postboard.domain.common.exceptions import ValidationError
from postboard.domain.common.value_object import StringValueObject

if TYPE_CHECKING:
    from typing import Self

STATUS_DRAFT = "draft"
STATUS_PUBLISHED = "published"
STATUS_ARCHIVED = "archived"


@dataclass(frozen=True)
class PostStatus(StringValueObject):
    """Publication status of a post."""

    VALID_STATUSES: ClassVar[tuple[str, ...]] = (STATUS_DRAFT, STATUS_PUBLISHED, STATUS_ARCHIVED)
    _TRANSITIONS: ClassVar[dict[str, frozenset[str]]] = {
        STATUS_DRAFT: frozenset({STATUS_PUBLISHED}),
        STATUS_PUBLISHED: frozenset({STATUS_ARCHIVED}),
        STATUS_ARCHIVED: frozenset(),
    }

    def __post_init__(self) -> None:
        if self.value not in self.VALID_STATUSES:
            raise ValidationError(
                f"Invalid post status: {self.value}. "
                f"Allowed values: {', '.join(self.VALID_STATUSES)}",
                field="status",
                value=self.value,
            )

    @classmethod
    def draft(cls) -> Self:
        return cls(STATUS_DRAFT)

    @classmethod
    def published(cls) -> Self:
        return cls(STATUS_PUBLISHED)

    @classmethod
    def archived(cls) -> Self:
        return cls(STATUS_ARCHIVED)

    @property
    def is_draft(self) -> bool:
        return self.value == STATUS_DRAFT

    @property
    def is_published(self) -> bool:
        return self.value == STATUS_PUBLISHED

    @property
    def is_archived(self) -> bool:
        return self.value == STATUS_ARCHIVED

    def can_transition_to(self, target: PostStatus) -> bool:
        """Check whether moving from this status to `target` is legal."""
        return target.value in self._TRANSITIONS[self.value]
