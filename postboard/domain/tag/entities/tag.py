"""Tag entity for categorizing posts."""

from postboard.domain.common.entity import Entity
from postboard.domain.common.value_objects import TagId, Timestamp
from postboard.domain.tag.value_objects import TagColor, TagName, TagSlug


class Tag(Entity[TagId]):
    """
    Tag used to categorize content.

    Business Rules:
    - Slug must be unique (enforced by the create use case and a unique column)
    - Name, slug and color are always changed together
    """

    def __init__(
        self,
        id: TagId,
        name: TagName,
        slug: TagSlug,
        color: TagColor,
        created_at: Timestamp,
    ) -> None:
        self._id = id
        self._name = name
        self._slug = slug
        self._color = color
        self._created_at = created_at

    @property
    def name(self) -> TagName:
        return self._name

    @property
    def slug(self) -> TagSlug:
        return self._slug

    @property
    def color(self) -> TagColor:
        return self._color

    @property
    def created_at(self) -> Timestamp:
        return self._created_at

    def update_properties(self, name: TagName, slug: TagSlug, color: TagColor) -> None:
        self._name = name
        self._slug = slug
        self._color = color

    @classmethod
    def create(cls, id: TagId, name: TagName, slug: TagSlug, color: TagColor) -> "Tag":
        """Create a new tag."""
        return cls(id=id, name=name, slug=slug, color=color, created_at=Timestamp.now())

    @classmethod
    def create_with_id(
        cls,
        id: TagId,
        name: TagName,
        slug: TagSlug,
        color: TagColor,
        created_at: Timestamp,
    ) -> "Tag":
        """Reconstitute a tag from persistence."""
        return cls(id=id, name=name, slug=slug, color=color, created_at=created_at)
