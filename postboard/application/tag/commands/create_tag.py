"""Command and handler for creating tags."""

from dataclasses import dataclass

import structlog

from postboard.application.common.command import Command, CommandHandler
from postboard.domain.common.value_objects import TagId
from postboard.domain.tag.entities.tag import Tag
from postboard.domain.tag.exceptions import TagSlugAlreadyExistsError
from postboard.domain.tag.repository import TagRepositoryProtocol
from postboard.domain.tag.value_objects import TagColor, TagName, TagSlug

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CreateTagCommand(Command):
    name: str
    color: str
    slug: str | None = None


class CreateTagHandler(CommandHandler[CreateTagCommand, str]):
    def __init__(self, tag_repository: TagRepositoryProtocol) -> None:
        self.tag_repository = tag_repository

    def handle(self, command: CreateTagCommand) -> str:
        """
        Create a tag. The slug is derived from the name when not given.

        Raises:
            ValidationError: If name, slug or color is invalid
            TagSlugAlreadyExistsError: If another tag already uses the slug
        """
        name = TagName.from_string(command.name)
        slug = TagSlug.from_string(command.slug) if command.slug else TagSlug.from_name(name)
        color = TagColor.from_string(command.color)

        if self.tag_repository.find_by_slug(slug) is not None:
            raise TagSlugAlreadyExistsError(slug.to_string())

        tag = Tag.create(id=TagId.generate(), name=name, slug=slug, color=color)
        self.tag_repository.save(tag)

        logger.info("created_tag", tag_id=tag.id.value, slug=slug.value)
        return tag.id.to_string()
