"""Tag domain exceptions."""

from postboard.domain.common.exceptions import BusinessRuleViolationError


class TagSlugAlreadyExistsError(BusinessRuleViolationError):
    """Raised when creating a tag whose slug is already in use."""

    def __init__(self, slug: str) -> None:
        super().__init__("unique_tag_slug", f"Tag with slug {slug} already exists")
        self.slug = slug
