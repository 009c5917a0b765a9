"""Post domain exceptions."""

from postboard.domain.common.exceptions import EntityNotFoundError


class PostNotFoundError(EntityNotFoundError):
    """Raised when a post cannot be found."""

    def __init__(self, post_id: object) -> None:
        super().__init__("Post", post_id)
