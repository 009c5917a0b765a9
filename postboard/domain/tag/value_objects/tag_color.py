"""Tag color value object."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from postboard.domain.common.exceptions import ValidationError
from postboard.domain.common.value_object import StringValueObject

if TYPE_CHECKING:
    from typing import Self

_HEX_COLOR_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")
_SHORT_HEX_LENGTH = 4


@dataclass(frozen=True)
class TagColor(StringValueObject):
    """
    Display color of a tag, stored as ``#RRGGBB`` in uppercase.

    Accepts 3 or 6 digit hex colors with or without the leading ``#``.
    """

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("Tag color must be a string", field="color")
        color = self.value.strip()
        if not color:
            raise ValidationError("Tag color cannot be empty", field="color")
        if not color.startswith("#"):
            color = f"#{color}"
        if not _HEX_COLOR_PATTERN.fullmatch(color):
            raise ValidationError(
                "Tag color must be a valid hex color (e.g., #FF0000 or #F00)",
                field="color",
                value=self.value,
            )
        if len(color) == _SHORT_HEX_LENGTH:
            color = "#" + "".join(digit * 2 for digit in color[1:])
        self._normalize(color.upper())

    @classmethod
    def blue(cls) -> Self:
        return cls("#3B82F6")

    @classmethod
    def green(cls) -> Self:
        return cls("#10B981")

    @classmethod
    def red(cls) -> Self:
        return cls("#EF4444")

    @classmethod
    def yellow(cls) -> Self:
        return cls("#F59E0B")

    @classmethod
    def purple(cls) -> Self:
        return cls("#8B5CF6")

    @classmethod
    def gray(cls) -> Self:
        return cls("#6B7280")
