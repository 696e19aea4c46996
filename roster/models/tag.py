"""Tag model for labelling roster entries.

This module defines the Tag value type. A tag's identity is its name: two
tags with the same name are equal and hash alike, whether they sit in the
canonical tag registry or inside a person's tag set.
"""

import re

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from roster.core.errors import InvalidArgumentError

TAG_NAME_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


class Tag(BaseModel):
    """A named label attachable to people.

    Tags are immutable. Renaming produces a new Tag via ``renamed``; the
    old value keeps its name, so any set or dict it belongs to stays
    correctly indexed.

    Attributes:
        name: Alphanumeric tag name, used for equality and hashing.
    """
    model_config = ConfigDict(frozen=True)

    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not TAG_NAME_PATTERN.match(value):
            raise ValueError(f"Tag names should be alphanumeric, got {value!r}")
        return value

    def renamed(self, new_name: str) -> "Tag":
        """
        Return a new Tag carrying ``new_name``.

        Raises InvalidArgumentError if ``new_name`` is not a valid tag name.
        """
        try:
            return Tag(name=new_name)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid tag name: {new_name!r}") from e

    def __str__(self) -> str:
        return f"[{self.name}]"
