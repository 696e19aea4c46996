"""Person model for roster entries.

This module defines the Person model which represents a contact invited
to an event, together with their RSVP status and the tags attached to
them. Persons are immutable values: edits are made by building a
replacement and swapping it into the address book.
"""

import enum
import re
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, field_validator

from roster.models.tag import Tag

NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 ]*$")
PHONE_PATTERN = re.compile(r"^\d{3,}$")
EMAIL_PATTERN = re.compile(r"^[\w.+-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*$")


class RsvpStatus(str, enum.Enum):
    """Invitation response of a person."""
    ACCEPTED = "accepted"
    DECLINED = "declined"
    TENTATIVE = "tentative"
    NEEDS_ACTION = "needsAction"


class Person(BaseModel):
    """A contact on the roster.

    Two persons are the same entry (``is_same_person``) when their name,
    phone and email match; full equality also compares RSVP status and
    tags.

    Attributes:
        name: Display name, alphanumerics and spaces.
        phone: Phone number, at least 3 digits.
        email: Email address.
        rsvp_status: Response to the invitation. One of "accepted",
            "declined", "tentative" or "needsAction" (not yet responded).
        tags: Labels attached to this person.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str
    phone: str
    email: str
    rsvp_status: RsvpStatus = RsvpStatus.NEEDS_ACTION
    tags: frozenset[Tag] = frozenset()

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not NAME_PATTERN.match(value):
            raise ValueError("Names should only contain alphanumerics and spaces")
        return value

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str) -> str:
        if not PHONE_PATTERN.match(value):
            raise ValueError("Phone numbers should only contain digits, at least 3")
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError(f"Invalid email address: {value!r}")
        return value

    @property
    def identity_key(self) -> tuple[str, str, str]:
        return (self.name, self.phone, self.email)

    def is_same_person(self, other: "Person | None") -> bool:
        """Return True if ``other`` refers to the same roster entry."""
        if other is self:
            return True
        return other is not None and other.identity_key == self.identity_key

    def with_tags(self, tags: Iterable[Tag]) -> "Person":
        """Return a copy of this person carrying exactly ``tags``."""
        return self.model_copy(update={"tags": frozenset(tags)})
