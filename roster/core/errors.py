"""Exceptions raised by the roster model layer."""


class RosterError(Exception):
    """Base class for all roster model errors."""


class InvalidArgumentError(RosterError, ValueError):
    """A public operation received a missing or malformed argument."""


class DuplicatePersonError(RosterError):
    """The person already exists in the address book."""

    def __init__(self, person):
        super().__init__(f"Person already exists: {person.name}")
        self.person = person


class PersonNotFoundError(RosterError):
    """The person is not in the address book."""

    def __init__(self, person):
        super().__init__(f"Person not found: {person.name}")
        self.person = person


class TagCapacityExceededError(RosterError):
    """Adding tags would push the registry past its configured maximum."""

    def __init__(self, max_tags: int, requested: int = 1):
        super().__init__(
            f"Cannot add {requested} tag(s): registry is limited to {max_tags} tags"
        )
        self.max_tags = max_tags
        self.requested = requested


def require_non_null(*args) -> None:
    """Raise InvalidArgumentError if any argument is None."""
    for index, arg in enumerate(args):
        if arg is None:
            raise InvalidArgumentError(f"Argument {index} must not be None")
