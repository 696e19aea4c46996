"""Ordered collections that enforce uniqueness of persons and tags."""
import logging

from roster.core.errors import (
    DuplicatePersonError,
    InvalidArgumentError,
    PersonNotFoundError,
    TagCapacityExceededError,
    require_non_null,
)
from roster.models import Person, Tag
from roster.store.views import ReadOnlyListView

logger = logging.getLogger(__name__)


class UniquePersonList:
    """Persons in insertion order, unique by ``Person.is_same_person``."""

    def __init__(self):
        self._persons: list[Person] = []

    def contains(self, person: Person) -> bool:
        require_non_null(person)
        return any(p.is_same_person(person) for p in self._persons)

    def add(self, person: Person) -> None:
        require_non_null(person)
        if self.contains(person):
            raise DuplicatePersonError(person)
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited``, keeping its position."""
        require_non_null(target, edited)
        index = self._index_of(target)
        if not target.is_same_person(edited) and self.contains(edited):
            raise DuplicatePersonError(edited)
        self._persons[index] = edited

    def remove(self, target: Person) -> None:
        require_non_null(target)
        del self._persons[self._index_of(target)]

    def set_persons(self, persons: list[Person]) -> None:
        """Replace the whole contents with ``persons``, which must be unique."""
        require_non_null(persons)
        for i, person in enumerate(persons):
            if any(person.is_same_person(other) for other in persons[i + 1:]):
                raise DuplicatePersonError(person)
        # Mutate in place so existing views keep seeing this list
        self._persons[:] = persons

    def as_view(self) -> ReadOnlyListView:
        return ReadOnlyListView(self._persons)

    def _index_of(self, target: Person) -> int:
        for i, person in enumerate(self._persons):
            if person == target:
                return i
        raise PersonNotFoundError(target)

    def __iter__(self):
        return iter(self._persons)

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other) -> bool:
        if not isinstance(other, UniquePersonList):
            return NotImplemented
        return self._persons == other._persons


class UniqueTagList:
    """Canonical tag registry: unique names, insertion order, bounded size."""

    def __init__(self, max_size: int):
        self.max_size = max_size
        self._tags: list[Tag] = []

    def contains(self, tag: Tag) -> bool:
        require_non_null(tag)
        return tag in self._tags

    def would_exceed_limit(self, additional: int) -> bool:
        if isinstance(additional, bool) or not isinstance(additional, int) or additional < 0:
            raise InvalidArgumentError(
                f"Additional tag count must be a non-negative integer, got {additional!r}"
            )
        return len(self._tags) + additional > self.max_size

    def add(self, tag: Tag) -> bool:
        """
        Add ``tag`` to the registry.

        Returns False if a tag with the same name is already registered.
        Raises TagCapacityExceededError if the registry is full.
        """
        require_non_null(tag)
        if self.contains(tag):
            return False
        if self.would_exceed_limit(1):
            logger.warning(f"Tag registry full ({self.max_size}), rejecting {tag}")
            raise TagCapacityExceededError(self.max_size)
        self._tags.append(tag)
        return True

    def remove(self, tag: Tag) -> bool:
        require_non_null(tag)
        if not self.contains(tag):
            return False
        self._tags.remove(tag)
        return True

    def rename(self, existing: Tag, new_name: str) -> bool:
        """
        Swap ``existing`` for a fresh Tag named ``new_name`` in place.

        Returns False if ``existing`` is not registered or ``new_name`` is
        already taken by another tag.
        """
        require_non_null(existing, new_name)
        renamed = existing.renamed(new_name)
        if not self.contains(existing):
            return False
        if renamed != existing and self.contains(renamed):
            return False
        self._tags[self._tags.index(existing)] = renamed
        return True

    def set_tags(self, tags: list[Tag]) -> None:
        require_non_null(tags)
        unique = list(dict.fromkeys(tags))
        if len(unique) > self.max_size:
            raise TagCapacityExceededError(self.max_size, len(unique))
        self._tags[:] = unique

    def as_view(self) -> ReadOnlyListView:
        return ReadOnlyListView(self._tags)

    def __iter__(self):
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __eq__(self, other) -> bool:
        if not isinstance(other, UniqueTagList):
            return NotImplemented
        return self._tags == other._tags
