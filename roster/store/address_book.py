"""In-memory address book holding the roster's persons and tag registry.

The address book is the single authoritative store: the model manager
keeps no copies of its own, only live views over these lists. Persons
are compared by identity key for duplicate detection and by full value
when located for replacement or removal.
"""
import logging
from collections.abc import Sequence

from roster.core.config import settings
from roster.core.errors import require_non_null
from roster.models import Person, Tag
from roster.store.unique_lists import UniquePersonList, UniqueTagList

logger = logging.getLogger(__name__)


class AddressBook:
    """Canonical collection of persons and tags.

    Attributes:
        max_tags: Maximum number of tags the registry accepts.
    """

    def __init__(self, to_copy: "AddressBook | None" = None, max_tags: int | None = None):
        if max_tags is None:
            max_tags = to_copy.max_tags if to_copy is not None else settings.max_tags
        self.max_tags = max_tags
        self._persons = UniquePersonList()
        self._tags = UniqueTagList(self.max_tags)
        if to_copy is not None:
            self.reset_data(to_copy)

    def reset_data(self, new_data: "AddressBook") -> None:
        """Replace all persons and tags with those of ``new_data``."""
        require_non_null(new_data)
        self._tags.set_tags(list(new_data.get_tag_list()))
        self._persons.set_persons(list(new_data.get_person_list()))
        logger.debug(
            f"Address book reset: {len(self._persons)} persons, {len(self._tags)} tags"
        )

    # Persons

    def has_person(self, person: Person) -> bool:
        return self._persons.contains(person)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        self._persons.set_person(target, edited)

    def remove_person(self, person: Person) -> None:
        self._persons.remove(person)

    def get_person_list(self) -> Sequence[Person]:
        return self._persons.as_view()

    # Tags

    def has_tag(self, tag: Tag) -> bool:
        return self._tags.contains(tag)

    def add_tag(self, tag: Tag) -> bool:
        return self._tags.add(tag)

    def delete_tag(self, tag: Tag) -> bool:
        return self._tags.remove(tag)

    def rename_tag(self, existing: Tag, new_name: str) -> bool:
        return self._tags.rename(existing, new_name)

    def tag_count_would_exceed_limit(self, additional: int) -> bool:
        return self._tags.would_exceed_limit(additional)

    def check_acceptable_tag_list_size(self, additional: int) -> bool:
        """Return True if ``additional`` more tags still fit in the registry."""
        return not self.tag_count_would_exceed_limit(additional)

    def get_tag_list(self) -> Sequence[Tag]:
        return self._tags.as_view()

    def tags_to_string(self) -> str:
        return " ".join(str(tag) for tag in self._tags)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons and self._tags == other._tags

    def __repr__(self) -> str:
        return f"AddressBook({len(self._persons)} persons, {len(self._tags)} tags)"
