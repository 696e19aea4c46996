"""In-memory model of the roster.

The ModelManager is what the command and presentation layers talk to.
It owns a private copy of the address book and user preferences, a live
filtered view of the persons, and the session's undo history.

Tag lifecycle operations keep person records consistent with the tag
registry. Tags are immutable values, so renaming or removing a tag on a
person always means building a replacement Person with a new tag set and
swapping it into the address book.

Bulk tag operations are not transactional. ``add_tags`` rejects the whole
batch up front if it cannot fit in the registry; after that every tag is
applied in order, and a False result means at least one tag was skipped
while the rest were applied and stay applied.
"""
import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from roster.core.errors import (
    InvalidArgumentError,
    TagCapacityExceededError,
    require_non_null,
)
from roster.core.session import CommandHistory, UndoableCommand
from roster.models import GuiSettings, Person, Tag, UserPrefs
from roster.store.address_book import AddressBook
from roster.view.filtered_list import FilteredPersonList
from roster.view.predicates import PREDICATE_SHOW_ALL_PERSONS, all_of

logger = logging.getLogger(__name__)

Predicate = Callable[[Person], bool]


class ModelManager:
    """Represents the in-memory model of the address book data."""

    def __init__(
        self,
        address_book: AddressBook | None = None,
        user_prefs: UserPrefs | None = None,
        history: CommandHistory | None = None,
    ):
        address_book = address_book if address_book is not None else AddressBook()
        user_prefs = user_prefs if user_prefs is not None else UserPrefs()
        logger.debug(
            f"Initializing with address book: {address_book!r} and user prefs {user_prefs!r}"
        )

        self._address_book = AddressBook(address_book)
        self._user_prefs = user_prefs.model_copy()
        self._filtered_persons = FilteredPersonList(self._address_book.get_person_list())
        self._history = history if history is not None else CommandHistory()

    # User prefs

    def set_user_prefs(self, user_prefs: UserPrefs) -> None:
        require_non_null(user_prefs)
        self._user_prefs.reset_data(user_prefs)

    def get_user_prefs(self) -> UserPrefs:
        return self._user_prefs

    def get_gui_settings(self) -> GuiSettings:
        return self._user_prefs.gui_settings

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        require_non_null(gui_settings)
        self._user_prefs.gui_settings = gui_settings

    def get_address_book_file_path(self) -> Path:
        return self._user_prefs.address_book_file_path

    def set_address_book_file_path(self, address_book_file_path: Path) -> None:
        require_non_null(address_book_file_path)
        self._user_prefs.address_book_file_path = address_book_file_path

    # Address book

    def set_address_book(self, address_book: AddressBook) -> None:
        require_non_null(address_book)
        self._address_book.reset_data(address_book)

    def get_address_book(self) -> AddressBook:
        return self._address_book

    def has_person(self, person: Person) -> bool:
        require_non_null(person)
        return self._address_book.has_person(person)

    def delete_person(self, target: Person) -> None:
        require_non_null(target)
        self._address_book.remove_person(target)
        logger.debug(f"Deleted person {target.name}")

    def add_person(self, person: Person) -> None:
        """Add ``person`` and reset the view so the new entry is visible."""
        require_non_null(person)
        self._address_book.add_person(person)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        logger.debug(f"Added person {person.name}")

    def set_person(self, target: Person, edited_person: Person) -> None:
        require_non_null(target, edited_person)
        self._address_book.set_person(target, edited_person)

    # Filtered person list

    def get_filtered_person_list(self) -> Sequence[Person]:
        """Live, read-only view of the persons matching the current predicate."""
        return self._filtered_persons

    def get_full_person_list(self) -> Sequence[Person]:
        """Live, read-only view of every person in insertion order."""
        return self._address_book.get_person_list()

    def update_filtered_person_list(self, predicate: Predicate) -> None:
        """
        Narrow the view by ``predicate``.

        Successive filters are ANDed together. Passing
        PREDICATE_SHOW_ALL_PERSONS discards every earlier filter.
        """
        require_non_null(predicate)
        if not callable(predicate):
            raise InvalidArgumentError(f"Predicate must be callable, got {predicate!r}")
        current = self._filtered_persons.predicate
        if current == PREDICATE_SHOW_ALL_PERSONS or predicate == PREDICATE_SHOW_ALL_PERSONS:
            self._filtered_persons.set_predicate(predicate)
        else:
            self._filtered_persons.set_predicate(all_of(current, predicate))

    def get_current_predicate(self) -> Predicate:
        return self._filtered_persons.predicate

    # Tags

    def add_tag(self, tag: Tag) -> bool:
        """
        Register ``tag``.

        Returns False if it is already registered. Raises
        TagCapacityExceededError if the registry is full.
        """
        require_non_null(tag)
        added = self._address_book.add_tag(tag)
        if added:
            logger.info(f"Added tag {tag}")
        return added

    def add_tags(self, tags: Iterable[Tag]) -> bool:
        """
        Register each of ``tags`` in order.

        Raises TagCapacityExceededError, adding nothing, if the new tags
        would not all fit. Returns False if any tag was already registered;
        the others are still added.
        """
        require_non_null(tags)
        tags = list(tags)
        require_non_null(*tags)
        new_tags = {tag for tag in tags if not self._address_book.has_tag(tag)}
        if not self.check_acceptable_tag_list_size(len(new_tags)):
            raise TagCapacityExceededError(self._address_book.max_tags, len(new_tags))

        is_successful = True
        for tag in tags:
            is_successful &= self.add_tag(tag)
        return is_successful

    def delete_tag(self, tag: Tag) -> bool:
        """
        Remove ``tag`` from the registry and from every person carrying it.

        Returns False, changing nothing, if the tag is not registered.
        """
        require_non_null(tag)
        if not self._address_book.delete_tag(tag):
            return False
        self.remove_tag_from_persons(tag)
        logger.info(f"Deleted tag {tag}")
        return True

    def delete_tags(self, tags: Iterable[Tag]) -> bool:
        """
        Delete each of ``tags`` in order.

        Returns False if any tag was not registered; the others are still
        deleted.
        """
        require_non_null(tags)
        tags = list(tags)
        require_non_null(*tags)
        is_successful = True
        for tag in tags:
            is_successful &= self.delete_tag(tag)
        return is_successful

    def rename_tag(self, existing_tag: Tag, new_tag_name: str) -> bool:
        """
        Rename ``existing_tag`` in the registry and on every person.

        Returns False, changing nothing, if the tag is not registered or
        the new name is already taken.
        """
        require_non_null(existing_tag, new_tag_name)
        if not self._address_book.rename_tag(existing_tag, new_tag_name):
            return False
        self.edit_tag_in_persons(existing_tag, new_tag_name)
        logger.info(f"Renamed tag {existing_tag} to [{new_tag_name}]")
        return True

    def has_tag(self, tag: Tag) -> bool:
        require_non_null(tag)
        return self._address_book.has_tag(tag)

    def get_tag_list(self) -> str:
        return self._address_book.tags_to_string()

    def get_tag_list_view(self) -> Sequence[Tag]:
        return self._address_book.get_tag_list()

    def get_tags_in_use(self) -> set[Tag]:
        """Return every tag carried by at least one person. Scans all persons."""
        tags_in_use: set[Tag] = set()
        for person in self.get_full_person_list():
            tags_in_use.update(person.tags)
        return tags_in_use

    def remove_tag_from_persons(self, tag: Tag) -> None:
        """Replace every person carrying ``tag`` with a copy without it."""
        require_non_null(tag)
        # Snapshot: set_person writes into the list being walked
        for person in list(self.get_full_person_list()):
            if tag not in person.tags:
                continue
            self.set_person(person, person.with_tags(person.tags - {tag}))

    def edit_tag_in_persons(self, existing_tag: Tag, new_tag_name: str) -> None:
        """Replace ``existing_tag`` with a tag named ``new_tag_name`` on every person."""
        require_non_null(existing_tag, new_tag_name)
        new_tag = existing_tag.renamed(new_tag_name)
        for person in list(self.get_full_person_list()):
            if existing_tag not in person.tags:
                continue
            new_tags = (person.tags - {existing_tag}) | {new_tag}
            self.set_person(person, person.with_tags(new_tags))

    def check_acceptable_tag_list_size(self, additional_tags: int) -> bool:
        require_non_null(additional_tags)
        return self._address_book.check_acceptable_tag_list_size(additional_tags)

    # Undo history

    def update_previous_command(self, command: UndoableCommand) -> None:
        self._history.push(command)

    def get_previous_command(self) -> UndoableCommand | None:
        return self._history.peek()

    def pop_previous_command(self) -> UndoableCommand | None:
        """Return the most recent command and forget it."""
        return self._history.pop()

    def __eq__(self, other) -> bool:
        if other is self:
            return True
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and self._user_prefs == other._user_prefs
            and self._filtered_persons == other._filtered_persons
        )
