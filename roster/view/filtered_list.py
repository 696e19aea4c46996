"""Live filtered projection of the address book's persons."""
import logging
from collections.abc import Callable, Sequence

from roster.models import Person
from roster.view.predicates import PREDICATE_SHOW_ALL_PERSONS

logger = logging.getLogger(__name__)


class FilteredPersonList(Sequence):
    """Read-only view of a person sequence filtered by a predicate.

    Nothing is cached: every read re-applies the predicate to the current
    contents of the source, so additions, removals and replacements in
    the address book show up without re-filtering. Indexing and len()
    filter the whole source each call; prefer iteration for full scans.
    Iterating while the source is being mutated is not supported.
    """

    def __init__(self, source: Sequence[Person]):
        self._source = source
        self._predicate: Callable[[Person], bool] = PREDICATE_SHOW_ALL_PERSONS

    @property
    def predicate(self) -> Callable[[Person], bool]:
        return self._predicate

    def set_predicate(self, predicate: Callable[[Person], bool]) -> None:
        self._predicate = predicate
        logger.debug(f"Filter predicate set to {predicate!r}")

    def _matching(self) -> list[Person]:
        return [person for person in self._source if self._predicate(person)]

    def __getitem__(self, index):
        return self._matching()[index]

    def __len__(self) -> int:
        return len(self._matching())

    def __iter__(self):
        return (person for person in self._source if self._predicate(person))

    def __reversed__(self):
        return reversed(self._matching())

    def __eq__(self, other) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, str):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"FilteredPersonList({self._matching()!r})"
