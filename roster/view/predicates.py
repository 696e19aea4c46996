"""Predicates used to filter the roster view.

Predicates are callables taking a Person and returning a bool. The
classes here add value equality, so a caller can tell whether a filter
is already applied, and ``&`` for conjunction.
"""
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from roster.models import Person, RsvpStatus, Tag


class PersonPredicate:
    """Base class for roster filters."""

    def __call__(self, person: Person) -> bool:
        raise NotImplementedError

    def __and__(self, other: Callable[[Person], bool]) -> "AllOf":
        return all_of(self, other)


@dataclass(frozen=True)
class ShowAllPredicate(PersonPredicate):
    """Identity filter that accepts every person."""

    def __call__(self, person: Person) -> bool:
        return True


PREDICATE_SHOW_ALL_PERSONS = ShowAllPredicate()


@dataclass(frozen=True)
class NameContainsKeywordsPredicate(PersonPredicate):
    """Matches persons whose name contains any keyword as a whole word."""
    keywords: tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        words = {word.lower() for word in person.name.split()}
        return any(keyword.lower() in words for keyword in self.keywords)


@dataclass(frozen=True)
class TagsContainPredicate(PersonPredicate):
    """Matches persons carrying at least one of the given tags."""
    tags: frozenset[Tag]

    def __call__(self, person: Person) -> bool:
        return not self.tags.isdisjoint(person.tags)


@dataclass(frozen=True)
class RsvpStatusPredicate(PersonPredicate):
    """Matches persons with the given RSVP status."""
    status: RsvpStatus

    def __call__(self, person: Person) -> bool:
        return person.rsvp_status == self.status


@dataclass(frozen=True)
class AllOf(PersonPredicate):
    """Conjunction of predicates, evaluated left to right."""
    predicates: tuple[Callable[[Person], bool], ...]

    def __call__(self, person: Person) -> bool:
        return all(predicate(person) for predicate in self.predicates)


def all_of(*predicates: Callable[[Person], bool]) -> AllOf:
    """Build the conjunction of ``predicates``, flattening nested AllOf."""
    parts: list[Callable[[Person], bool]] = []
    for predicate in predicates:
        if isinstance(predicate, AllOf):
            parts.extend(predicate.predicates)
        else:
            parts.append(predicate)
    return AllOf(tuple(parts))


def name_contains(keywords: Iterable[str]) -> NameContainsKeywordsPredicate:
    return NameContainsKeywordsPredicate(tuple(keywords))


def has_any_tag(tags: Iterable[Tag]) -> TagsContainPredicate:
    return TagsContainPredicate(frozenset(tags))
