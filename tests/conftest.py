"""Shared test fixtures."""

import pytest

from roster.manager import ModelManager
from roster.models import Person, RsvpStatus, Tag, UserPrefs
from roster.store.address_book import AddressBook


@pytest.fixture(name="vip")
def vip_fixture() -> Tag:
    return Tag(name="VIP")


@pytest.fixture(name="student")
def student_fixture() -> Tag:
    return Tag(name="Student")


@pytest.fixture(name="alice")
def alice_fixture(vip: Tag) -> Person:
    """Alice, tagged VIP, has accepted."""
    return Person(
        name="Alice Pauline",
        phone="94351253",
        email="alice@example.com",
        rsvp_status=RsvpStatus.ACCEPTED,
        tags={vip},
    )


@pytest.fixture(name="bob")
def bob_fixture(vip: Tag, student: Tag) -> Person:
    """Bob, tagged VIP and Student, has not responded."""
    return Person(
        name="Bob Meier",
        phone="98765432",
        email="bob@example.com",
        tags={vip, student},
    )


@pytest.fixture(name="carl")
def carl_fixture() -> Person:
    """Carl, untagged, has declined."""
    return Person(
        name="Carl Kurz",
        phone="95352563",
        email="carl@example.com",
        rsvp_status=RsvpStatus.DECLINED,
    )


@pytest.fixture(name="address_book")
def address_book_fixture(alice: Person, bob: Person, vip: Tag, student: Tag) -> AddressBook:
    """An address book holding Alice and Bob and both their tags."""
    book = AddressBook(max_tags=5)
    book.add_person(alice)
    book.add_person(bob)
    book.add_tag(vip)
    book.add_tag(student)
    return book


@pytest.fixture(name="model")
def model_fixture(address_book: AddressBook) -> ModelManager:
    """A model manager over the sample address book."""
    return ModelManager(address_book, UserPrefs())
