"""Tests for the value models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from roster.core.errors import InvalidArgumentError
from roster.models import GuiSettings, Person, RsvpStatus, Tag, UserPrefs


class TestTagModel:
    """Tests for the Tag model."""

    def test_tags_equal_by_name(self):
        """Two tags with the same name are equal and hash alike."""
        assert Tag(name="VIP") == Tag(name="VIP")
        assert hash(Tag(name="VIP")) == hash(Tag(name="VIP"))
        assert len({Tag(name="VIP"), Tag(name="VIP")}) == 1

    def test_invalid_names_rejected(self):
        """Tag names must be non-empty and alphanumeric."""
        for bad in ["", "   ", "two words", "vip!"]:
            with pytest.raises(ValidationError):
                Tag(name=bad)

    def test_name_cannot_be_reassigned(self, vip: Tag):
        """Tags are frozen."""
        with pytest.raises(ValidationError):
            vip.name = "Other"
        assert vip.name == "VIP"

    def test_renamed_returns_new_tag(self, vip: Tag):
        """Renaming leaves the original tag and any set holding it intact."""
        tags = {vip}
        renamed = vip.renamed("Guest")

        assert renamed == Tag(name="Guest")
        assert vip.name == "VIP"
        assert Tag(name="VIP") in tags

    def test_renamed_to_invalid_name(self, vip: Tag):
        with pytest.raises(InvalidArgumentError):
            vip.renamed("bad name!")

    def test_str(self, vip: Tag):
        assert str(vip) == "[VIP]"


class TestPersonModel:
    """Tests for the Person model."""

    def test_create_person(self, vip: Tag):
        """Test creating a person with defaults."""
        person = Person(name="Dana", phone="12345", email="dana@example.com", tags=[vip])

        assert person.rsvp_status == RsvpStatus.NEEDS_ACTION
        assert person.tags == frozenset({vip})

    def test_whitespace_stripped(self):
        person = Person(name="  Dana  ", phone=" 12345 ", email="dana@example.com")
        assert person.name == "Dana"
        assert person.phone == "12345"

    def test_invalid_fields_rejected(self):
        """Names, phones and emails are validated."""
        with pytest.raises(ValidationError):
            Person(name="", phone="12345", email="dana@example.com")
        with pytest.raises(ValidationError):
            Person(name="Dana*", phone="12345", email="dana@example.com")
        with pytest.raises(ValidationError):
            Person(name="Dana", phone="12", email="dana@example.com")
        with pytest.raises(ValidationError):
            Person(name="Dana", phone="12345", email="not-an-email")

    def test_rsvp_status_from_string(self):
        person = Person(
            name="Dana", phone="12345", email="dana@example.com", rsvp_status="tentative"
        )
        assert person.rsvp_status is RsvpStatus.TENTATIVE

    def test_person_is_frozen(self, alice: Person):
        with pytest.raises(ValidationError):
            alice.phone = "11111"

    def test_is_same_person_uses_identity_fields(self, alice: Person):
        """RSVP status and tags do not affect identity."""
        updated = alice.model_copy(update={"rsvp_status": RsvpStatus.DECLINED, "tags": frozenset()})

        assert alice.is_same_person(updated)
        assert alice != updated
        assert not alice.is_same_person(None)

    def test_different_email_is_different_person(self, alice: Person):
        other = Person(name=alice.name, phone=alice.phone, email="other@example.com")
        assert not alice.is_same_person(other)

    def test_with_tags_copies(self, bob: Person, student: Tag):
        """with_tags builds a replacement and leaves the original untouched."""
        updated = bob.with_tags([student])

        assert updated.tags == frozenset({student})
        assert len(bob.tags) == 2
        assert updated.name == bob.name
        assert updated.rsvp_status == bob.rsvp_status


class TestUserPrefsModel:
    """Tests for the preference models."""

    def test_defaults(self):
        prefs = UserPrefs()
        assert prefs.gui_settings == GuiSettings()
        assert prefs.gui_settings.window_width == 740
        assert prefs.address_book_file_path == Path("data") / "addressbook.json"

    def test_reset_data(self):
        prefs = UserPrefs()
        other = UserPrefs(
            gui_settings=GuiSettings(window_width=100, window_height=200, window_x=1, window_y=2),
            address_book_file_path=Path("elsewhere.json"),
        )

        prefs.reset_data(other)

        assert prefs == other
        assert prefs is not other
