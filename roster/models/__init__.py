from roster.models.person import Person, RsvpStatus
from roster.models.prefs import GuiSettings, UserPrefs
from roster.models.tag import Tag

__all__ = ["Person", "RsvpStatus", "Tag", "GuiSettings", "UserPrefs"]
