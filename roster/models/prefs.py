"""User preference models.

GUI geometry and the address book file location are stored here and
handed through the model manager untouched.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from roster.core.config import settings


class GuiSettings(BaseModel):
    """Window geometry remembered between sessions.

    Attributes:
        window_width: Width of the main window.
        window_height: Height of the main window.
        window_x: Left edge of the window, None to let the window manager decide.
        window_y: Top edge of the window, None to let the window manager decide.
    """
    model_config = ConfigDict(frozen=True)

    window_width: float = Field(default_factory=lambda: settings.window_width)
    window_height: float = Field(default_factory=lambda: settings.window_height)
    window_x: int | None = None
    window_y: int | None = None


class UserPrefs(BaseModel):
    """Mutable holder of the session's user preferences.

    Attributes:
        gui_settings: Window geometry.
        address_book_file_path: Where the address book is stored.
    """
    model_config = ConfigDict(validate_assignment=True)

    gui_settings: GuiSettings = Field(default_factory=GuiSettings)
    address_book_file_path: Path = Field(
        default_factory=lambda: settings.address_book_file_path
    )

    def reset_data(self, new_prefs: "UserPrefs") -> None:
        """Overwrite these preferences with ``new_prefs``."""
        self.gui_settings = new_prefs.gui_settings
        self.address_book_file_path = new_prefs.address_book_file_path
