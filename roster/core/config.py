"""Application configuration via environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or .env file."""
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="ROSTER_"
    )

    # Application
    app_name: str = "Roster"
    debug: bool = False
    log_dir: Path = Path.home() / ".logs" / "roster"

    # Tag registry
    max_tags: int = 10

    # Undo history depth kept by the session
    undo_history_size: int = 1

    # Default user preferences
    address_book_file_path: Path = Path("data") / "addressbook.json"
    window_width: float = 740
    window_height: float = 600


settings = Settings()
