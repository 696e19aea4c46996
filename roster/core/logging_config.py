"""Logging setup for applications embedding the roster model."""
import logging
from pathlib import Path

from roster.core.config import settings


def configure_logging(log_dir: Path | None = None) -> Path:
    """
    Configure root logging to write to a file under the log directory.

    Uses DEBUG level when settings.debug is on, INFO otherwise.
    Returns the path of the log file.
    """
    log_dir = log_dir or settings.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "latest.log"

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=str(log_file),
        force=True,
    )
    logging.getLogger(__name__).info(f"{settings.app_name} logging to {log_file}")
    return log_file
