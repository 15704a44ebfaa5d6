"""JSON file storage for the best-score profile."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from core.models import Profile
from utils.paths import get_config_dir

log = logging.getLogger("termotype.profile_storage")

PROFILE_FILENAME = "profile.json"


class ProfileStorageError(RuntimeError):
    """Raised when the profile file cannot be read or written."""


def get_profile_path() -> Path:
    """Default profile location, e.g. ~/.config/termotype/profile.json."""
    return get_config_dir() / PROFILE_FILENAME


class ProfileStorage:
    """Loads and saves the profile as pretty-printed JSON."""

    def __init__(self, path: Optional[Path] = None):
        """Initialize profile storage.

        Args:
            path: Profile file path (default location if None)
        """
        self.path = Path(path) if path is not None else get_profile_path()

    def load(self) -> Profile:
        """Load profile from disk.

        Returns:
            Stored profile, or an empty profile if the file does not exist

        Raises:
            ProfileStorageError: If the file exists but cannot be read or parsed
        """
        if not self.path.exists():
            log.info(f"No profile at {self.path}, starting with an empty profile")
            return Profile()

        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ProfileStorageError(f"Failed to read profile from {self.path}: {e}") from e

        try:
            profile = Profile.model_validate_json(content)
        except ValidationError as e:
            raise ProfileStorageError(f"Failed to parse profile {self.path}: {e}") from e

        log.debug(f"Loaded profile from {self.path}")
        return profile

    def save(self, profile: Profile) -> None:
        """Write profile to disk, creating the directory if needed.

        Raises:
            ProfileStorageError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(profile.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise ProfileStorageError(f"Failed to write profile to {self.path}: {e}") from e

        log.debug(f"Saved profile to {self.path}")
