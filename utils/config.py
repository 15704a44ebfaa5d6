"""Configuration management for termotype."""

import json
import logging
import sqlite3
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.models import ModeKind, TestMode

log = logging.getLogger("termotype.config")


class AppSettings(BaseModel):
    """Application settings with validation."""

    # Test modes
    default_mode: ModeKind = Field(
        default=ModeKind.TIME, description="Mode selected at start-up (time or words)"
    )
    time_mode_seconds: int = Field(
        default=30, gt=0, description="Duration of a time mode test (seconds)"
    )
    words_mode_count: int = Field(
        default=30, gt=0, description="Number of words in a words mode test"
    )
    time_mode_word_pool: int = Field(
        default=100, ge=1, description="Words generated for a time mode test"
    )

    # Word source
    words_file: str = Field(
        default="words.json", description="JSON word list (falls back to built-in list)"
    )

    # Main loop
    tick_interval_ms: int = Field(
        default=100,
        ge=10,
        le=1000,
        description="Refresh interval for redraw and time mode auto-finish (ms)",
    )

    model_config = ConfigDict(extra="ignore", use_enum_values=True)

    def time_mode(self) -> TestMode:
        return TestMode.time(self.time_mode_seconds)

    def words_mode(self) -> TestMode:
        return TestMode.words(self.words_mode_count)

    def initial_mode(self) -> TestMode:
        if self.default_mode == ModeKind.WORDS:
            return self.words_mode()
        return self.time_mode()


class Config:
    """Configuration manager using SQLite for persistence with Pydantic validation."""

    def __init__(self, db_path: Path):
        """Initialize config with database connection.

        Args:
            db_path: Path to SQLite database
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self._init_settings_table()
        self._ensure_defaults()

    @contextmanager
    def _get_connection(self) -> Iterator[sqlite3.Connection]:
        """Open a connection that commits on success and is always closed."""
        conn = sqlite3.connect(self.db_path)
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _init_settings_table(self) -> None:
        """Create settings table if not exists."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS settings (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)

    def _ensure_defaults(self) -> None:
        """Ensure all default settings exist in database."""
        defaults = AppSettings().model_dump()

        with self._get_connection() as conn:
            conn.executemany(
                "INSERT OR IGNORE INTO settings (key, value) VALUES (?, ?)",
                [(key, self._serialize_value(value)) for key, value in defaults.items()],
            )

    def _serialize_value(self, value: Any) -> str:
        """Convert value to string for storage."""
        if isinstance(value, bool):
            return "True" if value else "False"
        if isinstance(value, Enum):
            return str(value.value)
        if isinstance(value, (list, dict)):
            return json.dumps(value)
        return str(value)

    def _simple_parse(self, value: str) -> Any:
        """Parse a stored string back into int, float, bool, JSON or str."""
        if value.startswith("[") or value.startswith("{"):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        if value.lower() in ("true", "yes", "on"):
            return True
        if value.lower() in ("false", "no", "off"):
            return False

        return value

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Get configuration value.

        Args:
            key: Setting key
            default: Default value if not found

        Returns:
            Setting value
        """
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT value FROM settings WHERE key = ?", (key,)
            ).fetchone()

        if row:
            parsed = self._simple_parse(row[0])
            # Stored values of known keys go through AppSettings validation
            if key in AppSettings.model_fields:
                for candidate in (parsed, row[0]):
                    try:
                        return getattr(AppSettings(**{key: candidate}), key)
                    except ValidationError:
                        continue
            return parsed
        if default is not None:
            return default
        if key in AppSettings.model_fields:
            return getattr(AppSettings(), key)
        return None

    def get_int(self, key: str, default: Optional[int] = None) -> int:
        """Get integer configuration value."""
        value = self.get(key, default)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        try:
            return int(value)
        except (ValueError, TypeError):
            if key in AppSettings.model_fields:
                return getattr(AppSettings(), key)
            return default if default is not None else 0

    def get_bool(self, key: str, default: Optional[bool] = None) -> bool:
        """Get boolean configuration value."""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return bool(value)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes", "on")
        return bool(value) if value else False

    def set(self, key: str, value: Any) -> None:
        """Set configuration value with pydantic validation.

        Args:
            key: Setting key
            value: Setting value

        Raises:
            ValueError: If value fails validation
        """
        if key in AppSettings.model_fields:
            try:
                value = getattr(AppSettings(**{key: value}), key)
            except ValidationError as e:
                raise ValueError(f"Invalid value for {key}: {e}") from e

        with self._get_connection() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO settings (key, value) VALUES (?, ?)",
                (key, self._serialize_value(value)),
            )

    def get_all(self) -> dict[str, Any]:
        """Get all settings as dictionary."""
        with self._get_connection() as conn:
            rows = conn.execute("SELECT key, value FROM settings").fetchall()
        return {key: self._simple_parse(value) for key, value in rows}

    def settings(self) -> AppSettings:
        """All known settings as a validated AppSettings.

        Each invalid stored value falls back to its own default; the other
        stored values are kept.
        """
        values = {}
        for key in AppSettings.model_fields:
            value = self.get(key)
            try:
                AppSettings(**{key: value})
            except ValidationError:
                log.warning(f"Invalid stored value {value!r} for {key}, using default")
                continue
            values[key] = value
        return AppSettings(**values)
