"""Pydantic models for termotype data structures."""

import time
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ModeKind(str, Enum):
    """Which condition ends a test."""

    TIME = "time"
    WORDS = "words"


class TestMode(BaseModel):
    """Test mode: ``Time(seconds)`` or ``Words(count)``.

    Immutable; switching modes means building a new engine.
    """

    __test__ = False

    kind: ModeKind = Field(..., description="Time-based or word-count-based test")
    value: int = Field(..., gt=0, description="Seconds for time mode, words for words mode")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def time(cls, seconds: int) -> "TestMode":
        return cls(kind=ModeKind.TIME, value=seconds)

    @classmethod
    def words(cls, count: int) -> "TestMode":
        return cls(kind=ModeKind.WORDS, value=count)

    @classmethod
    def default_time(cls) -> "TestMode":
        """30 second mode."""
        return cls.time(30)

    @classmethod
    def default_words(cls) -> "TestMode":
        """30 words mode."""
        return cls.words(30)

    @classmethod
    def default(cls) -> "TestMode":
        return cls.default_time()

    @property
    def is_time(self) -> bool:
        return self.kind == ModeKind.TIME

    @property
    def is_words(self) -> bool:
        return self.kind == ModeKind.WORDS

    @property
    def label(self) -> str:
        """Human-readable mode name, e.g. '30 seconds' or '30 words'."""
        if self.kind == ModeKind.TIME:
            return f"{self.value} seconds"
        return f"{self.value} words"

    def __str__(self) -> str:
        return f"{self.kind.value.capitalize()}({self.value})"


class TestMetrics(BaseModel):
    """Speed and accuracy derived from completed words."""

    __test__ = False

    wpm: float = Field(default=0.0, ge=0.0, description="Words per minute")
    cpm: float = Field(default=0.0, ge=0.0, description="Characters per minute")
    accuracy: float = Field(
        default=100.0, ge=0.0, le=100.0, description="Accuracy percentage (0-100)"
    )

    model_config = ConfigDict(extra="ignore")


class BestScore(BaseModel):
    """Best score for a tracked test mode."""

    wpm: float = Field(..., description="Words per minute")
    cpm: float = Field(..., description="Characters per minute")
    accuracy: float = Field(..., description="Accuracy percentage")
    timestamp: int = Field(..., description="When the score was achieved (Unix seconds)")

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def new(cls, wpm: float, cpm: float, accuracy: float) -> "BestScore":
        """Create a score stamped with the current time."""
        return cls(wpm=wpm, cpm=cpm, accuracy=accuracy, timestamp=int(time.time()))

    @classmethod
    def from_metrics(cls, metrics: TestMetrics) -> "BestScore":
        return cls.new(metrics.wpm, metrics.cpm, metrics.accuracy)

    def is_better_than(self, other: "BestScore") -> bool:
        """Scores are ranked by WPM only."""
        return self.wpm > other.wpm


class Profile(BaseModel):
    """Personal bests for the two tracked modes."""

    best_30_seconds: Optional[BestScore] = Field(
        default=None, description="Best score for Time(30)"
    )
    best_30_words: Optional[BestScore] = Field(
        default=None, description="Best score for Words(30)"
    )

    model_config = ConfigDict(extra="ignore")

    @staticmethod
    def _slot_for(mode: TestMode) -> Optional[str]:
        if mode == TestMode.default_time():
            return "best_30_seconds"
        if mode == TestMode.default_words():
            return "best_30_words"
        return None

    @staticmethod
    def is_tracked(mode: TestMode) -> bool:
        """Only Time(30) and Words(30) keep a best score."""
        return Profile._slot_for(mode) is not None

    def best_for(self, mode: TestMode) -> Optional[BestScore]:
        slot = self._slot_for(mode)
        if slot is None:
            return None
        return getattr(self, slot)

    def update_score(self, mode: TestMode, score: BestScore) -> bool:
        """Store score if it beats the current best for mode.

        Args:
            mode: Mode the score was achieved in
            score: Candidate score

        Returns:
            True if score became the new best, False if it was not better
            or the mode is not tracked
        """
        slot = self._slot_for(mode)
        if slot is None:
            return False

        current = getattr(self, slot)
        if current is not None and not score.is_better_than(current):
            return False

        setattr(self, slot, score)
        return True
