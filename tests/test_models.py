"""Tests for pydantic models: modes, scores and profile."""

import pytest
from pydantic import ValidationError

from core.models import BestScore, ModeKind, Profile, TestMetrics, TestMode


def score(wpm: float) -> BestScore:
    return BestScore(wpm=wpm, cpm=wpm * 5, accuracy=95.0, timestamp=1700000000)


class TestTestMode:
    """Tests for TestMode."""

    def test_constructors(self):
        """Test time and words constructors."""
        assert TestMode.time(45).kind == ModeKind.TIME
        assert TestMode.time(45).value == 45
        assert TestMode.words(10).kind == ModeKind.WORDS

    def test_defaults(self):
        """Test the two default modes."""
        assert TestMode.default() == TestMode.time(30)
        assert TestMode.default_time() == TestMode.time(30)
        assert TestMode.default_words() == TestMode.words(30)

    def test_equality_by_value(self):
        """Test modes compare and hash by kind and value."""
        assert TestMode.time(30) != TestMode.words(30)
        assert TestMode.time(30) != TestMode.time(45)
        assert len({TestMode.time(30), TestMode.time(30), TestMode.words(30)}) == 2

    def test_immutable(self):
        """Test that a mode cannot be changed after creation."""
        mode = TestMode.time(30)
        with pytest.raises(ValidationError):
            mode.value = 60

    def test_value_must_be_positive(self):
        """Test that zero and negative values are rejected."""
        with pytest.raises(ValidationError):
            TestMode.time(0)
        with pytest.raises(ValidationError):
            TestMode.words(-1)

    def test_label_and_str(self):
        """Test display strings."""
        assert TestMode.time(30).label == "30 seconds"
        assert TestMode.words(30).label == "30 words"
        assert str(TestMode.time(30)) == "Time(30)"
        assert str(TestMode.words(10)) == "Words(10)"


class TestTestMetrics:
    """Tests for TestMetrics."""

    def test_defaults(self):
        """Test the empty metrics value."""
        metrics = TestMetrics()
        assert metrics.wpm == 0.0
        assert metrics.cpm == 0.0
        assert metrics.accuracy == 100.0

    def test_accuracy_range(self):
        """Test accuracy must stay within 0-100."""
        with pytest.raises(ValidationError):
            TestMetrics(accuracy=101.0)


class TestBestScore:
    """Tests for BestScore."""

    def test_new_stamps_current_time(self):
        """Test that new() records a recent timestamp."""
        best = BestScore.new(50.0, 250.0, 98.0)
        assert best.timestamp > 1700000000

    def test_from_metrics(self):
        """Test conversion from metrics."""
        best = BestScore.from_metrics(TestMetrics(wpm=40.0, cpm=200.0, accuracy=90.0))
        assert (best.wpm, best.cpm, best.accuracy) == (40.0, 200.0, 90.0)

    def test_is_better_than_is_strict(self):
        """Test that only a strictly higher WPM is better."""
        assert score(51).is_better_than(score(50))
        assert not score(50).is_better_than(score(50))
        assert not score(49).is_better_than(score(50))


class TestProfileUpdateScore:
    """Tests for Profile.update_score compare-and-store."""

    def test_first_score_accepted(self):
        """Test that any first Time(30) score is stored."""
        profile = Profile()
        assert profile.update_score(TestMode.time(30), score(10)) is True
        assert profile.best_30_seconds == score(10)

    def test_lower_score_rejected(self):
        """Test that a lower WPM leaves the best unchanged."""
        profile = Profile()
        profile.update_score(TestMode.time(30), score(60))
        assert profile.update_score(TestMode.time(30), score(55)) is False
        assert profile.best_30_seconds.wpm == 60

    def test_equal_score_rejected(self):
        """Test that an equal WPM does not replace the best."""
        profile = Profile()
        first = BestScore(wpm=60, cpm=300, accuracy=90, timestamp=1)
        profile.update_score(TestMode.time(30), first)
        assert profile.update_score(TestMode.time(30), score(60)) is False
        assert profile.best_30_seconds.timestamp == 1

    def test_higher_score_replaces(self):
        """Test that a higher WPM replaces the best."""
        profile = Profile()
        profile.update_score(TestMode.time(30), score(60))
        assert profile.update_score(TestMode.time(30), score(70)) is True
        assert profile.best_30_seconds.wpm == 70

    def test_words_mode_has_separate_slot(self):
        """Test Words(30) scores go to their own slot."""
        profile = Profile()
        profile.update_score(TestMode.time(30), score(80))
        assert profile.update_score(TestMode.words(30), score(20)) is True
        assert profile.best_30_words.wpm == 20
        assert profile.best_30_seconds.wpm == 80

    @pytest.mark.parametrize(
        "mode", [TestMode.time(45), TestMode.time(15), TestMode.words(10), TestMode.words(50)]
    )
    def test_untracked_modes_never_stored(self, mode):
        """Test that other modes are rejected regardless of score."""
        profile = Profile()
        assert profile.update_score(mode, score(500)) is False
        assert profile == Profile()

    def test_best_for(self):
        """Test looking up the best score by mode."""
        profile = Profile()
        profile.update_score(TestMode.words(30), score(33))
        assert profile.best_for(TestMode.words(30)).wpm == 33
        assert profile.best_for(TestMode.time(30)) is None
        assert profile.best_for(TestMode.time(45)) is None

    def test_is_tracked(self):
        """Test which modes are tracked."""
        assert Profile.is_tracked(TestMode.time(30))
        assert Profile.is_tracked(TestMode.words(30))
        assert not Profile.is_tracked(TestMode.time(45))
