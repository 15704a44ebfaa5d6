"""Typing test engine: state machine, word progression and timing."""

import logging
import time
from enum import Enum
from typing import Callable, List, Optional, Sequence

from core.models import BestScore, Profile, TestMetrics, TestMode
from core.word_state import WordState
from core.wpm_calculator import calculate_metrics

log = logging.getLogger("termotype.engine")


class TestState(str, Enum):
    """Test state machine: NOT_STARTED -> IN_PROGRESS -> FINISHED."""

    __test__ = False

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class TestEngine:
    """Runs a single typing test over a fixed word sequence.

    Input operations are no-ops when their preconditions do not hold (wrong
    state, exhausted sequence, cursor at a boundary); nothing here raises
    during a session.

    Cumulative counters (correct_chars, incorrect_chars) only include words the
    user has advanced past. The word being typed is visible only through
    current_word_state.
    """

    __test__ = False

    def __init__(
        self,
        mode: TestMode,
        words: Sequence[str],
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize test engine.

        Args:
            mode: Test mode (time or words)
            words: Words to type, in order
            clock: Monotonic time source in seconds
        """
        self.mode = mode
        self.words: List[str] = list(words)
        self._clock = clock

        self.state = TestState.NOT_STARTED
        self.current_word_index = 0
        self.current_word_state: Optional[WordState] = self._word_state_at(0)
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.total_chars_typed = 0
        self.correct_chars = 0
        self.incorrect_chars = 0
        self.result_saved = False
        # Whether each completed word had an incorrect character, by word index
        self.word_errors: List[bool] = []

    def _word_state_at(self, index: int) -> Optional[WordState]:
        if index < len(self.words):
            return WordState(self.words[index])
        return None

    def start(self) -> None:
        """Start the test."""
        if self.state != TestState.NOT_STARTED:
            return

        self.state = TestState.IN_PROGRESS
        self.start_time = self._clock()
        log.debug(f"Test started in mode {self.mode}")

    def finish(self) -> None:
        """Finish the test, freezing elapsed time."""
        if self.state != TestState.IN_PROGRESS:
            return

        self.state = TestState.FINISHED
        self.end_time = self._clock()
        if self.mode.is_time and self.start_time is not None:
            # A poll can land after the deadline; the run ends at the deadline
            self.end_time = min(self.end_time, self.start_time + self.mode.value)
        log.info(
            f"Test finished in mode {self.mode}: "
            f"{self.current_word_index} words in {self.elapsed_seconds():.1f}s"
        )

    def reset(self) -> None:
        """Return to NOT_STARTED with the same words."""
        self.state = TestState.NOT_STARTED
        self.current_word_index = 0
        self.current_word_state = self._word_state_at(0)
        self.start_time = None
        self.end_time = None
        self.total_chars_typed = 0
        self.correct_chars = 0
        self.incorrect_chars = 0
        self.result_saved = False
        self.word_errors = []
        log.debug("Test reset")

    def _ensure_started(self) -> bool:
        """Auto-start on first keystroke.

        Returns:
            True if the test is in progress and input should be handled
        """
        if self.state == TestState.NOT_STARTED:
            self.start()
        return self.state == TestState.IN_PROGRESS

    def elapsed_seconds(self) -> float:
        """Seconds since start; frozen once finished, 0 before start."""
        if self.start_time is None:
            return 0.0

        end = self.end_time if self.end_time is not None else self._clock()
        return max(0.0, end - self.start_time)

    def current_word(self) -> Optional[str]:
        if self.current_word_index < len(self.words):
            return self.words[self.current_word_index]
        return None

    def should_auto_finish(self) -> bool:
        """Check whether the mode's end condition is met."""
        if self.mode.is_time:
            return self.elapsed_seconds() >= self.mode.value
        return self.current_word_index >= self.mode.value

    def type_char(self, ch: str) -> None:
        """Type a character into the current word."""
        if not self._ensure_started():
            return

        if self.current_word_state is None:
            return

        if self.current_word_state.add_char(ch):
            self.total_chars_typed += 1

    def backspace(self) -> None:
        """Remove the last typed character of the current word."""
        if self.state != TestState.IN_PROGRESS:
            return

        if self.current_word_state is not None:
            self.current_word_state.remove_char()

    def next_word(self) -> None:
        """Complete the current word and move to the next one."""
        if self.state != TestState.IN_PROGRESS:
            return

        # In time mode a word completed after the deadline does not count
        if self.mode.is_time and self.should_auto_finish():
            self.finish()
            return

        word_state = self.current_word_state
        if word_state is None:
            return

        self.correct_chars += word_state.correct_count()
        self.incorrect_chars += word_state.incorrect_count()
        self.word_errors.append(word_state.has_errors())

        self.current_word_index += 1
        self.current_word_state = self._word_state_at(self.current_word_index)

        if self.should_auto_finish():
            self.finish()

    def tick(self) -> bool:
        """Poll the auto-finish condition.

        The driving loop calls this after input and periodically, since time
        running out is not an input event.

        Returns:
            True if this call finished the test
        """
        if self.state == TestState.IN_PROGRESS and self.should_auto_finish():
            self.finish()
            return True
        return False

    def get_metrics(self) -> TestMetrics:
        """Current metrics from completed words and elapsed time."""
        return calculate_metrics(
            self.correct_chars, self.incorrect_chars, self.elapsed_seconds()
        )

    def submit_result(self, profile: Profile) -> bool:
        """Offer the finished test's score to the profile, once per run.

        Args:
            profile: Profile holding best scores

        Returns:
            True if the score became a new best for this mode
        """
        if self.state != TestState.FINISHED or self.result_saved:
            return False

        score = BestScore.from_metrics(self.get_metrics())
        is_new_best = profile.update_score(self.mode, score)
        self.result_saved = True

        if is_new_best:
            log.info(f"New best for {self.mode}: {score.wpm:.1f} WPM")
        elif not Profile.is_tracked(self.mode):
            log.debug(f"Mode {self.mode} is not tracked for best scores")

        return is_new_best
