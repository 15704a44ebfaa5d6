"""Application state: current tab, test engine, mode and profile."""

import logging
import random
import time
from enum import Enum
from typing import Callable, Optional

from core.engine import TestEngine, TestState
from core.models import Profile, TestMode
from core.profile_storage import ProfileStorage, ProfileStorageError
from core.words import generate_word_sequence, load_words, word_count_for_mode
from utils.config import AppSettings

log = logging.getLogger("termotype.app_state")


class Tab(str, Enum):
    """Screens of the application, in display order."""

    TEST = "test"
    STATS = "stats"
    OPTIONS = "options"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def position(self) -> int:
        return list(Tab).index(self)

    def next(self) -> "Tab":
        tabs = list(Tab)
        return tabs[(self.position + 1) % len(tabs)]

    def prev(self) -> "Tab":
        tabs = list(Tab)
        return tabs[(self.position - 1) % len(tabs)]


class AppState:
    """Main application controller.

    Owns the profile explicitly and hands it to the engine when a test
    finishes; the engine never reaches for it on its own.
    """

    def __init__(
        self,
        settings: AppSettings,
        profile_storage: ProfileStorage,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize application state.

        Args:
            settings: Validated application settings
            profile_storage: Where best scores are loaded from and saved to
            rng: Random generator for word sequences
            clock: Time source passed to each engine
        """
        self.settings = settings
        self.profile_storage = profile_storage
        self._rng = rng
        self._clock = clock

        self.running = True
        self.current_tab = Tab.TEST
        self.test_mode = settings.initial_mode()
        self.engine: Optional[TestEngine] = None
        self.last_result_new_best = False
        self.profile = self._load_profile()

    def _load_profile(self) -> Profile:
        try:
            return self.profile_storage.load()
        except ProfileStorageError as e:
            log.error(f"{e}; starting with an empty profile")
            return Profile()

    def init_test(self) -> None:
        """Build a fresh engine with a new word sequence for the current mode."""
        words = load_words(self.settings.words_file)
        count = word_count_for_mode(self.test_mode, self.settings.time_mode_word_pool)
        sequence = generate_word_sequence(count, words, self._rng)

        self.engine = TestEngine(self.test_mode, sequence, clock=self._clock)
        self.last_result_new_best = False
        log.debug(f"Initialized {self.test_mode} test with {len(sequence)} words")

    def reset_test(self) -> None:
        """Restart the current test with the same words."""
        if self.engine is not None:
            self.engine.reset()
        self.last_result_new_best = False

    def set_mode(self, mode: TestMode) -> None:
        """Switch mode, discarding any progress."""
        self.test_mode = mode
        self.init_test()
        log.info(f"Switched to {mode}")

    def set_time_mode(self) -> None:
        self.set_mode(self.settings.time_mode())

    def set_words_mode(self) -> None:
        self.set_mode(self.settings.words_mode())

    def next_tab(self) -> None:
        self.current_tab = self.current_tab.next()

    def prev_tab(self) -> None:
        self.current_tab = self.current_tab.prev()

    def select_tab(self, tab: Tab) -> None:
        self.current_tab = tab

    def quit(self) -> None:
        self.running = False

    def handle_char(self, ch: str) -> None:
        """Dispatch a typed character: space advances, anything else is typed."""
        if self.engine is None:
            return

        if ch == " ":
            self.engine.next_word()
        else:
            self.engine.type_char(ch)
        self.tick()

    def handle_backspace(self) -> None:
        if self.engine is None:
            return

        self.engine.backspace()
        self.tick()

    def tick(self) -> None:
        """Auto-finish check and result hand-off; run after input and on every refresh."""
        if self.engine is None:
            return

        self.engine.tick()
        if self.engine.state == TestState.FINISHED:
            self.save_test_result()

    def save_test_result(self) -> bool:
        """Offer a finished test to the profile and persist it.

        Returns:
            True if the result was a new personal best
        """
        engine = self.engine
        if engine is None or engine.state != TestState.FINISHED or engine.result_saved:
            return False

        is_new_best = engine.submit_result(self.profile)
        self.last_result_new_best = is_new_best

        if is_new_best:
            try:
                self.profile_storage.save(self.profile)
            except ProfileStorageError as e:
                log.error(f"Could not save profile: {e}")

        return is_new_best
