"""Per-character tracking of the word currently being typed."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class CharState(str, Enum):
    """State of a single character position."""

    UNTYPED = "untyped"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass
class WordState:
    """Typed-vs-expected state for one target word.

    Positions before ``cursor_pos`` are CORRECT or INCORRECT, positions from
    ``cursor_pos`` on are UNTYPED. The word cannot be over-typed: keystrokes
    past its end are dropped until the engine moves to the next word.
    """

    target: str
    char_states: List[CharState] = field(init=False)
    cursor_pos: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        # One entry per code point; str indexing is already by code point
        self.char_states = [CharState.UNTYPED] * len(self.target)

    def __len__(self) -> int:
        return len(self.char_states)

    @property
    def typed_count(self) -> int:
        return self.cursor_pos

    def add_char(self, ch: str) -> bool:
        """Type one character at the cursor.

        Args:
            ch: Typed character (compared exactly, case-sensitive)

        Returns:
            True if the character was consumed, False if the word is already full
        """
        if self.cursor_pos >= len(self.char_states):
            return False

        expected = self.target[self.cursor_pos]
        if ch == expected:
            self.char_states[self.cursor_pos] = CharState.CORRECT
        else:
            self.char_states[self.cursor_pos] = CharState.INCORRECT
        self.cursor_pos += 1
        return True

    def remove_char(self) -> bool:
        """Undo the last typed character (backspace).

        Returns:
            True if a character was removed, False if the cursor was at the start
        """
        if self.cursor_pos == 0:
            return False

        self.cursor_pos -= 1
        self.char_states[self.cursor_pos] = CharState.UNTYPED
        return True

    def is_complete(self) -> bool:
        return self.cursor_pos >= len(self.char_states)

    def has_errors(self) -> bool:
        return CharState.INCORRECT in self.char_states

    def correct_count(self) -> int:
        return self.char_states.count(CharState.CORRECT)

    def incorrect_count(self) -> int:
        return self.char_states.count(CharState.INCORRECT)
