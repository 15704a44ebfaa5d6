"""Tests for WordState character tracking."""

from core.word_state import CharState, WordState


def assert_cursor_invariant(word: WordState) -> None:
    """Cursor equals typed count; typed entries before it, untyped after."""
    typed = [s for s in word.char_states if s != CharState.UNTYPED]
    assert word.cursor_pos == len(typed)
    for index, state in enumerate(word.char_states):
        if index < word.cursor_pos:
            assert state != CharState.UNTYPED
        else:
            assert state == CharState.UNTYPED


class TestWordStateCreation:
    """Tests for a fresh WordState."""

    def test_word_state_creation(self):
        """Test that every character starts untyped."""
        word = WordState("test")
        assert len(word.char_states) == 4
        assert word.cursor_pos == 0
        assert all(s == CharState.UNTYPED for s in word.char_states)

    def test_length_counts_code_points(self):
        """Test that multi-byte characters count once each."""
        word = WordState("żółw")
        assert len(word) == 4

    def test_empty_word_is_complete(self):
        """Test that an empty target is complete immediately."""
        word = WordState("")
        assert word.is_complete()
        assert word.add_char("a") is False


class TestAddChar:
    """Tests for WordState.add_char."""

    def test_add_correct_char(self):
        """Test typing the expected character."""
        word = WordState("test")
        assert word.add_char("t") is True
        assert word.char_states[0] == CharState.CORRECT
        assert word.cursor_pos == 1

    def test_add_incorrect_char(self):
        """Test typing a wrong character."""
        word = WordState("test")
        assert word.add_char("x") is True
        assert word.char_states[0] == CharState.INCORRECT
        assert word.cursor_pos == 1

    def test_comparison_is_case_sensitive(self):
        """Test that 'T' does not match 't'."""
        word = WordState("test")
        word.add_char("T")
        assert word.char_states[0] == CharState.INCORRECT

    def test_unicode_characters_compared_exactly(self):
        """Test Polish letters are compared by code point."""
        word = WordState("być")
        for ch in "byc":
            word.add_char(ch)
        assert word.char_states == [
            CharState.CORRECT,
            CharState.CORRECT,
            CharState.INCORRECT,
        ]

    def test_prefix_matches_comparison(self):
        """Test cursor and states after typing a mixed prefix."""
        target = "keyboard"
        typed = "kexb"
        word = WordState(target)
        for ch in typed:
            word.add_char(ch)

        assert word.cursor_pos == len(typed)
        for index, ch in enumerate(typed):
            expected = CharState.CORRECT if ch == target[index] else CharState.INCORRECT
            assert word.char_states[index] == expected
        assert_cursor_invariant(word)

    def test_add_char_beyond_length_is_dropped(self):
        """Test that over-typing does not change state."""
        word = WordState("ma")
        word.add_char("m")
        word.add_char("a")
        before = list(word.char_states)

        assert word.add_char("x") is False
        assert word.cursor_pos == 2
        assert word.char_states == before


class TestRemoveChar:
    """Tests for WordState.remove_char."""

    def test_backspace(self):
        """Test that backspace resets the last position."""
        word = WordState("test")
        word.add_char("t")
        assert word.remove_char() is True
        assert word.char_states[0] == CharState.UNTYPED
        assert word.cursor_pos == 0

    def test_backspace_at_start_is_noop(self):
        """Test that backspace with nothing typed does nothing."""
        word = WordState("test")
        assert word.remove_char() is False
        assert word.cursor_pos == 0

    def test_add_then_remove_restores_initial_state(self):
        """Test n adds followed by n removes give back a fresh word."""
        word = WordState("kota")
        for ch in "kxt":
            word.add_char(ch)
        for _ in range(3):
            word.remove_char()

        fresh = WordState("kota")
        assert word.char_states == fresh.char_states
        assert word.cursor_pos == fresh.cursor_pos

    def test_interleaved_edits_keep_invariant(self):
        """Test the cursor invariant through mixed typing and backspaces."""
        word = WordState("program")
        for action in ["p", "x", None, "r", "o", None, None, "r", "o", "g", "r", "a", "m", "z"]:
            if action is None:
                word.remove_char()
            else:
                word.add_char(action)
            assert_cursor_invariant(word)

        assert word.is_complete()
        assert not word.has_errors()


class TestQueries:
    """Tests for the counting queries."""

    def test_counts(self):
        """Test correct and incorrect counts."""
        word = WordState("kota")
        for ch in "kxta":
            word.add_char(ch)

        assert word.correct_count() == 3
        assert word.incorrect_count() == 1
        assert word.has_errors()
        assert word.is_complete()

    def test_partial_word_not_complete(self):
        """Test completeness on a partially typed word."""
        word = WordState("kota")
        word.add_char("k")
        assert not word.is_complete()
        assert word.typed_count == 1

    def test_untyped_word_has_no_errors(self):
        """Test that nothing typed means no errors."""
        word = WordState("kota")
        assert not word.has_errors()
        assert word.correct_count() == 0
        assert word.incorrect_count() == 0
