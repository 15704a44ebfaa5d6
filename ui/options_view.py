"""Options tab: mode selection and keyboard shortcuts."""

from prompt_toolkit.formatted_text import StyleAndTextTuples

from core.app_state import AppState

SHORTCUTS = (
    "t - Switch to Time mode",
    "w - Switch to Words mode",
    "",
    "1 - Go to Test tab",
    "2 - Go to Stats tab",
    "3 - Go to Options tab",
    "",
    "Tab / Shift-Tab - Next / previous tab",
    "Esc / q - Quit application",
)


def _mode_line(label: str, selected: bool) -> StyleAndTextTuples:
    if selected:
        return [("class:selected", f"  > {label}\n")]
    return [("", f"    {label}\n")]


def render(state: AppState) -> StyleAndTextTuples:
    """Render the whole Options tab."""
    settings = state.settings
    fragments: StyleAndTextTuples = [("class:heading", "Test Mode\n\n")]
    fragments.extend(_mode_line(settings.time_mode().label, state.test_mode.is_time))
    fragments.extend(_mode_line(settings.words_mode().label, state.test_mode.is_words))
    fragments.append(("class:help", "\n  Press 't' or 'w' to switch modes\n\n"))

    fragments.append(("class:heading", "Keyboard Shortcuts\n\n"))
    for line in SHORTCUTS:
        fragments.append(("", f"  {line}\n" if line else "\n"))

    fragments.append(("class:help", "\n  Note: Changing mode will reset the current test."))
    return fragments
