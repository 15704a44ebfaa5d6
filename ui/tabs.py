"""Tab bar for termotype."""

from prompt_toolkit.formatted_text import StyleAndTextTuples

from core.app_state import Tab

APP_TITLE = "TermoType - Typing Speed Test"


def render_tabs(current_tab: Tab) -> StyleAndTextTuples:
    """Render the tab bar with the active tab highlighted.

    Args:
        current_tab: Currently selected tab

    Returns:
        Formatted text fragments
    """
    fragments: StyleAndTextTuples = [("class:title", f" {APP_TITLE} "), ("", "  ")]
    for number, tab in enumerate(Tab, start=1):
        style = "class:tab.active" if tab == current_tab else "class:tab"
        fragments.append((style, f" {number}:{tab.label} "))
        fragments.append(("", " "))
    return fragments
