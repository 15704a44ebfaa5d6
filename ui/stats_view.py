"""Stats tab: personal best cards."""

from datetime import datetime
from typing import Optional

from prompt_toolkit.formatted_text import StyleAndTextTuples

from core.app_state import AppState
from core.models import BestScore


def format_timestamp(timestamp: int) -> str:
    """Format a Unix timestamp in local time, 'Unknown' if out of range."""
    try:
        return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M:%S")
    except (OverflowError, OSError, ValueError):
        return "Unknown"


def render_best_score(title: str, score: Optional[BestScore]) -> StyleAndTextTuples:
    fragments: StyleAndTextTuples = [("class:heading", f"{title}\n")]
    if score is None:
        fragments.append(("class:help", "  No score yet - complete a test to set one!\n"))
        return fragments

    fragments.extend([
        ("", "  WPM: "), ("class:value.wpm", f"{score.wpm:.0f}\n"),
        ("", "  CPM: "), ("class:value.cpm", f"{score.cpm:.0f}\n"),
        ("", "  Accuracy: "), ("class:value.accuracy", f"{score.accuracy:.1f}%\n"),
        ("", "  Date: "), ("class:help", f"{format_timestamp(score.timestamp)}\n"),
    ])
    return fragments


def render(state: AppState) -> StyleAndTextTuples:
    """Render the whole Stats tab."""
    profile = state.profile
    fragments: StyleAndTextTuples = []
    fragments.extend(render_best_score("Best 30 Seconds", profile.best_30_seconds))
    fragments.append(("", "\n"))
    fragments.extend(render_best_score("Best 30 Words", profile.best_30_words))
    fragments.append(("", "\n"))
    fragments.append(("class:help", f"Profile: {state.profile_storage.path}\n"))
    fragments.append(("class:help", "Only 30 second and 30 word tests count towards best scores."))
    return fragments
