"""WPM, CPM and accuracy calculation utilities."""

from core.models import TestMetrics

# Standard convention: one word is five characters, regardless of real word lengths
CHARS_PER_WORD = 5.0


def calculate_wpm(correct_chars: int, elapsed_seconds: float) -> float:
    """Calculate words per minute.

    Args:
        correct_chars: Correctly typed characters from completed words
        elapsed_seconds: Test duration in seconds

    Returns:
        WPM (words per minute), or 0.0 if elapsed time is not positive
    """
    if elapsed_seconds <= 0:
        return 0.0

    words = correct_chars / CHARS_PER_WORD
    minutes = elapsed_seconds / 60.0
    return words / minutes


def calculate_cpm(correct_chars: int, elapsed_seconds: float) -> float:
    """Calculate characters per minute.

    Returns:
        CPM, or 0.0 if elapsed time is not positive
    """
    if elapsed_seconds <= 0:
        return 0.0

    minutes = elapsed_seconds / 60.0
    return correct_chars / minutes


def calculate_accuracy(correct: int, total: int) -> float:
    """Calculate accuracy percentage (0-100).

    No attempts yet counts as perfect accuracy.
    """
    if total == 0:
        return 100.0

    return (correct / total) * 100.0


def calculate_metrics(
    correct_chars: int, incorrect_chars: int, elapsed_seconds: float
) -> TestMetrics:
    """Build TestMetrics from cumulative character counts.

    Args:
        correct_chars: Correct characters from completed words
        incorrect_chars: Incorrect characters from completed words
        elapsed_seconds: Test duration in seconds

    Returns:
        TestMetrics with wpm, cpm and accuracy
    """
    total_chars = correct_chars + incorrect_chars
    return TestMetrics(
        wpm=calculate_wpm(correct_chars, elapsed_seconds),
        cpm=calculate_cpm(correct_chars, elapsed_seconds),
        accuracy=calculate_accuracy(correct_chars, total_chars),
    )
