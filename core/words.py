"""Word list loading and random word sequence generation."""

import logging
import random
from pathlib import Path
from typing import Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from core.models import TestMode

log = logging.getLogger("termotype.words")

# Built-in pool used when no word file can be loaded
FALLBACK_WORDS: tuple[str, ...] = (
    "ale", "bez", "być", "czy", "dla", "dom", "gdy", "już", "jak", "jego",
    "jest", "jeden", "jeszcze", "która", "może", "który", "mieć", "nasz", "nie", "najpierw",
    "oraz", "pierwszy", "pod", "przez", "przy", "ponieważ", "się", "swój", "tak", "tam",
    "ten", "teraz", "tylko", "właśnie", "bardzo", "gdzie", "jestem", "można", "musieć", "nowy",
    "podczas", "ponad", "przed", "również", "rzecz", "sposób", "według", "wiele", "zawsze", "ziemia",
    "życie", "świat", "czas", "człowiek", "praca", "system", "grupa", "problem", "program", "firma",
    "produkt", "projekt", "funkcja", "metoda", "wynik", "proces", "przykład", "część", "miejsce", "sprawy",
    "strona", "forma", "droga", "środek", "przypadek", "liczba", "wartość", "stopień", "różny", "ostatni",
    "duży", "mały", "wielki", "stary", "dobry", "zły", "czarny", "biały", "długi", "krótki",
    "wysoki", "niski", "szeroki", "wąski", "głęboki", "płytki", "ciężki",
)

DEFAULT_TIME_MODE_POOL = 100

_word_list_adapter = TypeAdapter(list[str])


class WordListError(RuntimeError):
    """Raised when a word file cannot be turned into a usable word list."""


def load_words_from_file(path: Union[str, Path]) -> list[str]:
    """Load words from a JSON file containing an array of strings.

    Args:
        path: Path to the JSON word file

    Returns:
        Non-empty list of words (stripped, blank entries dropped)

    Raises:
        WordListError: If the file is missing, unreadable, malformed or empty
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise WordListError(f"Failed to read words file {path}: {e}") from e

    try:
        raw_words = _word_list_adapter.validate_json(content)
    except ValidationError as e:
        raise WordListError(f"Failed to parse words file {path}: {e}") from e

    words = [w.strip() for w in raw_words if w.strip()]
    if not words:
        raise WordListError(f"Words file {path} is empty")

    return words


def load_words(path: Union[str, Path]) -> list[str]:
    """Load words with fallback to the built-in list.

    Args:
        path: Path to the JSON word file

    Returns:
        Word pool, guaranteed non-empty
    """
    try:
        words = load_words_from_file(path)
    except WordListError as e:
        log.warning(f"{e}; using built-in word list")
        return list(FALLBACK_WORDS)

    log.info(f"Loaded {len(words)} words from {path}")
    return words


def generate_word_sequence(
    count: int, words: Sequence[str], rng: Optional[random.Random] = None
) -> list[str]:
    """Generate a random sequence of words for a test.

    Words are drawn independently and uniformly with replacement, so repeats
    are expected.

    Args:
        count: Number of words to generate
        words: Source word pool
        rng: Random generator (module-level generator if None)

    Returns:
        List of exactly count words, or an empty list if the pool is empty
    """
    if not words or count <= 0:
        return []

    rng = rng or random
    return [rng.choice(words) for _ in range(count)]


def word_count_for_mode(mode: TestMode, time_pool_size: int = DEFAULT_TIME_MODE_POOL) -> int:
    """How many words a test in the given mode needs.

    Time mode is bounded by duration, so it gets a fixed-size pool.
    """
    if mode.is_words:
        return mode.value
    return time_pool_size
