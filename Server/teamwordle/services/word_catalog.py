"""
Word Catalog Service

Loads the guess vocabulary and the answer list and draws secret answers.
"""

import random
from typing import Dict, Iterable, List, Optional

from ..config.game_settings import DEFAULT_WORDS, SLOT_COUNT
from ..utils.game_logger import game_logger


def _is_word(word: str) -> bool:
    return len(word) == SLOT_COUNT and word.isascii() and word.isalpha()


def normalize_words(lines: Iterable[str]) -> List[str]:
    """Uppercase every line and keep only five-letter alphabetic words."""
    words = []
    for line in lines:
        word = line.strip().upper()
        if _is_word(word):
            words.append(word)
    return words


def load_word_list(path: Optional[str]) -> Optional[List[str]]:
    """
    Read a newline-delimited word list.

    Returns:
        List of normalized words, or None if the file could not be read
    """
    if not path:
        return None
    try:
        # undecodable bytes become U+FFFD and fail the per-line filter
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return normalize_words(f)
    except OSError as e:
        game_logger.logger.warning(f"Could not read word list {path}: {e}")
        return None


class WordCatalog:
    """
    Guess vocabulary and answer pool.

    Fallback policy, in order:
    1. Both lists empty or unreadable: the built-in list plays both roles.
    2. One list empty: it mirrors the other.
    Validation accepts the union of both lists, so a drawable answer is
    always a valid guess.
    """

    def __init__(self,
                 allowed_path: Optional[str] = None,
                 answers_path: Optional[str] = None,
                 rng: Optional[random.Random] = None,
                 allowed_words: Optional[Iterable[str]] = None,
                 answer_words: Optional[Iterable[str]] = None):
        self.rng = rng or random.Random()

        allowed = normalize_words(allowed_words) if allowed_words is not None \
            else (load_word_list(allowed_path) or [])
        answers = normalize_words(answer_words) if answer_words is not None \
            else (load_word_list(answers_path) or [])

        self.using_fallback = False
        if not allowed and not answers:
            game_logger.log_anomaly(None, 'word_lists_missing', fallback_size=len(DEFAULT_WORDS))
            allowed = list(DEFAULT_WORDS)
            answers = list(DEFAULT_WORDS)
            self.using_fallback = True
        elif not allowed:
            game_logger.log_anomaly(None, 'allowed_list_empty', mirrored_from='answers')
            allowed = list(answers)
        elif not answers:
            game_logger.log_anomaly(None, 'answer_list_empty', mirrored_from='allowed')
            answers = list(allowed)

        self.allowed_list: List[str] = allowed
        self.answer_list: List[str] = answers
        self._vocabulary = frozenset(allowed) | frozenset(answers)

        game_logger.logger.info(
            f"Word catalog loaded: allowed={len(self.allowed_list)} answers={len(self.answer_list)}"
        )

    def is_allowed(self, word: str) -> bool:
        return isinstance(word, str) and word.upper() in self._vocabulary

    def draw_answer(self) -> str:
        """Random answer; independent per call, repeats across rounds are possible."""
        pool = self.answer_list or list(DEFAULT_WORDS)
        return self.rng.choice(pool)

    def statistics(self) -> Dict:
        """
        Summarize the loaded lists for operators.

        Returns:
            dict with list sizes, fallback flag and the five most common
            letters across the answer pool
        """
        letter_frequency: Dict[str, int] = {}
        for word in self.answer_list:
            for char in word:
                letter_frequency[char] = letter_frequency.get(char, 0) + 1

        return {
            'allowed_words': len(self.allowed_list),
            'answer_words': len(self.answer_list),
            'vocabulary_size': len(self._vocabulary),
            'using_fallback': self.using_fallback,
            'most_common_letters': sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
        }


# Global service instance
_word_catalog = None


def get_word_catalog() -> Optional[WordCatalog]:
    """Get the global word catalog instance."""
    return _word_catalog


def initialize_word_catalog(allowed_path: Optional[str], answers_path: Optional[str]) -> WordCatalog:
    """Initialize the global word catalog instance."""
    global _word_catalog
    _word_catalog = WordCatalog(allowed_path, answers_path)
    return _word_catalog
