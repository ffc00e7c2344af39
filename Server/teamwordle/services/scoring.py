"""
Scoring Engine

Implements the Wordle letter evaluation used to reveal a team's row.
"""

from collections import Counter
from typing import List

from ..config.game_settings import SLOT_COUNT
from ..models.game import LetterStatus
from ..utils.game_logger import game_logger


def score_guess(guess: str, answer: str) -> List[LetterStatus]:
    """
    Classify every letter of a guess against the answer.

    First pass marks exact position matches as CORRECT and counts the answer
    letters left unmatched. Second pass walks the remaining positions in
    order and marks a letter PRESENT while unmatched copies of it remain,
    otherwise ABSENT. A letter is therefore never reported more times than it
    occurs in the answer, and earlier positions claim duplicates first.

    Args:
        guess: Five uppercase letters
        answer: Five uppercase letters

    Returns:
        List of five LetterStatus values aligned with the guess
    """
    if not isinstance(answer, str) or len(answer) != SLOT_COUNT:
        game_logger.log_anomaly(None, 'invalid_answer_for_scoring', answer=repr(answer))
        return [LetterStatus.ABSENT] * SLOT_COUNT

    result = [LetterStatus.ABSENT] * SLOT_COUNT
    remaining = Counter()

    # First pass: exact matches
    for i in range(SLOT_COUNT):
        if i < len(guess) and guess[i] == answer[i]:
            result[i] = LetterStatus.CORRECT
        else:
            remaining[answer[i]] += 1

    # Second pass: misplaced letters, consuming unmatched copies left to right
    for i in range(min(len(guess), SLOT_COUNT)):
        if result[i] is LetterStatus.CORRECT:
            continue
        letter = guess[i]
        if remaining[letter] > 0:
            result[i] = LetterStatus.PRESENT
            remaining[letter] -= 1

    return result
