import random
from collections import Counter

import pytest

from teamwordle.models.game import LetterStatus
from teamwordle.services.scoring import score_guess

C, P, A = LetterStatus.CORRECT, LetterStatus.PRESENT, LetterStatus.ABSENT


def test_exact_match_is_all_correct():
    assert score_guess('CRANE', 'CRANE') == [C] * 5


def test_no_shared_letters_is_all_absent():
    assert score_guess('XXXXX', 'CRANE') == [A] * 5


@pytest.mark.parametrize('guess, answer, expected', [
    # answer has two E's, neither in a guessed E position; both guessed E's are present
    ('SPEED', 'ERASE', [P, A, P, P, A]),
    # one E is consumed by the exact match, the single remaining E goes to the earliest position
    ('EERIE', 'ELDER', [C, P, P, A, A]),
    ('LLAMA', 'HELLO', [P, P, A, A, A]),
    # the exact match at position 3 is counted first; the leftover S goes to position 0
    ('SASSY', 'GRASS', [P, P, A, C, A]),
    ('ABBEY', 'KEBAB', [P, P, C, P, A]),
    ('TRACE', 'CRANE', [A, C, C, P, C]),
])
def test_duplicate_letters(guess, answer, expected):
    assert score_guess(guess, answer) == expected


def test_random_pairs_never_over_report_letters():
    rng = random.Random(1234)
    alphabet = 'ABCDE'  # small alphabet forces duplicates
    for _ in range(500):
        guess = ''.join(rng.choice(alphabet) for _ in range(5))
        answer = ''.join(rng.choice(alphabet) for _ in range(5))
        result = score_guess(guess, answer)

        assert len(result) == 5
        assert all(status in (C, P, A) for status in result)
        for i in range(5):
            assert (result[i] is C) == (guess[i] == answer[i])

        answer_counts = Counter(answer)
        for letter in set(guess):
            hits = sum(1 for i in range(5) if guess[i] == letter and result[i] is not A)
            assert hits <= answer_counts[letter]


@pytest.mark.parametrize('answer', ['', 'CRAN', 'CRANES', None])
def test_malformed_answer_scores_all_absent(answer):
    assert score_guess('CRANE', answer) == [A] * 5
