"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions (MatchKind values):
  - 'G'  : EXACT_LOCATION  = correct letter in the correct position
  - 'Y'  : PRESENT_IN_WORD = correct letter in the wrong position
  - '-'  : ABSENT_IN_WORD  = letter not present (or present fewer times than guessed)

Algorithm (two-pass, duplicate-safe):
  1) First pass marks every exact match and consumes one unit of that
     letter's budget. The budget starts as the full letter count of the
     answer.
  2) Second pass walks the remaining positions left to right; a letter is
     PRESENT_IN_WORD only while its budget is still positive, otherwise it
     is ABSENT_IN_WORD.

Pass 1 has to finish before pass 2 starts, otherwise a misplaced copy of
a letter can steal budget from a later exact match (TRULY vs KELLY).
"""

from __future__ import annotations

from typing import List, Optional

from .types import ALPHABET, Attempt, Letter, MatchKind, ScoredLetter, WORD_LENGTH, to_letters


class LetterBudget:
    """
    Remaining (unclaimed) occurrences of each letter in the answer.

    A fixed 26-slot table indexed by Letter.value.
    """

    __slots__ = ("_counts",)

    def __init__(self, answer: str):
        self._counts = [0] * len(ALPHABET)
        for letter in to_letters(answer):
            self._counts[letter.value] += 1

    def __getitem__(self, letter: Letter) -> int:
        return self._counts[letter.value]

    def take(self, letter: Letter) -> bool:
        """Consume one occurrence of `letter`; False if none are left."""
        if self._counts[letter.value] <= 0:
            return False
        self._counts[letter.value] -= 1
        return True


def score(guess: str, answer: str) -> Attempt:
    """
    Score an uppercase 5-letter `guess` against an uppercase 5-letter `answer`.

    Both inputs must already be normalized (see validation.normalize_guess).

    Examples:
      score("ELITE", "GREED").pattern -> "Y---Y"
      score("KELLY", "TRULY").pattern -> "---GG"
    """
    if len(guess) != WORD_LENGTH or len(answer) != WORD_LENGTH:
        raise ValueError("guess and answer must both have "
                         f"{WORD_LENGTH} letters")

    g_letters = to_letters(guess)
    a_letters = to_letters(answer)
    budget = LetterBudget(answer)
    kinds: List[Optional[MatchKind]] = [None] * WORD_LENGTH

    # Pass 1: exact matches claim their budget first.
    for i, (g, a) in enumerate(zip(g_letters, a_letters)):
        if g is a:
            kinds[i] = MatchKind.EXACT_LOCATION
            budget.take(g)

    # Pass 2: leftmost unresolved occurrences claim what is left.
    for i, g in enumerate(g_letters):
        if kinds[i] is not None:
            continue
        kinds[i] = MatchKind.PRESENT_IN_WORD if budget.take(g) else MatchKind.ABSENT_IN_WORD

    return Attempt(tuple(ScoredLetter(g, k) for g, k in zip(g_letters, kinds)))
