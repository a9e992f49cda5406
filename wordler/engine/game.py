"""
Single-player game state machine.

States:
  IN_PROGRESS (0..5 attempts used) -> WON | LOST

`GuessEngine.submit` is the only mutating operation. It validates first
(terminal state, length, vocabulary) and only then records exactly one
Attempt, so a rejected guess never changes anything.

The answer is fixed at construction, either sampled from the WordSource
or supplied as an override (the SEED environment variable for the CLI).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Mapping, Optional, Tuple, Union

from .errors import GameAlreadyEnded, NotInVocabulary, SeedInvalid
from .scoring import score
from .types import Attempt
from .validation import is_ascii_word, normalize_guess, normalize_word

if TYPE_CHECKING:
    from wordler.datasets.wordsource import WordSource

log = logging.getLogger(__name__)

# Single source of truth for the turn budget.
MAX_ATTEMPTS = 6

SEED_ENV_VAR = "SEED"


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class InProgress:
    attempt: Attempt


@dataclass(frozen=True)
class Won:
    attempt: Attempt


@dataclass(frozen=True)
class Lost:
    answer: str
    attempt: Attempt  # the sixth, non-winning attempt


Outcome = Union[InProgress, Won, Lost]


class GuessEngine:
    """
    Owns one game: the secret answer, the attempt history and the status.

    Args:
      source : WordSource used for sampling the answer and validating guesses
      answer : optional override; must pass source.contains() or
               SeedInvalid is raised
    """

    def __init__(self, source: "WordSource", *, answer: Optional[str] = None):
        self._source = source
        if answer is not None:
            candidate = normalize_word(answer)
            if not source.contains(candidate):
                raise SeedInvalid(candidate)
            self._answer = candidate
            log.debug("game started with an externally supplied answer")
        else:
            self._answer = normalize_word(source.sample())
            log.debug("game started with a sampled answer")

        self._history: List[Attempt] = []
        self._status = GameStatus.IN_PROGRESS

    @classmethod
    def from_env(cls, source: "WordSource",
                 environ: Optional[Mapping[str, str]] = None) -> "GuessEngine":
        """Build a game, taking the answer from $SEED when it is set."""
        env = os.environ if environ is None else environ
        return cls(source, answer=env.get(SEED_ENV_VAR))

    # ---- read-only state ----

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status is not GameStatus.IN_PROGRESS

    @property
    def attempt_count(self) -> int:
        return len(self._history)

    @property
    def attempts_left(self) -> int:
        return MAX_ATTEMPTS - self.attempt_count

    @property
    def current_attempt(self) -> int:
        """1-based number of the attempt the player is about to make."""
        return min(self.attempt_count + 1, MAX_ATTEMPTS)

    @property
    def history(self) -> Tuple[Attempt, ...]:
        return tuple(self._history)

    # ---- the one transition ----

    def submit(self, raw_guess: str) -> Outcome:
        """
        Score one guess and advance the game.

        Raises (state unchanged in every case):
          GameAlreadyEnded, InvalidLength, NotInVocabulary
        """
        if self.is_over:
            raise GameAlreadyEnded()

        guess = normalize_guess(raw_guess)
        if not is_ascii_word(guess) or not self._source.contains(guess):
            raise NotInVocabulary(guess)

        attempt = score(guess, self._answer)
        self._history.append(attempt)

        if guess == self._answer:
            self._status = GameStatus.WON
            log.info("game won in %d attempt(s)", self.attempt_count)
            return Won(attempt)

        if self.attempt_count >= MAX_ATTEMPTS:
            self._status = GameStatus.LOST
            log.info("game lost after %d attempts", self.attempt_count)
            return Lost(self._answer, attempt)

        return InProgress(attempt)
