"""
Value types shared by the scoring code and the game state machine.

  - Letter       : one of the 26 uppercase ASCII letters
  - MatchKind    : per-letter feedback ('G', 'Y', '-')
  - ScoredLetter : (letter, kind) pair for one position
  - Attempt      : the 5 scored letters of one guess

All of these are immutable once produced.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

# Single source of truth for word length.
WORD_LENGTH = 5

ALPHABET = string.ascii_uppercase

# Letter.A.value == 0 ... Letter.Z.value == 25; the value doubles as the
# index into per-letter count tables.
Letter = Enum("Letter", [(c, i) for i, c in enumerate(ALPHABET)])


def to_letters(word: str) -> Tuple[Letter, ...]:
    """
    Map an uppercase ASCII word onto Letter members.

    Raises ValueError for anything outside A-Z.
    """
    try:
        return tuple(Letter[c] for c in word)
    except KeyError as e:
        raise ValueError(f"not an uppercase ASCII word: {word!r}") from e


class MatchKind(Enum):
    """Feedback for a single guessed letter; values are the pattern codes."""
    EXACT_LOCATION = "G"
    PRESENT_IN_WORD = "Y"
    ABSENT_IN_WORD = "-"


@dataclass(frozen=True)
class ScoredLetter:
    letter: Letter
    kind: MatchKind = MatchKind.ABSENT_IN_WORD

    @property
    def char(self) -> str:
        return self.letter.name


@dataclass(frozen=True)
class Attempt:
    """One full guess together with its per-position scoring."""
    letters: Tuple[ScoredLetter, ...]

    def __post_init__(self) -> None:
        if len(self.letters) != WORD_LENGTH:
            raise ValueError(f"an attempt holds exactly {WORD_LENGTH} letters; "
                             f"got {len(self.letters)}")

    def __iter__(self) -> Iterator[ScoredLetter]:
        return iter(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __getitem__(self, i: int) -> ScoredLetter:
        return self.letters[i]

    @property
    def word(self) -> str:
        return "".join(s.char for s in self.letters)

    @property
    def pattern(self) -> str:
        """e.g. "Y---Y" for ELITE against GREED."""
        return "".join(s.kind.value for s in self.letters)

    @property
    def solved(self) -> bool:
        return all(s.kind is MatchKind.EXACT_LOCATION for s in self.letters)
